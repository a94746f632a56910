#--------------------------------------------------------------------------
#     This file is part of ChemScan - a chemical reaction scheme reader
#
#     This program is free software; you can redistribute it and/or modify
#     it under the terms of the GNU General Public License as published by
#     the Free Software Foundation; either version 2 of the License, or
#     (at your option) any later version.
#
#     This program is distributed in the hope that it will be useful,
#     but WITHOUT ANY WARRANTY; without even the implied warranty of
#     MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#     GNU General Public License for more details.
#
#     Complete text of GNU GPL can be found in the file LICENSE in the
#     main directory of the program
#
#--------------------------------------------------------------------------

"""Styled text objects: captions, atom labels and condition blocks."""

# Standard Library
import re

# local repo modules
from .. import tables
from ... import geometry
from .base import BaseNode


BOLD_FACE = 0x01
# face used for superscript, where an underscore stands for a minus sign
SUPERSCRIPT_FACE = 64


#============================================
def normalize_text(text: str) -> str:
	return text.strip().replace("\r", "\n").replace("∙", "·")


#============================================
class Text(BaseNode):
	"""A text object made of styled runs.

	After decoding, consecutive bold runs are merged and the derived
	strings are available: value (every run), bold_text (bold runs joined
	by a space) and non_bold_text (plain runs).
	"""

	kind = tables.ObjectKind.TEXT

	def __init__(self, session, node_id=None):
		super().__init__(session, node_id)
		self.runs = []
		self.x = None
		self.y = None
		self.warning = False
		self.warning_data = ""
		self.value = ""
		self.bold_text = ""
		self.non_bold_text = ""

	def pre_decode(self, cursor):
		if self.values.encoding == "cdxml":
			self.runs = self.values.styled_text(cursor.element)

	def decode(self, entry):
		name = entry.name
		if name == "Text" and not entry.is_object:
			self.runs = self.values.styled_text(entry.raw)
		elif name == "2DPosition":
			self.x, self.y = self.decoded(entry)
		elif name == "BoundingBox":
			self.polygon = self.decoded(entry)
		elif name == "ChemicalWarning":
			self.warning = True
			self.warning_data = self.values.string(entry.raw)
		else:
			self.ignore(entry)

	def post_decode(self):
		self.process_style()
		self.retrieve_bold_text()

	@property
	def position(self) -> geometry.Point | None:
		if self.x is None or self.y is None:
			return None
		return geometry.Point(self.x, self.y)

	#============================================
	def process_style(self) -> None:
		position = 0
		for run in self.runs:
			text = run.text.replace("\r\n", "\n").replace("\r", "\n")
			font = self.session.font(run.font)
			if font is not None and font["name"] == "Symbol" and not run.face & BOLD_FACE:
				text = "".join(tables.GREEK_CHARS.get(char, char) for char in text) + " "
			if run.face == SUPERSCRIPT_FACE and text == "_":
				text = "-"
			run.text = text.replace("–", "-")
			run.bold = bool(run.face & BOLD_FACE)
			run.position = position
			run.length = len(run.text)
			position += run.length
		self._set_special_bold()
		self._merge_bold()

	#============================================
	def _set_special_bold(self) -> None:
		"""Make a single plain character between two bold runs bold, as in 3-6."""
		if len(self.runs) < 2:
			return
		bold_ids = []
		for index, run in enumerate(self.runs):
			if not run.bold:
				continue
			previous_bold = bold_ids[-1] if bold_ids else None
			bold_ids.append(index)
			if index == 0:
				continue
			previous = self.runs[index - 1]
			if (
				run.position == previous.position + previous.length
				and len(previous.text.strip()) == 1
				and previous_bold == index - 2
			):
				previous.bold = True

	#============================================
	def _merge_bold(self) -> None:
		merged = []
		for run in self.runs:
			if merged and run.bold and merged[-1].bold:
				last = merged[-1]
				last.text += run.text
				last.length += run.length
				continue
			merged.append(run)
		self.runs = merged

	#============================================
	def retrieve_bold_text(self) -> None:
		bold_runs = [run.text for run in self.runs if run.bold]
		plain_runs = [run.text for run in self.runs if not run.bold]
		bold_text = re.sub(r"[,:.] *$", "", " ".join(bold_runs), flags=re.MULTILINE)
		self.bold_text = normalize_text(bold_text)
		self.non_bold_text = normalize_text("".join(plain_runs))
		self.value = normalize_text("".join(run.text for run in self.runs))

	def markdown(self) -> str:
		"""Runs joined, bold runs wrapped in double asterisks."""
		return "".join(
			f"**{run.text}**" if run.bold else run.text
			for run in self.runs
		)

	def bolded_runs(self) -> list:
		return [run for run in self.runs if run.bold]

	def __repr__(self):
		return f"<Text id={self.id} bold={self.bold_text!r} value={self.value!r}>"
