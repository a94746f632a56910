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

"""Per-parse state shared by every decoded node."""

# Standard Library
import dataclasses

# local repo modules
from . import values as values_module


# first synthesized id, far above ids written by drawing programs
TEMP_ID_START = 10_000_000


#============================================
class IdArena:
	"""Issues temp-ids for one parse, monotonically increasing."""

	def __init__(self, start: int = TEMP_ID_START):
		self._next = start

	def next_id(self) -> int:
		issued = self._next
		self._next += 1
		return issued

	@property
	def issued(self) -> int:
		return self._next - TEMP_ID_START


#============================================
@dataclasses.dataclass
class ParseSession:
	encoding: str
	values: values_module.BaseValues
	ids: IdArena = dataclasses.field(default_factory=IdArena)
	color_table: list = dataclasses.field(default_factory=lambda: ["000000", "FFFFFF"])
	font_table: list = dataclasses.field(default_factory=list)
	version: str = ""

	#============================================
	@classmethod
	def for_encoding(cls, encoding: str) -> "ParseSession":
		return cls(encoding, values_module.values_for(encoding))

	def font(self, font_id: int) -> dict | None:
		for font in self.font_table:
			if font["id"] == font_id:
				return font
		return None

	def color(self, index: int) -> str:
		if 0 <= index < len(self.color_table):
			return self.color_table[index].upper()
		return ""
