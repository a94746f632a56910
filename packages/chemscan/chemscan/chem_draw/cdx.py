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

"""Binary CDX document reader."""

# Standard Library
import logging

# local repo modules
from . import assembler
from .cdx_reader import CdxObjectCursor, CdxReader
from .parser import DocumentParser
from ..errors import InvalidFormatError


logger = logging.getLogger(__name__)


#============================================
class CdxDocument(DocumentParser):
	"""Decode a CDX buffer into document maps.

	Every container object is walked through, so fragments, texts and
	graphics are found at any depth below the document.
	"""

	encoding = "cdx"

	def read(self, data, source=None):
		reader = CdxReader(data)
		if not reader.valid:
			raise InvalidFormatError("missing VjCD0100 header", source)
		self.walk(CdxObjectCursor(reader))
		assembler.rebuild_objects_map(self)
		logger.debug("read CDX %s: %s", source or "<buffer>", self.counts())
		return self

	def read_property(self, entry):
		name = entry.name
		values = self.session.values
		if name == "CreationProgram" and not self.version:
			words = values.string(entry.raw).split()
			self.version = words[-1] if words else ""
		elif name == "ColorTable" and entry.raw:
			self.session.color_table = values.color_table(entry.raw)
		elif name == "FontTable" and not self.session.font_table:
			self.session.font_table = values.font_table(entry.raw)
