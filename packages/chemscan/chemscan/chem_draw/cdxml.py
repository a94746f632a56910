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

"""CDXML document reader."""

# Standard Library
import logging

# local repo modules
from . import assembler
from . import cdxml_reader
from . import tables
from .parser import DocumentParser


logger = logging.getLogger(__name__)


#============================================
class CdxmlDocument(DocumentParser):
	"""Decode a CDXML document into document maps.

	Every page is read. Group elements are flattened in place, other
	unknown elements are skipped with their children.
	"""

	encoding = "cdxml"

	def read(self, data, source=None):
		root = cdxml_reader.parse_document(data, source)
		self.read_globals(root)
		for page in root.iter("page"):
			self.walk(cdxml_reader.CdxmlObjectCursor(page))
		assembler.rebuild_objects_map(self)
		logger.debug("read CDXML %s: %s", source or "<buffer>", self.counts())
		return self

	def read_globals(self, root) -> None:
		values = self.session.values
		words = (root.get("CreationProgram") or "").split()
		self.version = words[-1] if words else ""
		self.session.color_table = values.color_table(root.find("colortable"))
		self.session.font_table = values.font_table(root.find("fonttable"))

	def descend(self, kind):
		return kind == tables.ObjectKind.GROUP
