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

"""Element walker over CDXML documents.

Attributes of an element are its properties, child elements are its
child objects. The walker yields the same Entry records as the binary
cursor so node variants decode both encodings with one method.
"""

# Standard Library
import xml.etree.ElementTree

# Third Party
import defusedxml
import defusedxml.ElementTree as ET

# local repo modules
from . import tables
from .cdx_reader import Entry
from .values import leading_int
from ..errors import InvalidFormatError


CDXML_DOCTYPE = "http://www.cambridgesoft.com/xml/cdxml.dtd"


#============================================
class _DoctypeTreeBuilder(xml.etree.ElementTree.TreeBuilder):
	"""Tree builder that remembers the DOCTYPE declaration."""

	def __init__(self):
		super().__init__()
		self.doctype_name = None
		self.system_id = None

	def doctype(self, name, pubid, system):
		self.doctype_name = name
		self.system_id = system


#============================================
def parse_document(data, source: str | None = None):
	"""Parse CDXML text and check its DOCTYPE.

	Args:
		data: CDXML document as str or bytes
		source: name used in error messages

	Returns:
		Element: the CDXML root element

	Raises:
		InvalidFormatError: malformed XML or a foreign DOCTYPE
	"""
	builder = _DoctypeTreeBuilder()
	parser = ET.XMLParser(target=builder)
	try:
		parser.feed(data)
		root = parser.close()
	except (ET.ParseError, defusedxml.DefusedXmlException) as error:
		raise InvalidFormatError(f"malformed CDXML: {error}", source) from error
	if builder.system_id != CDXML_DOCTYPE:
		raise InvalidFormatError(
			f"unexpected DOCTYPE system id {builder.system_id!r}", source)
	return root


#============================================
def element_id(element) -> int | None:
	object_id = leading_int(element.get("id"))
	return object_id or None


#============================================
class CdxmlObjectCursor:
	"""Iterate the attributes and child elements of one CDXML element."""

	encoding = "cdxml"

	def __init__(self, element):
		self.element = element
		self.tag = element.tag
		self.object_id = element_id(element)

	def __iter__(self):
		for key, value in self.element.attrib.items():
			name = tables.CDXML_PROPERTIES.get(key)
			yield Entry(name, key, self.object_id, value)
		for child in self.element:
			name = tables.CDXML_OBJECTS.get(child.tag)
			if name is None:
				name = tables.CDXML_PROPERTIES.get(child.tag)
			cursor = CdxmlObjectCursor(child)
			yield Entry(name, child.tag, cursor.object_id, child, cursor)

	def skip(self) -> None:
		pass
