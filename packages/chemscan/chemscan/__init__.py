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

"""Reaction scheme reader for CDX and CDXML drawings.

>>> import chemscan
>>> document = chemscan.parse("scheme.cdx")
>>> [reaction.to_dict() for reaction in document.reactions]
"""

# Standard Library
import dataclasses
import logging
import os
import pathlib

# local repo modules
from .chem_draw.cdx import CdxDocument
from .chem_draw.cdx_reader import has_cdx_header
from .chem_draw.cdxml import CdxmlDocument
from .errors import ChemScanError, InvalidFormatError, ParseError
from .interpreter import Scheme
from .logging_config import configure_logging
from .lookup import LookupService, default_lookup


logger = logging.getLogger(__name__)

__all__ = [
	"ChemScanError",
	"InvalidFormatError",
	"LookupService",
	"ParseError",
	"ParsedDocument",
	"configure_logging",
	"parse",
	"read_cdx",
	"read_cdxml",
]


#============================================
@dataclasses.dataclass
class ParsedDocument:
	"""Molecules and reactions recovered from one drawing."""
	molecules: list
	reactions: list
	source: str | None = None
	version: str = ""

	def to_dict(self) -> dict:
		return {
			"source": self.source,
			"molecules": [molecule.to_dict() for molecule in self.molecules],
			"reactions": [reaction.to_dict() for reaction in self.reactions],
		}


#============================================
def _interpret(document, source, lookup) -> ParsedDocument:
	scheme = Scheme(document, lookup).interpret()
	parsed = ParsedDocument(scheme.molecules, scheme.reactions, source, document.version)
	logger.info(
		"parsed %s: %d molecules, %d reactions",
		source or "<buffer>", len(parsed.molecules), len(parsed.reactions),
	)
	return parsed


#============================================
def read_cdx(data: bytes, source: str | None = None, lookup=None) -> ParsedDocument:
	"""Interpret a binary CDX buffer.

	Raises:
		InvalidFormatError: the buffer does not start with the CDX header
	"""
	document = CdxDocument().read(bytes(data), source)
	return _interpret(document, source, lookup)


#============================================
def read_cdxml(data, source: str | None = None, lookup=None) -> ParsedDocument:
	"""Interpret CDXML text, given as str or bytes.

	Raises:
		InvalidFormatError: malformed XML or a DOCTYPE other than CDXML
	"""
	document = CdxmlDocument().read(data, source)
	return _interpret(document, source, lookup)


#============================================
def parse(source, lookup: LookupService | None = None) -> ParsedDocument:
	"""Interpret a CDX or CDXML drawing.

	Args:
		source: a path, raw CDX bytes, or CDXML text
		lookup: abbreviation and superatom tables, the packaged ones by default

	Returns:
		ParsedDocument: molecules and reactions of the drawing

	Raises:
		FileNotFoundError: source names a missing file
		InvalidFormatError: the content is neither CDX nor CDXML
	"""
	if lookup is None:
		lookup = default_lookup()
	if isinstance(source, (bytes, bytearray, memoryview)):
		data = bytes(source)
		if has_cdx_header(data):
			return read_cdx(data, lookup=lookup)
		return read_cdxml(data, lookup=lookup)
	if isinstance(source, str) and source.lstrip().startswith("<"):
		return read_cdxml(source, lookup=lookup)
	path = pathlib.Path(os.fspath(source))
	data = path.read_bytes()
	if has_cdx_header(data):
		return read_cdx(data, str(path), lookup)
	return read_cdxml(data, str(path), lookup)
