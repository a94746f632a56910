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

"""Document level decoding shared by the CDX and CDXML readers."""

# Standard Library
import logging

# local repo modules
from . import nodes
from . import tables
from .session import ParseSession


logger = logging.getLogger(__name__)

# object kinds collected at document level, everything else is walked or skipped
DOCUMENT_KINDS = (
	tables.ObjectKind.FRAGMENT,
	tables.ObjectKind.TEXT,
	tables.ObjectKind.GEOMETRY,
	tables.ObjectKind.ARROW,
	tables.ObjectKind.GRAPHIC,
	tables.ObjectKind.BRACKETED_GROUP,
)


#============================================
class DocumentParser:
	"""Collects the document level objects of one drawing into id maps.

	Subclasses provide read() for their encoding and decide which
	container objects are walked through.
	"""

	encoding = ""

	def __init__(self, session: ParseSession | None = None):
		if session is None:
			session = ParseSession.for_encoding(self.encoding)
		self.session = session
		self.version = ""
		self.fragment_map = {}
		self.fragment_group_map = {}
		self.geometry_map = {}
		self.graphic_map = {}
		self.text_map = {}
		self.bracket_map = {}

	def read(self, data, source: str | None = None) -> "DocumentParser":
		raise NotImplementedError("document readers implement read()")

	@property
	def ids(self):
		return self.session.ids

	def _map_for(self, kind: tables.ObjectKind) -> dict:
		if kind == tables.ObjectKind.FRAGMENT:
			return self.fragment_map
		if kind == tables.ObjectKind.TEXT:
			return self.text_map
		if kind in (tables.ObjectKind.GEOMETRY, tables.ObjectKind.ARROW):
			return self.geometry_map
		if kind == tables.ObjectKind.GRAPHIC:
			return self.graphic_map
		return self.bracket_map

	#============================================
	def walk(self, cursor) -> None:
		"""Build document objects below cursor, descending into containers."""
		for entry in cursor:
			if not entry.is_object:
				self.read_property(entry)
				continue
			kind = tables.object_kind(entry.name)
			if kind in DOCUMENT_KINDS:
				self.build_object(kind, entry)
			elif self.descend(kind):
				self.walk(entry.cursor)
			else:
				entry.cursor.skip()

	def descend(self, kind: tables.ObjectKind) -> bool:
		return True

	def read_property(self, entry) -> None:
		pass

	#============================================
	def build_object(self, kind: tables.ObjectKind, entry):
		object_map = self._map_for(kind)
		object_id = entry.object_id
		if object_id in object_map:
			# kept as silent reassignment, only visible at debug level
			replacement = self.ids.next_id()
			logger.debug(
				"%s id %s already used, reassigned temp-id %s",
				kind.value, object_id, replacement)
			object_id = replacement
		node = nodes.node_class(kind)(self.session, object_id)
		node.read(entry.cursor)
		object_map[node.id] = node
		return node

	def counts(self) -> dict:
		return {
			"fragments": len(self.fragment_map),
			"fragment_groups": len(self.fragment_group_map),
			"texts": len(self.text_map),
			"geometries": len(self.geometry_map),
			"graphics": len(self.graphic_map),
			"brackets": len(self.bracket_map),
		}
