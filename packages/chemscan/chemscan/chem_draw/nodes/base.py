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

"""Common decode contract of every node variant."""

# local repo modules
from .. import tables


#============================================
class BaseNode:
	"""A decoded object.

	read() calls pre_decode(), then decode() once per property or child
	object entry, then post_decode(). Entries a variant does not handle go
	to ignore(), which also consumes any nested binary payload.
	"""

	kind = tables.ObjectKind.UNKNOWN

	def __init__(self, session, node_id: int | None = None):
		self.session = session
		self.values = session.values
		if not node_id:
			node_id = session.ids.next_id()
		self.id = node_id
		self.polygon = None

	def read(self, cursor):
		self.pre_decode(cursor)
		for entry in cursor:
			self.decode(entry)
		self.post_decode()
		return self

	def pre_decode(self, cursor) -> None:
		pass

	def decode(self, entry) -> None:
		raise NotImplementedError("node variants implement decode()")

	def post_decode(self) -> None:
		pass

	def ignore(self, entry) -> None:
		if entry.cursor is not None:
			entry.cursor.skip()

	def decoded(self, entry):
		return self.values.value(entry.name, entry.raw)

	def bounding_box(self):
		return self.polygon.bounding_box()

	def center(self):
		if self.polygon is None:
			return None
		return self.polygon.center()
