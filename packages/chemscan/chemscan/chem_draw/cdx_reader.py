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

"""Cursor over the binary CDX tag stream."""

# Standard Library
import dataclasses
import logging
import struct

# local repo modules
from . import tables


logger = logging.getLogger(__name__)

HEADER_STRING = b"VjCD0100"
HEADER_LENGTH = 28

# read_next result when the buffer ends inside a tag
END_OF_STREAM = -1


#============================================
def has_cdx_header(buffer: bytes) -> bool:
	return buffer[:len(HEADER_STRING)] == HEADER_STRING


#============================================
class CdxReader:
	"""Tag state machine over one CDX buffer.

	A zero tag closes the current object, a tag with the high bit set
	opens an object and is followed by a 32 bit id, any other tag is a
	property followed by a 16 bit length and its payload.
	"""

	def __init__(self, buffer: bytes):
		self.buffer = bytes(buffer)
		self.valid = has_cdx_header(self.buffer)
		self.position = HEADER_LENGTH if self.valid else len(self.buffer)
		self.depth = 0
		self.tag = 0
		self.length = 0
		self._ids = []
		self._data = b""

	@property
	def end(self) -> bool:
		return self.position >= len(self.buffer)

	@property
	def current_id(self) -> int | None:
		if not self._ids:
			return None
		return self._ids[-1]

	@property
	def data(self) -> bytes:
		return self._data

	#============================================
	def _read_unsigned(self, size: int, fmt: str) -> int | None:
		if self.position + size > len(self.buffer):
			self.position = len(self.buffer)
			return None
		value = struct.unpack_from(fmt, self.buffer, self.position)[0]
		self.position += size
		return value

	#============================================
	def read_next(self, objects_only: bool = False, target_depth: int = -2) -> int:
		"""Advance to the next event and return its tag.

		Args:
			objects_only: skip property payloads without returning them
			target_depth: with a negative value every event returns,
				otherwise only opens and closes at that depth return

		Returns:
			int: the tag, 0 for an object close or the end of the
			document, END_OF_STREAM when the buffer is truncated
		"""
		self.tag = self._read_next(objects_only, target_depth)
		return self.tag

	def _read_next(self, objects_only: bool, target_depth: int) -> int:
		while not self.end:
			tag = self._read_unsigned(2, "<H")
			if tag is None:
				logger.debug("truncated tag at end of buffer")
				return END_OF_STREAM
			if tag == 0:
				if self.depth == 0:
					self.position = len(self.buffer)
					return 0
				self.depth -= 1
				self._ids.pop()
				if target_depth < 0 or self.depth == target_depth:
					return 0
			elif tag & tables.TAG_OBJECT:
				object_id = self._read_unsigned(4, "<I")
				if object_id is None:
					logger.debug("truncated object id for tag 0x%04x", tag)
					return END_OF_STREAM
				self._ids.append(object_id)
				self.depth += 1
				if target_depth < 0 or self.depth - 1 == target_depth:
					return tag
			else:
				length = self._read_unsigned(2, "<H")
				if length is None or self.position + length > len(self.buffer):
					logger.debug("truncated payload for property 0x%04x", tag)
					self.position = len(self.buffer)
					return END_OF_STREAM
				self.length = length
				start = self.position
				self.position += length
				if not objects_only:
					self._data = self.buffer[start:self.position]
					return tag
		return END_OF_STREAM

	def ignore_object(self) -> int:
		"""Skip forward to the close of the innermost open object."""
		return self.read_next(True, self.depth - 1)


#============================================
@dataclasses.dataclass
class Entry:
	"""One property or child object of the object being decoded."""
	name: str | None
	tag: int | str
	object_id: int | None
	raw: object = None
	cursor: object = None

	@property
	def is_object(self) -> bool:
		return self.cursor is not None


#============================================
class CdxObjectCursor:
	"""Iterate the direct properties and child objects of one CDX object.

	A child object the consumer leaves unread is skipped to its close
	before iteration goes on, so unknown objects never shift the cursor.
	"""

	encoding = "cdx"

	def __init__(self, reader: CdxReader, tag: int | None = None,
			object_id: int | None = None):
		self.reader = reader
		self.tag = tag
		self.object_id = object_id
		self.depth = reader.depth
		self.closed = False
		self._started = False

	def __iter__(self):
		if self._started:
			return
		self._started = True
		reader = self.reader
		while True:
			tag = reader.read_next()
			if tag <= 0:
				self.closed = True
				return
			if tag & tables.TAG_OBJECT:
				child = CdxObjectCursor(reader, tag, reader.current_id)
				yield Entry(tables.CDX_OBJECTS.get(tag), tag, child.object_id, None, child)
				child.skip()
			else:
				yield Entry(tables.CDX_PROPERTIES.get(tag), tag, self.object_id, reader.data)

	def skip(self) -> None:
		"""Consume whatever is left of this object."""
		if self.closed or self.reader.end:
			self.closed = True
			return
		if not self._started:
			logger.debug("skipping object 0x%04x id %s", self.tag or 0, self.object_id)
		self._started = True
		while self.reader.depth >= self.depth and not self.reader.end:
			self.reader.ignore_object()
		self.closed = True
