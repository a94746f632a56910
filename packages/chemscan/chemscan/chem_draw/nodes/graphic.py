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

"""Graphic objects and arrow glyphs.

Both expose the same shape contract to the interpreter: head, tail,
segment(), line(), is_line() and cross().
"""

# local repo modules
from .. import tables
from ... import geometry
from .base import BaseNode


#============================================
class GlyphMixin:
	"""Segment helpers shared by graphics and arrow glyphs, tail to head."""

	head = None
	tail = None

	def segment(self) -> geometry.Segment:
		return geometry.Segment(self.tail, self.head)

	def vector(self) -> geometry.Vector:
		return self.segment().to_vector()

	def line(self) -> geometry.Line:
		return self.segment().to_line()

	def has_ends(self) -> bool:
		return self.head is not None and self.tail is not None


#============================================
class Graphic(GlyphMixin, BaseNode):
	"""Line, rectangle, orbital or bracket graphic.

	For a graphic the BoundingBox property stores a pair of points rather
	than a rectangle: a line runs from the second vertex (head) to the
	fourth vertex (tail) of the decoded rectangle.
	"""

	kind = tables.ObjectKind.GRAPHIC

	def __init__(self, session, node_id=None):
		super().__init__(session, node_id)
		self.type = None
		self.arrow_head = None
		self.line_type = 0
		self.orbital_type = None
		self.oval_type = None
		self.arrow_id = None
		self.major_axis_end = None
		self.minor_axis_end = None

	def decode(self, entry):
		name = entry.name
		if entry.is_object:
			self.ignore(entry)
		elif name == "Arrow_Type":
			self.arrow_head = self.values.enum(name, entry.raw)
		elif name == "Line_Type":
			self.line_type = self.values.enum(name, entry.raw) or 0
		elif name == "Graphic_Type":
			self.type = self.values.enum(name, entry.raw)
		elif name == "BoundingBox":
			self.polygon = self.decoded(entry)
		elif name == "SupersededBy":
			self.arrow_id = self.decoded(entry)
		elif name == "3DMajorAxisEnd":
			self.major_axis_end = self.decoded(entry)
		elif name == "3DMinorAxisEnd":
			self.minor_axis_end = self.decoded(entry)
		elif name == "Orbital_Type":
			self.orbital_type = self.values.enum(name, entry.raw)
		elif name == "Oval_Type":
			self.oval_type = self.values.enum(name, entry.raw)
		else:
			self.ignore(entry)

	def post_decode(self):
		# the bounding box of an orbital is unreliable
		if self.type == tables.GRAPHIC_TYPE_ORBITAL:
			self.build_orbital_polygon()
		if self.type == tables.GRAPHIC_TYPE_LINE and self.arrow_id is None and self.polygon is not None:
			vertices = self.polygon.vertices
			self.head = vertices[1]
			self.tail = vertices[3]

	def build_orbital_polygon(self) -> None:
		if self.orbital_type != tables.ORBITAL_S_SHADED:
			return
		if self.oval_type != tables.OVAL_CIRCLE_SHADED:
			return
		if self.major_axis_end is None or self.minor_axis_end is None:
			return
		right, top = self.major_axis_end
		left, bottom = self.minor_axis_end
		self.polygon = geometry.Polygon.rectangle(left, bottom, right, top)

	#============================================
	def is_line(self) -> bool:
		"""A plain line: a line graphic without an arrow head or arrow object."""
		return (
			self.type == tables.GRAPHIC_TYPE_LINE
			and self.arrow_id is None
			and not self.arrow_head
		)

	def is_orbital_polymer(self) -> bool:
		return (
			self.type == tables.GRAPHIC_TYPE_ORBITAL
			and self.orbital_type == tables.ORBITAL_S_SHADED
			and self.oval_type == tables.OVAL_CIRCLE_SHADED
			and self.polygon is not None
		)

	def cross(self) -> bool:
		return False

	def __repr__(self):
		return f"<Graphic id={self.id} type={self.type}>"


#============================================
class ChemGeometry(GlyphMixin, BaseNode):
	"""Geometry or Arrow object, drawn from tail to head."""

	kind = tables.ObjectKind.GEOMETRY

	def __init__(self, session, node_id=None):
		super().__init__(session, node_id)
		self.arrow_head = None
		self.nogo = None
		self.line_type = 0

	def decode(self, entry):
		name = entry.name
		if entry.is_object:
			self.ignore(entry)
		elif name == "3DTail":
			self.tail = geometry.Point(*self.decoded(entry))
		elif name == "3DHead":
			self.head = geometry.Point(*self.decoded(entry))
		elif name == "Arrow_ArrowHead_Head":
			self.arrow_head = self.values.enum(name, entry.raw)
		elif name == "Arrow_NoGo":
			self.nogo = self.values.enum(name, entry.raw)
		elif name == "Line_Type":
			self.line_type = self.values.enum(name, entry.raw) or 0
		else:
			self.ignore(entry)

	def headless(self) -> bool:
		return self.arrow_head != tables.ARROW_HEAD_FULL

	def is_line(self) -> bool:
		return self.headless()

	def cross(self) -> bool:
		"""Crossed-out or hashed no-go marker on the glyph."""
		return self.nogo is not None and self.nogo >= tables.ARROW_NOGO_CROSS

	def __repr__(self):
		return f"<ChemGeometry id={self.id} head={self.head} tail={self.tail}>"
