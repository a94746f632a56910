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

"""Reaction arrows as polylines with a reagent corridor.

An arrow runs tail, middle points, head. Its corridor is one polygon per
segment; molecules and texts inside the corridor are reagents or
conditions of the reaction.
"""

# local repo modules
from ... import geometry


# share of a segment length, from either end, treated as its middle
MIDDLE_RATIO = 4.0 / 5.0


#============================================
class Arrow:
	"""Arrow built from a geometry glyph or a line graphic with a head."""

	def __init__(self, glyph, arrow_id=None):
		self.id = glyph.id if arrow_id is None else arrow_id
		self.tail = geometry.Point(glyph.tail.x, glyph.tail.y)
		self.head = geometry.Point(glyph.head.x, glyph.head.y)
		self.middle_points = []
		self.cross = glyph.cross()
		self.line_type = glyph.line_type
		self.cross_lines = []
		self.height = 0
		self.text_arr = []
		self.reagents_polygons = []

	#============================================
	@property
	def points(self) -> list:
		return [self.tail] + self.middle_points + [self.head]

	def segments(self) -> list:
		points = self.points
		return [geometry.Segment(start, end) for start, end in zip(points, points[1:])]

	def head_segment(self) -> geometry.Segment:
		start = self.middle_points[-1] if self.middle_points else self.tail
		return geometry.Segment(start, self.head)

	def tail_segment(self) -> geometry.Segment:
		start = self.middle_points[0] if self.middle_points else self.head
		return geometry.Segment(start, self.tail)

	def head_perpen_segment(self) -> geometry.Segment | None:
		if self.height == 0:
			return None
		start = self.middle_points[-1] if self.middle_points else self.tail
		point1, point2 = geometry.Segment(start, self.head).tail_perpen_points_dist(self.height)
		return geometry.Segment(point1, point2)

	def tail_perpen_segment(self) -> geometry.Segment | None:
		if self.height == 0:
			return None
		end = self.middle_points[0] if self.middle_points else self.head
		point1, point2 = geometry.Segment(self.tail, end).head_perpen_points_dist(self.height)
		return geometry.Segment(point1, point2)

	#============================================
	def add_cross_segment(self, segment: geometry.Segment) -> None:
		self.cross_lines.append(segment)
		self.cross = True

	def change_head(self, new_head: geometry.Point) -> None:
		self.middle_points.append(self.head)
		self.head = geometry.Point(new_head.x, new_head.y)

	def change_tail(self, new_tail: geometry.Point) -> None:
		self.middle_points.insert(0, self.tail)
		self.tail = geometry.Point(new_tail.x, new_tail.y)

	def update_tail(self, new_tail: geometry.Point) -> None:
		self.tail = geometry.Point(new_tail.x, new_tail.y)

	#============================================
	def build_polygons(self, height: float) -> None:
		"""Corridor of fixed half width height around every segment."""
		self.height = height
		self.reagents_polygons = []
		for segment in self.segments():
			point1, point2 = segment.head_perpen_points_dist(height)
			point3, point4 = segment.tail_perpen_points_dist(height)
			self.reagents_polygons.append(geometry.Polygon([point1, point2, point4, point3]))

	def build_polygons_on_polygons(self, polygons) -> None:
		"""Corridor fitted around the polygons of already known reagents.

		Every segment gets the bounding rectangle of its end points and the
		projections of the reagent polygons in range, widened by 0.5.
		"""
		heights = []
		self.reagents_polygons = []
		for segment in self.segments():
			line = segment.to_line()
			head_perpen = line.perpen_line_via_point(segment.point1)
			tail_perpen = line.perpen_line_via_point(segment.point2)
			points = []
			for polygon in polygons:
				if polygon is None or not segment.polygon_in_range(polygon):
					continue
				for vertex in polygon.vertices:
					for perpen in (head_perpen, tail_perpen):
						projected = perpen.point_projection(vertex)
						if projected is not None:
							points.append(projected)
				points.extend([segment.point1, segment.point2])
			if not points:
				self.build_polygons(0.2)
				continue
			xmin = min(point.x for point in points) - 0.5
			xmax = max(point.x for point in points) + 0.5
			ymin = min(point.y for point in points) - 0.5
			ymax = max(point.y for point in points) + 0.5
			heights.append(abs(ymax - ymin))
			self.reagents_polygons.append(geometry.Polygon([
				geometry.Point(xmin, ymin),
				geometry.Point(xmin, ymax),
				geometry.Point(xmax, ymax),
				geometry.Point(xmax, ymin),
			]))
		self.height = max(heights) if heights else 0.1

	#============================================
	def product_side(self, point: geometry.Point) -> bool:
		perpen = self.head_perpen_segment()
		if perpen is None:
			return False
		line = perpen.to_line()
		return line.point_side(self.head) * line.point_side(point) > 0

	def reactant_side(self, point: geometry.Point) -> bool:
		perpen = self.tail_perpen_segment()
		if perpen is None:
			return False
		line = perpen.to_line()
		return line.point_side(self.tail) * line.point_side(point) > 0

	def contains_point(self, point: geometry.Point) -> geometry.Point | None:
		"""Projection of point on the first segment it falls beside."""
		for segment in self.segments():
			projected = segment.to_line().point_projection(point)
			if projected is not None and segment.contains_point(projected):
				return projected
		return None

	def min_distance_to_polygon(self, polygon: geometry.Polygon) -> float:
		bbox = polygon.bounding_box()
		return min(segment.distance_to_boundingbox(bbox) for segment in self.segments())

	def polygon_around(self, polygon: geometry.Polygon) -> bool:
		return any(polygon.around_polygon(corridor) for corridor in self.reagents_polygons)

	def all_intersects_with_segment(self, segment: geometry.Segment) -> bool:
		return all(segment.intersects_with_polygon(corridor) for corridor in self.reagents_polygons)

	def parallel_to(self, other: "Arrow") -> bool:
		return all(
			segment.parallel_to(other_segment)
			for segment in self.segments()
			for other_segment in other.segments()
		)

	#============================================
	def poly_in_middle(self, polygon: geometry.Polygon) -> bool:
		points = polygon.bounding_box().points() + [polygon.center()]
		return any(self.point_in_middle(point) for point in points)

	def point_in_middle(self, target: geometry.Point) -> bool:
		points = self.points
		last = len(points) - 1
		for index in range(1, len(points)):
			segment = geometry.Segment(points[index], points[index - 1])
			projected = segment.to_line().point_projection(target)
			if projected is None:
				continue
			if index == 1:
				from_head = True
			elif index == last:
				from_head = False
			else:
				from_head = None
			if segment.point_in_range(projected, MIDDLE_RATIO, from_head):
				return True
		return False

	#============================================
	def clone(self, arrow_id) -> "Arrow":
		cloned = object.__new__(Arrow)
		cloned.id = arrow_id
		cloned.tail = self.tail
		cloned.head = self.head
		cloned.middle_points = list(self.middle_points)
		cloned.cross = self.cross
		cloned.line_type = self.line_type
		cloned.cross_lines = list(self.cross_lines)
		cloned.height = self.height
		cloned.text_arr = list(self.text_arr)
		cloned.reagents_polygons = list(self.reagents_polygons)
		return cloned

	def __repr__(self):
		return f"<Arrow id={self.id} tail={self.tail} head={self.head} middle={self.middle_points}>"
