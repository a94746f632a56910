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

"""Plane geometry value types used by the drawing interpreter.

All coordinates live in the document plane after unit conversion (y grows
upwards). Every type is an immutable value; operations return new values.
"""

# Standard Library
import dataclasses
import math


# tolerance for float equality of coordinates and cross products
EPSILON = 1e-6


#============================================
def _close(value_a: float, value_b: float) -> bool:
	return abs(value_a - value_b) < EPSILON


#============================================
def distance(point_a: "Point", point_b: "Point") -> float:
	"""Return the Euclidean distance between two points."""
	return math.hypot(point_a.x - point_b.x, point_a.y - point_b.y)


#============================================
@dataclasses.dataclass(frozen=True)
class Vector:
	x: float
	y: float

	def __add__(self, other: "Vector") -> "Vector":
		return Vector(self.x + other.x, self.y + other.y)

	def __sub__(self, other: "Vector") -> "Vector":
		return Vector(self.x - other.x, self.y - other.y)

	def scaled(self, factor: float) -> "Vector":
		return Vector(self.x * factor, self.y * factor)

	def modulus(self) -> float:
		return math.hypot(self.x, self.y)

	def cross_product(self, other: "Vector") -> float:
		return self.x * other.y - self.y * other.x

	def scalar_product(self, other: "Vector") -> float:
		return self.x * other.x + self.y * other.y

	def collinear_with(self, other: "Vector") -> bool:
		return _close(self.cross_product(other), 0.0)


#============================================
@dataclasses.dataclass(frozen=True, eq=False)
class Point:
	x: float
	y: float

	def __eq__(self, other) -> bool:
		if not isinstance(other, Point):
			return NotImplemented
		return _close(self.x, other.x) and _close(self.y, other.y)

	def __hash__(self) -> int:
		return hash((round(self.x, 5), round(self.y, 5)))

	def to_vector(self) -> Vector:
		return Vector(self.x, self.y)

	def as_tuple(self) -> tuple[float, float]:
		return (self.x, self.y)

	def distance_to(self, other: "Point") -> float:
		return distance(self, other)

	def euclid_distance_to_polygon(self, polygon: "Polygon") -> float:
		return polygon.euclid_distance_to_point(self)


#============================================
@dataclasses.dataclass(frozen=True)
class Segment:
	"""A closed line segment from point1 to point2."""
	point1: Point
	point2: Point

	#============================================
	@classmethod
	def from_pairs(cls, pair1, pair2) -> "Segment":
		return cls(Point(*pair1), Point(*pair2))

	@property
	def points(self) -> list[Point]:
		return [self.point1, self.point2]

	def leftmost_endpoint(self) -> Point:
		return self.point1 if self.point1.x < self.point2.x else self.point2

	def rightmost_endpoint(self) -> Point:
		return self.point1 if self.point1.x > self.point2.x else self.point2

	def topmost_endpoint(self) -> Point:
		return self.point1 if self.point1.y > self.point2.y else self.point2

	def bottommost_endpoint(self) -> Point:
		return self.point1 if self.point1.y < self.point2.y else self.point2

	def length(self) -> float:
		return distance(self.point1, self.point2)

	def center(self) -> Point:
		return Point((self.point1.x + self.point2.x) / 2, (self.point1.y + self.point2.y) / 2)

	def to_vector(self) -> Vector:
		return Vector(self.point2.x - self.point1.x, self.point2.y - self.point1.y)

	def to_line(self) -> "Line":
		return Line(self.point1, self.point2)

	#============================================
	def contains_point(self, point: Point) -> bool:
		"""Return True when point lies on the segment, at 2 decimal precision."""
		part1 = distance(self.point1, point)
		part2 = distance(point, self.point2)
		return round(self.length(), 2) == round(part1 + part2, 2)

	def contains_segment(self, other: "Segment") -> bool:
		return self.contains_point(other.point1) and self.contains_point(other.point2)

	def parallel_to(self, other: "Segment") -> bool:
		return self.to_vector().collinear_with(other.to_vector())

	def lies_on_one_line_with(self, other: "Segment") -> bool:
		return (
			Segment(self.point1, other.point1).parallel_to(self)
			and Segment(self.point1, other.point2).parallel_to(self)
		)

	#============================================
	def _lies_on_line_intersecting(self, other: "Segment") -> bool:
		vector = self.to_vector()
		to_first = Segment(self.point1, other.point1).to_vector()
		to_second = Segment(self.point1, other.point2).to_vector()
		return vector.cross_product(to_first) * vector.cross_product(to_second) <= 0

	#============================================
	def _bounds_intersect(self, other: "Segment") -> bool:
		on_x = (
			self.leftmost_endpoint().x <= other.rightmost_endpoint().x
			and other.leftmost_endpoint().x <= self.rightmost_endpoint().x
		)
		on_y = (
			self.bottommost_endpoint().y <= other.topmost_endpoint().y
			and other.bottommost_endpoint().y <= self.topmost_endpoint().y
		)
		return on_x and on_y

	def intersects_with(self, other: "Segment") -> bool:
		return (
			self._bounds_intersect(other)
			and self._lies_on_line_intersecting(other)
			and other._lies_on_line_intersecting(self)
		)

	def overlaps(self, other: "Segment") -> bool:
		return self._bounds_intersect(other) and self.lies_on_one_line_with(other)

	#============================================
	def intersection_point_with(self, other: "Segment") -> Point | None:
		"""Return the crossing point, or None for disjoint or overlapping segments."""
		if not self.intersects_with(other) or self.overlaps(other):
			return None
		p1, p2 = self.point1, self.point2
		q1, q2 = other.point1, other.point2
		numerator = (q1.y - p1.y) * (q1.x - q2.x) - (q1.y - q2.y) * (q1.x - p1.x)
		denominator = (p2.y - p1.y) * (q1.x - q2.x) - (q1.y - q2.y) * (p2.x - p1.x)
		if _close(denominator, 0.0):
			return None
		ratio = numerator / denominator
		return Point((1 - ratio) * p1.x + ratio * p2.x, (1 - ratio) * p1.y + ratio * p2.y)

	def intersects_with_polygon(self, polygon: "Polygon") -> bool:
		count = sum(1 for edge in polygon.edges() if edge.intersects_with(self))
		return count > 1

	#============================================
	def intersects_with_line(self, line: "Line") -> bool:
		own_line = self.to_line()
		inter_x = own_line.intersect_x(line)
		if inter_x is None:
			return False
		inter_y = line.y_from_x(inter_x)
		if inter_y is None:
			inter_y = own_line.y_from_x(inter_x)
		if inter_y is None:
			return False
		return self.contains_point(Point(inter_x, inter_y))

	#============================================
	def distance_to(self, point: Point) -> float:
		"""Return the shortest distance from point to this segment."""
		origin = self.point1.to_vector()
		direction = self.point2.to_vector() - origin
		offset = point.to_vector() - origin
		along = direction.scalar_product(offset)
		if along < 0:
			nearest = origin
		else:
			squared = direction.scalar_product(direction)
			if along > squared:
				nearest = self.point2.to_vector()
			else:
				nearest = origin + direction.scaled(along / squared)
		return math.hypot(point.x - nearest.x, point.y - nearest.y)

	def distance_to_segment(self, other: "Segment") -> float:
		return min(
			other.distance_to(self.point1),
			other.distance_to(self.point2),
			self.distance_to(other.point1),
			self.distance_to(other.point2),
		)

	def distance_to_boundingbox(self, bbox: "BoundingBox") -> float:
		return min(self.distance_to_segment(edge) for edge in bbox.edges())

	def euclid_distance_to(self, other: "Segment") -> float:
		return min(
			self.point1.distance_to(other.point1),
			self.point2.distance_to(other.point1),
			self.point1.distance_to(other.point2),
			self.point2.distance_to(other.point2),
		)

	def euclid_distance_to_point(self, point: Point) -> float:
		return min(self.point1.distance_to(point), self.point2.distance_to(point))

	def euclid_distance_to_polygon(self, polygon: "Polygon") -> float:
		return min(self.euclid_distance_to(edge) for edge in polygon.bounding_box().edges())

	#============================================
	def head_perpen_points_dist(self, offset: float) -> tuple[Point, Point]:
		"""Return the two points at offset on the perpendicular through point2."""
		dx = self.point2.x - self.point1.x
		dy = self.point2.y - self.point1.y
		length = math.hypot(dx, dy)
		dx /= length
		dy /= length
		first = Point(self.point2.x + offset * dy, self.point2.y - offset * dx)
		second = Point(self.point2.x - offset * dy, self.point2.y + offset * dx)
		return (first, second)

	def tail_perpen_points_dist(self, offset: float) -> tuple[Point, Point]:
		"""Return the two points at offset on the perpendicular through point1."""
		dx = self.point1.x - self.point2.x
		dy = self.point1.y - self.point2.y
		length = math.hypot(dx, dy)
		dx /= length
		dy /= length
		first = Point(self.point1.x + offset * dy, self.point1.y - offset * dx)
		second = Point(self.point1.x - offset * dy, self.point1.y + offset * dx)
		return (second, first)

	def parallel_at(self, point: Point) -> Point:
		return Point(point.x + self.point2.x - self.point1.x, point.y + self.point2.y - self.point1.y)

	def perpen_segment_via_point(self, point: Point) -> "Segment | None":
		own_line = self.to_line()
		perpendicular = own_line.perpen_line_via_point(point)
		crossing = perpendicular.intersection_points_with(own_line)
		if crossing is None:
			return None
		return Segment(point, crossing)

	#============================================
	def point_in_range(self, point: Point, ratio: float, from_head: bool | None = None) -> bool:
		"""Return True when point is on the segment within ratio of its length.

		Args:
			point: the point to test
			ratio: fraction of the segment length
			from_head: measure from point1 (True), from point2 (False)
				or take the farther endpoint (None)
		"""
		if not self.contains_point(point):
			return False
		dist1 = self.point1.distance_to(point)
		dist2 = self.point2.distance_to(point)
		if from_head is True:
			dist = dist1
		elif from_head is False:
			dist = dist2
		else:
			dist = max(dist1, dist2)
		return (dist / self.length()) < ratio

	def polygon_in_range(self, polygon: "Polygon") -> bool:
		own_line = self.to_line()
		for vertex in polygon.vertices:
			projected = own_line.point_projection(vertex)
			if projected is not None and self.contains_point(projected):
				return True
		return False


#============================================
@dataclasses.dataclass(frozen=True)
class Line:
	"""An infinite line through point1 and point2."""
	point1: Point
	point2: Point

	def vertical(self) -> bool:
		return _close(self.point1.x, self.point2.x)

	def horizontal(self) -> bool:
		return _close(self.point1.y, self.point2.y)

	def slope(self) -> float:
		dx = self.point2.x - self.point1.x
		if _close(dx, 0.0):
			return math.inf
		return (self.point2.y - self.point1.y) / dx

	def y_intercept(self) -> float | None:
		if self.vertical():
			return None
		if self.horizontal():
			return self.point1.y
		return self.point1.y - self.slope() * self.point1.x

	def x_intercept(self) -> float | None:
		if self.horizontal():
			return None
		if self.vertical():
			return self.point1.x
		return -self.y_intercept() / self.slope()

	def parallel_to(self, other: "Line") -> bool:
		if self.vertical() and other.vertical():
			return True
		if self.vertical() or other.vertical():
			return False
		return _close(self.slope(), other.slope())

	def to_segment(self) -> Segment:
		return Segment(self.point1, self.point2)

	#============================================
	def angle(self) -> float:
		"""Return the direction angle in degrees."""
		if self.vertical():
			return 90.0
		if self.horizontal():
			return 0.0
		left, right = sorted([self.point1, self.point2], key=lambda point: point.x)
		delta_x = left.x - right.x
		delta_y = left.y - right.y
		if self.point1.y > self.point2.y:
			arc = math.atan(delta_y / delta_x)
		else:
			arc = math.atan(delta_x / delta_y)
		if arc <= 0:
			arc += 2 * math.pi
		return math.degrees(arc)

	#============================================
	def intersect_x(self, other: "Line") -> float | None:
		"""Return the x coordinate where the two lines meet, None when parallel."""
		if self.vertical() and other.vertical():
			if _close(self.x_intercept(), other.x_intercept()):
				return self.x_intercept()
			return None
		if self.horizontal() and other.horizontal():
			return None
		if self.vertical():
			return self.x_intercept()
		if other.vertical():
			return other.x_intercept()
		d_slope = self.slope() - other.slope()
		if _close(d_slope, 0.0):
			return None
		return (other.y_intercept() - self.y_intercept()) / d_slope

	def abc_coeff(self) -> tuple[float, float, float]:
		a = self.point2.y - self.point1.y
		b = self.point1.x - self.point2.x
		c = a * self.point1.x + b * self.point1.y
		return (a, b, c)

	def x_from_y(self, y_value: float) -> float | None:
		delta = self.point1.y - self.point2.y
		if delta == 0:
			return None
		return float(self.point1.x - (self.point1.y - y_value) * (self.point1.x - self.point2.x) / delta)

	def y_from_x(self, x_value: float) -> float | None:
		delta = self.point1.x - self.point2.x
		if delta == 0:
			return None
		return float(self.point1.y - (self.point1.x - x_value) * (self.point1.y - self.point2.y) / delta)

	def intersects_with_segment(self, segment: Segment) -> bool:
		return segment.intersects_with_line(self)

	def intersects_with_polygon(self, polygon: "Polygon") -> bool:
		return any(self.intersects_with_segment(edge) for edge in polygon.edges())

	def intersection_points_with_polygon(self, polygon: "Polygon") -> list[Point]:
		return polygon.intersection_points_with_line(self)

	#============================================
	def intersection_points_with(self, other: "Line") -> Point | None:
		if self.parallel_to(other):
			return None
		a1, b1, c1 = self.abc_coeff()
		a2, b2, c2 = other.abc_coeff()
		determinant = a1 * b2 - a2 * b1
		if determinant == 0:
			return None
		return Point((b2 * c1 - b1 * c2) / determinant, (a1 * c2 - a2 * c1) / determinant)

	def point_side(self, point: Point) -> float:
		"""Positive: same side as point2. Negative: same side as point1."""
		to_point = Segment(self.point1, point).to_vector()
		return self.to_segment().to_vector().cross_product(to_point)

	def perpen_line_via_point(self, point: Point) -> "Line":
		if self.vertical():
			return Line(point, Point(point.x + 5, point.y))
		if self.horizontal():
			return Line(point, Point(point.x, point.y + 5))
		normal_slope = -1 / self.slope()
		x2 = point.x + 5
		y2 = normal_slope * x2 + (point.y - normal_slope * point.x)
		return Line(point, Point(x2, y2))

	def point_projection(self, point: Point) -> Point | None:
		return self.perpen_line_via_point(point).intersection_points_with(self)


#============================================
@dataclasses.dataclass(frozen=True)
class BoundingBox:
	leftbottom: Point
	righttop: Point

	def lefttop(self) -> Point:
		return Point(self.leftbottom.x, self.righttop.y)

	def rightbottom(self) -> Point:
		return Point(self.righttop.x, self.leftbottom.y)

	def center(self) -> Point:
		return Point(
			(self.leftbottom.x + self.righttop.x) / 2,
			(self.leftbottom.y + self.righttop.y) / 2,
		)

	def edges(self) -> list[Segment]:
		return [
			Segment(self.leftbottom, self.lefttop()),
			Segment(self.leftbottom, self.rightbottom()),
			Segment(self.lefttop(), self.righttop),
			Segment(self.rightbottom(), self.righttop),
		]

	def points(self) -> list[Point]:
		return [self.leftbottom, self.lefttop(), self.righttop, self.rightbottom()]

	def width(self) -> float:
		return self.righttop.x - self.leftbottom.x

	def height(self) -> float:
		return self.righttop.y - self.leftbottom.y

	def area(self) -> float:
		return self.width() * self.height()

	def contains_point(self, point: Point) -> bool:
		return (
			self.leftbottom.x <= point.x <= self.righttop.x
			and self.leftbottom.y <= point.y <= self.righttop.y
		)

	def distance_to_point(self, point: Point) -> float:
		return min(edge.distance_to(point) for edge in self.edges())

	def euclid_distance_to_point(self, point: Point) -> float:
		return point.distance_to(self.center())


#============================================
@dataclasses.dataclass(frozen=True)
class Polygon:
	"""A closed polygon, vertices in drawing order."""
	vertices: tuple[Point, ...]

	def __post_init__(self):
		object.__setattr__(self, "vertices", tuple(self.vertices))

	#============================================
	@classmethod
	def rectangle(cls, left: float, bottom: float, right: float, top: float) -> "Polygon":
		"""Axis aligned rectangle, vertices from left-bottom clockwise."""
		return cls((
			Point(left, bottom),
			Point(left, top),
			Point(right, top),
			Point(right, bottom),
		))

	def edges(self) -> list[Segment]:
		count = len(self.vertices)
		return [
			Segment(self.vertices[index], self.vertices[(index + 1) % count])
			for index in range(count)
		]

	def bounding_box(self) -> BoundingBox:
		xs = [vertex.x for vertex in self.vertices]
		ys = [vertex.y for vertex in self.vertices]
		return BoundingBox(Point(min(xs), min(ys)), Point(max(xs), max(ys)))

	def center(self) -> Point:
		return self.bounding_box().center()

	def height(self) -> float:
		return self.bounding_box().height()

	def width(self) -> float:
		return self.bounding_box().width()

	#============================================
	def contains(self, point: Point) -> bool:
		"""Return True when point is inside the polygon or on its boundary."""
		if any(edge.contains_point(point) for edge in self.edges()):
			return True
		inside = False
		for edge in self.edges():
			start, end = edge.point1, edge.point2
			if (start.y > point.y) == (end.y > point.y):
				continue
			cross_x = start.x + (point.y - start.y) * (end.x - start.x) / (end.y - start.y)
			if point.x < cross_x:
				inside = not inside
		return inside

	def contains_polygon(self, other: "Polygon") -> bool:
		return all(self.contains(vertex) for vertex in other.vertices)

	def around_polygon(self, other: "Polygon") -> bool:
		return (
			self.contains_polygon(other)
			or other.contains_polygon(self)
			or self.contains(other.center())
			or other.contains(self.center())
		)

	def intersects_with_polygon(self, other: "Polygon") -> bool:
		for own_edge in self.edges():
			for other_edge in other.edges():
				if own_edge.intersects_with(other_edge):
					return True
		return False

	def merge_polygon(self, other: "Polygon") -> "Polygon":
		own_box = self.bounding_box()
		other_box = other.bounding_box()
		return Polygon.rectangle(
			min(own_box.leftbottom.x, other_box.leftbottom.x),
			min(own_box.leftbottom.y, other_box.leftbottom.y),
			max(own_box.righttop.x, other_box.righttop.x),
			max(own_box.righttop.y, other_box.righttop.y),
		)

	def distance_to_point(self, point: Point) -> float:
		return min(edge.distance_to(point) for edge in self.edges())

	def euclid_distance_to_point(self, point: Point) -> float:
		return min(edge.euclid_distance_to_point(point) for edge in self.edges())

	#============================================
	def intersection_points_with_line(self, line: Line) -> list[Point]:
		points = []
		for edge in self.edges():
			edge_line = edge.to_line()
			inter_x = edge_line.intersect_x(line)
			if inter_x is None:
				continue
			inter_y = line.y_from_x(inter_x)
			if inter_y is None:
				inter_y = edge_line.y_from_x(inter_x)
			if inter_y is None:
				continue
			point = Point(inter_x, inter_y)
			if edge.contains_point(point):
				points.append(point)
		return points
