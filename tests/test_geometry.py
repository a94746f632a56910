"""Tests for chemscan.geometry."""

# Third Party
import pytest

# Local
import conftest


conftest.add_chemscan_to_sys_path()

# local repo modules
from chemscan.geometry import BoundingBox, Line, Point, Polygon, Segment


# ============================================
# points and segments
# ============================================

#============================================
def test_point_equality_tolerates_rounding():
	assert Point(1.0, 2.0) == Point(1.0 + 1e-9, 2.0 - 1e-9)
	assert Point(1.0, 2.0) != Point(1.1, 2.0)


#============================================
def test_segment_contains_point():
	segment = Segment.from_pairs((0.0, 0.0), (4.0, 0.0))
	assert segment.contains_point(Point(2.0, 0.0))
	assert not segment.contains_point(Point(5.0, 0.0))
	assert not segment.contains_point(Point(2.0, 1.0))


#============================================
def test_segment_intersection_point():
	first = Segment.from_pairs((0.0, 0.0), (4.0, 4.0))
	second = Segment.from_pairs((0.0, 4.0), (4.0, 0.0))
	assert first.intersects_with(second)
	assert first.intersection_point_with(second) == Point(2.0, 2.0)


#============================================
def test_overlapping_segments_have_no_single_crossing():
	first = Segment.from_pairs((0.0, 0.0), (4.0, 0.0))
	second = Segment.from_pairs((2.0, 0.0), (6.0, 0.0))
	assert first.overlaps(second)
	assert first.intersection_point_with(second) is None


#============================================
def test_segment_distance_to_point():
	segment = Segment.from_pairs((0.0, 0.0), (4.0, 0.0))
	assert segment.distance_to(Point(2.0, 3.0)) == pytest.approx(3.0)
	assert segment.distance_to(Point(7.0, 4.0)) == pytest.approx(5.0)


#============================================
def test_point_in_range_from_head():
	segment = Segment.from_pairs((0.0, 0.0), (10.0, 0.0))
	assert segment.point_in_range(Point(2.0, 0.0), 0.5, from_head=True)
	assert not segment.point_in_range(Point(8.0, 0.0), 0.5, from_head=True)
	assert segment.point_in_range(Point(8.0, 0.0), 0.5, from_head=False)


#============================================
def test_perpendicular_points_through_ends():
	segment = Segment.from_pairs((0.0, 0.0), (4.0, 0.0))
	first, second = segment.head_perpen_points_dist(1.0)
	assert {first.as_tuple(), second.as_tuple()} == {(4.0, 1.0), (4.0, -1.0)}
	first, second = segment.tail_perpen_points_dist(1.0)
	assert {first.as_tuple(), second.as_tuple()} == {(0.0, 1.0), (0.0, -1.0)}


# ============================================
# lines
# ============================================

#============================================
def test_line_intersection_points():
	horizontal = Line(Point(0.0, 1.0), Point(5.0, 1.0))
	vertical = Line(Point(2.0, -3.0), Point(2.0, 3.0))
	assert horizontal.intersection_points_with(vertical) == Point(2.0, 1.0)
	assert horizontal.intersection_points_with(Line(Point(0.0, 2.0), Point(1.0, 2.0))) is None


#============================================
def test_line_point_side_signs():
	line = Line(Point(0.0, 0.0), Point(1.0, 0.0))
	assert line.point_side(Point(0.5, 1.0)) > 0
	assert line.point_side(Point(0.5, -1.0)) < 0


#============================================
def test_point_projection_on_sloped_line():
	line = Line(Point(0.0, 0.0), Point(2.0, 2.0))
	assert line.point_projection(Point(2.0, 0.0)) == Point(1.0, 1.0)


# ============================================
# polygons
# ============================================

#============================================
def test_rectangle_bounding_box_and_center():
	polygon = Polygon.rectangle(0.0, 0.0, 4.0, 2.0)
	bbox = polygon.bounding_box()
	assert bbox == BoundingBox(Point(0.0, 0.0), Point(4.0, 2.0))
	assert polygon.center() == Point(2.0, 1.0)
	assert polygon.width() == pytest.approx(4.0)
	assert polygon.height() == pytest.approx(2.0)


#============================================
def test_polygon_contains_inside_and_boundary():
	polygon = Polygon.rectangle(0.0, 0.0, 4.0, 2.0)
	assert polygon.contains(Point(1.0, 1.0))
	assert polygon.contains(Point(0.0, 1.0))
	assert not polygon.contains(Point(5.0, 1.0))


#============================================
def test_polygon_contains_polygon_and_around():
	outer = Polygon.rectangle(0.0, 0.0, 10.0, 10.0)
	inner = Polygon.rectangle(2.0, 2.0, 3.0, 3.0)
	assert outer.contains_polygon(inner)
	assert not inner.contains_polygon(outer)
	assert inner.around_polygon(outer)


#============================================
def test_merge_polygon_is_union_box():
	merged = Polygon.rectangle(0.0, 0.0, 1.0, 1.0).merge_polygon(
		Polygon.rectangle(3.0, -2.0, 4.0, 0.5))
	assert merged.bounding_box() == BoundingBox(Point(0.0, -2.0), Point(4.0, 1.0))


#============================================
def test_line_crossings_with_polygon():
	polygon = Polygon.rectangle(0.0, -1.0, 2.0, 1.0)
	line = Line(Point(-5.0, 0.0), Point(5.0, 0.0))
	assert line.intersects_with_polygon(polygon)
	crossings = {point.as_tuple() for point in line.intersection_points_with_polygon(polygon)}
	assert crossings == {(0.0, 0.0), (2.0, 0.0)}
