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

"""Arrow refinement: line fragments, T-junctions, crosses and extensions."""

# Standard Library
import logging

# local repo modules
from ... import geometry
from ..elements import Arrow


logger = logging.getLogger(__name__)

# hand drawn joints miss each other by up to this distance
ESTIMATED_DIST = 0.2
# a crossing line must cut the arrow near its own middle
CROSS_RATIO = 3.0 / 5.0


#============================================
def detect_line_fragment(work) -> None:
	"""Fragments drawn as a straight carbon chain are read as plain lines."""
	for key, fragment in list(work.fragment_map.items()):
		if not fragment.is_line():
			continue
		del work.fragment_map[key]
		work.fragment_as_line += 1
		nodes = list(fragment.node_map.values())
		if len({node.x for node in nodes}) == 1:
			nodes.sort(key=lambda node: node.y)
		else:
			nodes.sort(key=lambda node: node.x)
		work.segment_map[key] = geometry.Segment(nodes[0].point, nodes[-1].point)
		logger.debug("fragment %s drawn as a line", key)


#============================================
def _collect_segments(work) -> None:
	for key, glyph in list(work.geometry_map.items()):
		if not glyph.headless():
			continue
		del work.geometry_map[key]
		if glyph.has_ends() and glyph.tail != glyph.head:
			work.segment_map[key] = geometry.Segment(glyph.tail, glyph.head)
	for key, graphic in list(work.graphic_map.items()):
		if not graphic.is_line():
			continue
		del work.graphic_map[key]
		if graphic.has_ends() and graphic.tail != graphic.head:
			work.segment_map[key] = geometry.Segment(graphic.tail, graphic.head)


#============================================
def _arrow_glyphs(work) -> dict:
	glyphs = {}
	candidates = list(work.geometry_map.items())
	candidates += [(key, graphic) for key, graphic in work.graphic_map.items() if graphic.has_ends()]
	for key, glyph in candidates:
		if not glyph.has_ends() or glyph.tail == glyph.head:
			logger.debug("glyph %s has no usable ends, not an arrow", key)
			continue
		glyphs[key] = glyph
	return glyphs


#============================================
def refine_arrow(work) -> None:
	"""Build arrows and attach the loose segments drawn around them."""
	detect_line_fragment(work)
	_collect_segments(work)
	glyphs = _arrow_glyphs(work)
	for key, glyph in glyphs.items():
		arrow = Arrow(glyph)
		work.arrow_map[key] = arrow
		line = glyph.line()
		# a second glyph starting at this head continues the arrow
		for other_key, other in glyphs.items():
			if other_key == key:
				continue
			other_segment = other.segment()
			if not line.intersects_with_segment(other_segment):
				continue
			point = line.intersection_points_with(other_segment.to_line())
			if point is None or not other_segment.contains_point(point):
				continue
			if geometry.distance(arrow.head, point) > ESTIMATED_DIST:
				continue
			if other.head != arrow.tail:
				arrow.change_head(other.head)
	try_check_cross(work)
	try_extend_tail(work)
	try_extend_split(work)


#============================================
def try_check_cross(work) -> None:
	"""A segment cutting an arrow in its middle marks the arrow crossed out."""
	for arrow in work.arrow_map.values():
		if arrow.cross:
			continue
		used = []
		for key, segment in work.segment_map.items():
			for arrow_segment in arrow.segments():
				if not segment.intersects_with(arrow_segment):
					continue
				point = segment.intersection_point_with(arrow_segment)
				if point is None:
					continue
				if arrow_segment.contains_point(point) and segment.point_in_range(point, CROSS_RATIO):
					arrow.add_cross_segment(segment)
					used.append(key)
		for key in used:
			work.segment_map.pop(key, None)


#============================================
def try_extend_tail(work) -> None:
	"""Prepend a segment whose end touches the arrow tail."""
	new_tails = {}
	for key, segment in work.segment_map.items():
		for arrow_id, arrow in work.arrow_map.items():
			dist1 = geometry.distance(segment.point1, arrow.tail)
			dist2 = geometry.distance(segment.point2, arrow.tail)
			if dist1 <= dist2:
				dist, point = dist1, segment.point2
			else:
				dist, point = dist2, segment.point1
			if dist > ESTIMATED_DIST:
				continue
			new_tails[arrow_id] = (key, point)
	for arrow_id, (key, point) in new_tails.items():
		work.segment_map.pop(key, None)
		arrow = work.arrow_map[arrow_id]
		if point != arrow.head:
			arrow.change_tail(point)


#============================================
def try_extend_split(work) -> None:
	"""Share a segment crossing the tail segments of several arrows.

	Each arrow gets its tail moved onto the segment and the far end of the
	segment as its new tail.
	"""
	splits = {}
	for key, segment in work.segment_map.items():
		line = segment.to_line()
		for arrow_id, arrow in work.arrow_map.items():
			tail_segment = arrow.tail_segment()
			if not line.intersects_with_segment(tail_segment):
				continue
			point = line.intersection_points_with(tail_segment.to_line())
			if point is None:
				continue
			dist1 = geometry.distance(segment.point1, point)
			dist2 = geometry.distance(segment.point2, point)
			if min(dist1, dist2) > ESTIMATED_DIST:
				continue
			tail_point = segment.point2 if dist1 < dist2 else segment.point1
			splits[arrow_id] = (key, point, tail_point)
	for arrow_id, (key, point, tail_point) in splits.items():
		arrow = work.arrow_map[arrow_id]
		if point == arrow.head or tail_point == point:
			continue
		arrow.update_tail(point)
		arrow.change_tail(tail_point)
		work.segment_map.pop(key, None)
