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

"""Placement tests shared by the detection and post-processing steps."""

# Standard Library
import re

# local repo modules
from .. import geometry


GROUP_REACTANTS = "reactants"
GROUP_REAGENTS = "reagents"
GROUP_PRODUCTS = "products"


#============================================
def check_position(work, polygon, arrow, product_side: bool = True) -> bool:
	"""True when polygon lies along the head (or tail) line of arrow.

	A polygon reached by another arrow that runs through it, and whose
	corridor the connecting segment crosses entirely, belongs to that
	other arrow instead.
	"""
	def end_segment(current):
		return current.head_segment() if product_side else current.tail_segment()

	segment = end_segment(arrow)
	line = segment.to_line()
	if not line.intersects_with_polygon(polygon):
		return False
	crossings = line.intersection_points_with_polygon(polygon)
	if not crossings:
		return False
	link = geometry.Segment(segment.point2, crossings[0])
	for other_id, other in work.arrow_map.items():
		if other_id == arrow.id:
			continue
		other_head = other.head_segment()
		if other_head.contains_segment(segment) or segment.contains_segment(other_head):
			continue
		other_line = end_segment(other).to_line()
		if other_line.intersects_with_polygon(polygon) and other.all_intersects_with_segment(link):
			return False
	return True


#============================================
def detect_position(work, arrow, polygon) -> str | None:
	"""Which side of arrow a polygon belongs to, None when it is unrelated."""
	center = polygon.center()
	if check_position(work, polygon, arrow) and arrow.product_side(center):
		return GROUP_PRODUCTS
	if check_position(work, polygon, arrow, False) and arrow.reactant_side(center):
		return GROUP_REACTANTS
	if arrow.polygon_around(polygon):
		return GROUP_REAGENTS
	return None


#============================================
def positions_by_reaction(work, polygon) -> dict:
	"""detect_position against every reaction, keyed by arrow id."""
	positions = {}
	for reaction in work.reactions:
		arrow = work.arrow_map[reaction.arrow_id]
		group = detect_position(work, arrow, polygon)
		if group is not None:
			positions[reaction.arrow_id] = group
	return positions


#============================================
def group_ids(reaction, group: str) -> list:
	"""Id list of a reaction for a detected position such as "products"."""
	return reaction.ids(group[:-1])


#============================================
def object_polygon(work, object_id):
	if object_id in work.mol_map:
		return work.mol_map[object_id].polygon
	if object_id in work.text_map:
		return work.text_map[object_id].polygon
	return None


#============================================
def auto_fit_arrow_polygons(work) -> None:
	"""Refit every corridor around the reagents already assigned to it."""
	for reaction in work.reactions:
		arrow = work.arrow_map[reaction.arrow_id]
		polygons = [object_polygon(work, object_id) for object_id in reaction.reagent_ids]
		arrow.build_polygons_on_polygons([polygon for polygon in polygons if polygon is not None])


#============================================
def assemble_molecule_text(work, molecule) -> None:
	"""Molecule text from its plain runs, label from a single bold run."""
	texts = [work.text_map[text_id] for text_id in molecule.text_ids if text_id in work.text_map]
	molecule.text = " ".join(text.non_bold_text for text in texts)
	bolds = [text.bold_text for text in texts if text.bold_text.strip()]
	if len(bolds) == 1:
		molecule.label = re.sub(r"  +", " ", bolds[0])
