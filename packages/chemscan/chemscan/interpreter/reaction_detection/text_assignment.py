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

"""Attach every text to the arrow or molecule it describes."""

# Standard Library
import logging

# local repo modules
from ..elements.molecule import FAR_AWAY
from ..scheme_base import (
	GROUP_PRODUCTS,
	GROUP_REACTANTS,
	assemble_molecule_text,
	detect_position,
	group_ids,
)


logger = logging.getLogger(__name__)

# a text this much closer to a molecule than to an arrow stays with the molecule
ARROW_TEXT_FACTOR = 2.5


#============================================
def try_detect_label_position(work, text) -> dict | None:
	"""Reaction position of a bold only text standing in for a molecule.

	Returns:
		dict: {arrow id: group} when exactly one reaction sees the text as
		a reactant or product, otherwise None
	"""
	if not text.bold_text or text.value != text.bold_text:
		return None
	positions = {}
	for reaction in work.reactions:
		arrow = work.arrow_map[reaction.arrow_id]
		group = detect_position(work, arrow, text.polygon)
		if group is not None:
			positions[reaction.arrow_id] = group
	if len(positions) != 1:
		return None
	if next(iter(positions.values())) not in (GROUP_REACTANTS, GROUP_PRODUCTS):
		return None
	return positions


#============================================
def nearest_molecule(work, point) -> tuple:
	nearest_id, nearest_dist = None, FAR_AWAY
	for mol_id, molecule in work.mol_map.items():
		dist = molecule.min_distance_to_point(point)
		if dist < nearest_dist:
			nearest_id, nearest_dist = mol_id, dist
	return (nearest_id, nearest_dist)


#============================================
def nearest_arrow(work, text) -> tuple:
	"""Closest arrow segment that the text center projects onto."""
	polygon = text.polygon
	center = polygon.center()
	nearest_id, nearest_dist = None, FAR_AWAY
	for arrow_id, arrow in work.arrow_map.items():
		for segment in arrow.segments():
			projected = segment.to_line().point_projection(center)
			if projected is None or not segment.contains_point(projected):
				continue
			dist = segment.distance_to_boundingbox(polygon)
			if dist < nearest_dist:
				nearest_id, nearest_dist = arrow_id, dist
	return (nearest_id, nearest_dist)


#============================================
def molecules_intersecting(work, segment) -> list:
	return [
		mol_id for mol_id, molecule in work.mol_map.items()
		if molecule.polygon is not None and segment.intersects_with_polygon(molecule.polygon)
	]


#============================================
def text_around_arrow(work, arrow, text, dist) -> bool:
	"""True when text sits beside the middle of arrow with no molecule between."""
	polygon = text.polygon
	if not arrow.poly_in_middle(polygon):
		return False
	arrow.build_polygons(max(polygon.width(), polygon.height()) + dist)
	center = polygon.center()
	reaction = work.reaction(arrow.id)
	reagent_ids = reaction.reagent_ids if reaction is not None else []
	for segment in arrow.segments():
		perpen = segment.perpen_segment_via_point(center)
		if perpen is None:
			continue
		touches = segment.contains_point(perpen.point1) or segment.contains_point(perpen.point2)
		blocking = [
			mol_id for mol_id in molecules_intersecting(work, perpen)
			if mol_id not in reagent_ids
		]
		if touches and not blocking:
			return True
	return False


#============================================
def assign_text(work) -> None:
	"""Push each text id to an arrow text list or a molecule text list.

	A bold only text that one reaction sees as reactant or product may
	name a molecule drawn elsewhere with the same label; that molecule
	then joins the reaction group.
	"""
	deferred = []
	for text_id, text in work.text_map.items():
		if text.polygon is None:
			continue
		label_position = try_detect_label_position(work, text)
		mol_id, mol_dist = nearest_molecule(work, text.polygon.center())
		arrow_id, arrow_dist = nearest_arrow(work, text)
		if arrow_id is None:
			if mol_id is None:
				continue
			if label_position is None:
				work.mol_map[mol_id].text_ids.append(text_id)
			else:
				deferred.append((text_id, mol_id, label_position))
			continue
		arrow = work.arrow_map[arrow_id]
		if mol_id is None:
			arrow.text_arr.append(text_id)
			continue
		if arrow_dist < mol_dist * ARROW_TEXT_FACTOR and text_around_arrow(work, arrow, text, arrow_dist):
			arrow.text_arr.append(text_id)
			continue
		# a molecule group title is not a description
		if text_id not in work.mol_group_map:
			work.mol_map[mol_id].text_ids.append(text_id)

	for molecule in work.mol_map.values():
		assemble_molecule_text(work, molecule)

	for text_id, mol_id, position in deferred:
		bold = work.text_map[text_id].bold_text
		labelled = next((m for m in work.mol_map.values() if m.label == bold), None)
		if labelled is None:
			work.mol_map[mol_id].text_ids.append(text_id)
			continue
		(arrow_id, group), = position.items()
		ids = group_ids(work.reaction(arrow_id), group)
		if labelled.id not in ids:
			ids.append(labelled.id)
			logger.debug("label %r stands for molecule %s", bold, labelled.id)

	for molecule in work.mol_map.values():
		assemble_molecule_text(work, molecule)
