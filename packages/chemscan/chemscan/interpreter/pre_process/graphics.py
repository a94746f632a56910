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

"""Graphics that change how fragments are read: boxes and polymer orbitals."""

# local repo modules
from ...chem_draw import tables
from ...chem_draw.assembler import FragmentGroup


# rectangles larger than this frame a scheme region, not one structure
MAX_BOX_AREA = 100


#============================================
def _boxed_copy(fragment):
	boxed = fragment.copy()
	boxed.boxed = True
	return boxed


#============================================
def find_fragment_inside_rectangle(work) -> None:
	"""Mark fragments drawn inside a small rectangle as boxed."""
	for graphic in work.graphic_map.values():
		if graphic.type != tables.GRAPHIC_TYPE_RECTANGLE or graphic.polygon is None:
			continue
		if graphic.polygon.bounding_box().area() >= MAX_BOX_AREA:
			continue
		for key, fragment in list(work.fragment_map.items()):
			if fragment.polygon is None:
				continue
			if graphic.polygon.contains_polygon(fragment.polygon):
				work.fragment_map[key] = _boxed_copy(fragment)
		for key, group in list(work.fragment_group_map.items()):
			if len(group.fragment_map) != 1 or group.title is None:
				continue
			if group.title.polygon is None:
				continue
			if not graphic.polygon.contains_polygon(group.title.polygon):
				continue
			(fragment_id, fragment), = group.fragment_map.items()
			work.fragment_group_map[key] = FragmentGroup(
				group.title, {fragment_id: _boxed_copy(fragment)})


#============================================
def extract_fragment_graphic(work) -> None:
	for fragment in work.fragment_map.values():
		work.graphic_map.update(fragment.graphic_map)


#============================================
def process_orbital_as_polymer(work) -> None:
	"""Atoms inside a shaded s orbital are polymer beads."""
	for graphic in work.graphic_map.values():
		if not graphic.is_orbital_polymer():
			continue
		for key, fragment in list(work.fragment_map.items()):
			updated = None
			for node_id, node in fragment.node_map.items():
				if node.point is None or not graphic.polygon.contains(node.point):
					continue
				if updated is None:
					updated = fragment.copy()
				polymer = node.copy()
				polymer.set_polymer()
				updated.node_map[node_id] = polymer
				if updated.polygon is None:
					updated.polygon = graphic.polygon
				else:
					updated.polygon = updated.polygon.merge_polygon(graphic.polygon)
			if updated is not None:
				work.fragment_map[key] = updated
