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

"""Drop molecules that sit far from the rest of their group.

In a layout such as

	(1): A ---> C
	(2): B ---> D
	            |
	            v
	            E

C lines up with the head of (2) as well, but is much farther from it than
D. It is removed from (2) because it already takes part in (1).
"""

# local repo modules
from ... import geometry
from ..elements.molecule import FAR_AWAY


DIST_GAP = 2.0


#============================================
def _distance_map(work, ids, arrow, group) -> dict:
	"""Distance from each molecule to the arrow end or its nearest neighbour.

	Both are measured between the crossings of the molecule polygons with
	the end segment line of the arrow.
	"""
	if group == "reactant":
		end_point = arrow.tail
		line = arrow.tail_segment().to_line()
	else:
		end_point = arrow.head
		line = arrow.head_segment().to_line()
	crossings = {
		mol_id: work.mol_map[mol_id].polygon.intersection_points_with_line(line)
		for mol_id in ids if mol_id in work.mol_map
	}
	dist_map = {}
	for mol_id, points in crossings.items():
		to_arrow = min((geometry.distance(end_point, point) for point in points), default=FAR_AWAY)
		to_others = min((
			geometry.distance(point, other_point)
			for other_id, other_points in crossings.items() if other_id != mol_id
			for other_point in other_points
			for point in points
		), default=FAR_AWAY)
		dist_map[mol_id] = min(to_arrow, to_others)
	return dist_map


#============================================
def _used_across(work, reaction, arrow, mol_id) -> bool:
	for other in work.reactions:
		if other is reaction or mol_id not in other.molecule_ids():
			continue
		if not arrow.parallel_to(work.arrow_map[other.arrow_id]):
			return True
	return False


#============================================
def remove_separated_mol(work) -> None:
	for reaction in work.reactions:
		arrow = work.arrow_map[reaction.arrow_id]
		for group in ("reactant", "product"):
			ids = reaction.ids(group)
			if len(ids) < 2:
				continue
			dist_map = _distance_map(work, ids, arrow, group)
			if not dist_map:
				continue
			limit = DIST_GAP * min(dist_map.values())
			removed = [
				mol_id for mol_id, dist in dist_map.items()
				if dist > limit and _used_across(work, reaction, arrow, mol_id)
			]
			dropped = set(removed)
			for mol_id in removed:
				center = work.mol_map[mol_id].polygon.center()
				for other_id in ids:
					if other_id == mol_id or other_id not in work.mol_map:
						continue
					if geometry.distance(center, work.mol_map[other_id].polygon.center()) < limit:
						dropped.add(other_id)
			ids[:] = [mol_id for mol_id in ids if mol_id not in dropped]
