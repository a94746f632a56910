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

"""Reagents shared by several reactions."""

# local repo modules
from ..scheme_base import object_polygon


#============================================
def refine_duplicate_reagents(work) -> None:
	"""Keep a shared reagent only with the arrow it lies closest to.

	Reagent ids that another reaction uses as reactant or product are
	dropped first.
	"""
	deletions = []
	for reaction in work.reactions:
		arrow = work.arrow_map[reaction.arrow_id]
		for other in work.reactions:
			if other is reaction:
				continue
			taken = set(other.molecule_ids())
			reaction.reagent_ids[:] = [
				object_id for object_id in reaction.reagent_ids if object_id not in taken
			]
			other_arrow = work.arrow_map[other.arrow_id]
			for object_id in reaction.reagent_ids:
				if object_id not in other.reagent_ids:
					continue
				polygon = object_polygon(work, object_id)
				if polygon is None:
					continue
				center = polygon.center()
				own_point = arrow.contains_point(center)
				other_point = other_arrow.contains_point(center)
				if own_point is None or other_point is None:
					continue
				if center.distance_to(own_point) > center.distance_to(other_point):
					deletions.append((reaction, object_id))
	for reaction, object_id in deletions:
		reaction.delete_id(object_id)
