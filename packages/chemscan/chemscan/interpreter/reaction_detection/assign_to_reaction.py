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

"""Place every unboxed molecule around the arrows."""

# Standard Library
import logging

# local repo modules
from ..elements import Reaction
from ..scheme_base import auto_fit_arrow_polygons, detect_position, group_ids


logger = logging.getLogger(__name__)

# reagents farther than this from their own arrow belong to the other reaction
MAX_REAGENT_DIST = 2


#============================================
def assign_to_reaction(work) -> None:
	"""Create one reaction per arrow and sort molecules into its groups.

	Every arrow corridor is first sized to the molecule being tested.
	Molecules no arrow claims are retried once the corridors have been
	refitted around the reagents that were found.
	"""
	molecules = {
		mol_id: molecule for mol_id, molecule in work.mol_map.items()
		if not molecule.boxed and molecule.polygon is not None
	}
	undetected = {}
	for arrow_id, arrow in work.arrow_map.items():
		reaction = Reaction(arrow_id)
		missed = []
		for mol_id, molecule in molecules.items():
			polygon = molecule.polygon
			for current in work.arrow_map.values():
				current.build_polygons(polygon.height() + current.min_distance_to_polygon(polygon))
			group = detect_position(work, arrow, polygon)
			if group is None:
				missed.append(mol_id)
			else:
				group_ids(reaction, group).append(mol_id)
		work.reactions.append(reaction)
		if missed:
			undetected[arrow_id] = missed

	resolve_reagent_conflicts(work)
	auto_fit_arrow_polygons(work)

	for arrow_id, missed in undetected.items():
		reaction = work.reaction(arrow_id)
		arrow = work.arrow_map[arrow_id]
		for mol_id in missed:
			group = detect_position(work, arrow, work.mol_map[mol_id].polygon)
			if group is not None:
				group_ids(reaction, group).append(mol_id)
				logger.debug("molecule %s placed in %s of %s on retry", mol_id, group, arrow_id)


#============================================
def resolve_reagent_conflicts(work) -> None:
	"""A reagent of one reaction that is a reactant or product of another."""
	for reaction in work.reactions:
		arrow = work.arrow_map[reaction.arrow_id]
		for other in work.reactions:
			if other is reaction:
				continue
			taken = set(other.molecule_ids())
			common = [mol_id for mol_id in reaction.reagent_ids if mol_id in taken]
			for mol_id in common:
				dist = arrow.min_distance_to_polygon(work.mol_map[mol_id].polygon)
				owner = reaction if dist > MAX_REAGENT_DIST else other
				owner.delete_id(mol_id)
