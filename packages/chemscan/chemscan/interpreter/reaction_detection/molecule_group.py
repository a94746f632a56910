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

"""Labelled molecule groups, such as a named solvent drawn as a structure."""

# local repo modules
from ..scheme_base import (
	GROUP_PRODUCTS,
	GROUP_REACTANTS,
	GROUP_REAGENTS,
	auto_fit_arrow_polygons,
	group_ids,
	positions_by_reaction,
)


#============================================
def assign_molecule_group(work) -> None:
	"""Add single-molecule groups placed as a reactant or product.

	A group whose title is already an arrow text, or that sits in any
	reagent corridor, is left to the condition text handling.
	"""
	arrow_text_ids = set()
	for reaction in work.reactions:
		arrow_text_ids.update(work.arrow_map[reaction.arrow_id].text_arr)

	auto_fit_arrow_polygons(work)

	for key, molecule_group in work.mol_group_map.items():
		if key in arrow_text_ids or len(molecule_group.molecules) != 1:
			continue
		molecule = molecule_group.molecules[0]
		if molecule.boxed or molecule_group.title is None or molecule_group.title.polygon is None:
			continue
		positions = positions_by_reaction(work, molecule_group.title.polygon)
		if GROUP_REAGENTS in positions.values():
			continue
		found = next((
			(arrow_id, group) for arrow_id, group in positions.items()
			if group in (GROUP_REACTANTS, GROUP_PRODUCTS)
		), None)
		if found is None:
			continue
		title = work.text_map.pop(key, None)
		if title is not None:
			molecule.text = title.value
		for other in work.mol_map.values():
			if key in other.text_ids:
				other.text_ids.remove(key)
		arrow_id, group = found
		group_ids(work.reaction(arrow_id), group).append(molecule.id)
