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

"""Resolve reaction ids into molecules and texts."""

# local repo modules
from ..elements.reaction import GROUPS


#============================================
def _group_molecule(work, object_id):
	for molecule_group in work.mol_group_map.values():
		if object_id in molecule_group.molecule_ids:
			return molecule_group.molecules[molecule_group.molecule_ids.index(object_id)]
	return None


#============================================
def assemble_reaction(work) -> None:
	for reaction in work.reactions:
		reaction.make_disjoint()
		for group in GROUPS:
			molecules = reaction.molecules(group)
			for object_id in reaction.ids(group):
				if object_id in work.text_map:
					reaction.text_ids.append(object_id)
				elif object_id in work.mol_map:
					molecules.append(work.mol_map[object_id])
				else:
					molecule = _group_molecule(work, object_id)
					if molecule is not None:
						molecules.append(molecule)
		reaction.arrow = work.arrow_map[reaction.arrow_id]
		for text_id in reaction.arrow.text_arr:
			if text_id not in reaction.text_ids:
				reaction.text_ids.append(text_id)
