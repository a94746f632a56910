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

"""Texts that are an abbreviation standing in a reactant or product place."""

# Standard Library
import logging

# local repo modules
from ..elements import Molecule
from ..scheme_base import (
	GROUP_PRODUCTS,
	GROUP_REACTANTS,
	GROUP_REAGENTS,
	group_ids,
	positions_by_reaction,
)


logger = logging.getLogger(__name__)


#============================================
def refine_text_as_molecule(work) -> None:
	"""Promote such a text to a molecule built from the abbreviation SMILES.

	The new molecule keeps the text id and polygon.
	"""
	promoted = []
	for text_id, text in work.text_map.items():
		owner = next((m for m in work.mol_map.values() if text_id in m.text_ids), None)
		if owner is None or text.polygon is None:
			continue
		smiles = work.lookup.lookup_abbreviation(text.value)
		if not smiles:
			continue
		positions = positions_by_reaction(work, text.polygon)
		if GROUP_REAGENTS in positions.values():
			continue
		if not any(group in (GROUP_REACTANTS, GROUP_PRODUCTS) for group in positions.values()):
			continue
		logger.debug("text %s read as molecule, positions %s", text_id, positions)
		owner.text_ids.remove(text_id)
		promoted.append((text_id, smiles, text.polygon, positions))

	for text_id, smiles, polygon, positions in promoted:
		work.mol_map[text_id] = Molecule.new_from_smiles(text_id, smiles, work.lookup, polygon)
		arrow_id, group = next(iter(positions.items()))
		group_ids(work.reaction(arrow_id), group).append(text_id)
		del work.text_map[text_id]
