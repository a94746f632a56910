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

"""Bold arrow texts that label one of the reagents."""

# local repo modules
from ..elements.molecule import FAR_AWAY
from ..scheme_base import assemble_molecule_text


#============================================
def refine_reagents_label(work) -> None:
	"""Move a bold arrow text onto the nearest reagent it labels."""
	for reaction in work.reactions:
		arrow = work.arrow_map[reaction.arrow_id]
		reagents = {
			mol_id: work.mol_map[mol_id] for mol_id in reaction.reagent_ids
			if mol_id in work.mol_map
		}
		moves = []
		for text_id in arrow.text_arr:
			text = work.text_map.get(text_id)
			if text is None or not text.bold_text.strip() or text.polygon is None:
				continue
			if any(reagent.label == text.bold_text for reagent in reagents.values()):
				continue
			center = text.polygon.center()
			nearest_id, nearest_dist = None, FAR_AWAY
			for mol_id, reagent in reagents.items():
				dist = reagent.min_distance_to_point(center)
				if dist < nearest_dist:
					nearest_id, nearest_dist = mol_id, dist
			if nearest_id is not None:
				moves.append((text_id, nearest_id))
		for text_id, mol_id in moves:
			if text_id in reaction.text_ids:
				reaction.text_ids.remove(text_id)
			arrow.text_arr.remove(text_id)
			reagent = work.mol_map[mol_id]
			reagent.text_ids.append(text_id)
			assemble_molecule_text(work, reagent)
