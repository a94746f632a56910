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

"""Molecules introduced by a text such as "ligand =" or "amide =".

The molecule is a reagent of every reaction whose arrow text names it.
"""


#============================================
def refine_text_label(work) -> None:
	for mol_id, molecule in work.mol_map.items():
		stripped = molecule.text.strip()
		if not stripped.endswith("="):
			continue
		label = stripped.rstrip("=").strip()
		if not label:
			continue
		found = False
		for reaction in work.reactions:
			arrow = work.arrow_map[reaction.arrow_id]
			texts = [work.text_map[tid] for tid in arrow.text_arr if tid in work.text_map]
			if not any(label in text.value for text in texts):
				continue
			found = True
			if mol_id not in reaction.reagent_ids:
				reaction.reagent_ids.append(mol_id)
		if not found:
			continue
		for reaction in work.reactions:
			for group in ("reactant", "product"):
				ids = reaction.ids(group)
				if mol_id in ids:
					ids.remove(mol_id)
