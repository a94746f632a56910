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

"""Arrow texts naming a molecule drawn elsewhere in the scheme."""

# Standard Library
import re

# local repo modules
from ...aliases import ABB_DELIM


EQUIV_PATTERN = re.compile(r"eq(uiv)?\.?")
MIN_PLAIN_LENGTH = 3


#============================================
def _add_reagent(reaction, mol_id) -> None:
	if mol_id not in reaction.reagent_ids:
		reaction.reagent_ids.append(mol_id)


#============================================
def replace_label_by_molecule(work) -> None:
	"""Bold tokens matching a label, or plain tokens matching a molecule text,
	make that molecule a reagent of the reaction.
	"""
	for reaction in work.reactions:
		for text_id in work.arrow_map[reaction.arrow_id].text_arr:
			text = work.text_map.get(text_id)
			if text is None:
				continue
			for bold in ABB_DELIM.split(text.bold_text.strip()):
				if not bold:
					continue
				mol_id = next((k for k, m in work.mol_map.items() if m.label == bold), None)
				if mol_id is not None:
					_add_reagent(reaction, mol_id)
			for plain in ABB_DELIM.split(text.non_bold_text.strip()):
				if len(plain) < MIN_PLAIN_LENGTH or EQUIV_PATTERN.search(plain):
					continue
				mol_id = next((
					k for k, m in work.mol_map.items() if m.text.strip() == plain.strip()
				), None)
				if mol_id is not None:
					_add_reagent(reaction, mol_id)
