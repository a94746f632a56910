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

"""Atoms whose label can be substituted when variants are generated."""

# Standard Library
import dataclasses

# local repo modules
from ... import aliases


GENERATE_RGROUP = 0
GENERATE_ALIAS_GROUP = 1
GENERATE_N_ATOM = 2


#============================================
@dataclasses.dataclass
class AliasInfo:
	atom_id: int
	group: str
	type: int = GENERATE_RGROUP


#============================================
def retrieve_alias_info(work) -> dict:
	"""Alias infos by molecule id: R-groups, alias groups, then repeat counts."""
	alias_info = {}
	for mol_id, molecule in work.mol_map.items():
		for atom in molecule.atom_map.values():
			if not atom.is_alias:
				continue
			text = atom.alias_text
			if aliases.is_alias_group(text):
				info = AliasInfo(atom.id, text, GENERATE_ALIAS_GROUP)
			elif aliases.is_rgroup_atom(text):
				# only the R part of OR2 or SR1
				info = AliasInfo(atom.id, aliases.rgroup_token(text).strip(), GENERATE_RGROUP)
			else:
				continue
			alias_info.setdefault(mol_id, []).append(info)
	for mol_id, infos in work.n_atoms.items():
		alias_info.setdefault(mol_id, []).extend(infos)
	return alias_info
