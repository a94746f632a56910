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

"""Last interpreter phase: variants from substituent and repeat texts."""

# Standard Library
import logging

# local repo modules
from ..elements.reaction import GROUPS
from .alias_info import retrieve_alias_info
from .molecule_text_group import MoleculeTextGroup
from .n_atoms import retrieve_n_atoms
from .reaction_text_group import ReactionTextGroup


logger = logging.getLogger(__name__)


#============================================
def generate_independent_molecules(work, alias_info: dict) -> None:
	"""Variants of aliased molecules that take part in no reaction."""
	used = set()
	for reaction in work.reactions:
		used.update(reaction.all_ids())
	for mol_id, molecule in list(work.mol_map.items()):
		if mol_id in used or mol_id not in alias_info:
			continue
		text_group = MoleculeTextGroup(molecule, alias_info, work)
		text_group.interpret()
		text_group.generate_molecule()


#============================================
def share_plain_groups(text_groups: dict) -> None:
	"""Reactions with aliases but no text groups borrow unlabelled ones."""
	for arrow_id, text_group in text_groups.items():
		if not text_group.alias_groups or text_group.text_groups:
			continue
		borrowed = []
		for other_id, other in text_groups.items():
			if other_id == arrow_id:
				continue
			borrowed.extend(group for group in other.text_groups if group.bold is None)
		seen = set()
		for group in borrowed:
			if group.key() in seen:
				continue
			seen.add(group.key())
			text_group.text_groups.append(group)


#============================================
def generate_elements(work, alias_info: dict) -> None:
	generate_independent_molecules(work, alias_info)
	text_groups = {}
	for reaction in work.reactions:
		text_group = ReactionTextGroup(reaction, alias_info, work)
		text_group.interpret()
		text_groups[reaction.arrow_id] = text_group
	share_plain_groups(text_groups)
	generated = []
	for text_group in text_groups.values():
		generated.extend(text_group.generate_reaction())
	if generated:
		logger.debug("%d reactions generated from text groups", len(generated))
	work.reactions.extend(generated)
	for reaction in work.reactions:
		for group in GROUPS:
			molecules = reaction.molecules(group)
			for molecule in molecules:
				work.mol_map.setdefault(molecule.id, molecule)
			setattr(reaction, f"{group}_ids", [molecule.id for molecule in molecules])


#============================================
def text_group_interpret(state):
	"""Snapshot with repeat counts, alias variants and every group molecule."""
	work = state.thaw()
	retrieve_n_atoms(work)
	alias_info = retrieve_alias_info(work)
	generate_elements(work, alias_info)
	for molecule_group in work.mol_group_map.values():
		for molecule in molecule_group.molecules:
			work.mol_map.setdefault(molecule.id, molecule)
	return work.freeze()
