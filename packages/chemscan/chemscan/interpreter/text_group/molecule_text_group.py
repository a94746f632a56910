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

"""Variants of one molecule from the substituents listed in its texts."""

# Standard Library
import logging

# local repo modules
from ... import aliases
from .alias_info import GENERATE_N_ATOM
from .bold_groups import (
	INTEGER,
	TextGroup,
	group_combinations,
	merge_groups,
	n_atom_combinations,
	normalize_bold_groups,
	text_bold_groups,
)


logger = logging.getLogger(__name__)


#============================================
class MoleculeTextGroup:
	"""Text groups of one molecule and the clones they generate.

	Bold labelled groups produce one clone each. Unlabelled groups are
	combined, by position when a repeat count is involved, otherwise as a
	Cartesian product.
	"""

	def __init__(self, molecule, alias_info: dict, work):
		self.molecule = molecule
		self.alias_info = alias_info
		self.work = work
		self.alias_groups = [
			info.group for info in alias_info.get(molecule.id, []) if info.group
		]
		self.plain_groups = {}
		self.bold_groups = []
		self.text_groups = []

	#============================================
	def interpret(self) -> None:
		self.plain_groups = {}
		self.bold_groups = []
		for text_id in self.molecule.text_ids:
			text = self.work.text_map.get(text_id)
			if text is None:
				continue
			bolds, groups = text_bold_groups(text, self.alias_groups, self.work.lookup)
			bolds = [bold for bold in bolds if bold]
			if bolds:
				self.bold_groups.extend(normalize_bold_groups(bolds, groups))
			else:
				merge_groups(self.plain_groups, groups)
		n_atom_groups = [key for key in self.plain_groups if not aliases.is_super_atom(key)]
		if n_atom_groups:
			combinations = n_atom_combinations(self.plain_groups)
		else:
			combinations = group_combinations(self.plain_groups)
		self.text_groups = self.bold_groups + [TextGroup(combination) for combination in combinations]

	#============================================
	def generate_molecule(self) -> list:
		"""One clone per text group, registered in the molecule map."""
		infos = self.alias_info.get(self.molecule.id, [])
		generated = []
		for text_group in self.text_groups:
			cloned = self.molecule.clone(self.work.arena)
			applied = []
			for info in infos:
				value = text_group.group.get(info.group)
				if value is None:
					continue
				if info.type == GENERATE_N_ATOM:
					if INTEGER.match(value) is None or int(value) == 1:
						continue
					cloned.n_atom_transform(info.atom_id, int(value), self.work.arena)
				else:
					cloned.group_transform(info.atom_id, info.group, value)
				applied.append(f"{info.group} - {value}")
			cloned.update_output_formats()
			if text_group.bold is not None:
				cloned.label = text_group.bold
			if applied:
				cloned.text += ". Generated with: " + "; ".join(applied)
			self.work.mol_map[cloned.id] = cloned
			generated.append(cloned)
			logger.debug("molecule %s generated from %s", cloned.id, self.molecule.id)
		return generated

	def __repr__(self):
		return (
			f"<MoleculeTextGroup id={self.molecule.id} alias_groups={self.alias_groups}"
			f" plain_groups={self.plain_groups} bold_groups={self.bold_groups}>"
		)
