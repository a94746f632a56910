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

"""Variants of a reaction from the substituents listed in its texts."""

# local repo modules
from .bold_groups import (
	TextGroup,
	group_combinations,
	line_bold_groups,
	markdown_lines,
	merge_groups,
	normalize_bold,
	normalize_bold_groups,
)
from .molecule_text_group import MoleculeTextGroup


#============================================
class ReactionTextGroup:
	"""Text groups gathered from a reaction and from its molecules.

	The layouts keep the MoleculeTextGroup of each molecule by reaction
	group, so that bold labelled variants can be lined up across the
	reactants, reagents and products.
	"""

	def __init__(self, reaction, alias_info: dict, work):
		self.reaction = reaction
		self.alias_info = alias_info
		self.work = work
		self.alias_groups = []
		for mol_id in reaction.all_ids():
			if mol_id in work.mol_map:
				self.alias_groups.extend(
					info.group for info in alias_info.get(mol_id, []) if info.group)
		self.plain_groups = {}
		self.bold_groups = []
		self.text_groups = []
		self.layouts = {"reactant": {}, "reagent": {}, "product": {}}

	#============================================
	def interpret(self) -> None:
		self.plain_groups = {}
		self.bold_groups = []
		self.interpret_reaction_text()
		for group in self.layouts:
			self.interpret_molecule_group(group)
		self.plain_groups = {
			key: values for key, values in self.plain_groups.items()
			if key in self.alias_groups
		}
		combinations = group_combinations(self.plain_groups)
		self.text_groups = self.bold_groups + [TextGroup(combination) for combination in combinations]

	def interpret_reaction_text(self) -> None:
		for text_id in self.reaction.text_ids:
			text = self.work.text_map.get(text_id)
			if text is None:
				continue
			for line in markdown_lines(text):
				for text_group in self.reaction_line_bold_groups(line):
					if text_group.bold is None:
						merge_groups(self.plain_groups, text_group.group)
					else:
						self.bold_groups.append(text_group)

	def interpret_molecule_group(self, group: str) -> None:
		layout = self.layouts[group]
		for mol_id in self.reaction.ids(group):
			molecule = self.work.mol_map.get(mol_id)
			if molecule is None:
				continue
			text_group = MoleculeTextGroup(molecule, self.alias_info, self.work)
			text_group.interpret()
			self.bold_groups.extend(text_group.bold_groups)
			merge_groups(self.plain_groups, text_group.plain_groups)
			layout[mol_id] = text_group
		self.bold_groups = [text_group for text_group in self.bold_groups if text_group.group]

	#============================================
	def reaction_line_bold_groups(self, line: str) -> list:
		bolds, groups = line_bold_groups(line, self.alias_groups, self.work.lookup)
		labels = [normalize_bold(bold.replace(":", "")) for bold in bolds]
		labels = [label for label in labels if label]
		if not labels and not groups:
			return []
		if not labels:
			return [TextGroup(groups)]
		text_groups = []
		for label in labels:
			text_groups.extend(normalize_bold_groups(label, groups))
		return text_groups

	#============================================
	def generate_reaction(self) -> list:
		return self.generate_from_plain_groups() + self.generate_from_bold_groups()

	def generate_from_plain_groups(self) -> list:
		"""One reaction per unlabelled combination, every aliased molecule substituted."""
		generated = []
		for text_group in self.text_groups:
			if text_group.bold is not None:
				continue
			mol_ids = [
				mol_id for mol_id in self.reaction.all_ids()
				if mol_id in self.alias_info
				or (mol_id in self.work.mol_map and self.work.mol_map[mol_id].clone_from is not None)
			]
			if not mol_ids:
				continue
			cloned = self.reaction.clone(self.work.arena)
			for mol_id in mol_ids:
				if mol_id not in self.alias_info or mol_id not in self.work.mol_map:
					continue
				molecule_group = MoleculeTextGroup(self.work.mol_map[mol_id], self.alias_info, self.work)
				molecule_group.text_groups = [text_group]
				cloned.replace_molecule(mol_id, molecule_group.generate_molecule()[0])
			generated.append(cloned)
		return generated

	def generate_from_bold_groups(self) -> list:
		"""One reaction per label position across the molecule layouts."""
		size = max(
			(len(text_group.bold_groups) for layout in self.layouts.values() for text_group in layout.values()),
			default=0,
		)
		generated = []
		used = []
		for index in range(size):
			created = False
			cloned = self.reaction.clone(self.work.arena)
			for layout in self.layouts.values():
				for mol_id, layout_group in layout.items():
					if mol_id not in self.alias_info or not layout_group.bold_groups:
						continue
					groups = layout_group.bold_groups
					chosen = groups[index] if index < len(groups) else groups[-1]
					if not chosen.group and chosen.bold is not None:
						matches = [
							text_group for text_group in self.bold_groups
							if text_group.bold == chosen.bold and text_group.group
						]
						if len(matches) != 1:
							continue
						chosen = TextGroup(dict(matches[0].group), chosen.bold)
					if any(seen.key() == chosen.key() for seen in used):
						continue
					created = True
					used.append(chosen)
					molecule_group = MoleculeTextGroup(self.work.mol_map[mol_id], self.alias_info, self.work)
					molecule_group.text_groups = [chosen]
					cloned.replace_molecule(mol_id, molecule_group.generate_molecule()[0])
			if created:
				generated.append(cloned)
		return generated

	def __repr__(self):
		return (
			f"<ReactionTextGroup id={self.reaction.arrow_id} alias_groups={self.alias_groups}"
			f" plain_groups={self.plain_groups} bold_groups={self.bold_groups}>"
		)
