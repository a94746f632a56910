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

"""Snapshots passed between the interpreter phases.

A phase receives a frozen SchemeState and thaws it into a SchemeWork: copied
maps, with its own copies of the arrows, molecules and reactions it edits.
The phase runs its steps on the copy and freezes the result, so the
incoming snapshot is never changed.
"""

# Standard Library
import dataclasses
import types

# local repo modules
from .elements import Arrow, Molecule, MoleculeGroup, Reaction
from .elements.reaction import GROUPS


#============================================
def _freeze(value):
	if isinstance(value, dict):
		return types.MappingProxyType(dict(value))
	if isinstance(value, list):
		return tuple(value)
	return value


#============================================
def _thaw(value):
	if isinstance(value, types.MappingProxyType):
		return {key: _working_copy(item) for key, item in value.items()}
	if isinstance(value, tuple):
		return [_working_copy(item) for item in value]
	return value


#============================================
def _working_copy(item):
	"""Own copy of the interpreter objects a phase edits in place."""
	if isinstance(item, Arrow):
		return item.clone(item.id)
	if isinstance(item, (Molecule, MoleculeGroup, Reaction)):
		return item.copy()
	return item


#============================================
@dataclasses.dataclass
class SchemeWork:
	"""Mutable working copy of the interpreter state inside one phase."""

	session: object
	lookup: object
	fragment_map: dict = dataclasses.field(default_factory=dict)
	fragment_group_map: dict = dataclasses.field(default_factory=dict)
	geometry_map: dict = dataclasses.field(default_factory=dict)
	graphic_map: dict = dataclasses.field(default_factory=dict)
	text_map: dict = dataclasses.field(default_factory=dict)
	bracket_map: dict = dataclasses.field(default_factory=dict)
	mol_map: dict = dataclasses.field(default_factory=dict)
	mol_group_map: dict = dataclasses.field(default_factory=dict)
	arrow_map: dict = dataclasses.field(default_factory=dict)
	segment_map: dict = dataclasses.field(default_factory=dict)
	reactions: list = dataclasses.field(default_factory=list)
	n_atoms: dict = dataclasses.field(default_factory=dict)
	fragment_as_line: int = 0

	@property
	def arena(self):
		return self.session.ids

	def reaction(self, arrow_id):
		for reaction in self.reactions:
			if reaction.arrow_id == arrow_id:
				return reaction
		return None

	def relink_molecules(self) -> None:
		"""Point the reaction molecule lists at the molecules of this copy."""
		current = {}
		for molecule_group in self.mol_group_map.values():
			for molecule in molecule_group.molecules:
				current[molecule.id] = molecule
		current.update(self.mol_map)
		for reaction in self.reactions:
			for group in GROUPS:
				molecules = reaction.molecules(group)
				molecules[:] = [current.get(molecule.id, molecule) for molecule in molecules]
			if reaction.arrow is not None:
				reaction.arrow = self.arrow_map.get(reaction.arrow_id, reaction.arrow)

	def freeze(self) -> "SchemeState":
		return SchemeState(**{
			field.name: _freeze(getattr(self, field.name))
			for field in dataclasses.fields(self)
		})


#============================================
@dataclasses.dataclass(frozen=True)
class SchemeState:
	"""Read-only snapshot between two phases."""

	session: object
	lookup: object
	fragment_map: types.MappingProxyType
	fragment_group_map: types.MappingProxyType
	geometry_map: types.MappingProxyType
	graphic_map: types.MappingProxyType
	text_map: types.MappingProxyType
	bracket_map: types.MappingProxyType
	mol_map: types.MappingProxyType
	mol_group_map: types.MappingProxyType
	arrow_map: types.MappingProxyType
	segment_map: types.MappingProxyType
	reactions: tuple
	n_atoms: types.MappingProxyType
	fragment_as_line: int

	#============================================
	@classmethod
	def from_document(cls, document, lookup) -> "SchemeState":
		"""Initial snapshot from the maps of a decoded document."""
		work = SchemeWork(
			session=document.session,
			lookup=lookup,
			fragment_map=dict(document.fragment_map),
			fragment_group_map=dict(document.fragment_group_map),
			geometry_map=dict(document.geometry_map),
			graphic_map=dict(document.graphic_map),
			text_map=dict(document.text_map),
			bracket_map=dict(document.bracket_map),
		)
		return work.freeze()

	def thaw(self) -> SchemeWork:
		work = SchemeWork(**{
			field.name: _thaw(getattr(self, field.name))
			for field in dataclasses.fields(self)
		})
		work.relink_molecules()
		return work
