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

"""Molecules built from decoded fragments through the chemistry engine."""

# Standard Library
import copy
import logging

# local repo modules
from ... import chem_engine
from ...chem_draw import tables
from .atom import Atom


logger = logging.getLogger(__name__)

RGB_RED = "FF0000"
# distance reported when a molecule has no measurable point
FAR_AWAY = 9_999_999


#============================================
class Molecule:
	"""A fragment turned into a checked structure, plus its text and label.

	The fragment is copied on construction: merging another molecule into
	this one never changes the fragment held by the document.
	"""

	def __init__(self, fragment=None, lookup=None, molecule_id=None):
		self.fragment = fragment.copy() if fragment is not None else None
		self.lookup = lookup
		self.id = fragment.id if fragment is not None else molecule_id
		self.polygon = fragment.polygon if fragment is not None else None
		self.boxed = fragment.boxed if fragment is not None else False
		self.text = ""
		self.label = ""
		self.mdl = ""
		self.cano_smiles = ""
		self.abbreviation = ""
		self.text_ids = []
		self.details = {}
		self.clone_from = None
		self.is_red = False
		self.atom_map = {}
		self.bond_map = {}
		self.dash_bonds = []
		self.dative_bonds = []
		self.handle = chem_engine.MolHandle()
		self._chiral_possible = False

	#============================================
	@classmethod
	def new_from_smiles(cls, molecule_id, smiles: str, lookup=None, polygon=None) -> "Molecule":
		"""Molecule known only by its SMILES, such as an abbreviation drawn as text."""
		molecule = cls(None, lookup, molecule_id=molecule_id)
		molecule.polygon = polygon
		handle = chem_engine.MolHandle.from_smiles(smiles)
		if handle is None:
			molecule.cano_smiles = smiles
			return molecule
		molecule.handle = handle
		molecule.update_output_formats()
		return molecule

	#============================================
	def process(self) -> "Molecule":
		"""Build atoms and bonds, perceive stereo, sanitize and expand labels."""
		for node_id, node in self.fragment.node_map.items():
			atom = Atom(node)
			atom.process(self.handle)
			self.atom_map[node_id] = atom
		self._chiral_possible = False
		for bond_id, bond in self.fragment.bond_map.items():
			self.add_bond(bond_id, bond)
		self.handle.detect_stereochemistry(self._chiral_possible)
		self.handle.remove_hydrogens()
		if self.handle.kekulize():
			self.handle.sanitize()
		self.try_expand()
		self.check_red()
		self.update_output_formats()
		return self

	#============================================
	def atom_bonds(self, atom_id) -> list:
		return [bond for bond in self.bond_map.values() if bond.has_endpoint(atom_id)]

	def _bonded(self, begin_id, end_id) -> bool:
		return any(
			bond.has_endpoint(begin_id) and bond.has_endpoint(end_id)
			for bond in self.bond_map.values()
		)

	#============================================
	def add_bond(self, bond_id, bond) -> int:
		"""Add one drawn bond to the chemistry graph.

		Dash bonds are only recorded, and a second bond between the same
		pair of atoms is skipped.

		Returns:
			int: bond index, or -1 when the bond was not added
		"""
		order = bond.order
		if not chem_engine.supported_order(order):
			logger.debug("bond %s has unsupported order %r", bond_id, order)
			return -1
		begin_id, end_id = bond.begin_id, bond.end_id
		if begin_id not in self.atom_map or end_id not in self.atom_map:
			logger.debug("bond %s references a missing atom, dropped", bond_id)
			return -1
		if bond.stereo in chem_engine.REVERSED_DISPLAYS:
			begin_id, end_id = end_id, begin_id
		if self._bonded(begin_id, end_id):
			return -1
		if order == "dative":
			order = 1
			begin_atom = self.atom_map[begin_id]
			end_atom = self.atom_map[end_id]
			if begin_atom.charge == 0 and end_atom.charge == 0:
				begin_atom.set_formal_charge(self.handle, -1)
				end_atom.set_formal_charge(self.handle, 1)
			self.dative_bonds.append(bond_id)
		if bond.stereo == tables.BOND_DISPLAY_DASH:
			self.dash_bonds.append((begin_id, end_id))
			return -1
		direction = chem_engine.STEREO_DIRECTIONS.get(bond.stereo)
		if direction is not None:
			self._chiral_possible = True
		index = self.handle.add_bond(begin_id, end_id, order, direction)
		if index < 0:
			return index
		added = bond.copy()
		added.order = order
		added.begin_id, added.end_id = begin_id, end_id
		self.bond_map[bond_id] = added
		return index

	#============================================
	def try_expand(self) -> None:
		"""Expand labelled atoms whose label names a known superatom."""
		targets = []
		for node_id, node in self.fragment.node_map.items():
			if not node.is_alias or node.type == tables.NODE_TYPE_ANONYMOUS_ALTERNATIVE_GROUP:
				continue
			if not node.alias_text.strip() or node.nested_fragment or not node.warning:
				continue
			targets.append((node_id, node.alias_text.strip()))
		if targets:
			self.expand_atoms(targets)

	def expand_atoms(self, targets) -> None:
		"""Replace atoms by the structure their label stands for.

		Args:
			targets: (atom id, label) pairs; a label "H" removes the atom
		"""
		delete_ids = []
		for atom_id, text in targets:
			if atom_id not in self.atom_map:
				continue
			if text == "H":
				self._expand_hydrogen(atom_id)
				continue
			smiles = self.lookup.lookup_superatom(text) if self.lookup is not None else None
			if not smiles:
				continue
			offset = self.handle.insert_smiles(smiles)
			if offset is None:
				continue
			delete_ids.append(atom_id)
			for bond in self.atom_bonds(atom_id):
				other_id = bond.other_endpoint(atom_id)
				other_index = self.handle.atom_index(other_id)
				self.handle.remove_bond(other_id, atom_id)
				if other_index is not None:
					# the first inserted atom carries the attachment
					self.handle.add_bond_by_index(
						other_index, offset, chem_engine.BOND_TYPES[bond.order])
				del self.bond_map[bond.id]
		for atom_id in delete_ids:
			self.handle.remove_atom(atom_id)
			del self.atom_map[atom_id]
		self.handle.compute_2d_coords(keep=list(self.atom_map))

	def _expand_hydrogen(self, atom_id) -> None:
		bonds = self.atom_bonds(atom_id)
		if len(bonds) == 2:
			return
		if bonds:
			bond = bonds[0]
			self.handle.remove_bond(bond.other_endpoint(atom_id), atom_id)
			del self.bond_map[bond.id]
		self.handle.remove_atom(atom_id)
		del self.atom_map[atom_id]

	#============================================
	def check_red(self) -> bool:
		"""True when every node and bond is drawn in one pure red color."""
		self.is_red = False
		node_colors = {node.color for node in self.fragment.node_map.values()}
		bond_colors = {bond.color for bond in self.fragment.bond_map.values()}
		if len(node_colors) != 1 or node_colors != bond_colors:
			return False
		node = next(iter(self.fragment.node_map.values()))
		self.is_red = node.session.color(node.color) == RGB_RED
		return self.is_red

	def min_distance_to_point(self, point) -> float:
		"""Distance from point to the nearest drawn atom."""
		if self.fragment is None:
			if self.polygon is None:
				return FAR_AWAY
			return self.polygon.distance_to_point(point)
		minimum = FAR_AWAY
		for node in self.fragment.node_map.values():
			if node.expanded or node.point is None:
				continue
			minimum = min(minimum, node.point.distance_to(point))
		return minimum

	def charged_atom_ids(self) -> list:
		return [atom_id for atom_id, atom in self.atom_map.items() if atom.charge != 0]

	#============================================
	def update_output_formats(self) -> None:
		self.cano_smiles = self.handle.canonical_smiles()
		self.mdl = self.handle.molblock(extra_dative=self.dash_bonds)

	#============================================
	def add(self, other: "Molecule") -> None:
		"""Merge other into this molecule, as for the two ions of a salt."""
		self.fragment = self.fragment.copy()
		self.fragment.add(other.fragment)
		self.polygon = self.fragment.polygon
		self.text = f"{self.text} {other.text}".strip()
		self.label = other.label
		self.text_ids.extend(other.text_ids)
		self.boxed |= other.boxed
		self.details.update(other.details)
		self.atom_map.update(other.atom_map)
		self.bond_map.update(other.bond_map)
		self.handle = self.handle.combine(other.handle)
		self.dash_bonds.extend(other.dash_bonds)
		self.dative_bonds.extend(other.dative_bonds)

	def copy(self) -> "Molecule":
		"""Same molecule and id, with its own text and detail containers."""
		copied = copy.copy(self)
		copied.text_ids = list(self.text_ids)
		copied.atom_map = dict(self.atom_map)
		copied.bond_map = dict(self.bond_map)
		copied.details = dict(self.details)
		return copied

	#============================================
	def clone(self, arena) -> "Molecule":
		"""Rebuild this molecule under a fresh id issued by arena."""
		if self.fragment is None:
			cloned = Molecule.new_from_smiles(
				arena.next_id(), self.cano_smiles, self.lookup, self.polygon)
		else:
			cloned = Molecule(self.fragment.copy(arena), self.lookup)
			cloned.process()
		cloned.clone_from = self.clone_from if self.clone_from is not None else self.id
		cloned.label = self.label
		cloned.text_ids = list(self.text_ids)
		cloned.text = self.text
		cloned.boxed = self.boxed
		cloned.polygon = self.polygon
		return cloned

	#============================================
	def n_atom_transform(self, atom_id, count: int, arena) -> bool:
		"""Replace a bracketed atom by a chain of count copies of itself."""
		if count == 1:
			return False
		bonds = [bond for bond in self.fragment.bond_map.values() if bond.has_endpoint(atom_id)]
		if len(bonds) != 2 or atom_id not in self.atom_map:
			return False
		others = [bond.other_endpoint(atom_id) for bond in bonds]
		kept = [other for other in self.atom_map if other != atom_id]
		target = self.atom_map.pop(atom_id)
		for other in others:
			self.handle.remove_bond(atom_id, other)
		self.handle.remove_atom(atom_id)
		added = []
		for _ in range(count):
			cloned = target.clone(self.handle, arena)
			self.atom_map[cloned.id] = cloned
			added.append(cloned.id)
		# n atoms need n + 1 bonds
		chain = [others[0]] + added + [others[1]]
		for begin_id, end_id in zip(chain, chain[1:]):
			self.handle.add_bond(begin_id, end_id, 1)
		self.handle.compute_2d_coords(keep=kept)
		self.update_output_formats()
		return True

	def group_transform(self, atom_id, group: str, value: str) -> None:
		"""Substitute group inside an alias label by value, then expand it."""
		atom = self.atom_map.get(atom_id)
		if atom is None or group not in atom.alias_text:
			return
		text = atom.alias_text.replace(group, value, 1)
		self.expand_atoms([(atom_id, text)])
		self.update_output_formats()

	#============================================
	def to_dict(self) -> dict:
		return {
			"id": self.id,
			"smiles": self.cano_smiles,
			"label": self.label,
			"text": self.text,
		}

	def __repr__(self):
		return f"<Molecule id={self.id} smiles={self.cano_smiles!r} label={self.label!r}>"
