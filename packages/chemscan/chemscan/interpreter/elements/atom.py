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

"""Atoms of an interpreted molecule, one per fragment node."""

# local repo modules
from ... import aliases
from ...chem_draw import tables


# node type given to atoms labelled with a generic alias group
ALIAS_GROUP_NODE_TYPE = tables.NODE_TYPE_FRAGMENT


#============================================
class Atom:
	"""Chemistry view of one FragmentNode.

	The drawing values are copied from the node, so later changes to the
	atom (charge, alias flags) never write back into the decoded document.
	"""

	def __init__(self, node):
		self.node = node
		self.id = node.id
		self.type = node.type
		self.ext_type = node.ext_type
		self.atnum = node.atnum
		self.num_hydrogens = node.num_hydrogens
		self.charge = node.charge
		self.iso = node.iso
		self.x = node.x if node.x is not None else 0.0
		self.y = node.y if node.y is not None else 0.0
		self.point = node.point
		self.is_alias = node.is_alias
		self.alias_text = node.alias_text.strip()
		self.warning = node.warning
		self.warning_data = node.warning_data
		self.is_polymer = node.is_polymer

	#============================================
	def process(self, handle) -> None:
		"""Add the atom to a MolHandle and apply its drawing properties."""
		if self.atnum < 0:
			self.atnum = 6
		handle.add_atom(self.id, self.atnum)
		handle.set_atom_properties(
			self.id,
			charge=self.charge,
			isotope=self.iso,
			explicit_hydrogens=self.num_hydrogens,
			position=(self.x, self.y),
		)
		self._process_alias(handle)

	def _process_alias(self, handle) -> None:
		if aliases.is_alias_group(self.alias_text):
			self.type = ALIAS_GROUP_NODE_TYPE
			self.is_alias = True
			self.warning = False
			self.warning_data = ""
		if not self.is_alias:
			self.is_alias = (
				bool(self.alias_text)
				and aliases.is_rgroup_atom(self.alias_text)
				and self.type >= 0
			)
		if self.ext_type == tables.EXTERNAL_CONNECTION_POLYMER_BEAD:
			self.set_polymer()
		if self.is_alias:
			handle.set_atom_properties(self.id, atomic_number=0)

	#============================================
	def clone(self, handle, arena) -> "Atom":
		"""Copy of this atom under a fresh id, added to handle."""
		cloned = Atom(self.node.copy(arena))
		cloned.process(handle)
		return cloned

	def set_formal_charge(self, handle, charge: int) -> None:
		self.charge = charge
		handle.set_atom_properties(self.id, charge=charge)

	def set_polymer(self) -> None:
		self.is_alias = True
		self.is_polymer = True

	def __repr__(self):
		return (
			f"<Atom id={self.id} atnum={self.atnum} charge={self.charge}"
			f" alias={self.alias_text!r}>"
		)
