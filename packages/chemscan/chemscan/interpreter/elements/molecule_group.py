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

"""Molecules drawn under one shared label, such as a named reagent."""

# local repo modules
from .molecule import Molecule


#============================================
class MoleculeGroup:
	def __init__(self, title=None, lookup=None):
		self.title = title
		self.lookup = lookup
		self.molecules = []
		self.molecule_ids = []

	def add_fragment(self, fragment) -> Molecule:
		molecule = Molecule(fragment, self.lookup).process()
		if self.title is not None:
			molecule.abbreviation = self.title.value
		self.molecules.append(molecule)
		self.molecule_ids.append(fragment.id)
		return molecule

	def copy(self) -> "MoleculeGroup":
		copied = MoleculeGroup(self.title, self.lookup)
		copied.molecules = [molecule.copy() for molecule in self.molecules]
		copied.molecule_ids = list(self.molecule_ids)
		return copied

	@property
	def polygon(self):
		if self.title is None:
			return None
		return self.title.polygon

	def __repr__(self):
		title_id = self.title.id if self.title is not None else None
		return f"<MoleculeGroup id={title_id} molecules={self.molecule_ids}>"
