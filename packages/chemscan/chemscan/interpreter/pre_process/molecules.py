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

"""Molecule construction and pairing of drawn ions."""

# Standard Library
import collections
import logging

# local repo modules
from ... import geometry
from ..elements import Molecule, MoleculeGroup


logger = logging.getLogger(__name__)

# counter ions farther apart than this are separate species
MAX_ION_DISTANCE = 4


#============================================
def fragment_to_molecules(work) -> None:
	for key, fragment in work.fragment_map.items():
		if not fragment.node_map:
			continue
		work.mol_map[key] = Molecule(fragment, work.lookup).process()
	for key, group in work.fragment_group_map.items():
		molecule_group = MoleculeGroup(group.title, work.lookup)
		for fragment in group.fragment_map.values():
			# nicknames such as DMF can hide inside as labelled atoms
			if any(node.type > 0 for node in fragment.node_map.values()):
				continue
			molecule_group.add_fragment(fragment)
		work.mol_group_map[key] = molecule_group


#============================================
def _single_charge(key, molecule):
	charged = molecule.charged_atom_ids()
	if len(charged) != 1 or molecule.polygon is None:
		return None
	return (key, molecule, molecule.atom_map[charged[0]].charge)


#============================================
def _molecule_for(work, key):
	if key in work.mol_map:
		return work.mol_map[key]
	return work.mol_group_map[key].molecules[0]


#============================================
def assemble_ionic_molecule(work) -> None:
	"""Merge a singly charged molecule with its nearest counter ion.

	Pairs farther apart than MAX_ION_DISTANCE are left alone, and so are
	ions claimed as the partner of more than one other ion.
	"""
	entries = []
	for key, molecule in work.mol_map.items():
		entry = _single_charge(key, molecule)
		if entry is not None:
			entries.append(entry)
	for key, group in work.mol_group_map.items():
		if len(group.molecules) != 1:
			continue
		entry = _single_charge(key, group.molecules[0])
		if entry is not None:
			entries.append(entry)

	grouped = {}
	for key, molecule, charge in entries:
		center = molecule.polygon.center()
		nearest_key = None
		nearest_dist = None
		for other_key, other, other_charge in entries:
			if other_charge != -charge:
				continue
			dist = geometry.distance(center, other.polygon.center())
			if nearest_dist is None or dist < nearest_dist:
				nearest_key, nearest_dist = other_key, dist
		if nearest_key is None or nearest_dist > MAX_ION_DISTANCE:
			continue
		if key in grouped or key in grouped.values():
			continue
		grouped[key] = nearest_key

	claims = collections.Counter(grouped.values())
	for key, other_key in grouped.items():
		if claims[other_key] > 1:
			logger.debug("ion %s claimed by several counter ions, left alone", other_key)
			continue
		if other_key not in work.mol_map and other_key not in work.mol_group_map:
			continue
		molecule = _molecule_for(work, key)
		molecule.add(_molecule_for(work, other_key))
		molecule.update_output_formats()
		work.mol_map.pop(other_key, None)
		group = work.mol_group_map.pop(other_key, None)
		if group is not None and group.title is not None:
			work.text_map.pop(group.title.id, None)
