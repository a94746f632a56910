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

"""Repeat counts such as ( )n drawn around a single atom."""

# Standard Library
import logging
import re

# local repo modules
from ...chem_draw import tables
from .alias_info import GENERATE_N_ATOM, AliasInfo


logger = logging.getLogger(__name__)

N_ATOM_PATTERNS = (
	re.compile(r"^\( +\) *([nm])$"),
	re.compile(r"^\[ +\] *([nm])$"),
	re.compile(r"^\{ +\} *([nm])$"),
)
N_ATOM_LABEL = re.compile(r"^ *[nm]$")
# farthest a repeat letter may sit from its bracketed atom
MAX_LABEL_DIST = 0.5


#============================================
def _add_n_atom(work, mol_id, atom_id, group) -> None:
	infos = work.n_atoms.setdefault(mol_id, [])
	infos.append(AliasInfo(atom_id, group, GENERATE_N_ATOM))


#============================================
def bracketed_atom_ids(work) -> list:
	"""Atoms wrapped alone in a bracket group; their bracket graphics go away."""
	atom_ids = []
	for bracket in work.bracket_map.values():
		if len(bracket.object_ids) != 1:
			continue
		atom_ids.append(bracket.object_ids[0])
		for graphic_id in bracket.graphic_ids:
			graphic = work.graphic_map.get(graphic_id)
			if graphic is not None and graphic.type == tables.GRAPHIC_TYPE_BRACKET:
				del work.graphic_map[graphic_id]
	return atom_ids


#============================================
def bracket_as_text(work, molecule, text_id, group) -> None:
	"""A bracket typed as text, covering exactly one atom."""
	text = work.text_map[text_id]
	if text.polygon is None:
		return
	box = text.polygon.bounding_box()
	covered = [
		atom.id for atom in molecule.atom_map.values()
		if atom.point is not None and box.contains_point(atom.point)
	]
	if len(covered) != 1:
		return
	molecule.text_ids.remove(text_id)
	_add_n_atom(work, molecule.id, covered[0], group)


#============================================
def bracket_node(work, molecule, bracketed_ids) -> None:
	"""Match each bracketed atom with the nearest n or m text beside it."""
	atom_ids = [atom_id for atom_id in bracketed_ids if atom_id in molecule.atom_map]
	if not atom_ids:
		return
	for atom_id in atom_ids:
		point = molecule.atom_map[atom_id].point
		candidates = [
			text_id for text_id in molecule.text_ids
			if text_id in work.text_map
			and work.text_map[text_id].polygon is not None
			and N_ATOM_LABEL.match(work.text_map[text_id].value.strip())
		]
		if point is None or not candidates:
			continue
		nearest = min(
			candidates,
			key=lambda text_id: work.text_map[text_id].polygon.distance_to_point(point),
		)
		if work.text_map[nearest].polygon.distance_to_point(point) > MAX_LABEL_DIST:
			continue
		molecule.text_ids.remove(nearest)
		_add_n_atom(work, molecule.id, atom_id, work.text_map[nearest].value)


#============================================
def retrieve_n_atoms(work) -> None:
	bracketed_ids = bracketed_atom_ids(work)
	for molecule in work.mol_map.values():
		for text_id in list(molecule.text_ids):
			text = work.text_map.get(text_id)
			if text is None:
				continue
			for pattern in N_ATOM_PATTERNS:
				match = pattern.match(text.value)
				if match is not None and text_id in molecule.text_ids:
					bracket_as_text(work, molecule, text_id, match.group(1))
		bracket_node(work, molecule, bracketed_ids)
	if work.n_atoms:
		logger.debug("repeat counts found on molecules %s", list(work.n_atoms))
