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

"""RDKit adapter used to turn decoded fragments into checked molecules.

Atoms are addressed by the id of the drawing node they come from, stored
as an integer atom property, so indices may shift freely when atoms are
removed or fragments are combined.
"""

# Standard Library
import logging

# Third Party
from rdkit import Chem
from rdkit.Chem import rdDepictor
from rdkit.Geometry import Point2D, Point3D


logger = logging.getLogger(__name__)

NODE_ID_PROP = "chemscan_node_id"

BondType = Chem.rdchem.BondType
BondDir = Chem.rdchem.BondDir

BOND_TYPES = {
	0: BondType.UNSPECIFIED,
	1: BondType.SINGLE,
	2: BondType.DOUBLE,
	3: BondType.TRIPLE,
	4: BondType.QUADRUPLE,
	5: BondType.QUINTUPLE,
	6: BondType.HEXTUPLE,
	1.5: BondType.ONEANDAHALF,
	2.5: BondType.TWOANDAHALF,
	3.5: BondType.THREEANDAHALF,
	4.5: BondType.FOURANDAHALF,
	5.5: BondType.FIVEANDAHALF,
	"ionic": BondType.IONIC,
	"hydrogen": BondType.HYDROGEN,
	"dative": BondType.DATIVE,
}

# bond display codes drawn as wedges, hashed or plain, from the begin atom
STEREO_DIRECTIONS = {
	3: BondDir.BEGINDASH,
	4: BondDir.BEGINDASH,
	6: BondDir.BEGINWEDGE,
	7: BondDir.BEGINWEDGE,
}
# bond display codes whose wedge starts at the end atom
REVERSED_DISPLAYS = frozenset({4, 7, 10, 12})

CHEM_ERRORS = (Chem.rdchem.MolSanitizeException, RuntimeError, ValueError)


#============================================
def supported_order(order) -> bool:
	return order in BOND_TYPES


#============================================
class MolHandle:
	"""Editable molecule with one 2D conformer."""

	def __init__(self, mol=None):
		if mol is None:
			self.mol = Chem.RWMol()
		else:
			self.mol = Chem.RWMol(mol)
		if self.mol.GetNumConformers() == 0:
			conformer = Chem.Conformer(self.mol.GetNumAtoms())
			conformer.Set3D(False)
			self.mol.AddConformer(conformer, assignId=True)
		self.sanitized = False

	#============================================
	@classmethod
	def from_smiles(cls, smiles: str) -> "MolHandle | None":
		mol = Chem.MolFromSmiles(smiles)
		if mol is None:
			logger.warning("could not read SMILES %r", smiles)
			return None
		handle = cls(mol)
		handle.sanitized = True
		handle.compute_2d_coords()
		return handle

	def copy(self) -> "MolHandle":
		cloned = MolHandle(self.mol)
		cloned.sanitized = self.sanitized
		return cloned

	@property
	def num_atoms(self) -> int:
		return self.mol.GetNumAtoms()

	#============================================
	def atom_index(self, node_id) -> int | None:
		for atom in self.mol.GetAtoms():
			if atom.HasProp(NODE_ID_PROP) and atom.GetIntProp(NODE_ID_PROP) == node_id:
				return atom.GetIdx()
		return None

	def atom(self, node_id):
		index = self.atom_index(node_id)
		if index is None:
			return None
		return self.mol.GetAtomWithIdx(index)

	def add_atom(self, node_id: int, atomic_number: int) -> int:
		atom = Chem.Atom(atomic_number)
		atom.SetIntProp(NODE_ID_PROP, node_id)
		return self.mol.AddAtom(atom)

	#============================================
	def set_atom_properties(self, node_id, charge=None, isotope=None,
			explicit_hydrogens=None, position=None, atomic_number=None) -> None:
		"""Set the drawing properties of one atom, None leaves a value alone."""
		index = self.atom_index(node_id)
		if index is None:
			return
		atom = self.mol.GetAtomWithIdx(index)
		if atomic_number is not None:
			atom.SetAtomicNum(atomic_number)
		if charge is not None:
			atom.SetFormalCharge(charge)
		if isotope is not None:
			atom.SetIsotope(isotope)
		if explicit_hydrogens is not None and explicit_hydrogens >= 0:
			atom.SetNumExplicitHs(explicit_hydrogens)
		if position is not None:
			x, y = position
			self.mol.GetConformer().SetAtomPosition(index, Point3D(x, y, 0.0))

	def formal_charge(self, node_id) -> int:
		atom = self.atom(node_id)
		if atom is None:
			return 0
		return atom.GetFormalCharge()

	#============================================
	def has_bond(self, begin_id, end_id) -> bool:
		begin_index = self.atom_index(begin_id)
		end_index = self.atom_index(end_id)
		if begin_index is None or end_index is None:
			return False
		return self.mol.GetBondBetweenAtoms(begin_index, end_index) is not None

	def add_bond(self, begin_id, end_id, order, direction=None) -> int:
		"""Bond two atoms by node id.

		Returns:
			int: bond index, -1 when an atom is missing, the atoms are
			already bonded or the order is not supported
		"""
		bond_type = BOND_TYPES.get(order)
		begin_index = self.atom_index(begin_id)
		end_index = self.atom_index(end_id)
		if bond_type is None or begin_index is None or end_index is None:
			return -1
		return self.add_bond_by_index(begin_index, end_index, bond_type, direction)

	def add_bond_by_index(self, begin_index, end_index, bond_type, direction=None) -> int:
		if begin_index == end_index:
			return -1
		if self.mol.GetBondBetweenAtoms(begin_index, end_index) is not None:
			return -1
		try:
			count = self.mol.AddBond(begin_index, end_index, bond_type)
		except CHEM_ERRORS as error:
			logger.warning("could not add bond %s-%s: %s", begin_index, end_index, error)
			return -1
		bond = self.mol.GetBondWithIdx(count - 1)
		if direction is not None:
			bond.SetBondDir(direction)
		return count - 1

	def remove_bond(self, begin_id, end_id) -> None:
		begin_index = self.atom_index(begin_id)
		end_index = self.atom_index(end_id)
		if begin_index is None or end_index is None:
			return
		if self.mol.GetBondBetweenAtoms(begin_index, end_index) is None:
			return
		self.mol.RemoveBond(begin_index, end_index)

	def remove_atom(self, node_id) -> None:
		index = self.atom_index(node_id)
		if index is not None:
			self.mol.RemoveAtom(index)

	#============================================
	def detect_stereochemistry(self, chiral_possible: bool) -> None:
		"""Perceive atom and double bond stereo from wedges and coordinates."""
		conformer = self.mol.GetConformer()
		try:
			if chiral_possible:
				Chem.AssignChiralTypesFromBondDirs(self.mol, conformer.GetId())
			for bond in self.mol.GetBonds():
				if bond.GetBondType() == BondType.SINGLE:
					bond.SetBondDir(BondDir.NONE)
			Chem.DetectBondStereoChemistry(self.mol, conformer)
		except CHEM_ERRORS as error:
			logger.warning("stereo perception failed: %s", error)

	def remove_hydrogens(self) -> None:
		try:
			mol = Chem.RemoveHs(self.mol, implicitOnly=False, updateExplicitCount=False, sanitize=False)
		except CHEM_ERRORS as error:
			logger.warning("could not remove hydrogens: %s", error)
			return
		self.mol = Chem.RWMol(mol)

	def kekulize(self) -> bool:
		try:
			Chem.Kekulize(self.mol)
		except CHEM_ERRORS as error:
			logger.warning("kekulization failed: %s", error)
			return False
		return True

	def sanitize(self) -> bool:
		try:
			Chem.SanitizeMol(self.mol)
		except CHEM_ERRORS as error:
			logger.warning("sanitization failed: %s", error)
			self.sanitized = False
			return False
		self.sanitized = True
		return True

	#============================================
	def _prepare_output(self) -> None:
		if self.sanitized:
			return
		self.mol.UpdatePropertyCache(strict=False)
		Chem.FastFindRings(self.mol)

	def canonical_smiles(self) -> str:
		self._prepare_output()
		try:
			return Chem.MolToSmiles(self.mol, isomericSmiles=True)
		except CHEM_ERRORS as error:
			logger.warning("could not write SMILES: %s", error)
			return ""

	def molblock(self, extra_dative=()) -> str:
		"""MDL molblock, extra_dative bonds are drawn only in this output."""
		self._prepare_output()
		added = []
		for begin_id, end_id in extra_dative:
			index = self.add_bond(begin_id, end_id, "dative")
			if index >= 0:
				added.append((begin_id, end_id))
		try:
			block = Chem.MolToMolBlock(self.mol, includeStereo=True, kekulize=False)
		except CHEM_ERRORS as error:
			logger.warning("could not write molblock: %s", error)
			block = ""
		for begin_id, end_id in added:
			self.remove_bond(begin_id, end_id)
		return block

	#============================================
	def combine(self, other: "MolHandle") -> "MolHandle":
		combined = MolHandle(Chem.CombineMols(self.mol, other.mol))
		combined.sanitized = self.sanitized and other.sanitized
		return combined

	def insert_smiles(self, smiles: str) -> int | None:
		"""Insert a fragment, returning the index of its first atom."""
		inserted = Chem.MolFromSmiles(smiles)
		if inserted is None:
			logger.warning("could not read SMILES %r", smiles)
			return None
		offset = self.mol.GetNumAtoms()
		self.mol.InsertMol(inserted)
		return offset

	def compute_2d_coords(self, keep=None) -> None:
		"""Compute 2D coordinates, atoms listed in keep stay in place.

		Args:
			keep: node ids whose current position is kept
		"""
		coord_map = {}
		if keep and self.mol.GetNumConformers():
			conformer = self.mol.GetConformer()
			for node_id in keep:
				index = self.atom_index(node_id)
				if index is None:
					continue
				position = conformer.GetAtomPosition(index)
				coord_map[index] = Point2D(position.x, position.y)
		try:
			if coord_map:
				rdDepictor.Compute2DCoords(self.mol, coordMap=coord_map)
			else:
				rdDepictor.Compute2DCoords(self.mol)
		except CHEM_ERRORS as error:
			logger.warning("2D depiction failed: %s", error)
