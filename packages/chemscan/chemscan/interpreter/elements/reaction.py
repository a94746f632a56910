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

"""Reactions and the numbered steps found in their conditions."""

# Standard Library
import copy
import dataclasses


STATUS_FAILED = "Failed"
STATUS_PLANNED = "Planned"
STATUS_SUCCESSFUL = "Successful"

GROUPS = ("reactant", "reagent", "product")


#============================================
@dataclasses.dataclass
class ReactionStep:
	number: int = 0
	description: str = ""
	time: str = ""
	temperature: str = ""
	reagents: list = dataclasses.field(default_factory=list)

	def to_dict(self) -> dict:
		return dataclasses.asdict(self)


#============================================
class Reaction:
	"""One arrow with its reactants, reagents and products.

	The id lists are filled during detection; the molecule lists are
	resolved from them once detection is over.
	"""

	def __init__(self, arrow_id=None):
		self.arrow_id = arrow_id
		self.arrow = None
		self.reactant_ids = []
		self.reagent_ids = []
		self.product_ids = []
		self.text_ids = []
		self.reactants = []
		self.reagents = []
		self.products = []
		self.reagent_smiles = []
		self.reagent_abbs = []
		self.description = ""
		self.temperature = ""
		self.yield_ = ""
		self.time = ""
		self.steps = []
		self.details = {}
		self.clone_from = None

	#============================================
	def ids(self, group: str) -> list:
		return getattr(self, f"{group}_ids")

	def molecules(self, group: str) -> list:
		return getattr(self, f"{group}s")

	def molecule_ids(self) -> list:
		return self.reactant_ids + self.product_ids

	def all_ids(self) -> list:
		return self.reagent_ids + self.molecule_ids()

	def delete_id(self, object_id) -> None:
		for group in GROUPS:
			ids = self.ids(group)
			if object_id in ids:
				ids.remove(object_id)

	def replace_id(self, old_id, new_id) -> None:
		for group in GROUPS:
			ids = self.ids(group)
			if old_id in ids:
				ids.remove(old_id)
				ids.append(new_id)

	def replace_molecule(self, old_id, molecule) -> None:
		"""Swap the molecule known as old_id, or cloned from it, for molecule."""
		for group in GROUPS:
			molecules = self.molecules(group)
			for index, current in enumerate(molecules):
				if old_id not in (current.id, current.clone_from):
					continue
				molecules[index] = molecule
				self.replace_id(current.id, molecule.id)
				break

	def make_disjoint(self) -> None:
		"""Drop repeated ids; reactants, then products, keep a shared id."""
		seen = set()
		for group in ("reactant", "product", "reagent"):
			kept = []
			for object_id in self.ids(group):
				if object_id in seen:
					continue
				seen.add(object_id)
				kept.append(object_id)
			setattr(self, f"{group}_ids", kept)

	#============================================
	def reaction_smiles(self) -> str:
		reactants = ".".join(molecule.cano_smiles for molecule in self.reactants)
		products = ".".join(molecule.cano_smiles for molecule in self.products)
		reagents = [molecule.cano_smiles for molecule in self.reagents if molecule.cano_smiles]
		reagents.extend(self.reagent_smiles)
		return f"{reactants}>{'.'.join(reagents)}>{products}"

	@property
	def status(self) -> str:
		if self.arrow is not None and self.arrow.cross:
			return STATUS_FAILED
		if self.arrow is not None and self.arrow.line_type == 1:
			return STATUS_PLANNED
		if any(molecule.is_red for molecule in self.products):
			return STATUS_FAILED
		return STATUS_SUCCESSFUL

	def copy(self) -> "Reaction":
		"""Same reaction and arrow id, every list copied."""
		copied = copy.copy(self)
		for group in GROUPS:
			setattr(copied, f"{group}_ids", list(self.ids(group)))
			setattr(copied, f"{group}s", list(self.molecules(group)))
		copied.text_ids = list(self.text_ids)
		copied.reagent_smiles = list(self.reagent_smiles)
		copied.reagent_abbs = list(self.reagent_abbs)
		copied.steps = list(self.steps)
		copied.details = dict(self.details)
		return copied

	#============================================
	def clone(self, arena) -> "Reaction":
		"""Copy with cloned molecules and arrow, every new id from arena."""
		cloned = Reaction()
		if self.arrow is not None:
			cloned.arrow_id = arena.next_id()
			cloned.arrow = self.arrow.clone(cloned.arrow_id)
		for group in GROUPS:
			molecules = [molecule.clone(arena) for molecule in self.molecules(group)]
			setattr(cloned, f"{group}s", molecules)
			setattr(cloned, f"{group}_ids", [molecule.id for molecule in molecules])
		cloned.text_ids = list(self.text_ids)
		cloned.reagent_smiles = list(self.reagent_smiles)
		cloned.reagent_abbs = list(self.reagent_abbs)
		cloned.description = self.description
		cloned.temperature = self.temperature
		cloned.yield_ = self.yield_
		cloned.time = self.time
		cloned.steps = copy.deepcopy(self.steps)
		cloned.details = dict(self.details)
		cloned.clone_from = self.clone_from if self.clone_from is not None else self.arrow_id
		return cloned

	#============================================
	def to_dict(self) -> dict:
		def by_smiles(molecules):
			return [molecule.to_dict() for molecule in sorted(molecules, key=lambda m: m.cano_smiles)]

		return {
			"id": self.arrow_id,
			"reactants": by_smiles(self.reactants),
			"reagents": by_smiles(self.reagents),
			"products": by_smiles(self.products),
			"steps": [step.to_dict() for step in self.steps],
			"reagent_smiles": sorted(self.reagent_smiles),
			"description": self.description,
			"temperature": self.temperature,
			"yield": self.yield_,
			"time": self.time,
			"status": self.status,
			"details": dict(self.details),
		}

	def __repr__(self):
		return (
			f"<Reaction {self.arrow_id}: {self.reactant_ids} >"
			f" {self.reagent_ids} > {self.product_ids}>"
		)
