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

"""Bond between two fragment nodes."""

# Standard Library
import copy

# local repo modules
from .. import tables
from .base import BaseNode


#============================================
class Bond(BaseNode):
	kind = tables.ObjectKind.BOND

	def __init__(self, session, node_id=None):
		super().__init__(session, node_id)
		self.begin_id = None
		self.end_id = None
		self.stereo = 0
		self.order = 1
		self.color = 0

	def decode(self, entry):
		name = entry.name
		if name == "Bond_Begin":
			self.begin_id = self.decoded(entry)
		elif name == "Bond_End":
			self.end_id = self.decoded(entry)
		elif name == "Bond_Order":
			self.order = self.values.bond_order(entry.raw)
		elif name == "Bond_Display":
			self.stereo = self.values.enum(name, entry.raw)
		elif name == "ForegroundColor":
			self.color = self.decoded(entry)
		else:
			self.ignore(entry)

	@property
	def end_points(self) -> tuple:
		return (self.begin_id, self.end_id)

	def has_endpoint(self, node_id) -> bool:
		return node_id in (self.begin_id, self.end_id)

	def other_endpoint(self, node_id):
		if node_id == self.begin_id:
			return self.end_id
		return self.begin_id

	def replace_endpoint(self, old_id, new_id) -> None:
		if self.begin_id == old_id:
			self.begin_id = new_id
		elif self.end_id == old_id:
			self.end_id = new_id

	def copy(self) -> "Bond":
		return copy.copy(self)
