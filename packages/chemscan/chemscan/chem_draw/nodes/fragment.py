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

"""Fragments and their atom nodes.

A node may embed a nested fragment (a nickname drawn as a literal
sub-structure) and a label text. Nested fragments are kept by id here and
flattened later by the document assembler.
"""

# Standard Library
import copy
import logging

# local repo modules
from .. import tables
from ... import aliases
from ... import geometry
from .base import BaseNode
from .bond import Bond
from .graphic import Graphic
from .text import Text


logger = logging.getLogger(__name__)


#============================================
class FragmentNode(BaseNode):
	"""One atom, or a placeholder node carrying a label or nested fragment."""

	kind = tables.ObjectKind.NODE

	def __init__(self, session, node_id=None):
		super().__init__(session, node_id)
		self.num_hydrogens = -1
		self.atnum = -1
		self.spin = 0
		self.charge = 0
		self.iso = 0
		self.color = 0
		self.type = -1
		self.ext_type = -1
		self.x = None
		self.y = None
		self.is_alias = False
		self.alias_text = ""
		self.warning = False
		self.warning_data = ""
		self.generic_nickname = None
		self.text = None
		self.nested_fragment = {}
		self.nested_text = {}
		self.expanded = False
		self.is_polymer = False

	#============================================
	def decode(self, entry):
		name = entry.name
		if entry.is_object:
			if name == "Fragment":
				fragment = Fragment(self.session, entry.object_id).read(entry.cursor)
				self.nested_fragment[fragment.id] = fragment
			elif name == "Text":
				# must be read in place to keep the binary cursor aligned
				self.text = Text(self.session, entry.object_id).read(entry.cursor)
				self.polygon = self.text.polygon
				self.nested_text[self.text.id] = self.text
			else:
				self.ignore(entry)
			return
		if name in ("Node_Element", "Atom_Radical", "Atom_Isotope",
				"Atom_Charge", "Atom_NumHydrogens", "ForegroundColor"):
			attribute = {
				"Node_Element": "atnum",
				"Atom_Radical": "spin",
				"Atom_Isotope": "iso",
				"Atom_Charge": "charge",
				"Atom_NumHydrogens": "num_hydrogens",
				"ForegroundColor": "color",
			}[name]
			setattr(self, attribute, self.decoded(entry))
		elif name == "Atom_GenericNickname":
			runs = self.values.styled_text(entry.raw)
			if runs:
				self.generic_nickname = runs[0].text
		elif name == "Node_Type":
			self.type = self.values.enum(name, entry.raw)
			self.is_alias = self.type in tables.ALIAS_NODE_TYPES
		elif name == "2DPosition":
			self.x, self.y = self.decoded(entry)
		elif name == "ChemicalWarning":
			self.warning = True
			self.warning_data = self.values.string(entry.raw)
		elif name == "Atom_ExternalConnectionType":
			self.ext_type = self.values.enum(name, entry.raw)
		else:
			self.ignore(entry)

	def post_decode(self):
		if self.type is None:
			self.type = -1
		if self.text is not None and self.text.value:
			self.alias_text = self.text.value
			return
		if self.generic_nickname and aliases.is_rgroup_atom(self.generic_nickname):
			self.is_alias = True
			self.type = tables.NODE_TYPE_GENERIC_NICKNAME
			self.alias_text = self.generic_nickname

	#============================================
	@property
	def point(self) -> geometry.Point | None:
		if self.x is None or self.y is None:
			return None
		return geometry.Point(self.x, self.y)

	def leftbottom(self) -> geometry.Point:
		if self.polygon is None:
			return self.point
		return self.polygon.bounding_box().leftbottom

	def righttop(self) -> geometry.Point:
		if self.polygon is None:
			return self.point
		return self.polygon.bounding_box().righttop

	def has_nil_coord(self) -> bool:
		return (self.x is None or self.y is None) and self.polygon is None

	def set_polymer(self) -> None:
		self.is_alias = True
		self.is_polymer = True

	def copy(self, arena=None) -> "FragmentNode":
		"""Shallow copy, with a fresh id when an arena is given."""
		cloned = copy.copy(self)
		cloned.nested_fragment = dict(self.nested_fragment)
		cloned.nested_text = dict(self.nested_text)
		if arena is not None:
			cloned.id = arena.next_id()
		return cloned

	def __repr__(self):
		return f"<FragmentNode id={self.id} atnum={self.atnum} type={self.type}>"


#============================================
class Fragment(BaseNode):
	"""A connected set of nodes and bonds, with its bounding polygon."""

	kind = tables.ObjectKind.FRAGMENT

	def __init__(self, session, node_id=None):
		super().__init__(session, node_id)
		# drawn inside a small rectangle, never a reaction participant
		self.boxed = False
		self.node_map = {}
		self.bond_map = {}
		self.graphic_map = {}

	def decode(self, entry):
		if not entry.is_object:
			self.ignore(entry)
			return
		if entry.name == "Node":
			node = FragmentNode(self.session, entry.object_id).read(entry.cursor)
			self.node_map[node.id] = node
		elif entry.name == "Bond":
			bond = Bond(self.session, entry.object_id).read(entry.cursor)
			self.bond_map[bond.id] = bond
		elif entry.name == "Graphic":
			graphic = Graphic(self.session, entry.object_id).read(entry.cursor)
			self.graphic_map[graphic.id] = graphic
		else:
			self.ignore(entry)

	def post_decode(self):
		if self.polygon is None and self.node_map:
			self.rebuild_polygon()

	#============================================
	def rebuild_polygon(self) -> None:
		"""Bounding rectangle of every node point or label."""
		left = bottom = right = top = None
		for node in self.node_map.values():
			if node.has_nil_coord():
				continue
			leftbottom = node.leftbottom()
			righttop = node.righttop()
			if left is None:
				left, bottom = leftbottom.x, leftbottom.y
				right, top = righttop.x, righttop.y
				continue
			left = min(left, leftbottom.x)
			bottom = min(bottom, leftbottom.y)
			right = max(right, righttop.x)
			top = max(top, righttop.y)
		if left is None:
			self.polygon = None
			return
		self.polygon = geometry.Polygon.rectangle(left, bottom, right, top)

	def nodes_with_type(self, node_type: int) -> dict:
		return {
			node_id: node for node_id, node in self.node_map.items()
			if node.type == node_type
		}

	def get_external_point(self) -> dict:
		return self.nodes_with_type(tables.NODE_TYPE_EXTERNAL_CONNECTION_POINT)

	#============================================
	def get_internal_nids(self) -> tuple[list, list]:
		"""External connection point ids and the atoms they are bonded to.

		Returns:
			tuple: (external ids, internal ids) in the same order, an
			external point without a bond is left out of both lists
		"""
		external_ids = []
		internal_ids = []
		for external_id in self.get_external_point():
			found = self.bond_has_endpoint(external_id)
			if found is None:
				logger.debug("external point %s of fragment %s has no bond", external_id, self.id)
				continue
			_, bond = found
			external_ids.append(external_id)
			internal_ids.append(bond.other_endpoint(external_id))
		return (external_ids, internal_ids)

	def bond_has_endpoint(self, endpoint) -> tuple | None:
		for bond_id, bond in self.bond_map.items():
			if bond.has_endpoint(endpoint):
				return (bond_id, bond)
		return None

	#============================================
	def copy(self, arena=None) -> "Fragment":
		"""Copy with fresh maps, nodes and bonds are shared with the origin.

		With an arena the copy gets a new id.
		"""
		cloned = copy.copy(self)
		cloned.node_map = dict(self.node_map)
		cloned.bond_map = dict(self.bond_map)
		cloned.graphic_map = dict(self.graphic_map)
		if arena is not None:
			cloned.id = arena.next_id()
		return cloned

	def add(self, other: "Fragment") -> None:
		"""Merge the nodes and bonds of other into this fragment."""
		self.boxed |= other.boxed
		self.node_map.update(other.node_map)
		self.bond_map.update(other.bond_map)
		self.rebuild_polygon()

	def points(self) -> list:
		return [node.point for node in self.node_map.values() if node.point is not None]

	#============================================
	def is_line(self) -> bool:
		"""True when the fragment is a chain of three or more collinear atoms.

		Atoms expanded from a nickname or without coordinates disqualify
		the fragment.
		"""
		if len(self.node_map) < 3:
			return False
		nodes = list(self.node_map.values())
		if any(node.expanded or node.point is None for node in nodes):
			return False
		points = [node.point for node in nodes]
		for first, second, third in zip(points, points[1:], points[2:]):
			leading = geometry.Segment(first, second)
			if not leading.lies_on_one_line_with(geometry.Segment(second, third)):
				return False
		return True

	def __repr__(self):
		return f"<Fragment id={self.id} nodes={len(self.node_map)} bonds={len(self.bond_map)}>"
