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

"""Flattening of nested and nickname fragments after decoding."""

# Standard Library
import dataclasses
import logging
import re

# local repo modules
from . import tables


logger = logging.getLogger(__name__)

# an unexpanded OR1, SR2 or NR3 label drawn as a nickname with a warning
_HETERO_RGROUP = re.compile(r"^[OSN]R\d+$")


#============================================
@dataclasses.dataclass
class FragmentGroup:
	"""Fragments drawn under one label, such as a named solvent."""
	title: object
	fragment_map: dict


#============================================
def fetch_fragment_group(node) -> dict:
	"""Group the nested fragments of a node under its label text id."""
	if node.nested_text:
		group_id, title = next(iter(node.nested_text.items()))
	else:
		group_id, title = node.id, None
	return {group_id: FragmentGroup(title, dict(node.nested_fragment))}


#============================================
def fetch_node_map(fragment, nested_fragment, node_id) -> tuple[dict, dict] | None:
	"""Splice a nested fragment into its parent at node_id.

	For each external connection point, the parent bond that touched the
	placeholder node is moved onto the internal atom, and the nested bond
	that touched the connection point is moved onto the outer atom.

	Returns:
		tuple: (node map, bond map) of the nested fragment, None when
		nothing could be spliced
	"""
	external_ids, internal_ids = nested_fragment.get_internal_nids()
	if not external_ids:
		return None
	for external_id, internal_id in zip(external_ids, internal_ids):
		outer = fragment.bond_has_endpoint(node_id)
		inner = nested_fragment.bond_has_endpoint(external_id)
		if outer is None or inner is None:
			logger.debug("no bond to splice nested fragment %s at node %s", nested_fragment.id, node_id)
			continue
		_, outer_bond = outer
		_, inner_bond = inner
		outer_id = outer_bond.other_endpoint(node_id)
		outer_bond.replace_endpoint(node_id, internal_id)
		inner_bond.replace_endpoint(external_id, outer_id)
	for nested_node in nested_fragment.node_map.values():
		nested_node.expanded = True
	return (nested_fragment.node_map, nested_fragment.bond_map)


#============================================
def _keeps_hetero_rgroup(node) -> bool:
	if node.type != tables.NODE_TYPE_UNSPECIFIED or not node.warning:
		return False
	if len(node.nested_text) != 1:
		return False
	text = next(iter(node.nested_text.values())).value
	return _HETERO_RGROUP.match(text) is not None


#============================================
def rebuild_objects_map(document) -> None:
	"""Resolve nicknames and nested fragments of every document fragment.

	A node with several nested fragments, or with one nested fragment that
	has no external connection point, becomes a fragment group keyed by
	its label. A node with one connectable nested fragment is replaced by
	that fragment. A fragment made of a single label node becomes text.
	Fragments left without nodes are dropped.
	"""
	for fragment in list(document.fragment_map.values()):
		node_map = {}
		bond_map = {}
		delete_nodes = []
		single_label = False
		for node_id, node in list(fragment.node_map.items()):
			if node.type < 0:
				continue
			nested_count = len(node.nested_fragment)
			if nested_count > 1:
				document.fragment_group_map.update(fetch_fragment_group(node))
				document.text_map.update(node.nested_text)
				delete_nodes.append(node_id)
				continue
			if nested_count == 1:
				if _keeps_hetero_rgroup(node):
					node.type = tables.NODE_TYPE_GENERIC_NICKNAME
					continue
				delete_nodes.append(node_id)
				nested = next(iter(node.nested_fragment.values()))
				external_points = nested.get_external_point()
				if not external_points:
					document.fragment_group_map.update(fetch_fragment_group(node))
					document.text_map.update(node.nested_text)
					continue
				spliced = fetch_node_map(fragment, nested, node_id)
				delete_nodes.extend(external_points)
				if spliced is not None:
					node_map.update(spliced[0])
					bond_map.update(spliced[1])
				continue
			if len(fragment.node_map) == 1 and node.nested_text:
				single_label = True
				document.text_map.update(node.nested_text)
		if single_label:
			del document.fragment_map[fragment.id]
			continue
		fragment.node_map.update(node_map)
		fragment.bond_map.update(bond_map)
		for node_id in delete_nodes:
			fragment.node_map.pop(node_id, None)
		if not fragment.node_map:
			logger.debug("fragment %s left without nodes, dropped", fragment.id)
			del document.fragment_map[fragment.id]
