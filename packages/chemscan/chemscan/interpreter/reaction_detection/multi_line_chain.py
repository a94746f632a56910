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

"""Reactions wrapped over several rows of horizontal arrows."""

# Standard Library
import logging

# local repo modules
from ..scheme_base import auto_fit_arrow_polygons


logger = logging.getLogger(__name__)


#============================================
def is_unordered(work) -> bool:
	"""True when the arrows cannot be read as rows of straight arrows."""
	if len(work.arrow_map) < 2:
		return True
	for arrow in work.arrow_map.values():
		if arrow.middle_points:
			return True
		if not arrow.head_segment().to_line().horizontal():
			return True
	return False


#============================================
def sort_arrow_rows(work) -> list:
	"""Arrow ids grouped into rows by head height, in reading order."""
	rows = []
	remaining = list(work.arrow_map)
	while remaining:
		arrow = work.arrow_map[remaining[0]]
		low = arrow.head.y - arrow.height
		high = arrow.head.y + arrow.height
		row = [key for key in remaining if low <= work.arrow_map[key].head.y <= high]
		rows.append(row)
		remaining = [key for key in remaining if key not in row]
	for row in rows:
		row.sort(key=lambda key: work.arrow_map[key].head.x)
	rows.sort(key=lambda row: -work.arrow_map[row[0]].head.y)
	return rows


#============================================
def multi_line_chain(work) -> None:
	"""Borrow reactants or products across row breaks.

	A reaction without reactants starts a row: it takes the products of
	the last reaction on the row above. A reaction without products ends
	a row and takes the reactants of the first reaction on the row below.
	"""
	if is_unordered(work):
		return
	incomplete = [
		reaction for reaction in work.reactions
		if not reaction.reactant_ids or not reaction.product_ids
	]
	if not incomplete:
		return
	auto_fit_arrow_polygons(work)
	rows = sort_arrow_rows(work)
	for reaction in incomplete:
		row_index = next(
			(index for index, row in enumerate(rows) if reaction.arrow_id in row), None)
		if row_index is None:
			continue
		if not reaction.reactant_ids:
			if row_index == 0:
				continue
			other = work.reaction(rows[row_index - 1][-1])
			reaction.reactant_ids.extend(other.product_ids)
		else:
			if row_index + 1 >= len(rows):
				continue
			other = work.reaction(rows[row_index + 1][0])
			reaction.product_ids.extend(other.reactant_ids)
		logger.debug("reaction %s continued from %s", reaction.arrow_id, other.arrow_id)
