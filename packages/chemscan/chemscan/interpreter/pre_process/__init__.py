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

"""First interpreter phase: arrows, boxes and molecules."""

# local repo modules
from .arrows import refine_arrow
from .graphics import (
	extract_fragment_graphic,
	find_fragment_inside_rectangle,
	process_orbital_as_polymer,
)
from .molecules import assemble_ionic_molecule, fragment_to_molecules


#============================================
def pre_process(state):
	"""Snapshot with arrows, segments and molecules built."""
	work = state.thaw()
	find_fragment_inside_rectangle(work)
	refine_arrow(work)
	extract_fragment_graphic(work)
	process_orbital_as_polymer(work)
	fragment_to_molecules(work)
	assemble_ionic_molecule(work)
	return work.freeze()
