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

"""Second interpreter phase: build reactions around the arrows."""

# local repo modules
from .assign_to_reaction import assign_to_reaction
from .duplicate_reagents import refine_duplicate_reagents
from .molecule_group import assign_molecule_group
from .multi_line_chain import multi_line_chain
from .remove_separated import remove_separated_mol
from .text_assignment import assign_text


#============================================
def reaction_detection(state):
	"""Snapshot with one reaction per arrow and every text attached."""
	work = state.thaw()
	assign_to_reaction(work)
	refine_duplicate_reagents(work)
	remove_separated_mol(work)
	assign_text(work)
	assign_molecule_group(work)
	multi_line_chain(work)
	return work.freeze()
