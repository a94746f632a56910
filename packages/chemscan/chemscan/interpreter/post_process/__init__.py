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

"""Third interpreter phase: labels, molecules and reaction conditions."""

# local repo modules
from .assemble import assemble_reaction
from .label_by_molecule import replace_label_by_molecule
from .reaction_info import process_reaction_info
from .reaction_step import process_reactions_step
from .reagent_label import refine_reagents_label
from .text_as_molecule import refine_text_as_molecule
from .text_label import refine_text_label


#============================================
def post_process(state):
	"""Snapshot with resolved reactions and their conditions."""
	work = state.thaw()
	refine_reagents_label(work)
	replace_label_by_molecule(work)
	refine_text_label(work)
	refine_text_as_molecule(work)
	assemble_reaction(work)
	for reaction in work.reactions:
		process_reaction_info(work, reaction)
	process_reactions_step(work)
	return work.freeze()
