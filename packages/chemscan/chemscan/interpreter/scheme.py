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

"""Interpretation of a decoded drawing into molecules and reactions."""

# Standard Library
import logging

# local repo modules
from ..lookup import default_lookup
from .post_process import post_process
from .pre_process import pre_process
from .reaction_detection import reaction_detection
from .state import SchemeState
from .text_group import text_group_interpret


logger = logging.getLogger(__name__)

# each phase takes a snapshot and returns a new one
PHASES = (pre_process, reaction_detection, post_process, text_group_interpret)


#============================================
class Scheme:
	"""Every graphic of one document: molecules, arrows, texts.

	Args:
		document: a decoded CdxDocument or CdxmlDocument
		lookup: abbreviation and superatom tables, the packaged ones by default
	"""

	def __init__(self, document, lookup=None):
		self.document = document
		self.lookup = lookup if lookup is not None else default_lookup()
		self.state = SchemeState.from_document(document, self.lookup)

	#============================================
	def interpret(self) -> "Scheme":
		for phase in PHASES:
			self.state = phase(self.state)
			logger.debug(
				"%s: %d molecules, %d arrows, %d reactions", phase.__name__,
				len(self.state.mol_map), len(self.state.arrow_map), len(self.state.reactions),
			)
		return self

	@property
	def molecules(self) -> list:
		return list(self.state.mol_map.values())

	@property
	def reactions(self) -> list:
		return list(self.state.reactions)

	@property
	def text_map(self):
		return self.state.text_map

	@property
	def fragment_as_line(self) -> int:
		return self.state.fragment_as_line

	@property
	def n_atoms(self):
		return self.state.n_atoms
