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

"""Placeholder labels drawn in place of a substituent."""

# Standard Library
import re


# labels that stand for a whole class of substituents
ALIAS_GROUP = ("Ar", "X", "Y", "M")

# separators between reagent names inside a condition text
ABB_DELIM = re.compile(r"[.·\s,'\"/\n]")

_RGROUP = re.compile(r"R\d+|R *")


#============================================
def is_alias_group(text: str) -> bool:
	return text in ALIAS_GROUP


#============================================
def is_rgroup_atom(text: str) -> bool:
	"""True for R-group labels such as R, R1 or OR2."""
	return _RGROUP.search(text) is not None


#============================================
def is_super_atom(text: str) -> bool:
	return is_alias_group(text) or is_rgroup_atom(text)


#============================================
def rgroup_token(text: str) -> str | None:
	"""The last R-group token of a label, R2 for OR2."""
	tokens = _RGROUP.findall(text)
	if not tokens:
		return None
	return tokens[-1]
