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

"""Node variants, one per modelled object kind."""

# local repo modules
from .. import tables
from .base import BaseNode
from .bond import Bond
from .bracket import BracketAttachment, BracketGroup
from .fragment import Fragment, FragmentNode
from .graphic import ChemGeometry, Graphic
from .text import Text


# the single dispatch table over ObjectKind, kinds missing here are skipped
NODE_CLASSES = {
	tables.ObjectKind.FRAGMENT: Fragment,
	tables.ObjectKind.NODE: FragmentNode,
	tables.ObjectKind.BOND: Bond,
	tables.ObjectKind.TEXT: Text,
	tables.ObjectKind.GRAPHIC: Graphic,
	tables.ObjectKind.GEOMETRY: ChemGeometry,
	tables.ObjectKind.ARROW: ChemGeometry,
	tables.ObjectKind.BRACKETED_GROUP: BracketGroup,
	tables.ObjectKind.BRACKET_ATTACHMENT: BracketAttachment,
}


#============================================
def node_class(kind: tables.ObjectKind):
	"""Node class for a kind, None for kinds that are only walked or skipped."""
	return NODE_CLASSES.get(kind)
