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

"""Readers for the binary CDX and XML CDXML encodings."""

# local repo modules
from .cdx import CdxDocument
from .cdxml import CdxmlDocument
from .parser import DocumentParser
from .session import IdArena, ParseSession
