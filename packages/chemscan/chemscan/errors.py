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

"""Exception types raised by the readers."""


#============================================
class ChemScanError(Exception):
	"""Base class for every error raised by chemscan."""


#============================================
class ParseError(ChemScanError):
	"""The input could not be decoded."""


#============================================
class InvalidFormatError(ParseError):
	"""Wrong magic header, wrong DOCTYPE or malformed markup."""

	def __init__(self, message: str, source: str | None = None):
		if source:
			message = f"{source}: {message}"
		super().__init__(message)
		self.source = source
