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

"""Bracketed groups, the repeat unit annotations around atoms."""

# local repo modules
from .. import tables
from .base import BaseNode


#============================================
class BracketAttachment(BaseNode):
	kind = tables.ObjectKind.BRACKET_ATTACHMENT

	def __init__(self, session, node_id=None):
		super().__init__(session, node_id)
		self.graphic_id = None

	def decode(self, entry):
		if entry.name == "Bracket_GraphicID" and not entry.is_object:
			self.graphic_id = self.decoded(entry)
		else:
			self.ignore(entry)


#============================================
class BracketGroup(BaseNode):
	"""Bracket graphics (through attachments) around enclosed objects."""

	kind = tables.ObjectKind.BRACKETED_GROUP

	def __init__(self, session, node_id=None):
		super().__init__(session, node_id)
		self.attachments = []
		self.object_ids = []

	def decode(self, entry):
		if entry.name == "BracketedObjects" and not entry.is_object:
			self.object_ids = self.decoded(entry) or []
		elif entry.name == "BracketAttachment" and entry.is_object:
			attachment = BracketAttachment(self.session, entry.object_id)
			self.attachments.append(attachment.read(entry.cursor))
		else:
			self.ignore(entry)

	@property
	def graphic_ids(self) -> list:
		return [
			attachment.graphic_id for attachment in self.attachments
			if attachment.graphic_id is not None
		]
