"""Small CDXML documents written from drawing coordinates.

Coordinates are given in document units with y growing upwards, the
way the readers report them, and converted to CDXML points here.
"""

# Standard Library
import itertools
import xml.sax.saxutils

# Local
import conftest


conftest.add_chemscan_to_sys_path()

# local repo modules
from chemscan.chem_draw.values import CDXML_CDX_POINT


HEADER = (
	'<?xml version="1.0" encoding="UTF-8" ?>\n'
	'<!DOCTYPE CDXML SYSTEM "http://www.cambridgesoft.com/xml/cdxml.dtd" >\n'
)


#============================================
def _points(*coords):
	return " ".join(f"{value * CDXML_CDX_POINT:.4f}" for value in coords)


#============================================
def position(x, y):
	return _points(x, -y)


#============================================
def box(left, bottom, right, top):
	return _points(left, -top, right, -bottom)


#============================================
class Drawing:
	"""Collects page elements and writes them as one CDXML document."""

	def __init__(self, first_id=100):
		self._ids = itertools.count(first_id)
		self.elements = []

	def next_id(self):
		return next(self._ids)

	#============================================
	def fragment(self, atoms, bonds=()):
		"""Add a fragment.

		Args:
			atoms: (x, y, attributes) triples, attributes a dict of node
				attributes such as {"Element": "8"}
			bonds: (begin index, end index) pairs into atoms

		Returns:
			tuple: (fragment id, list of node ids)
		"""
		fragment_id = self.next_id()
		node_ids = []
		parts = []
		for x, y, attributes in atoms:
			node_id = self.next_id()
			node_ids.append(node_id)
			extra = "".join(f' {key}="{value}"' for key, value in attributes.items())
			parts.append(f'<n id="{node_id}" p="{position(x, y)}"{extra}/>')
		for begin, end in bonds:
			parts.append(
				f'<b id="{self.next_id()}" B="{node_ids[begin]}" E="{node_ids[end]}"/>')
		self.elements.append(f'<fragment id="{fragment_id}">{"".join(parts)}</fragment>')
		return (fragment_id, node_ids)

	def arrow(self, tail, head, nogo=None):
		arrow_id = self.next_id()
		extra = f' NoGo="{nogo}"' if nogo else ""
		self.elements.append(
			f'<arrow id="{arrow_id}" ArrowheadHead="Full"'
			f' Head3D="{position(*head)} 0" Tail3D="{position(*tail)} 0"{extra}/>')
		return arrow_id

	def line(self, tail, head):
		"""Add an arrow glyph without a head, read back as a plain line."""
		line_id = self.next_id()
		self.elements.append(
			f'<arrow id="{line_id}"'
			f' Head3D="{position(*head)} 0" Tail3D="{position(*tail)} 0"/>')
		return line_id

	def text(self, runs, bounds):
		"""Add a text; runs are (string, bold) pairs, bounds a document rectangle."""
		text_id = self.next_id()
		left, bottom, right, top = bounds
		styled = "".join(
			f'<s font="3" size="10" face="{1 if bold else 0}">'
			f"{xml.sax.saxutils.escape(value)}</s>"
			for value, bold in runs
		)
		self.elements.append(
			f'<t id="{text_id}" p="{position(left, bottom)}"'
			f' BoundingBox="{box(*bounds)}">{styled}</t>')
		return text_id

	#============================================
	def labelled_fragment(self, label, atoms, bonds, bounds):
		"""Add a structure hidden under a nickname label, such as a named solvent.

		Returns:
			tuple: (label text id, id of the structure under the label)
		"""
		outer_id = self.next_id()
		node_id = self.next_id()
		nested_id, _ = self.fragment(atoms, bonds)
		nested = self.elements.pop()
		text_id = self.next_id()
		left, bottom, _, _ = bounds
		self.elements.append(
			f'<fragment id="{outer_id}">'
			f'<n id="{node_id}" p="{position(left, bottom)}" NodeType="Nickname">'
			f'{nested}'
			f'<t id="{text_id}" p="{position(left, bottom)}" BoundingBox="{box(*bounds)}">'
			f'<s font="3" size="10" face="0">{xml.sax.saxutils.escape(label)}</s></t>'
			"</n></fragment>")
		return (text_id, nested_id)

	#============================================
	def cdxml(self):
		body = "".join(self.elements)
		return (
			HEADER
			+ '<CDXML CreationProgram="ChemDraw 20.1.1.125">'
			+ f'<page id="{self.next_id()}">{body}</page></CDXML>'
		)


#============================================
def ethanol_atoms(x, y):
	"""Three atoms of ethanol with the oxygen last, drawn as a zigzag."""
	return [
		(x, y + 0.5, {}),
		(x + 1.0, y - 0.5, {}),
		(x + 2.0, y + 0.5, {"Element": "8"}),
	]


CHAIN_BONDS = ((0, 1), (1, 2))
