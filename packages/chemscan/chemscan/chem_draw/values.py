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

"""Typed property decoding, one decoder per encoding.

CDX stores coordinates as 32 bit integers in 1/65536 point, CDXML as
points. Both are brought to the same document unit and the y axis is
flipped so that y grows upwards.
"""

# Standard Library
import dataclasses
import re
import struct

# local repo modules
from . import tables
from .. import geometry


# one CDXML point in document units
CDXML_CDX_POINT = 1.0e6 / 65536
CDX_UNIT = 1.0e-6

TEXT_ATTRIBUTES = ("font", "face", "size", "color")
DEFAULT_STYLE = {"font": 3, "face": 0, "size": 8, "color": 0}

_LEADING_INT = re.compile(r"^\s*([-+]?\d+)")
_INT_FORMATS = {1: "b", 2: "h", 4: "i"}


#============================================
@dataclasses.dataclass
class TextRun:
	"""One styled run of a text object."""
	text: str
	font: int = 3
	face: int = 0
	size: float = 8
	color: int = 0
	position: int = 0
	length: int = 0
	bold: bool = False


#============================================
def leading_int(text: str | None) -> int:
	"""Integer prefix of text, 0 when there is none."""
	if not text:
		return 0
	match = _LEADING_INT.match(text)
	if match is None:
		return 0
	return int(match.group(1))


#============================================
def _float_list(text: str) -> list[float]:
	values = []
	for item in text.split():
		try:
			values.append(float(item))
		except ValueError:
			values.append(0.0)
	return values


#============================================
class BaseValues:
	"""Dispatch one raw property value on the declared data type."""

	encoding = ""

	def value(self, name: str, raw):
		data_type = tables.PROPERTY_TYPES.get(name)
		if data_type is None:
			return None
		if data_type.startswith(("INT", "UINT")):
			return self.integer(raw, data_type.startswith("U"))
		if data_type == "CDXObjectID":
			return self.integer(raw, True)
		if data_type == "CDXPoint2D":
			return self.point_2d(raw)
		if data_type == "CDXPoint3D":
			return self.point_3d(raw)
		if data_type == "CDXRectangle":
			return self.polygon(raw)
		if data_type == "CDXObjectIDArray":
			return self.ids(raw)
		if data_type == "CDXString":
			return self.string(raw)
		return None

	#============================================
	def polygon(self, raw) -> geometry.Polygon:
		"""Rectangle property as a polygon, vertices from left-bottom clockwise."""
		top, left, bottom, right = self.rectangle(raw)
		return geometry.Polygon.rectangle(left, -bottom, right, -top)

	def string(self, raw) -> str:
		return "".join(run.text for run in self.styled_text(raw))


#============================================
class CdxValues(BaseValues):
	encoding = "cdx"

	def integer(self, raw: bytes, unsigned: bool = False) -> int | None:
		fmt = _INT_FORMATS.get(len(raw))
		if fmt is None:
			return None
		if unsigned:
			fmt = fmt.upper()
		return struct.unpack("<" + fmt, raw)[0]

	def _chunks(self, raw: bytes) -> list[int]:
		count = len(raw) // 4
		return list(struct.unpack("<%di" % count, raw[:count * 4]))

	def point_2d(self, raw: bytes) -> tuple[float, float]:
		values = self._chunks(raw)
		if len(values) < 2:
			return (0.0, 0.0)
		y, x = values[0] * CDX_UNIT, values[1] * CDX_UNIT
		return (round(x, 5), -round(y, 5))

	def point_3d(self, raw: bytes) -> tuple[float, float]:
		values = self._chunks(raw)
		if len(values) < 2:
			return (0.0, 0.0)
		x, y = values[0] * CDX_UNIT, values[1] * CDX_UNIT
		return (round(x, 5), -round(y, 5))

	def rectangle(self, raw: bytes) -> tuple[float, float, float, float]:
		values = [value * CDX_UNIT for value in self._chunks(raw)]
		values += [0.0] * (4 - len(values))
		top, left, bottom, right = values[:4]
		return (top, left, bottom, right)

	def ids(self, raw: bytes) -> list[int]:
		return self._chunks(raw)

	def enum(self, name: str, raw: bytes):
		return self.integer(raw, False)

	def bond_order(self, raw: bytes):
		return tables.CDX_BOND_ORDER.get(self.integer(raw, False), 0)

	#============================================
	def styled_text(self, raw: bytes) -> list[TextRun]:
		"""Decode a CDX string: a run table followed by the plain text.

		Each run record is five unsigned 16 bit values: start offset,
		font id, face, size in 1/20 point and color index.
		"""
		if len(raw) < 2:
			return []
		run_count = struct.unpack_from("<H", raw, 0)[0]
		text_position = run_count * 10 + 2
		plain = raw[text_position:]
		if run_count == 0:
			return [TextRun(plain.decode("cp1252", errors="replace"), **DEFAULT_STYLE)]
		records = []
		for index in range(run_count):
			offset = 2 + index * 10
			if offset + 10 > len(raw):
				break
			records.append(struct.unpack_from("<5H", raw, offset))
		records.sort(key=lambda record: record[0])
		runs = []
		for index, (start, font, face, size, color) in enumerate(records):
			if index + 1 < len(records):
				stop = records[index + 1][0]
			else:
				stop = len(plain)
			text = plain[start:stop].decode("cp1252", errors="replace")
			runs.append(TextRun(text, font, face, size // 20, color))
		return runs

	#============================================
	def color_table(self, raw: bytes) -> list[str]:
		"""Hex colors, black and white first as in every document."""
		table = ["000000", "FFFFFF"]
		values = [
			struct.unpack_from("<H", raw, offset)[0]
			for offset in range(2, len(raw) - 1, 2)
		]
		for index in range(0, len(values) - 2, 3):
			red, green, blue = values[index:index + 3]
			table.append("%02x%02x%02x" % (red >> 8, green >> 8, blue >> 8))
		return table

	def font_table(self, raw: bytes) -> list[dict]:
		fonts = []
		if len(raw) < 4:
			return fonts
		run_count = struct.unpack_from("<H", raw, 2)[0]
		offset = 4
		for _ in range(run_count):
			if offset + 6 > len(raw):
				break
			font_id, charset, length = struct.unpack_from("<3H", raw, offset)
			name = raw[offset + 6:offset + 6 + length].decode("cp1252", errors="replace")
			fonts.append({"id": font_id, "charset": charset, "name": name})
			offset += 6 + length
		return fonts


#============================================
class CdxmlValues(BaseValues):
	encoding = "cdxml"

	def integer(self, raw: str, unsigned: bool = False) -> int:
		return leading_int(raw)

	def point_2d(self, raw: str) -> tuple[float, float]:
		values = _float_list(raw) + [0.0, 0.0]
		x, y = values[0] / CDXML_CDX_POINT, values[1] / CDXML_CDX_POINT
		return (round(x, 5), -round(y, 5))

	def point_3d(self, raw: str) -> tuple[float, float]:
		return self.point_2d(raw)

	def rectangle(self, raw: str) -> tuple[float, float, float, float]:
		values = [value / CDXML_CDX_POINT for value in _float_list(raw)]
		values += [0.0] * (4 - len(values))
		left, top, right, bottom = values[:4]
		return (top, left, bottom, right)

	def ids(self, raw: str) -> list[int]:
		return [leading_int(item) for item in raw.split()]

	#============================================
	def enum(self, name: str, raw: str):
		"""Map a CDXML enumeration name to its binary code."""
		table = tables.CDXML_ENUMS.get(name, {})
		if name in tables.CDXML_FLAG_ENUMS:
			flags = [table.get(item) for item in raw.split()]
			if not flags or None in flags:
				return None
			value = 0
			for flag in flags:
				value |= flag
			return value
		if raw in table:
			return table[raw]
		if raw.strip().lstrip("-").isdigit():
			return int(raw)
		return None

	def bond_order(self, raw: str):
		return tables.CDXML_BOND_ORDER.get(raw.strip(), 0)

	#============================================
	def styled_text(self, raw) -> list[TextRun]:
		"""Text runs from the <s> children of an element, or a plain attribute."""
		if isinstance(raw, str):
			return [TextRun(raw, **DEFAULT_STYLE)]
		runs = []
		for run in raw.findall("s"):
			style = {key: leading_int(run.get(key)) for key in TEXT_ATTRIBUTES}
			runs.append(TextRun("".join(run.itertext()), **style))
		return runs

	#============================================
	def color_table(self, element) -> list[str]:
		table = ["000000", "FFFFFF"]
		if element is None:
			return table
		for color in element.findall("color"):
			channels = []
			for key in ("r", "g", "b"):
				try:
					channels.append(round(float(color.get(key, "0")) * 255))
				except ValueError:
					channels.append(0)
			table.append("%02x%02x%02x" % tuple(channels))
		return table

	def font_table(self, element) -> list[dict]:
		if element is None:
			return []
		return [
			{
				"id": leading_int(font.get("id")),
				"charset": font.get("charset"),
				"name": font.get("name"),
			}
			for font in element.findall("font")
		]


#============================================
def values_for(encoding: str) -> BaseValues:
	if encoding == "cdx":
		return CdxValues()
	if encoding == "cdxml":
		return CdxmlValues()
	raise ValueError(f"unknown encoding {encoding!r}")
