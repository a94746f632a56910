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

"""Tag, property and enumeration tables for the CDX and CDXML encodings.

Both encodings share one object model. Binary tags and XML names are
mapped to the same semantic names, so nodes only ever see semantic names.
"""

# Standard Library
import enum
import types


#============================================
class ObjectKind(enum.Enum):
	"""Object kinds the readers know how to build or walk through."""
	DOCUMENT = "Document"
	PAGE = "Page"
	GROUP = "Group"
	FRAGMENT = "Fragment"
	NODE = "Node"
	BOND = "Bond"
	TEXT = "Text"
	GRAPHIC = "Graphic"
	GEOMETRY = "Geometry"
	ARROW = "Arrow"
	BRACKETED_GROUP = "BracketedGroup"
	BRACKET_ATTACHMENT = "BracketAttachment"
	UNKNOWN = "Unknown"


_KINDS_BY_NAME = {kind.value: kind for kind in ObjectKind}


#============================================
def object_kind(name: str | None) -> ObjectKind:
	"""Return the kind for a semantic object name, UNKNOWN when not modelled."""
	if name is None:
		return ObjectKind.UNKNOWN
	return _KINDS_BY_NAME.get(name, ObjectKind.UNKNOWN)


TAG_OBJECT = 0x8000

CDX_OBJECTS = types.MappingProxyType({
	0x8000: "Document",
	0x8001: "Page",
	0x8002: "Group",
	0x8003: "Fragment",
	0x8004: "Node",
	0x8005: "Bond",
	0x8006: "Text",
	0x8007: "Graphic",
	0x8008: "Curve",
	0x8009: "EmbeddedObject",
	0x800A: "NamedAlternativeGroup",
	0x800B: "TemplateGrid",
	0x800C: "RegistryNumber",
	0x800D: "ReactionScheme",
	0x800E: "ReactionStep",
	0x800F: "ObjectDefinition",
	0x8010: "Spectrum",
	0x8011: "ObjectTag",
	0x8012: "OleClientItem",
	0x8013: "Sequence",
	0x8014: "CrossReference",
	0x8015: "Splitter",
	0x8016: "Table",
	0x8017: "BracketedGroup",
	0x8018: "BracketAttachment",
	0x8019: "CrossingBond",
	0x801A: "Border",
	0x801B: "Geometry",
	0x801C: "Constraint",
	0x801D: "TLCPlate",
	0x801E: "TLCLane",
	0x801F: "TLCSpot",
	0x8020: "ChemicalProperty",
	0x8021: "Arrow",
})

CDXML_OBJECTS = types.MappingProxyType({
	"CDXML": "Document",
	"page": "Page",
	"group": "Group",
	"fragment": "Fragment",
	"n": "Node",
	"b": "Bond",
	"t": "Text",
	"graphic": "Graphic",
	"curve": "Curve",
	"embeddedobject": "EmbeddedObject",
	"altgroup": "NamedAlternativeGroup",
	"templategrid": "TemplateGrid",
	"regnum": "RegistryNumber",
	"scheme": "ReactionScheme",
	"step": "ReactionStep",
	"objectdefinition": "ObjectDefinition",
	"spectrum": "Spectrum",
	"objecttag": "ObjectTag",
	"sequence": "Sequence",
	"crossreference": "CrossReference",
	"splitter": "Splitter",
	"table": "Table",
	"bracketedgroup": "BracketedGroup",
	"bracketattachment": "BracketAttachment",
	"crossingbond": "CrossingBond",
	"border": "Border",
	"geometry": "Geometry",
	"constraint": "Constraint",
	"tlcplate": "TLCPlate",
	"tlclane": "TLCLane",
	"tlcspot": "TLCSpot",
	"chemicalproperty": "ChemicalProperty",
	"arrow": "Arrow",
})

CDX_PROPERTIES = types.MappingProxyType({
	0x0003: "CreationProgram",
	0x000E: "RepresentsProperty",
	0x0010: "ChemicalWarning",
	0x0013: "SupersededBy",
	0x0100: "FontTable",
	0x0200: "2DPosition",
	0x0204: "BoundingBox",
	0x0207: "3DHead",
	0x0208: "3DTail",
	0x020D: "3DCenter",
	0x020E: "3DMajorAxisEnd",
	0x020F: "3DMinorAxisEnd",
	0x0300: "ColorTable",
	0x0301: "ForegroundColor",
	0x0400: "Node_Type",
	0x0402: "Node_Element",
	0x0420: "Atom_Isotope",
	0x0421: "Atom_Charge",
	0x0422: "Atom_Radical",
	0x042B: "Atom_NumHydrogens",
	0x0433: "Atom_GenericNickname",
	0x0440: "Atom_ExternalConnectionType",
	0x0600: "Bond_Order",
	0x0601: "Bond_Display",
	0x0604: "Bond_Begin",
	0x0605: "Bond_End",
	0x0700: "Text",
	0x0A00: "Graphic_Type",
	0x0A02: "Line_Type",
	0x0A03: "Arrow_Type",
	0x0A05: "Oval_Type",
	0x0A06: "Orbital_Type",
	0x0A07: "Bracket_Type",
	0x0A23: "Arrow_ArrowHead_Head",
	0x0A24: "Arrow_ArrowHead_Tail",
	0x0A29: "Arrow_NoGo",
	0x0A64: "BracketedObjects",
	0x0A68: "Bracket_GraphicID",
})

CDXML_PROPERTIES = types.MappingProxyType({
	"id": "ID",
	"CreationProgram": "CreationProgram",
	"Warning": "ChemicalWarning",
	"SupersededBy": "SupersededBy",
	"p": "2DPosition",
	"BoundingBox": "BoundingBox",
	"Head3D": "3DHead",
	"Tail3D": "3DTail",
	"Center3D": "3DCenter",
	"MajorAxisEnd3D": "3DMajorAxisEnd",
	"MinorAxisEnd3D": "3DMinorAxisEnd",
	"color": "ForegroundColor",
	"NodeType": "Node_Type",
	"Element": "Node_Element",
	"Isotope": "Atom_Isotope",
	"Charge": "Atom_Charge",
	"Radical": "Atom_Radical",
	"NumHydrogens": "Atom_NumHydrogens",
	"GenericNickname": "Atom_GenericNickname",
	"ExternalConnectionType": "Atom_ExternalConnectionType",
	"Order": "Bond_Order",
	"Display": "Bond_Display",
	"B": "Bond_Begin",
	"E": "Bond_End",
	"GraphicType": "Graphic_Type",
	"LineType": "Line_Type",
	"ArrowType": "Arrow_Type",
	"OvalType": "Oval_Type",
	"OrbitalType": "Orbital_Type",
	"BracketType": "Bracket_Type",
	"ArrowheadHead": "Arrow_ArrowHead_Head",
	"ArrowheadTail": "Arrow_ArrowHead_Tail",
	"NoGo": "Arrow_NoGo",
	"BracketedObjectIDs": "BracketedObjects",
	"GraphicID": "Bracket_GraphicID",
})

# semantic property name to its binary data type
PROPERTY_TYPES = types.MappingProxyType({
	"ID": "CDXObjectID",
	"CreationProgram": "CDXString",
	"RepresentsProperty": "CDXRepresentsProperty",
	"ChemicalWarning": "CDXString",
	"SupersededBy": "CDXObjectID",
	"FontTable": "CDXFontTable",
	"ColorTable": "CDXColorTable",
	"2DPosition": "CDXPoint2D",
	"BoundingBox": "CDXRectangle",
	"3DHead": "CDXPoint3D",
	"3DTail": "CDXPoint3D",
	"3DCenter": "CDXPoint3D",
	"3DMajorAxisEnd": "CDXPoint3D",
	"3DMinorAxisEnd": "CDXPoint3D",
	"ForegroundColor": "UINT16",
	"Node_Type": "INT16",
	"Node_Element": "INT16",
	"Atom_Isotope": "INT16",
	"Atom_Charge": "INT8",
	"Atom_Radical": "UINT8",
	"Atom_NumHydrogens": "UINT16",
	"Atom_GenericNickname": "CDXString",
	"Atom_ExternalConnectionType": "INT8",
	"Bond_Order": "INT16",
	"Bond_Display": "INT16",
	"Bond_Begin": "CDXObjectID",
	"Bond_End": "CDXObjectID",
	"Text": "CDXString",
	"Graphic_Type": "INT16",
	"Line_Type": "INT16",
	"Arrow_Type": "INT16",
	"Oval_Type": "INT16",
	"Orbital_Type": "INT16",
	"Bracket_Type": "INT16",
	"Arrow_ArrowHead_Head": "INT16",
	"Arrow_ArrowHead_Tail": "INT16",
	"Arrow_NoGo": "INT8",
	"BracketedObjects": "CDXObjectIDArray",
	"Bracket_GraphicID": "CDXObjectID",
})

# node types
NODE_TYPE_UNSPECIFIED = 0
NODE_TYPE_NICKNAME = 4
NODE_TYPE_FRAGMENT = 5
NODE_TYPE_GENERIC_NICKNAME = 7
NODE_TYPE_ANONYMOUS_ALTERNATIVE_GROUP = 8
NODE_TYPE_EXTERNAL_CONNECTION_POINT = 12

# node types that display a label instead of an element symbol
ALIAS_NODE_TYPES = frozenset({
	NODE_TYPE_UNSPECIFIED,
	NODE_TYPE_NICKNAME,
	NODE_TYPE_FRAGMENT,
	NODE_TYPE_ANONYMOUS_ALTERNATIVE_GROUP,
	NODE_TYPE_EXTERNAL_CONNECTION_POINT,
})

EXTERNAL_CONNECTION_POLYMER_BEAD = 3

GRAPHIC_TYPE_LINE = 1
GRAPHIC_TYPE_RECTANGLE = 3
GRAPHIC_TYPE_ORBITAL = 5
GRAPHIC_TYPE_BRACKET = 6

ARROW_HEAD_FULL = 2
ARROW_NOGO_CROSS = 2
LINE_TYPE_DASHED = 1
ORBITAL_S_SHADED = 256
OVAL_CIRCLE_SHADED = 3

BOND_DISPLAY_DASH = 1

# CDXML names of the enumerated properties, binary files store the numbers
CDXML_ENUMS = types.MappingProxyType({
	"Node_Type": {
		"Unspecified": 0,
		"Element": 1,
		"ElementList": 2,
		"ElementListNickname": 3,
		"Nickname": 4,
		"Fragment": 5,
		"Formula": 6,
		"GenericNickname": 7,
		"AnonymousAlternativeGroup": 8,
		"NamedAlternativeGroup": 9,
		"MultiAttachment": 10,
		"VariableAttachment": 11,
		"ExternalConnectionPoint": 12,
		"LinkNode": 13,
	},
	"Atom_ExternalConnectionType": {
		"Unspecified": 0,
		"Diamond": 1,
		"Star": 2,
		"PolymerBead": 3,
		"Wavy": 4,
		"Residue": 5,
		"Peptide": 6,
		"DNA": 7,
		"RNA": 8,
		"Terminus": 9,
		"Sulfide": 10,
		"Nucleotide": 11,
		"UnlinkedBranch": 12,
	},
	"Bond_Display": {
		"Solid": 0,
		"Dash": 1,
		"Hash": 2,
		"WedgedHashBegin": 3,
		"WedgedHashEnd": 4,
		"Bold": 5,
		"WedgeBegin": 6,
		"WedgeEnd": 7,
		"Wavy": 8,
		"HollowWedgeBegin": 9,
		"HollowWedgeEnd": 10,
		"WavyWedgeBegin": 11,
		"WavyWedgeEnd": 12,
		"Dot": 13,
		"DashDot": 14,
	},
	"Graphic_Type": {
		"Undefined": 0,
		"Line": 1,
		"Arc": 2,
		"Rectangle": 3,
		"Oval": 4,
		"Orbital": 5,
		"Bracket": 6,
		"Symbol": 7,
	},
	"Line_Type": {
		"Solid": 0,
		"Dashed": 1,
		"Bold": 2,
		"Wavy": 4,
	},
	"Arrow_Type": {
		"NoHead": 0,
		"HalfHead": 1,
		"FullHead": 2,
		"Resonance": 4,
		"Equilibrium": 8,
		"Hollow": 16,
		"RetroSynthetic": 32,
	},
	"Arrow_ArrowHead_Head": {
		"Unspecified": 0,
		"None": 1,
		"Full": 2,
		"HalfLeft": 3,
		"HalfRight": 4,
	},
	"Arrow_ArrowHead_Tail": {
		"Unspecified": 0,
		"None": 1,
		"Full": 2,
		"HalfLeft": 3,
		"HalfRight": 4,
	},
	"Arrow_NoGo": {
		"Unspecified": 0,
		"None": 1,
		"Cross": 2,
		"Hash": 3,
	},
	"Oval_Type": {
		"Circle": 1,
		"Shaded": 2,
		"Filled": 4,
		"Dashed": 8,
		"Bold": 16,
		"Shadowed": 32,
	},
	"Orbital_Type": {
		"s": 0,
		"oval": 1,
		"lobe": 2,
		"p": 3,
		"hybridPlus": 4,
		"hybridMinus": 5,
		"dz2Plus": 6,
		"dz2Minus": 7,
		"dxy": 8,
		"sShaded": 256,
		"ovalShaded": 257,
		"lobeShaded": 258,
		"pShaded": 259,
		"sFilled": 512,
		"ovalFilled": 513,
		"lobeFilled": 514,
		"pFilled": 515,
		"hybridPlusFilled": 516,
		"hybridMinusFilled": 517,
		"dz2PlusFilled": 518,
		"dz2MinusFilled": 519,
		"dxyFilled": 520,
	},
})

# enumerations whose CDXML value is a space separated list of flags
CDXML_FLAG_ENUMS = frozenset({"Line_Type", "Oval_Type"})

# bond order bit flags of the binary encoding
CDX_BOND_ORDER = types.MappingProxyType({
	0x0001: 1,
	0x0002: 2,
	0x0004: 3,
	0x0008: 4,
	0x0010: 5,
	0x0020: 6,
	0x0040: 0.5,
	0x0080: 1.5,
	0x0100: 2.5,
	0x0200: 3.5,
	0x0400: 4.5,
	0x0800: 5.5,
	0x1000: "dative",
	0x2000: "ionic",
	0x4000: "hydrogen",
})

CDXML_BOND_ORDER = types.MappingProxyType({
	"1": 1,
	"2": 2,
	"3": 3,
	"4": 4,
	"5": 5,
	"6": 6,
	"0.5": 0.5,
	"1.5": 1.5,
	"2.5": 2.5,
	"3.5": 3.5,
	"4.5": 4.5,
	"5.5": 5.5,
	"dative": "dative",
	"ionic": "ionic",
	"hydrogen": "hydrogen",
})

# Symbol font letters rendered as Greek letters
GREEK_CHARS = types.MappingProxyType({
	"A": "Α", "a": "α",
	"B": "Β", "b": "β",
	"G": "Γ", "g": "γ",
	"D": "Δ", "d": "δ",
	"E": "Ε", "e": "ε",
	"Z": "Ζ", "z": "ζ",
	"H": "Η", "h": "η",
	"Q": "Θ", "q": "θ",
	"I": "Ι", "i": "ι",
	"K": "Κ", "k": "κ",
	"L": "Λ", "l": "λ",
	"M": "Μ", "m": "μ",
	"N": "Ν", "n": "ν",
	"C": "Ξ", "c": "ξ",
	"O": "Ο", "o": "ο",
	"P": "Π", "p": "π",
	"R": "Ρ", "r": "ρ",
	"S": "Σ", "s": "σ",
	"T": "Τ", "t": "τ",
	"U": "Υ", "u": "υ",
	"F": "Φ", "f": "φ",
	"X": "Χ", "x": "χ",
	"Y": "Ψ", "y": "ψ",
	"W": "Ω", "w": "ω",
})
