"""Tests for the CDXML reader, styled text and fragment assembly."""

# Third Party
import pytest

# Local
import cdxml_drawing
import conftest


conftest.add_chemscan_to_sys_path()

# local repo modules
from chemscan.chem_draw import CdxmlDocument
from chemscan.errors import InvalidFormatError


#============================================
def wrap(body):
	return (
		cdxml_drawing.HEADER
		+ '<CDXML CreationProgram="ChemDraw 20.1.1.125"><page id="1">'
		+ body
		+ "</page></CDXML>"
	)


#============================================
def test_foreign_doctype_is_rejected():
	data = '<?xml version="1.0"?>\n<!DOCTYPE svg SYSTEM "svg.dtd">\n<svg/>'
	with pytest.raises(InvalidFormatError):
		CdxmlDocument().read(data, "picture.svg")


#============================================
def test_missing_doctype_is_rejected():
	with pytest.raises(InvalidFormatError):
		CdxmlDocument().read('<CDXML><page id="1"/></CDXML>')


#============================================
def test_malformed_xml_is_rejected():
	with pytest.raises(InvalidFormatError) as error:
		CdxmlDocument().read(cdxml_drawing.HEADER + "<CDXML><page>", "broken.cdxml")
	assert error.value.source == "broken.cdxml"


#============================================
def test_entity_declarations_are_refused():
	data = (
		'<?xml version="1.0"?>\n'
		'<!DOCTYPE CDXML SYSTEM "http://www.cambridgesoft.com/xml/cdxml.dtd" [\n'
		'<!ENTITY lol "lol">\n'
		']>\n'
		'<CDXML>&lol;</CDXML>'
	)
	with pytest.raises(InvalidFormatError):
		CdxmlDocument().read(data)


#============================================
def test_version_and_fragment():
	drawing = cdxml_drawing.Drawing()
	fragment_id, node_ids = drawing.fragment(
		cdxml_drawing.ethanol_atoms(0.0, 0.0), cdxml_drawing.CHAIN_BONDS)
	parsed = CdxmlDocument().read(drawing.cdxml())
	assert parsed.version == "20.1.1.125"
	fragment = parsed.fragment_map[fragment_id]
	assert sorted(fragment.node_map) == sorted(node_ids)
	assert fragment.node_map[node_ids[2]].atnum == 8
	assert fragment.node_map[node_ids[0]].point.as_tuple() == pytest.approx((0.0, 0.5))


#============================================
def test_group_elements_are_flattened():
	body = (
		'<group id="2"><t id="3" p="0 0" BoundingBox="0 -10 20 0">'
		'<s font="3" size="10" face="0">MeOH</s></t></group>'
	)
	parsed = CdxmlDocument().read(wrap(body))
	assert parsed.text_map[3].value == "MeOH"


#============================================
def test_bold_runs_around_a_dash_merge():
	drawing = cdxml_drawing.Drawing()
	text_id = drawing.text([("3", True), ("-", False), ("6", True)], (0.0, 0.0, 2.0, 1.0))
	parsed = CdxmlDocument().read(drawing.cdxml())
	text = parsed.text_map[text_id]
	assert text.bold_text == "3-6"
	assert text.non_bold_text == ""
	assert text.markdown() == "**3-6**"


#============================================
def test_bold_and_plain_text_split():
	drawing = cdxml_drawing.Drawing()
	text_id = drawing.text([("2a", True), (": R = H, Me", False)], (0.0, 0.0, 5.0, 1.0))
	parsed = CdxmlDocument().read(drawing.cdxml())
	text = parsed.text_map[text_id]
	assert text.value == "2a: R = H, Me"
	assert text.bold_text == "2a"
	assert text.non_bold_text == ": R = H, Me"
	assert text.markdown() == "**2a**: R = H, Me"


#============================================
def test_text_bounding_box_in_document_units():
	drawing = cdxml_drawing.Drawing()
	text_id = drawing.text([("THF", False)], (1.0, -2.0, 3.0, 0.5))
	parsed = CdxmlDocument().read(drawing.cdxml())
	bbox = parsed.text_map[text_id].polygon.bounding_box()
	assert bbox.leftbottom.as_tuple() == pytest.approx((1.0, -2.0))
	assert bbox.righttop.as_tuple() == pytest.approx((3.0, 0.5))


#============================================
def test_text_position_decodes_beside_its_string():
	drawing = cdxml_drawing.Drawing()
	text_id = drawing.text([("NaH", False)], (1.0, -2.0, 3.0, 0.5))
	text = CdxmlDocument().read(drawing.cdxml()).text_map[text_id]
	assert text.value == "NaH"
	assert text.position.as_tuple() == pytest.approx((1.0, -2.0))
	assert text.polygon is not None


#============================================
def test_arrow_head_tail_and_cross():
	drawing = cdxml_drawing.Drawing()
	arrow_id = drawing.arrow((4.0, 0.0), (9.0, 0.0), nogo="Cross")
	parsed = CdxmlDocument().read(drawing.cdxml())
	glyph = parsed.geometry_map[arrow_id]
	assert glyph.tail.as_tuple() == pytest.approx((4.0, 0.0))
	assert glyph.head.as_tuple() == pytest.approx((9.0, 0.0))
	assert not glyph.headless()
	assert glyph.cross()


# ============================================
# nicknames and nested fragments
# ============================================

#============================================
def test_nested_fragment_is_spliced_into_parent():
	body = (
		'<fragment id="10">'
		'<n id="11" p="0 0"/>'
		'<n id="12" p="15 0" NodeType="Fragment">'
		'<fragment id="20">'
		'<n id="21" p="15 0"/>'
		'<n id="22" p="0 0" NodeType="ExternalConnectionPoint"/>'
		'<b id="23" B="21" E="22"/>'
		'</fragment>'
		'<t id="24" p="15 0"><s font="3" size="10" face="0">Me</s></t>'
		'</n>'
		'<b id="13" B="11" E="12"/>'
		'</fragment>'
	)
	parsed = CdxmlDocument().read(wrap(body))
	fragment = parsed.fragment_map[10]
	assert sorted(fragment.node_map) == [11, 21]
	assert fragment.node_map[21].expanded
	assert fragment.bond_map[13].end_points == (11, 21)
	assert fragment.bond_map[23].end_points == (21, 11)


#============================================
def test_nickname_with_several_fragments_becomes_group():
	body = (
		'<fragment id="10">'
		'<n id="11" p="0 0" NodeType="Nickname">'
		'<fragment id="20"><n id="21" p="0 0"/></fragment>'
		'<fragment id="30"><n id="31" p="10 0" Element="8"/></fragment>'
		'<t id="40" p="0 0" BoundingBox="0 -10 30 0"><s font="3" size="10" face="0">MeOH/H2O</s></t>'
		'</n>'
		'</fragment>'
	)
	parsed = CdxmlDocument().read(wrap(body))
	assert 10 not in parsed.fragment_map
	group = parsed.fragment_group_map[40]
	assert group.title.value == "MeOH/H2O"
	assert sorted(group.fragment_map) == [20, 30]
	assert parsed.text_map[40] is group.title


#============================================
def test_single_label_fragment_becomes_text():
	body = (
		'<fragment id="10">'
		'<n id="11" p="0 0" NodeType="Nickname">'
		'<t id="12" p="0 0" BoundingBox="0 -10 20 0"><s font="3" size="10" face="0">THF</s></t>'
		'</n>'
		'</fragment>'
	)
	parsed = CdxmlDocument().read(wrap(body))
	assert parsed.fragment_map == {}
	assert parsed.text_map[12].value == "THF"
