"""Tests for the public parse functions and the command line tool."""

# Standard Library
import json

# Third Party
import pytest

# Local
import conftest
import cdxml_drawing
import test_cdx_reader


conftest.add_chemscan_to_sys_path()

# local repo modules
import chemscan
from chemscan import cli
from chemscan import settings


#============================================
def ethanol_cdxml():
	drawing = cdxml_drawing.Drawing()
	drawing.fragment(cdxml_drawing.ethanol_atoms(0.0, 0.0), cdxml_drawing.CHAIN_BONDS)
	return drawing.cdxml()


#============================================
def ethanol_cdx():
	return test_cdx_reader.document(
		test_cdx_reader.obj(test_cdx_reader.PAGE, 2, test_cdx_reader.ethanol_fragment()))


#============================================
@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
	monkeypatch.delenv("CHEMSCAN_LOG_FORMAT", raising=False)
	monkeypatch.delenv("CHEMSCAN_LOG_LEVEL", raising=False)
	settings.get_settings.cache_clear()
	yield
	settings.get_settings.cache_clear()


# ============================================
# parse
# ============================================

#============================================
def test_parse_cdxml_text():
	document = chemscan.parse(ethanol_cdxml())
	assert [molecule.cano_smiles for molecule in document.molecules] == ["CCO"]
	assert document.reactions == []
	assert document.source is None
	assert document.version == "20.1.1.125"


#============================================
def test_parse_cdxml_bytes():
	document = chemscan.parse(ethanol_cdxml().encode("utf-8"))
	assert [molecule.cano_smiles for molecule in document.molecules] == ["CCO"]


#============================================
def test_parse_cdx_bytes():
	document = chemscan.parse(ethanol_cdx())
	assert [molecule.cano_smiles for molecule in document.molecules] == ["CCO"]
	assert document.version == "19.0"


#============================================
def test_parse_path(tmp_path):
	path = tmp_path / "ethanol.cdx"
	path.write_bytes(ethanol_cdx())
	document = chemscan.parse(path)
	assert document.source == str(path)
	assert len(document.molecules) == 1


#============================================
def test_parse_missing_file(tmp_path):
	with pytest.raises(FileNotFoundError):
		chemscan.parse(tmp_path / "missing.cdxml")


#============================================
def test_parse_rejects_other_xml():
	with pytest.raises(chemscan.InvalidFormatError):
		chemscan.parse(b"<?xml version='1.0'?><svg/>")


#============================================
def test_to_dict_shape():
	payload = chemscan.parse(ethanol_cdxml()).to_dict()
	assert set(payload) == {"source", "molecules", "reactions"}
	(molecule,) = payload["molecules"]
	assert set(molecule) == {"id", "smiles", "label", "text"}
	assert molecule["smiles"] == "CCO"


# ============================================
# command line
# ============================================

#============================================
def test_cli_prints_molecules_when_no_reaction(tmp_path, capsys):
	path = tmp_path / "ethanol.cdxml"
	path.write_text(ethanol_cdxml(), encoding="utf-8")
	assert cli.main([str(path)]) == 0
	payloads = json.loads(capsys.readouterr().out)
	assert payloads[0]["source"] == str(path)
	assert [molecule["smiles"] for molecule in payloads[0]["molecules"]] == ["CCO"]


#============================================
def test_cli_reports_missing_file(tmp_path, capsys):
	path = tmp_path / "ethanol.cdx"
	path.write_bytes(ethanol_cdx())
	status = cli.main([str(tmp_path / "missing.cdx"), str(path)])
	assert status == 1
	captured = capsys.readouterr()
	assert len(json.loads(captured.out)) == 1
	assert "no such file" in captured.err


#============================================
def test_cli_reports_bad_content(tmp_path, capsys):
	path = tmp_path / "broken.cdxml"
	path.write_text("<not closed", encoding="utf-8")
	assert cli.main([str(path)]) == 1
	assert json.loads(capsys.readouterr().out) == []


#============================================
def test_cli_arguments():
	args = cli.parse_args(["-m", "-v", "--log-format", "json", "a.cdx", "b.cdxml"])
	assert args.files == ["a.cdx", "b.cdxml"]
	assert args.molecules
	assert args.verbose
	assert args.log_format == "json"
