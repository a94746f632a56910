"""Tests for the abbreviation lookup service and alias label helpers."""

# Third Party
import pytest

# Local
import conftest


conftest.add_chemscan_to_sys_path()

# local repo modules
from chemscan import aliases
from chemscan import lookup
from chemscan.interpreter.post_process.reaction_info import name_to_struct
from chemscan.settings import ChemScanSettings


#============================================
def test_packaged_tables_load():
	service = lookup.LookupService.from_settings(ChemScanSettings())
	assert service.lookup_abbreviation("THF") == "C1CCOC1"
	assert service.lookup_superatom("Me") == "C"


#============================================
def test_abbreviations_are_case_insensitive():
	service = lookup.LookupService({"THF": "C1CCOC1"}, {})
	assert service.lookup_abbreviation("thf") == "C1CCOC1"
	assert service.is_abbreviation("Thf")


#============================================
def test_superatom_is_never_an_abbreviation():
	service = lookup.LookupService({"Me": "C", "DMF": "CN(C)C=O"}, {"Me": "C"})
	assert service.lookup_abbreviation("Me") is None
	assert service.is_superatom("Me")
	assert not service.is_superatom("me")


#============================================
def test_tables_are_read_only():
	service = lookup.LookupService({"THF": "C1CCOC1"}, {})
	with pytest.raises(TypeError):
		service.abbreviations["DMF"] = "CN(C)C=O"


#============================================
def test_custom_table_extends_packaged(tmp_path):
	custom = tmp_path / "custom.yaml"
	custom.write_text("MyCat: \"[Pd]\"\n", encoding="utf-8")
	settings = ChemScanSettings(custom_abbreviations_path=custom)
	service = lookup.LookupService.from_settings(settings)
	assert service.lookup_abbreviation("mycat") == "[Pd]"
	assert service.lookup_abbreviation("THF") == "C1CCOC1"


#============================================
def test_load_table_rejects_non_mapping(tmp_path):
	path = tmp_path / "broken.yaml"
	path.write_text("- THF\n- DMF\n", encoding="utf-8")
	with pytest.raises(ValueError):
		lookup.load_table(path)


#============================================
def test_name_to_struct_finds_multi_word_names():
	service = lookup.LookupService(
		{"THF": "C1CCOC1", "sodium hydride": "[NaH]"}, {})
	found = name_to_struct("sodium hydride, THF", service)
	assert found == {"THF": "C1CCOC1", "sodium hydride": "[NaH]"}


#============================================
@pytest.mark.parametrize("text, expected", [
	("R", True),
	("R1", True),
	("OR2", True),
	("Ar", False),
	("Ph", False),
])
def test_rgroup_labels(text, expected):
	assert aliases.is_rgroup_atom(text) is expected


#============================================
def test_alias_groups_and_rgroup_token():
	assert aliases.is_super_atom("Ar")
	assert aliases.is_super_atom("X")
	assert aliases.rgroup_token("OR2") == "R2"
	assert aliases.rgroup_token("Ph") is None
