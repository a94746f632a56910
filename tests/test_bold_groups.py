"""Tests for bold label and substituent parsing in text."""

# Standard Library
import types

# Third Party
import pytest

# Local
import conftest


conftest.add_chemscan_to_sys_path()

# local repo modules
from chemscan.interpreter.text_group import bold_groups
from chemscan.lookup import LookupService


LOOKUP = LookupService({}, {"H": "[H]", "Me": "C", "Et": "CC"})


#============================================
def _text(markdown):
	return types.SimpleNamespace(markdown=lambda: markdown)


# ============================================
# label shorthand
# ============================================

#============================================
@pytest.mark.parametrize("bold, expected", [
	("3-6", ["3", "4", "5", "6"]),
	("1a,b", ["1a", "1b"]),
	("12a, b, c", ["12a", "12b", "12c"]),
	("5", ["5"]),
	("3a", ["3a"]),
])
def test_normalize_bold(bold, expected):
	assert bold_groups.normalize_bold(bold) == expected


#============================================
def test_descending_range_is_not_expanded():
	assert bold_groups.extract_range_number("6-3") == []
	assert bold_groups.normalize_bold("6-3") == ["6-3"]


# ============================================
# lines and texts
# ============================================

#============================================
def test_line_with_label_and_values():
	bolds, groups = bold_groups.line_bold_groups("**3a**: R = H, Me", ["R"], LOOKUP)
	assert bolds == ["3a"]
	assert groups == {"R": ["H", "Me"]}


#============================================
def test_unknown_values_dropped_and_integers_kept():
	_, groups = bold_groups.line_bold_groups("R = H, Foo, 4", ["R"], LOOKUP)
	assert groups == {"R": ["H", "4"]}


#============================================
def test_two_groups_on_one_line():
	_, groups = bold_groups.line_bold_groups("R1 = Me, Et, X = H", ["R1", "X"], LOOKUP)
	assert groups["R1"] == ["Me", "Et"]
	assert groups["X"] == ["H"]


#============================================
def test_line_without_target_groups_returns_only_bolds():
	assert bold_groups.line_bold_groups("**7**", [], LOOKUP) == (["7"], {})


#============================================
def test_text_bold_groups_over_lines():
	text = _text("**3a**: R = H\n**3b**: R = Me")
	bold_list, groups = bold_groups.text_bold_groups(text, ["R"], LOOKUP)
	assert bold_list == ["3a", "3b"]
	assert groups == {"R": ["H", "Me"]}


#============================================
def test_lowercase_only_labels_are_dropped():
	bold_list, groups = bold_groups.text_bold_groups(_text("**a**: R = H"), ["R"], LOOKUP)
	assert bold_list == []
	assert groups == {"R": ["H"]}


#============================================
def test_normalize_bold_groups_pairs_by_index():
	normalized = bold_groups.normalize_bold_groups(["3a", "3b"], {"R": ["H", "Me"]})
	assert normalized == [
		bold_groups.TextGroup({"R": "H"}, "3a"),
		bold_groups.TextGroup({"R": "Me"}, "3b"),
	]
	assert normalized[0].key() == ("3a", (("R", "H"),))


# ============================================
# combinations
# ============================================

#============================================
def test_group_combinations_is_a_product():
	combinations = bold_groups.group_combinations({"R1": ["H", "Me"], "X": ["Cl"]})
	assert combinations == [
		{"R1": "H", "X": "Cl"},
		{"R1": "Me", "X": "Cl"},
	]
	assert bold_groups.group_combinations({}) == []


#============================================
def test_n_atom_combinations_pairs_by_position():
	combinations = bold_groups.n_atom_combinations({"R": ["H", "Me"], "X": ["Cl"]})
	assert combinations == [{"R": "H", "X": "Cl"}, {"R": "Me"}]


# ============================================
# group values
# ============================================

#============================================
def test_value_range_expands_to_integers():
	_, groups = bold_groups.line_bold_groups("n = 3-6", ["n"], LOOKUP)
	assert groups == {"n": ["3", "4", "5", "6"]}


#============================================
def test_value_range_beside_substituents():
	_, groups = bold_groups.line_bold_groups("R = Me, 1-2", ["R"], LOOKUP)
	assert groups == {"R": ["Me", "1", "2"]}


#============================================
def test_value_letter_suffixes_share_the_number():
	assert bold_groups.expand_values(["8a", "b", "c"]) == ["8a", "8b", "8c"]
	assert bold_groups.expand_values(["H", "b"]) == ["H", "b"]
	assert bold_groups.expand_values(["6-3", ""]) == ["6-3"]


#============================================
def test_value_letter_suffixes_pass_the_lookup():
	lookup = LookupService({"8a": "CC", "8b": "CCC"}, {})
	_, groups = bold_groups.line_bold_groups("X = 8a, b", ["X"], lookup)
	assert groups == {"X": ["8a", "8b"]}
