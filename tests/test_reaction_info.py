"""Tests for reaction condition extraction and step splitting."""

# Standard Library
import types

# Third Party
import pytest

# Local
import conftest


conftest.add_chemscan_to_sys_path()

# local repo modules
from chemscan.interpreter.elements import Reaction
from chemscan.interpreter.post_process import reaction_info
from chemscan.interpreter.post_process import reaction_step
from chemscan.lookup import LookupService


# ============================================
# temperature, time and yield
# ============================================

#============================================
@pytest.mark.parametrize("text, expected", [
	("stirred at 80 °C for 2 h", "80°C"),
	("heated to 110°C", "110°C"),
	("cooled to -78 °C", "-78°C"),
	("0-25 °C, 3 h", "0-25°C"),
	("no temperature here", ""),
])
def test_extract_temperature(text, expected):
	assert reaction_info.extract_temperature(text) == expected


#============================================
def test_room_temperature_is_expanded():
	assert reaction_info.extract_temperature("stirred at rt") == reaction_info.ROOM_TEMPERATURE
	assert reaction_info.extract_temperature("0 °C to r.t.") == "0°C; 20°C ~ 25°C"


#============================================
@pytest.mark.parametrize("text, expected", [
	("stirred at 80 °C for 2 h", "2h"),
	("30 min", "30min"),
	("2 h - 4 h", "2h - 4h"),
	("stirred at rt overnight", "12h ~ 20h"),
	("80 °C", ""),
])
def test_extract_time(text, expected):
	assert reaction_info.extract_time(text) == expected


#============================================
@pytest.mark.parametrize("text, expected", [
	("obtained in 85% yield", "85%"),
	("85 % yield", "85%"),
	("92% ee", ""),
	("no yield given", ""),
])
def test_extract_yield(text, expected):
	assert reaction_info.extract_yield(text) == expected


#============================================
def test_reaction_info_over_blocks():
	temperature, reaction_yield, time = reaction_info.extract_reaction_info([
		"THF, 0 °C, 1 h",
		"then rt overnight, 76%",
	])
	assert temperature == "0°C;20°C ~ 25°C"
	assert reaction_yield == "76%"
	assert time == "1h;12h ~ 20h"


#============================================
def test_rt_overnight_description():
	temperature, _, time = reaction_info.extract_reaction_info(["stirred at rt overnight"])
	assert "20°C ~ 25°C" in temperature
	assert "12h ~ 20h" in time


#============================================
def test_split_text_drops_single_characters():
	assert reaction_info.split_text("THF/H2O, a, 1:1") == ["THF", "H2O", "1:1"]


# ============================================
# steps
# ============================================

#============================================
def _work():
	lookup = LookupService({"NaH": "[NaH]", "THF": "C1CCOC1"}, {})
	return types.SimpleNamespace(lookup=lookup)


#============================================
def test_numbered_steps_take_their_own_conditions():
	reaction = Reaction(1)
	reaction.description = "1) add reagent A\n2) heat to 80°C"
	reaction.temperature = "80°C"
	reaction_step.detect_reaction_step(_work(), reaction)
	assert [step.number for step in reaction.steps] == [1, 2]
	assert reaction.steps[0].description.strip() == "add reagent A"
	assert reaction.steps[1].temperature == "80°C"
	assert reaction.steps[0].temperature == ""
	assert reaction.temperature == ""


#============================================
def test_step_reagents_from_abbreviations():
	reaction = Reaction(1)
	reaction.description = "i) NaH, THF, 0 °C\nii) MeI, 2 h"
	reaction.reagent_abbs = ["NaH", "THF"]
	reaction.time = "2h"
	reaction_step.detect_reaction_step(_work(), reaction)
	assert [step.number for step in reaction.steps] == [1, 2]
	assert reaction.steps[0].reagents == ["[NaH]", "C1CCOC1"]
	assert reaction.steps[1].reagents == []
	assert reaction.steps[1].time == "2h"
	assert reaction.time == ""


#============================================
def test_single_line_is_not_a_step_list():
	reaction = Reaction(1)
	reaction.description = "1) NaH, THF"
	reaction_step.detect_reaction_step(_work(), reaction)
	assert reaction.steps == []


#============================================
def test_out_of_order_numbers_are_not_steps():
	reaction = Reaction(1)
	reaction.description = "2) heat\n1) cool"
	reaction_step.detect_reaction_step(_work(), reaction)
	assert reaction.steps == []
