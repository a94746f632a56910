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

"""Reaction conditions read from the condition texts.

The extract_* helpers take one text block and return the matched value
as a string, empty when nothing is found.

>>> extract_temperature("stirred at 80 °C for 2 h")
'80°C'
>>> extract_time("stirred at 80 °C for 2 h")
'2h'
>>> extract_yield("92% ee")
''
"""

# Standard Library
import re

# local repo modules
from ...aliases import ABB_DELIM


START = r"(?:(?<=[\s,;\[\(\.])|^)"
END = r"(?=[\s,;\]\)\.]|$)"
DEGREE = r"(?:°\s*[CF]|℃|℉)"
RANGE = r"(?:-|−|–|—|~|to|till|until)"
REAL_NUMBER = r"(?:\d+|\d+\.\d+)"
JOIN_WORDS = ("and", "with", "plus")
TIME_UNITS = "days?|dy|d|hours?|hrs?|h|minutes?|mins?|m|seconds?|secs?|s"
TIME_UNIT = f"(?:{TIME_UNITS})"

ROOM_TEMPERATURE = "20°C ~ 25°C"
OVERNIGHT = "12h ~ 20h"


#============================================
def range_number_pattern(unit: str, signed: bool) -> str:
	"""A number with unit, or a range of two such numbers."""
	sign = r"(?:-|−|–|—)?\s*" if signed else ""
	return (
		f"{sign}(?:{REAL_NUMBER}\\s*{unit}?\\s*{RANGE}\\s*)?"
		f"{REAL_NUMBER}\\s*{unit}"
	)


TEMPERATURE_PATTERN = re.compile(START + range_number_pattern(DEGREE, True) + END, re.M)
ROOM_TEMPERATURE_PATTERN = re.compile(START + r"r\.?t\.?" + END, re.M | re.I)
YIELD_PATTERN = re.compile(START + range_number_pattern("%", False) + r"(?!\s*ee)" + END, re.M)
_TIME = f"{REAL_NUMBER}\\s*{TIME_UNIT}"
_LINKER = f"(?:{RANGE}|{'|'.join(JOIN_WORDS)})"
TIME_PATTERN = re.compile(
	START + f"((?:{_TIME})?\\s*(?:{_LINKER}\\s*)?{_TIME})" + END, re.M)
OVERNIGHT_PATTERN = re.compile(START + r"(?:overnight|ovn|o/n)" + END, re.M | re.I)

_TEMPERATURE_SPACES = (
	(re.compile(r"(\d)\s*°\s*([CF])"), r"\1°\2"),
	(re.compile(r"(\d)\s+([℃℉])"), r"\1\2"),
)
_TIME_SPACES = re.compile(r"(\d)\s+(" + TIME_UNITS + r")\b")
_YIELD_SPACES = re.compile(r"(\d)\s+%")


#============================================
def _first_match(pattern, text: str) -> str:
	match = pattern.search(text)
	if match is None:
		return ""
	return match.group(0).strip()


#============================================
def extract_temperature(text: str) -> str:
	"""First temperature in text, with room temperature appended."""
	temperature = _first_match(TEMPERATURE_PATTERN, text)
	for pattern, replacement in _TEMPERATURE_SPACES:
		temperature = pattern.sub(replacement, temperature)
	if ROOM_TEMPERATURE_PATTERN.search(text) is None:
		return temperature
	if not temperature:
		return ROOM_TEMPERATURE
	return f"{temperature}; {ROOM_TEMPERATURE}"


#============================================
def extract_time(text: str) -> str:
	times = [
		_TIME_SPACES.sub(r"\1\2", match.group(1).strip())
		for match in TIME_PATTERN.finditer(text)
	]
	if OVERNIGHT_PATTERN.search(text) is not None:
		times.append(OVERNIGHT)
	return ";".join(times)


#============================================
def extract_yield(text: str) -> str:
	return _YIELD_SPACES.sub(r"\1%", _first_match(YIELD_PATTERN, text))


#============================================
def extract_reaction_info(descriptions) -> tuple[str, str, str]:
	"""Temperature, yield and time over several text blocks.

	Args:
		descriptions: text blocks, such as every condition text of a reaction

	Returns:
		tuple: (temperature, yield, time), matches of each block joined by ";"
	"""
	temperatures = []
	yields = []
	times = []
	for description in descriptions:
		found = extract_yield(description)
		if found:
			yields.append(found)
		found = extract_temperature(description)
		if found:
			temperatures.append(found)
		found = extract_time(description)
		if found:
			times.append(found)
	return (";".join(temperatures), ";".join(yields), ";".join(times))


#============================================
def split_text(text: str) -> list[str]:
	return [token for token in ABB_DELIM.split(text) if len(token) > 1]


#============================================
def name_to_struct(text: str, lookup) -> dict:
	"""Abbreviations found in text, mapped to their SMILES.

	Tokens are looked up one by one; the tokens left over are joined again
	and searched for the abbreviations whose name holds a space.
	"""
	found = {}
	remaining = []
	for token in split_text(text):
		smiles = lookup.lookup_abbreviation(token)
		if smiles:
			found[token] = smiles
		else:
			remaining.append(token)
	if not remaining:
		return found
	rest = " ".join(remaining)
	for name in lookup.multi_word_abbreviations():
		if name not in rest:
			continue
		rest = rest.replace(name, "", 1)
		found[name] = lookup.lookup_abbreviation(name)
	return found


#============================================
def merge_chemdraw_with_predefined(work, molecule_group, reaction) -> None:
	"""Each word of a group title is an abbreviation or one drawn molecule."""
	title = molecule_group.title.value
	known = name_to_struct(title, work.lookup)
	for index, token in enumerate(split_text(title)):
		smiles = known.get(token)
		if smiles is not None:
			reaction.reagent_smiles.append(smiles)
		elif index < len(molecule_group.molecules):
			reaction.reagents.append(molecule_group.molecules[index])


#============================================
def extract_product_yield(reaction) -> str:
	yields = []
	for molecule in reaction.products:
		text = molecule.text.strip()
		if not text:
			continue
		found = extract_yield(text)
		if found:
			yields.append(found)
	return ";".join(yields)


#============================================
def process_reaction_info(work, reaction) -> None:
	"""Fill reagent SMILES, description and conditions of one reaction."""
	descriptions = []
	for text_id in reaction.text_ids:
		text = work.text_map.get(text_id)
		if text is None:
			continue
		descriptions.append(text.value)
		molecule_group = work.mol_group_map.get(text_id)
		if molecule_group is None or molecule_group.title is None:
			found = name_to_struct(text.value, work.lookup)
			reaction.reagent_smiles.extend(found.values())
			reaction.reagent_abbs.extend(found.keys())
			continue
		title = molecule_group.title.value
		if title == text.value:
			merge_chemdraw_with_predefined(work, molecule_group, reaction)
			continue
		descriptions.append(title)
		reaction.reagents.extend(molecule_group.molecules)
		reaction.reagent_smiles.extend(name_to_struct(title, work.lookup).values())

	temperature, reaction_yield, time = extract_reaction_info(descriptions)
	product_yield = extract_product_yield(reaction)
	reaction.temperature = temperature
	reaction.yield_ = product_yield or reaction_yield
	reaction.time = time
	reaction.description = "\n".join(d for d in descriptions if d)
