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

"""Numbered steps inside a reaction description."""

# Standard Library
import itertools
import re

# local repo modules
from ..elements import ReactionStep
from .reaction_info import extract_reaction_info


NUMBER_REFS = (
	("1", "2", "3", "4", "5", "6", "7", "8", "9"),
	("I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX"),
	("i", "ii", "iii", "iv", "v", "vi", "vii", "viii", "ix"),
	("A", "B", "C", "D", "E", "F", "G", "H", "J"),
)
FLAT_REFS = tuple(itertools.chain.from_iterable(NUMBER_REFS))

# group 1: whole step, group 2: number, group 3: step text
STEP_PATTERNS = (
	re.compile(r"^(([1-9a-z]{0,3}) *[).] *(.*))$", re.M | re.I),
	re.compile(r"^\((([1-9a-z]{0,3}) *\) *(.*))$", re.M | re.I),
)


#============================================
def _ordered_in_one_ref(numbers) -> bool:
	"""True when numbers follow one reference list, without repeats."""
	for ref in NUMBER_REFS:
		if [number for number in ref if number in numbers] == numbers:
			return True
	return False


#============================================
def find_step_matches(description: str) -> list:
	for pattern in STEP_PATTERNS:
		matches = list(pattern.finditer(description))
		numbers = [match.group(2) for match in matches]
		if numbers and _ordered_in_one_ref(numbers):
			return matches if len(matches) >= 2 else []
	return []


#============================================
def detect_reaction_step(work, reaction) -> None:
	"""Split the description into steps with their own conditions.

	Reaction level temperature or time is cleared when a step carries
	one. A lone reagent molecule goes to the single step with no text.
	"""
	description = reaction.description
	matches = find_step_matches(description)
	if not matches:
		return
	starts = [match.start() for match in matches]
	for index, match in enumerate(matches):
		end = starts[index + 1] if index + 1 < len(starts) else len(description)
		if match.group(3):
			text_start = match.start(3)
		else:
			text_start = match.end(1)
		span = description[text_start:end]
		temperature, _, time = extract_reaction_info([span])
		step = ReactionStep(
			number=FLAT_REFS.index(match.group(2)) % 9 + 1,
			description=span,
			time=time,
			temperature=temperature,
		)
		for abbreviation in reaction.reagent_abbs:
			if abbreviation in span:
				smiles = work.lookup.lookup_abbreviation(abbreviation)
				if smiles:
					step.reagents.append(smiles)
		reaction.steps.append(step)

	if any(step.time for step in reaction.steps):
		reaction.time = ""
	if any(step.temperature for step in reaction.steps):
		reaction.temperature = ""

	if len(reaction.reagents) != 1:
		return
	empty_steps = [step for step in reaction.steps if step.description in ("", "\n")]
	if len(empty_steps) == 1:
		empty_steps[0].reagents.append(reaction.reagents[0].cano_smiles)


#============================================
def process_reactions_step(work) -> None:
	for reaction in work.reactions:
		detect_reaction_step(work, reaction)
