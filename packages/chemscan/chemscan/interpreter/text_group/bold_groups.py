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

"""Labels and substituent lists written in text.

A text such as ``**3a**: R = H, **3b**: R = Me`` names two compounds by
their bold labels and gives the substituent for R in each.
"""

# Standard Library
import dataclasses
import itertools
import re


BOLD_PATTERN = re.compile(r"\*\*([^*]*)\*\*")
RANGE_PATTERN = re.compile(r"(\d+)-(\d+)")
ALPHABET_PATTERN = re.compile(r"(\d+)( *[a-z],*)+")
LOWERCASE_ONLY = re.compile(r"^[a-z]+$")
INTEGER = re.compile(r"^\d+$")
VALUE_RANGE = re.compile(r"^\d+-\d+$")
ANCHORED_SUFFIX = re.compile(r"^(\d+)[a-z]$")
SINGLE_LETTER = re.compile(r"^[a-z]$")


#============================================
@dataclasses.dataclass
class TextGroup:
	"""One substitution set, with the bold label it produces if any."""
	group: dict = dataclasses.field(default_factory=dict)
	bold: str | None = None

	def key(self) -> tuple:
		return (self.bold, tuple(self.group.items()))


#============================================
def markdown_lines(text) -> list[str]:
	"""Markdown lines of a text, a bold run kept whole across a line break."""
	markdown = re.sub(r" *\*\* *\n", "\n**", text.markdown())
	return markdown.split("\n")


#============================================
def merge_groups(target: dict, groups: dict) -> None:
	for key, values in groups.items():
		target.setdefault(key, []).extend(values)


#============================================
def _keep_value(value: str, lookup) -> bool:
	return (
		lookup.is_superatom(value)
		or lookup.is_abbreviation(value)
		or INTEGER.match(value) is not None
	)


#============================================
def line_bold_groups(line: str, target_groups, lookup) -> tuple[list, dict]:
	"""Bold labels and group values of one markdown line.

	Args:
		line: one line of text markdown, bold runs wrapped in ``**``
		target_groups: group names to look for, such as R1 or X
		lookup: service used to keep only known substituents

	Returns:
		tuple: (bold labels, {group: [values]})
	"""
	bolds = [bold.strip() for bold in BOLD_PATTERN.findall(line)]
	bolds = [
		bold for bold in bolds
		if not any(len(other) > len(bold) and bold in other for other in bolds)
	]
	names = [name for name in dict.fromkeys(target_groups) if name]
	if not names:
		return (bolds, {})
	group_or = "(" + "|".join(re.escape(name) for name in names) + ")"
	starts = [match.start() for match in re.finditer(group_or + r" *=", line)]
	value_pattern = re.compile(group_or + r" *= *[^*]*(?=$|\n|\.|\*\*)")
	groups = {}
	for index, start in enumerate(starts):
		end = starts[index + 1] if index + 1 < len(starts) else len(line)
		found = value_pattern.search(line[start:end])
		if found is None:
			continue
		group_text = found.group(0).strip()
		key = re.match(group_or + r" *=", group_text).group(1).strip()
		pieces = [re.sub(r"^-", "", value.strip()) for value in group_text.split("=", 1)[1].split(",")]
		values = []
		for value in expand_values(pieces):
			if value not in values and _keep_value(value, lookup):
				values.append(value)
		if values:
			merge_groups(groups, {key: values})
			groups[key] = list(dict.fromkeys(groups[key]))
	return (bolds, groups)


#============================================
def expand_values(pieces) -> list[str]:
	"""Expand the comma separated values of one group.

	3-6 gives 3, 4, 5, 6. A lone letter after a value such as 8a takes the
	same number, so 8a, b, c gives 8a, 8b, 8c.
	"""
	expanded = []
	anchor = None
	for piece in pieces:
		if not piece:
			continue
		if VALUE_RANGE.match(piece):
			numbers = extract_range_number(piece)
			if numbers:
				expanded.extend(numbers)
				anchor = None
				continue
		if anchor is not None and SINGLE_LETTER.match(piece):
			expanded.append(anchor + piece)
			continue
		match = ANCHORED_SUFFIX.match(piece)
		anchor = match.group(1) if match else None
		expanded.append(piece)
	return expanded


#============================================
def text_bold_groups(text, target_groups, lookup) -> tuple[list, dict]:
	"""Bold labels and group values over every line of a text."""
	bold_list = []
	groups = {}
	for line in markdown_lines(text):
		bolds, line_groups = line_bold_groups(line, target_groups, lookup)
		if not bolds and not line_groups:
			continue
		for bold in bolds:
			for normalized in normalize_bold(bold.replace(":", "")):
				if LOWERCASE_ONLY.match(normalized) is None:
					bold_list.append(normalized)
		merge_groups(groups, line_groups)
	return (bold_list, groups)


#============================================
def normalize_bold_groups(bolds, groups: dict) -> list:
	"""Pair the n-th bold label with the n-th value of every group."""
	normalized = []
	for index, bold in enumerate(bolds):
		bold_group = {key: values[index] for key, values in groups.items() if index < len(values)}
		for piece in bold.split(","):
			for label in normalize_bold(piece.strip()):
				normalized.append(TextGroup(dict(bold_group), label))
	return normalized


#============================================
def normalize_bold(bold: str) -> list[str]:
	"""Expand label shorthand: 3-6 gives 3, 4, 5, 6 and 1a,b gives 1a, 1b."""
	expanded = extract_range_number(bold)
	if expanded:
		return expanded
	expanded = extract_alphabet_number(bold)
	if expanded:
		return expanded
	return [bold]


#============================================
def extract_range_number(text: str) -> list[str]:
	match = RANGE_PATTERN.search(text)
	if match is None:
		return []
	begin, end = int(match.group(1)), int(match.group(2))
	if begin >= end:
		return []
	return [str(number) for number in range(begin, end + 1)]


#============================================
def extract_alphabet_number(text: str) -> list[str]:
	if ALPHABET_PATTERN.search(text) is None:
		return []
	pieces = text.split(",")
	anchor = re.search(r"\d+", pieces[0].strip()).group(0)
	pieces[0] = pieces[0].replace(anchor, "")
	return [anchor + piece.strip() for piece in pieces]


#============================================
def group_combinations(groups: dict) -> list[dict]:
	"""Every combination of one value per group, groups in insertion order."""
	if not groups:
		return []
	keys = list(groups)
	return [
		dict(zip(keys, values))
		for values in itertools.product(*(groups[key] for key in keys))
	]


#============================================
def n_atom_combinations(groups: dict) -> list[dict]:
	"""Values paired by position, along the longest value list."""
	if not groups:
		return []
	pilot = max(groups.values(), key=len)
	return [
		{key: values[index] for key, values in groups.items() if index < len(values)}
		for index in range(len(pilot))
	]
