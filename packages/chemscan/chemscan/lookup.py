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

"""Read-only abbreviation and superatom lookup service."""

# Standard Library
import functools
import logging
import pathlib
import types

# Third Party
import yaml

# local repo modules
from . import settings as settings_module


logger = logging.getLogger(__name__)

DATA_DIR = pathlib.Path(__file__).resolve().parent / "data"


#============================================
def load_table(path: pathlib.Path) -> dict[str, str]:
	"""Load one name to SMILES mapping from a YAML file.

	Args:
		path: YAML file holding a flat mapping

	Returns:
		dict: names mapped to SMILES strings, empty for an empty file
	"""
	with open(path, "r", encoding="utf-8") as handle:
		data = yaml.safe_load(handle)
	if data is None:
		return {}
	if not isinstance(data, dict):
		raise ValueError(f"{path}: expected a mapping of name to SMILES")
	return {str(name): str(smiles) for name, smiles in data.items()}


#============================================
class LookupService:
	"""Name to structure tables for reagent abbreviations and superatoms.

	Abbreviations are matched case insensitively, superatoms exactly.
	A name that is a superatom is never reported as an abbreviation.
	"""

	def __init__(self, abbreviations: dict, superatoms: dict):
		self._abbreviations = types.MappingProxyType(dict(abbreviations))
		self._abbreviations_lower = types.MappingProxyType(
			{name.lower(): smiles for name, smiles in abbreviations.items()}
		)
		self._superatoms = types.MappingProxyType(dict(superatoms))

	#============================================
	@classmethod
	def from_files(cls, abbreviation_paths, superatom_paths) -> "LookupService":
		abbreviations = {}
		for path in abbreviation_paths:
			abbreviations.update(load_table(path))
		superatoms = {}
		for path in superatom_paths:
			superatoms.update(load_table(path))
		logger.debug(
			"loaded %d abbreviations and %d superatoms",
			len(abbreviations), len(superatoms),
		)
		return cls(abbreviations, superatoms)

	#============================================
	@classmethod
	def from_settings(cls, app_settings=None) -> "LookupService":
		"""Build the packaged tables plus the custom files named in settings."""
		if app_settings is None:
			app_settings = settings_module.get_settings()
		abbreviation_paths = [DATA_DIR / "abbreviations.yaml", DATA_DIR / "solvents.yaml"]
		superatom_paths = [DATA_DIR / "superatoms.yaml"]
		if app_settings.custom_abbreviations_path:
			abbreviation_paths.append(app_settings.custom_abbreviations_path)
		if app_settings.custom_superatoms_path:
			superatom_paths.append(app_settings.custom_superatoms_path)
		return cls.from_files(abbreviation_paths, superatom_paths)

	@property
	def abbreviations(self):
		return self._abbreviations

	@property
	def superatoms(self):
		return self._superatoms

	def lookup_superatom(self, name: str) -> str | None:
		return self._superatoms.get(name)

	def lookup_abbreviation(self, name: str) -> str | None:
		if name in self._superatoms:
			return None
		return self._abbreviations_lower.get(name.lower())

	def is_superatom(self, name: str) -> bool:
		return name in self._superatoms

	def is_abbreviation(self, name: str) -> bool:
		return self.lookup_abbreviation(name) is not None

	def multi_word_abbreviations(self) -> list[str]:
		"""Abbreviation names that contain a space, in table order."""
		return [name for name in self._abbreviations if " " in name]


#============================================
@functools.lru_cache(maxsize=1)
def default_lookup() -> LookupService:
	"""Packaged tables, built once per process and shared read-only."""
	return LookupService.from_settings()
