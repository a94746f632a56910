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

"""Runtime settings read from the environment (prefix CHEMSCAN_)."""

# Standard Library
import functools
import pathlib

# Third Party
import pydantic
import pydantic_settings


#============================================
class ChemScanSettings(pydantic_settings.BaseSettings):
	"""Settings for logging and for the abbreviation tables."""

	log_level: str = pydantic.Field(default="WARNING")
	log_format: str = pydantic.Field(default="console")
	custom_abbreviations_path: pathlib.Path | None = pydantic.Field(default=None)
	custom_superatoms_path: pathlib.Path | None = pydantic.Field(default=None)

	model_config = pydantic_settings.SettingsConfigDict(
		env_prefix="CHEMSCAN_",
		env_file=".env",
		env_file_encoding="utf-8",
		extra="ignore",
	)

	@pydantic.field_validator("log_format")
	@classmethod
	def _check_log_format(cls, value: str) -> str:
		if value not in ("console", "json"):
			raise ValueError("log_format must be 'console' or 'json'")
		return value


#============================================
@functools.lru_cache(maxsize=1)
def get_settings() -> ChemScanSettings:
	"""Load settings once per process."""
	return ChemScanSettings()
