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

"""Logging setup shared by the command line tool and host programs."""

# Standard Library
import copy
import logging
import logging.config


DEFAULT_LOGGING_CONFIG = {
	"version": 1,
	"disable_existing_loggers": False,
	"formatters": {
		"json": {
			"()": "pythonjsonlogger.json.JsonFormatter",
			"fmt": "%(asctime)s %(levelname)s %(name)s %(message)s",
		},
		"console": {
			"format": "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
		},
	},
	"handlers": {
		"default": {
			"class": "logging.StreamHandler",
			"formatter": "console",
			"stream": "ext://sys.stderr",
		},
	},
	"loggers": {
		"chemscan": {
			"handlers": ["default"],
			"level": "WARNING",
			"propagate": False,
		},
	},
}


#============================================
def build_logging_config(level: str | None = None, log_format: str | None = None) -> dict:
	"""Return a dictConfig mapping for the chemscan logger tree.

	Args:
		level: logging level name for the chemscan logger
		log_format: formatter name, "console" or "json"

	Returns:
		dict: configuration accepted by logging.config.dictConfig
	"""
	config = copy.deepcopy(DEFAULT_LOGGING_CONFIG)
	if level:
		config["loggers"]["chemscan"]["level"] = level.upper()
	if log_format:
		if log_format not in config["formatters"]:
			raise ValueError(f"unknown log format {log_format!r}")
		config["handlers"]["default"]["formatter"] = log_format
	return config


#============================================
def configure_logging(config: dict | None = None, level: str | None = None,
		log_format: str | None = None) -> None:
	"""Configure logging, either from a full dictConfig or from level and format."""
	if config is None:
		config = build_logging_config(level, log_format)
	logging.config.dictConfig(config)
