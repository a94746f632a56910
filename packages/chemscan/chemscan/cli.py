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

"""Command line front end: print the reactions of drawings as JSON."""

# Standard Library
import argparse
import json
import logging
import sys

# local repo modules
from . import errors
from . import parse
from .logging_config import configure_logging
from .lookup import default_lookup
from .settings import get_settings


logger = logging.getLogger(__name__)


#============================================
def parse_args(argv=None):
	"""Parse command-line arguments."""
	parser = argparse.ArgumentParser(
		prog="chemscan",
		description="Read reaction schemes from ChemDraw CDX or CDXML files.",
	)
	parser.add_argument(
		"files",
		nargs="+",
		help="CDX or CDXML files to read.",
	)
	parser.add_argument(
		"-m",
		"--molecules",
		dest="molecules",
		action="store_true",
		help="Print every molecule instead of the reactions.",
	)
	parser.add_argument(
		"-v",
		"--verbose",
		dest="verbose",
		action="store_true",
		help="Log progress at debug level.",
	)
	parser.add_argument(
		"--log-format",
		dest="log_format",
		choices=("console", "json"),
		default=None,
		help="Log formatter, overrides CHEMSCAN_LOG_FORMAT.",
	)
	return parser.parse_args(argv)


#============================================
def document_payload(document, molecules_only: bool) -> dict:
	if molecules_only or not document.reactions:
		return {
			"source": document.source,
			"molecules": [molecule.to_dict() for molecule in document.molecules],
		}
	return {
		"source": document.source,
		"reactions": [reaction.to_dict() for reaction in document.reactions],
	}


#============================================
def main(argv=None) -> int:
	args = parse_args(argv)
	settings = get_settings()
	level = "DEBUG" if args.verbose else settings.log_level
	configure_logging(level=level, log_format=args.log_format or settings.log_format)
	lookup = default_lookup()
	status = 0
	payloads = []
	for path in args.files:
		try:
			document = parse(path, lookup)
		except FileNotFoundError:
			logger.error("no such file: %s", path)
			status = 1
			continue
		except errors.ChemScanError as error:
			logger.error("cannot read %s: %s", path, error)
			status = 1
			continue
		payloads.append(document_payload(document, args.molecules))
	json.dump(payloads, sys.stdout, indent=2)
	sys.stdout.write("\n")
	return status


if __name__ == "__main__":
	sys.exit(main())
