from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the pathtree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="pathtree",
        description="Build a site map tree from observed request URLs.",
    )

    # --- Input ---
    p.add_argument(
        "urls",
        nargs="*",
        help="Observed URLs. Read from stdin when neither URLs nor files are given.",
    )
    p.add_argument(
        "-f", "--file",
        dest="input_files",
        action="append",
        default=None,
        help="File with one URL per line ('-' for stdin). Repeatable.",
    )

    # --- Output ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit the structure as JSON instead of an ASCII tree.",
    )
    p.add_argument(
        "--indent",
        dest="json_indent",
        type=int,
        default=None,
        help="JSON indentation (0 for compact output).",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "-c", "--config",
        dest="config_path",
        default="",
        help="JSON configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--synchronized",
        action="store_true",
        help="Use the lock-guarded tree implementation.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options the user actually set are returned, so file-based
    configuration is not clobbered by argparse defaults.
    """
    overrides: Dict[str, Any] = {}

    if args.input_files:
        overrides["input_files"] = list(args.input_files)
    if args.json_output:
        overrides["output_format"] = "json"
    if args.json_indent is not None:
        overrides["json_indent"] = args.json_indent
    if args.synchronized:
        overrides["synchronized"] = True
    if args.log_file:
        overrides["log_file"] = args.log_file
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
