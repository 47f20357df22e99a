from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed argparse
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the glslbatch CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="glslbatch",
        description=(
            "Find every vertex/fragment shader below a directory and compile "
            "them with a single 'glslc -c' call."
        ),
    )

    # --- Discovery ---
    p.add_argument(
        "-r", "--root",
        dest="root_path",
        default=None,
        help=(
            "Directory to search recursively. Defaults to the current working "
            "directory, not the directory this tool is installed in (the old "
            "batch wrapper always searched its own directory)."
        ),
    )
    p.add_argument(
        "--ext",
        dest="extensions",
        default=None,
        help="Comma-separated shader extensions (default: .vert,.frag).",
    )
    p.add_argument(
        "--exclude",
        dest="exclude_patterns",
        default=None,
        help="Comma-separated regexes; matching directories and files are skipped.",
    )
    p.add_argument(
        "--case-sensitive",
        action="store_true",
        help="Match extensions exactly instead of ignoring case.",
    )
    p.add_argument(
        "--sort",
        action="store_true",
        help="Sort the collected files by path before compiling.",
    )

    # --- Compiler ---
    p.add_argument(
        "--compiler",
        dest="compiler",
        default=None,
        help="Compiler executable name or path (default: glslc).",
    )
    p.add_argument(
        "--extra-args",
        dest="extra_args",
        default=None,
        help="Comma-separated extra compiler flags, e.g. --extra-args=-O,--target-env=vulkan1.2",
    )
    p.add_argument(
        "--output-dir",
        dest="output_dir",
        default=None,
        help="Directory the compiler runs in; compiled files land here.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="Read configuration from this JSON file.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore any persisted configuration.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Write the effective configuration to --config (or the user config file) and exit.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the compiler command without running it.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["root_path"] = args.root_path
    overrides["compiler"] = args.compiler
    overrides["output_dir"] = args.output_dir

    if args.extensions:
        overrides["extensions"] = _split_csv(args.extensions)
    if args.exclude_patterns:
        overrides["exclude_patterns"] = _split_csv(args.exclude_patterns)
    if args.extra_args:
        overrides["extra_args"] = _split_csv(args.extra_args)

    if args.case_sensitive:
        overrides["case_sensitive"] = True
    if args.sort:
        overrides["sort_files"] = True

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
