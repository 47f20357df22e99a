from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of configuration
sources (defaults, persisted JSON, command-line overrides), pipeline
execution, and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from glslbatch.core.pipeline.engine import run_pipeline
from glslbatch.core.pipeline.stages.validator import validate_config
from glslbatch.domain.config import get_default_config, load_config, save_config
from glslbatch.domain.pipeline_models import PipelineResult
from glslbatch.infra.logging import LoggingConfig, configure_logging, get_logger
from glslbatch.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: The compiler's exit code when it ran, 127 when it could not be
             launched, 1 on unexpected failure, 130 when interrupted.
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration...")

    # 3. Resolve base configuration
    if args.use_defaults:
        base_conf = get_default_config()
    else:
        base_conf = load_config(args.config_file)

    # 4. Merge command-line overrides and validate
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(base_conf, overrides)

    clean_conf, warnings = validate_config(raw_conf)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    if args.save_config:
        saved = save_config(clean_conf, args.config_file)
        if not saved:
            print("ERROR: configuration could not be saved.", file=sys.stderr)
            return 1
        print(f"Configuration saved to {saved}")
        return 0

    # 5. Pipeline execution phase
    try:
        result = run_pipeline(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except Exception as e:
        logger.critical(f"Pipeline failure: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return _exit_code_for(result)

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known, non-None override values into the base configuration.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    keys_to_merge = [
        "root_path", "compiler", "output_dir",
        "extensions", "exclude_patterns", "extra_args",
        "case_sensitive", "sort_files",
    ]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


def _exit_code_for(result: PipelineResult) -> int:
    if result.exit_code is not None:
        return result.exit_code
    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: PipelineResult) -> None:
    """
    Print the execution result to the terminal.

    Compiler diagnostics have already been streamed by the child process;
    this only reports what was compiled and how it ended.

    Args:
        result: The pipeline result to render.
    """
    if result.dry_run:
        print(" ".join(_quote(a) for a in result.command))
        return

    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    print(f"Compiled {len(result.files)} shader file(s) from {result.root_path}")


def _quote(arg: str) -> str:
    return f'"{arg}"' if " " in arg else arg

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
