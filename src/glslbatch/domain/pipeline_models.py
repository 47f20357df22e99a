from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result structure and factory functions used to communicate
execution outcomes between the pipeline engine and the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result object of a complete collect-and-compile run.

    Attributes:
        ok: True when the compiler ran and exited with status 0
            (or, on a dry run, when the command was assembled).
        error: Descriptive message in case of failure.
        root_path: Normalized root directory that was traversed.
        compiler: Compiler executable used for the invocation.
        files: Collected shader paths in invocation order.
        command: Full argument vector passed to the compiler.
        working_dir: Directory the compiler ran in.
        exit_code: Compiler exit status, None if it never ran.
        dry_run: Whether the invocation was skipped.
        summary: Execution statistics.
    """
    ok: bool
    error: str

    root_path: str
    compiler: str

    files: List[str] = field(default_factory=list)
    command: List[str] = field(default_factory=list)
    working_dir: str = ""

    exit_code: Optional[int] = None
    dry_run: bool = False

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        root_path: str,
        files: Optional[List[str]] = None,
        command: Optional[List[str]] = None,
        working_dir: str = "",
        exit_code: Optional[int] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> PipelineResult:
    """
    Create a failed pipeline result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        root_path: The traversed root directory.
        files: Shader paths collected before the failure.
        command: Compiler argument vector, if it was assembled.
        working_dir: Compiler working directory, if resolved.
        exit_code: Compiler exit status, if it ran.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        PipelineResult: An immutable error result object.
    """
    return PipelineResult(
        ok=False,
        error=error,
        root_path=root_path,
        compiler=cfg.get("compiler", ""),
        files=list(files or []),
        command=list(command or []),
        working_dir=working_dir,
        exit_code=exit_code,
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        root_path: str,
        files: List[str],
        command: List[str],
        working_dir: str,
        exit_code: Optional[int],
        dry_run: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None
) -> PipelineResult:
    """
    Create a successful pipeline result instance.

    Args:
        cfg: Final configuration used during execution.
        root_path: Normalized root directory.
        files: Shader paths passed to the compiler.
        command: Full compiler argument vector.
        working_dir: Compiler working directory.
        exit_code: Compiler exit status (None on dry runs).
        dry_run: Whether the invocation was skipped.
        summary_extra: Final execution metrics.

    Returns:
        PipelineResult: An immutable success result object.
    """
    return PipelineResult(
        ok=True,
        error="",
        root_path=root_path,
        compiler=cfg.get("compiler", ""),
        files=list(files),
        command=list(command),
        working_dir=working_dir,
        exit_code=exit_code,
        dry_run=dry_run,
        summary=summary_extra or {},
    )
