from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates one linear pass of the shader batch compile:
1. Validates configuration and normalizes the root path.
2. Collects shader sources below the root.
3. Resolves the compiler and assembles a single command.
4. Invokes the compiler once (skipped on dry runs).
"""

import logging
import os
from typing import Any, Dict, Optional

from glslbatch.core.pipeline.stages.validator import validate_config
from glslbatch.core.services.compiler import (
    build_invocation,
    invoke_compiler,
    resolve_compiler,
)
from glslbatch.core.services.scanner import collect_shader_files
from glslbatch.domain.pipeline_models import (
    PipelineResult,
    create_error_result,
    create_success_result,
)
from glslbatch.infra.fs import normalize_path, safe_mkdir

logger = logging.getLogger(__name__)


def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        dry_run: bool = False,
) -> PipelineResult:
    """
    Collect every shader below the configured root and compile them in one call.

    The compiler is invoked even when no shader is found; what it does with
    an empty file list is its own business.

    Args:
        config: The configuration dictionary (raw or partial).
        dry_run: If True, assemble the command without running it.

    Returns:
        PipelineResult: Status, collected files, command and exit code.
    """
    logger.debug("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    root_path = normalize_path(cfg.get("root_path", ""), os.getcwd())
    root_exists = os.path.isdir(root_path)
    if not root_exists:
        logger.warning(f"Root directory not found or not a directory: {root_path}")

    # -------------------------------------------------------------------------
    # 2) Discovery
    # -------------------------------------------------------------------------
    shader_files = collect_shader_files(
        root_path,
        extensions=cfg["extensions"],
        exclude_patterns=cfg["exclude_patterns"],
        case_sensitive=cfg["case_sensitive"],
        sort_files=cfg["sort_files"],
    )
    files = list(shader_files)
    if not files:
        logger.warning(f"No shader files matching {cfg['extensions']} under {root_path}")

    # -------------------------------------------------------------------------
    # 3) Command Assembly
    # -------------------------------------------------------------------------
    working_dir: Optional[str] = root_path if root_exists else None
    if cfg["output_dir"]:
        working_dir = normalize_path(cfg["output_dir"], root_path)
        if not dry_run:
            ok, err = safe_mkdir(working_dir)
            if not ok:
                msg = f"Cannot create output directory '{working_dir}': {err}"
                logger.error(msg)
                return create_error_result(msg, cfg, root_path, files=files, working_dir=working_dir)

    compiler = resolve_compiler(cfg["compiler"])
    invocation = build_invocation(
        compiler,
        files,
        extra_args=cfg["extra_args"],
        working_dir=working_dir,
    )

    summary: Dict[str, Any] = {
        "files_found": len(files),
        "extensions": list(cfg["extensions"]),
        "case_sensitive": cfg["case_sensitive"],
    }

    if dry_run:
        logger.info(f"Dry run: {len(files)} shader file(s) would be compiled.")
        return create_success_result(
            cfg,
            root_path,
            files=files,
            command=invocation.argv,
            working_dir=working_dir or "",
            exit_code=None,
            dry_run=True,
            summary_extra=summary,
        )

    # -------------------------------------------------------------------------
    # 4) Invocation
    # -------------------------------------------------------------------------
    outcome = invoke_compiler(invocation)

    if not outcome.ok:
        return create_error_result(
            outcome.error,
            cfg,
            root_path,
            files=files,
            command=invocation.argv,
            working_dir=working_dir or "",
            exit_code=outcome.exit_code,
            summary_extra=summary,
        )

    logger.debug("Pipeline execution finished.")
    return create_success_result(
        cfg,
        root_path,
        files=files,
        command=invocation.argv,
        working_dir=working_dir or "",
        exit_code=outcome.exit_code,
        summary_extra=summary,
    )
