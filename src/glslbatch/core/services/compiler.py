from __future__ import annotations

"""
Shader Compiler Invocation Service.

Resolves the external compiler executable, assembles a single argument
vector for the whole shader batch and runs it as one blocking child
process. The compiler's own output is not captured or interpreted.
"""

import logging
import os
import shutil
import subprocess
from typing import Iterable, List, Optional

from glslbatch.domain.config import COMPILE_ONLY_FLAG
from glslbatch.domain.shader_models import CompileInvocation, CompileResult

logger = logging.getLogger(__name__)

# Conventional shell status for "command not found"
EXIT_NOT_FOUND = 127


# ==============================================================================
# PUBLIC API
# ==============================================================================

def resolve_compiler(name: str) -> str:
    """
    Locate the compiler executable.

    Lookup order: explicit paths are returned as-is, then the search path,
    then the Vulkan SDK install (``$VULKAN_SDK/bin`` or ``$VULKAN_SDK/Bin``).
    When nothing is found the bare name is returned so that the failure
    surfaces when the process is launched.

    Args:
        name: Executable name (``glslc``) or a path to it.

    Returns:
        str: Path or name to launch.
    """
    if os.path.dirname(name):
        return name

    found = shutil.which(name)
    if found:
        return found

    sdk_path = os.environ.get("VULKAN_SDK")
    if sdk_path:
        exe_name = name + ".exe" if os.name == "nt" and not name.endswith(".exe") else name
        for bin_dir in ("bin", "Bin"):
            candidate = os.path.join(sdk_path, bin_dir, exe_name)
            if os.path.isfile(candidate):
                logger.debug(f"Compiler resolved from VULKAN_SDK: {candidate}")
                return candidate

    logger.debug(f"Compiler '{name}' not found on PATH or in VULKAN_SDK.")
    return name


def build_invocation(
        compiler: str,
        files: Iterable[str],
        extra_args: Optional[List[str]] = None,
        working_dir: Optional[str] = None,
) -> CompileInvocation:
    """
    Assemble the compile-only command for a batch of shader files.

    The resulting vector is ``[compiler, "-c", *extra_args, *files]``.
    Each path is a single argument regardless of embedded spaces. A
    ``-c`` repeated in ``extra_args`` is dropped so the flag appears once.

    Args:
        compiler: Executable to run.
        files: Shader paths in the order they must be passed.
        extra_args: Additional compiler flags.
        working_dir: Directory the compiler will run in.

    Returns:
        CompileInvocation: The assembled command.
    """
    file_args = tuple(files)
    flags = [a for a in (extra_args or []) if a != COMPILE_ONLY_FLAG]

    argv: List[str] = [compiler, COMPILE_ONLY_FLAG]
    argv.extend(flags)
    argv.extend(file_args)

    return CompileInvocation(
        compiler=compiler,
        argv=argv,
        files=file_args,
        working_dir=working_dir,
    )


def invoke_compiler(invocation: CompileInvocation) -> CompileResult:
    """
    Run the compiler once and wait for it to exit.

    stdout and stderr are inherited so diagnostics reach the terminal
    unchanged. No retry is attempted.

    Args:
        invocation: The command to execute.

    Returns:
        CompileResult: Launch status and exit code.
    """
    logger.info(
        f"Invoking {invocation.compiler} on {len(invocation.files)} shader file(s)."
    )
    logger.debug(f"Command: {subprocess.list2cmdline(invocation.argv)}")

    try:
        completed = subprocess.run(
            invocation.argv,
            cwd=invocation.working_dir,
            check=False,
        )
    except (FileNotFoundError, PermissionError) as e:
        msg = f"Cannot launch compiler '{invocation.compiler}': {e}"
        logger.error(msg)
        return CompileResult(launched=False, exit_code=EXIT_NOT_FOUND, error=msg)

    if completed.returncode != 0:
        msg = f"Compiler exited with status {completed.returncode}"
        logger.warning(msg)
        return CompileResult(launched=True, exit_code=completed.returncode, error=msg)

    return CompileResult(launched=True, exit_code=0)
