from __future__ import annotations

"""
Unit tests for the Shader Compiler Invocation Service.

Verifies command assembly (single -c flag, file order, paths with spaces),
compiler resolution and the outcome mapping of the child process.
"""

import os
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from glslbatch.core.services.compiler import (
    EXIT_NOT_FOUND,
    build_invocation,
    invoke_compiler,
    resolve_compiler,
)
from glslbatch.domain.shader_models import CompileInvocation


# -----------------------------------------------------------------------------
# Command assembly
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("count", [0, 1, 5])
def test_compile_flag_present_exactly_once(count: int) -> None:
    files = [f"/shaders/s{i}.frag" for i in range(count)]

    inv = build_invocation("glslc", files)

    assert inv.argv.count("-c") == 1
    assert inv.argv[:2] == ["glslc", "-c"]
    assert inv.argv[2:] == files
    assert len(inv.files) == count


def test_empty_file_list_still_builds_command() -> None:
    inv = build_invocation("glslc", [])

    assert inv.argv == ["glslc", "-c"]
    assert inv.files == ()


def test_extra_args_follow_compile_flag() -> None:
    inv = build_invocation("glslc", ["/s/a.vert"], extra_args=["-O", "--target-env=vulkan1.2"])

    assert inv.argv == ["glslc", "-c", "-O", "--target-env=vulkan1.2", "/s/a.vert"]


def test_duplicate_compile_flag_in_extra_args_is_dropped() -> None:
    inv = build_invocation("glslc", ["/s/a.vert"], extra_args=["-c", "-O"])

    assert inv.argv.count("-c") == 1
    assert inv.argv == ["glslc", "-c", "-O", "/s/a.vert"]


def test_paths_with_spaces_stay_single_arguments() -> None:
    path = "/my shaders/light pass.frag"

    inv = build_invocation("glslc", [path])

    assert inv.argv[-1] == path
    assert len(inv.argv) == 3


# -----------------------------------------------------------------------------
# Compiler resolution
# -----------------------------------------------------------------------------

def test_resolve_prefers_search_path() -> None:
    with patch("glslbatch.core.services.compiler.shutil.which", return_value="/usr/bin/glslc"):
        assert resolve_compiler("glslc") == "/usr/bin/glslc"


def test_resolve_keeps_explicit_path() -> None:
    with patch("glslbatch.core.services.compiler.shutil.which") as mock_which:
        assert resolve_compiler("/opt/sdk/glslc") == "/opt/sdk/glslc"
        mock_which.assert_not_called()


def test_resolve_falls_back_to_vulkan_sdk(tmp_path: Path, monkeypatch) -> None:
    exe_name = "glslc.exe" if os.name == "nt" else "glslc"
    sdk_bin = tmp_path / "bin"
    sdk_bin.mkdir()
    (sdk_bin / exe_name).write_text("", encoding="utf-8")
    monkeypatch.setenv("VULKAN_SDK", str(tmp_path))

    with patch("glslbatch.core.services.compiler.shutil.which", return_value=None):
        resolved = resolve_compiler("glslc")

    assert os.path.normcase(resolved) == os.path.normcase(str(sdk_bin / exe_name))


def test_resolve_returns_bare_name_when_missing(monkeypatch) -> None:
    monkeypatch.delenv("VULKAN_SDK", raising=False)

    with patch("glslbatch.core.services.compiler.shutil.which", return_value=None):
        assert resolve_compiler("glslc") == "glslc"


# -----------------------------------------------------------------------------
# Invocation
# -----------------------------------------------------------------------------

def test_invoke_runs_single_process_without_shell() -> None:
    inv = build_invocation("glslc", ["/s/a.vert", "/s/b.frag"], working_dir="/s")

    with patch("glslbatch.core.services.compiler.subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=0)
        result = invoke_compiler(inv)

    mock_run.assert_called_once_with(
        ["glslc", "-c", "/s/a.vert", "/s/b.frag"], cwd="/s", check=False
    )
    assert result.ok is True
    assert result.exit_code == 0


def test_invoke_reports_nonzero_exit() -> None:
    inv = build_invocation("glslc", ["/s/broken.frag"])

    with patch("glslbatch.core.services.compiler.subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=2)
        result = invoke_compiler(inv)

    assert result.launched is True
    assert result.ok is False
    assert result.exit_code == 2
    assert "status 2" in result.error


def test_invoke_missing_compiler() -> None:
    inv = CompileInvocation(compiler="nope", argv=["nope", "-c"])

    with patch(
        "glslbatch.core.services.compiler.subprocess.run",
        side_effect=FileNotFoundError(2, "No such file or directory"),
    ):
        result = invoke_compiler(inv)

    assert result.launched is False
    assert result.exit_code == EXIT_NOT_FOUND
    assert "nope" in result.error


def test_invoke_does_not_capture_output() -> None:
    inv = build_invocation("glslc", [])

    with patch("glslbatch.core.services.compiler.subprocess.run") as mock_run:
        mock_run.return_value = subprocess.CompletedProcess(args=inv.argv, returncode=0)
        invoke_compiler(inv)

    kwargs = mock_run.call_args.kwargs
    assert "stdout" not in kwargs
    assert "capture_output" not in kwargs
