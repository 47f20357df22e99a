from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. CSV string parsing logic.
3. Handling of boolean flags (store_true).
"""

from glslbatch.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_no_arguments_is_valid():
    """Running without arguments leaves every override unset."""
    args = parse_args([])
    overrides = args_to_overrides(args)

    assert overrides["root_path"] is None
    assert overrides["compiler"] is None
    assert "case_sensitive" not in overrides
    assert "extensions" not in overrides


def test_cli_simple_flags_mapping():
    args = parse_args(["--case-sensitive", "--sort", "--dry-run", "--json", "--debug"])
    overrides = args_to_overrides(args)

    assert overrides["case_sensitive"] is True
    assert overrides["sort_files"] is True
    assert args.dry_run is True
    assert args.json_output is True
    assert args.debug is True


def test_cli_csv_list_parsing():
    args = parse_args([
        "--ext", ".vert,.frag,.comp",
        "--exclude", "^build$, ^third_party$",
        "--extra-args=-O,--target-env=vulkan1.2",
    ])
    overrides = args_to_overrides(args)

    assert overrides["extensions"] == [".vert", ".frag", ".comp"]
    assert overrides["exclude_patterns"] == ["^build$", "^third_party$"]
    assert overrides["extra_args"] == ["-O", "--target-env=vulkan1.2"]


def test_cli_path_arguments():
    args = parse_args([
        "-r", "/project/shaders",
        "--compiler", "/sdk/bin/glslc",
        "--output-dir", "/project/spv",
        "--config", "/project/glslbatch.json",
        "--log-file", "/tmp/glslbatch.log",
    ])
    overrides = args_to_overrides(args)

    assert overrides["root_path"] == "/project/shaders"
    assert overrides["compiler"] == "/sdk/bin/glslc"
    assert overrides["output_dir"] == "/project/spv"
    assert args.config_file == "/project/glslbatch.json"
    assert args.log_file == "/tmp/glslbatch.log"
