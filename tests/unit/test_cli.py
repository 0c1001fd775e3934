#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_cli.py
"""Unit tests for the command-line interface and its configuration files."""

import argparse
import io
import json
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

from html2plain.cli import (
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
    main,
)
from html2plain.cli.config import (
    build_render_options,
    discover_config_file,
    load_config_file,
    merge_configs,
)
from html2plain.exceptions import (
    DependencyError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from html2plain.options import PrettyTablesOptions, TableAlignment


def _stdin(monkeypatch: pytest.MonkeyPatch, data: bytes) -> None:
    monkeypatch.setattr(sys, "stdin", SimpleNamespace(buffer=io.BytesIO(data)))


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodes:
    """Tests for mapping exceptions to exit codes."""

    @pytest.mark.parametrize(
        "exception,code",
        [
            (DependencyError("html", [("lxml", "")]), EXIT_DEPENDENCY_ERROR),
            (ImportError("x"), EXIT_DEPENDENCY_ERROR),
            (ValidationError("bad"), EXIT_VALIDATION_ERROR),
            (argparse.ArgumentTypeError("bad"), EXIT_VALIDATION_ERROR),
            (OutputWriteError("out.txt"), EXIT_FILE_ERROR),
            (FileNotFoundError("gone"), EXIT_FILE_ERROR),
            (ParsingError("bad html"), EXIT_PARSING_ERROR),
            (RenderingError("too deep"), EXIT_RENDERING_ERROR),
            (RuntimeError("boom"), EXIT_ERROR),
        ],
    )
    def test_exit_code_mapping(self, exception: Exception, code: int) -> None:
        """Test that each error kind has its own exit code."""
        assert get_exit_code_for_exception(exception) == code


@pytest.mark.unit
@pytest.mark.cli
class TestParser:
    """Tests for argument parsing."""

    def test_defaults_leave_options_unset(self) -> None:
        """Test that absent flags parse to None so config values survive."""
        args = create_parser().parse_args([])
        assert args.input == "-"
        assert args.pretty_tables is None
        assert args.text_only is None
        assert args.width is None
        assert args.table_borders is None

    def test_negative_flags(self) -> None:
        """Test that --table-no-* flags store False."""
        args = create_parser().parse_args(["--table-no-borders", "--table-no-wrap", "--table-no-auto-format-header"])
        assert args.table_borders is False
        assert args.table_auto_wrap_text is False
        assert args.table_auto_format_header is False

    def test_table_frame_flags(self) -> None:
        """Test the header rule, reflow, line terminator and per-side border flags."""
        args = create_parser().parse_args(
            ["--table-no-header-line", "--table-no-reflow", "--table-crlf", "--table-no-border-left", "--table-no-border-top"]
        )
        assert args.table_header_line is False
        assert args.table_reflow_during_auto_wrap is False
        assert args.table_newline == "\r\n"
        assert args.table_border_left is False
        assert args.table_border_top is False
        assert args.table_border_right is None
        assert args.table_border_bottom is None

    def test_column_alignment_list(self) -> None:
        """Test parsing a comma-separated alignment list."""
        args = create_parser().parse_args(["--table-column-alignment", "Left, right"])
        assert args.table_column_alignment == ["left", "right"]

    def test_invalid_column_alignment(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that unknown alignments are rejected by the parser."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--table-column-alignment", "left,sideways"])
        assert "sideways" in capsys.readouterr().err

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that --version prints the program name."""
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.startswith("html2plain ")


@pytest.mark.unit
@pytest.mark.cli
class TestMain:
    """Tests for running the command."""

    def test_stdin_to_stdout(
        self, isolated_cwd: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test rendering standard input to standard output."""
        _stdin(monkeypatch, b"<h1>Hi</h1>")
        assert main([]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "**\nHi\n**\n"

    def test_file_to_file(self, isolated_cwd: Path) -> None:
        """Test rendering a file into an output file."""
        source = isolated_cwd / "in.html"
        source.write_text('<p>Go <a href="https://example.com">here</a></p>', encoding="utf-8")
        target = isolated_cwd / "out.txt"
        assert main([str(source), "--out", str(target), "--text-only", "--omit-links"]) == EXIT_SUCCESS
        assert target.read_text(encoding="utf-8") == "Go here\n"

    def test_table_frame_options_reach_renderer(
        self, isolated_cwd: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that table frame flags change the drawn table."""
        _stdin(monkeypatch, b"<table><tr><th>a</th></tr><tr><td>1</td></tr></table>")
        argv = ["--pretty-tables", "--table-no-header-line", "--table-no-border-top"]
        assert main(argv) == EXIT_SUCCESS
        assert capsys.readouterr().out == "| A |\n| 1 |\n+---+\n"

    def test_width_flag(
        self, isolated_cwd: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that --width controls wrapping."""
        _stdin(monkeypatch, b"<p>aaa bbb ccc</p>")
        assert main(["--width", "7"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "aaa bbb\nccc\n"

    def test_pretty_table_flags(
        self, isolated_cwd: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that table flags reach the table renderer."""
        _stdin(monkeypatch, b"<table><tr><td>x</td></tr></table>")
        assert main(["--pretty-tables", "--table-center-separator", "o"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "o---o\n| x |\no---o\n"

    def test_missing_input_file(self, isolated_cwd: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a missing input file is a file error."""
        assert main([str(isolated_cwd / "missing.html")]) == EXIT_FILE_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_unwritable_output(self, isolated_cwd: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an unwritable output path is a file error."""
        _stdin(monkeypatch, b"<p>x</p>")
        assert main(["--out", str(isolated_cwd / "nope" / "out.txt")]) == EXIT_FILE_ERROR

    def test_invalid_option_value(self, isolated_cwd: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an invalid option value is a validation error."""
        _stdin(monkeypatch, b"<p>x</p>")
        assert main(["--width", "0"]) == EXIT_VALIDATION_ERROR
        assert main(["--table-row-separator", "=="]) == EXIT_VALIDATION_ERROR

    def test_explicit_config_file(
        self, isolated_cwd: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that --config supplies options and flags override them."""
        config = isolated_cwd / "settings.json"
        config.write_text(json.dumps({"text_only": True, "line_width": 7}), encoding="utf-8")
        _stdin(monkeypatch, b"<p>aaa <b>bbb</b> ccc</p>")
        assert main(["--config", str(config), "--width", "40"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "aaa bbb ccc\n"

    def test_config_from_environment(
        self, isolated_cwd: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that HTML2PLAIN_CONFIG names a config file."""
        config = isolated_cwd / "settings.yaml"
        config.write_text("text_only: true\n", encoding="utf-8")
        monkeypatch.setenv("HTML2PLAIN_CONFIG", str(config))
        _stdin(monkeypatch, b"<b>x</b>")
        assert main([]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "x\n"

    def test_discovered_config(
        self, isolated_cwd: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a config file in the working directory is picked up."""
        (isolated_cwd / ".html2plain.toml").write_text("text_only = true\n", encoding="utf-8")
        _stdin(monkeypatch, b"<b>x</b>")
        assert main([]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "x\n"

    def test_bad_config_file(self, isolated_cwd: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that unknown keys in a config file are validation errors."""
        config = isolated_cwd / "settings.json"
        config.write_text(json.dumps({"colour": "red"}), encoding="utf-8")
        _stdin(monkeypatch, b"<p>x</p>")
        assert main(["--config", str(config)]) == EXIT_VALIDATION_ERROR


@pytest.mark.unit
@pytest.mark.cli
class TestConfigFiles:
    """Tests for configuration file loading."""

    def test_load_toml_with_table_options(self, tmp_path: Path) -> None:
        """Test loading a TOML file with a nested table section."""
        path = tmp_path / ".html2plain.toml"
        path.write_text(
            'pretty_tables = true\n\n[pretty_tables_options]\nrow_line = true\nalignment = "left"\n',
            encoding="utf-8",
        )
        config = load_config_file(path)
        assert config == {"pretty_tables": True, "pretty_tables_options": {"row_line": True, "alignment": "left"}}

    def test_load_pyproject_section(self, tmp_path: Path) -> None:
        """Test that pyproject.toml contributes its [tool.html2plain] table."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n\n[tool.html2plain]\nline_width = 60\n', encoding="utf-8")
        assert load_config_file(path) == {"line_width": 60}

    def test_empty_yaml(self, tmp_path: Path) -> None:
        """Test that an empty YAML file is an empty config."""
        path = tmp_path / "c.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config_file(path) == {}

    @pytest.mark.parametrize(
        "name,content",
        [
            ("c.json", "{not json"),
            ("c.json", "[1, 2]"),
            ("c.ini", "[x]"),
            ("c.toml", "= broken"),
        ],
    )
    def test_invalid_files(self, tmp_path: Path, name: str, content: str) -> None:
        """Test that unreadable or malformed files raise ArgumentTypeError."""
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        with pytest.raises(argparse.ArgumentTypeError):
            load_config_file(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing config file raises ArgumentTypeError."""
        with pytest.raises(argparse.ArgumentTypeError, match="does not exist"):
            load_config_file(tmp_path / "nope.toml")

    def test_discovery_order(self, tmp_path: Path) -> None:
        """Test that dedicated config files win over pyproject.toml."""
        (tmp_path / "pyproject.toml").write_text("[tool.html2plain]\ntext_only = true\n", encoding="utf-8")
        assert discover_config_file(tmp_path) == tmp_path / "pyproject.toml"
        (tmp_path / ".html2plain.yaml").write_text("text_only: true\n", encoding="utf-8")
        assert discover_config_file(tmp_path) == tmp_path / ".html2plain.yaml"

    def test_pyproject_without_section_is_ignored(self, tmp_path: Path) -> None:
        """Test that a pyproject.toml with no html2plain table is not a config file."""
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
        assert discover_config_file(tmp_path) is None

    def test_merge_is_recursive(self) -> None:
        """Test that nested table options merge key by key."""
        merged = merge_configs(
            {"text_only": True, "pretty_tables_options": {"row_line": True, "borders": True}},
            {"pretty_tables_options": {"borders": False}},
        )
        assert merged == {"text_only": True, "pretty_tables_options": {"row_line": True, "borders": False}}

    def test_build_render_options(self) -> None:
        """Test building options, including nested table style."""
        options = build_render_options(
            {
                "pretty_tables": True,
                "line_width": 60,
                "pretty_tables_options": {"column_alignment": ["left", "right"], "row_line": True},
            }
        )
        assert options.line_width == 60
        assert options.pretty_tables_options == PrettyTablesOptions(
            column_alignment=(TableAlignment.LEFT, TableAlignment.RIGHT), row_line=True
        )

    @pytest.mark.parametrize(
        "config",
        [
            {"colour": "red"},
            {"pretty_tables_options": {"colour": "red"}},
            {"pretty_tables_options": "fancy"},
            {"line_width": -5},
            {"pretty_tables_options": {"alignment": "sideways"}},
        ],
    )
    def test_build_render_options_rejects_bad_config(self, config: dict) -> None:
        """Test that unknown keys and invalid values raise ValidationError."""
        with pytest.raises(ValidationError):
            build_render_options(config)
