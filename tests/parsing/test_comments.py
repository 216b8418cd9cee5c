"""Tests for path declaration recognition."""

from __future__ import annotations

import pytest

from codextract.parsing.comments import is_valid_path, parse_line


@pytest.mark.parametrize(
    "path",
    [
        "src/a/b.ts",
        "utils/x.py",
        "my-app/components/Button.tsx",
        "a/b_c/d-e.json",
    ],
)
def test_is_valid_path_accepts_relative_paths(path: str) -> None:
    assert is_valid_path(path) is True


@pytest.mark.parametrize(
    "path",
    [
        "../etc/passwd.txt",
        "src/../secret.py",
        "/etc/passwd.txt",
        "src\\win\\file.py",
        "main.py",
        "src/noextension",
        "src/space in/name.py",
    ],
)
def test_is_valid_path_rejects_unsafe_or_malformed_paths(path: str) -> None:
    assert is_valid_path(path) is False


def test_parse_line_ignores_non_comment_lines() -> None:
    parsed = parse_line("const value = 1;")
    assert parsed.is_path_declaration is False
    assert parsed.declared_path is None
    assert parsed.trailing_comment is None


def test_parse_line_recognises_inline_path() -> None:
    parsed = parse_line("   // src/a/b.ts   ")
    assert parsed.is_path_declaration is True
    assert parsed.declared_path == "src/a/b.ts"
    assert parsed.trailing_comment is None


def test_parse_line_captures_description() -> None:
    parsed = parse_line("// src/server/index.ts: Express entrypoint")
    assert parsed.is_path_declaration is True
    assert parsed.declared_path == "src/server/index.ts"
    assert parsed.trailing_comment == "Express entrypoint"


def test_parse_line_recognises_file_directive() -> None:
    parsed = parse_line("// @file utils/x.py")
    assert parsed.is_path_declaration is True
    assert parsed.declared_path == "utils/x.py"


def test_parse_line_recognises_filepath_directive() -> None:
    parsed = parse_line("// filepath: lib/helpers.rb")
    assert parsed.is_path_declaration is True
    assert parsed.declared_path == "lib/helpers.rb"


def test_parse_line_treats_prose_comment_as_plain_comment() -> None:
    parsed = parse_line("//   increment the counter")
    assert parsed.is_path_declaration is False
    assert parsed.trailing_comment == "increment the counter"


def test_parse_line_does_not_promote_traversal_path() -> None:
    parsed = parse_line("// @file ../outside/evil.py")
    assert parsed.is_path_declaration is False
    assert parsed.declared_path is None
    assert parsed.trailing_comment == "@file ../outside/evil.py"


def test_parse_line_requires_declaration_at_start_of_comment() -> None:
    parsed = parse_line("// see https://example.com/docs/page.html")
    assert parsed.is_path_declaration is False


def test_parse_line_keeps_multi_dot_names_as_declarations() -> None:
    parsed = parse_line("// frontend/vite.config.ts")
    assert parsed.is_path_declaration is True
    assert parsed.declared_path == "frontend/vite.config"
