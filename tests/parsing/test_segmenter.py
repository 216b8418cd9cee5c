"""Tests for the block segmenter."""

from __future__ import annotations

import textwrap

from codextract.models import Fragment
from codextract.parsing.segmenter import BlockSegmenter, is_fence_line


def _segment(text: str) -> list[Fragment]:
    return BlockSegmenter().segment(textwrap.dedent(text).lstrip("\n"))


def test_single_block_after_path_comment() -> None:
    fragments = _segment(
        """
        // src/a/b.ts
        ```ts
        const x = 1;
        ```
        """
    )
    assert fragments == [Fragment(declared_path="src/a/b.ts", content="const x = 1;")]


def test_front_matter_before_first_path_is_discarded() -> None:
    fragments = _segment(
        """
        Here is the project layout you asked for.

        ```python
        print("orphan")
        ```

        // app/main.py
        ```python
        print("hello")
        ```
        """
    )
    assert [fragment.declared_path for fragment in fragments] == ["app/main.py"]
    assert fragments[0].content == 'print("hello")'


def test_multiple_paths_yield_fragments_in_document_order() -> None:
    fragments = _segment(
        """
        // src/one.js
        ```js
        export const one = 1;
        ```
        // src/two.js
        ```js
        export const two = 2;
        ```
        """
    )
    assert [(f.declared_path, f.content) for f in fragments] == [
        ("src/one.js", "export const one = 1;"),
        ("src/two.js", "export const two = 2;"),
    ]


def test_description_is_seeded_as_comment() -> None:
    fragments = _segment(
        """
        // src/server.ts: HTTP entrypoint
        ```ts
        listen(8080);
        ```
        """
    )
    assert fragments[0].content == "// HTTP entrypoint\nlisten(8080);"


def test_path_comments_inside_fence_are_content() -> None:
    fragments = _segment(
        """
        // src/routes.ts
        ```ts
        // src/other.ts
        export {};
        ```
        """
    )
    assert len(fragments) == 1
    assert fragments[0].declared_path == "src/routes.ts"
    assert fragments[0].content == "// src/other.ts\nexport {};"


def test_prose_between_fences_stays_with_active_path() -> None:
    fragments = _segment(
        """
        // lib/util.py
        ```python
        def a():
            return 1
        ```
        And a second helper:
        ```python
        def b():
            return 2
        ```
        """
    )
    assert fragments[0].content == (
        "def a():\n    return 1\n\nAnd a second helper:\ndef b():\n    return 2"
    )


def test_redeclared_path_starts_fresh_fragment() -> None:
    fragments = _segment(
        """
        // src/a.ts
        ```ts
        first();
        ```
        // src/a.ts
        ```ts
        second();
        ```
        """
    )
    assert [f.content for f in fragments] == ["first();", "second();"]


def test_path_without_content_is_dropped() -> None:
    fragments = _segment(
        """
        // src/empty.ts

        // src/full.ts
        ```ts
        full();
        ```
        """
    )
    assert [f.declared_path for f in fragments] == ["src/full.ts"]


def test_unterminated_fence_is_discarded() -> None:
    fragments = _segment(
        """
        // src/cut.ts
        ```ts
        partial(
        """
    )
    assert fragments == []


def test_indentation_of_first_code_line_is_preserved() -> None:
    fragments = _segment(
        """
        // src/snippet.py
        ```python
            indented = True
        ```
        """
    )
    assert fragments[0].content == "    indented = True"


def test_segmenter_has_no_state_between_calls() -> None:
    segmenter = BlockSegmenter()
    text = "// src/a.ts\n```\nrun();\n```\n"
    assert segmenter.segment(text) == segmenter.segment(text)
    assert segmenter.segment("no paths here") == []


def test_is_fence_line() -> None:
    assert is_fence_line("```")
    assert is_fence_line("  ```python  ")
    assert is_fence_line("```c++")
    assert not is_fence_line("``` python extra")
    assert not is_fence_line("text ```")


def test_crlf_input_round_trips_without_trailing_carriage_return() -> None:
    fragments = BlockSegmenter().segment("// src/a/b.ts\r\n```ts\r\nconst x = 1;\r\n```\r\n")
    assert fragments == [Fragment(declared_path="src/a/b.ts", content="const x = 1;")]


def test_crlf_inner_line_endings_are_kept() -> None:
    fragments = BlockSegmenter().segment("// src/a.ts\r\n```\r\na();\r\nb();\r\n```\r\n")
    assert fragments[0].content == "a();\r\nb();"
