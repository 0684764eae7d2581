"""Expose the project root on sys.path and provide a fake Go toolchain."""

from __future__ import annotations

import os
import sys

from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

_FAKE_GO = """\
#!/bin/sh
if [ "$1" != "run" ]; then
  echo "unexpected arguments: $*" >&2
  exit 64
fi
if grep -q FAIL "$2"; then
  echo "syntax error" >&2
  exit 2
fi
if grep -q PWD "$2"; then
  pwd -P
  exit 0
fi
echo hi
"""


@pytest.fixture()
def fake_go(tmp_path: Path) -> Path:
    """Return an executable standing in for `go`.

    It prints ``hi``, prints its working directory when the snippet
    mentions ``PWD``, and fails with ``syntax error`` on ``FAIL``.
    """

    script = tmp_path / "bin" / "go"
    script.parent.mkdir()
    script.write_text(_FAKE_GO)
    os.chmod(script, 0o755)
    return script


@pytest.fixture()
def go_doc_lines() -> list[str]:
    return [
        "# Demo",
        "",
        "```go",
        "package main",
        "",
        'import "fmt"',
        "",
        "func main() {",
        '\tfmt.Println("hi")',
        "}",
        "```",
        "",
        "Trailing prose.",
    ]
