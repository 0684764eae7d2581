import subprocess
import sys

from pathlib import Path

import pytest

from mdgoplay.configuration import GoPlaySettings, RuntimeSettings
from mdgoplay.document import Cursor, EditorContext, TextDocument
from mdgoplay.exceptions import ExecutionError
from mdgoplay.languages import GoLanguagePlugin
from mdgoplay.logging import OutputLog
from mdgoplay.notifications import RecordingNotifier
from mdgoplay.orchestrator import MarkdownGoPlay, resolve_workdir

posix_only = pytest.mark.skipif(
    sys.platform == "win32", reason="fake go binary is a POSIX shell script"
)


class StubRunner:
    def __init__(self, play=None, output="hi\n", error=None):
        self.play = play
        self.output = output
        self.error = error
        self.calls = []
        self.states = []

    def run(self, code, cwd):
        self.calls.append((code, cwd))
        if self.play is not None:
            self.states.append(self.play.state)
        if self.error is not None:
            raise self.error
        return self.output


def _play(runner=None, settings=None):
    notifier = RecordingNotifier()
    play = MarkdownGoPlay(
        settings or GoPlaySettings(), notifier=notifier, runner=runner
    )
    return play, notifier


def test_no_active_editor_is_a_noop():
    runner = StubRunner()
    play, notifier = _play(runner)
    assert play.run(None) == "skipped"
    assert runner.calls == []
    assert notifier.errors == []


def test_successful_run_splices_output(tmp_path: Path):
    doc = TextDocument.from_lines(
        ["```go", 'fmt.Println("hi")', "```"], path=tmp_path / "doc.md"
    )
    runner = StubRunner()
    play, notifier = _play(runner)
    runner.play = play

    outcome = play.run(EditorContext(doc, Cursor(1, 3)))

    assert outcome == "spliced"
    assert runner.calls == [('fmt.Println("hi")\n', tmp_path.resolve())]
    assert runner.states == ["running"]
    assert play.state == "idle"
    assert doc.lines == [
        "```go", 'fmt.Println("hi")', "```", "```", "hi", "", "```", "",
    ]
    assert notifier.errors == []


def test_missing_block_notifies_and_skips_runner():
    doc = TextDocument.from_lines(["no code here", "```"])
    runner = StubRunner()
    play, notifier = _play(runner)
    original = doc.text

    assert play.run(EditorContext(doc, Cursor(0))) == "not_found"
    assert notifier.errors == ["Not found go code section"]
    assert runner.calls == []
    assert doc.text == original
    assert play.state == "idle"


def test_execution_failure_leaves_document_untouched():
    doc = TextDocument.from_lines(["```go", "broken", "```"])
    runner = StubRunner(error=ExecutionError("syntax error"))
    play, notifier = _play(runner)
    original = doc.text

    assert play.run(EditorContext(doc, Cursor(1))) == "failed"
    assert doc.text == original
    assert notifier.errors == []
    assert play.state == "idle"


def test_configured_workdir_overrides_document_directory(
    tmp_path: Path, monkeypatch
):
    seen = {}

    def fake_run(argv, **kwargs):
        seen["cwd"] = kwargs["cwd"]
        return subprocess.CompletedProcess(argv, 0, stdout="ok", stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)
    settings = GoPlaySettings(
        workdir=Path("/work"), runtime=RuntimeSettings(temp_dir=tmp_path)
    )
    play, _ = _play(settings=settings)
    doc = TextDocument.from_lines(
        ["```go", "x", "```"], path=tmp_path / "docs" / "a.md"
    )

    assert play.run(EditorContext(doc, Cursor(1))) == "spliced"
    assert seen["cwd"] == str(Path("/work"))


def test_resolve_workdir_fallbacks(tmp_path: Path, monkeypatch):
    saved = TextDocument("x", path=tmp_path / "notes" / "a.md")
    assert resolve_workdir(GoPlaySettings(), saved) == (
        tmp_path / "notes"
    ).resolve()
    monkeypatch.chdir(tmp_path)
    assert resolve_workdir(GoPlaySettings(), TextDocument("x")) == Path.cwd()


def test_crlf_document_gets_crlf_result_block():
    doc = TextDocument("```go\r\nx\r\n```\r\n")
    play, _ = _play(StubRunner(output="hi"))
    play.run(EditorContext(doc, Cursor(1)))
    assert doc.text == "```go\r\nx\r\n```\r\n```\r\nhi\r\n```\r\n"


def test_unexpected_errors_propagate():
    class BrokenDocument(TextDocument):
        def insert(self, line, column, text):
            raise OSError("read-only")

    doc = BrokenDocument("```go\nx\n```\n")
    play, _ = _play(StubRunner())
    with pytest.raises(OSError):
        play.run(EditorContext(doc, Cursor(1)))
    assert play.state == "idle"


@posix_only
def test_end_to_end_with_fake_go(tmp_path: Path, fake_go: Path):
    source = tmp_path / "doc.md"
    source.write_text("intro\n```go\nPWD\n```\nafter\n")
    settings = GoPlaySettings(
        runtime=RuntimeSettings(binary=str(fake_go), temp_dir=tmp_path)
    )
    log = OutputLog()
    play = MarkdownGoPlay(
        settings, output_log=log, notifier=RecordingNotifier()
    )
    doc = TextDocument.load(source)

    assert play.run(EditorContext(doc, Cursor(2))) == "spliced"
    expected_dir = str(tmp_path.resolve())
    assert doc.text == (
        f"intro\n```go\nPWD\n```\n```\n{expected_dir}\n\n```\nafter\n"
    )
    assert log.visible is False


@posix_only
def test_end_to_end_failure_shows_log(tmp_path: Path, fake_go: Path):
    settings = GoPlaySettings(
        runtime=RuntimeSettings(binary=str(fake_go), temp_dir=tmp_path)
    )
    log = OutputLog()
    play = MarkdownGoPlay(
        settings, output_log=log, notifier=RecordingNotifier()
    )
    doc = TextDocument("```go\nFAIL\n```\n", path=tmp_path / "doc.md")

    assert play.run(EditorContext(doc, Cursor(1))) == "failed"
    assert "syntax error" in log.text
    assert log.visible is True
    assert doc.text == "```go\nFAIL\n```\n"


def test_not_found_message_names_plugin_language():
    class RustPlugin(GoLanguagePlugin):
        language_name = "rust"
        fence_tag = "rust"

    notifier = RecordingNotifier()
    play = MarkdownGoPlay(
        GoPlaySettings(),
        notifier=notifier,
        plugin=RustPlugin(),
        runner=StubRunner(),
    )
    doc = TextDocument.from_lines(["```go", "x", "```"])
    assert play.run(EditorContext(doc, Cursor(1))) == "not_found"
    assert notifier.errors == ["Not found rust code section"]
