from pathlib import Path
from typing import List, Optional

import pytest

from mdgoplay.exceptions import GoPlayConfigError
from mdgoplay.languages import (
    LANGUAGE_PLUGINS,
    GoLanguagePlugin,
    LanguagePlugin,
    load_language_plugin,
    register_language_plugin,
    unregister_language_plugin,
)


def test_go_plugin_command():
    plugin = GoLanguagePlugin()
    source = Path("/tmp/main.go")
    assert plugin.source_filename == "main.go"
    assert plugin.command(source) == ["go", "run", str(source)]
    assert plugin.command(source, binary="/opt/go/bin/go")[0] == (
        "/opt/go/bin/go"
    )


def test_load_language_plugin_is_case_insensitive():
    assert isinstance(load_language_plugin("Go"), GoLanguagePlugin)


def test_unknown_language_rejected():
    with pytest.raises(GoPlayConfigError):
        load_language_plugin("cobol")


def test_register_language_plugin_round_trip():
    class TinyGoPlugin(LanguagePlugin):
        language_name = "tinygo"
        fence_tag = "go"
        file_extension = ".go"
        default_binary = "tinygo"

        def command(
            self, source_path: Path, *, binary: Optional[str] = None
        ) -> List[str]:
            return [binary or self.default_binary, "run", str(source_path)]

    register_language_plugin("TinyGo", TinyGoPlugin)
    try:
        assert LANGUAGE_PLUGINS["tinygo"] is TinyGoPlugin
        assert load_language_plugin("tinygo").command(Path("m.go"))[0] == (
            "tinygo"
        )
    finally:
        unregister_language_plugin("tinygo")
    assert "tinygo" not in LANGUAGE_PLUGINS
