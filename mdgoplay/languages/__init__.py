"""Language plugin registry."""

from typing import Dict, Type

from mdgoplay.exceptions import GoPlayConfigError

from .base import LanguagePlugin
from .go import GoLanguagePlugin

LANGUAGE_PLUGINS: Dict[str, Type[LanguagePlugin]] = {
    "go": GoLanguagePlugin,
}


def register_language_plugin(
    name: str, plugin_cls: Type[LanguagePlugin]
) -> None:
    """Register or override a language plugin at runtime."""

    LANGUAGE_PLUGINS[name.lower()] = plugin_cls


def unregister_language_plugin(name: str) -> None:
    """Remove a language plugin that was previously registered."""

    LANGUAGE_PLUGINS.pop(name.lower(), None)


def load_language_plugin(name: str) -> LanguagePlugin:
    try:
        plugin_cls = LANGUAGE_PLUGINS[name.lower()]
    except KeyError as exc:
        raise GoPlayConfigError(
            f"Unknown language '{name}'. Registered: "
            f"{', '.join(sorted(LANGUAGE_PLUGINS))}"
        ) from exc
    return plugin_cls()


__all__ = [
    "LanguagePlugin",
    "LANGUAGE_PLUGINS",
    "GoLanguagePlugin",
    "load_language_plugin",
    "register_language_plugin",
    "unregister_language_plugin",
]
