"""Named component presets.

Each preset is a fixed ``(kind, platform, language, props)`` combination
under a short name, so callers can ask for ``"react-native-props"`` instead
of spelling out four flags.
"""

from __future__ import annotations

from typing import Any, Optional

from .catalog import TemplateCatalog
from .errors import UnknownPresetError
from .models import ComponentKind, GenerationRequest, Language, Platform

PRESETS: dict[str, dict[str, Any]] = {
    "react": {
        "kind": ComponentKind.CLASS,
        "platform": Platform.WEB,
        "language": Language.JS,
        "props": False,
    },
    "react-functional": {
        "kind": ComponentKind.FUNCTIONAL,
        "platform": Platform.WEB,
        "language": Language.JS,
        "props": False,
    },
    "react-native": {
        "kind": ComponentKind.CLASS,
        "platform": Platform.NATIVE,
        "language": Language.JS,
        "props": False,
    },
    "typescript-react": {
        "kind": ComponentKind.CLASS,
        "platform": Platform.WEB,
        "language": Language.TS,
        "props": False,
    },
    "typescript-react-native": {
        "kind": ComponentKind.CLASS,
        "platform": Platform.NATIVE,
        "language": Language.TS,
        "props": False,
    },
    "react-props": {
        "kind": ComponentKind.CLASS,
        "platform": Platform.WEB,
        "language": Language.JS,
        "props": True,
    },
    "react-functional-props": {
        "kind": ComponentKind.FUNCTIONAL,
        "platform": Platform.WEB,
        "language": Language.JS,
        "props": True,
    },
    "react-native-props": {
        "kind": ComponentKind.CLASS,
        "platform": Platform.NATIVE,
        "language": Language.JS,
        "props": True,
    },
}


def preset_names() -> list[str]:
    return sorted(PRESETS)


def preset_request(preset: str, name: str) -> GenerationRequest:
    """Build the ``GenerationRequest`` for *preset* and component *name*.

    Raises:
        UnknownPresetError: If *preset* is not in ``PRESETS``.
    """
    try:
        flags = PRESETS[preset]
    except KeyError:
        raise UnknownPresetError(preset, preset_names()) from None
    return GenerationRequest(name=name, **flags)


def render_preset(preset: str, name: str, catalog: Optional[TemplateCatalog] = None) -> str:
    """Render *name* with the flags of *preset*.

    A default ``TemplateCatalog`` is created when *catalog* is omitted.
    """
    catalog = catalog or TemplateCatalog()
    return catalog.render_request(preset_request(preset, name))
