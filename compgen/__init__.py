"""compgen -- boilerplate generator for React and React Native components.

Renders component source files, index (barrel) files and test stubs from a
component name.  Every operation returns a string; writing it to disk is
left to the caller.

Quick usage::

    from compgen import TemplateCatalog

    catalog = TemplateCatalog()
    source = catalog.render("userCard", kind="functional", language="ts", props=True)
    index = catalog.render_index("userCard", upper_case=True)
    test = catalog.render_test("userCard", upper_case=True, smoke=True)
"""

from compgen.catalog import TemplateCatalog, TemplateEntry
from compgen.config import CatalogConfig
from compgen.errors import (
    CompgenError,
    InvalidComponentNameError,
    TemplateNotFoundError,
    UnknownPresetError,
)
from compgen.models import (
    ComponentKind,
    GenerationRequest,
    IndexRequest,
    Language,
    Platform,
    TestRequest,
)
from compgen.naming import capitalize_first_letter, is_identifier
from compgen.presets import PRESETS, preset_request, render_preset

__all__ = [
    "CatalogConfig",
    "CompgenError",
    "ComponentKind",
    "GenerationRequest",
    "IndexRequest",
    "InvalidComponentNameError",
    "Language",
    "PRESETS",
    "Platform",
    "TemplateCatalog",
    "TemplateEntry",
    "TemplateNotFoundError",
    "TestRequest",
    "UnknownPresetError",
    "capitalize_first_letter",
    "is_identifier",
    "preset_request",
    "render_preset",
]
