"""Template catalog: maps generation requests to rendered source text.

Every component variant is one entry in a lookup table keyed by
``(kind, platform, language)``.  The ``props`` flag is not part of the key;
it switches an optional block inside each skeleton.  Index and test files
have their own skeletons, and the folder index is assembled directly since
its exact separators matter to callers.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, NamedTuple, Optional

from .config import CatalogConfig
from .errors import InvalidComponentNameError
from .models import (
    ComponentKind,
    GenerationRequest,
    IndexRequest,
    Language,
    Platform,
    TestRequest,
)
from .naming import capitalize_first_letter, is_identifier, path_segment
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Template table
# ---------------------------------------------------------------------------

COMPONENT_TEMPLATES: dict[tuple[ComponentKind, Platform, Language], str] = {
    (ComponentKind.CLASS, Platform.WEB, Language.JS): "components/class.web.js.j2",
    (ComponentKind.CLASS, Platform.WEB, Language.TS): "components/class.web.ts.j2",
    (ComponentKind.CLASS, Platform.NATIVE, Language.JS): "components/class.native.js.j2",
    (ComponentKind.CLASS, Platform.NATIVE, Language.TS): "components/class.native.ts.j2",
    (ComponentKind.FUNCTIONAL, Platform.WEB, Language.JS): "components/functional.web.js.j2",
    (ComponentKind.FUNCTIONAL, Platform.WEB, Language.TS): "components/functional.web.ts.j2",
    (ComponentKind.FUNCTIONAL, Platform.NATIVE, Language.JS): "components/functional.native.js.j2",
    (ComponentKind.FUNCTIONAL, Platform.NATIVE, Language.TS): "components/functional.native.ts.j2",
}

INDEX_TEMPLATE = "index.js.j2"
TEST_TEMPLATE = "component.test.js.j2"


class TemplateEntry(NamedTuple):
    """One row of the component template table."""

    kind: ComponentKind
    platform: Platform
    language: Language
    template_path: str


# ---------------------------------------------------------------------------
# TemplateCatalog
# ---------------------------------------------------------------------------


class TemplateCatalog:
    """Renders component, index and test boilerplate from a component name.

    All public methods are pure: identical arguments give byte-identical
    output, and nothing is cached or written between calls.

    Attributes:
        config: Catalog settings (template root, strict name checking).
        renderer: Jinja2 renderer bound to the template root.
    """

    def __init__(self, config: Optional[CatalogConfig] = None) -> None:
        self.config = config or CatalogConfig()
        self.renderer = TemplateRenderer(self.config.resolved_template_dir)

    # -- Components ---------------------------------------------------------

    def render(
        self,
        name: str,
        kind: ComponentKind | str = ComponentKind.CLASS,
        platform: Platform | str = Platform.WEB,
        language: Language | str = Language.JS,
        props: bool = False,
    ) -> str:
        """Render a component source file.

        Args:
            name: Raw component name; its first letter is capitalized for
                the class/function symbol.
            kind: ``class`` or ``functional``.
            platform: ``web`` (DOM markup) or ``native`` (React Native views).
            language: ``js`` or ``ts``.
            props: Append an empty ``propTypes`` block (JS) or declare an
                empty props interface (TS).

        Returns:
            The complete source file, ending with a default export.

        Raises:
            ValueError: If *kind*, *platform* or *language* is not a known value.
        """
        self._check_name(name)
        key = (ComponentKind(kind), Platform(platform), Language(language))
        symbol = capitalize_first_letter(name)
        context: dict[str, Any] = {
            "name": symbol,
            "props": props,
            "props_type": f"{symbol}Props" if props else "any",
        }
        return self.renderer.render(COMPONENT_TEMPLATES[key], context)

    def render_request(self, request: GenerationRequest) -> str:
        """Render the component described by *request*."""
        return self.render(
            request.name,
            kind=request.kind,
            platform=request.platform,
            language=request.language,
            props=request.props,
        )

    # -- Index files --------------------------------------------------------

    def render_index(self, name: str, upper_case: bool = False) -> str:
        """Render a single ``export { default } from './<name>';`` statement.

        *upper_case* selects the capitalized file name over the raw one.
        """
        self._check_name(name)
        return self.renderer.render(
            INDEX_TEMPLATE, {"path": path_segment(name, upper_case)}
        )

    def render_index_request(self, request: IndexRequest) -> str:
        return self.render_index(request.name, upper_case=request.upper_case)

    def render_folder_index(self, folders: Sequence[str]) -> str:
        """Render an index that imports and re-exports every folder.

        One ``import`` line per folder, in order, followed by a single
        ``export { ... }`` block listing the same folders.  The last entry
        carries no trailing separator; an empty sequence gives an empty
        export block.
        """
        for folder in folders:
            self._check_name(folder)
        imports = "".join(f"import {folder} from './{folder}' \n" for folder in folders)
        body = ", \n".join(folders)
        return f"{imports}export {{\n    {body}\n}}"

    # -- Tests --------------------------------------------------------------

    def render_test(
        self,
        name: str,
        upper_case: bool = False,
        typescript: bool = False,
        smoke: bool = False,
    ) -> str:
        """Render a Jest/enzyme snapshot test for a component.

        Args:
            name: Raw component name.
            upper_case: Import the component from its capitalized file name.
            typescript: Use ``import * as`` namespace imports.
            smoke: Append a second test that mounts and unmounts the
                component into a detached DOM node.
        """
        self._check_name(name)
        prefix = "* as " if typescript else ""
        context: dict[str, Any] = {
            "name": capitalize_first_letter(name),
            "path": path_segment(name, upper_case),
            "react_import": f"{prefix}React",
            "react_dom_import": f"{prefix}ReactDOM",
            "smoke": smoke,
        }
        return self.renderer.render(TEST_TEMPLATE, context)

    def render_test_request(self, request: TestRequest) -> str:
        return self.render_test(
            request.name,
            upper_case=request.upper_case,
            typescript=request.typescript,
            smoke=request.smoke,
        )

    # -- Introspection ------------------------------------------------------

    def templates(self) -> list[TemplateEntry]:
        """Return every component table entry in a stable order."""
        return sorted(
            (
                TemplateEntry(kind, platform, language, path)
                for (kind, platform, language), path in COMPONENT_TEMPLATES.items()
            ),
            key=lambda entry: (entry.kind.value, entry.platform.value, entry.language.value),
        )

    # -- Internal -----------------------------------------------------------

    def _check_name(self, name: str) -> None:
        if self.config.strict_names and not is_identifier(name):
            raise InvalidComponentNameError(name)
