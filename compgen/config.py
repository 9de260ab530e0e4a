"""compgen configuration.

A single Pydantic v2 model holds the catalog settings so they can be
validated at construction time and serialised to/from JSON or environment
variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .templates import DEFAULT_TEMPLATE_DIR


class CatalogConfig(BaseModel):
    """Settings for a ``TemplateCatalog``.

    ``strict_names`` is off by default: names are spliced into the output
    unchecked, and an empty or non-identifier name simply yields a source
    file the target compiler will reject.  Turning it on makes the catalog
    raise ``InvalidComponentNameError`` instead.
    """

    model_config = ConfigDict(frozen=True)

    template_dir: Optional[Path] = Field(
        default=None, description="Template root; the bundled templates when unset"
    )
    strict_names: bool = Field(
        default=False, description="Reject names that are not ASCII JS identifiers"
    )

    @property
    def resolved_template_dir(self) -> Path:
        """The template root actually used for rendering."""
        return self.template_dir or DEFAULT_TEMPLATE_DIR

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Parent directories are created automatically.  Returns *path*.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "CatalogConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        """Build a ``CatalogConfig`` from environment variables.

        Recognised variables (all optional):
            COMPGEN_TEMPLATE_DIR, COMPGEN_STRICT_NAMES.

        ``COMPGEN_STRICT_NAMES`` takes any boolean string pydantic accepts
        (``1``, ``true``, ``yes``, ``on``, ...).

        Raises:
            pydantic.ValidationError: If a variable holds an unusable value.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("COMPGEN_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["COMPGEN_TEMPLATE_DIR"])
        if os.environ.get("COMPGEN_STRICT_NAMES"):
            kwargs["strict_names"] = os.environ["COMPGEN_STRICT_NAMES"].strip()
        return cls(**kwargs)
