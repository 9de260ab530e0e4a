"""Shared pytest fixtures for the compgen test suite.

Provides reusable fixtures for:
- A default TemplateCatalog using the bundled templates
- A strict TemplateCatalog that rejects non-identifier names
"""

from __future__ import annotations

import pytest

from compgen.catalog import TemplateCatalog
from compgen.config import CatalogConfig


# ---------------------------------------------------------------------------
# Catalogs
# ---------------------------------------------------------------------------

@pytest.fixture
def catalog() -> TemplateCatalog:
    """A catalog with default settings."""
    return TemplateCatalog()


@pytest.fixture
def strict_catalog() -> TemplateCatalog:
    """A catalog with ``strict_names`` turned on."""
    return TemplateCatalog(CatalogConfig(strict_names=True))
