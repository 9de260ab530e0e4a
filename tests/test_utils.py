"""Unit tests for the Rich console helpers (compgen.utils)."""

from __future__ import annotations

import pytest
from rich.console import Console

from compgen import utils
from compgen.presets import PRESETS

pytestmark = pytest.mark.unit


@pytest.fixture
def recording_console(monkeypatch) -> Console:
    """Swap the module console for one that records output."""
    console = Console(record=True, width=200)
    monkeypatch.setattr(utils, "console", console)
    return console


class TestPrintCatalog:
    def test_lists_templates(self, recording_console):
        utils.print_catalog()
        text = recording_console.export_text()
        assert "Component templates" in text
        assert "components/functional.native.ts.j2" in text

    def test_lists_presets(self, recording_console):
        utils.print_catalog()
        text = recording_console.export_text()
        assert "Presets" in text
        for name in PRESETS:
            assert name in text
