"""Rich-based console helpers for compgen.

The catalog itself never prints.  These helpers exist for callers (and for
interactive use) that want to see which templates and presets are
available.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table

from .catalog import TemplateCatalog
from .presets import PRESETS, preset_names

console = Console()


def print_catalog(catalog: Optional[TemplateCatalog] = None) -> None:
    """Print the component template table and the preset table."""
    catalog = catalog or TemplateCatalog()

    templates = Table(title="Component templates", show_header=True, header_style="bold cyan")
    templates.add_column("Kind", no_wrap=True)
    templates.add_column("Platform", no_wrap=True)
    templates.add_column("Language", no_wrap=True)
    templates.add_column("Template", style="dim")
    for entry in catalog.templates():
        templates.add_row(
            entry.kind.value, entry.platform.value, entry.language.value, entry.template_path
        )
    console.print(templates)
    console.print()

    presets = Table(title="Presets", show_header=True, header_style="bold cyan")
    presets.add_column("Preset", style="bold", no_wrap=True)
    presets.add_column("Kind")
    presets.add_column("Platform")
    presets.add_column("Language")
    presets.add_column("Props")
    for name in preset_names():
        flags = PRESETS[name]
        presets.add_row(
            name,
            flags["kind"].value,
            flags["platform"].value,
            flags["language"].value,
            "yes" if flags["props"] else "no",
        )
    console.print(presets)
    console.print()

