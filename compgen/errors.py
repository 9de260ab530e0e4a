"""Exceptions raised by the compgen template catalog."""

from __future__ import annotations


class CompgenError(Exception):
    """Base class for every error raised by compgen."""


class InvalidComponentNameError(CompgenError):
    """Raised in strict mode when a name is not an ASCII JS identifier."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid component name: {name!r} is not an ASCII JS identifier")


class TemplateNotFoundError(CompgenError):
    """Raised when a template skeleton is missing from the template directory."""

    def __init__(self, template_path: str, template_dir: str) -> None:
        self.template_path = template_path
        self.template_dir = template_dir
        super().__init__(f"Template {template_path!r} not found in {template_dir}")


class UnknownPresetError(CompgenError):
    """Raised when a preset name is not in the preset table."""

    def __init__(self, preset: str, available: list[str]) -> None:
        self.preset = preset
        self.available = available
        super().__init__(
            f"Unknown preset {preset!r} (expected one of: {', '.join(available)})"
        )
