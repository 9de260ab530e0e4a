"""Pydantic v2 models describing generation requests.

Each request is an immutable value: it is built, rendered once, and thrown
away.  The enumerations accept their plain string values, so
``GenerationRequest(name="card", kind="functional")`` is valid.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ComponentKind(str, Enum):
    """Shape of the generated component."""
    CLASS = "class"
    FUNCTIONAL = "functional"


class Platform(str, Enum):
    """UI framework flavour the component targets."""
    WEB = "web"
    NATIVE = "native"


class Language(str, Enum):
    """Source language of the generated file."""
    JS = "js"
    TS = "ts"


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class GenerationRequest(BaseModel):
    """A request for one component source file."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Raw component name as typed by the caller")
    kind: ComponentKind = Field(default=ComponentKind.CLASS)
    platform: Platform = Field(default=Platform.WEB)
    language: Language = Field(default=Language.JS)
    props: bool = Field(
        default=False, description="Include an empty propTypes / props interface block"
    )


class IndexRequest(BaseModel):
    """A request for a single-component index (barrel) file."""

    model_config = ConfigDict(frozen=True)

    name: str
    upper_case: bool = Field(
        default=False, description="Import from the capitalized file name"
    )


class TestRequest(BaseModel):
    """A request for a component test stub."""

    __test__ = False  # not a pytest test class

    model_config = ConfigDict(frozen=True)

    name: str
    upper_case: bool = Field(default=False)
    typescript: bool = Field(default=False, description="Use namespace React imports")
    smoke: bool = Field(
        default=False, description="Append a mount/unmount 'renders without crashing' test"
    )
