"""Unit tests for the request models (compgen.models)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from compgen.models import (
    ComponentKind,
    GenerationRequest,
    IndexRequest,
    Language,
    Platform,
    TestRequest,
)

pytestmark = pytest.mark.unit


class TestGenerationRequest:
    def test_defaults(self):
        request = GenerationRequest(name="card")
        assert request.kind == ComponentKind.CLASS
        assert request.platform == Platform.WEB
        assert request.language == Language.JS
        assert request.props is False

    def test_accepts_string_enum_values(self):
        request = GenerationRequest(
            name="card", kind="functional", platform="native", language="ts", props=True
        )
        assert request.kind is ComponentKind.FUNCTIONAL
        assert request.platform is Platform.NATIVE
        assert request.language is Language.TS

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            GenerationRequest(name="card", kind="hooks")

    def test_unknown_language_rejected(self):
        with pytest.raises(ValidationError):
            GenerationRequest(name="card", language="coffee")

    def test_frozen(self):
        request = GenerationRequest(name="card")
        with pytest.raises(ValidationError):
            request.name = "other"

    def test_equal_requests_compare_equal(self):
        assert GenerationRequest(name="card") == GenerationRequest(name="card")

    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            GenerationRequest()


class TestIndexAndTestRequests:
    def test_index_defaults(self):
        assert IndexRequest(name="foo").upper_case is False

    def test_test_request_defaults(self):
        request = TestRequest(name="bar")
        assert request.upper_case is False
        assert request.typescript is False
        assert request.smoke is False

    def test_test_request_frozen(self):
        request = TestRequest(name="bar")
        with pytest.raises(ValidationError):
            request.smoke = True
