"""Unit tests for fastapi_header_binding.core.types"""

from __future__ import annotations

from typing import Optional

from pydantic import ValidationError
import pytest

from fastapi_header_binding.core.types import (
    BindingKind,
    DeclaredType,
    HeaderBinding,
    ParameterDescriptor,
)
from fastapi_header_binding.http.accept import AcceptHeader


class TestDeclaredType:
    def test_values(self):
        assert DeclaredType.STRING == "string"
        assert DeclaredType.ARRAY == "array"
        assert DeclaredType.ACCEPT_HEADER == "accept_header"

    def test_from_string(self):
        assert DeclaredType("array") is DeclaredType.ARRAY


class TestHeaderBinding:
    def test_defaults(self):
        binding = HeaderBinding()
        assert binding.name is None
        assert binding.failure_status_code == 400
        assert binding.kind is BindingKind.REQUEST_HEADER

    def test_frozen(self):
        binding = HeaderBinding(name="accept")
        with pytest.raises(ValidationError):
            binding.name = "host"

    @pytest.mark.parametrize("code", [200, 302, 600])
    def test_rejects_non_error_status(self, code):
        with pytest.raises(ValidationError):
            HeaderBinding(failure_status_code=code)

    def test_rejects_empty_name(self):
        with pytest.raises(ValidationError):
            HeaderBinding(name="")


class TestParameterDescriptor:
    @pytest.mark.parametrize(
        ("declared", "expected"),
        [
            (str, "string"),
            (list, "array"),
            (tuple, "array"),
            (list[str], "array"),
            (AcceptHeader, "accept_header"),
            (int, "int"),
            ("string", "string"),
            (DeclaredType.ARRAY, "array"),
            ("bool", "bool"),
            (str | None, "string"),
            (Optional[list[str]], "array"),
            (AcceptHeader | None, "accept_header"),
            (int | None, "int"),
        ],
    )
    def test_declared_type_normalised(self, declared, expected):
        parameter = ParameterDescriptor(name="p", declared_type=declared)
        assert parameter.declared_type == expected

    def test_defaults(self):
        parameter = ParameterDescriptor(name="p", declared_type=str)
        assert parameter.has_default_value is False
        assert parameter.default_value is None
        assert parameter.is_nullable is False
        assert parameter.bindings == {}

    def test_get_binding(self):
        binding = HeaderBinding(name="accept")
        parameter = ParameterDescriptor(
            name="p",
            declared_type=str,
            bindings={BindingKind.REQUEST_HEADER: binding},
        )
        assert parameter.get_binding(BindingKind.REQUEST_HEADER) is binding

    def test_get_binding_absent(self):
        parameter = ParameterDescriptor(name="p", declared_type=str)
        assert parameter.get_binding(BindingKind.REQUEST_HEADER) is None

    def test_requires_name(self):
        with pytest.raises(ValidationError):
            ParameterDescriptor(name="", declared_type=str)
