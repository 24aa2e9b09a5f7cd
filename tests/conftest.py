"""Shared pytest fixtures for the fastapi-header-binding test suite.

Design philosophy
-----------------
- Resolvers are exercised against ``MagicMock`` requests (built in each test
  module) carrying a plain header dict; no ASGI server is needed.
- The FastAPI integration is covered separately through ``TestClient``.
- Scope is kept at "function" by default to guarantee full isolation.
"""
from __future__ import annotations

from typing import Any

import pytest

from fastapi_header_binding.core.types import BindingKind, HeaderBinding, ParameterDescriptor
from fastapi_header_binding.resolution.header import RequestHeaderValueResolver

# ---------------------------------------------------------------------------
# Environment isolation — settings must not pick up the developer's env
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clear_header_binding_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("HEADER_BINDING_DEFAULT_FAILURE_STATUS_CODE", raising=False)
    monkeypatch.delenv("HEADER_BINDING_EXPOSE_ERROR_DETAILS", raising=False)


# ---------------------------------------------------------------------------
# Resolver fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def header_resolver() -> RequestHeaderValueResolver:
    return RequestHeaderValueResolver()


# ---------------------------------------------------------------------------
# Parameter factory — builds header-bound descriptors with sane defaults
# ---------------------------------------------------------------------------

def _make_parameter(
    name: str = "variableName",
    declared_type: Any = "string",
    *,
    header: str | None = None,
    bound: bool = True,
    failure_status_code: int = 400,
    **kwargs: Any,
) -> ParameterDescriptor:
    bindings = (
        {
            BindingKind.REQUEST_HEADER: HeaderBinding(
                name=header, failure_status_code=failure_status_code
            )
        }
        if bound
        else {}
    )
    return ParameterDescriptor(
        name=name,
        declared_type=declared_type,
        bindings=bindings,
        **kwargs,
    )


@pytest.fixture
def make_parameter():
    """Factory fixture: ``make_parameter("name", "array", header="accept")``."""
    return _make_parameter
