"""fastapi-header-binding — bind handler parameters to HTTP request headers.

Quick start
-----------
.. code-block:: python

    from fastapi import Depends, FastAPI
    from fastapi_header_binding import AcceptHeader, map_request_header

    app = FastAPI()

    @app.get("/")
    async def index(
        languages: list[str] = Depends(
            map_request_header("accept-language", declared_type=list)
        ),
        accept: AcceptHeader = Depends(
            map_request_header("accept", declared_type=AcceptHeader)
        ),
    ):
        return {"languages": languages, "best": accept.first().value}

Public API
----------
Core types
    DeclaredType, BindingKind, HeaderBinding, ParameterDescriptor, ValueResolver

Configuration
    HeaderBindingConfig

HTTP collaborators
    HeaderRequest, AcceptHeader, AcceptHeaderItem

Resolvers
    BaseValueResolver, RequestHeaderValueResolver, ArgumentResolver

FastAPI dependencies
    map_request_header

Exceptions
    HeaderBindingError and all its subclasses
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

try:
    __version__: str = _pkg_version("fastapi-header-binding")
except PackageNotFoundError:  # running from source without install
    __version__ = "0.0.0+dev"

__author__ = "fastapi-header-binding contributors"
__license__ = "MIT"

# Configuration
from fastapi_header_binding.core.config import HeaderBindingConfig

# Exceptions
from fastapi_header_binding.core.exceptions import (
    ArgumentResolutionError,
    ConfigurationError,
    HeaderBindingError,
    MissingHeaderError,
    UnsupportedHeaderTypeError,
)
from fastapi_header_binding.core.types import (
    BindingKind,
    DeclaredType,
    HeaderBinding,
    ParameterDescriptor,
    ValueResolver,
)

# Dependencies
from fastapi_header_binding.dependencies import map_request_header

# HTTP collaborators
from fastapi_header_binding.http.accept import AcceptHeader, AcceptHeaderItem
from fastapi_header_binding.http.request import HeaderRequest

# Resolvers
from fastapi_header_binding.resolution.base import BaseValueResolver
from fastapi_header_binding.resolution.header import RequestHeaderValueResolver
from fastapi_header_binding.resolution.pipeline import ArgumentResolver

__all__ = [  # noqa: RUF022
    "__version__",
    # Types
    "BindingKind",
    "DeclaredType",
    "HeaderBinding",
    "ParameterDescriptor",
    "ValueResolver",
    # Config
    "HeaderBindingConfig",
    # HTTP
    "AcceptHeader",
    "AcceptHeaderItem",
    "HeaderRequest",
    # Resolvers
    "BaseValueResolver",
    "RequestHeaderValueResolver",
    "ArgumentResolver",
    # Dependencies
    "map_request_header",
    # Exceptions
    "HeaderBindingError",
    "ConfigurationError",
    "UnsupportedHeaderTypeError",
    "MissingHeaderError",
    "ArgumentResolutionError",
]
