"""Argument value resolvers.

This module provides the resolvers that supply handler parameters from
HTTP requests, and the pipeline that runs them.

Example:
    ```python
    from fastapi_header_binding.resolution import RequestHeaderValueResolver

    resolver = RequestHeaderValueResolver()
    values = resolver.resolve(request, parameter)  # [] or [value]
    ```
"""

from fastapi_header_binding.resolution.base import BaseValueResolver
from fastapi_header_binding.resolution.header import RequestHeaderValueResolver
from fastapi_header_binding.resolution.pipeline import ArgumentResolver

__all__ = [
    "ArgumentResolver",
    "BaseValueResolver",
    "RequestHeaderValueResolver",
]
