"""Base argument value resolver implementation.

This module provides the base class for value resolvers that supply a
handler parameter from request data.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from fastapi_header_binding.http.request import HeaderRequest

if TYPE_CHECKING:
    from fastapi_header_binding.core.types import ParameterDescriptor

logger = logging.getLogger(__name__)


class BaseValueResolver(ABC):
    """Abstract base class for argument value resolvers.

    A resolver looks at one parameter and either defers (returns ``[]``) so
    the next resolver in the pipeline can try, or returns a one-element list
    holding the value. Resolvers are stateless and may be shared between
    concurrent requests.

    Example:
        ```python
        class QueryFlagResolver(BaseValueResolver):
            def resolve(self, request, parameter):
                request = self.wrap_request(request)
                if parameter.name != "debug":
                    return []
                return [request.has_header("x-debug")]
        ```
    """

    def __init__(self) -> None:
        logger.debug("Initialized %s", self.__class__.__name__)

    @abstractmethod
    def resolve(self, request: Any, parameter: ParameterDescriptor) -> list[Any]:
        """Resolve a value for *parameter* from *request*.

        Args:
            request: Starlette request, header mapping, or :class:`HeaderRequest`
            parameter: Metadata for the target parameter

        Returns:
            ``[]`` when this resolver does not apply, otherwise ``[value]``
        """

    @staticmethod
    def wrap_request(request: Any) -> HeaderRequest:
        """Return *request* as a :class:`HeaderRequest`, wrapping it if needed."""
        if isinstance(request, HeaderRequest):
            return request
        return HeaderRequest(request)


__all__ = ["BaseValueResolver"]
