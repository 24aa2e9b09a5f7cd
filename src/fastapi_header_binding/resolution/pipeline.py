"""Argument resolution pipeline.

Runs an ordered list of value resolvers against each parameter and returns
the first value produced.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi_header_binding.core.exceptions import ArgumentResolutionError
from fastapi_header_binding.resolution.base import BaseValueResolver
from fastapi_header_binding.resolution.header import RequestHeaderValueResolver

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from fastapi_header_binding.core.types import ParameterDescriptor, ValueResolver

logger = logging.getLogger(__name__)


class ArgumentResolver:
    """Resolve handler arguments by asking each resolver in turn.

    Example:
        ```python
        arguments = ArgumentResolver().get_arguments(request, parameters)
        handler(**arguments)
        ```

    Attributes:
        resolvers: Value resolvers, consulted in order
    """

    def __init__(self, resolvers: Iterable[ValueResolver] | None = None) -> None:
        if resolvers is None:
            resolvers = [RequestHeaderValueResolver()]
        self.resolvers: list[ValueResolver] = list(resolvers)

    def get_argument(self, request: Any, parameter: ParameterDescriptor) -> Any:
        """Return the value for *parameter*.

        Raises:
            ArgumentResolutionError: If no resolver supplies a value, or one
                supplies more than one
        """
        request = BaseValueResolver.wrap_request(request)
        for resolver in self.resolvers:
            values = list(resolver.resolve(request, parameter))
            if not values:
                continue
            if len(values) > 1:
                raise ArgumentResolutionError(
                    parameter=parameter.name,
                    reason=(
                        f"{type(resolver).__name__} must return at most one value, "
                        f"{len(values)} given"
                    ),
                )
            logger.debug(
                "Argument %r resolved by %s", parameter.name, type(resolver).__name__
            )
            return values[0]

        raise ArgumentResolutionError(
            parameter=parameter.name,
            reason="no value resolver supplied a value; "
            "declare a binding, a default value, or make it nullable",
            details={"resolvers": [type(r).__name__ for r in self.resolvers]},
        )

    def get_arguments(
        self,
        request: Any,
        parameters: Sequence[ParameterDescriptor],
    ) -> dict[str, Any]:
        """Resolve every parameter, keyed by parameter name."""
        request = BaseValueResolver.wrap_request(request)
        return {
            parameter.name: self.get_argument(request, parameter)
            for parameter in parameters
        }


__all__ = ["ArgumentResolver"]
