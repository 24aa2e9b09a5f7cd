"""FastAPI dependency-injection helpers for header-bound parameters."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import HTTPException, Request

from fastapi_header_binding.core.config import HeaderBindingConfig
from fastapi_header_binding.core.exceptions import ConfigurationError, MissingHeaderError
from fastapi_header_binding.core.types import BindingKind, HeaderBinding, ParameterDescriptor
from fastapi_header_binding.resolution.header import RequestHeaderValueResolver

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

_MISSING: Any = object()


def map_request_header(
    name: str | None = None,
    *,
    parameter_name: str | None = None,
    declared_type: Any = str,
    default: Any = _MISSING,
    nullable: bool = False,
    failure_status_code: int | None = None,
    resolver: RequestHeaderValueResolver | None = None,
    config: HeaderBindingConfig | None = None,
) -> Callable[[Request], Awaitable[Any]]:
    """Build a dependency that resolves one value from a request header.

    The binding is built and validated immediately, so an unsupported
    ``declared_type`` fails when the route module is imported rather than on
    the first request. A missing required header becomes an
    ``HTTPException`` with the binding's failure status code.

    Example
    -------
    .. code-block:: python

        @app.get("/negotiate")
        async def negotiate(
            accept: list[str] = Depends(map_request_header("accept", declared_type=list)),
            version: str = Depends(map_request_header("X-Api-Version", failure_status_code=412)),
            agent: str | None = Depends(map_request_header("user-agent", nullable=True)),
        ):
            ...

    Raises
    ------
    ConfigurationError
        If neither ``name`` nor ``parameter_name`` is given, or the declared
        type cannot be produced from a header.
    """
    parameter_name = parameter_name or name
    if not parameter_name:
        raise ConfigurationError(
            parameter="name",
            reason="a header name or a parameter name is required",
        )

    config = config or HeaderBindingConfig()
    binding = HeaderBinding(
        name=name,
        failure_status_code=(
            failure_status_code
            if failure_status_code is not None
            else config.default_failure_status_code
        ),
    )
    parameter = ParameterDescriptor(
        name=parameter_name,
        declared_type=declared_type,
        has_default_value=default is not _MISSING,
        default_value=None if default is _MISSING else default,
        is_nullable=nullable,
        bindings={BindingKind.REQUEST_HEADER: binding},
    )
    resolver = resolver or RequestHeaderValueResolver()
    resolver.validate_parameter(parameter)
    logger.info(
        "Header dependency declared parameter=%r header=%r type=%s",
        parameter.name,
        binding.name or parameter.name,
        parameter.declared_type,
    )

    async def resolve_header(request: Request) -> Any:
        try:
            values = resolver.resolve(request, parameter)
        except MissingHeaderError as exc:
            detail: Any = exc.message
            if config.expose_error_details:
                detail = {"message": exc.message, "details": exc.details}
            raise HTTPException(status_code=exc.status_code, detail=detail) from exc
        return values[0]

    return resolve_header


__all__ = ["map_request_header"]
