"""Header-based argument value resolver.

Supplies a handler parameter from a request header, as declared by the
parameter's :class:`~fastapi_header_binding.core.types.HeaderBinding`.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi_header_binding.core.exceptions import (
    MissingHeaderError,
    UnsupportedHeaderTypeError,
)
from fastapi_header_binding.core.types import BindingKind, DeclaredType
from fastapi_header_binding.http.accept import AcceptHeader
from fastapi_header_binding.resolution.base import BaseValueResolver

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi_header_binding.core.types import ParameterDescriptor
    from fastapi_header_binding.http.request import HeaderRequest

logger = logging.getLogger(__name__)

_SUPPORTED_TYPES = [
    DeclaredType.ARRAY.value,
    DeclaredType.STRING.value,
    DeclaredType.ACCEPT_HEADER.value,
]


class RequestHeaderValueResolver(BaseValueResolver):
    """Resolve a parameter from an HTTP request header.

    Parameters without a header binding are left to other resolvers.
    Otherwise the header named by the binding (or, failing that, by the
    parameter) is read and shaped by the parameter's declared type:

    ``string``
        The raw header value (first occurrence).
    ``array``
        For ``Accept``, ``Accept-Charset``, ``Accept-Language`` and
        ``Accept-Encoding`` the parsed values in quality order; for any other
        header a one-element list with the raw value.
    ``accept_header``
        An :class:`~fastapi_header_binding.http.accept.AcceptHeader`.

    A missing header falls back to the parameter default, then to ``None``
    for nullable parameters. A required header that is still missing raises
    :class:`MissingHeaderError` carrying the binding's failure status code.

    Example usage::

        parameter = ParameterDescriptor(
            name="user_agent",
            declared_type=str,
            bindings={BindingKind.REQUEST_HEADER: HeaderBinding(name="User-Agent")},
        )
        RequestHeaderValueResolver().resolve(request, parameter)
        # ['Mozilla/5.0 ...']
    """

    def resolve(self, request: Any, parameter: ParameterDescriptor) -> list[Any]:
        """Resolve *parameter* from the request headers.

        Raises
        ------
        UnsupportedHeaderTypeError
            If the parameter's declared type cannot be produced from a header.
        MissingHeaderError
            If the header is absent, there is no default and the parameter
            is not nullable.
        """
        binding = parameter.get_binding(BindingKind.REQUEST_HEADER)
        if binding is None:
            return []

        declared_type = self.validate_parameter(parameter)
        name = binding.name or parameter.name
        headers = self.wrap_request(request)

        value: Any = None
        if headers.has_header(name):
            value = self._read_header(headers, name, declared_type)

        if value is None and parameter.has_default_value:
            value = parameter.default_value

        if value is None and not parameter.is_nullable:
            logger.warning("Required header %r missing for parameter %r", name, parameter.name)
            raise MissingHeaderError(
                header_name=name,
                status_code=binding.failure_status_code,
                details={"parameter": parameter.name},
            )

        logger.debug("Resolved parameter %r from header %r", parameter.name, name)
        return [value]

    def validate_parameter(self, parameter: ParameterDescriptor) -> DeclaredType:
        """Check that *parameter* has a type this resolver can produce.

        Needs no request, so callers can run it when a route is declared.
        """
        try:
            return DeclaredType(parameter.declared_type)
        except ValueError:
            raise UnsupportedHeaderTypeError(
                parameter=parameter.name,
                declared_type=parameter.declared_type,
                supported=_SUPPORTED_TYPES,
            ) from None

    @staticmethod
    def _read_header(headers: HeaderRequest, name: str, declared_type: DeclaredType) -> Any:
        raw = headers.get_header(name)

        if declared_type is DeclaredType.STRING:
            return raw

        if declared_type is DeclaredType.ARRAY:
            parsed: dict[str, Callable[[], list[str]]] = {
                "accept": headers.acceptable_content_types,
                "accept-charset": headers.charsets,
                "accept-language": headers.languages,
                "accept-encoding": headers.encodings,
            }
            accessor = parsed.get(name.lower())
            return accessor() if accessor else [raw]

        return AcceptHeader.from_string(raw)


__all__ = ["RequestHeaderValueResolver"]
