"""Core types, protocols, and data models for fastapi-header-binding."""
from __future__ import annotations

from enum import StrEnum
from types import NoneType, UnionType
from typing import Any, ClassVar, Protocol, Union, get_args, get_origin, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator
from starlette import status

from fastapi_header_binding.http.accept import AcceptHeader


class DeclaredType(StrEnum):
    """Parameter types a header binding can produce."""
    STRING = "string"
    ARRAY = "array"
    ACCEPT_HEADER = "accept_header"


class BindingKind(StrEnum):
    """Kinds of declarative binding a parameter may carry."""
    REQUEST_HEADER = "request_header"


_PYTHON_TYPES: dict[type, DeclaredType] = {
    str: DeclaredType.STRING,
    list: DeclaredType.ARRAY,
    tuple: DeclaredType.ARRAY,
    AcceptHeader: DeclaredType.ACCEPT_HEADER,
}


class HeaderBinding(BaseModel):
    """Binds a parameter to a request header.

    Created once when the parameter is declared. ``name`` falls back to the
    parameter's own name; ``failure_status_code`` is reported when the
    header is required but missing.

    Example
    -------
    .. code-block:: python

        HeaderBinding()                                  # same-named header, 400
        HeaderBinding(name="X-Api-Version", failure_status_code=412)
    """

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[BindingKind] = BindingKind.REQUEST_HEADER

    name: str | None = Field(
        default=None, description="Header name; defaults to the parameter name", min_length=1
    )
    failure_status_code: int = Field(
        default=status.HTTP_400_BAD_REQUEST,
        ge=400,
        le=599,
        description="HTTP status reported when a required header is missing",
    )


class ParameterDescriptor(BaseModel):
    """Metadata about one handler parameter, supplied by the binding pipeline.

    ``declared_type`` accepts either a string or a Python type: ``str``,
    ``list``/``tuple`` and :class:`AcceptHeader` map onto
    :class:`DeclaredType`; any other type is kept by ``__name__`` so an
    unsupported declaration can still be described and rejected later.
    ``Optional`` wrappers are unwrapped; set ``is_nullable`` separately.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Parameter name", min_length=1)
    declared_type: str = Field(..., description="Declared parameter type")
    has_default_value: bool = Field(default=False)
    default_value: Any = Field(default=None)
    is_nullable: bool = Field(default=False)
    bindings: dict[BindingKind, HeaderBinding] = Field(default_factory=dict)

    @field_validator("declared_type", mode="before")
    @classmethod
    def normalize_declared_type(cls, v: Any) -> str:
        """Map Python types onto declared type names.

        ``list[str]`` counts as ``list`` and ``X | None`` as ``X``; nullability
        itself is declared through ``is_nullable``.
        """
        if get_origin(v) in (Union, UnionType):
            members = [arg for arg in get_args(v) if arg is not NoneType]
            if len(members) == 1:
                v = members[0]
        v = get_origin(v) or v
        if isinstance(v, type):
            mapped = _PYTHON_TYPES.get(v)
            return mapped.value if mapped else v.__name__
        return str(v)

    def get_binding(self, kind: BindingKind) -> HeaderBinding | None:
        return self.bindings.get(kind)


@runtime_checkable
class ValueResolver(Protocol):
    """Protocol for argument value resolvers."""

    def resolve(self, request: Any, parameter: ParameterDescriptor) -> list[Any]:
        """Return ``[]`` to defer, or a one-element list holding the value."""
        ...


__all__ = [
    "BindingKind",
    "DeclaredType",
    "HeaderBinding",
    "ParameterDescriptor",
    "ValueResolver",
]
