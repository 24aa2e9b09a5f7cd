"""Read-only header view over an incoming request.

:class:`HeaderRequest` is the request abstraction the value resolvers work
against. It accepts a FastAPI / Starlette ``Request``, a Starlette
``Headers`` instance, or any plain mapping of header names to values, so
resolvers can be exercised without an ASGI scope.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi_header_binding.http.accept import AcceptHeader

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


def _normalize_language(code: str) -> str:
    """Turn an RFC 4646 tag into a locale-style code (``en-us`` -> ``en_US``)."""
    if "-" not in code:
        return code
    first, *rest = code.split("-")
    if first == "i":
        # IANA "i-" registrations, e.g. i-klingon
        return rest[0] if rest else code
    return "_".join([first.lower(), *(part.upper() for part in rest)])


class HeaderRequest:
    """Case-insensitive header lookup plus pre-parsed Accept-family accessors.

    Parsed lists are memoised on the instance; create one wrapper per request.

    Example
    -------
    .. code-block:: python

        req = HeaderRequest(request)
        if req.has_header("accept"):
            types = req.acceptable_content_types()
    """

    def __init__(self, source: Any) -> None:
        self.source = source
        self._headers = getattr(source, "headers", source)
        self._parsed: dict[str, list[str]] = {}

    def has_header(self, name: str) -> bool:
        return self.get_header(name) is not None

    def get_header(self, name: str, default: str | None = None) -> str | None:
        """Return the first value of header *name*, matched case-insensitively.

        HTTP header names are case-insensitive (RFC 7230 §3.2). Starlette
        already lower-cases them but plain mappings may not.
        """
        name_lower = name.lower()
        for key, value in self._headers.items():
            if key.lower() == name_lower:
                return value
        return default

    def acceptable_content_types(self) -> list[str]:
        """Media types from ``Accept``, best first."""
        return self._memoised("accept", lambda header: header.values())

    def charsets(self) -> list[str]:
        """Charsets from ``Accept-Charset``, best first."""
        return self._memoised("accept-charset", lambda header: header.values())

    def encodings(self) -> list[str]:
        """Content codings from ``Accept-Encoding``, best first."""
        return self._memoised("accept-encoding", lambda header: header.values())

    def languages(self) -> list[str]:
        """Languages from ``Accept-Language``, best first, as locale codes."""
        return self._memoised(
            "accept-language",
            lambda header: [_normalize_language(value) for value in header.values()],
        )

    def _memoised(
        self,
        header_name: str,
        extract: Callable[[AcceptHeader], list[str]],
    ) -> list[str]:
        if header_name not in self._parsed:
            header = AcceptHeader.from_string(self.get_header(header_name))
            self._parsed[header_name] = extract(header)
            logger.debug("Parsed %s: %s", header_name, self._parsed[header_name])
        return self._parsed[header_name]


__all__ = ["HeaderRequest"]
