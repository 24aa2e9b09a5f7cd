"""HTTP collaborators: request header view and Accept-family parsing."""

from fastapi_header_binding.http.accept import AcceptHeader, AcceptHeaderItem
from fastapi_header_binding.http.request import HeaderRequest

__all__ = ["AcceptHeader", "AcceptHeaderItem", "HeaderRequest"]
