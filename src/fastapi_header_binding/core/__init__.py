"""Core header-binding components and abstractions."""

from fastapi_header_binding.core.config import HeaderBindingConfig
from fastapi_header_binding.core.exceptions import *  # noqa: F403
from fastapi_header_binding.core.exceptions import __all__ as exceptions__all__
from fastapi_header_binding.core.types import *  # noqa: F403
from fastapi_header_binding.core.types import __all__ as types__all__

__all__ = ["HeaderBindingConfig"]

__all__ += exceptions__all__
__all__ += types__all__
