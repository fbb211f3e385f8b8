"""Raw git data providers."""

from .base import CommandSource
from .gitpython import GitPythonSource

__all__ = [
    "CommandSource",
    "GitPythonSource",
]
