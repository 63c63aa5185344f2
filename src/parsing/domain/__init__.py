"""
Domain слой домена Parsing.

Содержит исключения для Parsing домена.
"""

from .exceptions import (
    ParsingError,
    ParsingConfigurationError,
    ParsingValidationError,
    MasterDataError,
    ParsingFileSystemError,
    ParsingFileNotFoundError,
    ParsingFileWriteError,
)

__all__ = [
    "ParsingError",
    "ParsingConfigurationError",
    "ParsingValidationError",
    "MasterDataError",
    "ParsingFileSystemError",
    "ParsingFileNotFoundError",
    "ParsingFileWriteError",
]
