# SPDX-License-Identifier: MIT
"""Exceptions raised by version parsing."""

from __future__ import annotations


class VersionError(Exception):
    """Base class for errors about a version value."""

    def __init__(self, value: object, message: str = ""):
        self.value = str(value)
        self.message = message or f"Invalid version value: {self.value}"
        super().__init__(self.message)


class InvalidFormatError(VersionError):
    """Raised when a string is not on any of the supported version formats."""

    def __init__(self, value: object, message: str = ""):
        super().__init__(value, message or f"The value [{value}] is not on a supported format")


class InvalidNumberError(VersionError):
    """Raised when a segment value is not a non-negative integer."""

    def __init__(self, value: object, message: str = ""):
        super().__init__(
            value, message or f"The value [{value}] is not a valid version number segment"
        )
