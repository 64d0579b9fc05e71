"""Exceptions raised by the SHA-256 modules.

Bad input is reported as `ValueError` throughout, so every error below is
also a `ValueError`; `Sha256Error` lets entry points catch them as a group.
"""

from __future__ import annotations


class Sha256Error(Exception):
    """Base class for errors raised by this package."""


class MalformedHexInputError(Sha256Error, ValueError):
    """A hex string contains a non-hex character or has odd length."""


class OversizedMessageError(Sha256Error, ValueError):
    """The message bit-length does not fit the 64-bit SHA-256 length field."""


class ConfigError(Sha256Error, ValueError):
    """The demo configuration is missing, malformed, or out of range."""
