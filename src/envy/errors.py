from __future__ import annotations


class EnvyError(RuntimeError):
    """Raised when envy is used with invalid arguments."""


class ConversionError(EnvyError, ValueError):
    """Raised when an environment variable cannot be converted to its kind."""

    def __init__(self, variable: str, type_name: str, reason: str):
        super().__init__(f"failed to parse {variable} as {type_name}: {reason}")
        self.variable = variable
        self.type_name = type_name
        self.reason = reason
