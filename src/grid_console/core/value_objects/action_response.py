"""Normalized outcome of a write or administrative call."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ActionResponse:
    """Uniform result record handed to UI code.

    A successful response carries the server body text or the caller's
    default message. A failed response always carries a non-empty cause.
    """

    message: str
    success: bool

    @classmethod
    def ok(cls, message: str) -> "ActionResponse":
        return cls(message=message, success=True)

    @classmethod
    def failed(cls, message: str) -> "ActionResponse":
        return cls(message=message, success=False)
