"""Typed errors raised by the resolvers."""

from __future__ import annotations


class SlideshapeError(Exception):
    """Base error for the project."""


class ColorResolutionError(SlideshapeError):
    """A color specification could not be turned into a concrete color."""


class MissingThemeError(ColorResolutionError):
    """A scheme color was referenced but no theme palette was wired in."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f"scheme color {key!r} requested but no theme palette was supplied"
        )
        self.key = key


class MissingPlaceholderError(ColorResolutionError):
    """A placeholder color (phClr) was referenced without a style context."""

    def __init__(self) -> None:
        super().__init__("placeholder color requested but none was supplied")
