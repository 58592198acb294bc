"""RGBA colours with 8-bit channels."""

from __future__ import annotations

from dataclasses import dataclass


def _channel(value: float) -> int:
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class Color:
    """An RGBA colour; every channel is an integer in 0..255, default opaque white.

    Channel values are truncated to integers and clamped into range.
    """

    r: int = 255
    g: int = 255
    b: int = 255
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            object.__setattr__(self, name, _channel(getattr(self, name)))

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``RRGGBB`` or ``RRGGBBAA``, optionally prefixed with ``#``."""
        digits = text[1:] if text.startswith("#") else text
        if len(digits) not in (6, 8):
            raise ValueError(f"expected 6 or 8 hex digits, got {text!r}")
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        return cls(*channels)