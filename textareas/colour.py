"""Red, green and blue colour values packed as 0xRRGGBB."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RGB:
    """A colour with red, green and blue components."""

    r: int = 0
    g: int = 0
    b: int = 0

    @classmethod
    def from_colour(cls, colour: int) -> RGB:
        """Unpack a colour given as 0xRRGGBB."""
        return cls((colour >> 16) & 0xFF, (colour >> 8) & 0xFF, colour & 0xFF)

    @property
    def colour(self) -> int:
        """The colour packed as 0xRRGGBB."""
        return (self.r << 16) + (self.g << 8) + self.b

    @colour.setter
    def colour(self, value: int) -> None:
        self.r = (value >> 16) & 0xFF
        self.g = (value >> 8) & 0xFF
        self.b = value & 0xFF

    @classmethod
    def white(cls) -> RGB:
        return cls(255, 255, 255)

    @classmethod
    def black(cls) -> RGB:
        return cls(0, 0, 0)

    @classmethod
    def red(cls) -> RGB:
        return cls(255, 0, 0)

    @classmethod
    def green(cls) -> RGB:
        return cls(0, 255, 0)

    @classmethod
    def blue(cls) -> RGB:
        return cls(0, 0, 255)

    def describe(self) -> str:
        """Return a multi-line listing of the components."""
        return f"R: {self.r}\nG:     {self.g}\nB:   {self.b}\n"