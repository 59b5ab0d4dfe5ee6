"""A labelled rectangular area with fill and border colours."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .colour import RGB
from .geometry import Rectangle


def _as_rgb(value: RGB | int) -> RGB:
    if isinstance(value, RGB):
        return replace(value)
    return RGB.from_colour(value)


@dataclass
class TextArea:
    """A rectangle carrying an identifier, a label and two colours.

    Colours may be given as RGB values or packed 0xRRGGBB integers; both
    default to black.
    """

    dimensions: Rectangle
    id: str = ""
    label: str = ""
    fill: RGB = field(default_factory=RGB)
    border: RGB = field(default_factory=RGB)

    def __post_init__(self) -> None:
        self.dimensions = replace(self.dimensions)
        self.fill = _as_rgb(self.fill)
        self.border = _as_rgb(self.border)

    @classmethod
    def from_bounds(
        cls,
        x: int,
        y: int,
        width: int,
        height: int,
        id: str,
        label: str,
        fill: RGB | int | None = None,
        border: RGB | int | None = None,
    ) -> TextArea:
        """Build an area from its position and size."""
        return cls(
            Rectangle(x, y, width, height),
            id,
            label,
            RGB() if fill is None else fill,
            RGB() if border is None else border,
        )

    @property
    def text(self) -> str:
        """The label shown in the area."""
        return self.label

    @text.setter
    def text(self, value: str) -> None:
        self.label = value

    @property
    def x(self) -> int:
        return self.dimensions.x

    @x.setter
    def x(self, value: int) -> None:
        self.dimensions.x = value

    @property
    def y(self) -> int:
        return self.dimensions.y

    @y.setter
    def y(self, value: int) -> None:
        self.dimensions.y = value

    @property
    def width(self) -> int:
        return self.dimensions.width

    @width.setter
    def width(self, value: int) -> None:
        self.dimensions.width = value

    @property
    def height(self) -> int:
        return self.dimensions.height

    @height.setter
    def height(self, value: int) -> None:
        self.dimensions.height = value

    def set_position(self, x: int, y: int) -> None:
        self.dimensions.x = x
        self.dimensions.y = y

    def resize(self, width: int, height: int) -> None:
        self.dimensions.width = width
        self.dimensions.height = height

    def equals(self, id: str) -> bool:
        """Return True if this area has the given identifier."""
        return self.id == id

    def overlaps(self, other: TextArea) -> bool:
        return self.dimensions.overlaps(other.dimensions)

    def describe(self) -> str:
        """Return a multi-line summary of the area."""
        return (
            f"TextArea id:   {self.id}\n"
            f"Preferred location: {self.x}, {self.y}\n"
            f"Size:     {self.width}, {self.height}\n"
            f"Text:   {self.label}\n"
        )