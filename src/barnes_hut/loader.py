"""
Loader for fixed-format initial-conditions files.

File layout (blank lines are ignored):

    4000000000              domain width
    6.674E-11               gravitational constant header
    >Jupiter                start of a body block, followed by the name
    223, 159, 14            color (r, g, b)
    2000000000, 2000000000  position (x, y)
    0, 0                    velocity (x, y)
    1.898E27                mass
    71492000                radius
    >Io
    ...

Within a block, lines are recognized by their number of commas: three
values are a color, two values are the position and then the velocity,
a single value is the mass and then the radius. Any malformed or missing
field is an error.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .types import Body, Color, Universe, Vector
from .validation import UniverseFormatError


class _BodyBlock:
    """Fields collected for one body while parsing."""

    def __init__(self, name: str, line_no: int) -> None:
        self.name = name
        self.line_no = line_no
        self.color: Optional[Color] = None
        self.position: Optional[Vector] = None
        self.velocity: Optional[Vector] = None
        self.mass: Optional[float] = None
        self.radius: Optional[float] = None

    def to_body(self) -> Body:
        missing = [
            attr
            for attr in ("color", "position", "velocity", "mass", "radius")
            if getattr(self, attr) is None
        ]
        if missing:
            raise UniverseFormatError(
                f"Body '{self.name}' (line {self.line_no}) is missing: {', '.join(missing)}"
            )
        assert self.position is not None and self.velocity is not None
        assert self.mass is not None and self.radius is not None
        assert self.color is not None
        if self.mass <= 0:
            raise UniverseFormatError(
                f"Body '{self.name}' (line {self.line_no}): mass must be positive, "
                f"got {self.mass}"
            )
        return Body(
            position=self.position,
            velocity=self.velocity,
            mass=self.mass,
            radius=self.radius,
            color=self.color,
            name=self.name,
        )


def _parse_float(text: str, line_no: int, what: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        raise UniverseFormatError(f"Line {line_no}: invalid {what} {text.strip()!r}") from None


def _parse_channel(text: str, line_no: int) -> int:
    try:
        value = int(text.strip())
    except ValueError:
        raise UniverseFormatError(
            f"Line {line_no}: invalid color channel {text.strip()!r}"
        ) from None
    if not 0 <= value <= 255:
        raise UniverseFormatError(f"Line {line_no}: color channel {value} not in [0, 255]")
    return value


def parse_universe(text: str) -> Universe:
    """
    Parse the contents of an initial-conditions file.

    Args:
        text: File contents

    Returns:
        Universe with the declared width and one body per block

    Raises:
        UniverseFormatError: If the header or any body block is malformed
    """
    lines = [
        (i, line.strip()) for i, line in enumerate(text.splitlines(), start=1) if line.strip()
    ]
    if len(lines) < 2:
        raise UniverseFormatError(
            "Expected a width line and a gravitational constant line before the bodies"
        )

    width = _parse_float(lines[0][1], lines[0][0], "width")
    if width <= 0:
        raise UniverseFormatError(f"Line {lines[0][0]}: width must be positive, got {width}")
    _parse_float(lines[1][1], lines[1][0], "gravitational constant")

    blocks: list[_BodyBlock] = []
    current: Optional[_BodyBlock] = None

    for line_no, line in lines[2:]:
        if line.startswith(">"):
            current = _BodyBlock(line[1:].strip(), line_no)
            blocks.append(current)
            continue

        if current is None:
            raise UniverseFormatError(f"Line {line_no}: data before the first '>' body header")

        fields = line.split(",")
        if len(fields) == 3:
            if current.color is not None:
                raise UniverseFormatError(f"Line {line_no}: duplicate color")
            current.color = Color(*(_parse_channel(f, line_no) for f in fields))
        elif len(fields) == 2:
            pair = Vector(
                _parse_float(fields[0], line_no, "coordinate"),
                _parse_float(fields[1], line_no, "coordinate"),
            )
            if current.position is None:
                current.position = pair
            elif current.velocity is None:
                current.velocity = pair
            else:
                raise UniverseFormatError(f"Line {line_no}: unexpected third coordinate pair")
        elif len(fields) == 1:
            value = _parse_float(fields[0], line_no, "number")
            if current.mass is None:
                current.mass = value
            elif current.radius is None:
                current.radius = value
            else:
                raise UniverseFormatError(f"Line {line_no}: unexpected third scalar value")
        else:
            raise UniverseFormatError(f"Line {line_no}: cannot interpret {line!r}")

    return Universe(width, [block.to_body() for block in blocks])


def load_universe(path: Union[str, Path]) -> Universe:
    """
    Load an initial-conditions file.

    Raises:
        FileNotFoundError: If the file does not exist
        UniverseFormatError: If the file is malformed
    """
    return parse_universe(Path(path).read_text())


__all__ = ["parse_universe", "load_universe"]
