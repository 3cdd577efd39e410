from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RgbColour:
    r: int
    g: int
    b: int

    def in_byte_range(self) -> bool:
        return all(0 <= channel <= 255 for channel in (self.r, self.g, self.b))


@dataclass(frozen=True)
class HslColour:
    h: int
    s: int
    l: int
