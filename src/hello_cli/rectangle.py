"""Rectangle shape."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    width: int
    height: int

    def area(self) -> int:
        return self.width * self.height
