# objmesh/parser/directives.py
# -*- coding: utf-8 -*-
"""
Типы, которые производит парсер строк: «сырые» атрибуты, ссылки углов грани
и закрытый набор директив (по одной на каждый тег формата).
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, Tuple


@dataclass(frozen=True)
class RawPosition:
    """Позиция `v` (и нормаль `vn` – та же форма, w не используется)."""
    x: float
    y: float
    z: float
    w: float = 1.0


@dataclass(frozen=True)
class RawTextureCoord:
    """Текстурная координата `vt`."""
    u: float
    v: float
    w: float = 1.0


@total_ordering
@dataclass(frozen=True, eq=True)
class AttributeIndexTriple:
    """
    Ссылка одного угла грани: `position/texture_coords/normal`.
    Индексы 1‑based; None – ссылка отсутствует.
    """
    position: int
    texture_coords: Optional[int] = None
    normal: Optional[int] = None

    def _key(self) -> Tuple[int, int, int, int, int]:
        # отсутствие < любого присутствующего значения
        t = (0, 0) if self.texture_coords is None else (1, self.texture_coords)
        n = (0, 0) if self.normal is None else (1, self.normal)
        return (self.position,) + t + n

    def __lt__(self, other):
        if not isinstance(other, AttributeIndexTriple):
            return NotImplemented
        return self._key() < other._key()

    @property
    def has_texture_coords(self) -> bool:
        return self.texture_coords is not None

    @property
    def has_normal(self) -> bool:
        return self.normal is not None


# ----------------------------------------------------------------------
# Директивы
# ----------------------------------------------------------------------
class Directive:
    """Базовый класс всех директив (одна строка исходника)."""
    __slots__ = ()


@dataclass(frozen=True)
class Vertex(Directive):
    position: RawPosition


@dataclass(frozen=True)
class Normal(Directive):
    normal: RawPosition


@dataclass(frozen=True)
class TextureCoord(Directive):
    texture_coords: RawTextureCoord


@dataclass(frozen=True)
class Point(Directive):
    corner: AttributeIndexTriple


@dataclass(frozen=True)
class LineSegment(Directive):
    start: AttributeIndexTriple
    end: AttributeIndexTriple


@dataclass(frozen=True)
class Face(Directive):
    a: AttributeIndexTriple
    b: AttributeIndexTriple
    c: AttributeIndexTriple

    @property
    def corners(self) -> Tuple[AttributeIndexTriple, AttributeIndexTriple, AttributeIndexTriple]:
        return (self.a, self.b, self.c)


@dataclass(frozen=True)
class SmoothingGroup(Directive):
    group: Optional[int]   # None == "off"


@dataclass(frozen=True)
class Group(Directive):
    name: str


@dataclass(frozen=True)
class UseMaterial(Directive):
    name: str


@dataclass(frozen=True)
class MaterialLib(Directive):
    name: str


@dataclass(frozen=True)
class ObjectName(Directive):
    name: str


@dataclass(frozen=True)
class Comment(Directive):
    text: str
