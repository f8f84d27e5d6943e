# objmesh/mesh/builder.py
# -*- coding: utf-8 -*-
"""
Инкрементальная сборка индексированного меша из потока директив.

* «Сырые» пулы (v / vn / vt) только растут – ранее выданный индекс
  всегда указывает на ту же запись.
* Углы граней разрешаются в OutputVertex и дедуплицируются по значению
  (побитовое сравнение float32); вершина попадает в пул только в момент
  первого использования.
* Индексы OBJ 1‑based: ссылка 1 – первая записанная вершина.
* Директивы без влияния на геометрию (группы, материалы, имена,
  комментарии, сглаживание, точки, отрезки) принимаются и игнорируются;
  в строгом режиме – UnsupportedDirectiveError.
"""

import enum
from typing import Dict, Iterable, List, Optional

from objmesh.errors import (
    InvalidIndexError,
    MissingNormalError,
    MissingTextureCoordError,
    UnsupportedDirectiveError,
)
from objmesh.mesh.mesh import Mesh
from objmesh.mesh.vertex import OutputVertex
from objmesh.parser.directives import (
    AttributeIndexTriple,
    Directive,
    Face,
    Normal,
    Point,
    RawPosition,
    RawTextureCoord,
    TextureCoord,
    Vertex,
)
from objmesh.utils.logger import logger

DEDUP_MODES = ("scan", "hash")


class DirectiveOutcome(enum.Enum):
    APPLIED = "applied"
    UNSUPPORTED = "unsupported"


class MeshBuilder:
    """Накопитель состояния одной загрузки."""

    def __init__(self, dedup: str = "scan", strict: bool = False):
        if dedup not in DEDUP_MODES:
            raise ValueError(f"Unknown dedup mode: {dedup!r} (expected one of {DEDUP_MODES})")
        self.dedup = dedup
        self.strict = strict

        self.positions: List[RawPosition] = []
        self.normals: List[RawPosition] = []
        self.texture_coords: List[RawTextureCoord] = []
        self.points: List[AttributeIndexTriple] = []

        self.vertices: List[OutputVertex] = []
        self.indices: List[int] = []

        # только для dedup == "hash": bytes → индекс в пуле
        self._lookup: Optional[Dict[bytes, int]] = {} if dedup == "hash" else None

    # -----------------------------------------------------------------
    # сырые пулы
    # -----------------------------------------------------------------
    def record_position(self, position: RawPosition) -> None:
        self.positions.append(position)

    def record_normal(self, normal: RawPosition) -> None:
        self.normals.append(normal)

    def record_texture_coord(self, tex: RawTextureCoord) -> None:
        self.texture_coords.append(tex)

    # -----------------------------------------------------------------
    # разрешение угла
    # -----------------------------------------------------------------
    @staticmethod
    def _lookup_raw(pool: list, index: int, kind: str):
        if not 1 <= index <= len(pool):
            raise InvalidIndexError(kind, index, len(pool))
        return pool[index - 1]

    def resolve(self, corner: AttributeIndexTriple) -> OutputVertex:
        """Ссылка угла → полная вершина; отсутствующие vn/vt – нули."""
        p = self._lookup_raw(self.positions, corner.position, "position")

        normal = (0.0, 0.0, 0.0)
        if corner.normal is not None:
            n = self._lookup_raw(self.normals, corner.normal, "normal")
            normal = (n.x, n.y, n.z)

        uv = (0.0, 0.0)
        if corner.texture_coords is not None:
            t = self._lookup_raw(self.texture_coords, corner.texture_coords,
                                 "texture coordinate")
            uv = (t.u, t.v)

        return OutputVertex((p.x, p.y, p.z), normal, uv)

    def intern(self, vertex: OutputVertex) -> int:
        """Индекс вершины в пуле; новая вершина добавляется в конец."""
        if self._lookup is not None:
            index = self._lookup.get(vertex.key)
            if index is None:
                index = len(self.vertices)
                self.vertices.append(vertex)
                self._lookup[vertex.key] = index
            return index

        for index, existing in enumerate(self.vertices):
            if existing == vertex:
                return index
        self.vertices.append(vertex)
        return len(self.vertices) - 1

    # -----------------------------------------------------------------
    # директивы
    # -----------------------------------------------------------------
    def process_face(self, a: AttributeIndexTriple, b: AttributeIndexTriple,
                     c: AttributeIndexTriple) -> None:
        corners = (a, b, c)
        with_tex = sum(1 for corner in corners if corner.has_texture_coords)
        if with_tex not in (0, 3):
            raise MissingTextureCoordError()
        with_normal = sum(1 for corner in corners if corner.has_normal)
        if with_normal not in (0, 3):
            raise MissingNormalError()

        # сначала разрешаем все углы, чтобы ошибка не оставила полуграни
        resolved = [self.resolve(corner) for corner in corners]
        self.indices.extend(self.intern(vertex) for vertex in resolved)

    def process_directive(self, directive: Directive) -> DirectiveOutcome:
        if isinstance(directive, Vertex):
            self.record_position(directive.position)
        elif isinstance(directive, Normal):
            self.record_normal(directive.normal)
        elif isinstance(directive, TextureCoord):
            self.record_texture_coord(directive.texture_coords)
        elif isinstance(directive, Face):
            self.process_face(directive.a, directive.b, directive.c)
        else:
            if self.strict:
                raise UnsupportedDirectiveError(directive)
            if isinstance(directive, Point):
                self.points.append(directive.corner)
            logger.debug(f"[MeshBuilder] Ignoring {type(directive).__name__}")
            return DirectiveOutcome.UNSUPPORTED
        return DirectiveOutcome.APPLIED

    def process_all(self, directives: Iterable[Directive]) -> Mesh:
        """Применить директивы по порядку; первая ошибка прерывает сборку."""
        for directive in directives:
            self.process_directive(directive)
        return self.finish()

    def finish(self) -> Mesh:
        """Отдать буферы в Mesh; сам builder после этого не нужен."""
        return Mesh(self.vertices, self.indices)
