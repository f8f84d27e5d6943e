# objmesh/mesh/mesh.py
"""
Готовый индексированный меш – результат загрузки, передаётся на GPU.
"""

from typing import List, Sequence, Tuple

import numpy as np

from objmesh.mesh.vertex import FLOATS_PER_VERTEX, OutputVertex
from objmesh.utils.logger import logger


class Mesh:
    """Пул уникальных вершин + список треугольных индексов (uint32)."""

    index_format = "uint32"

    def __init__(self, vertices: Sequence[OutputVertex], indices: Sequence[int]):
        if len(indices) % 3:
            raise ValueError(f"Index count {len(indices)} is not a multiple of 3")
        self.vertices: List[OutputVertex] = list(vertices)
        self.indices: List[int] = list(indices)

    # -----------------------------------------------------------------
    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    # -----------------------------------------------------------------
    # numpy‑представление
    # -----------------------------------------------------------------
    def vertex_array(self) -> np.ndarray:
        """(N, 8) float32: pos.xyz, normal.xyz, uv."""
        if not self.vertices:
            return np.zeros((0, FLOATS_PER_VERTEX), dtype=np.float32)
        return np.stack([v.as_np() for v in self.vertices])

    def index_array(self) -> np.ndarray:
        return np.array(self.indices, dtype=np.uint32)

    @property
    def positions(self) -> np.ndarray:
        return self.vertex_array()[:, 0:3]

    @property
    def normals(self) -> np.ndarray:
        return self.vertex_array()[:, 3:6]

    @property
    def texcoords(self) -> np.ndarray:
        return self.vertex_array()[:, 6:8]

    # -----------------------------------------------------------------
    # передача в рендер
    # -----------------------------------------------------------------
    def to_buffers(self) -> Tuple[bytes, bytes]:
        """Плоские little‑endian буферы: 8 float на вершину, u32 индексы."""
        vertex_data = self.vertex_array().astype("<f4").tobytes()
        index_data = self.index_array().astype("<u4").tobytes()
        return vertex_data, index_data

    def upload(self, backend):
        """Создать vertex/index‑буферы через backend.create_buffer()."""
        vertex_data, index_data = self.to_buffers()
        vb = backend.create_buffer(vertex_data, usage="vertex")
        ib = backend.create_buffer(index_data, usage="index")
        logger.debug(f"[Mesh] Uploaded {self.vertex_count} vertices, "
                     f"{self.index_count} indices")
        return vb, ib

    def __repr__(self) -> str:
        return f"Mesh(vertices={self.vertex_count}, indices={self.index_count})"
