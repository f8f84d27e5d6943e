# objmesh/mesh/vertex.py
"""
Итоговая вершина для рендера: позиция (3) + нормаль (3) + UV (2), float32.
"""

from typing import Iterable, Tuple

import numpy as np

FLOATS_PER_VERTEX = 8


class OutputVertex:
    """
    Неизменяемая 8‑компонентная вершина.
    Равенство – побитовое по всем восьми float32 (без эпсилона),
    так что 0.0 и -0.0 различаются, а одинаковые NaN совпадают.
    """

    __slots__ = ("_v", "_key")

    def __init__(self,
                 position: Iterable[float],
                 normal: Iterable[float] = (0.0, 0.0, 0.0),
                 texture_coords: Iterable[float] = (0.0, 0.0)):
        v = np.array([*position, *normal, *texture_coords], dtype=np.float32)
        if v.shape != (FLOATS_PER_VERTEX,):
            raise ValueError(f"OutputVertex needs 3+3+2 components, got {v.shape[0]}")
        v.setflags(write=False)
        self._v = v
        self._key = v.tobytes()

    # -----------------------------------------------------------------
    @property
    def position(self) -> Tuple[float, float, float]:
        return tuple(self._v[0:3].tolist())

    @property
    def normal(self) -> Tuple[float, float, float]:
        return tuple(self._v[3:6].tolist())

    @property
    def texture_coords(self) -> Tuple[float, float]:
        return tuple(self._v[6:8].tolist())

    @property
    def key(self) -> bytes:
        """Битовое представление – ключ дедупликации."""
        return self._key

    def as_np(self) -> np.ndarray:
        """Копия 8‑компонентного ndarray (float32)."""
        return self._v.copy()

    # -----------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, OutputVertex):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        return (f"OutputVertex(position={self.position}, "
                f"normal={self.normal}, texture_coords={self.texture_coords})")
