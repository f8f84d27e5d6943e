# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: тестовые OBJ‑файлы и мок‑бэкенд,
который только записывает вызовы create_buffer().
"""

import ctypes
from typing import Any, Tuple

import pytest

from objmesh.graphics.backend import BufferBackend


# ----------------------------------------------------------------------
# Куб: 8 позиций, 6 нормалей, по одному треугольнику на сторону
# ----------------------------------------------------------------------
CUBE_OBJ = """\
# cube
o Cube
v 0.0 0.0 0.0
v 1.0 0.0 0.0
v 1.0 1.0 0.0
v 0.0 1.0 0.0
v 0.0 0.0 1.0
v 1.0 0.0 1.0
v 1.0 1.0 1.0
v 0.0 1.0 1.0
vn 0.0 0.0 -1.0
vn 0.0 0.0 1.0
vn 0.0 -1.0 0.0
vn 0.0 1.0 0.0
vn -1.0 0.0 0.0
vn 1.0 0.0 0.0
s off
f 1//1 3//1 2//1
f 5//2 6//2 7//2
f 1//3 2//3 6//3
f 4//4 8//4 7//4
f 1//5 5//5 8//5
f 2//6 3//6 7//6
"""

# Квадрат из двух треугольников с общими углами
QUAD_OBJ = """\
mtllib quad.mtl
v 0.0 0.0 0.0
v 1.0 0.0 0.0
v 1.0 1.0 0.0
v 0.0 1.0 0.0
vt 0.0 0.0
vt 1.0 0.0
vt 1.0 1.0
vt 0.0 1.0
vn 0.0 0.0 1.0
g quad
usemtl default
f 1/1/1 2/2/1 3/3/1
f 1/1/1 3/3/1 4/4/1
"""


class MockBackend(BufferBackend):
    """Записывает каждый create_buffer() в `self.calls`."""

    def __init__(self) -> None:
        self.calls: list[Tuple[str, bytes, str]] = []
        self._resources: list[Any] = []

    def create_buffer(self, data: bytes, usage: str = "default") -> Any:
        self.calls.append(("create_buffer", data, usage))
        ptr = ctypes.c_void_p(0xB0B0 + len(data))
        self._resources.append(ptr)
        return ptr


@pytest.fixture
def backend():
    return MockBackend()


@pytest.fixture
def cube_lines():
    return CUBE_OBJ.splitlines(keepends=True)


@pytest.fixture
def quad_lines():
    return QUAD_OBJ.splitlines(keepends=True)


@pytest.fixture
def cube_file(tmp_path):
    path = tmp_path / "cube.obj"
    path.write_text(CUBE_OBJ, encoding="utf-8")
    return path


@pytest.fixture
def quad_file(tmp_path):
    path = tmp_path / "quad.obj"
    path.write_text(QUAD_OBJ, encoding="utf-8")
    return path
