"""
Пакет graphics – интерфейс, через который меш уходит в GPU.
"""

from objmesh.graphics.backend import BufferBackend

__all__ = ["BufferBackend"]
