"""
Абстрактный потребитель готовых буферов меша.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any


class BufferBackend(ABC):
    """Минимальный интерфейс графического бекенда для загрузки меша."""

    @abstractmethod
    def create_buffer(self, data: bytes, usage: str = "default") -> Any:
        """usage: "vertex" | "index" | "default"."""
        pass
