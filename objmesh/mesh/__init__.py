"""
Пакет mesh – сборка и итоговое представление меша.
"""

from objmesh.mesh.vertex import OutputVertex
from objmesh.mesh.mesh import Mesh
from objmesh.mesh.builder import MeshBuilder, DirectiveOutcome

__all__ = ["OutputVertex", "Mesh", "MeshBuilder", "DirectiveOutcome"]
