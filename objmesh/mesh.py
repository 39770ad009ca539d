"""
Выходные типы: вершины трёх форматов и индексированный треугольный меш.

Меш готов к загрузке в GPU: `to_arrays()` / `interleaved()` отдают
float32‑вершины и uint32‑индексы.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np

Vec2 = Tuple[float, float]
Vec3T = Tuple[float, float, float]
Vec4T = Tuple[float, float, float, float]


class VertexShape(enum.Enum):
    """Формат вершины меша: (метка, число float‑ов на вершину)."""

    POSITION_NORMAL = ("position+normal", 6)
    POSITION_NORMAL_TEXTURE = ("position+normal+texcoord", 8)
    POSITION_NORMAL_TEXTURE_TANGENT = ("position+normal+texcoord+tangent", 12)

    def __init__(self, label: str, stride: int):
        self.label = label
        self.stride = stride

    @property
    def has_texture(self) -> bool:
        return self is not VertexShape.POSITION_NORMAL

    @property
    def has_tangent(self) -> bool:
        return self is VertexShape.POSITION_NORMAL_TEXTURE_TANGENT


# ---------------------------------------------------------------------
# Вершины
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class PositionNormal:
    position: Vec3T
    normal: Vec3T

    shape = VertexShape.POSITION_NORMAL

    def flatten(self) -> Tuple[float, ...]:
        return self.position + self.normal


@dataclass(frozen=True)
class PositionNormalTexture:
    position: Vec3T
    normal: Vec3T
    texcoord: Vec2

    shape = VertexShape.POSITION_NORMAL_TEXTURE

    def flatten(self) -> Tuple[float, ...]:
        return self.position + self.normal + self.texcoord


@dataclass(frozen=True)
class PositionNormalTextureTangent:
    """`tangent` = (x, y, z, w), w = ±1 – знак битангента."""
    position: Vec3T
    normal: Vec3T
    texcoord: Vec2
    tangent: Vec4T

    shape = VertexShape.POSITION_NORMAL_TEXTURE_TANGENT

    def flatten(self) -> Tuple[float, ...]:
        return self.position + self.normal + self.texcoord + self.tangent


MeshVertex = Union[PositionNormal, PositionNormalTexture, PositionNormalTextureTangent]


# ---------------------------------------------------------------------
# Меш
# ---------------------------------------------------------------------
class Mesh:
    """Неизменяемый индексированный треугольный меш одного формата вершин."""

    __slots__ = ("shape", "vertices", "indices")

    def __init__(self, shape: VertexShape, vertices, indices):
        self.shape = shape
        self.vertices: Tuple[MeshVertex, ...] = tuple(vertices)
        self.indices: Tuple[Tuple[int, int, int], ...] = tuple(tuple(t) for t in indices)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices)

    @property
    def index_count(self) -> int:
        return 3 * len(self.indices)

    # -----------------------------------------------------------------
    # GPU‑буферы
    # -----------------------------------------------------------------
    def to_arrays(self) -> tuple[np.ndarray, np.ndarray]:
        """(вершины float32 N×stride, индексы uint32 M×3)."""
        verts = np.array([v.flatten() for v in self.vertices], dtype=np.float32)
        verts = verts.reshape((-1, self.shape.stride))
        inds = np.array(self.indices, dtype=np.uint32).reshape((-1, 3))
        return verts, inds

    def interleaved(self) -> tuple[np.ndarray, np.ndarray]:
        """Плоские массивы для glBufferData / create_buffer."""
        verts, inds = self.to_arrays()
        return verts.ravel(), inds.ravel()

    @property
    def bounding_sphere(self) -> tuple[np.ndarray, float]:
        """(центр, радиус) в координатах модели."""
        if not self.vertices:
            return np.zeros(3, dtype=np.float32), 0.0
        positions = np.array([v.position for v in self.vertices], dtype=np.float32)
        centre = positions.mean(axis=0).astype(np.float32)
        radius = float(np.linalg.norm(positions - centre, axis=1).max())
        return centre, radius

    # -----------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Mesh):
            return NotImplemented
        return (self.shape, self.vertices, self.indices) == (other.shape, other.vertices, other.indices)

    def __hash__(self):
        return hash((self.shape, self.vertices, self.indices))

    def __repr__(self) -> str:
        return (f"Mesh({self.shape.label}, vertices={self.vertex_count}, "
                f"triangles={self.triangle_count})")
