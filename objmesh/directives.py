# objmesh/directives.py
"""
Типы директив – результат разбора одной строки OBJ.

Закрытый набор неизменяемых dataclass‑ов; `Directive` – их объединение.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Vertex:
    x: float
    y: float
    z: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class VertexNormal:
    """Нормаль; парсер кладёт сюда уже нормализованный вектор."""
    x: float
    y: float
    z: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class VertexTexture:
    u: float
    v: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.u, self.v)


@dataclass(frozen=True)
class Corner:
    """Угол грани: 1‑based индексы. `texture` = None для формы `p//n`."""
    position: int
    texture: Optional[int]
    normal: int

    @property
    def key(self) -> Tuple[int, Optional[int], int]:
        return (self.position, self.texture, self.normal)


@dataclass(frozen=True)
class Face:
    """Полигон из 3 или 4 углов одной формы."""
    corners: Tuple[Corner, ...]
    line: int = field(default=0, compare=False)

    @property
    def has_texture(self) -> bool:
        return self.corners[0].texture is not None

    def triangles(self) -> Tuple[Tuple[Corner, Corner, Corner], ...]:
        """Веер от диагонали: (a,b,c,d) → (a,b,c), (d,a,c)."""
        if len(self.corners) == 3:
            return (self.corners,)
        a, b, c, d = self.corners
        return ((a, b, c), (d, a, c))


@dataclass(frozen=True)
class GroupName:
    name: str


@dataclass(frozen=True)
class ObjectName:
    name: str


@dataclass(frozen=True)
class SmoothingGroup:
    token: str


@dataclass(frozen=True)
class MaterialLib:
    path: str


@dataclass(frozen=True)
class UseMaterial:
    name: str


Directive = Union[
    Vertex,
    VertexNormal,
    VertexTexture,
    Face,
    GroupName,
    ObjectName,
    SmoothingGroup,
    MaterialLib,
    UseMaterial,
]

__all__ = [
    "Vertex", "VertexNormal", "VertexTexture", "Corner", "Face",
    "GroupName", "ObjectName", "SmoothingGroup", "MaterialLib", "UseMaterial",
    "Directive",
]
