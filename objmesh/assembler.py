# -*- coding: utf-8 -*-
"""
Сборка директив в индексированные треугольные меши.

Директивы обрабатываются строго по порядку (левая свёртка):

* v / vt / vn дописываются в общие массивы (индексы 1‑based, ссылаться
  можно только на уже объявленные данные);
* g / o открывают новую группу, usemtl – новый материал внутри группы;
* f триангулируется веером (a,b,c,d) → (a,b,c), (d,a,c), а углы
  дедуплицируются по ключу (pos, tex, norm) внутри своего меша.

Формат вершин меша задаётся первой гранью:
    без vt              → PositionNormal
    с vt                → PositionNormalTexture
    с vt + with_tangents → PositionNormalTextureTangent

Если в одну пару (group, material) повторно попадают грани (повторный
usemtl или повторное имя группы) – они дописываются в тот же меш, с той же
таблицей дедупликации.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from objmesh.directives import (
    Corner,
    Directive,
    Face,
    GroupName,
    MaterialLib,
    ObjectName,
    SmoothingGroup,
    UseMaterial,
    Vertex,
    VertexNormal,
    VertexTexture,
)
from objmesh.errors import DanglingReferenceError, InconsistentFaceShapeError
from objmesh.math.vec3 import Vec3
from objmesh.mesh import (
    Mesh,
    PositionNormal,
    PositionNormalTexture,
    PositionNormalTextureTangent,
    VertexShape,
)
from objmesh.model import DEFAULT_NAME, ObjFile
from objmesh.utils.logger import logger

# |r| ниже порога – UV‑треугольник вырожден
TANGENT_EPSILON = 1e-6
# Подставляемое вместо 1/r значение для вырожденных UV (совместимость с эталонными данными)
DEGENERATE_UV_RECIPROCAL = 0.1

CornerKey = Tuple[int, Optional[int], int]


# ---------------------------------------------------------------------
# Публичный API
# ---------------------------------------------------------------------
def assemble(directives: Iterable[Directive],
             with_tangents: bool = False,
             *,
             skip_degenerate_uv: bool = False) -> ObjFile:
    """Свернуть директивы в `ObjFile` (group → material → Mesh)."""
    assembler = Assembler(with_tangents=with_tangents,
                          skip_degenerate_uv=skip_degenerate_uv)
    for directive in directives:
        assembler.feed(directive)
    return assembler.finish()


# ---------------------------------------------------------------------
# Накопитель одного меша
# ---------------------------------------------------------------------
class _MeshBuilder:
    """Меш в процессе сборки для одной пары (group, material)."""

    def __init__(self, shape: VertexShape, skip_degenerate_uv: bool = False):
        self.shape = shape
        self.skip_degenerate_uv = skip_degenerate_uv
        # (position, normal, texcoord|None) на каждый слот
        self.corners: List[tuple] = []
        self.indices: List[Tuple[int, int, int]] = []
        self.slots: Dict[CornerKey, int] = {}
        self._tangents: List[Vec3] = []
        self._bitangents: List[Vec3] = []

    def slot(self, key: CornerKey, position, normal, texcoord) -> int:
        self.slots[key] = len(self.corners)
        self.corners.append((position, normal, texcoord))
        if self.shape.has_tangent:
            self._tangents.append(Vec3())
            self._bitangents.append(Vec3())
        return self.slots[key]

    def add_triangle(self, tri: Tuple[int, int, int]) -> None:
        self.indices.append(tri)
        if self.shape.has_tangent:
            self._accumulate_tangent(tri)

    # -----------------------------------------------------------------
    # Тангенты
    # -----------------------------------------------------------------
    def _accumulate_tangent(self, tri: Tuple[int, int, int]) -> None:
        (p1, _, uv1), (p2, _, uv2), (p3, _, uv3) = (self.corners[i] for i in tri)
        p1, p2, p3 = Vec3.from_seq(p1), Vec3.from_seq(p2), Vec3.from_seq(p3)
        e1 = p2 - p1
        e2 = p3 - p1
        s1, t1 = uv2[0] - uv1[0], uv2[1] - uv1[1]
        s2, t2 = uv3[0] - uv1[0], uv3[1] - uv1[1]

        r = s1 * t2 - s2 * t1
        if abs(r) < TANGENT_EPSILON:
            if self.skip_degenerate_uv:
                return
            inv = DEGENERATE_UV_RECIPROCAL
        else:
            inv = 1.0 / r

        tangent = (e1 * t2 - e2 * t1) * inv
        bitangent = (e2 * s1 - e1 * s2) * inv
        for i in tri:
            self._tangents[i] = self._tangents[i] + tangent
            self._bitangents[i] = self._bitangents[i] + bitangent

    def _finish_tangent(self, slot: int, normal) -> Tuple[float, float, float, float]:
        """Грам–Шмидт относительно нормали + знак битангента."""
        n = Vec3.from_seq(normal)
        t = self._tangents[slot]
        b = self._bitangents[slot]
        if t.length() == 0.0:
            t = b.cross(n)
        t = (t - n * n.dot(t)).normalized()
        w = -1.0 if n.cross(t).dot(b) < 0.0 else 1.0
        return (t.x, t.y, t.z, w)

    # -----------------------------------------------------------------
    def build(self) -> Mesh:
        if self.shape is VertexShape.POSITION_NORMAL:
            vertices = [PositionNormal(p, n) for p, n, _ in self.corners]
        elif self.shape is VertexShape.POSITION_NORMAL_TEXTURE:
            vertices = [PositionNormalTexture(p, n, uv) for p, n, uv in self.corners]
        else:
            vertices = [
                PositionNormalTextureTangent(p, n, uv, self._finish_tangent(i, n))
                for i, (p, n, uv) in enumerate(self.corners)
            ]
        return Mesh(self.shape, vertices, self.indices)


# ---------------------------------------------------------------------
# Сборщик
# ---------------------------------------------------------------------
class Assembler:
    """Состояние левой свёртки директив; один экземпляр – один файл."""

    def __init__(self, with_tangents: bool = False, skip_degenerate_uv: bool = False):
        self.with_tangents = with_tangents
        self.skip_degenerate_uv = skip_degenerate_uv

        self.positions: List[Tuple[float, float, float]] = []
        self.texcoords: List[Tuple[float, float]] = []
        self.normals: List[Tuple[float, float, float]] = []

        self.group = DEFAULT_NAME
        self.material = DEFAULT_NAME
        # group -> material -> builder, в порядке появления
        self._groups: Dict[str, Dict[str, _MeshBuilder]] = {}
        self._finished = False

        self._handlers = {
            Vertex: self._on_vertex,
            VertexNormal: self._on_normal,
            VertexTexture: self._on_texture,
            Face: self._on_face,
            GroupName: self._on_group,
            ObjectName: self._on_group,
            UseMaterial: self._on_material,
            SmoothingGroup: self._on_ignored,
            MaterialLib: self._on_ignored,
        }

    def feed(self, directive: Directive) -> None:
        if self._finished:
            raise RuntimeError("[Assembler] feed() after finish()")
        try:
            handler = self._handlers[type(directive)]
        except KeyError:
            raise TypeError(f"[Assembler] Unknown directive {directive!r}") from None
        handler(directive)

    def finish(self) -> ObjFile:
        self._finished = True
        result = {}
        for group, builders in self._groups.items():
            result[group] = {material: b.build() for material, b in builders.items()}
            logger.debug(f"[Assembler] group {group!r}: {len(builders)} mesh(es)")
        return ObjFile(result)

    # -----------------------------------------------------------------
    # Обработчики директив
    # -----------------------------------------------------------------
    def _on_vertex(self, d: Vertex) -> None:
        self.positions.append(d.as_tuple())

    def _on_normal(self, d: VertexNormal) -> None:
        self.normals.append(d.as_tuple())

    def _on_texture(self, d: VertexTexture) -> None:
        self.texcoords.append(d.as_tuple())

    def _on_group(self, d) -> None:
        self.group = d.name
        self.material = DEFAULT_NAME

    def _on_material(self, d: UseMaterial) -> None:
        self.material = d.name

    def _on_ignored(self, d) -> None:
        logger.debug(f"[Assembler] ignoring {d!r}")

    def _on_face(self, face: Face) -> None:
        builder = self._builder_for(face)
        for triangle in face.triangles():
            tri = tuple(self._resolve(builder, corner, face.line) for corner in triangle)
            builder.add_triangle(tri)

    # -----------------------------------------------------------------
    # Вспомогательное
    # -----------------------------------------------------------------
    def _shape_for(self, face: Face) -> VertexShape:
        if not face.has_texture:
            return VertexShape.POSITION_NORMAL
        if self.with_tangents:
            return VertexShape.POSITION_NORMAL_TEXTURE_TANGENT
        return VertexShape.POSITION_NORMAL_TEXTURE

    def _builder_for(self, face: Face) -> _MeshBuilder:
        shape = self._shape_for(face)
        builders = self._groups.setdefault(self.group, {})
        builder = builders.get(self.material)
        if builder is None:
            builder = _MeshBuilder(shape, self.skip_degenerate_uv)
            builders[self.material] = builder
        elif builder.shape is not shape:
            raise InconsistentFaceShapeError(builder.shape, shape,
                                             self.group, self.material, face.line)
        return builder

    def _resolve(self, builder: _MeshBuilder, corner: Corner, line: int) -> int:
        key = corner.key
        slot = builder.slots.get(key)
        if slot is not None:
            return slot
        position = self._lookup(self.positions, corner.position, "position", key, line)
        normal = self._lookup(self.normals, corner.normal, "normal", key, line)
        texcoord = None
        if corner.texture is not None:
            texcoord = self._lookup(self.texcoords, corner.texture, "texcoord", key, line)
        return builder.slot(key, position, normal, texcoord)

    @staticmethod
    def _lookup(array: list, index: int, kind: str, key: CornerKey, line: int):
        # 0 и отрицательные индексы тоже сюда – без питоновского «с конца»
        if not 1 <= index <= len(array):
            raise DanglingReferenceError(key, kind, index, len(array), line)
        return array[index - 1]
