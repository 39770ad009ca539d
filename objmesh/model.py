"""
Результат загрузки: группы → материалы → Mesh.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterator, List, Tuple

from objmesh.mesh import Mesh

# Имя группы/материала, если в файле нет g/o/usemtl
DEFAULT_NAME = "__default__"


class ObjFile(Mapping):
    """Неизменяемое отображение `group -> {material -> Mesh}`."""

    def __init__(self, groups=None):
        groups = groups or {}
        self._groups = MappingProxyType(
            {g: MappingProxyType(dict(mats)) for g, mats in groups.items()}
        )

    def __getitem__(self, group: str) -> Mapping:
        return self._groups[group]

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def meshes(self) -> Iterator[Tuple[str, str, Mesh]]:
        """Все меши в порядке появления: (group, material, mesh)."""
        for group, materials in self._groups.items():
            for material, mesh in materials.items():
                yield group, material, mesh

    def materials(self) -> List[str]:
        seen = []
        for _, material, _ in self.meshes():
            if material not in seen:
                seen.append(material)
        return seen

    @property
    def vertex_count(self) -> int:
        return sum(m.vertex_count for _, _, m in self.meshes())

    @property
    def triangle_count(self) -> int:
        return sum(m.triangle_count for _, _, m in self.meshes())

    def __repr__(self) -> str:
        parts = ", ".join(f"{g!r}: {list(mats)}" for g, mats in self._groups.items())
        return f"ObjFile({{{parts}}})"
