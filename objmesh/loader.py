# -*- coding: utf-8 -*-
"""
Загрузчик Wavefront OBJ: текст файла → ObjFile (group → material → Mesh).

Чтение файла с диска/сети – забота вызывающего кода, сюда приходит строка.
Материалы MTL не загружаются – имена из usemtl служат только ключами.
"""

from __future__ import annotations

from objmesh.assembler import assemble
from objmesh.model import ObjFile
from objmesh.parser import parse
from objmesh.utils.config import LoaderConfig
from objmesh.utils.logger import logger
from objmesh.utils.profiler import Profiler


def load_obj(text: str,
             with_tangents: bool | None = None,
             config: LoaderConfig | None = None) -> ObjFile:
    """
    Разобрать и собрать OBJ.

    `with_tangents` имеет приоритет над `config`; без обоих – False.
    Любая ошибка (`ObjError`) прерывает загрузку целиком.
    """
    config = config if config is not None else LoaderConfig()
    if with_tangents is None:
        with_tangents = config.with_tangents

    with Profiler("parse"):
        directives = parse(text)
    with Profiler("assemble"):
        obj = assemble(directives, with_tangents,
                       skip_degenerate_uv=config.skip_degenerate_uv)

    logger.info(
        f"[Loader] {len(obj)} group(s), {sum(1 for _ in obj.meshes())} mesh(es), "
        f"{obj.vertex_count} vertices, {obj.triangle_count} triangles"
    )
    return obj
