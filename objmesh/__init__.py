"""
objmesh – загрузчик Wavefront OBJ в готовые для рендера буферы вершин/индексов.

    from objmesh import load_obj
    obj = load_obj(text, with_tangents=True)
    mesh = obj["__default__"]["__default__"]
    vertices, indices = mesh.to_arrays()
"""

from objmesh.utils import logger, LoaderConfig
from objmesh.errors import (
    ObjError,
    ParseError,
    UnsupportedFaceError,
    AssemblyError,
    DanglingReferenceError,
    InconsistentFaceShapeError,
)
from objmesh.directives import (
    Vertex, VertexNormal, VertexTexture, Corner, Face,
    GroupName, ObjectName, SmoothingGroup, MaterialLib, UseMaterial,
)
from objmesh.mesh import (
    Mesh,
    VertexShape,
    PositionNormal,
    PositionNormalTexture,
    PositionNormalTextureTangent,
)
from objmesh.model import ObjFile, DEFAULT_NAME
from objmesh.parser import parse
from objmesh.assembler import assemble, Assembler
from objmesh.loader import load_obj

__version__ = "1.0.0"

__all__ = [
    "load_obj",
    "parse",
    "assemble",
    "Assembler",
    "LoaderConfig",
    "ObjFile",
    "DEFAULT_NAME",
    "Mesh",
    "VertexShape",
    "PositionNormal",
    "PositionNormalTexture",
    "PositionNormalTextureTangent",
    "Vertex",
    "VertexNormal",
    "VertexTexture",
    "Corner",
    "Face",
    "GroupName",
    "ObjectName",
    "SmoothingGroup",
    "MaterialLib",
    "UseMaterial",
    "ObjError",
    "ParseError",
    "UnsupportedFaceError",
    "AssemblyError",
    "DanglingReferenceError",
    "InconsistentFaceShapeError",
    "logger",
]
