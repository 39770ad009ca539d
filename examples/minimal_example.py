import sys
from pathlib import Path

import objmesh
from objmesh.utils import logger


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("usage: python minimal_example.py model.obj [--tangents]")
        sys.exit(1)

    path = Path(sys.argv[1])
    text = path.read_text(encoding="utf-8")

    try:
        obj = objmesh.load_obj(text, with_tangents="--tangents" in sys.argv)
    except objmesh.ObjError as exc:
        # сообщение уже содержит строку, каретку и список ожидаемого
        print(exc)
        sys.exit(2)

    for group, material, mesh in obj.meshes():
        vertices, indices = mesh.to_arrays()
        centre, radius = mesh.bounding_sphere
        logger.info(f"{group}/{material}: {mesh!r}, buffers {vertices.shape} / {indices.shape}, "
                    f"radius {radius:.3f}")
