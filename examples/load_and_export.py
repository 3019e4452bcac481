"""
Загрузка OBJ → разбиение квадов → нормали граней → плоские буферы.

    python examples/load_and_export.py model.obj [--flat]
"""
import sys

import objmesh as om
from objmesh.utils import logger


def main(path: str, smooth: bool = True) -> None:
    mesh = om.load_obj(path)
    om.triangulate(mesh)
    mesh.log_data()

    for buf in om.export_all(mesh, smooth_lighting=smooth):
        logger.info(f"{buf.name}: {buf.num_vertices} vertices, "
                    f"attributes {buf.vertex_attrib_list}, "
                    f"stride {buf.interleaved().shape[1]} floats")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        sys.exit("usage: load_and_export.py FILE [--flat]")
    main(sys.argv[1], smooth="--flat" not in sys.argv[2:])
