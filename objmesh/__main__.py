# objmesh/__main__.py
"""
python -m objmesh model.obj [--group N] [--flat] ...

Загружает OBJ, обрабатывает топологию и печатает статистику и
раскладку атрибутов экспортированных групп.
"""

import sys
from argparse import ArgumentParser

from objmesh.errors import ObjMeshError, describe
from objmesh.mesh import compute_face_normals, export_group, tessellate_quads
from objmesh.parser import ObjLoader
from objmesh.utils import Config, set_level


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="objmesh",
        description="Load a Wavefront OBJ file and report its topology and export layout.",
    )
    parser.add_argument("objfile", help="Wavefront OBJ file to parse")
    parser.add_argument("--group", type=int, default=None,
                        help="export only this group index (default: all groups)")
    parser.add_argument("--flat", action="store_true",
                        help="export face normals instead of per-vertex normals")
    parser.add_argument("--no-tessellate", action="store_true",
                        help="do not split quads into triangles")
    parser.add_argument("--relative-indices", action="store_true",
                        help="resolve negative face indices against the pools")
    parser.add_argument("--config", default=None,
                        help="JSON configuration file")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    try:
        set_level("DEBUG" if args.verbose else cfg["log_level"])
    except ValueError as exc:
        print(f"objmesh: {exc}", file=sys.stderr)
        return 1

    options = cfg.loader_options()
    if args.relative_indices:
        options["relative_indices"] = True
    processing = cfg.processing_options()
    smooth = cfg.smooth_lighting and not args.flat

    try:
        mesh = ObjLoader(**options).load(args.objfile)
        if processing.get("tessellate_quads", True) and not args.no_tessellate:
            tessellate_quads(mesh)
        if processing.get("compute_face_normals", True):
            compute_face_normals(mesh)

        s = mesh.stats()
        print(f"{args.objfile}: {s['vertices']} vertices, {s['normals']} normals, "
              f"{s['uvs']} uvs, {s['faces']} faces, {s['groups']} group(s)")

        indices = range(len(mesh.groups)) if args.group is None else [args.group]
        for i in indices:
            buf = export_group(mesh, i, smooth_lighting=smooth)
            print(f"  [{i}] {buf.name}: {buf.num_vertices} vertices, "
                  f"attributes {buf.vertex_attrib_list}")
    except ObjMeshError as exc:
        print(f"objmesh: {describe(exc)}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
