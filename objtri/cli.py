# objtri/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .analysis import mesh_barycenter, surface_area
from .config import WriterOptions
from .errors import DestinationExistsError, ObjError
from .reader import read_obj
from .writer import write_obj

logger = logging.getLogger(__name__)

_DEF_HELP = """
Examples:
  python -m objtri info bunny.obj
  python -m objtri barycenter bunny.obj
  python -m objtri barycenter bunny.obj --area-weighted
  python -m objtri convert bunny.obj bunny_clean.obj
  python -m objtri convert bunny.obj bunny_clean.obj --force --precision 6
"""


def _cmd_info(args: argparse.Namespace) -> int:
    result = read_obj(args.file)
    mesh, counts = result.mesh, result.counts
    print(f"File:             {args.file}")
    print(f"Vertices:         {counts.vertices}")
    print(f"Faces:            {counts.faces}")
    print(f"Texture coords:   {counts.texture_coords} ({counts.texture_faces} texture faces)")
    print(f"Normals:          {counts.normals} ({counts.normal_faces} normal faces)")
    print(f"Face variant:     {mesh.face_variant.value}")
    print(f"Material library: {mesh.material_library or '-'}")
    print(f"Surface area:     {surface_area(mesh):g}")
    return 0


def _cmd_barycenter(args: argparse.Namespace) -> int:
    mesh = read_obj(args.file).mesh
    x, y, z = mesh_barycenter(mesh, area_weighted=args.area_weighted).tolist()
    print(f"x={x:g}  y={y:g}  z={z:g}")
    return 0


def _cmd_convert(args: argparse.Namespace) -> int:
    mesh = read_obj(args.src).mesh
    options = WriterOptions(overwrite=args.force, precision=args.precision)
    try:
        path = write_obj(mesh, args.dst, options)
    except DestinationExistsError as e:
        print(f"{e}. Use --force to replace it or choose another destination.", file=sys.stderr)
        return 1
    print(f"Mesh filename is {path}")
    print(f"Mesh has {len(mesh.vertices)} vertices.")
    print(f"Mesh has {len(mesh.faces)} faces.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="objtri", description="objtri: triangular Wavefront OBJ reader/writer",
                                epilog=_DEF_HELP, formatter_class=argparse.RawTextHelpFormatter)
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug messages")
    sub = p.add_subparsers(dest="command", required=True)

    info = sub.add_parser("info", help="Show counts and attributes of an OBJ file")
    info.add_argument("file")
    info.set_defaults(func=_cmd_info)

    bary = sub.add_parser("barycenter", help="Print the mesh barycenter")
    bary.add_argument("file")
    bary.add_argument("--area-weighted", action="store_true",
                      help="Weight face centroids by face area (default: plain mean)")
    bary.set_defaults(func=_cmd_barycenter)

    conv = sub.add_parser("convert", help="Read an OBJ file and write it back out")
    conv.add_argument("src")
    conv.add_argument("dst")
    conv.add_argument("--force", action="store_true", help="Replace DST if it exists")
    conv.add_argument("--precision", type=int, help="Fixed decimals for floats (default: exact)")
    conv.set_defaults(func=_cmd_convert)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        return args.func(args)
    except (ObjError, OSError) as e:
        logger.debug("command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
