"""
glTF Skeleton/Animation Inspector

Imports the skeleton and animations of a glTF file and prints a summary.

Usage:
    gltfanim path/to/model.glb [--animation NAME] [--sampling-rate HZ]
"""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from .animation import Joint, Skeleton
from .errors import GltfImportError, ValidationError
from .loaders import GltfImporter

logger = logging.getLogger(__name__)


def _print_joint(joint: Joint, depth: int):
    t = joint.translation
    print(f"{'  ' * depth}- {joint.name}  t=({t[0]:.3f}, {t[1]:.3f}, {t[2]:.3f})")
    for child in joint.children:
        _print_joint(child, depth + 1)


def _print_skeleton(skeleton: Skeleton):
    print(f"Skeleton '{skeleton.name}': {skeleton.num_joints} joints, {len(skeleton.roots)} roots")
    for root in skeleton.roots:
        _print_joint(root, 1)


def cli(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Import the skeleton and animations of a glTF file and print a summary.",
    )
    parser.add_argument("file", help="Path to a .gltf or .glb file.")
    parser.add_argument(
        "--animation",
        action="append",
        help="Animation to import (defaults to all animations).",
    )
    parser.add_argument(
        "--sampling-rate",
        type=float,
        default=0.0,
        help="Cubic spline resampling rate in Hz (0 for automatic).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log importer diagnostics.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        importer = GltfImporter.load(args.file)
        skeleton = importer.import_skeleton()
        _print_skeleton(skeleton)

        names = args.animation or importer.get_animation_names()
        for name in names:
            animation = importer.import_animation(name, skeleton, args.sampling_rate)
            keys = sum(
                len(track.translations) + len(track.rotations) + len(track.scales)
                for track in animation.tracks
            )
            print(f"Animation '{animation.name}': duration {animation.duration:.3f}s, "
                  f"{animation.num_tracks} tracks, {keys} keys")
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        return 1
    except ValidationError as exc:
        logger.error("Internal error: %s", exc)
        return 1
    except GltfImportError as exc:
        logger.error("Import failed: %s", exc)
        return 1

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """CLI-compatible entry point."""

    return cli(argv)


if __name__ == "__main__":
    raise SystemExit(cli())
