"""Command line entry point for unpacking, packing and previewing skins."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from wsz_kit.config import Config, load_config
from wsz_kit.errors import SkinError
from wsz_kit.io import read_archive, save_image
from wsz_kit.skin import Skin
from wsz_kit.workspace import pack_directory, unpack_to_directory


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Winamp skin sprite tools")
    parser.add_argument("--config", type=Path, help="Optional JSON config path")
    subparsers = parser.add_subparsers(dest="command", required=True)

    extract_parser = subparsers.add_parser("extract", help="Unpack a skin into sprite folders")
    extract_parser.add_argument("skin", type=Path, help="Path to the .wsz file")
    extract_parser.add_argument("--output", type=Path, help="Output directory (default: skin name)")

    pack_parser = subparsers.add_parser("pack", help="Pack sprite folders into a skin")
    pack_parser.add_argument("directory", type=Path, help="Directory produced by extract")
    pack_parser.add_argument("--output", type=Path, help="Output .wsz path (default: <directory>.wsz)")

    shot_parser = subparsers.add_parser("screenshot", help="Render a preview of a skin")
    shot_parser.add_argument("skin", type=Path, help="Path to the .wsz file")
    shot_parser.add_argument("--output", type=Path, help="Output image path")

    return parser.parse_args(argv)


def _extract(args: argparse.Namespace, config: Config) -> None:
    archive = read_archive(args.skin)
    print(f"Found {len(archive)} files")
    output_dir = args.output or Path(args.skin.stem)
    written = unpack_to_directory(archive, output_dir)
    for sheet_name, count in written.items():
        print(f"Extracted {count} sprites from {sheet_name}")


def _pack(args: argparse.Namespace, config: Config) -> None:
    directory = args.directory.resolve()
    output = args.output or directory.with_name(f"{directory.name or 'skin'}.wsz")
    print(f"Packing directory: {directory}")
    pack_directory(
        directory,
        output,
        sheet_format=config.sheet_format,
        key_color=config.transparency_key,
    )
    print(f"Successfully packed {output}")


def _screenshot(args: argparse.Namespace, config: Config) -> None:
    skin = Skin.from_path(args.skin)
    screenshot = skin.render_screenshot(background=config.background_color)
    output = args.output or Path(config.screenshot_name)
    save_image(output, screenshot)
    print(f"Created screenshot at {output}")


_COMMANDS = {
    "extract": _extract,
    "pack": _pack,
    "screenshot": _screenshot,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        config = load_config(args.config)
        logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
        _COMMANDS[args.command](args, config)
    except (SkinError, OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
