#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from sceneswitch.config_store import load_store
from sceneswitch.errors import ShortcutValidationError
from sceneswitch.exporter import export_menu
from sceneswitch.scene_index import SceneIndex
from sceneswitch.settings import ToolSettings

LOGGER = logging.getLogger("sceneswitch")


def _load_scene_index(args: argparse.Namespace) -> SceneIndex:
    if args.scenes:
        return SceneIndex.from_json(args.scenes)
    return SceneIndex.from_paths(args.scene_path or [])


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Regenerate the scene switching menu script from the saved shortcut "
            "configuration."
        )
    )
    parser.add_argument(
        "tool_dir",
        help=(
            "Tool directory holding Resources/Config/SceneSwitchingConfig.json; "
            "SceneSwitchingMenu.cs is written next to it."
        ),
    )
    scenes = parser.add_mutually_exclusive_group(required=True)
    scenes.add_argument(
        "--scenes",
        default=None,
        help="JSON file mapping scene name to scene path.",
    )
    scenes.add_argument(
        "--scene-path",
        action="append",
        default=None,
        help="Scene file path; repeat for each scene. Names come from file stems.",
    )
    parser.add_argument("--menu-root", default=None, help="Menu path prefix.")
    parser.add_argument("--namespace", default=None, help="Generated C# namespace.")
    parser.add_argument(
        "--base-priority",
        type=int,
        default=None,
        help="Priority of the first menu entry; later entries count up by one.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = ToolSettings.from_env(Path(args.tool_dir).resolve())
    except ValueError as exc:
        LOGGER.error("Invalid settings: %s", exc)
        return 2
    overrides = {}
    if args.menu_root is not None:
        overrides["menu_root"] = args.menu_root
    if args.namespace is not None:
        overrides["namespace"] = args.namespace
    if args.base_priority is not None:
        overrides["base_priority"] = args.base_priority
    settings = replace(settings, **overrides)

    try:
        scene_index = _load_scene_index(args)
    except (OSError, ValueError) as exc:
        LOGGER.error("Failed to read scene index: %s", exc)
        return 2

    store = load_store(settings.config_path)
    try:
        script_path = export_menu(store, scene_index, settings=settings)
    except ShortcutValidationError as exc:
        for issue in exc.issues:
            print(issue.message, file=sys.stderr)
        return 1
    except (OSError, UnicodeEncodeError) as exc:
        LOGGER.error("Failed to generate scene menu: %s", exc)
        return 2

    print(f"Generated scene menu: {script_path}")
    print(f"- {settings.config_path}")
    print(f"- {len(store)} shortcut(s)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
