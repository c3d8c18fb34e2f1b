from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping

from sceneswitch.menu_generator import (
    DEFAULT_BASE_PRIORITY,
    DEFAULT_CLASS_NAME,
    DEFAULT_MENU_ROOT,
    DEFAULT_NAMESPACE,
    MenuScriptGenerator,
)

CONFIG_RELATIVE_PATH = Path("Resources") / "Config" / "SceneSwitchingConfig.json"
MENU_SCRIPT_NAME = "SceneSwitchingMenu.cs"

ENV_MENU_ROOT = "SCENESWITCH_MENU_ROOT"
ENV_NAMESPACE = "SCENESWITCH_NAMESPACE"
ENV_BASE_PRIORITY = "SCENESWITCH_BASE_PRIORITY"


@dataclass(frozen=True)
class ToolSettings:
    config_path: Path
    menu_script_path: Path
    menu_root: str = DEFAULT_MENU_ROOT
    namespace: str = DEFAULT_NAMESPACE
    class_name: str = DEFAULT_CLASS_NAME
    base_priority: int = DEFAULT_BASE_PRIORITY

    @classmethod
    def for_tool_dir(cls, tool_dir: str | Path) -> "ToolSettings":
        """Place the config and generated script relative to the tool directory.

        Layout: ``<dir>/Resources/Config/SceneSwitchingConfig.json`` and
        ``<dir>/SceneSwitchingMenu.cs``.
        """
        root = Path(tool_dir)
        return cls(
            config_path=root / CONFIG_RELATIVE_PATH,
            menu_script_path=root / MENU_SCRIPT_NAME,
        )

    @classmethod
    def from_env(
        cls,
        tool_dir: str | Path,
        environ: Mapping[str, str] | None = None,
    ) -> "ToolSettings":
        environ = os.environ if environ is None else environ
        settings = cls.for_tool_dir(tool_dir)

        overrides = {}
        if environ.get(ENV_MENU_ROOT):
            overrides["menu_root"] = environ[ENV_MENU_ROOT]
        if environ.get(ENV_NAMESPACE):
            overrides["namespace"] = environ[ENV_NAMESPACE]
        raw_priority = environ.get(ENV_BASE_PRIORITY)
        if raw_priority:
            try:
                overrides["base_priority"] = int(raw_priority)
            except ValueError as exc:
                raise ValueError(
                    f"{ENV_BASE_PRIORITY} must be an integer, got {raw_priority!r}."
                ) from exc
        return replace(settings, **overrides)

    def generator(self) -> MenuScriptGenerator:
        return MenuScriptGenerator(
            menu_root=self.menu_root,
            namespace=self.namespace,
            class_name=self.class_name,
        )
