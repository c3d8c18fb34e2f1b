"""Public Python API for SceneSwitch.

SceneSwitch keeps an ordered list of named scene shortcuts in JSON and turns it
into an editor menu script with one "open scene" entry per shortcut.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from sceneswitch.config_store import load_store, save_store
from sceneswitch.editor import ShortcutEditor
from sceneswitch.errors import (
    SceneSwitchError,
    ShortcutValidationError,
    ValidationIssue,
    ValidationRule,
)
from sceneswitch.exporter import build_menu_script, export_menu
from sceneswitch.mcp_bridge import build_fastmcp_from_editor
from sceneswitch.menu_generator import MenuScriptGenerator
from sceneswitch.model import ShortcutRecord, ShortcutStore
from sceneswitch.scene_index import SceneIndex
from sceneswitch.settings import ToolSettings

try:
    __version__: str = version("sceneswitch")
except PackageNotFoundError:  # pragma: no cover - editable local fallback
    __version__ = "0.1.0"


__all__ = [
    "__version__",
    "MenuScriptGenerator",
    "SceneIndex",
    "SceneSwitchError",
    "ShortcutEditor",
    "ShortcutRecord",
    "ShortcutStore",
    "ShortcutValidationError",
    "ToolSettings",
    "ValidationIssue",
    "ValidationRule",
    "build_fastmcp_from_editor",
    "build_menu_script",
    "export_menu",
    "load_store",
    "save_store",
]
