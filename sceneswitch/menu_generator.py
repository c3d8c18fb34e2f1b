import warnings
from typing import List, Mapping

from sceneswitch.model import ShortcutRecord, ShortcutStore

DEFAULT_MENU_ROOT = "GB Tools/场景切换工具/快速切换"
DEFAULT_NAMESPACE = "GB"
DEFAULT_CLASS_NAME = "SceneSwitchingMenu"
DEFAULT_BASE_PRIORITY = 100

INDENT = "    "


class MenuScriptGenerator:
    """Emit the C# editor-menu source with one scene-switch entry per shortcut."""

    def __init__(
        self,
        menu_root: str = DEFAULT_MENU_ROOT,
        namespace: str = DEFAULT_NAMESPACE,
        class_name: str = DEFAULT_CLASS_NAME,
    ):
        self.menu_root = menu_root.rstrip("/")
        self.namespace = namespace
        self.class_name = class_name

    def generate(
        self,
        store: ShortcutStore,
        scene_paths: Mapping[str, str],
        base_priority: int = DEFAULT_BASE_PRIORITY,
    ) -> str:
        """Render the menu script.

        Records are expected to be validated already. A record whose scene has
        no path in ``scene_paths`` is skipped with a warning; the remaining
        records keep their own index for priority and method name.
        """
        lines = self._emit_prelude()
        for index, record in enumerate(store.shortcuts):
            scene_path = scene_paths.get(record.scene_name)
            if scene_path is None:
                warnings.warn(
                    f"Shortcut #{index + 1} '{record.menu_label}' skipped: "
                    f"scene '{record.scene_name}' has no known path.",
                    stacklevel=2,
                )
                continue
            lines.extend(
                self._emit_menu_item(index, record, scene_path, base_priority + index)
            )
        lines.extend(self._emit_epilogue())
        return "\n".join(lines) + "\n"

    def menu_path(self, label: str) -> str:
        return f"{self.menu_root}/{label}"

    def _emit_prelude(self) -> List[str]:
        return [
            "using UnityEditor;",
            "using UnityEditor.SceneManagement;",
            "using UnityEngine;",
            "",
            f"namespace {self.namespace}",
            "{",
            f"{INDENT}public static class {self.class_name}",
            f"{INDENT}{{",
        ]

    def _emit_menu_item(
        self,
        index: int,
        record: ShortcutRecord,
        scene_path: str,
        priority: int,
    ) -> List[str]:
        pad = INDENT * 2
        menu_path = _cs_string(self.menu_path(record.menu_label))
        return [
            f"{pad}[MenuItem({menu_path}, priority = {priority})]",
            f"{pad}private static void SwitchTo_{index}()",
            f"{pad}{{",
            f"{pad}{INDENT}if (EditorSceneManager.SaveCurrentModifiedScenesIfUserWantsTo())",
            f"{pad}{INDENT}{{",
            f"{pad}{INDENT * 2}EditorSceneManager.OpenScene({_cs_string(scene_path)});",
            f"{pad}{INDENT}}}",
            f"{pad}}}",
            "",
        ]

    def _emit_epilogue(self) -> List[str]:
        return [f"{INDENT}}}", "}"]


def _cs_string(value: str) -> str:
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\r", "\\r")
        .replace("\n", "\\n")
    )
    return f'"{escaped}"'
