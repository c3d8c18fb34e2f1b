"""Editing session that backs the host UI's shortcut list.

The host UI calls the ``on_*`` callbacks. Destructive removal goes through the
``confirm`` callable. Every failure is logged and returned as ``False``, so the
host never sees an exception.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from sceneswitch.config_store import load_store, save_store
from sceneswitch.errors import ShortcutValidationError
from sceneswitch.exporter import export_menu
from sceneswitch.model import ShortcutRecord, ShortcutStore
from sceneswitch.scene_index import SceneIndex
from sceneswitch.settings import ToolSettings

LOGGER = logging.getLogger(__name__)

ConfirmFn = Callable[[str], bool]


def _always_confirm(prompt: str) -> bool:
    return True


class ShortcutEditor:
    def __init__(
        self,
        settings: ToolSettings,
        scene_index: SceneIndex,
        confirm: Optional[ConfirmFn] = None,
    ):
        self.settings = settings
        self.scene_index = scene_index
        self.confirm = confirm or _always_confirm
        self.store: ShortcutStore = load_store(settings.config_path)

    def summary(self) -> Dict[str, int]:
        return {
            "scene_count": len(self.scene_index),
            "shortcut_count": len(self.store),
        }

    def on_add(self, label: Optional[str] = None, scene_name: str = "") -> ShortcutRecord:
        return self.store.add(label, scene_name)

    def on_remove(self, index: int) -> bool:
        if not 0 <= index < len(self.store):
            return False
        label = self.store[index].menu_label
        if not self.confirm(f"Delete scene shortcut '{label}'?"):
            return False
        self.store.remove(index)
        return True

    def on_reorder(self, from_index: int, to_index: int) -> bool:
        try:
            self.store.reorder(from_index, to_index)
        except IndexError as exc:
            LOGGER.error("Failed to move scene shortcut: %s", exc)
            return False
        return True

    def on_edit_field(self, index: int, field_name: str, value: str) -> bool:
        try:
            self.store.edit(index, field_name, value)
        except (IndexError, ValueError) as exc:
            LOGGER.error("Failed to edit scene shortcut: %s", exc)
            return False
        return True

    def on_save_requested(self) -> bool:
        """Regenerate the menu script and save the config."""
        try:
            export_menu(self.store, self.scene_index, settings=self.settings)
        except ShortcutValidationError as exc:
            for issue in exc.issues:
                LOGGER.error(issue.message)
            return False
        except (OSError, UnicodeEncodeError) as exc:
            LOGGER.error("Failed to generate scene menu: %s", exc)
            return False
        return True

    def close(self) -> bool:
        """Persist the config on session end without regenerating the script."""
        try:
            save_store(self.store, self.settings.config_path, self.scene_index)
        except ShortcutValidationError as exc:
            for issue in exc.issues:
                LOGGER.error(issue.message)
            return False
        except (OSError, UnicodeEncodeError) as exc:
            LOGGER.error("Failed to save shortcut config: %s", exc)
            return False
        return True
