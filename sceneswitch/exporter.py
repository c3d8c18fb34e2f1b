import logging
from pathlib import Path

from sceneswitch.config_store import save_store
from sceneswitch.model import ShortcutStore
from sceneswitch.scene_index import SceneIndex
from sceneswitch.settings import ToolSettings

LOGGER = logging.getLogger(__name__)


def build_menu_script(
    store: ShortcutStore,
    scene_index: SceneIndex,
    *,
    settings: ToolSettings,
) -> str:
    """Validate ``store`` against ``scene_index`` and render the menu script."""
    store.require_valid(scene_index)
    return settings.generator().generate(
        store,
        scene_index.as_dict(),
        base_priority=settings.base_priority,
    )


def export_menu(
    store: ShortcutStore,
    scene_index: SceneIndex,
    *,
    settings: ToolSettings,
) -> Path:
    """Write the menu script, then persist the shortcut config.

    Raises:
        ShortcutValidationError: If the store is invalid; nothing is written.
        OSError: If either file cannot be written.
    """
    content = build_menu_script(store, scene_index, settings=settings)

    script_path = Path(settings.menu_script_path)
    script_path.parent.mkdir(parents=True, exist_ok=True)
    script_path.write_text(content, encoding="utf-8")
    LOGGER.info("Scene switching menu generated: %s", script_path)

    save_store(store, settings.config_path, scene_index)
    return script_path
