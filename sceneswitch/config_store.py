"""JSON persistence for the shortcut store.

The on-disk layout matches the engine-side tool so both can share one file::

    {"SceneShortcuts": [{"MenuLabel": "...", "SceneName": "..."}]}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Collection, Dict, Optional

from sceneswitch.model import ShortcutRecord, ShortcutStore

LOGGER = logging.getLogger(__name__)

SHORTCUTS_KEY = "SceneShortcuts"
LABEL_KEY = "MenuLabel"
SCENE_KEY = "SceneName"


def store_to_dict(store: ShortcutStore) -> Dict[str, Any]:
    return {
        SHORTCUTS_KEY: [
            {LABEL_KEY: record.menu_label, SCENE_KEY: record.scene_name}
            for record in store.shortcuts
        ]
    }


def store_from_dict(payload: Dict[str, Any]) -> ShortcutStore:
    """Build a store from a decoded JSON object.

    A missing or non-list shortcut array yields an empty store; entries
    that are not objects are dropped and missing string fields become ``""``.
    """
    entries = payload.get(SHORTCUTS_KEY)
    if not isinstance(entries, list):
        return ShortcutStore()

    store = ShortcutStore()
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        store.shortcuts.append(
            ShortcutRecord(
                menu_label=_as_text(entry.get(LABEL_KEY)),
                scene_name=_as_text(entry.get(SCENE_KEY)),
            )
        )
    return store


def load_store(path: str | Path) -> ShortcutStore:
    """Load shortcuts from ``path``.

    Never raises: a missing file gives an empty store, and unreadable or
    malformed content is logged and also gives an empty store.
    """
    config_path = Path(path)
    if not config_path.exists():
        return ShortcutStore()
    try:
        payload = json.loads(config_path.read_text(encoding="utf-8-sig"))
    except (OSError, UnicodeDecodeError, ValueError, RecursionError) as exc:
        LOGGER.error("Failed to load shortcut config %s: %s", config_path, exc)
        return ShortcutStore()
    if not isinstance(payload, dict):
        LOGGER.error(
            "Failed to load shortcut config %s: expected a JSON object", config_path
        )
        return ShortcutStore()
    return store_from_dict(payload)


def dump_store(store: ShortcutStore) -> str:
    return json.dumps(store_to_dict(store), indent=4, ensure_ascii=False) + "\n"


def save_store(
    store: ShortcutStore,
    path: str | Path,
    known_scene_names: Optional[Collection[str]] = None,
) -> Path:
    """Write ``store`` to ``path`` as JSON.

    Args:
        store: Shortcuts to persist.
        path: Destination file; parent directories are created.
        known_scene_names: When given, the store is validated first and
            nothing is written if it fails.

    Returns:
        The written path.

    Raises:
        ShortcutValidationError: If validation was requested and failed.
        OSError: If the file cannot be written.
    """
    if known_scene_names is not None:
        store.require_valid(known_scene_names)

    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(dump_store(store), encoding="utf-8")
    LOGGER.info("Shortcut config saved: %s", config_path)
    return config_path


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return ""
