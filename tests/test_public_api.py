from __future__ import annotations

import sceneswitch


def test_public_api_exposes_version() -> None:
    assert isinstance(sceneswitch.__version__, str)


def test_public_api_all_contains_core_exports() -> None:
    exported = set(sceneswitch.__all__)
    assert "ShortcutStore" in exported
    assert "MenuScriptGenerator" in exported
    assert "export_menu" in exported
    assert "__version__" in exported
    for name in exported:
        assert hasattr(sceneswitch, name)
