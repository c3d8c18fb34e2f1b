import textwrap

import pytest

from sceneswitch.menu_generator import MenuScriptGenerator
from sceneswitch.model import ShortcutStore

SCENES = {
    "test1": "Assets/Scenes/test1.unity",
    "test2": "Assets/Scenes/test2.unity",
}


def make_store(*pairs):
    store = ShortcutStore()
    for label, scene in pairs:
        store.add(label, scene)
    return store


def test_generate_matches_expected_menu_script():
    store = make_store(("场景1", "test1"), ("场景2", "test2"))

    script = MenuScriptGenerator().generate(store, SCENES)

    expected = textwrap.dedent(
        """\
        using UnityEditor;
        using UnityEditor.SceneManagement;
        using UnityEngine;

        namespace GB
        {
            public static class SceneSwitchingMenu
            {
                [MenuItem("GB Tools/场景切换工具/快速切换/场景1", priority = 100)]
                private static void SwitchTo_0()
                {
                    if (EditorSceneManager.SaveCurrentModifiedScenesIfUserWantsTo())
                    {
                        EditorSceneManager.OpenScene("Assets/Scenes/test1.unity");
                    }
                }

                [MenuItem("GB Tools/场景切换工具/快速切换/场景2", priority = 101)]
                private static void SwitchTo_1()
                {
                    if (EditorSceneManager.SaveCurrentModifiedScenesIfUserWantsTo())
                    {
                        EditorSceneManager.OpenScene("Assets/Scenes/test2.unity");
                    }
                }

            }
        }
        """
    )
    assert script == expected


def test_generate_emits_consecutive_priorities_from_base():
    scenes = {f"s{i}": f"Assets/s{i}.unity" for i in range(5)}
    store = make_store(*[(f"label{i}", f"s{i}") for i in range(5)])

    script = MenuScriptGenerator(menu_root="Tools/Go/").generate(
        store, scenes, base_priority=40
    )

    assert script.count("[MenuItem(") == 5
    for i in range(5):
        assert f'[MenuItem("Tools/Go/label{i}", priority = {40 + i})]' in script
    positions = [script.index(f"priority = {40 + i}") for i in range(5)]
    assert positions == sorted(positions)


def test_generate_is_deterministic():
    store = make_store(("场景1", "test1"), ("场景2", "test2"))
    generator = MenuScriptGenerator()

    assert generator.generate(store, dict(SCENES)) == generator.generate(
        store, dict(SCENES)
    )


def test_generate_skips_record_without_scene_path_with_warning():
    store = make_store(("gone", "deleted"), ("场景2", "test2"))

    with pytest.warns(UserWarning, match="'gone' skipped"):
        script = MenuScriptGenerator().generate(store, SCENES)

    assert script.count("[MenuItem(") == 1
    assert "gone" not in script
    assert "priority = 101" in script
    assert "SwitchTo_1()" in script
    assert 'OpenScene("Assets/Scenes/test2.unity")' in script


def test_generate_escapes_string_literals():
    store = make_store(('Say "hi"', "test1"))

    script = MenuScriptGenerator().generate(
        store, {"test1": "Assets\\Scenes\\test1.unity"}
    )

    assert '快速切换/Say \\"hi\\""' in script
    assert 'OpenScene("Assets\\\\Scenes\\\\test1.unity")' in script


def test_generate_uses_custom_namespace_and_class():
    script = MenuScriptGenerator(namespace="Game.Tools", class_name="Jump").generate(
        ShortcutStore(), {}
    )

    assert "namespace Game.Tools" in script
    assert "public static class Jump" in script
    assert "[MenuItem(" not in script
