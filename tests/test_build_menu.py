import json

from sceneswitch.build_menu import main


def _write_config(tool_dir, shortcuts):
    config = tool_dir / "Resources" / "Config" / "SceneSwitchingConfig.json"
    config.parent.mkdir(parents=True)
    config.write_text(
        json.dumps(
            {
                "SceneShortcuts": [
                    {"MenuLabel": label, "SceneName": scene} for label, scene in shortcuts
                ]
            }
        ),
        encoding="utf-8",
    )


def test_cli_generates_menu_from_scene_paths(tmp_path, capsys):
    _write_config(tmp_path, [("场景1", "test1"), ("场景2", "test2")])

    code = main(
        [
            str(tmp_path),
            "--scene-path",
            "Assets/Scenes/test1.unity",
            "--scene-path",
            "Assets/Scenes/test2.unity",
            "--base-priority",
            "200",
        ]
    )

    assert code == 0
    script = (tmp_path / "SceneSwitchingMenu.cs").read_text(encoding="utf-8")
    assert "priority = 200" in script
    assert "priority = 201" in script
    assert "Generated scene menu" in capsys.readouterr().out


def test_cli_reads_scene_mapping_json(tmp_path):
    _write_config(tmp_path, [("go", "test1")])
    scenes = tmp_path / "scenes.json"
    scenes.write_text(json.dumps({"test1": "Assets/A/test1.unity"}), encoding="utf-8")

    code = main([str(tmp_path), "--scenes", str(scenes), "--namespace", "Game"])

    assert code == 0
    script = (tmp_path / "SceneSwitchingMenu.cs").read_text(encoding="utf-8")
    assert "namespace Game" in script
    assert 'OpenScene("Assets/A/test1.unity")' in script


def test_cli_returns_one_on_validation_failure(tmp_path, capsys):
    _write_config(tmp_path, [("go", "missing")])

    code = main([str(tmp_path), "--scene-path", "Assets/test1.unity"])

    assert code == 1
    assert "scene 'missing' does not exist" in capsys.readouterr().err
    assert not (tmp_path / "SceneSwitchingMenu.cs").exists()


def test_cli_returns_two_when_menu_cannot_be_written(tmp_path):
    tool_dir = tmp_path / "not_a_dir"
    tool_dir.write_text("", encoding="utf-8")

    code = main([str(tool_dir), "--scene-path", "Assets/test1.unity"])

    assert code == 2


def test_cli_returns_two_on_invalid_base_priority_env(tmp_path, monkeypatch):
    _write_config(tmp_path, [("go", "test1")])
    monkeypatch.setenv("SCENESWITCH_BASE_PRIORITY", "high")

    code = main([str(tmp_path), "--scene-path", "Assets/test1.unity"])

    assert code == 2
    assert not (tmp_path / "SceneSwitchingMenu.cs").exists()
