from __future__ import annotations

import json
from pathlib import Path, PurePosixPath
from typing import Dict, Iterable, Iterator, List, Mapping, Optional


class SceneIndex:
    """
    Read-only snapshot mapping scene names to project-relative scene paths.
    """

    def __init__(self, scenes: Optional[Mapping[str, str]] = None):
        self._scenes: Dict[str, str] = dict(scenes or {})

    @classmethod
    def from_paths(cls, paths: Iterable[str]) -> "SceneIndex":
        """Index scene files by file stem; the first path seen for a name wins."""
        scenes: Dict[str, str] = {}
        for raw_path in paths:
            scene_path = str(raw_path).replace("\\", "/")
            name = PurePosixPath(scene_path).stem
            if not name or name in scenes:
                continue
            scenes[name] = scene_path
        return cls(scenes)

    @classmethod
    def from_json(cls, path: str | Path) -> "SceneIndex":
        payload = json.loads(Path(path).read_text(encoding="utf-8-sig"))
        if not isinstance(payload, dict):
            raise ValueError(f"Scene index {path} must be a JSON object of name -> path.")
        scenes: Dict[str, str] = {}
        for name, scene_path in payload.items():
            if not isinstance(scene_path, str):
                raise ValueError(f"Scene '{name}' in {path} must map to a string path.")
            scenes[str(name)] = scene_path
        return cls(scenes)

    def names(self) -> List[str]:
        return list(self._scenes)

    def path_for(self, name: str) -> Optional[str]:
        return self._scenes.get(name)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._scenes)

    def __contains__(self, name: object) -> bool:
        return name in self._scenes

    def __len__(self) -> int:
        return len(self._scenes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._scenes)
