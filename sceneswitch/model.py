from dataclasses import dataclass, field
from typing import Collection, List, Optional

from sceneswitch.errors import ShortcutValidationError, ValidationIssue, ValidationRule

DEFAULT_LABEL_PREFIX = "场景"
EDITABLE_FIELDS = ("menu_label", "scene_name")


@dataclass
class ShortcutRecord:
    menu_label: str = ""
    scene_name: str = ""


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@dataclass
class ShortcutStore:
    """Ordered list of scene shortcuts.

    Order is significant: it drives the generated menu order and priorities.
    """

    shortcuts: List[ShortcutRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.shortcuts)

    def __iter__(self):
        return iter(self.shortcuts)

    def __getitem__(self, index: int) -> ShortcutRecord:
        return self.shortcuts[index]

    def add(self, label: Optional[str] = None, scene_name: str = "") -> ShortcutRecord:
        """Append a shortcut.

        Args:
            label: Menu label. ``None`` picks the next default label
                (``场景<n>``); an explicit empty string is kept as-is.
            scene_name: Target scene name, possibly empty.

        Returns:
            The appended record.
        """
        if label is None:
            label = f"{DEFAULT_LABEL_PREFIX}{len(self.shortcuts) + 1}"
        record = ShortcutRecord(menu_label=label, scene_name=scene_name)
        self.shortcuts.append(record)
        return record

    def remove(self, index: int) -> ShortcutRecord:
        self._check_index(index)
        return self.shortcuts.pop(index)

    def reorder(self, from_index: int, to_index: int) -> None:
        self._check_index(from_index)
        self._check_index(to_index)
        record = self.shortcuts.pop(from_index)
        self.shortcuts.insert(to_index, record)

    def edit(self, index: int, field_name: str, value: str) -> ShortcutRecord:
        self._check_index(index)
        if field_name not in EDITABLE_FIELDS:
            raise ValueError(
                f"Unknown shortcut field '{field_name}'. "
                f"Expected one of: {', '.join(EDITABLE_FIELDS)}."
            )
        record = self.shortcuts[index]
        setattr(record, field_name, value)
        return record

    def validate(self, known_scene_names: Collection[str]) -> List[ValidationIssue]:
        """Check every record and return the first failing rule of each.

        Rules are checked per record in order: label present, scene present,
        scene known, label not used by an earlier record. An empty result means
        the store may be saved and generated.
        """
        issues: List[ValidationIssue] = []
        seen_labels: set[str] = set()
        for position, record in enumerate(self.shortcuts, start=1):
            rule = self._first_violation(record, known_scene_names, seen_labels)
            if not _is_blank(record.menu_label):
                seen_labels.add(record.menu_label)
            if rule is not None:
                issues.append(
                    ValidationIssue(
                        position=position,
                        rule=rule,
                        menu_label=record.menu_label,
                        scene_name=record.scene_name,
                    )
                )
        return issues

    def require_valid(self, known_scene_names: Collection[str]) -> None:
        issues = self.validate(known_scene_names)
        if issues:
            raise ShortcutValidationError(issues)

    @staticmethod
    def _first_violation(
        record: ShortcutRecord,
        known_scene_names: Collection[str],
        seen_labels: set[str],
    ) -> Optional[ValidationRule]:
        if _is_blank(record.menu_label):
            return ValidationRule.EMPTY_LABEL
        if _is_blank(record.scene_name):
            return ValidationRule.EMPTY_SCENE
        if record.scene_name not in known_scene_names:
            return ValidationRule.UNKNOWN_SCENE
        if record.menu_label in seen_labels:
            return ValidationRule.DUPLICATE_LABEL
        return None

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.shortcuts):
            raise IndexError(
                f"Shortcut index {index} out of range (store has {len(self.shortcuts)})."
            )
