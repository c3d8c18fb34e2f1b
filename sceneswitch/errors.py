from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List


class ValidationRule(Enum):
    EMPTY_LABEL = "empty_label"
    EMPTY_SCENE = "empty_scene"
    UNKNOWN_SCENE = "unknown_scene"
    DUPLICATE_LABEL = "duplicate_label"


@dataclass(frozen=True)
class ValidationIssue:
    position: int
    rule: ValidationRule
    menu_label: str = ""
    scene_name: str = ""

    @property
    def message(self) -> str:
        if self.rule == ValidationRule.EMPTY_LABEL:
            return f"Shortcut #{self.position}: menu label must not be empty."
        if self.rule == ValidationRule.EMPTY_SCENE:
            return f"Shortcut #{self.position}: no target scene selected."
        if self.rule == ValidationRule.UNKNOWN_SCENE:
            return (
                f"Shortcut #{self.position}: scene '{self.scene_name}' does not exist."
            )
        return f"Shortcut #{self.position}: menu label '{self.menu_label}' is duplicated."


class SceneSwitchError(Exception):
    """Base SceneSwitch error."""


class ShortcutValidationError(SceneSwitchError):
    """Raised when a shortcut store fails validation."""

    def __init__(self, issues: Iterable[ValidationIssue]):
        self.issues: List[ValidationIssue] = list(issues)
        lines = [issue.message for issue in self.issues]
        super().__init__("\n".join(lines) or "Shortcut configuration is invalid.")
