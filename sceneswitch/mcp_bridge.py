"""FastMCP bridge exposing a shortcut editing session as MCP tools."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Type

from sceneswitch.editor import ShortcutEditor


def build_fastmcp_from_editor(
    editor: ShortcutEditor,
    *,
    server_name: str = "SceneSwitch",
    mcp_cls: Optional[Type[Any]] = None,
) -> Any:
    """Create a FastMCP server whose tools drive ``editor``.

    Parameters
    ----------
    editor:
        Live editing session the tools mutate.
    server_name:
        Name passed to FastMCP constructor.
    mcp_cls:
        Optional FastMCP-compatible class override (useful for tests).

    Returns:
        Configured MCP server instance.

    Raises:
        RuntimeError: If ``fastmcp`` is unavailable or registration API is unsupported.
    """

    if mcp_cls is None:
        try:
            from fastmcp import FastMCP  # type: ignore
        except ImportError as exc:  # pragma: no cover - depends on optional dependency
            raise RuntimeError(
                "fastmcp is not installed. Install it or pass mcp_cls explicitly."
            ) from exc
        mcp_cls = FastMCP

    mcp = mcp_cls(server_name)
    for tool_name, tool_fn in _editor_tools(editor).items():
        tool_description = tool_fn.__doc__ or f"Shortcut tool '{tool_name}'"

        if hasattr(mcp, "tool"):
            decorator = _get_tool_decorator(
                mcp,
                tool_name=tool_name,
                tool_description=tool_description,
            )
            decorator(tool_fn)
            continue

        if hasattr(mcp, "add_tool"):
            mcp.add_tool(tool_fn, name=tool_name, description=tool_description)
            continue

        raise RuntimeError(
            "Provided MCP class does not expose a supported registration API "
            "(expected .tool(...) or .add_tool(...))."
        )

    return mcp


def _editor_tools(editor: ShortcutEditor) -> Dict[str, Callable[..., Dict[str, Any]]]:
    def list_shortcuts() -> Dict[str, Any]:
        """List configured scene shortcuts in menu order."""
        return _snapshot(editor)

    def add_shortcut(label: Optional[str] = None, scene_name: str = "") -> Dict[str, Any]:
        """Append a scene shortcut; omit the label to use the next default one."""
        editor.on_add(label, scene_name)
        return _snapshot(editor)

    def remove_shortcut(index: int, confirm: bool = False) -> Dict[str, Any]:
        """Delete the shortcut at a 0-based index. Irreversible; requires confirm=true."""
        removed = bool(confirm) and editor.on_remove(index)
        payload = _snapshot(editor)
        payload["removed"] = removed
        return payload

    def reorder_shortcut(from_index: int, to_index: int) -> Dict[str, Any]:
        """Move a shortcut to a new 0-based position."""
        moved = editor.on_reorder(from_index, to_index)
        payload = _snapshot(editor)
        payload["moved"] = moved
        return payload

    def edit_shortcut(index: int, field: str, value: str) -> Dict[str, Any]:
        """Set 'menu_label' or 'scene_name' of the shortcut at a 0-based index."""
        edited = editor.on_edit_field(index, field, value)
        payload = _snapshot(editor)
        payload["edited"] = edited
        return payload

    def save_shortcuts() -> Dict[str, Any]:
        """Validate, regenerate the menu script and save the configuration."""
        issues = editor.store.validate(editor.scene_index)
        payload = _snapshot(editor)
        payload["saved"] = editor.on_save_requested()
        payload["issues"] = [issue.message for issue in issues]
        return payload

    return {
        "list_shortcuts": list_shortcuts,
        "add_shortcut": add_shortcut,
        "remove_shortcut": remove_shortcut,
        "reorder_shortcut": reorder_shortcut,
        "edit_shortcut": edit_shortcut,
        "save_shortcuts": save_shortcuts,
    }


def _snapshot(editor: ShortcutEditor) -> Dict[str, Any]:
    shortcuts: List[Dict[str, str]] = [
        {"menu_label": record.menu_label, "scene_name": record.scene_name}
        for record in editor.store
    ]
    payload: Dict[str, Any] = {"shortcuts": shortcuts}
    payload.update(editor.summary())
    return payload


def _get_tool_decorator(mcp: Any, *, tool_name: str, tool_description: str):
    try:
        return mcp.tool(name=tool_name, description=tool_description)
    except TypeError:
        return mcp.tool()
