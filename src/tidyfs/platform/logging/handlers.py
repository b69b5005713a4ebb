"""Rich console handler rendering filesystem events with compact paths.

Where: platform/logging/handlers.py
What: Style ``fs_event`` log records (removals, renames, moves) for the console.
Why: Keep event presentation out of the use cases that emit them.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class FsEventRichHandler(RichHandler):
    """Rich handler that renders structured filesystem events."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "cleanup.remove": ("🧹", "green", "Removed empty "),
        "cleanup.plan": ("📝", "yellow", "Would remove empty "),
        "naming.renamed": ("✏️", "cyan", "Renamed "),
        "transfer.move": ("📦", "magenta", "Moved "),
        "transfer.copy": ("📄", "blue", "Copied "),
        "walk.missing_root": ("⚠️", "yellow", "Cannot walk "),
    }
    _TARGET_EVENTS: ClassVar[frozenset[str]] = frozenset(
        {"naming.renamed", "transfer.move", "transfer.copy"}
    )
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path with colored separators and compact rendering.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Styled path, relative to ``base`` when below it and
            truncated to the last few segments with a leading ellipsis.
        """
        pure_path = self._to_pure_path(path)
        display_path: PurePath = pure_path
        if base:
            base_path = self._to_pure_path(base)
            if pure_path.is_relative_to(base_path):
                relative_path = pure_path.relative_to(base_path)
                if str(relative_path) not in {"", "."}:
                    display_path = relative_path

        is_windows = isinstance(display_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display = ""
        if anchor:
            display = anchor.rstrip("\\/") + separator if is_windows else separator
        if truncated:
            display += "…" + separator
        display += separator.join(body_parts)
        return self._style_path_string(display or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        text = Text()
        for char in path_string:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_fs_event(self, record: logging.LogRecord) -> Text | None:
        event = getattr(record, "fs_event", None)
        if not isinstance(event, str) or event not in self._EVENT_STYLES:
            return None

        icon, color, prefix = self._EVENT_STYLES[event]
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))
        _ = body.append(prefix)

        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(
                self.format_path(str(source_path), base=getattr(record, "source_base_path", None))
            )

        target_path = getattr(record, "target_path", None)
        if event in self._TARGET_EVENTS and target_path:
            _ = body.append(" → ")
            _ = body.append_text(
                self.format_path(str(target_path), base=getattr(record, "target_base_path", None))
            )

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for filesystem events."""

        event_text = self._render_fs_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["FsEventRichHandler"]
