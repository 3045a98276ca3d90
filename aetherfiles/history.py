"""Navigation history, path classification and breadcrumbs for the file view."""

from __future__ import annotations

import os
import posixpath
import re
from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import unquote

HISTORY_MAX = 50

_DANGER_PREFIXES = (
    "/etc", "/usr", "/bin", "/sbin", "/var", "/boot",
    "/sys", "/proc", "/dev", "/opt",
)

_URI_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*)://([^/]*)(/.*)?$")


@dataclass
class NavigationHistory:
    """Back and forward stacks around the directory currently shown."""

    current: Optional[str] = None
    back_stack: list[str] = field(default_factory=list)
    forward_stack: list[str] = field(default_factory=list)
    limit: int = HISTORY_MAX

    def visit(self, path: str) -> str:
        """Go to a new path, remembering the old one and dropping forward history."""
        if self.current is not None:
            self.back_stack.append(self.current)
        if len(self.back_stack) > self.limit:
            del self.back_stack[0]
        self.forward_stack.clear()
        self.current = path
        return path

    def back(self) -> Optional[str]:
        """Step back one place; returns the new current path or None if impossible."""
        if not self.back_stack:
            return None
        if self.current is not None:
            self.forward_stack.append(self.current)
        self.current = self.back_stack.pop()
        return self.current

    def forward(self) -> Optional[str]:
        """Step forward one place; returns the new current path or None if impossible."""
        if not self.forward_stack:
            return None
        if self.current is not None:
            self.back_stack.append(self.current)
        self.current = self.forward_stack.pop()
        return self.current

    def can_go_back(self) -> bool:
        return bool(self.back_stack)

    def can_go_forward(self) -> bool:
        return bool(self.forward_stack)

    def up(self) -> Optional[str]:
        """Visit the parent of the current path; None when already at the top."""
        if self.current is None:
            return None
        parent = posixpath.dirname(self.current) or "."
        if parent == self.current:
            return None
        return self.visit(parent)


def path_css_class(path: Optional[str]) -> Optional[str]:
    """CSS class marking the window for sensitive locations, or None."""
    if not path:
        return None
    if path == "/root":
        return "path-root"
    if path == "/" or path.startswith(_DANGER_PREFIXES):
        return "path-danger"
    return None


@dataclass(frozen=True)
class Crumb:
    """One button of the path bar."""

    label: str
    path: str


def _split_components(path: str) -> list[str]:
    return [part for part in path.split("/") if part]


def _normalise_local(path: str) -> str:
    if not path.startswith("/"):
        path = posixpath.join(os.getcwd(), path)
    path = posixpath.normpath(path)
    return "/" + path.lstrip("/")


def breadcrumbs(path: Optional[str]) -> list[Crumb]:
    """Crumbs from the root down to the given path or URI."""
    if not path:
        return []
    match = _URI_RE.match(path)
    if match:
        scheme, authority, rest = match.group(1), match.group(2), match.group(3) or "/"
        base = f"{scheme}://{authority}"
        root_label = "Trash" if scheme.lower() == "trash" else "Root"
        crumbs = [Crumb(root_label, base + "/")]
        so_far = base
        for part in _split_components(posixpath.normpath(rest)):
            so_far = f"{so_far}/{part}"
            crumbs.append(Crumb(unquote(part), so_far))
        return crumbs

    local = _normalise_local(path)
    crumbs = [Crumb("Root", "/")]
    so_far = ""
    for part in _split_components(local):
        so_far = f"{so_far}/{part}"
        crumbs.append(Crumb(part, so_far))
    return crumbs