"""Planning the removal of an installed application and reporting the result."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from enum import Enum
from typing import Optional

_DESKTOP_SUFFIX = ".desktop"


class AppKind(Enum):
    """How an application was installed."""

    DEB = "deb"
    FLATPAK = "flatpak"
    SNAP = "snap"


@dataclass(frozen=True)
class UninstallPlan:
    """What is known about an application before removing it."""

    kind: AppKind
    desktop_path: Optional[str] = None
    exec_binary: Optional[str] = None
    flatpak_id: Optional[str] = None
    snap_name: Optional[str] = None


def _desktop_id(path: str) -> str:
    stripped = path.rstrip("/")
    base = posixpath.basename(stripped) if stripped else "/"
    if base.endswith(_DESKTOP_SUFFIX):
        base = base[: -len(_DESKTOP_SUFFIX)]
    return base


def _first_word(exec_line: str) -> str:
    for index, char in enumerate(exec_line):
        if char in " \t":
            return exec_line[:index]
    return exec_line


def plan_uninstall(desktop_path: Optional[str],
                   exec_line: Optional[str] = None) -> UninstallPlan:
    """Decide how an application is installed from its desktop file location."""
    if desktop_path and "flatpak" in desktop_path:
        return UninstallPlan(AppKind.FLATPAK, desktop_path,
                             flatpak_id=_desktop_id(desktop_path))
    if desktop_path and "snap" in desktop_path:
        return UninstallPlan(AppKind.SNAP, desktop_path,
                             snap_name=_desktop_id(desktop_path))
    binary = _first_word(exec_line) if exec_line else None
    return UninstallPlan(AppKind.DEB, desktop_path, exec_binary=binary)


def parse_dpkg_search(output: Optional[str]) -> Optional[str]:
    """Package name from the output of a dpkg path search, or None."""
    if not output:
        return None
    first = output.rstrip().split("\n", 1)[0]
    package, colon, _ = first.partition(":")
    if not colon:
        return None
    return package.rstrip()


def uninstall_command(plan: UninstallPlan, package: Optional[str] = None) -> list[str]:
    """Command line that removes the application."""
    if plan.kind is AppKind.FLATPAK and plan.flatpak_id:
        return ["flatpak", "uninstall", "--noninteractive", "-y", plan.flatpak_id]
    if plan.kind is AppKind.SNAP and plan.snap_name:
        return ["pkexec", "snap", "remove", plan.snap_name]
    if not package:
        raise ValueError("no package to remove")
    return ["pkexec", "apt-get", "remove", "-y", "--auto-remove", package]


def result_message(plan: UninstallPlan, success: bool, code: Optional[int] = 0,
                   package: Optional[str] = None) -> str:
    """Detail text shown after a removal attempt.

    A code of None means the removal command could not be started.
    """
    if plan.kind is AppKind.FLATPAK and plan.flatpak_id:
        if success:
            return f'تم إزالة برنامج Flatpak "{plan.flatpak_id}" بنجاح.'
        return f"فشل flatpak uninstall (كود {code or 0})."
    if plan.kind is AppKind.SNAP and plan.snap_name:
        if success:
            return f'تم إزالة Snap "{plan.snap_name}" بنجاح.'
        return f"فشل snap remove (كود {code or 0})."
    if not package:
        return "لم يتم العثور على الحزمة باستخدام dpkg."
    if success:
        return f'تم إزالة الحزمة "{package}" بنجاح.'
    if code is None:
        return "تعذر تشغيل pkexec: ?"
    return f'فشل apt-get remove "{package}" (كود {code}).'