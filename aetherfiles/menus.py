"""Context menus for items and for the empty background of the file view."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

_MEDIA_EXTENSIONS = frozenset({
    "png", "jpg", "jpeg", "gif", "bmp", "webp", "svg",
    "mp4", "mkv", "webm", "avi", "mov", "flv", "wmv",
})

_ARCHIVE_SUFFIXES = (".zip", ".tar.xz", ".7z", ".tar", ".tar.gz")

_COMPRESS_FORMATS = (
    (".zip", "zip"),
    (".tar.xz", "tar.xz"),
    (".7z", "7z"),
)


@dataclass(frozen=True)
class MenuItem:
    """One entry of a context menu.

    An entry either triggers an action, optionally with a string target, or
    opens a submenu.
    """

    label: str
    action: Optional[str] = None
    target: Optional[str] = None
    submenu: tuple["MenuItem", ...] = ()


def is_media_file(name: Optional[str]) -> bool:
    """True for image and video file names, judged by extension."""
    if not name:
        return False
    dot = name.rfind(".")
    if dot < 0:
        return False
    return name[dot + 1:].casefold() in _MEDIA_EXTENSIONS


def is_archive_file(name: Optional[str]) -> bool:
    """True for file names of archives that can be extracted."""
    if not name:
        return False
    return name.casefold().endswith(_ARCHIVE_SUFFIXES)


def _in_trash(current_path: Optional[str]) -> bool:
    return bool(current_path) and current_path.startswith("trash:")


def item_menu(path: Optional[str], name: Optional[str], is_directory: bool = False,
              current_path: Optional[str] = None,
              bookmarked: bool = False) -> list[list[MenuItem]]:
    """Sections of the menu shown when an item is right-clicked."""
    target = path or ""

    if _in_trash(current_path):
        return [
            [
                MenuItem("Restore", "app.restore"),
                MenuItem("Delete Permanently", "app.delete-permanently"),
            ],
            [MenuItem("Properties", "app.properties", target)],
        ]

    open_section = [MenuItem("Open", "app.open", target)]

    clipboard_section = [
        MenuItem("Cut", "app.cut"),
        MenuItem("Copy", "app.copy"),
        MenuItem("Paste", "app.paste"),
    ]

    manage_section = [
        MenuItem("Share via Bluetooth", "app.share-bluetooth"),
        MenuItem("Rename…", "app.rename-path", target),
    ]
    if is_media_file(name):
        manage_section.append(
            MenuItem("Set as Background…", "app.set_background", target))
    if is_archive_file(name):
        manage_section.append(MenuItem("Extract Here", "app.extract", target))
    compress = tuple(MenuItem(label, "app.compress", fmt)
                     for label, fmt in _COMPRESS_FORMATS)
    manage_section.append(MenuItem("Compress…", submenu=compress))
    manage_section.append(MenuItem("Move to Trash", "app.trash"))

    info_section = []
    if is_directory:
        if bookmarked:
            info_section.append(MenuItem("Remove from Bookmarks",
                                         "win.remove-bookmark-path", target))
        else:
            info_section.append(MenuItem("Add to Bookmarks",
                                         "win.add-bookmark-path", target))
    info_section.append(MenuItem("Properties", "app.properties", target))

    return [open_section, clipboard_section, manage_section, info_section]


def background_menu(current_path: Optional[str]) -> list[MenuItem]:
    """Entries of the menu for a right-click on empty space; none without a path."""
    if not current_path:
        return []
    if _in_trash(current_path):
        return [
            MenuItem("Restore All", "app.restore-all"),
            MenuItem("Empty Trash", "app.empty-trash"),
        ]
    return [
        MenuItem("Paste", "app.paste"),
        MenuItem("Properties", "app.properties", current_path),
    ]