"""Ordering, filtering and presentation rules for directory listings."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional

_KIB = 1024
_MIB = 1024 * 1024
_GIB = 1024 * 1024 * 1024

_MEDIA_PREFIXES = ("image", "video", "audio")
_DOCUMENT_MARKERS = ("document", "pdf", "office")
_APP_SUFFIXES = (".AppImage", ".deb", ".exe", ".sh")
_ARCHIVE_MARKERS = ("archive", "zip", "tar", "compressed")
_ARCHIVE_SUFFIXES = (".rar", ".7z")


class SortMode(IntEnum):
    """Sort key chosen in the sort popover, in dropdown order."""

    NAME = 0
    SIZE = 1
    TYPE = 2
    DATE_MODIFIED = 3


class SearchFilter(IntEnum):
    """File type restriction chosen next to the search entry."""

    ALL = 0
    MEDIA = 1
    DOCUMENT = 2
    FOLDER = 3
    APPS = 4
    ARCHIVE = 5


@dataclass(frozen=True)
class FileEntry:
    """One item of a directory listing."""

    name: Optional[str]
    path: Optional[str] = None
    uri: Optional[str] = None
    is_directory: bool = False
    size: int = 0
    icon_name: Optional[str] = None

    @property
    def is_hidden(self) -> bool:
        return bool(self.name) and self.name.startswith(".")


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _cmp(x, y) -> int:
    return (x > y) - (x < y)


def _extension(name: str) -> str:
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def compare_entries(a: FileEntry, b: FileEntry, mode: SortMode = SortMode.NAME,
                    ascending: bool = True) -> int:
    """Compare two entries: folders first, then visible before hidden, then by mode.

    Returns -1, 0 or 1.
    """
    if a.is_directory != b.is_directory:
        return -1 if a.is_directory else 1
    if a.is_hidden != b.is_hidden:
        return 1 if a.is_hidden else -1

    mode = SortMode(mode)
    if mode is SortMode.SIZE:
        result = _cmp(a.size, b.size)
    elif mode is SortMode.TYPE:
        result = _cmp(_extension(a.name or "").casefold(),
                      _extension(b.name or "").casefold())
    else:
        result = _cmp((a.name or "").casefold(), (b.name or "").casefold())

    if not ascending:
        result = -result
    return _sign(result)


def sort_entries(entries: Iterable[FileEntry], mode: SortMode = SortMode.NAME,
                 ascending: bool = True) -> list[FileEntry]:
    """Return the entries in display order."""
    key = functools.cmp_to_key(
        lambda a, b: compare_entries(a, b, mode, ascending))
    return sorted(entries, key=key)


def _matches_type(entry: FileEntry, filter_type: SearchFilter) -> bool:
    name = entry.name or ""
    icon = entry.icon_name or ""
    if filter_type is SearchFilter.MEDIA:
        return icon.startswith(_MEDIA_PREFIXES)
    if filter_type is SearchFilter.DOCUMENT:
        return icon.startswith("text") or any(m in icon for m in _DOCUMENT_MARKERS)
    if filter_type is SearchFilter.FOLDER:
        return entry.is_directory
    if filter_type is SearchFilter.APPS:
        return "executable" in icon or name.endswith(_APP_SUFFIXES)
    if filter_type is SearchFilter.ARCHIVE:
        return (any(m in icon for m in _ARCHIVE_MARKERS)
                or name.endswith(_ARCHIVE_SUFFIXES))
    return True


def matches_filter(entry: FileEntry, show_hidden: bool = False,
                   search_active: bool = False,
                   filter_type: SearchFilter = SearchFilter.ALL,
                   query: Optional[str] = None) -> bool:
    """Decide whether an entry is shown under the current view settings."""
    name = entry.name
    if not name:
        return False
    if not show_hidden and name.startswith("."):
        return False
    filter_type = SearchFilter(filter_type)
    if search_active and filter_type is not SearchFilter.ALL:
        if not _matches_type(entry, filter_type):
            return False
    if not query:
        return True
    return query.casefold() in name.casefold()


def filter_entries(entries: Iterable[FileEntry], show_hidden: bool = False,
                   search_active: bool = False,
                   filter_type: SearchFilter = SearchFilter.ALL,
                   query: Optional[str] = None) -> list[FileEntry]:
    """Return the entries that pass matches_filter, in their original order."""
    return [e for e in entries
            if matches_filter(e, show_hidden, search_active, filter_type, query)]


def format_size(entry: FileEntry) -> str:
    """Text of the size column for an entry."""
    if entry.is_directory:
        return "—"
    size = entry.size
    if size < _KIB:
        return f"{size} B"
    if size < _MIB:
        return f"{size / _KIB:.0f} KB"
    if size < _GIB:
        return f"{size / _MIB:.1f} MB"
    return f"{size / _GIB:.2f} GB"


def is_cut(entry: FileEntry, cut_paths: Optional[Iterable[str]]) -> bool:
    """True when the entry's path is among the paths held for a cut."""
    if not entry.path or not cut_paths:
        return False
    return entry.path in set(cut_paths)


def thumbnail_mime(icon_name: Optional[str]) -> Optional[str]:
    """Generic MIME type to request a thumbnail for, or None if none applies."""
    if not icon_name:
        return None
    if icon_name.startswith("image"):
        return "image/generic"
    if icon_name.startswith("video"):
        return "video/generic"
    return None