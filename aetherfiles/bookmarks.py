"""Sidebar bookmarks stored as file URIs, and the fixed places of the sidebar."""

from __future__ import annotations

import os
import posixpath
import re
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union
from urllib.parse import quote, unquote_to_bytes, urlsplit

BOOKMARKS_FILE = ".config/aetherfiles-bookmarks"
APPS_URI = "apps:///"
TRASH_URI = "trash:///"

_URI_PATH_SAFE = "/!$&'()*+,;=:@~"

_SPECIAL_DIRS = (
    ("Desktop", "user-desktop-symbolic", "XDG_DESKTOP_DIR"),
    ("Documents", "folder-documents-symbolic", "XDG_DOCUMENTS_DIR"),
    ("Downloads", "folder-download-symbolic", "XDG_DOWNLOAD_DIR"),
    ("Music", "folder-music-symbolic", "XDG_MUSIC_DIR"),
    ("Pictures", "folder-pictures-symbolic", "XDG_PICTURES_DIR"),
    ("Videos", "folder-videos-symbolic", "XDG_VIDEOS_DIR"),
)

_USER_DIR_LINE = re.compile(r'^\s*(XDG_[A-Z]+_DIR)\s*=\s*"(.*)"\s*$')

PathLike = Union[str, "os.PathLike[str]"]


def path_to_uri(path: str) -> str:
    """Turn an absolute local path into a file URI."""
    if not posixpath.isabs(path):
        raise ValueError(f"not an absolute path: {path!r}")
    return "file://" + quote(os.fsencode(path), safe=_URI_PATH_SAFE)


def uri_to_path(uri: str) -> Optional[str]:
    """Local path named by a file URI, or None when the URI names no local file."""
    parts = urlsplit(uri)
    if parts.scheme.lower() != "file" or parts.netloc not in ("", "localhost"):
        return None
    if not parts.path.startswith("/"):
        return None
    return os.fsdecode(unquote_to_bytes(parts.path))


@dataclass(frozen=True)
class Bookmark:
    """A bookmarked folder as shown in the sidebar."""

    label: str
    path: str


@dataclass(frozen=True)
class Place:
    """A fixed entry of the sidebar."""

    name: str
    icon: str
    path: str


def _uri_of_line(line: str) -> str:
    return line.split(" ", 1)[0]


class BookmarkStore:
    """Bookmarks kept one per line as "URI [label]" in a text file."""

    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)

    def _read(self) -> Optional[str]:
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError:
            return None

    def _write(self, contents: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".bookmarks-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(contents)
            os.replace(tmp, self.path)
        except BaseException:
            try:
                os.unlink(tmp)
            except OSError:
                pass
            raise

    def load(self) -> list[Bookmark]:
        """Bookmarks in file order; lines that name no local file are skipped."""
        contents = self._read()
        if contents is None:
            return []
        bookmarks = []
        for line in contents.split("\n"):
            if not line:
                continue
            uri, _, label = line.partition(" ")
            path = uri_to_path(uri)
            if path is None:
                continue
            bookmarks.append(Bookmark(label or posixpath.basename(path) or path, path))
        return bookmarks

    def add(self, path: str) -> None:
        """Append a bookmark for an absolute path."""
        line = path_to_uri(path) + "\n"
        existing = self._read()
        self._write((existing or "") + line)

    def remove(self, path: str) -> None:
        """Drop every bookmark whose URI names the path; blank lines are dropped too."""
        existing = self._read()
        if existing is None:
            return
        uri = path_to_uri(path)
        kept = [line for line in existing.split("\n")
                if line and _uri_of_line(line) != uri]
        self._write("".join(f"{line}\n" for line in kept))

    def contains(self, path: str) -> bool:
        """True when some bookmark names the path."""
        existing = self._read()
        if existing is None:
            return False
        uri = path_to_uri(path)
        return any(line and _uri_of_line(line) == uri
                   for line in existing.split("\n"))

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.contains(path)


def default_bookmarks_file(home: PathLike) -> Path:
    """Location of the bookmarks file under a home directory."""
    return Path(home) / BOOKMARKS_FILE


def _user_dirs(home: str) -> dict[str, str]:
    config = os.path.join(home, ".config", "user-dirs.dirs")
    found: dict[str, str] = {}
    try:
        with open(config, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError:
        return found
    for line in lines:
        match = _USER_DIR_LINE.match(line)
        if not match:
            continue
        key, value = match.groups()
        if value.startswith("$HOME"):
            value = home + value[len("$HOME"):]
        elif not value.startswith("/"):
            continue
        found[key] = value.rstrip("/") or "/"
    return found


def default_places(home: PathLike) -> list[Place]:
    """The pinned places of the sidebar; the Work folder is created if missing."""
    home = os.fspath(home)
    work = os.path.join(home, "Work")
    try:
        os.makedirs(work, exist_ok=True)
    except OSError:
        pass

    places = [
        Place("Home", "user-home-symbolic", home),
        Place("Work", "folder-development-symbolic", work),
        Place("Apps", "application-x-executable-symbolic", APPS_URI),
    ]
    configured = _user_dirs(home)
    for name, icon, key in _SPECIAL_DIRS:
        places.append(Place(name, icon, configured.get(key, os.path.join(home, name))))
    places.append(Place("Trash", "user-trash-symbolic", TRASH_URI))
    return places


def deb_packages(paths: Iterable[Optional[str]]) -> list[str]:
    """The paths among those dropped on Apps that are Debian packages."""
    return [p for p in paths if p and p.endswith(".deb")]