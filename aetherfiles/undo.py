"""Undo history for file operations: trashing, renaming and moving."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union
from urllib.parse import unquote

PathLike = Union[str, "os.PathLike[str]"]

_INFO_SUFFIX = ".trashinfo"


class UndoOp(Enum):
    """Kind of operation that can be undone."""

    TRASH = "trash"
    RENAME = "rename"
    MOVE = "move"


@dataclass(frozen=True)
class UndoEntry:
    """One recorded operation.

    For TRASH, src is the original path. For RENAME and MOVE, src is the path
    before the operation and dest the path after it.
    """

    op: UndoOp
    src: str
    dest: Optional[str] = None


def default_trash_dir() -> Path:
    """The user's home trash directory."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "Trash"
    return Path.home() / ".local" / "share" / "Trash"


def _move(src: PathLike, dest: PathLike) -> None:
    """Move without overwriting an existing destination."""
    src_path, dest_path = Path(src), Path(dest)
    if not os.path.lexists(src_path):
        raise FileNotFoundError(f"no such file: {src_path}")
    if os.path.lexists(dest_path):
        raise FileExistsError(f"destination exists: {dest_path}")
    shutil.move(os.fspath(src_path), os.fspath(dest_path))


def _trashinfo_path(info_file: Path) -> Optional[str]:
    try:
        lines = info_file.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError):
        return None
    in_section = False
    for line in lines:
        stripped = line.strip()
        if stripped.startswith("["):
            in_section = stripped == "[Trash Info]"
            continue
        if in_section and stripped.startswith("Path="):
            return unquote(stripped[len("Path="):])
    return None


def restore_from_trash(original_path: str,
                       trash_dir: Optional[PathLike] = None) -> Optional[Path]:
    """Move the trashed item that came from original_path back there.

    Returns the restored path, or None when the trash holds no such item.
    """
    trash = Path(trash_dir) if trash_dir is not None else default_trash_dir()
    info_dir = trash / "info"
    files_dir = trash / "files"
    try:
        infos = sorted(info_dir.iterdir())
    except OSError:
        return None
    for info in infos:
        if not info.name.endswith(_INFO_SUFFIX):
            continue
        if _trashinfo_path(info) != original_path:
            continue
        trashed = files_dir / info.name[: -len(_INFO_SUFFIX)]
        _move(trashed, original_path)
        try:
            info.unlink()
        except OSError:
            pass
        return Path(original_path)
    return None


@dataclass
class UndoHistory:
    """Undo and redo stacks of file operations."""

    trash_dir: Optional[Path] = None
    undo_stack: list[UndoEntry] = field(default_factory=list)
    redo_stack: list[UndoEntry] = field(default_factory=list)

    def push(self, op: UndoOp, src: str, dest: Optional[str] = None) -> UndoEntry:
        """Record a new operation; this clears the redo stack."""
        entry = UndoEntry(UndoOp(op), src, dest)
        self.undo_stack.append(entry)
        self.redo_stack.clear()
        return entry

    def undo(self) -> Optional[UndoEntry]:
        """Reverse the latest operation and return it, or None if there is none.

        The entry moves to the redo stack even when reversing it fails; the
        failure is then raised.
        """
        if not self.undo_stack:
            return None
        entry = self.undo_stack.pop()
        try:
            self._reverse(entry)
        finally:
            self.redo_stack.append(entry)
        return entry

    def _reverse(self, entry: UndoEntry) -> None:
        if entry.op is UndoOp.TRASH:
            restore_from_trash(entry.src, self.trash_dir)
        elif entry.op is UndoOp.RENAME:
            if entry.dest is None:
                raise ValueError("rename entry has no destination")
            current = Path(entry.dest)
            restored = current.with_name(os.path.basename(entry.src))
            if not os.path.lexists(current):
                raise FileNotFoundError(f"no such file: {current}")
            if os.path.lexists(restored):
                raise FileExistsError(f"destination exists: {restored}")
            os.rename(current, restored)
        elif entry.op is UndoOp.MOVE:
            if entry.dest is None:
                raise ValueError("move entry has no destination")
            _move(entry.dest, entry.src)