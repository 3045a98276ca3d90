# aetherfiles

This package holds the logic of a desktop file manager. It has no user interface. It computes results and reads and writes plain files. It never starts other programs, and it only uses the standard library.

## Modules

### `aetherfiles.views`

This module orders and filters directory listings.

- `FileEntry` is a frozen dataclass with the fields `name`, `path`, `uri`, `is_directory`, `size` and `icon_name`. Its `is_hidden` property is true when the name starts with a dot.
- `SortMode` has the members `NAME`, `SIZE`, `TYPE` and `DATE_MODIFIED`. `FileEntry` carries no modification time, so `DATE_MODIFIED` sorts by name.
- `compare_entries(a, b, mode, ascending)` returns -1, 0 or 1. Folders come first, then visible entries before hidden ones. After that the chosen key decides, compared case-insensitively: the name, the size or the extension. The sort direction only reverses this last comparison.
- `sort_entries(entries, mode, ascending)` returns the entries as a sorted list.
- `SearchFilter` has the members `ALL`, `MEDIA`, `DOCUMENT`, `FOLDER`, `APPS` and `ARCHIVE`.
- `matches_filter(entry, show_hidden, search_active, filter_type, query)` decides whether an entry is shown:
  - Hidden entries are left out unless `show_hidden` is true.
  - The type filter only applies while a search is active.
  - The query is matched as a case-insensitive substring of the name.
- `filter_entries(...)` applies `matches_filter` to a list and keeps the original order.
- `format_size(entry)` gives the text of the size column, for example `"512 B"`, `"2 KB"`, `"1.5 MB"` or `"3.00 GB"`. For a folder it gives `"—"`.
- `is_cut(entry, cut_paths)` is true when the entry's path is among the paths held for a cut.
- `thumbnail_mime(icon_name)` gives `"image/generic"`, `"video/generic"` or `None`.

### `aetherfiles.history`

This module tracks navigation and builds the path bar.

- `NavigationHistory` keeps the current path with back and forward stacks.
  - Its methods are `visit`, `back`, `forward`, `up`, `can_go_back` and `can_go_forward`.
  - `visit` clears the forward stack.
  - The back stack is capped at `HISTORY_MAX` (50) entries. The oldest entry is dropped first.
- `path_css_class(path)` returns `"path-root"` for `/root` and `"path-danger"` for `/` and for system trees such as `/etc`, `/usr` and `/var`. For other paths it returns `None`.
- `breadcrumbs(path)` returns a list of `Crumb(label, path)` items from the root down to the given path.
  - It accepts local paths and URIs.
  - The first crumb is labelled `"Root"`, or `"Trash"` for `trash:` URIs.

### `aetherfiles.bookmarks`

This module manages bookmarks and the fixed sidebar entries.

- `BookmarkStore(path)` reads and writes a bookmarks file. Each line holds `file://URI [label]`.
  - `load()` returns a list of `Bookmark(label, path)`. It skips lines that name no local file. When a line has no label, the folder name is used.
  - `add(path)` appends a line for an absolute path.
  - `remove(path)` drops every line for that path and also drops blank lines.
  - `contains(path)` tells whether a path is bookmarked. The `in` operator does the same.
  - The file is written atomically, and its directory is created if needed.
- `default_bookmarks_file(home)` returns `home/.config/aetherfiles-bookmarks`.
- `default_places(home)` lists the pinned `Place(name, icon, path)` entries in this order:
  - Home, Work and Apps (`apps:///`).
  - Desktop, Documents, Downloads, Music, Pictures and Videos. Their paths are taken from `~/.config/user-dirs.dirs` when it exists.
  - Trash (`trash:///`).
  - The function creates the `Work` folder if it is missing.
- `deb_packages(paths)` keeps the paths that end in `.deb`.
- `path_to_uri` and `uri_to_path` convert between absolute paths and `file://` URIs.

### `aetherfiles.undo`

This module undoes file operations.

- `UndoOp` has the members `TRASH`, `RENAME` and `MOVE`. `UndoEntry(op, src, dest)` records one operation.
- `UndoHistory` keeps undo and redo stacks.
  - `push(op, src, dest)` records an operation and clears the redo stack.
  - `undo()` reverses the latest operation and moves its entry to the redo stack:
    - a rename is undone by renaming the file back to its old name;
    - a move is undone by moving the file back, and an existing file is never overwritten;
    - a trashed item is restored from the trash.
  - If reversing fails, the error is raised, but the entry still moves to the redo stack.
- `restore_from_trash(original_path, trash_dir)` finds the item in a freedesktop-style trash (`info/*.trashinfo` and `files/`) that came from `original_path`, and moves it back. It returns the restored path, or `None` when the trash holds no such item. By default the trash is `$XDG_DATA_HOME/Trash` or `~/.local/share/Trash`.

### `aetherfiles.menus`

This module builds the context menus.

- `MenuItem(label, action, target, submenu)` describes one entry.
- `item_menu(path, name, is_directory, current_path, bookmarked)` returns the sections of the menu for a right-clicked item.
  - Inside the trash the sections are Restore, Delete Permanently and Properties.
  - Elsewhere the menu offers open, clipboard, rename, compress, trash and bookmark entries. Media files also get "Set as Background…", and archives get "Extract Here".
- `background_menu(current_path)` returns the entries for a right-click on empty space.
- `is_media_file(name)` and `is_archive_file(name)` classify file names by their extension.

### `aetherfiles.transfer`

- `ShareProgress(device_name, total)` counts the outcome of sending a batch of files to one device.
  - `record(success)` counts one finished file. It returns `True` when the batch is complete, and raises `RuntimeError` once every file has already been counted.
  - `start_message()`, `progress_message(status, transferred, size)` and `summary()` give the notification texts.
  - The `pending` and `finished` properties report the state of the batch.

### `aetherfiles.theme`

This module turns a settings file into CSS.

- `settings_path(home)` returns `home/.config/venom/settings.vaxp`.
- `parse_settings(text)` reads the quoted `background_color:` and `text_color:` values. The defaults are `#FF000000` and `#FFFFFFFF`.
- `parse_color(value)` turns `#AARRGGBB` into `rgba(r, g, b, a)` and passes any other value through unchanged.
- `build_css(background, foreground)` renders the style sheet.
- `load_theme_css(path)` combines these steps. It returns `None` when the file cannot be read.

### `aetherfiles.apps`

This module plans the removal of an installed application.

- `plan_uninstall(desktop_path, exec_line)` returns an `UninstallPlan`. Its `kind` is an `AppKind`:
  - `FLATPAK` or `SNAP`, judged from the desktop-file path;
  - `DEB` otherwise, with the first word of the exec line kept as `exec_binary`.
- `parse_dpkg_search(output)` extracts the package name from the output of a `dpkg -S` search.
- `uninstall_command(plan, package)` returns the command line that would remove the application. It raises `ValueError` when a Debian app has no package.
- `result_message(plan, success, code, package)` gives the (Arabic) detail text shown after a removal attempt. A `code` of `None` means the command could not be started.

## Example

```python
from aetherfiles.views import FileEntry, SortMode, sort_entries

entries = [FileEntry("b.txt", size=10), FileEntry("docs", is_directory=True)]
for entry in sort_entries(entries, SortMode.NAME, True):
    print(entry.name)
```

## What the package does not do

The package has no command line tool and no window, sidebar, dialog or tab interface.

Several tasks are left to the caller:

- listing directories or watching them for changes;
- creating thumbnails;
- copying and pasting through a clipboard;
- talking to Bluetooth devices;
- mounting drives.

`aetherfiles.apps` builds uninstall commands but never runs them, and it never runs `dpkg`.

## Tests

```
pip install -e .[test]
pytest
```