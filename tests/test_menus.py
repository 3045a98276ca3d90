import pytest

from aetherfiles.menus import (
    MenuItem,
    background_menu,
    is_archive_file,
    is_media_file,
    item_menu,
)


def _labels(sections):
    return [item.label for section in sections for item in section]


def _find(sections, label):
    for section in sections:
        for item in section:
            if item.label == label:
                return item
    return None


@pytest.mark.parametrize("name", ["photo.png", "PHOTO.JPG", "clip.mkv", "a.b.webm", "x.SvG"])
def test_media_names(name):
    assert is_media_file(name) is True


@pytest.mark.parametrize("name", [None, "", "README", "notes.txt", "file.", "song.mp3"])
def test_non_media_names(name):
    assert is_media_file(name) is False


@pytest.mark.parametrize("name", ["a.zip", "B.TAR.GZ", "c.tar.xz", "d.7z", "e.tar"])
def test_archive_names(name):
    assert is_archive_file(name) is True


@pytest.mark.parametrize("name", [None, "", "a.rar", "zip", "a.gz"])
def test_non_archive_names(name):
    assert is_archive_file(name) is False


def test_trash_item_menu():
    sections = item_menu("/x/y", "y", current_path="trash:///")
    assert _labels(sections) == ["Restore", "Delete Permanently", "Properties"]
    assert _find(sections, "Properties").target == "/x/y"
    assert _find(sections, "Restore").target is None


def test_regular_file_menu_order():
    sections = item_menu("/home/u/notes.txt", "notes.txt", current_path="/home/u")
    assert len(sections) == 4
    assert _labels(sections) == [
        "Open", "Cut", "Copy", "Paste", "Share via Bluetooth", "Rename…",
        "Compress…", "Move to Trash", "Properties",
    ]
    assert _find(sections, "Open").action == "app.open"
    assert _find(sections, "Open").target == "/home/u/notes.txt"


def test_media_and_archive_entries_depend_on_name():
    media = item_menu("/p/a.png", "a.png", current_path="/p")
    assert _find(media, "Set as Background…").target == "/p/a.png"
    assert _find(media, "Extract Here") is None
    archive = item_menu("/p/a.zip", "a.zip", current_path="/p")
    assert _find(archive, "Extract Here").action == "app.extract"
    assert _find(archive, "Set as Background…") is None


def test_compress_submenu():
    compress = _find(item_menu("/p/f", "f"), "Compress…")
    assert compress.action is None
    assert [(i.label, i.action, i.target) for i in compress.submenu] == [
        (".zip", "app.compress", "zip"),
        (".tar.xz", "app.compress", "tar.xz"),
        (".7z", "app.compress", "7z"),
    ]


def test_directory_bookmark_entries():
    added = item_menu("/p/d", "d", is_directory=True, current_path="/p", bookmarked=False)
    item = _find(added, "Add to Bookmarks")
    assert item.action == "win.add-bookmark-path"
    assert item.target == "/p/d"
    removed = item_menu("/p/d", "d", is_directory=True, current_path="/p", bookmarked=True)
    assert _find(removed, "Remove from Bookmarks").action == "win.remove-bookmark-path"
    assert _find(removed, "Add to Bookmarks") is None


def test_file_has_no_bookmark_entry():
    sections = item_menu("/p/f", "f", is_directory=False, bookmarked=True)
    assert [i.label for i in sections[-1]] == ["Properties"]


def test_missing_path_gives_empty_target():
    sections = item_menu(None, "f")
    assert _find(sections, "Open").target == ""


def test_background_menu_normal():
    assert background_menu("/home/u") == [
        MenuItem("Paste", "app.paste"),
        MenuItem("Properties", "app.properties", "/home/u"),
    ]


def test_background_menu_trash():
    assert [i.action for i in background_menu("trash:///")] == ["app.restore-all", "app.empty-trash"]


def test_background_menu_without_path():
    assert background_menu(None) == []