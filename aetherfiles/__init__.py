"""File-manager logic: entry ordering and filtering, navigation history, bookmarks,
undo, context menus, Bluetooth share progress, themes and app uninstall planning."""

__version__ = "0.1.0"

__all__ = ["apps", "bookmarks", "history", "menus", "theme", "transfer", "undo", "views"]