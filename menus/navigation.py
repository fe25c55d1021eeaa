"""
Navigation menus of the application.

Each function receives a fresh Menu for the current request and adds its
items. Routes are request path patterns, ``*`` matches any characters.
"""

from models.menu import Menu, MenuItem
from menus.registry import registry


class NavigationItem(MenuItem):
    """Menu item with the attributes used by the frontend navigation."""

    casts = {
        "order": "int",
        "new_tab": "bool",
        "badge": "int",
    }
    hidden = ["permission"]


@registry.register("main", item_class=NavigationItem)
def main_menu(menu: Menu) -> None:
    def board_children(m: Menu) -> None:
        m.add("Tasks", "boards/*/tasks*", {"icon": "mdi-checkbox-marked-outline"})
        m.add("Documents", "boards/*/documents*", {"icon": "mdi-file-document"})

    menu.add("Home", "/", {"icon": "mdi-home", "order": 1})
    menu.add("Chats", "chats*", {"icon": "mdi-chat", "order": 2})
    menu.add("Boards", "boards*", {"icon": "mdi-view-dashboard", "order": 3}).add_children(board_children)
    menu.add("Help", "help", {"icon": "mdi-help-circle", "order": 4, "new_tab": "true"})


@registry.register("admin", item_class=NavigationItem)
def admin_menu(menu: Menu) -> None:
    def settings_children(m: Menu) -> None:
        m.add("Users", "admin/users*", {"icon": "mdi-account-multiple", "permission": "users.view"})
        m.add("Channels", "admin/channels*", {"icon": "mdi-antenna", "permission": "channels.view"})

    menu.add("Dashboard", "admin", {"icon": "mdi-monitor-dashboard", "order": 1})
    menu.add("Settings", "admin/*", {"icon": "mdi-cog", "order": 2}).add_children(settings_children)
