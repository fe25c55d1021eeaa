#!/usr/bin/env python3
"""
Management commands for Menu Hub.

Usage:
    python manage.py list_menus
    python manage.py show_menu [<name>] [<path>] [--indent N]
"""

import sys
from menus.registry import registry
from models.exceptions import MenuError
from settings import DEFAULT_MENU, MENU_JSON_INDENT, logger

# Registers the application menus
import menus.navigation  # noqa: F401


def list_menus():
    """Print the registered menu names."""
    for name in registry.names():
        print(name)


def show_menu(name: str, path: str, indent=None):
    """Print a menu built for a request path as JSON."""
    try:
        menu = registry.build(name, path)
    except MenuError as e:
        logger.error(f"Failed to build menu '{name}': {e}")
        sys.exit(1)

    print(menu.to_json(indent=indent))


def _pop_indent(args):
    """Remove a trailing '--indent N' from args and return N."""
    if "--indent" not in args:
        return MENU_JSON_INDENT

    position = args.index("--indent")
    try:
        indent = int(args[position + 1])
    except (IndexError, ValueError):
        print("Usage: --indent <number>")
        sys.exit(1)
    del args[position:position + 2]
    return indent


def main():
    if len(sys.argv) < 2:
        print("Usage: python manage.py <command> [args]")
        print("Commands:")
        print("  list_menus                              - List registered menus")
        print("  show_menu [<name>] [<path>] [--indent N] - Print a menu as JSON")
        sys.exit(1)

    command = sys.argv[1]
    args = sys.argv[2:]

    if command == "list_menus":
        list_menus()
    elif command == "show_menu":
        indent = _pop_indent(args)
        if len(args) > 2:
            print("Usage: python manage.py show_menu [<name>] [<path>] [--indent N]")
            sys.exit(1)
        name = args[0] if len(args) > 0 else DEFAULT_MENU
        path = args[1] if len(args) > 1 else "/"
        show_menu(name, path, indent)
    else:
        print(f"Unknown command: {command}")
        print("Run 'python manage.py' to see available commands")
        sys.exit(1)


if __name__ == "__main__":
    main()
