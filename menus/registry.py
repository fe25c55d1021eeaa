from typing import Dict, List, Optional, Type

from models.exceptions import MenuNotFoundError
from models.menu import Menu, MenuBuilder, MenuItem, build_menu
from settings import logger


class MenuRegistry:
    """Registry of named menu definitions."""

    def __init__(self):
        self._definitions: Dict[str, MenuBuilder] = {}
        self._item_classes: Dict[str, Type[MenuItem]] = {}

    def register(self, name: str, definition: Optional[MenuBuilder] = None, item_class: Type[MenuItem] = MenuItem):
        """
        Register a menu definition under a name.

        Can be called directly or used as a decorator:

            @registry.register("main")
            def main_menu(menu):
                menu.add("Home", "/")
        """
        def decorator(func: MenuBuilder) -> MenuBuilder:
            if name in self._definitions:
                logger.warning("Replacing menu definition", extra={"menu": name})
            self._definitions[name] = func
            self._item_classes[name] = item_class
            logger.debug("Menu definition registered", extra={"menu": name})
            return func

        if definition is not None:
            return decorator(definition)
        return decorator

    def unregister(self, name: str) -> None:
        """Remove a menu definition; unknown names are ignored."""
        self._definitions.pop(name, None)
        self._item_classes.pop(name, None)

    def names(self) -> List[str]:
        return list(self._definitions)

    def has(self, name: str) -> bool:
        return name in self._definitions

    def get(self, name: str) -> MenuBuilder:
        try:
            return self._definitions[name]
        except KeyError:
            raise MenuNotFoundError(name) from None

    def build(self, name: str, request_path: str) -> Menu:
        """Build the named menu for a request path."""
        definition = self.get(name)
        menu = build_menu(request_path, definition, name=name, item_class=self._item_classes[name])
        logger.debug("Menu built", extra={
            "menu": name,
            "path": menu.get_request().path,
            "root_items": menu.get_items().count()
        })
        return menu


# Global registry instance
registry = MenuRegistry()
