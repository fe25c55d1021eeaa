import json
import weakref
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Type

from models.attributes import ALWAYS_GUARDED, cast_attribute, fill_attributes, is_fillable, serialize_attribute
from models.exceptions import MenuError, TypeMismatchError
from models.request_context import RequestContext

MenuBuilder = Callable[["Menu"], Any]


class MenuItemCollection:
    """Ordered, append-only list of menu items."""

    def __init__(self, items: Optional[List["MenuItem"]] = None):
        self._items: List[MenuItem] = []
        for item in items or []:
            self.add(item)

    def add(self, item: "MenuItem") -> "MenuItemCollection":
        """Append an item at the end of the collection."""
        if not isinstance(item, MenuItem):
            raise TypeMismatchError(item)
        self._items.append(item)
        return self

    def count(self) -> int:
        return len(self._items)

    def to_array(self) -> List[Dict[str, Any]]:
        """Export every item in insertion order."""
        return [item.to_array() for item in self._items]

    def to_json(self, **options: Any) -> str:
        return json.dumps(self.to_array(), **options)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator["MenuItem"]:
        return iter(self._items)

    def __getitem__(self, index: int) -> "MenuItem":
        return self._items[index]

    def __repr__(self) -> str:
        return f"MenuItemCollection({self._items!r})"


class MenuItem:
    """
    A node of a navigation menu.

    Subclasses customise the attribute bag through class attributes:

        guarded:  keys never written by ``fill``; ``["*"]`` blocks them all
        fillable: when not empty, the only keys ``fill`` writes
        casts:    attribute name to cast type, see ``models.attributes``
        hidden:   attribute names left out of ``to_array``
    """

    guarded: List[str] = []
    fillable: List[str] = []
    casts: Dict[str, Any] = {}
    hidden: List[str] = []

    def __init__(self, name: str, route: str, menu: "Menu", attributes: Optional[Mapping[str, Any]] = None):
        self._guarded = tuple(dict.fromkeys([*ALWAYS_GUARDED, *self.guarded]))
        self.attributes: Dict[str, Any] = {}

        self._set_menu(menu)
        self._set_name(name)
        self.set_route(route)
        self.children = MenuItemCollection()

        self.fill(attributes or {})

    def _set_menu(self, menu: "Menu") -> None:
        self._request = menu.get_request()
        self._menu_ref = weakref.ref(menu)

    def _set_name(self, name: str) -> "MenuItem":
        self.name = name
        return self

    def fill(self, attributes: Mapping[str, Any]) -> "MenuItem":
        """
        Store the fillable attributes, skipping guarded keys silently.

        Raises:
            CastError: If a value cannot be converted to its declared cast
        """
        self.attributes = fill_attributes(
            self.attributes, self._guarded, self.fillable, self.casts, attributes
        )
        return self

    def is_fillable(self, key: str) -> bool:
        return is_fillable(key, self._guarded, self.fillable)

    def set_attribute(self, key: str, value: Any) -> "MenuItem":
        """Store a single attribute through its cast, bypassing the fill guard."""
        if key in ALWAYS_GUARDED:
            raise MenuError(f"'{key}' is not an attribute, use its dedicated setter")
        self.attributes[key] = cast_attribute(key, value, self.casts)
        return self

    def get_attribute(self, key: str, default: Any = None) -> Any:
        return self.attributes.get(key, default)

    def has_attribute(self, key: str) -> bool:
        return key in self.attributes

    def get_attributes(self) -> Dict[str, Any]:
        return dict(self.attributes)

    def get_casts(self) -> Dict[str, Any]:
        return dict(self.casts)

    def get_name(self) -> str:
        return self.name

    def get_route(self) -> str:
        return self.route

    def set_route(self, route: str) -> "MenuItem":
        """Change the route and recompute the active state against the request."""
        self.route = route
        self._update_active()
        return self

    def _update_active(self) -> None:
        self.active = self._request.matches(self.route)

    def is_active(self) -> bool:
        return self.active

    def get_menu(self) -> Optional["Menu"]:
        """The menu that created this item, or None once it has been released."""
        return self._menu_ref()

    def get_children(self) -> MenuItemCollection:
        return self.children

    def add_child(self, item: "MenuItem") -> "MenuItem":
        """Append a child item after the existing ones."""
        if not isinstance(item, MenuItem):
            raise TypeMismatchError(item)
        self.children.add(item)
        return self

    def add_children(self, builder: MenuBuilder) -> "MenuItem":
        """Let the owning menu run ``builder`` with this item as the parent."""
        menu = self.get_menu()
        if menu is None:
            raise MenuError(f"Menu of item '{self.name}' is no longer available")
        menu.load_children(self, builder)
        return self

    def attributes_to_array(self) -> Dict[str, Any]:
        return {
            key: serialize_attribute(value)
            for key, value in self.attributes.items()
            if key not in self.hidden
        }

    def variables_to_array(self) -> Dict[str, Any]:
        array = {
            "name": self.get_name(),
            "route": self.get_route(),
            "active": self.is_active(),
        }

        if self.children.count() > 0:
            array["children"] = self.children.to_array()

        return array

    def to_array(self) -> Dict[str, Any]:
        """Export custom attributes followed by name, route, active and children."""
        return {**self.attributes_to_array(), **self.variables_to_array()}

    def to_json(self, **options: Any) -> str:
        """JSON text of ``to_array``; options are passed to ``json.dumps``."""
        return json.dumps(self.to_array(), **options)

    def json_serialize(self) -> Dict[str, Any]:
        return self.to_array()

    __json__ = json_serialize

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, route={self.route!r}, active={self.active!r})"


class Menu:
    """
    A named navigation menu built for a single request.

    Items added while a parent is loading its children are attached to that
    parent; all other items go to the root collection.
    """

    def __init__(self, name: str, request: RequestContext, item_class: Type[MenuItem] = MenuItem):
        self.name = name
        self.request = request
        self.item_class = item_class
        self.items = MenuItemCollection()
        self._parents: List[MenuItem] = []

    def add(self, name: str, route: str = "", attributes: Optional[Mapping[str, Any]] = None) -> MenuItem:
        """Create an item and attach it to the current parent or the root."""
        item = self.item_class(name, route, self, attributes)

        if self._parents:
            self._parents[-1].add_child(item)
        else:
            self.items.add(item)

        return item

    def load_children(self, parent: MenuItem, builder: MenuBuilder) -> None:
        """Run ``builder`` immediately with ``parent`` as the target of ``add``."""
        if not isinstance(parent, MenuItem):
            raise TypeMismatchError(parent)

        self._parents.append(parent)
        try:
            builder(self)
        finally:
            self._parents.pop()

    def get_name(self) -> str:
        return self.name

    def get_request(self) -> RequestContext:
        return self.request

    def get_items(self) -> MenuItemCollection:
        return self.items

    def to_array(self) -> List[Dict[str, Any]]:
        return self.items.to_array()

    def to_json(self, **options: Any) -> str:
        return self.items.to_json(**options)


def build_menu(
    request_path: str,
    definition: MenuBuilder,
    name: str = "main",
    item_class: Type[MenuItem] = MenuItem,
) -> Menu:
    """
    Build a menu for a request path.

    Args:
        request_path: Path of the current request, e.g. "/admin/users"
        definition: Callable receiving the new menu and adding its items
        name: Menu name
        item_class: MenuItem subclass used for every item

    Returns:
        The populated menu
    """
    menu = Menu(name, RequestContext(request_path), item_class=item_class)
    definition(menu)
    return menu
