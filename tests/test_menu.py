import pytest
from fastapi.testclient import TestClient
from main import app
from menus.navigation import NavigationItem
from menus.registry import registry
from models.menu import Menu


@pytest.fixture(name="client")
def client_fixture():
    client = TestClient(app)
    yield client


@pytest.fixture(name="broken_menu")
def broken_menu_fixture():
    def broken(menu: Menu):
        menu.add("Home", "/", {"order": "first"})

    registry.register("broken", broken, item_class=NavigationItem)
    yield "broken"
    registry.unregister("broken")


def test_health(client: TestClient):
    """Test health check endpoint."""
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"message": "Menu Hub API is running"}


def test_list_menus(client: TestClient):
    """Test listing registered menus."""
    response = client.get("/api/menu/")

    assert response.status_code == 200
    data = response.json()
    assert "main" in data["menus"]
    assert "admin" in data["menus"]
    assert data["total_count"] == len(data["menus"])


def test_get_menu_success(client: TestClient):
    """Test building the main menu for a chat page."""
    response = client.get("/api/menu/main", params={"path": "/chats/42"})

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "main"
    assert data["path"] == "chats/42"
    assert data["total_count"] == 4

    items = {item["name"]: item for item in data["items"]}
    assert items["Chats"] == {
        "name": "Chats",
        "route": "chats*",
        "active": True,
        "icon": "mdi-chat",
        "order": 2,
    }
    assert items["Home"]["active"] is False


def test_get_menu_matches_registry_export(client: TestClient):
    """Test the response items equal the menu's own array export."""
    response = client.get("/api/menu/main", params={"path": "/boards/3/documents"})

    assert response.status_code == 200
    assert response.json()["items"] == registry.build("main", "/boards/3/documents").to_array()


def test_get_menu_children_only_when_present(client: TestClient):
    """Test the children key is omitted for leaf items."""
    response = client.get("/api/menu/main", params={"path": "/boards/3/documents"})

    items = {item["name"]: item for item in response.json()["items"]}
    assert "children" not in items["Home"]
    assert [child["name"] for child in items["Boards"]["children"]] == ["Tasks", "Documents"]
    assert items["Boards"]["children"][1]["active"] is True
    assert "children" not in items["Boards"]["children"][0]


def test_get_menu_default_path(client: TestClient):
    """Test the root path is used when no path is given."""
    response = client.get("/api/menu/main")

    assert response.status_code == 200
    data = response.json()
    assert data["path"] == "/"
    assert data["items"][0]["name"] == "Home"
    assert data["items"][0]["active"] is True


def test_get_menu_hidden_attributes(client: TestClient):
    """Test hidden attributes do not reach the response."""
    response = client.get("/api/menu/admin", params={"path": "/admin/channels"})

    assert response.status_code == 200
    settings_item = response.json()["items"][1]
    assert [child["active"] for child in settings_item["children"]] == [False, True]
    assert all("permission" not in child for child in settings_item["children"])


def test_get_menu_not_found(client: TestClient):
    """Test getting a menu that is not registered."""
    response = client.get("/api/menu/nonexistent")

    assert response.status_code == 404
    assert response.json()["detail"] == "Menu not found"


def test_get_menu_build_error(client: TestClient, broken_menu: str):
    """Test a cast failure while building returns a server error."""
    response = client.get(f"/api/menu/{broken_menu}")

    assert response.status_code == 500
    assert "order" in response.json()["detail"]
