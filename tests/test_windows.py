import io

import pytest


@pytest.fixture
def custom_window(admin_client):
    response = admin_client.post('/api/windows', json={"key": "blog", "label": "blog", "layout": "content",
                                                       "content": "Posts *soon*"})
    assert response.status_code == 201
    return response.get_json()


def test_create_applies_defaults(admin_client):
    response = admin_client.post('/api/windows', json={})
    assert response.status_code == 201

    window = response.get_json()
    assert window["key"].startswith("custom-")
    assert window["label"] == "New Window"
    assert window["type"] == "custom"
    assert window["showOnDesktop"] is True
    assert window["showInHome"] is True
    assert window["orderDesktop"] == 99
    assert window["orderHome"] == 99
    assert window["icon"] == "folder"
    assert window["layout"] == "content"
    assert window["isArchived"] is False


def test_create_rejects_duplicate_key(admin_client, custom_window):
    response = admin_client.post('/api/windows', json={"key": "blog"})
    assert response.status_code == 400


def test_create_rejects_unknown_layout(admin_client):
    assert admin_client.post('/api/windows', json={"layout": "carousel"}).status_code == 400


def test_list_ordered_by_desktop_order(admin_client, client):
    admin_client.post('/api/windows', json={"key": "late", "orderDesktop": 20})
    admin_client.post('/api/windows', json={"key": "early", "orderDesktop": 1})
    assert [w["key"] for w in client.get('/api/windows').get_json()] == ["early", "late"]


def test_update_archives_window(admin_client, custom_window):
    response = admin_client.put('/api/windows', json={"id": custom_window["id"], "isArchived": True, "label": "old blog"})
    assert response.status_code == 200
    assert response.get_json()["isArchived"] is True
    assert response.get_json()["label"] == "old blog"
    assert response.get_json()["content"] == "Posts *soon*"


def test_update_multipart_coerces_booleans_and_numbers(admin_client, custom_window):
    response = admin_client.put('/api/windows', data={
        "id": str(custom_window["id"]),
        "showOnDesktop": "false",
        "isHidden": "true",
        "orderHome": "3",
        "icon-file": (io.BytesIO(b"svg"), "blog.svg"),
    }, content_type='multipart/form-data')

    assert response.status_code == 200
    window = response.get_json()
    assert window["showOnDesktop"] is False
    assert window["isHidden"] is True
    assert window["orderHome"] == 3
    assert window["customIconUrl"].startswith("/uploads/window-icons/")


def test_update_rejects_unsupported_upload(admin_client, custom_window):
    response = admin_client.put('/api/windows', data={
        "id": str(custom_window["id"]),
        "icon-file": (io.BytesIO(b"MZ"), "virus.exe"),
    }, content_type='multipart/form-data')
    assert response.status_code == 400
    assert response.get_json() == {"error": "Unsupported file type"}


def test_update_requires_id(admin_client):
    response = admin_client.put('/api/windows', json={"label": "x"})
    assert response.status_code == 400
    assert response.get_json() == {"error": "Window ID is required"}


def test_delete_is_hard(admin_client, client, custom_window):
    assert admin_client.delete(f'/api/windows?id={custom_window["id"]}').get_json() == {"success": True}
    assert client.get('/api/windows').get_json() == []
    assert admin_client.delete(f'/api/windows?id={custom_window["id"]}').status_code == 404


def test_init_windows_seeds_missing_defaults_once(client):
    first = client.get('/api/init-windows').get_json()
    assert first["success"] is True
    assert {r["key"]: r["status"] for r in first["results"]} == {
        "about": "created", "engineering": "created", "games": "created",
        "art": "created", "contact": "created", "faq": "created",
    }

    second = client.get('/api/init-windows').get_json()
    assert all(r["status"] == "exists" for r in second["results"])

    faq = next(w for w in client.get('/api/windows').get_json() if w["key"] == "faq")
    assert faq["type"] == "builtIn"
    assert faq["layout"] == "faq"
    assert faq["icon"] == "help-circle"


def test_custom_panels_only_lists_custom_windows(client, custom_window):
    client.get('/api/init-windows')

    panels = client.get('/api/custom-panels').get_json()
    assert [p["key"] for p in panels] == ["blog"]

    assert client.get('/api/custom-panels?key=blog').get_json()["id"] == custom_window["id"]
    missing = client.get('/api/custom-panels?key=about')
    assert missing.status_code == 404
    assert missing.get_json() == {"error": "Custom panel not found"}


def test_update_custom_panel_by_key(admin_client, custom_window):
    response = admin_client.put('/api/custom-panels', json={"key": "blog", "label": "Writing", "layout": "faq"})
    assert response.status_code == 200
    assert response.get_json()["label"] == "Writing"
    assert response.get_json()["layout"] == "faq"


def test_update_custom_panel_icon_upload(admin_client, custom_window):
    response = admin_client.put('/api/custom-panels', data={
        "key": "blog",
        "icon": [(io.BytesIO(b"png"), "pen.png"), "pen"],
    }, content_type='multipart/form-data')

    assert response.status_code == 200
    panel = response.get_json()
    assert panel["icon"] == "pen"
    assert panel["customIconUrl"].startswith("/uploads/panel-icons/")


def test_update_custom_panel_errors(admin_client, client):
    client.get('/api/init-windows')
    assert admin_client.put('/api/custom-panels', json={"label": "x"}).status_code == 400
    # Built-in windows are not custom panels
    assert admin_client.put('/api/custom-panels', json={"key": "about"}).status_code == 404


@pytest.mark.parametrize("order", [None, "abc"])
def test_update_rejects_bad_json_order(admin_client, client, custom_window, order):
    response = admin_client.put('/api/windows', json={"id": custom_window["id"], "orderDesktop": order})
    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid number for orderDesktop"}

    assert client.get('/api/windows').get_json()[0]["orderDesktop"] == 99
    assert client.get('/').status_code == 200
    assert client.get('/api/desktop').status_code == 200


def test_json_numbers_and_booleans_are_coerced(admin_client, custom_window):
    response = admin_client.put('/api/windows', json={"id": str(custom_window["id"]), "orderHome": "4",
                                                      "isHidden": "true"})
    assert response.status_code == 200
    assert response.get_json()["orderHome"] == 4
    assert response.get_json()["isHidden"] is True


def test_create_rejects_null_order(admin_client):
    response = admin_client.post('/api/windows', json={"key": "notes", "orderHome": None})
    assert response.status_code == 400


def test_create_builtin_key_gets_seeded_icon(admin_client):
    response = admin_client.post('/api/windows', json={"key": "games", "type": "builtIn"})
    assert response.get_json()["icon"] == "gamepad2"
