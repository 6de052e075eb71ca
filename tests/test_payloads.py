import pytest

from payloads import (camel_to_snake, to_columns, parse_array, parse_bool, parse_int, request_payload,
                      BACKGROUND_COLUMNS, BACKGROUND_FIELDS, PROJECT_FIELDS)


@pytest.mark.parametrize("camel, snake", [
    ("imageUrl", "image_url"),
    ("showOnDesktop", "show_on_desktop"),
    ("customTabKey", "custom_tab_key"),
    ("title", "title"),
])
def test_camel_to_snake(camel, snake):
    assert camel_to_snake(camel) == snake


def test_to_columns_keeps_only_supplied_fields():
    data = {"title": "x", "imageUrl": None, "orderIndex": 0, "unknown": 1}
    assert to_columns(data, PROJECT_FIELDS) == {"title": "x", "image_url": None, "order_index": 0}


def test_to_columns_with_renames():
    data = {"from": "#000", "via": "#111", "color": "#fff", "iconColor": "#eee"}
    columns = to_columns(data, BACKGROUND_FIELDS, renames=BACKGROUND_COLUMNS)
    assert columns == {"from_color": "#000", "via_color": "#111", "color": "#fff", "icon_color": "#eee"}


def test_parse_helpers():
    assert parse_array('["a", "b"]') == ["a", "b"]
    assert parse_array("plain") == ["plain"]
    assert parse_array('"quoted"') == ["quoted"]
    assert parse_array(["kept"]) == ["kept"]
    assert parse_array(None) == []
    assert parse_array("") == []
    with pytest.raises(ValueError):
        parse_array({"not": "a list"}, "tags")
    assert parse_bool("true") is True
    assert parse_bool(True) is True
    assert parse_bool("false") is False
    assert parse_bool(None) is False
    assert parse_int("7", "order") == 7
    with pytest.raises(ValueError):
        parse_int("seven", "order")
    with pytest.raises(ValueError):
        parse_int(True, "order")
    with pytest.raises(ValueError):
        parse_int(None, "order")


def test_request_payload_json_is_coerced(app):
    body = {"tags": "robotics", "photos": None, "id": "3", "isActive": "false"}
    with app.test_request_context('/', method='POST', json=body):
        data = request_payload(array_fields=("tags", "photos"), int_fields=("id",), bool_fields=("isActive",))
    assert data == {"tags": ["robotics"], "photos": [], "id": 3, "isActive": False}


@pytest.mark.parametrize("body", [{"orderIndex": None}, {"orderIndex": "abc"}, {"tags": 5}])
def test_request_payload_json_rejects_bad_types(app, body):
    with app.test_request_context('/', method='POST', json=body):
        with pytest.raises(ValueError):
            request_payload(array_fields=("tags",), int_fields=("orderIndex",))


def test_request_payload_non_object_json(app):
    with app.test_request_context('/', method='POST', json=[1, 2]):
        assert request_payload() == {}


def test_request_payload_multipart(app):
    form = {"tags": '["a"]', "photos": "", "id": "3", "orderIndex": "", "isActive": "false"}
    with app.test_request_context('/', method='POST', data=form, content_type='multipart/form-data'):
        data = request_payload(array_fields=("tags", "photos"), int_fields=("id", "orderIndex"),
                               bool_fields=("isActive",))
    assert data == {"tags": ["a"], "photos": [], "id": 3, "isActive": False}
