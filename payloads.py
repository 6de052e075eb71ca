import json
import re

from flask import request

# camelCase API names for each resource, in the order the admin panel sends them
PROJECT_FIELDS = ('title', 'description', 'category', 'imageUrl', 'photos', 'keywords',
                  'projectLink', 'tags', 'orderIndex', 'isActive', 'customTabKey')
PROJECT_ARRAY_FIELDS = ('tags', 'keywords', 'photos')

CONTENT_FIELDS = ('title', 'content', 'imageUrl', 'customTabKey')

WINDOW_FIELDS = ('key', 'label', 'showOnDesktop', 'showInHome', 'orderDesktop', 'orderHome',
                 'isHidden', 'content', 'icon', 'customIconUrl', 'layout', 'isArchived')
WINDOW_BOOL_FIELDS = ('showOnDesktop', 'showInHome', 'isHidden', 'isArchived')

PANEL_FIELDS = ('label', 'content', 'layout', 'icon', 'customIconUrl')

CONTACT_LINK_FIELDS = ('name', 'url', 'iconUrl', 'order', 'isActive', 'showOnDesktop')

BACKGROUND_FIELDS = ('color', 'from', 'via', 'to', 'imageUrl', 'iconColor')
# Background colors don't follow the plain snake_case rule
BACKGROUND_COLUMNS = {"from": "from_color", "via": "via_color", "to": "to_color"}


def camel_to_snake(name):
    return re.sub(r'[A-Z]', lambda m: '_' + m.group(0).lower(), name)


def to_columns(data, fields, renames=None):
    """Map the camelCase keys present in ``data`` to their snake_case columns.

    Keys missing from ``data`` are skipped so the result can be applied as a
    partial update.
    """
    renames = renames or {}
    columns = {}
    for field in fields:
        if field in data:
            columns[renames.get(field, camel_to_snake(field))] = data[field]
    return columns


def parse_bool(value):
    return value is True or value == 'true'


def parse_int(value, field):
    if isinstance(value, bool):
        raise ValueError(f"Invalid number for {field}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid number for {field}")


def parse_array(value, field=None):
    if isinstance(value, list):
        return value
    if value is None or value == '':
        return []
    if not isinstance(value, str):
        raise ValueError(f"Invalid list for {field}")
    try:
        parsed = json.loads(value)
    except ValueError:
        return [value]
    return parsed if isinstance(parsed, list) else [parsed]


def is_multipart():
    return (request.content_type or '').startswith('multipart/form-data')


def request_payload(array_fields=(), int_fields=(), bool_fields=()):
    """Read the body of a JSON or multipart request as a plain dict.

    The named array, integer and boolean fields are converted for both
    kinds of body. Multipart forms only carry strings, so an empty integer
    field there is dropped; in JSON a null integer is rejected. Raises
    ValueError on a value that can't be converted.
    """
    if is_multipart():
        data = request.form.to_dict()
        for field in int_fields:
            if data.get(field) == '':
                del data[field]
    else:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return {}

    for field in array_fields:
        if field in data:
            data[field] = parse_array(data[field], field)
    for field in int_fields:
        if field in data:
            data[field] = parse_int(data[field], field)
    for field in bool_fields:
        if field in data:
            data[field] = parse_bool(data[field])
    return data
