from formatting import format_text
from models import DEFAULT_BACKGROUND_STYLE

BASE_Z_INDEX = 10
FIRST_Z_INDEX = 100
TASKBAR_HEIGHT = 40

DEFAULT_VIEWPORT = (1200, 800)

# Built-in windows every site starts with (seeded by /api/init-windows)
DEFAULT_WINDOWS = [
    {"key": "about", "label": "about", "show_on_desktop": False, "show_in_home": True,
     "order_desktop": 1, "order_home": 1, "icon": "user", "layout": "content"},
    {"key": "engineering", "label": "engineering", "show_on_desktop": True, "show_in_home": True,
     "order_desktop": 2, "order_home": 2, "icon": "rocket", "layout": "projects"},
    {"key": "games", "label": "games", "show_on_desktop": True, "show_in_home": True,
     "order_desktop": 3, "order_home": 3, "icon": "gamepad2", "layout": "projects"},
    {"key": "art", "label": "art", "show_on_desktop": True, "show_in_home": True,
     "order_desktop": 4, "order_home": 4, "icon": "palette", "layout": "gallery"},
    {"key": "contact", "label": "contact", "show_on_desktop": False, "show_in_home": True,
     "order_desktop": 5, "order_home": 5, "icon": "mail", "layout": "content"},
    {"key": "faq", "label": "FAQ", "show_on_desktop": True, "show_in_home": True,
     "order_desktop": 7, "order_home": 6, "icon": "help-circle", "layout": "faq"},
]

PROJECT_WINDOW_KEYS = ('engineering', 'games', 'art')

DEFAULT_ICONS = {w["key"]: w["icon"] for w in DEFAULT_WINDOWS}


def default_icon(key):
    return DEFAULT_ICONS.get(key, "folder")


class WindowManager:
    """Open/close/focus bookkeeping for the desktop windows.

    Every open or focus hands out the next z-index so the most recently
    touched window is drawn on top. Windows that were never raised sit at
    BASE_Z_INDEX.
    """

    def __init__(self, open_windows=("home",), viewport=DEFAULT_VIEWPORT):
        self.open_windows = list(open_windows)
        self.active_window = self.open_windows[0] if self.open_windows else ""
        self.z_indexes = {}
        self.next_z_index = FIRST_Z_INDEX
        self.viewport_width, self.viewport_height = viewport
        self.positions = {}

    def _raise(self, key):
        self.z_indexes[key] = self.next_z_index
        self.next_z_index += 1
        self.active_window = key

    def open(self, key):
        if key not in self.open_windows:
            self.open_windows.append(key)
        self._raise(key)

    def focus(self, key):
        self._raise(key)

    def close(self, key):
        remaining = [k for k in self.open_windows if k != key]
        self.open_windows = remaining
        self.z_indexes.pop(key, None)
        self.positions.pop(key, None)
        if self.active_window == key:
            self.active_window = remaining[0] if remaining else ""

    def z_index(self, key):
        return self.z_indexes.get(key, BASE_Z_INDEX)

    # --- geometry ---

    def responsive_size(self, base_width, base_height):
        return {
            "width": min(base_width, self.viewport_width * 0.9),
            "height": min(base_height, self.viewport_height * 0.8),
        }

    def responsive_position(self, base_x, base_y):
        return {
            "x": min(base_x, self.viewport_width * 0.1),
            "y": min(base_y, self.viewport_height * 0.1),
        }

    def centered_position(self, width, height):
        return {
            "x": max(0, (self.viewport_width - width) / 2),
            "y": max(0, (self.viewport_height - height) / 2),
        }

    def drag_to(self, key, pointer_x, pointer_y, offset_x, offset_y, width, height):
        """Move a window so the grab point follows the pointer, kept on screen above the taskbar."""
        x = max(0, min(self.viewport_width - width, pointer_x - offset_x))
        y = max(0, min(self.viewport_height - height - TASKBAR_HEIGHT, pointer_y - offset_y))
        self.positions[key] = {"x": x, "y": y}
        return self.positions[key]

    def geometry(self, key, base_width, base_height):
        size = self.responsive_size(base_width, base_height)
        position = self.positions.get(key) or self.centered_position(size["width"], size["height"])
        return {**position, **size, "zIndex": self.z_index(key)}


def window_base_size(window):
    if window.get("layout") in ("projects", "gallery"):
        return 600, 500
    return 500, 400


def background_css(style):
    style = style or DEFAULT_BACKGROUND_STYLE
    if style.get("type") == "solid":
        return f"background-color: {style.get('color')}"
    if style.get("type") == "gradient":
        return ("background-image: linear-gradient(to bottom, "
                f"{style.get('from') or '#60a5fa'}, {style.get('via') or '#3b82f6'}, {style.get('to') or '#2563eb'})")
    return (f"background-image: url({style.get('imageUrl') or ''}); "
            "background-size: cover; background-position: center")


def desktop_icons(windows):
    visible = [w for w in windows if not w["isHidden"] and not w.get("isArchived") and w["showOnDesktop"]]
    return sorted(visible, key=lambda w: w["orderDesktop"] or 0)


def home_items(windows):
    visible = [w for w in windows if not w["isHidden"] and not w.get("isArchived") and w["showInHome"]]
    return sorted(visible, key=lambda w: w["orderHome"] or 0)


def visible_contact_links(links):
    visible = [l for l in links if l["isActive"] and l.get("showOnDesktop") is not False]
    return sorted(visible, key=lambda l: l["order"] or 0)


def collect_keywords(projects):
    keywords = []
    for project in projects:
        if not project["isActive"]:
            continue
        for keyword in project.get("keywords") or []:
            if keyword not in keywords:
                keywords.append(keyword)
    return keywords


def panel_projects(window, projects):
    if window["type"] == "builtIn" and window["key"] in PROJECT_WINDOW_KEYS:
        return [p for p in projects if p["isActive"] and p["category"] == window["key"] and not p.get("customTabKey")]
    return [p for p in projects if p["isActive"] and p.get("customTabKey") == window["key"]]


def panel_faq(window, faq_items):
    if window["type"] == "builtIn":
        return [f for f in faq_items if not f.get("customTabKey")]
    return [f for f in faq_items if f.get("customTabKey") == window["key"]]


def window_panel(window, content, projects, faq_items):
    """Everything a window needs to render its body."""
    panel = {"key": window["key"], "label": window["label"], "layout": window.get("layout") or "content"}
    if panel["layout"] in ("projects", "gallery"):
        panel["projects"] = panel_projects(window, projects)
    elif panel["layout"] == "faq":
        panel["faq"] = [dict(item, answerHtml=format_text(item["answer"])) for item in panel_faq(window, faq_items)]
    else:
        section = content.get(window["key"])
        body = section["content"] if section and window["type"] == "builtIn" else window.get("content")
        panel["html"] = format_text(body or "")
        panel["imageUrl"] = section.get("imageUrl") if section else None
    return panel


def build_desktop_state(windows, contact_links, background, content, projects, faq_items,
                        site_config, viewport=DEFAULT_VIEWPORT):
    """Compose the public desktop from already-serialized rows."""
    manager = WindowManager(viewport=viewport)
    manager.focus("home")

    geometry = {"home": manager.geometry("home", 600, 500)}
    for window in windows:
        geometry[window["key"]] = manager.geometry(window["key"], *window_base_size(window))

    greeting = content.get("home_greeting")
    subtitle = content.get("home_subtitle")
    desktop_style = background.get("desktop") or DEFAULT_BACKGROUND_STYLE
    mobile_style = background.get("mobile") or DEFAULT_BACKGROUND_STYLE

    return {
        "title": site_config.get("title"),
        "faviconUrl": site_config.get("faviconUrl"),
        "background": desktop_style,
        "backgroundCss": background_css(desktop_style),
        "iconColor": desktop_style.get("iconColor") or "#ffffff",
        "mobileBackground": mobile_style,
        "mobileBackgroundCss": background_css(mobile_style),
        "mobileIconColor": mobile_style.get("iconColor") or "#ffffff",
        "icons": desktop_icons(windows),
        "homeItems": home_items(windows),
        "contactLinks": visible_contact_links(contact_links),
        "keywords": collect_keywords(projects),
        "greetingHtml": format_text(greeting["content"]) if greeting else "",
        "subtitleHtml": format_text(subtitle["content"]) if subtitle else "",
        "panels": [window_panel(w, content, projects, faq_items)
                   for w in windows if not w.get("isArchived")],
        "openWindows": manager.open_windows,
        "activeWindow": manager.active_window,
        "geometry": geometry,
    }
