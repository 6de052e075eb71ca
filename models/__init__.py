from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

# --- Import Models ---
from .Project import Project, PROJECT_CATEGORIES
from .Content import Content
from .FaqItem import FaqItem
from .Window import Window, WINDOW_TYPES, WINDOW_LAYOUTS
from .ContactLink import ContactLink
from .Background import Background, BACKGROUND_MODES, BACKGROUND_TYPES, DEFAULT_BACKGROUND_STYLE
from .SiteSetting import SiteSetting, SITE_CONFIG_KEY
