from models import db

BACKGROUND_MODES = ('desktop', 'mobile')
BACKGROUND_TYPES = ('solid', 'gradient', 'image')

DEFAULT_BACKGROUND_STYLE = {
    "type": "solid",
    "color": "#1a1a2e",
    "from": "#667eea",
    "via": "#764ba2",
    "to": "#f093fb",
    "overlay": False,
    "iconColor": "#ffffff"
}

class Background(db.Model):
    __tablename__ = 'background'
    id = db.Column(db.Integer, primary_key=True)
    mode = db.Column(db.String(20), unique=True, nullable=False) # 'desktop' or 'mobile'
    type = db.Column(db.String(20), nullable=False, default='solid')
    color = db.Column(db.String(20), default=DEFAULT_BACKGROUND_STYLE["color"])
    from_color = db.Column(db.String(20), default=DEFAULT_BACKGROUND_STYLE["from"])
    via_color = db.Column(db.String(20), default=DEFAULT_BACKGROUND_STYLE["via"])
    to_color = db.Column(db.String(20), default=DEFAULT_BACKGROUND_STYLE["to"])
    overlay = db.Column(db.Boolean, default=False)
    image_url = db.Column(db.String(500), nullable=True)
    icon_color = db.Column(db.String(20), default=DEFAULT_BACKGROUND_STYLE["iconColor"])

    def to_style(self):
        return {
            "type": self.type,
            "color": self.color,
            "from": self.from_color,
            "via": self.via_color,
            "to": self.to_color,
            "overlay": self.overlay,
            "imageUrl": self.image_url,
            "iconColor": self.icon_color
        }
