from models import db

WINDOW_TYPES = ('builtIn', 'custom')
WINDOW_LAYOUTS = ('content', 'projects', 'faq', 'gallery')

class Window(db.Model):
    __tablename__ = 'windows'
    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(100), unique=True, nullable=False)
    label = db.Column(db.String(100), nullable=False)
    type = db.Column(db.String(20), nullable=False, default='custom')

    show_on_desktop = db.Column(db.Boolean, default=True)
    show_in_home = db.Column(db.Boolean, default=True)
    order_desktop = db.Column(db.Integer, default=99)
    order_home = db.Column(db.Integer, default=99)
    is_hidden = db.Column(db.Boolean, default=False)

    content = db.Column(db.Text, default='')
    icon = db.Column(db.String(50), default='folder')
    custom_icon_url = db.Column(db.String(500), nullable=True)
    layout = db.Column(db.String(20), default='content')
    is_archived = db.Column(db.Boolean, default=False)

    def to_dict(self):
        return {
            "id": self.id,
            "key": self.key,
            "label": self.label,
            "type": self.type,
            "showOnDesktop": self.show_on_desktop,
            "showInHome": self.show_in_home,
            "orderDesktop": self.order_desktop,
            "orderHome": self.order_home,
            "isHidden": self.is_hidden,
            "content": self.content,
            "icon": self.icon,
            "customIconUrl": self.custom_icon_url,
            "layout": self.layout,
            "isArchived": self.is_archived
        }
