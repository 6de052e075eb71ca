from models import db

class ContactLink(db.Model):
    __tablename__ = 'contact_links'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    url = db.Column(db.String(500), nullable=False)
    icon_url = db.Column(db.String(500), default='')
    order = db.Column(db.Integer, default=0)
    is_active = db.Column(db.Boolean, default=True)
    show_on_desktop = db.Column(db.Boolean, default=True)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "url": self.url,
            "iconUrl": self.icon_url,
            "order": self.order,
            "isActive": self.is_active,
            "showOnDesktop": self.show_on_desktop
        }
