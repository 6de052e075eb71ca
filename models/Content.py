from datetime import datetime
from models import db

class Content(db.Model):
    __tablename__ = 'content'
    id = db.Column(db.Integer, primary_key=True)
    section = db.Column(db.String(100), unique=True, nullable=False) # e.g., "about", "home_greeting"
    title = db.Column(db.String(200), default='')
    content = db.Column(db.Text, default='')
    image_url = db.Column(db.String(500), nullable=True)
    custom_tab_key = db.Column(db.String(100), nullable=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "section": self.section,
            "title": self.title,
            "content": self.content,
            "imageUrl": self.image_url,
            "customTabKey": self.custom_tab_key
        }
