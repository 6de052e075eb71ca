from datetime import datetime
from models import db

PROJECT_CATEGORIES = ('engineering', 'games', 'art')

class Project(db.Model):
    __tablename__ = 'projects'
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, default='')

    # 'engineering', 'games', 'art'
    category = db.Column(db.String(20), nullable=False)

    image_url = db.Column(db.String(500), default='')
    photos = db.Column(db.JSON, default=list)
    keywords = db.Column(db.JSON, default=list)
    project_link = db.Column(db.String(500), default='')
    tags = db.Column(db.JSON, default=list)
    order_index = db.Column(db.Integer, default=0)
    is_active = db.Column(db.Boolean, default=True)

    # Matches Window.key when the project belongs to a custom tab
    custom_tab_key = db.Column(db.String(100), nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "imageUrl": self.image_url,
            "photos": self.photos or [],
            "keywords": self.keywords or [],
            "projectLink": self.project_link,
            "tags": self.tags or [],
            "orderIndex": self.order_index,
            "isActive": self.is_active,
            "customTabKey": self.custom_tab_key,
            "createdAt": self.created_at.isoformat() if self.created_at else None
        }
