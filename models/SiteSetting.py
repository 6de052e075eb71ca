import json

from models import db

SITE_CONFIG_KEY = 'site_config'


class SiteSetting(db.Model):
    __tablename__ = 'site_settings'
    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(50), unique=True, nullable=False)  # e.g., "site_config"
    value = db.Column(db.Text, nullable=True)  # JSON document (title, faviconUrl)
    updated_at = db.Column(db.DateTime, default=db.func.now(), onupdate=db.func.now())

    @classmethod
    def load(cls, key):
        """Return the decoded JSON stored under ``key``, or an empty dict."""
        setting = cls.query.filter_by(key=key).first()
        if not setting or not setting.value:
            return {}
        return json.loads(setting.value)

    @classmethod
    def store(cls, key, data):
        """Replace the JSON stored under ``key``. The caller commits."""
        setting = cls.query.filter_by(key=key).first()
        if not setting:
            setting = cls(key=key)
            db.session.add(setting)
        setting.value = json.dumps(data)
        return setting
