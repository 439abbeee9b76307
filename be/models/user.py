from models.base import BaseModel, isoformat
from common.db import db

class User(BaseModel):
    __tablename__ = 'users'

    email = db.Column(db.String(254), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)

    folders = db.relationship('Folder', back_populates='owner', lazy=True)
    files = db.relationship('File', back_populates='owner', lazy=True)

    def to_dict(self):
        return {"id": self.id, "email": self.email, "createdAt": isoformat(self.created_at)}

    def __repr__(self):
        return f'<User {self.email}>'
