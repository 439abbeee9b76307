from models.base import BaseModel
from common.db import db


class Folder(BaseModel):
    """A node of a per-owner folder tree; ``parent_id`` is NULL for roots."""
    __tablename__ = 'folders'

    name = db.Column(db.String(255), nullable=False)
    parent_id = db.Column(db.Integer, db.ForeignKey('folders.id'), nullable=True, index=True)
    owner_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)

    owner = db.relationship('User', back_populates='folders')
    parent = db.relationship('Folder', remote_side='Folder.id', back_populates='children')
    children = db.relationship('Folder', back_populates='parent', order_by='Folder.name', lazy=True)
    files = db.relationship('File', back_populates='folder', order_by='File.name', lazy=True)

    def to_summary(self):
        return {"id": self.id, "name": self.name}

    def __repr__(self):
        return f'<Folder {self.id} {self.name!r} parent={self.parent_id}>'
