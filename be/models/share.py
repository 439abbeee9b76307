from models.base import BaseModel, isoformat
from common.db import db

PERMISSIONS = ('read', 'write')


class Share(BaseModel):
    """Per-file grant from the file owner to one other user."""
    __tablename__ = 'shares'

    file_id = db.Column(db.Integer, db.ForeignKey('files.id'), nullable=False, index=True)
    sharer_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    sharee_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    permission = db.Column(db.String(16), nullable=False)

    file = db.relationship('File', back_populates='shares')
    sharer = db.relationship('User', foreign_keys=[sharer_id])
    sharee = db.relationship('User', foreign_keys=[sharee_id])

    __table_args__ = (
        db.UniqueConstraint('file_id', 'sharee_id', name='uq_share_file_sharee'),
        db.CheckConstraint("permission IN ('read', 'write')", name='ck_share_permission'),
    )

    def to_dict(self, viewer_id=None):
        return {
            "id": self.id,
            "fileId": self.file_id,
            "fileName": self.file.name,
            "sharerEmail": self.sharer.email,
            "shareeEmail": self.sharee.email,
            "permission": self.permission,
            "direction": "outgoing" if viewer_id == self.sharer_id else "incoming",
            "createdAt": isoformat(self.created_at),
        }
