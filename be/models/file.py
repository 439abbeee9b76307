from models.base import BaseModel, isoformat
from common.db import db

class File(BaseModel):
    __tablename__ = 'files'

    name = db.Column(db.String(255), nullable=False)
    mime_type = db.Column(db.String(255), nullable=False)
    folder_id = db.Column(db.Integer, db.ForeignKey('folders.id'), nullable=False, index=True)
    owner_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    size = db.Column(db.BigInteger, default=0, nullable=False)
    # per-file version sequence, bumped in the same transaction as the insert
    latest_version = db.Column(db.Integer, default=0, nullable=False)

    owner = db.relationship('User', back_populates='files')
    folder = db.relationship('Folder', back_populates='files')
    versions = db.relationship('FileVersion', back_populates='file',
                               order_by='FileVersion.version_number', lazy=True)
    shares = db.relationship('Share', back_populates='file', lazy=True)

    def to_summary(self):
        return {
            "id": self.id,
            "name": self.name,
            "type": self.mime_type,
            "size": self.size,
            "updatedAt": isoformat(self.updated_at),
        }

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "type": self.mime_type,
            "size": self.size,
            "folderId": self.folder_id,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
