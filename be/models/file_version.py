from models.base import isoformat, utcnow
from common.db import db


class FileVersion(db.Model):
    """Immutable snapshot of a file's content.

    Rows are append-only; ``version_number`` is unique per file, starts at 1
    and has no gaps.
    """
    __tablename__ = 'file_versions'

    id = db.Column(db.Integer, primary_key=True)
    file_id = db.Column(db.Integer, db.ForeignKey('files.id'), nullable=False, index=True)
    version_number = db.Column(db.Integer, nullable=False)
    author_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    content = db.Column(db.LargeBinary, nullable=False)
    compressed = db.Column(db.Boolean, default=False, nullable=False)
    size = db.Column(db.BigInteger, nullable=False)  # uncompressed size
    checksum = db.Column(db.String(32), nullable=False)  # md5 of the original bytes
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    file = db.relationship('File', back_populates='versions')

    __table_args__ = (
        db.UniqueConstraint('file_id', 'version_number', name='uq_file_version_number'),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "fileId": self.file_id,
            "versionNumber": self.version_number,
            "size": self.size,
            "checksum": self.checksum,
            "createdAt": isoformat(self.created_at),
        }

    def __repr__(self):
        return f'<FileVersion file={self.file_id} v{self.version_number}>'
