import logging
from collections import namedtuple

from flask import current_app
from sqlalchemy import select, update

from common.db import db
from common.errors import StoreError
from models.base import utcnow
from models.file import File
from models.file_version import FileVersion
from services.access_service import AccessService, AccessLevel, FILE_NOT_FOUND
from utils.compress import compress_for_storage, decompress_from_storage
from utils.hash import md5_bytes

logger = logging.getLogger(__name__)

VersionContent = namedtuple(
    'VersionContent', ['file_id', 'version_number', 'content', 'file_name', 'mime_type'])


class VersionService:
    """Append-only content history of a file."""

    @staticmethod
    def create_version(file_id, content, author_id):
        if content is None:
            raise StoreError("Content must be provided")
        AccessService.require_file_access(author_id, file_id, AccessLevel.WRITE)

        stored, compressed = compress_for_storage(
            content, enabled=current_app.config.get("ENABLE_COMPRESSION", True))
        try:
            # The counter bump is the first write of the transaction, so it
            # takes the write lock and serializes uploads to the same file.
            result = db.session.execute(
                update(File)
                .where(File.id == file_id)
                .values(latest_version=File.latest_version + 1,
                        size=len(content),
                        updated_at=utcnow())
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                raise StoreError(FILE_NOT_FOUND)
            number = db.session.scalar(
                select(File.latest_version).where(File.id == file_id))

            version = FileVersion(
                file_id=file_id,
                version_number=number,
                author_id=author_id,
                content=stored,
                compressed=compressed,
                size=len(content),
                checksum=md5_bytes(content),
            )
            db.session.add(version)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        logger.info("File %s: version %s created by user %s (%d bytes)",
                    file_id, number, author_id, len(content))
        return version

    @staticmethod
    def list_versions(file_id, principal_id):
        AccessService.require_file_access(principal_id, file_id, AccessLevel.READ)
        return (FileVersion.query
                .filter_by(file_id=file_id)
                .order_by(FileVersion.version_number)
                .all())

    @staticmethod
    def get_latest(file_id, principal_id):
        record = AccessService.require_file_access(principal_id, file_id, AccessLevel.READ)
        version = (FileVersion.query
                   .filter_by(file_id=file_id)
                   .order_by(FileVersion.version_number.desc())
                   .first())
        if version is None:
            raise StoreError("Version not found: no content has been uploaded for this file")
        return VersionService._content(record, version)

    @staticmethod
    def get_version(file_id, version_id, principal_id):
        record = AccessService.require_file_access(principal_id, file_id, AccessLevel.READ)
        version = VersionService._find(file_id, version_id)
        return VersionService._content(record, version)

    @staticmethod
    def restore_version(file_id, version_id, principal_id):
        """Append a new version carrying the content of an older one."""
        AccessService.require_file_access(principal_id, file_id, AccessLevel.WRITE)
        old = VersionService._find(file_id, version_id)
        data = decompress_from_storage(old.content, old.compressed)
        new = VersionService.create_version(file_id, data, principal_id)
        return {
            "fileId": file_id,
            "newVersionId": new.id,
            "newVersionNumber": new.version_number,
            "message": f"Version {old.version_number} restored as version {new.version_number}",
        }

    @staticmethod
    def _find(file_id, version_id):
        version = FileVersion.query.filter_by(id=version_id, file_id=file_id).first()
        if version is None:
            raise StoreError("Version not found for this file")
        return version

    @staticmethod
    def _content(record, version):
        return VersionContent(
            file_id=record.id,
            version_number=version.version_number,
            content=decompress_from_storage(version.content, version.compressed),
            file_name=record.name,
            mime_type=record.mime_type,
        )
