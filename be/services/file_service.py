import logging

from common.db import db
from common.errors import StoreError
from models.base import isoformat
from models.file import File
from services.access_service import AccessService, AccessLevel

logger = logging.getLogger(__name__)


class FileService:
    @staticmethod
    def create_file(name, folder_id, owner_id, mime_type):
        """Create the metadata row of an empty file inside an owned folder."""
        name = (name or '').strip()
        mime_type = (mime_type or '').strip()
        if not name:
            raise StoreError("File name must not be empty")
        if not mime_type:
            raise StoreError("File type must not be empty")

        try:
            AccessService.require_folder_owner(owner_id, folder_id)
            record = File(name=name, mime_type=mime_type, folder_id=folder_id, owner_id=owner_id)
            db.session.add(record)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        logger.info("File %s (%s) created in folder %s by user %s", record.id, name, folder_id, owner_id)
        return record

    @staticmethod
    def get_file_metadata(file_id, principal_id):
        record = AccessService.require_file_access(principal_id, file_id, AccessLevel.READ)
        info = record.to_dict()
        info["versions"] = [
            {
                "id": v.id,
                "versionNumber": v.version_number,
                "size": v.size,
                "createdAt": isoformat(v.created_at),
            }
            for v in record.versions
        ]
        return info
