from enum import IntEnum

from common.db import db
from common.errors import StoreError
from models.file import File
from models.folder import Folder
from models.share import Share


class AccessLevel(IntEnum):
    NONE = 0
    READ = 1
    WRITE = 2
    OWNER = 3


SHARE_LEVELS = {
    'read': AccessLevel.READ,
    'write': AccessLevel.WRITE,
}

FILE_NOT_FOUND = "File not found or access denied"
FOLDER_NOT_FOUND = "Folder not found or access denied"


class AccessService:
    """Effective permission of a principal on a file or a folder.

    Files can be reached by their owner or through share rows; folders have no
    share mechanism, so only the owner sees them.
    """

    @staticmethod
    def resolve_access(principal_id, resource_type, resource_id):
        if resource_type == 'file':
            return AccessService.file_access(principal_id, db.session.get(File, resource_id))
        if resource_type == 'folder':
            return AccessService.folder_access(principal_id, db.session.get(Folder, resource_id))
        raise StoreError(f"Invalid resource type: {resource_type}")

    @staticmethod
    def file_access(principal_id, file):
        if file is None:
            return AccessLevel.NONE
        if file.owner_id == principal_id:
            return AccessLevel.OWNER
        grants = Share.query.filter_by(file_id=file.id, sharee_id=principal_id).all()
        return max((SHARE_LEVELS.get(g.permission, AccessLevel.NONE) for g in grants),
                   default=AccessLevel.NONE)

    @staticmethod
    def folder_access(principal_id, folder):
        if folder is not None and folder.owner_id == principal_id:
            return AccessLevel.OWNER
        return AccessLevel.NONE

    @staticmethod
    def require_file_access(principal_id, file_id, minimum=AccessLevel.READ):
        """Return the file if the principal has at least ``minimum`` on it.

        Insufficient access is reported exactly like a missing file.
        """
        file = db.session.get(File, file_id)
        if AccessService.file_access(principal_id, file) < minimum:
            raise StoreError(FILE_NOT_FOUND)
        return file

    @staticmethod
    def require_folder_owner(principal_id, folder_id, message=FOLDER_NOT_FOUND):
        folder = db.session.get(Folder, folder_id)
        if AccessService.folder_access(principal_id, folder) < AccessLevel.OWNER:
            raise StoreError(message)
        return folder
