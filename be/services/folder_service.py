import logging

from common.db import db
from common.errors import StoreError
from models.folder import Folder
from services.access_service import AccessService

logger = logging.getLogger(__name__)

PARENT_NOT_FOUND = "Parent folder not found or access denied"


class FolderService:
    @staticmethod
    def create_folder(name, parent_id, owner_id):
        name = (name or '').strip()
        if not name:
            raise StoreError("Folder name must not be empty")

        try:
            if parent_id is not None:
                parent = AccessService.require_folder_owner(owner_id, parent_id, PARENT_NOT_FOUND)
                FolderService.ancestors(parent)
            folder = Folder(name=name, parent_id=parent_id, owner_id=owner_id)
            db.session.add(folder)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        logger.info("Folder %s created by user %s (parent=%s)", folder.id, owner_id, parent_id)
        return folder

    @staticmethod
    def ancestors(folder):
        """Walk up to the root, returning the chain from ``folder`` upward.

        Raises if the chain loops back on itself.
        """
        chain = []
        seen = set()
        node = folder
        while node is not None:
            if node.id in seen:
                raise StoreError(f"Folder hierarchy is invalid: cycle at folder {node.id}")
            seen.add(node.id)
            chain.append(node)
            node = node.parent
        return chain

    @staticmethod
    def get_root_folders(owner_id):
        return (Folder.query
                .filter_by(owner_id=owner_id, parent_id=None)
                .order_by(Folder.name, Folder.id)
                .all())

    @staticmethod
    def get_folder_contents(folder_id, owner_id):
        folder = AccessService.require_folder_owner(owner_id, folder_id)
        return {
            "id": folder.id,
            "name": folder.name,
            "parentId": folder.parent_id,
            "contents": {
                "folders": [child.to_summary() for child in folder.children],
                "files": [f.to_summary() for f in folder.files],
            },
        }
