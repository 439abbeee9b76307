import logging

from sqlalchemy import or_

from common.db import db
from common.errors import StoreError
from models.share import Share, PERMISSIONS
from models.user import User
from services.access_service import AccessService, AccessLevel, SHARE_LEVELS

logger = logging.getLogger(__name__)


class ShareService:
    @staticmethod
    def share_file(file_id, sharer_id, sharee_emails, permission):
        """Grant ``permission`` on a file to every user in ``sharee_emails``.

        All grants are written in one transaction; an unknown email aborts the
        whole request. An existing grant is upgraded but never downgraded.
        Returns the share ids in request order.
        """
        if permission not in PERMISSIONS:
            raise StoreError('Invalid permission, must be "read" or "write"')
        if not sharee_emails:
            raise StoreError("Invalid email list")

        try:
            AccessService.require_file_access(sharer_id, file_id, AccessLevel.OWNER)
            share_ids = []
            for raw_email in sharee_emails:
                email = raw_email.strip().lower()
                sharee = User.query.filter_by(email=email).first()
                if sharee is None:
                    raise StoreError(f"User not found: {email}")
                if sharee.id == sharer_id:
                    raise StoreError("Cannot share a file with yourself")

                share = Share.query.filter_by(file_id=file_id, sharee_id=sharee.id).first()
                if share is None:
                    share = Share(file_id=file_id, sharer_id=sharer_id,
                                  sharee_id=sharee.id, permission=permission)
                    db.session.add(share)
                elif SHARE_LEVELS[permission] > SHARE_LEVELS[share.permission]:
                    share.permission = permission
                db.session.flush()
                share_ids.append(share.id)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        logger.info("File %s shared by user %s with %d user(s) (%s)",
                    file_id, sharer_id, len(share_ids), permission)
        return share_ids

    @staticmethod
    def list_shares(user_id):
        shares = (Share.query
                  .filter(or_(Share.sharer_id == user_id, Share.sharee_id == user_id))
                  .order_by(Share.created_at.desc(), Share.id.desc())
                  .all())
        return [s.to_dict(viewer_id=user_id) for s in shares]
