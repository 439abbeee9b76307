from flask import Blueprint
from flask_jwt_extended import jwt_required
from services.share_service import ShareService
from common.auth import current_user_id
from common.errors import InvalidInput
from common.params import json_body, parse_id
from common.response import success

share_bp = Blueprint('share', __name__)


@share_bp.route('/shares', methods=['POST'])
@jwt_required()
def share_file():
    data = json_body()
    file_id = parse_id(data.get('fileId'), "file ID")
    emails = data.get('shareeEmails')
    if (not isinstance(emails, list) or not emails
            or not all(isinstance(e, str) and e.strip() for e in emails)):
        raise InvalidInput("Invalid email list")
    share_ids = ShareService.share_file(file_id, current_user_id(), emails, data.get('permission'))
    return success({"shareId": share_ids[0], "shareIds": share_ids}, 201)


@share_bp.route('/shares', methods=['GET'])
@jwt_required()
def list_shares():
    return success({"shares": ShareService.list_shares(current_user_id())})
