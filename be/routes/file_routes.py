import io
from flask import Blueprint, current_app, request, send_file
from flask_jwt_extended import jwt_required
from services.file_service import FileService
from services.version_service import VersionService
from common.auth import current_user_id
from common.errors import InvalidInput
from common.params import parse_id
from common.response import success
from utils.staging import staged_upload, read_staged

file_bp = Blueprint('file', __name__)


def send_content(result):
    return send_file(
        io.BytesIO(result.content),
        mimetype=result.mime_type or 'application/octet-stream',
        as_attachment=True,
        download_name=result.file_name,
    )


@file_bp.route('/files/<file_id>/upload', methods=['POST'])
@jwt_required()
def upload_file(file_id):
    file_id = parse_id(file_id, "file ID")
    file_obj = request.files.get("content")
    if not file_obj:
        raise InvalidInput("No file provided in field 'content'")
    with staged_upload(file_obj, current_app.config["UPLOAD_TMP_DIR"]) as path:
        version = VersionService.create_version(file_id, read_staged(path), current_user_id())
    return success({"versionId": version.id, "versionNumber": version.version_number}, 201)


@file_bp.route('/files/<file_id>', methods=['GET'])
@jwt_required()
def get_file_metadata(file_id):
    file_id = parse_id(file_id, "file ID")
    return success(FileService.get_file_metadata(file_id, current_user_id()))


@file_bp.route('/files/<file_id>/content', methods=['GET'])
@jwt_required()
def download_file(file_id):
    file_id = parse_id(file_id, "file ID")
    return send_content(VersionService.get_latest(file_id, current_user_id()))


@file_bp.route('/files/<file_id>/versions', methods=['GET'])
@jwt_required()
def list_versions(file_id):
    file_id = parse_id(file_id, "file ID")
    versions = VersionService.list_versions(file_id, current_user_id())
    return success({"versions": [v.to_dict() for v in versions]})


@file_bp.route('/files/<file_id>/versions/<version_id>', methods=['GET'])
@jwt_required()
def get_version(file_id, version_id):
    file_id = parse_id(file_id, "file ID")
    version_id = parse_id(version_id, "version ID")
    return send_content(VersionService.get_version(file_id, version_id, current_user_id()))


@file_bp.route('/files/<file_id>/versions/<version_id>/restore', methods=['POST'])
@jwt_required()
def restore_version(file_id, version_id):
    file_id = parse_id(file_id, "file ID")
    version_id = parse_id(version_id, "version ID")
    return success(VersionService.restore_version(file_id, version_id, current_user_id()), 201)
