from flask import Blueprint
from flask_jwt_extended import jwt_required
from services.folder_service import FolderService
from services.file_service import FileService
from common.auth import current_user_id
from common.params import json_body, parse_id, require_text
from common.response import success

folder_bp = Blueprint('folder', __name__)


@folder_bp.route('/folders', methods=['POST'])
@jwt_required()
def create_folder():
    data = json_body()
    name = require_text(data.get('name'), "Folder name")
    parent_id = data.get('parentId')
    if parent_id is not None:
        parent_id = parse_id(parent_id, "parent folder ID")
    folder = FolderService.create_folder(name, parent_id, current_user_id())
    return success({"id": folder.id}, 201)


@folder_bp.route('/folders', methods=['GET'])
@jwt_required()
def list_root_folders():
    folders = FolderService.get_root_folders(current_user_id())
    return success({"folders": [f.to_summary() for f in folders]})


@folder_bp.route('/folders/<folder_id>', methods=['GET'])
@jwt_required()
def get_folder_contents(folder_id):
    folder_id = parse_id(folder_id, "folder ID")
    return success(FolderService.get_folder_contents(folder_id, current_user_id()))


@folder_bp.route('/folders/<folder_id>/files', methods=['POST'])
@jwt_required()
def create_file(folder_id):
    folder_id = parse_id(folder_id, "folder ID")
    data = json_body()
    name = require_text(data.get('name'), "File name")
    mime_type = require_text(data.get('type'), "File type")
    record = FileService.create_file(name, folder_id, current_user_id(), mime_type)
    return success({"id": record.id}, 201)
