from flask import Blueprint
from flask_jwt_extended import jwt_required
from services.user_service import UserService
from common.auth import current_user_id
from common.errors import InvalidInput, NotFoundOrForbidden
from common.params import json_body
from common.response import success, fail

auth_bp = Blueprint('auth', __name__)


def _credentials():
    data = json_body()
    email, password = data.get('email'), data.get('password')
    if not isinstance(email, str) or not email.strip() or not isinstance(password, str) or not password:
        raise InvalidInput("Email and password are required")
    return email, password


@auth_bp.route('/register', methods=['POST'])
def register():
    email, password = _credentials()
    user = UserService.register(email, password)
    return success({"userId": user.id}, 201)


@auth_bp.route('/login', methods=['POST'])
def login():
    email, password = _credentials()
    user = UserService.login(email, password)
    if not user:
        return fail("Invalid email or password", 401)
    return success({"token": UserService.issue_token(user)})


@auth_bp.route('/profile', methods=['GET'])
@jwt_required()
def profile():
    info = UserService.get_profile(current_user_id())
    if not info:
        raise NotFoundOrForbidden("User not found")
    return success(info)


@auth_bp.route('/change_password', methods=['POST'])
@jwt_required()
def change_password():
    data = json_body()
    old_password, new_password = data.get('oldPassword'), data.get('newPassword')
    if not isinstance(old_password, str) or not isinstance(new_password, str):
        raise InvalidInput("oldPassword and newPassword are required")
    UserService.change_password(current_user_id(), old_password, new_password)
    return success({"message": "Password changed"})
