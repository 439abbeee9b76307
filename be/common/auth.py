from flask_jwt_extended import get_jwt_identity


def current_user_id():
    # identity is stored as a string, see UserService.issue_token
    return int(get_jwt_identity())
