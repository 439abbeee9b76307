import logging

from email_validator import validate_email, EmailNotValidError
from flask import current_app
from flask_jwt_extended import create_access_token
from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash, check_password_hash

from common.db import db
from common.errors import StoreError
from models.user import User

logger = logging.getLogger(__name__)


def normalize_email(email):
    return (email or '').strip().lower()


class UserService:
    @staticmethod
    def register(email, password):
        try:
            email = validate_email(normalize_email(email), check_deliverability=False).normalized.lower()
        except EmailNotValidError:
            raise StoreError("Invalid email address")
        UserService._check_password(password)
        if User.query.filter_by(email=email).first():
            raise StoreError("Email is already in use")

        user = User(email=email, password_hash=generate_password_hash(password))
        try:
            db.session.add(user)
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise StoreError("Email is already in use")
        except Exception:
            db.session.rollback()
            raise
        logger.info("User %s registered", user.id)
        return user

    @staticmethod
    def login(email, password):
        user = User.query.filter_by(email=normalize_email(email)).first()
        if not user or not check_password_hash(user.password_hash, password):
            logger.warning("Rejected login for %s", normalize_email(email))
            return None
        return user

    @staticmethod
    def issue_token(user):
        # identity must be a string for PyJWT's "sub" claim
        return create_access_token(identity=str(user.id), additional_claims={"email": user.email})

    @staticmethod
    def get_profile(user_id):
        user = db.session.get(User, user_id)
        if not user:
            return None
        return user.to_dict()

    @staticmethod
    def change_password(user_id, old_password, new_password):
        user = db.session.get(User, user_id)
        if not user or not check_password_hash(user.password_hash, old_password):
            raise StoreError("Invalid current password")
        UserService._check_password(new_password)
        user.password_hash = generate_password_hash(new_password)
        db.session.commit()
        return True

    @staticmethod
    def _check_password(password):
        minimum = current_app.config.get("MIN_PASSWORD_LENGTH", 6)
        if not isinstance(password, str) or len(password) < minimum:
            raise StoreError(f"Password must be at least {minimum} characters")
