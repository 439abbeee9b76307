import logging
import traceback

from flask import Flask, jsonify
from flask_jwt_extended import JWTManager
from werkzeug.exceptions import HTTPException

from common.db import db
from common.errors import ApiError, StoreError, remap_store_error
from routes.auth_routes import auth_bp
from routes.folder_routes import folder_bp
from routes.file_routes import file_bp
from routes.share_routes import share_bp
from models.user import User

logger = logging.getLogger(__name__)


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object('config.Config')
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(app)
    register_jwt(JWTManager(app))
    register_error_handlers(app)

    app.register_blueprint(auth_bp, url_prefix='/api')
    app.register_blueprint(folder_bp, url_prefix='/api')
    app.register_blueprint(file_bp, url_prefix='/api')
    app.register_blueprint(share_bp, url_prefix='/api')

    with app.app_context():
        db.create_all()

    return app


def _unauthenticated(message):
    return jsonify({"message": message}), 401


def register_jwt(jwt):
    @jwt.user_lookup_loader
    def load_user(jwt_header, jwt_data):
        try:
            return db.session.get(User, int(jwt_data["sub"]))
        except (TypeError, ValueError):
            return None

    @jwt.user_lookup_error_loader
    def user_lookup_error(jwt_header, jwt_data):
        return _unauthenticated("Invalid or expired token")

    @jwt.unauthorized_loader
    def missing_token(reason):
        return _unauthenticated("Authentication required")

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return _unauthenticated("Invalid or expired token")

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return _unauthenticated("Invalid or expired token")


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(err):
        return jsonify({"message": err.message}), err.status_code

    @app.errorhandler(StoreError)
    def handle_store_error(err):
        mapped = remap_store_error(err)
        if mapped is None:
            return handle_unexpected(err)
        return handle_api_error(mapped)

    @app.errorhandler(HTTPException)
    def handle_http_error(err):
        return jsonify({"message": err.description}), err.code

    @app.errorhandler(Exception)
    def handle_unexpected(err):
        logger.exception("Unhandled error: %s", err)
        db.session.rollback()
        body = {"message": "Internal server error"}
        if app.debug:
            body["stack"] = traceback.format_exception(type(err), err, err.__traceback__)
        return jsonify(body), 500


if __name__ == "__main__":
    app = create_app()
    app.run(host='0.0.0.0', port=5000, debug=True)
