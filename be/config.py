import os
from datetime import timedelta


def _flag(name, default):
    return os.getenv(name, default).lower() in ('1', 'true', 'yes')


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'super-secret')
    JWT_SECRET_KEY = os.getenv('JWT_SECRET', 'jwt-secret')
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=int(os.getenv('JWT_EXPIRATION_HOURS', '24')))

    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///kdrive.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # 入库压缩/出库解压
    ENABLE_COMPRESSION = _flag('ENABLE_COMPRESSION', 'true')

    # uploads are staged here for the duration of one request
    UPLOAD_TMP_DIR = os.getenv('UPLOAD_TMP_DIR', './tmp_uploads')
    MAX_CONTENT_LENGTH = int(os.getenv('MAX_UPLOAD_MB', '100')) * 1024 * 1024

    MIN_PASSWORD_LENGTH = int(os.getenv('MIN_PASSWORD_LENGTH', '6'))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
