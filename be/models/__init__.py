from models.user import User
from models.folder import Folder
from models.file import File
from models.file_version import FileVersion
from models.share import Share, PERMISSIONS

__all__ = ['User', 'Folder', 'File', 'FileVersion', 'Share', 'PERMISSIONS']
