import os
import tempfile
import logging
from contextlib import contextmanager

logger = logging.getLogger(__name__)


@contextmanager
def staged_upload(file_storage, tmp_dir):
    """Save an uploaded file to a private temp file and remove it on exit.

    Yields the path of the staged copy. The file is deleted whether the body
    of the ``with`` block returns or raises.
    """
    os.makedirs(tmp_dir, exist_ok=True)
    fd, path = tempfile.mkstemp(prefix="upload-", dir=tmp_dir)
    try:
        with os.fdopen(fd, "wb") as out:
            file_storage.save(out)
        yield path
    finally:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        logger.debug("Removed staged upload %s", path)


def read_staged(path) -> bytes:
    with open(path, "rb") as f:
        return f.read()
