"""
Local file storage for cover pictures.

Files are written under a single upload directory with a generated name;
the stored name is what the article keeps as its cover picture reference.
"""

import logging
import os
import shutil
import uuid
from typing import BinaryIO

from app.utils.errors import StorageError

logger = logging.getLogger(__name__)


class LocalFileStorage:
    def __init__(self, directory: str):
        self.directory = directory

    def save(self, stream: BinaryIO, extension: str) -> str:
        """Copy ``stream`` into the upload directory and return the stored filename."""
        filename = uuid.uuid4().hex
        if extension:
            filename = f"{filename}.{extension.lstrip('.')}"
        destination = os.path.join(self.directory, filename)
        try:
            os.makedirs(self.directory, exist_ok=True)
            with open(destination, "wb") as fh:
                shutil.copyfileobj(stream, fh)
        except OSError as e:
            logger.error("Failed to store upload %s: %s", destination, e)
            raise StorageError() from e
        return filename

    def delete(self, filename: str) -> None:
        """Remove a stored file; a file that is already gone is ignored."""
        try:
            os.remove(self.path_for(filename))
        except FileNotFoundError:
            pass

    def path_for(self, filename: str) -> str:
        return os.path.join(self.directory, filename)
