"""File writer utilities for reformatted JSON output."""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Union
from ..types import ReformatError, ErrorType
from .file_reader import ENCODING


class FileWriter:
    """
    File writer that replaces a file's contents in full.

    The file is truncated and rewritten in place. There is no temporary
    file or rename, so a failure part way through can leave the target
    truncated.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the file writer.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def write_text(self, path: Union[str, Path], text: str) -> int:
        """
        Write text to a file, replacing its previous contents.

        Args:
            path: File to write
            text: Text to write

        Returns:
            Number of bytes written

        Raises:
            ReformatError: If the file cannot be opened or written
        """
        file_path = Path(path)
        try:
            data = text.encode(ENCODING)
        except UnicodeEncodeError as e:
            raise ReformatError(
                f"Failed to write {file_path}: text is not encodable as UTF-8 ({e.reason})",
                ErrorType.WRITE,
                context={"path": str(file_path)}
            ) from e

        try:
            with open(file_path, 'wb') as f:
                f.write(data)
        except OSError as e:
            raise ReformatError(
                f"Failed to write {file_path}: {e.strerror or e}",
                ErrorType.WRITE,
                context={"path": str(file_path), "errno": e.errno}
            ) from e

        self.logger.debug(f"Wrote {len(data)} bytes to {file_path}")
        return len(data)

    async def write_text_async(self, path: Union[str, Path], text: str) -> int:
        """Write a file without blocking the event loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.write_text, path, text)
