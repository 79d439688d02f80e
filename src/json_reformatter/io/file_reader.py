"""File reader for JSON input."""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Union
from ..types import ReformatError, ErrorType

ENCODING = "utf-8"


class FileReader:
    """Reads a whole file as UTF-8 text."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def read_text(self, path: Union[str, Path]) -> str:
        """
        Read the entire contents of a file.

        Args:
            path: File to read

        Returns:
            The file contents

        Raises:
            ReformatError: If the file is missing, unreadable or not UTF-8
        """
        file_path = Path(path)
        try:
            with open(file_path, 'r', encoding=ENCODING) as f:
                content = f.read()
        except OSError as e:
            raise ReformatError(
                f"Failed to read {file_path}: {e.strerror or e}",
                ErrorType.READ,
                context={"path": str(file_path), "errno": e.errno}
            ) from e
        except UnicodeDecodeError as e:
            raise ReformatError(
                f"Failed to read {file_path}: not valid UTF-8 ({e.reason} at byte {e.start})",
                ErrorType.READ,
                context={"path": str(file_path)}
            ) from e

        self.logger.debug(f"Read {len(content)} characters from {file_path}")
        return content

    async def read_text_async(self, path: Union[str, Path]) -> str:
        """Read a file without blocking the event loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.read_text, path)
