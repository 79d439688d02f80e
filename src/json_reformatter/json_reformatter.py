"""Main JSON Reformatter implementation."""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Union
from .types import ReformatResult, ReformatError
from .parser import JSONParser
from .io import FileReader, FileWriter
from .profiler import PerformanceProfiler

DEFAULT_TARGET = "messages.json"


class JSONReformatter:
    """
    Rewrites a JSON file in place with indented, human-readable layout.

    A run reads the file, parses it and writes the pretty-printed value
    back to the same path. The write only starts once the read has
    finished and the text has parsed successfully.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_TARGET,
                 logger: Optional[logging.Logger] = None,
                 enable_profiling: bool = True):
        """
        Initialize the JSON Reformatter.

        Args:
            path: File to reformat (defaults to messages.json)
            logger: Optional logger instance
            enable_profiling: Record timing and memory metrics for each run
        """
        self.path = Path(path)
        self.logger = logger or logging.getLogger(__name__)

        self.parser = JSONParser(self.logger)
        self.file_reader = FileReader(self.logger)
        self.file_writer = FileWriter(self.logger)
        self.profiler = PerformanceProfiler(self.logger) if enable_profiling else None

    async def reformat(self) -> ReformatResult:
        """
        Reformat the target file.

        Returns:
            ReformatResult describing the run

        Raises:
            ReformatError: If the file cannot be read, parsed or written
        """
        self.logger.info(f"Reformatting {self.path}")
        if self.profiler:
            self.profiler.start_profiling("reformat_json")

        try:
            json_string = await self.file_reader.read_text_async(self.path)
            data = self.parser.parse(json_string, source=str(self.path))
            output = self.parser.serialize(data)
            if self.profiler:
                self.profiler.sample_performance()

            output_size = await self.file_writer.write_text_async(self.path, output)
            input_size = len(json_string.encode('utf-8'))
            if self.profiler:
                self.profiler.stop_profiling(input_size=input_size, output_size=output_size)
        except ReformatError as e:
            self.logger.error(f"Reformat failed ({e.error_type.value}): {e}")
            raise
        finally:
            if self.profiler:
                self.profiler.cancel_profiling()

        self.logger.info(f"Reformatted {self.path}: {input_size}B -> {output_size}B")
        return ReformatResult(
            path=str(self.path),
            input_size=input_size,
            output_size=output_size,
            changed=output != json_string
        )

    def reformat_sync(self) -> ReformatResult:
        """Run :meth:`reformat` to completion on a new event loop."""
        return asyncio.run(self.reformat())
