"""
File Log Sink

Appends log messages to a text file.
"""

import threading
from datetime import datetime
from pathlib import Path
from typing import Union

from simulator.interfaces.log_sink import ILogSink, LogLevel


class FileLogSink(ILogSink):
    """
    File log sink

    Each message becomes one line, flushed immediately:
        2024-05-01T12:00:01.250000 [WARN] message
    """

    def __init__(self, file_path: Union[str, Path], min_level: LogLevel = LogLevel.DEBUG):
        """
        Open (append mode) the log file, creating parent directories.

        Args:
            file_path: Path of the log file
            min_level: Messages below this level are dropped

        Raises:
            OSError: If the file cannot be opened
        """
        super().__init__(min_level)
        self.file_path = Path(file_path)
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.file_path, 'a', encoding='utf-8')
        self._write_lock = threading.Lock()

    def _write(self, level: LogLevel, message: str):
        line = f"{datetime.now().isoformat()} [{level}] {message}\n"
        with self._write_lock:
            if self._file.closed:
                return
            self._file.write(line)
            self._file.flush()

    def close(self):
        with self._write_lock:
            if not self._file.closed:
                self._file.close()
