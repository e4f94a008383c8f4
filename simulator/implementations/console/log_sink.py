"""
Console Log Sink

Prints log messages to standard output.
"""

import threading
from datetime import datetime

from simulator.interfaces.log_sink import ILogSink, LogLevel


class ConsoleLogSink(ILogSink):
    """
    Console log sink

    Output format:
        12:00:01.250 [INFO] message

    Usage:
        sink = ConsoleLogSink(min_level=LogLevel.INFO)
    """

    def __init__(self, min_level: LogLevel = LogLevel.INFO, show_timestamp: bool = True):
        super().__init__(min_level)
        self.show_timestamp = show_timestamp
        # Keeps lines from different workers from interleaving
        self._print_lock = threading.Lock()

    def _write(self, level: LogLevel, message: str):
        if self.show_timestamp:
            timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
            line = f"{timestamp} [{level}] {message}"
        else:
            line = f"[{level}] {message}"
        with self._print_lock:
            print(line, flush=True)
