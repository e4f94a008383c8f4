import queue
import threading
from typing import Any, Optional

# Placed on a topic to wake a blocked consumer without carrying a message
_WAKE_UP = object()


class MessageBroker:
    """
    Mediates communication between the caller's thread and the worker threads.
    Each topic is an unbounded, self-synchronizing FIFO (queue.Queue), so
    producers and consumers need no external lock.
    """
    def __init__(self):
        self.topics = {}  # Dictionary to hold a Queue for each topic
        self._topics_lock = threading.Lock()

    def get_pipe(self, topic: str) -> queue.Queue:
        """
        Get or create the communication pipe (Queue) for the specified topic
        """
        with self._topics_lock:
            if topic not in self.topics:
                self.topics[topic] = queue.Queue()
            return self.topics[topic]

    def put(self, topic: str, message: Any):
        """
        Publish (put) a message to the specified topic
        """
        self.get_pipe(topic).put(message)

    def get(self, topic: str, timeout: Optional[float] = None) -> Optional[Any]:
        """
        Wait to receive (get) a message from the specified topic

        Args:
            topic: Topic name
            timeout: Seconds to wait at most (None blocks until a message arrives)

        Returns:
            The message, or None if the wait timed out or was woken by interrupt()
        """
        try:
            message = self.get_pipe(topic).get(timeout=timeout)
        except queue.Empty:
            return None
        if message is _WAKE_UP:
            return None
        return message

    def interrupt(self, topic: str):
        """Wake one consumer blocked on the topic"""
        self.get_pipe(topic).put(_WAKE_UP)

    def is_empty(self, topic: str) -> bool:
        """Whether the topic holds no real messages (wake-up markers are ignored)"""
        pipe = self.get_pipe(topic)
        with pipe.mutex:
            return all(item is _WAKE_UP for item in pipe.queue)

    def pending(self, topic: str) -> int:
        """Number of real messages waiting on the topic"""
        pipe = self.get_pipe(topic)
        with pipe.mutex:
            return sum(1 for item in pipe.queue if item is not _WAKE_UP)

    def clear(self, topic: str):
        """Drop everything waiting on the topic"""
        pipe = self.get_pipe(topic)
        with pipe.mutex:
            pipe.queue.clear()
