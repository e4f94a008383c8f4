"""
realtime_env.py

Real-time pacing for the simulation's worker threads.
Allows controlling simulation speed for debugging and visualization purposes.
"""

import threading
import time


class RealtimeClock:
    """
    Paces worker loops in real time and lets a stop request cut a wait short.

    All workers sleep through the same clock, so a single interrupt() wakes
    every one of them at once.

    Args:
        speed_factor (float): Speed multiplier for simulation
            - 1.0 = real-time (a 0.5 s tick lasts 0.5 real seconds)
            - 0.5 = half speed (a 0.5 s tick lasts 1 real second)
            - 2.0 = double speed (a 0.5 s tick lasts 0.25 real seconds)

    Example:
        >>> clock = RealtimeClock(speed_factor=2.0)
        >>> clock.sleep(0.5)  # returns after ~0.25 s, or at once after interrupt()
        False
    """

    def __init__(self, speed_factor=1.0):
        if speed_factor <= 0:
            raise ValueError("speed_factor must be positive")
        self.speed_factor = speed_factor
        self._stop_event = threading.Event()
        self.real_start_time = time.time()

    def sleep(self, sim_seconds):
        """
        Wait for `sim_seconds` of simulated time.

        Returns:
            bool: True if the wait was cut short by interrupt()
        """
        return self._stop_event.wait(sim_seconds / self.speed_factor)

    def interrupt(self):
        """Wake every sleeper; later sleeps return immediately until reset()"""
        self._stop_event.set()

    def is_interrupted(self):
        return self._stop_event.is_set()

    def reset(self):
        """Re-arm the clock for a new run."""
        self._stop_event.clear()
        self.real_start_time = time.time()

    def elapsed(self):
        """Real seconds since the clock was created or last reset"""
        return time.time() - self.real_start_time

    def set_speed(self, speed_factor):
        """
        Change simulation speed during runtime.

        Args:
            speed_factor (float): New speed multiplier, must be positive
        """
        if speed_factor <= 0:
            raise ValueError("speed_factor must be positive")
        self.speed_factor = speed_factor

    def get_speed(self):
        return self.speed_factor
