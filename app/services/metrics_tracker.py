"""Track recent metric samples for real-time visualization."""

from collections import deque
from typing import Deque
import threading

# Thread-safe storage for recent samples
_generation_latency_samples: Deque[float] = deque(maxlen=100)
_lock = threading.Lock()


def add_generation_latency_sample(latency: float) -> None:
    """
    Add a generation latency sample.

    Args:
        latency: Latency time in seconds.
    """
    with _lock:
        _generation_latency_samples.append(latency)


def get_generation_latency_samples(count: int = 10) -> list[float]:
    """
    Get recent generation latency samples.

    Args:
        count: Number of samples to return.

    Returns:
        List of latency values in seconds.
    """
    with _lock:
        return list(_generation_latency_samples)[-count:]
