import time
from datetime import datetime
from typing import Callable

# A clock returns the current instant as epoch milliseconds.
Clock = Callable[[], float]
TimeFormatter = Callable[[float], str]

DEFAULT_TIME_FORMAT = '%I:%M:%S %p'


def system_clock() -> float:
    return time.time() * 1000.0


def format_clock_time(timestamp_ms: float, fmt: str = DEFAULT_TIME_FORMAT) -> str:
    """Render an epoch-ms reading as local wall-clock time (e.g. ``7:45:02 PM``).

    A 12-hour ``%I`` at the start of ``fmt`` loses its leading zero.
    """
    text = datetime.fromtimestamp(timestamp_ms / 1000.0).strftime(fmt)
    if fmt.startswith('%I') and text.startswith('0'):
        text = text[1:]
    return text


def time_formatter(fmt: str = DEFAULT_TIME_FORMAT) -> TimeFormatter:
    def _format(timestamp_ms: float) -> str:
        return format_clock_time(timestamp_ms, fmt)
    return _format
