from dataclasses import replace

from tracker.models import GameState, LogEntry

SUB_IN = 'Sub In'


def sub_out_label(elapsed_minutes: float) -> str:
    return f"Sub Out (+{elapsed_minutes:.1f} min)"


def make_entry(player_name: str, stat: str, timestamp: float, time_format) -> LogEntry:
    return LogEntry(player=player_name, stat=stat, time=time_format(timestamp), timestamp=timestamp)


def prepend(state: GameState, entry: LogEntry) -> GameState:
    """Add ``entry`` at the head of the log; existing entries are untouched."""
    return replace(state, log=(entry,) + state.log)
