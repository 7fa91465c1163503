import logging
import threading
from functools import wraps
from typing import Optional, Tuple

from tracker.models import GameState, LogEntry, RosterSnapshot
from . import event_log, ledger, roster, substitution
from .clock import Clock, TimeFormatter, format_clock_time, system_clock
from .rules import is_recordable

logger = logging.getLogger(__name__)


def _serialized(method):
    # Whole read-modify-write of the state runs under the engine lock.
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return wrapper


class GameEngine:
    """Single-session scorekeeper.

    Holds the current ``GameState`` and swaps it for a new one on every
    operation. Operations address players by display index; an index outside
    the roster is a no-op. Each call returns the roster snapshot after the
    operation.
    """

    def __init__(self, clock: Clock = system_clock, time_format: TimeFormatter = format_clock_time,
                 initial_players: int = 0):
        self.clock = clock
        self.time_format = time_format
        self.initial_players = initial_players
        self._lock = threading.Lock()
        self._state = self._fresh_state()

    def _fresh_state(self) -> GameState:
        state = GameState()
        for _ in range(self.initial_players):
            state = roster.add_player(state)
        return state

    @property
    def state(self) -> GameState:
        return self._state

    def snapshot(self) -> RosterSnapshot:
        return self._state.snapshot()

    def get_log(self) -> Tuple[LogEntry, ...]:
        return self._state.log

    def index_of(self, player_id: int) -> Optional[int]:
        return roster.index_of(self._state, player_id)

    @_serialized
    def reset(self) -> RosterSnapshot:
        self._state = self._fresh_state()
        logger.info(f"[reset] players={len(self._state.players)}")
        return self.snapshot()

    # ---- Roster ----

    @_serialized
    def add_player(self) -> RosterSnapshot:
        self._state = roster.add_player(self._state)
        logger.info(f"[add] player={self._state.players[-1].name!r} count={len(self._state.players)}")
        return self.snapshot()

    @_serialized
    def remove_player(self, index: int) -> RosterSnapshot:
        self._state = roster.remove_player(self._state, index)
        return self.snapshot()

    @_serialized
    def rename_player(self, index: int, name: str) -> RosterSnapshot:
        self._state = roster.rename_player(self._state, index, name)
        return self.snapshot()

    # ---- Stats ----

    @_serialized
    def record_stat(self, index: int, stat_kind: str) -> RosterSnapshot:
        player = roster.player_at(self._state, index)
        if player is None or not is_recordable(stat_kind):
            logger.debug(f"[stat-skip] index={index} stat={stat_kind!r}")
            return self.snapshot()
        updated = ledger.record_stat(player, stat_kind)
        now = self.clock()
        state = roster.replace_player(self._state, index, updated)
        self._state = event_log.prepend(state, event_log.make_entry(updated.name, stat_kind, now, self.time_format))
        logger.info(f"[stat] player={updated.name!r} stat={stat_kind!r}")
        return self.snapshot()

    # ---- Substitutions ----

    @_serialized
    def sub_in(self, index: int) -> RosterSnapshot:
        player = roster.player_at(self._state, index)
        if player is None:
            return self.snapshot()
        now = self.clock()
        updated = substitution.sub_in(player, now)
        if updated is None:
            logger.debug(f"[sub-in-skip] player={player.name!r} already active")
            return self.snapshot()
        state = roster.replace_player(self._state, index, updated)
        self._state = event_log.prepend(state, event_log.make_entry(updated.name, event_log.SUB_IN, now, self.time_format))
        logger.info(f"[sub-in] player={updated.name!r}")
        return self.snapshot()

    @_serialized
    def sub_out(self, index: int) -> RosterSnapshot:
        player = roster.player_at(self._state, index)
        if player is None:
            return self.snapshot()
        now = self.clock()
        result = substitution.sub_out(player, now)
        if result is None:
            logger.debug(f"[sub-out-skip] player={player.name!r} not active")
            return self.snapshot()
        updated, elapsed = result
        state = roster.replace_player(self._state, index, updated)
        label = event_log.sub_out_label(elapsed)
        self._state = event_log.prepend(state, event_log.make_entry(updated.name, label, now, self.time_format))
        logger.info(f"[sub-out] player={updated.name!r} elapsed={elapsed:.3f}min total={updated.minutes:.3f}min")
        return self.snapshot()
