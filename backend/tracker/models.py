from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Player:
    id: int
    name: str
    stats: Dict[str, int] = field(default_factory=dict)
    active_since: Optional[float] = None  # epoch ms, set while on court
    minutes: float = 0.0

    @property
    def is_active(self) -> bool:
        return self.active_since is not None

    def snapshot(self) -> 'PlayerSnapshot':
        return PlayerSnapshot(
            id=self.id,
            name=self.name,
            stats=dict(self.stats),
            is_active=self.is_active,
            minutes=self.minutes,
        )


@dataclass(frozen=True)
class PlayerSnapshot:
    """Read-only view of a player handed to the presentation layer."""
    id: int
    name: str
    stats: Dict[str, int]
    is_active: bool
    minutes: float

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'stats': dict(self.stats),
            'is_active': self.is_active,
            'minutes': self.minutes,
        }


@dataclass(frozen=True)
class LogEntry:
    player: str
    stat: str
    time: str
    timestamp: float

    def to_dict(self):
        return {
            'player': self.player,
            'stat': self.stat,
            'time': self.time,
            'timestamp': self.timestamp,
        }


@dataclass(frozen=True)
class GameState:
    players: Tuple[Player, ...] = ()
    log: Tuple[LogEntry, ...] = ()  # newest first
    next_player_id: int = 1

    def snapshot(self) -> Tuple[PlayerSnapshot, ...]:
        return tuple(p.snapshot() for p in self.players)

    def to_dict(self):
        return {
            'players': [p.to_dict() for p in self.snapshot()],
            'log': [e.to_dict() for e in self.log],
        }


RosterSnapshot = Tuple[PlayerSnapshot, ...]
