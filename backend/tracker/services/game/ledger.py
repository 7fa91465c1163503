from dataclasses import replace
from typing import Dict, Mapping

from tracker.models import Player
from .rules import secondary_increments


def apply_stat(stats: Mapping[str, int], stat_kind: str) -> Dict[str, int]:
    """Return a new ledger with ``stat_kind`` and its derived counters bumped.

    Keys are created at 0 on first occurrence, so insertion order follows
    the order stats were first recorded.
    """
    updated = dict(stats)
    updated[stat_kind] = updated.get(stat_kind, 0) + 1
    for inc in secondary_increments(stat_kind):
        updated[inc.stat] = updated.get(inc.stat, 0) + inc.amount
    return updated


def record_stat(player: Player, stat_kind: str) -> Player:
    return replace(player, stats=apply_stat(player.stats, stat_kind))
