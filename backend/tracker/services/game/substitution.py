from dataclasses import replace
from typing import Optional, Tuple

from tracker.models import Player

MS_PER_MINUTE = 60000.0


def sub_in(player: Player, now: float) -> Optional[Player]:
    """Start a stint. Returns None when the player is already on court."""
    if player.active_since is not None:
        return None
    return replace(player, active_since=now)


def sub_out(player: Player, now: float) -> Optional[Tuple[Player, float]]:
    """Close the open stint and fold it into cumulative minutes.

    Returns ``(player, elapsed_minutes)``, or None when the player is not on
    court. A clock that runs backwards yields negative minutes; they are not
    clamped.
    """
    if player.active_since is None:
        return None
    elapsed = (now - player.active_since) / MS_PER_MINUTE
    return replace(player, active_since=None, minutes=player.minutes + elapsed), elapsed
