"""Game-state engine: stat ledger, substitution clock, roster and event log.

Pure domain logic with no Flask imports. HTTP routes and socket handlers
call into ``GameEngine`` and only render what it returns.
"""

from .engine import GameEngine
from .rules import STAT_TYPES, DERIVED_STAT_RULES

__all__ = ['GameEngine', 'STAT_TYPES', 'DERIVED_STAT_RULES']
