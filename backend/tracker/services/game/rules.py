"""Scoring rules for recorded stats.

``DERIVED_STAT_RULES`` is the only place that knows which counters a
"made" shot also bumps. Nothing else writes Points or the attempt counters.
"""

from collections import namedtuple
from types import MappingProxyType

SecondaryIncrement = namedtuple('SecondaryIncrement', ['stat', 'amount'])

POINTS = 'Points'

STAT_TYPES = (
    'FG Attempt',
    'FG Made',
    '3PT Attempt',
    '3PT Made',
    'FT Attempt',
    'FT Made',
    'Rebound',
    'Assist',
    'Steal',
    'Block',
    'Foul',
)

# (label, made, attempt) for each shot type
SHOOTING_PAIRS = (
    ('FG', 'FG Made', 'FG Attempt'),
    ('3PT', '3PT Made', '3PT Attempt'),
    ('FT', 'FT Made', 'FT Attempt'),
)

DERIVED_STAT_RULES = MappingProxyType({
    'FG Made': (SecondaryIncrement('FG Attempt', 1), SecondaryIncrement(POINTS, 2)),
    '3PT Made': (SecondaryIncrement('3PT Attempt', 1), SecondaryIncrement(POINTS, 3)),
    'FT Made': (SecondaryIncrement('FT Attempt', 1), SecondaryIncrement(POINTS, 1)),
})

# Counters that only ever move through DERIVED_STAT_RULES
RESERVED_STATS = frozenset({POINTS})


def secondary_increments(stat_kind):
    return DERIVED_STAT_RULES.get(stat_kind, ())


def is_recordable(stat_kind) -> bool:
    return stat_kind not in RESERVED_STATS
