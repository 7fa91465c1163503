from tracker.services.game.rules import POINTS, SHOOTING_PAIRS, STAT_TYPES

_SHOOTING_STATS = {s for _, made, attempt in SHOOTING_PAIRS for s in (made, attempt)} | {POINTS}


def stat_line(player):
    """Box-score line for a PlayerSnapshot, with absent counters shown as 0."""
    stats = player.stats
    line = {}
    for label, made, attempt in SHOOTING_PAIRS:
        line[label.lower()] = f"{stats.get(made, 0)}/{stats.get(attempt, 0)}"
    line['points'] = stats.get(POINTS, 0)
    line['minutes'] = f"{player.minutes:.1f}"
    line['other'] = {k: v for k, v in stats.items() if k not in _SHOOTING_STATS}
    return line


def log_line(entry) -> str:
    return f"{entry.time} - {entry.player}: {entry.stat}"


def render_players(snapshot):
    players = []
    for p in snapshot:
        pd = p.to_dict()
        pd['box_score'] = stat_line(p)
        players.append(pd)
    return players


def render_log(entries):
    rendered = []
    for e in entries:
        ed = e.to_dict()
        ed['line'] = log_line(e)
        rendered.append(ed)
    return rendered


def render_state(engine):
    return {
        'players': render_players(engine.snapshot()),
        'log': render_log(engine.get_log()),
        'stat_types': list(STAT_TYPES),
    }
