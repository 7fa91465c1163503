from dataclasses import replace
from typing import Optional

from tracker.models import GameState, Player


def player_at(state: GameState, index: int) -> Optional[Player]:
    if isinstance(index, bool) or not isinstance(index, int) or index < 0 or index >= len(state.players):
        return None
    return state.players[index]


def index_of(state: GameState, player_id: int) -> Optional[int]:
    for i, p in enumerate(state.players):
        if p.id == player_id:
            return i
    return None


def default_name(state: GameState) -> str:
    # Derived from roster length, so it can repeat a removed player's name.
    return f"Player {len(state.players) + 1}"


def add_player(state: GameState) -> GameState:
    player = Player(id=state.next_player_id, name=default_name(state))
    return replace(
        state,
        players=state.players + (player,),
        next_player_id=state.next_player_id + 1,
    )


def remove_player(state: GameState, index: int) -> GameState:
    if player_at(state, index) is None:
        return state
    return replace(state, players=state.players[:index] + state.players[index + 1:])


def replace_player(state: GameState, index: int, player: Player) -> GameState:
    players = list(state.players)
    players[index] = player
    return replace(state, players=tuple(players))


def rename_player(state: GameState, index: int, name: str) -> GameState:
    player = player_at(state, index)
    if player is None:
        return state
    return replace_player(state, index, replace(player, name=name))
