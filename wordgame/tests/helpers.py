"""Shared builders for the test suites"""

from dataclasses import replace
from typing import List

from ..bag import TileBag
from ..board import Board
from ..types import Direction, PendingPlacement, Tile

DICTIONARY = {
    'CAT': 1, 'CATS': 1, 'AT': 1, 'TA': 1, 'AS': 1, 'SAT': 1,
    'EAT': 1, 'TEA': 1, 'NET': 1, 'TEN': 1, 'ABCDEFG': 1,
}


class ZeroRandom:
    """Random source that always answers 0"""

    def randrange(self, stop: int) -> int:
        return 0


def placements_for(row: int, col: int, direction: Direction, word: str) -> List[PendingPlacement]:
    dr, dc = direction.value
    return [
        PendingPlacement(row + i * dr, col + i * dc, Tile.from_letter(letter))
        for i, letter in enumerate(word)
    ]


def board_with(*words, owner: int = 0) -> Board:
    """Board holding committed words given as (row, col, direction, text)"""
    board = Board.empty()
    for row, col, direction, text in words:
        board = board.with_placements(placements_for(row, col, direction, text), owner)
    return board


def rig_rack(session, letters: str):
    """Give the active player exactly `letters` ('?' for a blank), swapping tiles with the bag"""
    pool = list(session.bag.tiles) + list(session.active_player.rack)
    rack = []
    for letter in letters:
        for i, tile in enumerate(pool):
            if (letter == '?' and tile.is_blank) or (not tile.is_blank and tile.letter == letter):
                rack.append(pool.pop(i))
                break
        else:
            raise AssertionError(f"No '{letter}' left to rig")
    player = replace(session.active_player, rack=tuple(rack))
    players = session.players[:session.active_index] + (player,) + session.players[session.active_index + 1:]
    return replace(session, players=players, bag=TileBag(tuple(pool)))


def play_word(session, row: int, col: int, direction: Direction, word: str):
    """Select a square, set the direction and type a word (letters must be on the rack)"""
    session = session.select_cell(row, col).session
    if session.direction != direction:
        session = session.select_cell(row, col).session
    for letter in word:
        result = session.type_letter(letter)
        assert result.valid, result.message
        session = result.session
    return session
