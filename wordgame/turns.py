"""Turn state machine.

AWAITING_READY -> PLACING -> AWAITING_READY (next player) | GAME_OVER

Every action takes a GameSession snapshot and returns an ActionResult
holding a new snapshot. A rejected action returns the snapshot it was
given, untouched, with the reason in `message`.
"""

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterable, Optional, Tuple

from .board import Board, in_bounds
from .constants import ALPHABET, ERROR_MESSAGES
from .scoring import ScoreBreakdown, Scorer
from .types import Direction, PendingPlacement, Phase, Player, PlayPreview, Tile
from .validator import MoveValidator

if TYPE_CHECKING:
    from .session import GameSession

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


@dataclass(frozen=True)
class ActionResult:
    """Outcome of an action"""
    session: 'GameSession'
    valid: bool = True
    message: Optional[str] = None
    breakdown: Optional[ScoreBreakdown] = None


def _reject(session: 'GameSession', key: str, **kwargs) -> ActionResult:
    message = ERROR_MESSAGES[key].format(**kwargs)
    logger.debug(f"Rejected action for {session.active_player.name}: {message}")
    return ActionResult(session=session, valid=False, message=message)


def _placing_guard(session: 'GameSession', allow_exchange_mode: bool = False) -> Optional[ActionResult]:
    if session.phase == Phase.GAME_OVER:
        return _reject(session, 'GAME_OVER')
    if session.phase != Phase.PLACING:
        return _reject(session, 'NOT_PLACING')
    if session.exchange_mode and not allow_exchange_mode:
        return _reject(session, 'EXCHANGE_MODE')
    return None


def _with_player(players: Tuple[Player, ...], index: int, player: Player) -> Tuple[Player, ...]:
    return players[:index] + (player,) + players[index + 1:]


def _is_letter(letter) -> bool:
    return isinstance(letter, str) and len(letter) == 1 and letter.upper() in ALPHABET


def _next_free_cell(board: Board, pending: Iterable[PendingPlacement], row: int, col: int,
                    direction: Direction) -> Optional[Position]:
    """First cell after (row, col) holding neither a committed nor a pending tile"""
    taken = {p.position for p in pending}
    dr, dc = direction.value
    row, col = row + dr, col + dc
    while in_bounds(row, col):
        if not board.is_occupied(row, col) and (row, col) not in taken:
            return (row, col)
        row, col = row + dr, col + dc
    return None


def _previous_open_cell(board: Board, row: int, col: int, direction: Direction) -> Optional[Position]:
    """First cell before (row, col) not holding a committed tile"""
    dr, dc = direction.value
    row, col = row - dr, col - dc
    while in_bounds(row, col):
        if not board.is_occupied(row, col):
            return (row, col)
        row, col = row - dr, col - dc
    return None


def _advance(session: 'GameSession') -> 'GameSession':
    """Hand the turn to the next player"""
    return replace(
        session,
        active_index=(session.active_index + 1) % len(session.players),
        phase=Phase.AWAITING_READY,
        pending=(),
        selected=None,
        direction=Direction.ACROSS,
        exchange_mode=False,
        exchange_selection=frozenset(),
        blank_request=None,
    )


def _settle(session: 'GameSession', winner: int) -> 'GameSession':
    """Endgame: the player who went out collects everyone else's rack values"""
    players = list(session.players)
    collected = 0
    for index, player in enumerate(players):
        if index == winner:
            continue
        remaining = player.rack_points
        collected += remaining
        players[index] = replace(player, score=player.score - remaining)
    players[winner] = replace(players[winner], score=players[winner].score + collected)

    logger.info(f"Game over: {players[winner].name} went out and collects {collected} points")
    return replace(
        session,
        players=tuple(players),
        phase=Phase.GAME_OVER,
        selected=None,
        exchange_mode=False,
        exchange_selection=frozenset(),
        blank_request=None,
    )


def _place(session: 'GameSession', rack_index: int, tile: Tile) -> ActionResult:
    """Move a rack tile onto the selected square and advance the cursor"""
    if session.selected is None:
        return _reject(session, 'NO_SELECTION')
    row, col = session.selected
    if session.board.is_occupied(row, col):
        return _reject(session, 'OCCUPIED', row=row, col=col)

    player = session.active_player
    rack = list(player.rack)
    del rack[rack_index]

    pending = [p for p in session.pending if p.position != (row, col)]
    # Replacing this turn's tile: the old one goes back to the rack
    for replaced in session.pending:
        if replaced.position == (row, col):
            rack.append(replaced.tile.as_rack_tile())
    pending.append(PendingPlacement(row, col, tile))

    return ActionResult(session=replace(
        session,
        players=_with_player(session.players, session.active_index, replace(player, rack=tuple(rack))),
        pending=tuple(pending),
        selected=_next_free_cell(session.board, pending, row, col, session.direction),
        blank_request=None,
    ))


def ready(session: 'GameSession') -> ActionResult:
    """Fill the active player's rack and start placing"""
    if session.phase == Phase.GAME_OVER:
        return _reject(session, 'GAME_OVER')
    if session.phase != Phase.AWAITING_READY:
        return _reject(session, 'NOT_AWAITING_READY')

    player = session.active_player
    drawn, bag = session.bag.draw(session.config.rack_size - len(player.rack))
    player = replace(player, rack=player.rack + drawn)
    logger.info(f"{player.name} is ready ({len(drawn)} tiles drawn, {len(bag)} left in bag)")

    return ActionResult(session=replace(
        session,
        players=_with_player(session.players, session.active_index, player),
        bag=bag,
        phase=Phase.PLACING,
    ))


def place_tile(session: 'GameSession', rack_index: int) -> ActionResult:
    rejected = _placing_guard(session)
    if rejected:
        return rejected
    if session.blank_request is not None:
        return _reject(session, 'BLANK_PENDING')

    rack = session.active_player.rack
    if not 0 <= rack_index < len(rack):
        return _reject(session, 'BAD_RACK_INDEX', index=rack_index)

    tile = rack[rack_index]
    if tile.is_blank and not tile.is_designated:
        # Wait for designate_blank / cancel_blank_designation
        return ActionResult(session=replace(session, blank_request=rack_index))
    return _place(session, rack_index, tile)


def designate_blank(session: 'GameSession', letter: str) -> ActionResult:
    rejected = _placing_guard(session)
    if rejected:
        return rejected
    if session.blank_request is None:
        return _reject(session, 'NO_BLANK_REQUEST')
    if not _is_letter(letter):
        return _reject(session, 'BAD_LETTER', letter=letter)

    index = session.blank_request
    rack = session.active_player.rack
    if index >= len(rack) or not rack[index].is_blank:
        return _reject(session, 'NOT_BLANK', index=index)
    return _place(session, index, rack[index].designate(letter))


def cancel_blank_designation(session: 'GameSession') -> ActionResult:
    rejected = _placing_guard(session)
    if rejected:
        return rejected
    if session.blank_request is None:
        return _reject(session, 'NO_BLANK_REQUEST')
    return ActionResult(session=replace(session, blank_request=None))


def type_letter(session: 'GameSession', letter: str) -> ActionResult:
    """Keyboard placement: use a tile with that letter, else a blank standing in for it"""
    rejected = _placing_guard(session)
    if rejected:
        return rejected
    if session.blank_request is not None:
        return _reject(session, 'BLANK_PENDING')
    if not _is_letter(letter):
        return _reject(session, 'BAD_LETTER', letter=letter)

    letter = letter.upper()
    rack = session.active_player.rack
    for index, tile in enumerate(rack):
        if not tile.is_blank and tile.letter == letter:
            return _place(session, index, tile)
    for index, tile in enumerate(rack):
        if tile.is_blank:
            return _place(session, index, tile.designate(letter))
    return _reject(session, 'NO_SUCH_LETTER', letter=letter)


def retract_last(session: 'GameSession') -> ActionResult:
    """Backspace: take back the tile under the cursor (if placed this turn) and step back"""
    rejected = _placing_guard(session)
    if rejected:
        return rejected
    if session.selected is None:
        return _reject(session, 'NO_SELECTION')

    row, col = session.selected
    previous = _previous_open_cell(session.board, row, col, session.direction)
    placed = [p for p in session.pending if p.position == (row, col)]
    if not placed:
        return ActionResult(session=replace(session, selected=previous))

    player = session.active_player
    player = replace(player, rack=player.rack + (placed[0].tile.as_rack_tile(),))
    return ActionResult(session=replace(
        session,
        players=_with_player(session.players, session.active_index, player),
        pending=tuple(p for p in session.pending if p.position != (row, col)),
        selected=previous,
    ))


def select_cell(session: 'GameSession', row: int, col: int) -> ActionResult:
    rejected = _placing_guard(session, allow_exchange_mode=True)
    if rejected:
        return rejected
    if not in_bounds(row, col):
        return _reject(session, 'OUT_OF_BOUNDS', row=row, col=col)

    if session.selected == (row, col):
        return ActionResult(session=replace(session, direction=session.direction.perpendicular()))

    direction = Direction.ACROSS if session.config.reset_direction_on_select else session.direction
    return ActionResult(session=replace(session, selected=(row, col), direction=direction))


def toggle_exchange_mode(session: 'GameSession') -> ActionResult:
    rejected = _placing_guard(session, allow_exchange_mode=True)
    if rejected:
        return rejected

    if session.exchange_mode:
        return ActionResult(session=replace(session, exchange_mode=False, exchange_selection=frozenset()))

    # Entering exchange mode takes this turn's tiles back off the board
    player = session.active_player
    returned = tuple(p.tile.as_rack_tile() for p in session.pending)
    return ActionResult(session=replace(
        session,
        players=_with_player(session.players, session.active_index,
                             replace(player, rack=player.rack + returned)),
        pending=(),
        selected=None,
        blank_request=None,
        exchange_mode=True,
        exchange_selection=frozenset(),
    ))


def toggle_exchange_selection(session: 'GameSession', rack_index: int) -> ActionResult:
    rejected = _placing_guard(session, allow_exchange_mode=True)
    if rejected:
        return rejected
    if not session.exchange_mode:
        return _reject(session, 'NOT_EXCHANGE_MODE')
    if not 0 <= rack_index < len(session.active_player.rack):
        return _reject(session, 'BAD_RACK_INDEX', index=rack_index)

    selection = session.exchange_selection ^ {rack_index}
    return ActionResult(session=replace(session, exchange_selection=frozenset(selection)))


def submit(session: 'GameSession') -> ActionResult:
    rejected = _placing_guard(session, allow_exchange_mode=True)
    if rejected:
        return rejected
    if session.exchange_mode:
        return _submit_exchange(session)
    return _submit_play(session)


def _submit_exchange(session: 'GameSession') -> ActionResult:
    if not session.exchange_selection:
        return _reject(session, 'NOTHING_TO_EXCHANGE')

    player = session.active_player
    outgoing = tuple(player.rack[i] for i in sorted(session.exchange_selection))
    kept = tuple(tile for i, tile in enumerate(player.rack) if i not in session.exchange_selection)

    # No check that the bag can cover the exchange: a short bag just means fewer tiles back
    drawn, bag = session.bag.draw(len(outgoing))
    bag = bag.exchange(outgoing, session.rng)
    player = replace(player, rack=kept + drawn)
    logger.info(f"{player.name} exchanged {len(outgoing)} tiles")

    return ActionResult(
        session=_advance(replace(
            session,
            players=_with_player(session.players, session.active_index, player),
            bag=bag,
        )),
        message=f"Exchanged {len(outgoing)} tiles",
    )


def _submit_play(session: 'GameSession') -> ActionResult:
    result = MoveValidator(session.dictionary).validate(session.board, session.pending, session.is_first_move)
    if not result.valid:
        logger.debug(f"Rejected play by {session.active_player.name}: {result.reason}")
        return ActionResult(session=session, valid=False, message=result.reason)

    config = session.config
    breakdown = Scorer(session.dictionary, config.bingo_bonus, config.rack_size).score_breakdown(
        session.board, session.pending
    )

    index = session.active_index
    player = session.active_player
    board = session.board.with_placements(session.pending, owner=index)
    needed = config.rack_size - len(player.rack)
    drawn, bag = session.bag.draw(needed)
    player = replace(player, score=player.score + breakdown.total, rack=player.rack + drawn)

    message = f"Played {', '.join(breakdown.words_formed) or 'tiles'} for {breakdown.total} points"
    logger.info(f"{player.name}: {message}")

    committed = replace(
        session,
        players=_with_player(session.players, index, player),
        board=board,
        bag=bag,
        pending=(),
        blank_request=None,
    )

    if needed == config.rack_size and len(bag) == 0:
        return ActionResult(session=_settle(committed, index), message=message, breakdown=breakdown)
    return ActionResult(session=_advance(committed), message=message, breakdown=breakdown)


def preview_score(session: 'GameSession', placements: Optional[Iterable[PendingPlacement]] = None) -> PlayPreview:
    """Validity and score of a placement without committing anything"""
    placements = session.pending if placements is None else tuple(placements)
    result = MoveValidator(session.dictionary).validate(session.board, placements, session.is_first_move)
    if not result.valid:
        return PlayPreview(valid=False, reason=result.reason, score=0)
    scorer = Scorer(session.dictionary, session.config.bingo_bonus, session.config.rack_size)
    return PlayPreview(valid=True, reason=None, score=scorer.score(session.board, placements))
