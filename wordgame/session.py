# wordgame/session.py

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple

from . import turns
from .bag import RandomSource, TileBag, default_random_source
from .board import Board
from .config import GameConfig
from .constants import TOTAL_TILES
from .dictionary import as_dictionary
from .errors import TileCountError
from .turns import ActionResult
from .types import Direction, PendingPlacement, Phase, Player, PlayPreview

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameSession:
    """Snapshot of a match: board, bag, players and the turn in progress.

    Snapshots are never modified. Every action returns an ActionResult
    carrying the next snapshot (or this one, with a reason, on rejection).
    """
    players: Tuple[Player, ...]
    board: Board
    bag: TileBag
    dictionary: Mapping[str, int] = field(compare=False, repr=False)
    rng: RandomSource = field(compare=False, repr=False)
    config: GameConfig = field(default_factory=GameConfig, compare=False, repr=False)
    active_index: int = 0
    phase: Phase = Phase.AWAITING_READY
    pending: Tuple[PendingPlacement, ...] = ()
    direction: Direction = Direction.ACROSS
    selected: Optional[Tuple[int, int]] = None
    exchange_mode: bool = False
    exchange_selection: FrozenSet[int] = frozenset()
    blank_request: Optional[int] = None

    @classmethod
    def new(cls, player_names: Sequence[str], dictionary: Mapping[str, int],
            rng: Optional[RandomSource] = None, config: Optional[GameConfig] = None) -> 'GameSession':
        """Start a match: shuffled bag, empty racks and board, random first player"""
        if config is None:
            config = GameConfig()
        if not config.min_players <= len(player_names) <= config.max_players:
            raise ValueError(
                f"Need {config.min_players}-{config.max_players} players, got {len(player_names)}"
            )
        if rng is None:
            rng = default_random_source(config.seed)

        session = cls(
            players=tuple(Player(name=name) for name in player_names),
            board=Board.empty(),
            bag=TileBag.initial(rng),
            dictionary=as_dictionary(dictionary),
            rng=rng,
            config=config,
            active_index=rng.randrange(len(player_names)),
        )
        session.check_invariants()
        logger.info(f"New game for {', '.join(player_names)}; {session.active_player.name} starts")
        return session

    # Queries

    @property
    def active_player(self) -> Player:
        return self.players[self.active_index]

    @property
    def is_first_move(self) -> bool:
        return self.board.is_empty()

    @property
    def is_over(self) -> bool:
        return self.phase == Phase.GAME_OVER

    def tile_count(self) -> int:
        """Tiles in the bag, on racks, committed and pending. Always TOTAL_TILES."""
        return (
            len(self.bag)
            + sum(len(player.rack) for player in self.players)
            + self.board.tile_count()
            + len(self.pending)
        )

    def check_invariants(self) -> None:
        count = self.tile_count()
        if count != TOTAL_TILES:
            raise TileCountError(f"Expected {TOTAL_TILES} tiles, found {count}")
        for player in self.players:
            if len(player.rack) > self.config.rack_size:
                raise TileCountError(f"{player.name} holds {len(player.rack)} tiles")

    def standings(self) -> List[Player]:
        """Players sorted by score, best first"""
        return sorted(self.players, key=lambda p: p.score, reverse=True)

    def preview_score(self, placements: Optional[Iterable[PendingPlacement]] = None) -> PlayPreview:
        return turns.preview_score(self, placements)

    # Actions

    def ready(self) -> ActionResult:
        return turns.ready(self)

    def select_cell(self, row: int, col: int) -> ActionResult:
        return turns.select_cell(self, row, col)

    def place_tile(self, rack_index: int) -> ActionResult:
        return turns.place_tile(self, rack_index)

    def designate_blank(self, letter: str) -> ActionResult:
        return turns.designate_blank(self, letter)

    def cancel_blank_designation(self) -> ActionResult:
        return turns.cancel_blank_designation(self)

    def type_letter(self, letter: str) -> ActionResult:
        return turns.type_letter(self, letter)

    def retract_last(self) -> ActionResult:
        return turns.retract_last(self)

    def toggle_exchange_selection(self, rack_index: int) -> ActionResult:
        return turns.toggle_exchange_selection(self, rack_index)

    def toggle_exchange_mode(self) -> ActionResult:
        return turns.toggle_exchange_mode(self)

    def submit(self) -> ActionResult:
        return turns.submit(self)
