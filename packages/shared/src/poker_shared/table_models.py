"""Table models: the creation config sent to the backend and the live Table it returns.

TableConfig and Table are deliberately separate types. The backend enriches
a created table with live state (player count, phase, pot) and may adjust
blinds, so the input config is never assumed to equal the persisted record.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, model_validator

from poker_shared.models import ClientResult, WireModel

# ============================================================================
# Domain objects
# ============================================================================


class TableConfig(WireModel):
    """Input for create_table. Serialized camelCase as the request body."""

    name: str = Field(min_length=1, max_length=50)
    game_type: str = "texas_holdem"  # texas_holdem, omaha, omaha_hi_lo
    betting_structure: str = "no_limit"  # no_limit, pot_limit, limit
    game_format: str = "cash"  # cash, tournament, sit_n_go
    max_players: int = Field(default=9, ge=2, le=10)
    small_blind: float = Field(gt=0)
    big_blind: float = Field(gt=0)
    min_buy_in: float = Field(gt=0)
    max_buy_in: float = Field(gt=0)
    ante: float = Field(default=0, ge=0)
    time_bank: int = Field(default=30, ge=0)  # seconds
    is_private: bool = False

    @model_validator(mode="after")
    def _check_bounds(self) -> TableConfig:
        if self.big_blind < self.small_blind:
            raise ValueError("big_blind must be >= small_blind")
        if self.min_buy_in > self.max_buy_in:
            raise ValueError("min_buy_in must be <= max_buy_in")
        return self

    @classmethod
    def cash_game(
        cls, name: str, small_blind: float, big_blind: float, max_players: int = 9
    ) -> TableConfig:
        """No-limit hold'em cash table with buy-ins of 50-200 big blinds."""
        return cls(
            name=name,
            small_blind=small_blind,
            big_blind=big_blind,
            max_players=max_players,
            min_buy_in=big_blind * 50,
            max_buy_in=big_blind * 200,
        )


class Blinds(WireModel):
    """Effective blinds on a live table."""

    small: float = 0
    big: float = 0


class TableSettings(WireModel):
    """Config echo embedded in some Table records."""

    max_players: int = 0
    small_blind: float = 0
    big_blind: float = 0


class Table(WireModel):
    """A live table as reported by the backend."""

    id: str
    name: str = ""
    player_count: int = 0
    max_players: int = 0
    game_phase: str = "waiting"  # waiting, pre_flop, flop, turn, river, showdown
    pot: float = 0
    blinds: Blinds = Field(default_factory=Blinds)
    config: TableSettings | None = None


# ============================================================================
# Operation results
# ============================================================================


class TableListResult(ClientResult):
    """Result of list_tables."""

    tables: list[Table] = []


class TableResult(ClientResult):
    """Result of create_table. `table` is None when the backend sent no data."""

    table: Table | None = None


class JoinTableResult(ClientResult):
    """Result of join_table. The backend's payload is passed through opaque."""

    table_id: str = ""
    data: Any = None
