"""Load and validate world and player-list TOML files."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Annotated, Literal, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sugoroku.board import Area, Board, build_board
from sugoroku.effects import EFFECT_TYPES, Effect
from sugoroku.errors import ConfigurationError


# ── World file schema ────────────────────────────────────────────────

class _Strict(BaseModel):
    model_config = ConfigDict(extra="forbid")


class GoToStartSchema(_Strict):
    kind: Literal["GoToStart"]


class SkipSelfSchema(_Strict):
    kind: Literal["SkipSelf"]
    times: int = Field(..., ge=1, description="Turns the player forfeits")


class _MoveSchema(_Strict):
    num: int = Field(..., ge=0, description="Number of areas to move")


class PushSelfSchema(_MoveSchema):
    kind: Literal["PushSelf"]


class PullSelfSchema(_MoveSchema):
    kind: Literal["PullSelf"]


class PushOthersAllSchema(_MoveSchema):
    kind: Literal["PushOthersAll"]


class PullOthersAllSchema(_MoveSchema):
    kind: Literal["PullOthersAll"]


EffectSchema = Annotated[
    Union[
        GoToStartSchema,
        SkipSelfSchema,
        PushSelfSchema,
        PullSelfSchema,
        PushOthersAllSchema,
        PullOthersAllSchema,
    ],
    Field(discriminator="kind"),
]


class AreaSchema(_Strict):
    description: str
    effect: list[EffectSchema] = Field(default_factory=list)


class GeneralSchema(_Strict):
    title: str = Field(..., min_length=1)
    opening_msg: str = ""
    start_description: str = "Start"
    goal_description: str = "Goal"
    dice_max: int = Field(..., ge=1, description="Largest value a player may declare")


class WorldSchema(_Strict):
    general: GeneralSchema
    area: list[AreaSchema] = Field(default_factory=list)

    def to_board(self) -> Board:
        areas = [
            Area(a.description, tuple(_to_effect(e) for e in a.effect))
            for a in self.area
        ]
        g = self.general
        return build_board(
            areas,
            dice_max=g.dice_max,
            title=g.title,
            opening=g.opening_msg,
            start_description=g.start_description,
            goal_description=g.goal_description,
        )


def _to_effect(schema: BaseModel) -> Effect:
    params = schema.model_dump()
    cls = EFFECT_TYPES[params.pop("kind")]
    return cls(**params)


# ── Player list schema ───────────────────────────────────────────────

class PlayerSchema(_Strict):
    name: str = Field(..., min_length=1)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("player name must not be blank")
        return v


class PlayerListSchema(_Strict):
    player: list[PlayerSchema] = Field(..., min_length=1)

    @field_validator("player")
    @classmethod
    def names_unique(cls, players: list[PlayerSchema]) -> list[PlayerSchema]:
        seen: set[str] = set()
        for p in players:
            if p.name in seen:
                raise ValueError(f"duplicate player: {p.name}")
            seen.add(p.name)
        return players


# ── Loading ──────────────────────────────────────────────────────────

def parse_board(text: str, source: str = "<world>") -> Board:
    """Decode a world TOML document into a Board."""
    schema = _validate(WorldSchema, text, source)
    board = schema.to_board()
    logger.debug(f"Loaded {source}: {len(board.areas)} areas, dice_max={board.dice_max}")
    return board


def parse_players(text: str, source: str = "<players>") -> list[str]:
    """Decode a player-list TOML document into turn-ordered names."""
    schema = _validate(PlayerListSchema, text, source)
    return [p.name for p in schema.player]


def load_board(path: Path | str) -> Board:
    path = Path(path)
    return parse_board(_read(path), source=str(path))


def load_players(path: Path | str) -> list[str]:
    path = Path(path)
    return parse_players(_read(path), source=str(path))


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"failed to read {path}: {exc}") from exc


def _validate(model: type[BaseModel], text: str, source: str):
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"failed to parse {source}: {exc}") from exc
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"invalid {source}:\n{exc}") from exc
