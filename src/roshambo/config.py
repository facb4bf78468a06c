import os
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator


DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config.yaml")


class ConfigError(Exception):
    """config.yaml is missing a section or describes an impossible game."""


class Messages(BaseModel):
    model_config = ConfigDict(frozen=True)

    player: str = "You Win!"
    computer: str = "Computer Wins"
    draw: str = "It's a draw!"


class Rounds(BaseModel):
    model_config = ConfigDict(frozen=True)

    default: int = Field(default=1000, ge=0)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value):
        value = value.strip().upper()
        # raises ValueError for names loguru does not know
        logger.level(value)
        return value


class GameConfig(BaseModel):
    """
    Immutable game description shared by the resolver, the policy and the game loop.

    ``beaten_by`` is accepted as a mapping but stored as ordered
    ``(hand, beaters)`` pairs; hand order follows the mapping's order.
    """
    model_config = ConfigDict(frozen=True)

    relation: Tuple[Tuple[str, Tuple[str, ...]], ...]
    messages: Messages = Messages()
    rounds: Rounds = Rounds()
    logging: LoggingSettings = LoggingSettings()
    seed: Optional[int] = None

    @model_validator(mode="before")
    @classmethod
    def _relation_from_mapping(cls, data):
        if not isinstance(data, dict):
            raise ValueError("config must be a mapping")
        if "relation" in data:
            return data
        data = dict(data)
        value = data.pop("beaten_by", None)
        if not isinstance(value, dict) or not value:
            raise ValueError("beaten_by must map at least one hand")
        data["relation"] = tuple(
            (str(hand).strip().lower(), tuple(str(b).strip().lower() for b in (beaters or [])))
            for hand, beaters in value.items()
        )
        return data

    @model_validator(mode="after")
    def _check_relation(self):
        known = self.hands
        for hand, beaters in self.relation:
            if not beaters:
                raise ValueError(f"'{hand}' is not beaten by anything")
            if hand in beaters:
                raise ValueError(f"'{hand}' cannot beat itself")
            unknown = [b for b in beaters if b not in known]
            if unknown:
                raise ValueError(f"'{hand}' is beaten by unknown hand(s): {', '.join(unknown)}")
        return self

    @property
    def beaten_by(self) -> Mapping[str, Tuple[str, ...]]:
        return MappingProxyType(dict(self.relation))

    @property
    def hands(self) -> Tuple[str, ...]:
        return tuple(hand for hand, _ in self.relation)

    @property
    def default_rounds(self) -> int:
        return self.rounds.default

    @property
    def log_level(self) -> str:
        return self.logging.level


def _from_raw(raw) -> GameConfig:
    try:
        return GameConfig.model_validate(raw or {})
    except ValidationError as e:
        raise ConfigError(str(e)) from e


def load_config(path: Optional[str] = None) -> GameConfig:
    config_path = path or DEFAULT_CONFIG_PATH
    with open(config_path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    return _from_raw(raw)
