from typing import Literal, Union

from pydantic import BaseModel, ConfigDict


class SectionHeader(BaseModel):
    """Disabled title line introducing a group of games."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["header"] = "header"
    text: str


class Separator(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["separator"] = "separator"


class GameItem(BaseModel):
    """Clickable game line; clicking opens `url`."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["game"] = "game"
    title: str
    tooltip: str
    url: str


class InfoItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["info"] = "info"
    text: str


DisplayEntry = Union[SectionHeader, Separator, GameItem, InfoItem]
