from dataclasses import dataclass, field

from pydantic import BaseModel
from pydealer import Stack  # type: ignore

from card_dealer.constants import NUMBER_OF_PLAYERS


@dataclass
class Player:
    name: str
    hand: Stack = field(default_factory=Stack)


class GameSettings(BaseModel):
    number_of_players: int = NUMBER_OF_PLAYERS
