from pydealer import (  # type: ignore
    Card,
    Stack,
)

from card_dealer.constants import RANK_NAMES, SEPARATOR, SUIT_NAMES
from card_dealer.game_types import Player
from card_dealer.utilities import rank_of, suit_of


def format_card(card: Card) -> str:
    return f"{RANK_NAMES[rank_of(card)]} {SUIT_NAMES[suit_of(card)]}"


def print_cards(cards: Stack) -> None:
    for card in cards:
        print(format_card(card=card))


def print_players(players: list[Player]) -> None:
    for player in players:
        print(SEPARATOR)
        print(f"{player.name} :")
        print_cards(cards=player.hand)
