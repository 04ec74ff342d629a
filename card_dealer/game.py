import logging
from collections import Counter

from pydealer import (  # type: ignore
    Card,
    Stack,
)

from card_dealer.constants import DECK_LEN, NO_PLAYERS_MESSAGE
from card_dealer.game_types import GameSettings, Player
from card_dealer.utilities import (
    abbreviate_cards,
    build_deck,
    card_counter,
    copy_card,
    shuffle_stack,
)

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, settings: GameSettings) -> None:
        self.number_of_players = settings.number_of_players
        self.deck = Stack()
        self.players: list[Player] = []
        self.dealt = False

    def setup(self) -> None:
        self.players = []
        self.dealt = False
        self.deck = build_deck()
        logger.info(f"Deck built with {len(self.deck)} cards")
        self.shuffle()
        self.register_players()
        self.assert_conservation_of_cards()

    def run(self) -> None:
        self.setup()
        self.deal_cards()

    def shuffle(self) -> None:
        shuffle_stack(stack=self.deck)
        logger.info("Deck shuffled")
        logger.debug(f"Deck order: {abbreviate_cards(stack=self.deck)}")

    def register_players(self) -> None:
        for player_number in range(1, self.number_of_players + 1):
            self.players.append(Player(name=f"Player {player_number}"))
        logger.info(f"Registered {len(self.players)} players")

    def deal_cards(self) -> None:

        if len(self.players) <= 0:
            print(NO_PLAYERS_MESSAGE)
            logger.warning(NO_PLAYERS_MESSAGE)
            return

        for index, card in enumerate(self.deck):
            self.deal_card(player_index=index % len(self.players), card=card)

        self.dealt = True
        self.assert_conservation_of_cards()

        for player in self.players:
            logger.debug(f"{player.name} hand: {abbreviate_cards(stack=player.hand)}")

    def deal_card(self, player_index: int, card: Card) -> None:
        self.players[player_index].hand += Stack(cards=[copy_card(card)])

    def assert_conservation_of_cards(self) -> None:
        deck_cards = card_counter(self.deck)

        assert len(self.deck) == DECK_LEN
        assert len(deck_cards) == DECK_LEN

        if self.dealt:
            hand_cards = sum((card_counter(player.hand) for player in self.players), Counter())
            assert hand_cards == deck_cards
