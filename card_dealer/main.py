import logging

from card_dealer.display import print_cards, print_players
from card_dealer.game import Game
from card_dealer.game_types import GameSettings

logging.basicConfig(level=logging.INFO)


def main() -> None:

    game = Game(settings=GameSettings())

    logging.info("Starting game")
    game.run()

    print_cards(cards=game.deck)
    print_players(players=game.players)

    return


if __name__ == "__main__":

    main()
