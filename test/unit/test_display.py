import pytest
from _pytest.capture import CaptureFixture
from pydealer import (  # type: ignore
    Card,
    Stack,
)

from card_dealer.constants import DECK_LEN, NUMBER_OF_PLAYERS, SEPARATOR
from card_dealer.display import format_card, print_cards, print_players
from card_dealer.game_types import Player
from card_dealer.main import main
from card_dealer.utilities import build_deck


@pytest.mark.parametrize(
    "value,suit,expected",
    [
        ("Ace", "Hearts", "Ace Heart"),
        ("2", "Spades", "Two Spade"),
        ("9", "Diamonds", "Nine Diamond"),
        ("10", "Clubs", "Ten Club"),
        ("Jack", "Hearts", "Jack Heart"),
        ("Queen", "Spades", "Queen Spade"),
        ("King", "Diamonds", "King Diamond"),
    ],
)
def test_format_card(value: str, suit: str, expected: str) -> None:

    assert format_card(card=Card(value=value, suit=suit)) == expected


def test_format_card_unknown_value() -> None:

    with pytest.raises(AssertionError):
        format_card(card=Card(value="Joker", suit="Hearts"))


def test_print_cards(capsys: CaptureFixture) -> None:

    print_cards(cards=build_deck())

    lines = capsys.readouterr().out.splitlines()

    assert len(lines) == DECK_LEN
    assert lines[0] == "Ace Heart"
    assert lines[13] == "Ace Spade"
    assert lines[-1] == "King Club"


def test_print_players(capsys: CaptureFixture) -> None:

    players = [
        Player(
            name="Player 1",
            hand=Stack(cards=[Card(value="Ace", suit="Hearts"), Card(value="7", suit="Clubs")]),
        ),
        Player(name="Player 2", hand=Stack(cards=[Card(value="Queen", suit="Diamonds")])),
        Player(name="Player 3"),
    ]

    print_players(players=players)

    assert capsys.readouterr().out.splitlines() == [
        SEPARATOR,
        "Player 1 :",
        "Ace Heart",
        "Seven Club",
        SEPARATOR,
        "Player 2 :",
        "Queen Diamond",
        SEPARATOR,
        "Player 3 :",
    ]


def test_main(capsys: CaptureFixture) -> None:

    main()

    lines = capsys.readouterr().out.splitlines()

    assert len(lines) == DECK_LEN + NUMBER_OF_PLAYERS * (2 + DECK_LEN // NUMBER_OF_PLAYERS)
    assert sorted(lines[:DECK_LEN]) == sorted(format_card(card) for card in build_deck())

    player_lines = lines[DECK_LEN:]
    assert player_lines[0] == SEPARATOR
    assert player_lines[1] == "Player 1 :"
    assert player_lines[15] == SEPARATOR
    assert player_lines[16] == "Player 2 :"

    for player_index in range(NUMBER_OF_PLAYERS):
        hand = player_lines[player_index * 15 + 2 : (player_index + 1) * 15]
        assert hand == lines[player_index:DECK_LEN:NUMBER_OF_PLAYERS]
