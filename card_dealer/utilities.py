from collections import Counter
from random import randint

from pydealer import (  # type: ignore
    Card,
    Stack,
)

from card_dealer.constants import SUITS, VALUES

SUIT_CODES = {suit: code for code, suit in SUITS.items()}
VALUE_CODES = {value: code for code, value in VALUES.items()}


def build_deck() -> Stack:
    """Build the 52 card deck, suits in code order with Ace to King in each."""

    cards = []

    for suit_code in sorted(SUITS):
        for value_code in sorted(VALUES):
            cards.append(Card(value=VALUES[value_code], suit=SUITS[suit_code]))

    return Stack(cards=cards)


def shuffle_stack(stack: Stack) -> None:
    """Shuffle in place by swapping every position with a random position.

    The swap target is drawn from the whole stack rather than the unshuffled
    tail, so the resulting permutations are not uniformly distributed.
    """

    cards = stack.cards
    stack_len = len(cards)

    for index in range(stack_len):
        random_index = randint(0, stack_len - 1)
        cards[index], cards[random_index] = cards[random_index], cards[index]


def copy_card(card: Card) -> Card:
    return Card(value=card.value, suit=card.suit)


def rank_of(card: Card) -> int:
    assert card.value in VALUE_CODES, f"Unknown card value {card.value}"
    return VALUE_CODES[card.value]


def suit_of(card: Card) -> int:
    assert card.suit in SUIT_CODES, f"Unknown card suit {card.suit}"
    return SUIT_CODES[card.suit]


def card_counter(stack: Stack) -> Counter:

    return Counter((card.value, card.suit) for card in stack)


def abbreviate_cards(stack: Stack) -> str:

    return ",".join(card.abbrev for card in stack)
