NUMBER_OF_PLAYERS = 4

DECK_LEN = 52

SEPARATOR = "====================="

NO_PLAYERS_MESSAGE = "There are no players to distribute !!"

# Numeric codes to pydealer suit and value names, in deck build order
SUITS = {
    1: "Hearts",
    2: "Spades",
    3: "Diamonds",
    4: "Clubs",
}

VALUES = {
    1: "Ace",
    2: "2",
    3: "3",
    4: "4",
    5: "5",
    6: "6",
    7: "7",
    8: "8",
    9: "9",
    10: "10",
    11: "Jack",
    12: "Queen",
    13: "King",
}

SUIT_NAMES = {
    1: "Heart",
    2: "Spade",
    3: "Diamond",
    4: "Club",
}

RANK_NAMES = {
    1: "Ace",
    2: "Two",
    3: "Three",
    4: "Four",
    5: "Five",
    6: "Six",
    7: "Seven",
    8: "Eight",
    9: "Nine",
    10: "Ten",
    11: "Jack",
    12: "Queen",
    13: "King",
}
