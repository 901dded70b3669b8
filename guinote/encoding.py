"""Card identifier encoding utilities for Guiñote."""

from __future__ import annotations

from typing import Final, Iterable, Iterator

from .cards import Card, Rank, Suit

SUITS: Final[tuple[Suit, ...]] = tuple(Suit)
RANKS: Final[tuple[Rank, ...]] = Rank.ordered()
DECK_CARD_COUNT: Final[int] = len(SUITS) * len(RANKS)
FULL_MASK: Final[int] = (1 << DECK_CARD_COUNT) - 1


def card_id(card: Card) -> int:
    """Encode ``card`` into an identifier in ``0..39``."""

    return SUITS.index(card.suit) * len(RANKS) + RANKS.index(card.rank)


def decode_id(card_identifier: int) -> Card:
    """Decode a card identifier back into a :class:`Card`."""

    _validate_card_identifier(card_identifier)
    suit_idx, rank_idx = divmod(card_identifier, len(RANKS))
    return Card(suit=SUITS[suit_idx], rank=RANKS[rank_idx])


def _validate_card_identifier(card_identifier: int) -> None:
    if card_identifier < 0 or card_identifier >= DECK_CARD_COUNT:
        raise ValueError(f"card identifier {card_identifier} out of range")


def mask_from_cards(cards: Iterable[Card]) -> int:
    """Return a bit-mask representing ``cards``.

    Raises ``ValueError`` when the same card appears twice.
    """

    mask = 0
    for card in cards:
        mask = add_card(mask, card)
    return mask


def add_card(mask: int, card: Card) -> int:
    """Return ``mask`` updated to include ``card``."""

    if has_card(mask, card):
        raise ValueError(f"card {card.label()} already present in mask")
    return mask | (1 << card_id(card))


def has_card(mask: int, card: Card) -> bool:
    return (mask >> card_id(card)) & 1 == 1


def iter_cards(mask: int) -> Iterator[Card]:
    """Yield all cards present in ``mask`` in identifier order."""

    for card_identifier in range(DECK_CARD_COUNT):
        if (mask >> card_identifier) & 1:
            yield decode_id(card_identifier)


def cards_from_mask(mask: int) -> list[Card]:
    return list(iter_cards(mask))
