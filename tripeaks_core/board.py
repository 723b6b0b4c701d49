from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .cards import Card

BOARD_SIZE = 28
TOP_ROW_START = 18
THIRD_ROW_START = 9
SECOND_ROW_START = 3
MAX_FREE = 10

Slot = Optional[Card]

_LAYOUT = (
    "      {}          {}          {}\n"
    "    {}  {}      {}  {}      {}  {}\n"
    "  {}  {}  {}  {}  {}  {}  {}  {}  {}\n"
    "{}  {}  {}  {}  {}  {}  {}  {}  {}  {}"
)


def covering_slots(i: int) -> Tuple[int, ...]:
    """Returns the slots lying on top of slot i (none for the top row)."""
    if not 0 <= i < BOARD_SIZE:
        raise IndexError(f"slot {i} out of range")
    if i >= TOP_ROW_START:
        return ()
    if i >= THIRD_ROW_START:
        return (i + 9, i + 10)
    if i >= SECOND_ROW_START:
        k = (i - 3) // 2
        return (i + 6 + k, i + 7 + k)
    # the peaks
    return (i + 3 + i, i + 4 + i)


@dataclass(frozen=True)
class TriPeaksBoard:
    """The 28 board slots. Indices 0-2 are the peaks, 18-27 the uncovered top row."""
    cards: Tuple[Slot, ...]

    def __post_init__(self) -> None:
        if len(self.cards) != BOARD_SIZE:
            raise ValueError(f"board needs {BOARD_SIZE} slots, got {len(self.cards)}")

    @classmethod
    def from_cards(cls, cards: Iterable[Slot]) -> 'TriPeaksBoard':
        return cls(tuple(cards))

    @classmethod
    def empty(cls) -> 'TriPeaksBoard':
        return cls((None,) * BOARD_SIZE)

    def card_at(self, i: int) -> Slot:
        return self.cards[i]

    def is_cleared(self) -> bool:
        return all(c is None for c in self.cards)

    def remaining(self) -> int:
        return sum(1 for c in self.cards if c is not None)

    def without(self, i: int) -> 'TriPeaksBoard':
        """Returns a copy of the board with slot i emptied."""
        cards = list(self.cards)
        cards[i] = None
        return TriPeaksBoard(tuple(cards))

    def is_free(self, i: int) -> bool:
        return self.cards[i] is not None and all(self.cards[j] is None for j in covering_slots(i))

    def free_card_indices(self) -> List[int]:
        """
        Lists the occupied slots that nothing covers, highest index first.
        The order is the order in which the solver tries board moves.
        """
        cards = self.cards
        free: List[int] = []
        for i in range(BOARD_SIZE - 1, -1, -1):
            if cards[i] is None:
                continue
            second_offset = max(i - 3, 0) // 2
            # the highest row of cards is always free
            if (i >= TOP_ROW_START
                    # the third row
                    or (THIRD_ROW_START <= i < TOP_ROW_START
                        and cards[i + 9] is None and cards[i + 10] is None)
                    # the second row
                    or (SECOND_ROW_START <= i < THIRD_ROW_START
                        and cards[i + 6 + second_offset] is None and cards[i + 7 + second_offset] is None)
                    # the peaks
                    or (i < SECOND_ROW_START and cards[i + 3 + i] is None and cards[i + 4 + i] is None)):
                free.append(i)
                if len(free) == MAX_FREE:
                    break
        return free

    def pretty(self) -> str:
        """Renders the three peaks as text, empty slots shown as blanks."""
        return _LAYOUT.format(*(str(c) if c is not None else "  " for c in self.cards))

    def __str__(self) -> str:
        return self.pretty()
