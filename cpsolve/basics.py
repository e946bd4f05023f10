"""Solutions to introductory implementation and constructive problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

POLYHEDRON_FACES = {
    "Tetrahedron": 4,
    "Cube": 6,
    "Octahedron": 8,
    "Dodecahedron": 12,
    "Icosahedron": 20,
}

CHAT_WITH_HER = "CHAT WITH HER!"
IGNORE_HIM = "IGNORE HIM!"


def presents(givers: Sequence[int]) -> list[int]:
    """Invert a gift permutation: who gave a present to each friend.

    ``givers[i]`` is the friend that friend ``i + 1`` gave a present to.
    """
    size = len(givers)
    result = [0] * size
    for giver, receiver in enumerate(givers, start=1):
        if not 1 <= receiver <= size:
            raise ValueError(f"receiver {receiver} is outside 1..{size}")
        result[receiver - 1] = giver
    return result


def polyhedron_faces(names: Iterable[str]) -> int:
    """Total number of faces of the named regular polyhedra."""
    total = 0
    for name in names:
        try:
            total += POLYHEDRON_FACES[name]
        except KeyError:
            raise ValueError(f"unknown polyhedron: {name!r}") from None
    return total


def arrival_swaps(heights: Sequence[int]) -> int:
    """Adjacent swaps needed to put a tallest soldier first and a shortest last."""
    if not heights:
        raise ValueError("no soldiers given")
    size = len(heights)
    max_index = heights.index(max(heights))
    shortest = min(heights)
    min_index = size - 1 - list(reversed(heights)).index(shortest)
    moves = max_index + (size - 1 - min_index)
    return moves - 1 if max_index > min_index else moves


def min_median_difference(skills: Sequence[int]) -> int:
    """Smallest possible difference between the medians of two odd-sized classes."""
    if not skills or len(skills) % 2:
        raise ValueError("an even, non-zero number of students is required")
    ordered = sorted(skills)
    half = len(ordered) // 2
    return ordered[half] - ordered[half - 1]


def years_until_bigger(limak: int, bob: int) -> int:
    """Years until Limak (tripling yearly) outweighs Bob (doubling yearly)."""
    if limak <= 0 and limak <= bob:
        raise ValueError("Limak's weight must be positive to ever exceed Bob's")
    years = 0
    while limak <= bob:
        bob *= 2
        limak *= 3
        years += 1
    return years


def beautiful_matrix_moves(matrix: Sequence[Sequence[int]]) -> int:
    """Moves needed to bring the single one to the centre of a 5x5 matrix."""
    distance = 0
    for i, row in enumerate(matrix):
        cells = list(row)
        if 1 in cells:
            j = cells.index(1)
            distance = abs(i - 2) + abs(j - 2)
            if distance:
                break
    return distance


def bit_plus_plus(statements: Iterable[str]) -> int:
    """Final value of x after running Bit++ statements from zero."""
    x = 0
    for statement in statements:
        if statement in ("++X", "X++"):
            x += 1
        else:
            x -= 1
    return x


def boring_keypresses(apartment: int) -> int:
    """Keys pressed calling every boring apartment up to and including this one."""
    if apartment <= 0:
        return 0
    digits = str(apartment)
    length = len(digits)
    return length * (length + 1) // 2 + (int(digits[0]) - 1) * 10


def gender_by_username(name: str) -> str:
    """Guess gender from the parity of distinct characters in a user name."""
    return CHAT_WITH_HER if len(set(name)) % 2 == 0 else IGNORE_HIM


def button_presses(n: int) -> int:
    """Worst-case presses to open a lock with ``n`` buttons."""
    return n + sum((n - i) * i for i in range(1, n))


def donut_shops(a: int, b: int, c: int) -> tuple[int, int]:
    """Donut counts strictly cheaper in the first and in the second shop, or -1.

    The first shop sells donuts at ``a`` each; the second sells boxes of ``b``
    donuts for ``c``.
    """
    first = 1 if a < c else -1
    second = b if b * a > c else -1
    return first, second


def dreamoon_moves(n: int, m: int) -> int:
    """Fewest moves (a multiple of ``m``) to climb ``n`` steps by ones and twos."""
    if m <= 0:
        raise ValueError("m must be positive")
    if n < 0:
        raise ValueError("n must not be negative")
    moves = (n + 1) // 2
    moves += -moves % m
    return moves if moves <= n else -1


def erased_zeroes(s: str) -> int:
    """Characters to erase so that all ones in ``s`` form a contiguous block."""
    first = s.find("1")
    if first == -1:
        return 0
    last = s.rfind("1")
    return (last - first + 1) - s.count("1")


def fix_you(grid: Sequence[Sequence[str]]) -> int:
    """Cells to change so every luggage item reaches the counter at the corner."""
    rows = list(grid)
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")
    if len(rows) == 1 and width == 1:
        return 0
    down_in_last_row = list(rows[-1]).count("D")
    right_in_last_column = sum(row[-1] == "R" for row in rows)
    return down_in_last_row + right_in_last_column


def fox_snake(n: int, m: int) -> list[str]:
    """Rows of an ``n`` by ``m`` snake drawn with '#' on a '.' background."""
    rows = []
    for line in range(1, n + 1):
        if line % 4 == 2:
            rows.append("." * (m - 1) + "#")
        elif line % 4 == 0:
            rows.append("#" + "." * (m - 1))
        else:
            rows.append("#" * m)
    return rows


def game_23_moves(n: int, m: int) -> int:
    """Multiplications by 2 or 3 turning ``n`` into ``m``, or -1 if impossible."""
    if n <= 0:
        raise ValueError("n must be positive")
    moves = 0
    while n < m and m % n == 0:
        ratio = m // n
        if ratio % 2 == 0:
            n *= 2
        elif ratio % 3 == 0:
            n *= 3
        else:
            break
        moves += 1
    return moves if n == m else -1


def can_play_card(table_card: str, hand: Iterable[str]) -> bool:
    """Whether a card in hand shares rank or suit with the card on the table."""
    rank, suit = table_card[0], table_card[1]
    return any(card[0] == rank or card[1] == suit for card in hand)


def rearrange_sum(expression: str) -> str:
    """Rewrite a sum so that its summands appear in non-decreasing order."""
    return "+".join(sorted(expression.replace("+", "")))


def easy_or_hard(responses: Iterable[int]) -> str:
    """'HARD' if anyone found the problem hard, otherwise 'EASY'."""
    for response in responses:
        if response == 1:
            return "HARD"
    return "EASY"