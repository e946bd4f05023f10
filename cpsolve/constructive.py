"""Solutions to constructive problems: patterns, ciphers and simulations."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import cycle

LUCKY_DIGITS = frozenset("47")
LUCKY_COUNTS = frozenset({4, 7})
VOWELS = frozenset("aoyeui")


def longest_increasing_run(values: Sequence[int]) -> int:
    """Length of the longest strictly increasing contiguous run."""
    if not values:
        return 0
    best = current = 1
    for previous, value in zip(values, values[1:]):
        if value > previous:
            current += 1
        else:
            best = max(best, current)
            current = 1
    return max(best, current)


def is_nearly_lucky(number: int | str) -> bool:
    """Whether the count of lucky digits (4 and 7) is itself 4 or 7."""
    lucky = sum(digit in LUCKY_DIGITS for digit in str(number))
    return lucky in LUCKY_COUNTS


def meeting_distance(x1: int, x2: int, x3: int) -> int:
    """Minimum total distance for three friends on a line to meet."""
    low, middle, high = sorted((x1, x2, x3))
    return (middle - low) + (high - middle)


def whiteboard(n: int) -> tuple[int, list[tuple[int, int]]]:
    """Final number left on a board holding 1..n and the pairs combined.

    Each step replaces the two largest numbers ``a`` and ``b`` with the
    rounded-up mean ``ceil((a + b) / 2)``.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    board = list(range(1, n + 1))
    steps: list[tuple[int, int]] = []
    while len(board) > 1:
        last = board.pop()
        second = board.pop()
        steps.append((last, second))
        board.append(-(-(last + second) // 2))
    return board[-1], steps


def finishing_day(pages: int, daily: Sequence[int]) -> int:
    """Day of the week (1-based) on which the book is finished."""
    if not daily:
        raise ValueError("a reading schedule is required")
    if pages < 0:
        raise ValueError("pages must not be negative")
    total = 0
    for day, amount in enumerate(daily, start=1):
        total += amount
        if total >= pages:
            return day
    if sum(daily) <= 0:
        raise ValueError("the book can never be finished with this schedule")
    for day, amount in cycle(enumerate(daily, start=1)):
        total += amount
        if total >= pages:
            return day
    raise AssertionError("unreachable")


def _lena_line(n: int, level: int) -> str:
    numbers = [*range(level + 1), *range(level - 1, -1, -1)]
    return "  " * (n - level) + " ".join(map(str, numbers))


def lena_pattern(n: int) -> list[str]:
    """Lines of the digit rhombus with ``n`` in its centre."""
    levels = [*range(n + 1), *range(n - 1, -1, -1)]
    return [_lena_line(n, level) for level in levels]


def decrypt_repeating_cipher(text: str) -> str:
    """Recover a word whose i-th letter was written i times in a row."""
    result = []
    index = step = 0
    while index < len(text):
        result.append(text[index])
        step += 1
        index += step
    return "".join(result)


def max_toasts(n: int, k: int, l: int, c: int, d: int, p: int, nl: int, np: int) -> int:
    """Toasts each of ``n`` friends can make with the drink, limes and salt."""
    drink = (k * l) // nl
    limes = c * d
    salt = p // np
    return min(drink, limes, salt) // n


def banana_debt(k: int, n: int, w: int) -> int:
    """Dollars to borrow to buy ``w`` bananas, the i-th costing ``i * k``."""
    cost = sum(k * i for i in range(1, w + 1))
    return max(0, cost - n)


def string_task(s: str) -> str:
    """Drop vowels, lower-case the rest and put a dot before each consonant."""
    return "".join(f".{char}" for char in s.lower() if char not in VOWELS)


def round_summands(n: int) -> list[int]:
    """Round numbers summing to ``n``, least significant first."""
    if n < 0:
        raise ValueError("n must not be negative")
    summands = []
    power = 1
    while n:
        n, digit = divmod(n, 10)
        if digit:
            summands.append(digit * power)
        power *= 10
    return summands


def tram_capacity(stops: Iterable[tuple[int, int]]) -> int:
    """Smallest tram capacity for stops given as (exiting, entering) pairs."""
    passengers = capacity = 0
    for exiting, entering in stops:
        passengers += entering - exiting
        capacity = max(capacity, passengers)
    return capacity


def pyramid_height(n: int) -> int:
    """Tallest pyramid buildable from ``n`` cubes; level i holds i(i+1)/2."""
    height = used = 0
    level = 1
    while used + level * (level + 1) // 2 <= n:
        used += level * (level + 1) // 2
        height += 1
        level += 1
    return height


def capitalize_word(word: str) -> str:
    """Upper-case the first letter, leaving the rest unchanged."""
    if word and "a" <= word[0] <= "z":
        return word[0].upper() + word[1:]
    return word


def wrong_subtraction(n: int, k: int) -> int:
    """Apply Tanya's subtraction ``k`` times: drop a trailing zero or decrement."""
    for _ in range(k):
        if n % 10 == 0:
            n //= 10
        else:
            n -= 1
    return n


def invert_digits(number: int | str) -> str:
    """Smallest number from inverting digits (d to 9 - d) without a leading zero."""
    digits = str(number)
    if not digits:
        raise ValueError("number must not be empty")

    def flip(digit: str) -> str:
        value = int(digit)
        return str(9 - value) if value > 4 else digit

    first = digits[0] if digits[0] == "9" else flip(digits[0])
    return first + "".join(flip(digit) for digit in digits[1:])


def k_string(k: int, s: str) -> str | None:
    """Rearrange ``s`` into ``k`` copies of one string, or None if impossible."""
    if k <= 0:
        raise ValueError("k must be positive")
    base = []
    for char, count in Counter(s).items():
        if count % k:
            return None
        base.append(char * (count // k))
    return "".join(base) * k