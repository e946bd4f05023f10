"""Solutions to introductory number-theory and arithmetic problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cpsolve.constructive import lena_pattern

FIRST_PLAYER = "Mahmoud"
SECOND_PLAYER = "Ehab"


def emote_happiness(values: Sequence[int], m: int, k: int) -> int:
    """Greatest happiness from ``m`` emotes, never using one more than ``k`` times in a row."""
    if len(values) < 2:
        raise ValueError("at least two emotes are required")
    if k <= 0:
        raise ValueError("k must be positive")
    *_, second, best = sorted(values)
    blocks, rest = divmod(m, k + 1)
    return (k * best + second) * blocks + rest * best


def restore_numbers(a: int, b: int, c: int, d: int) -> list[int]:
    """Recover three numbers from their pairwise sums and their total, in any order."""
    total = max(a, b, c, d)
    return [total - value for value in (a, b, c, d) if total - value != 0]


def candy_splits(n: int) -> int:
    """Ways to split ``n`` candies so the first sister gets strictly more, both getting some."""
    return 0 if n < 2 else (n - 1) // 2


def balanced_array(n: int) -> list[int] | None:
    """Distinct positive numbers: n/2 evens then n/2 odds with equal sums, or None."""
    if n <= 0 or n % 2:
        raise ValueError("n must be a positive even number")
    half = n // 2
    if half % 2:
        return None
    evens = list(range(2, 2 * half + 1, 2))
    odds = list(range(1, 2 * half - 2, 2))
    odds.append(evens[-1] + half - 1)
    return evens + odds


def minimal_square_area(a: int, b: int) -> int:
    """Area of the smallest square holding two ``a`` by ``b`` rectangles."""
    if a < b:
        a *= 2
    else:
        b *= 2
    side = max(a, b)
    return side * side


def magical_stick(n: int) -> int:
    """Most sticks of equal length obtainable from sticks of lengths 1..n."""
    return 1 if n <= 2 else (n - 1) // 2 + 1


def moves_to_reach(a: int, b: int) -> int:
    """Moves of at most 10 up or down needed to turn ``a`` into ``b``."""
    return (abs(a - b) + 9) // 10


def buy_shovel(k: int, r: int) -> int:
    """Fewest shovels at ``k`` each payable with tens and one ``r`` coin."""
    return next(count for count in range(1, 11) if (k * count) % 10 in (0, r))


def can_make_odd_sum(values: Iterable[int]) -> bool:
    """Whether copying elements onto each other can make the array sum odd."""
    total = 0
    has_even = has_odd = False
    for value in values:
        total += value
        if value % 2:
            has_odd = True
        else:
            has_even = True
    return total % 2 == 1 or (has_even and has_odd)


def can_share_coins(a: int, b: int, c: int, n: int) -> bool:
    """Whether ``n`` coins can be handed out so the three sisters end up equal."""
    total = a + b + c + n
    if total % 3:
        return False
    share = total // 3
    return all(coins <= share for coins in (a, b, c))


def floor_number(n: int, x: int) -> int:
    """Floor of apartment ``n``: two on the first floor, ``x`` on each other."""
    if x <= 0:
        raise ValueError("x must be positive")
    if n <= 2:
        return 1
    return -(-(n - 2) // x) + 1


def triangle_sides(a: int, b: int, c: int, d: int) -> tuple[int, int, int]:
    """Triangle sides x, y, z with a <= x <= b <= y <= c <= z <= d."""
    return b, c, c


def lcm_pair(l: int, r: int) -> tuple[int, int] | None:
    """Two numbers in [l, r] whose LCM also lies in [l, r], or None."""
    if 2 * l <= r:
        return l, 2 * l
    return None


def game_winner(n: int) -> str:
    """Winner of the even-odd subtraction game starting from ``n``."""
    return FIRST_PLAYER if n % 2 == 0 else SECOND_PLAYER


def can_reach_cell(jumps: Sequence[int], t: int) -> bool:
    """Whether portals from cell 1 lead to cell ``t``; cell i jumps by ``jumps[i - 1]``."""
    position = 1
    while position < t:
        if position > len(jumps):
            raise ValueError(f"no portal leaves cell {position}")
        jump = jumps[position - 1]
        if jump <= 0:
            raise ValueError("portal jumps must be positive")
        position += jump
    return position == t


def lanterns(n: int, m: int) -> int:
    """Lanterns needed to light every cell of an ``n`` by ``m`` park."""
    return (n * m + 1) // 2


def diamond_pattern(n: int) -> list[str]:
    """Lines of the digit rhombus with ``n`` in its centre."""
    return lena_pattern(n)


def required_remainder(x: int, y: int, n: int) -> int:
    """Largest k <= n with k mod x equal to y."""
    if x <= 0:
        raise ValueError("x must be positive")
    change = (n % x - y + x) % x
    return n - change


def three_pairwise_maximums(x: int, y: int, z: int) -> tuple[int, int, int] | None:
    """Numbers a, b, c with max(a, b) = x, max(a, c) = y, max(b, c) = z, or None."""
    low, middle, high = sorted((x, y, z))
    if middle != high:
        return None
    return low, low, high


def fix_caps_lock(word: str) -> str:
    """Swap the case of a word typed with Caps Lock accidentally on."""
    if any(char.islower() for char in word[1:]):
        return word
    return word.swapcase()