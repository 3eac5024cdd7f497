"""Problems solved with a stack: expressions, paths, collisions and histograms."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

_OPERATIONS = {"+", "-", "*", "/"}
_CLOSERS = {")": "(", "]": "[", "}": "{"}


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer reverse Polish notation; division truncates toward zero."""
    stack: list[int] = []
    for token in tokens:
        if token not in _OPERATIONS:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} lacks operands")
        right = stack.pop()
        left = stack.pop()
        if token == "+":
            stack.append(left + right)
        elif token == "-":
            stack.append(left - right)
        elif token == "*":
            stack.append(left * right)
        else:
            stack.append(_truncating_div(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order."""
    stack: list[str] = []
    for char in s:
        if stack and _CLOSERS.get(char) == stack[-1]:
            stack.pop()
        else:
            stack.append(char)
    return not stack


def generate_parentheses(n: int) -> list[str]:
    """Return every well-formed string of ``n`` pairs of parentheses."""

    def walk(opening: int, closing: int, path: list[str]) -> Iterator[str]:
        if opening == 0 and closing == 0:
            yield "".join(path)
            return
        if opening > 0:
            path.append("(")
            yield from walk(opening - 1, closing, path)
            path.pop()
        if opening < closing:
            path.append(")")
            yield from walk(opening, closing - 1, path)
            path.pop()

    return list(walk(n, n, []))


def decode_string(s: str) -> str:
    """Expand ``k[text]`` groups, nested to any depth."""
    saved: list[tuple[str, int]] = []
    current = ""
    count = 0
    for char in s:
        if char.isdigit():
            count = count * 10 + int(char)
        elif char == "[":
            saved.append((current, count))
            current, count = "", 0
        elif char == "]":
            previous, repeat = saved.pop()
            current = previous + current * repeat
        else:
            current += char
    return current


def cal_points(operations: Iterable[str]) -> int:
    """Score a baseball game: integers, '+' (sum of last two), 'D' (double), 'C' (cancel)."""
    scores: list[int] = []
    for op in operations:
        if op == "+":
            scores.append(scores[-2] + scores[-1])
        elif op == "D":
            scores.append(scores[-1] * 2)
        elif op == "C":
            scores.pop()
        else:
            scores.append(int(op))
    return sum(scores)


def simplify_path(path: str) -> str:
    """Return the canonical form of an absolute Unix-style ``path``."""
    parts: list[str] = []
    for token in path.split("/"):
        if not token or token == ".":
            continue
        if token == "..":
            if parts:
                parts.pop()
        else:
            parts.append(token)
    return "/" + "/".join(parts)


def asteroid_collision(asteroids: Iterable[int]) -> list[int]:
    """Return the asteroids left after all collisions; the sign gives the direction."""
    stack: list[int] = []
    for a in asteroids:
        if not stack or a > 0:
            stack.append(a)
            continue
        while stack and 0 < stack[-1] < -a:
            stack.pop()
        if not stack or stack[-1] < 0:
            stack.append(a)
        elif stack[-1] == -a:
            stack.pop()
    return stack


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """Return, for each day, the days to wait for a warmer one, or 0 if none comes."""
    answer = [0] * len(temperatures)
    waiting: list[int] = []
    for i, temp in enumerate(temperatures):
        while waiting and temperatures[waiting[-1]] < temp:
            j = waiting.pop()
            answer[j] = i - j
        waiting.append(i)
    return answer


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle within the histogram ``heights``."""
    best = 0
    rising: list[tuple[int, int]] = []
    for i, height in enumerate(heights):
        start = i
        while rising and rising[-1][1] > height:
            index, top = rising.pop()
            best = max(best, top * (i - index))
            start = index
        rising.append((start, height))
    n = len(heights)
    for index, top in rising:
        best = max(best, top * (n - index))
    return best


def car_fleet(target: int, position: Sequence[int], speed: Sequence[int]) -> int:
    """Return how many fleets of cars reach ``target``."""
    cars = sorted(
        (pos, (target - pos) / spd) for pos, spd in zip(position, speed)
    )
    arrivals: list[float] = []
    for _, time in cars:
        while arrivals and arrivals[-1] <= time:
            arrivals.pop()
        arrivals.append(time)
    return len(arrivals)