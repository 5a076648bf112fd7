# src/buildflags/utils/utils_text.py

from collections.abc import Iterable


def levenshtein_distance(a: str, b: str) -> int:
    """Classic Levenshtein edit distance (insert, delete, substitute).

    Case-sensitive and symmetric. Uses a two-row table.
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ch_a in enumerate(a, start=1):
        current = [i]
        for j, ch_b in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + (ch_a != ch_b),  # substitution
                )
            )
        previous = current
    return previous[-1]


def closest_match(
    word: str, candidates: Iterable[str]
) -> tuple[str | None, int | None]:
    """Return the candidate nearest to `word` and its distance.

    Exact matches of `word` are never returned. On ties the earliest
    candidate wins. Returns (None, None) when there is nothing to compare.
    """
    best: str | None = None
    best_distance: int | None = None
    for candidate in candidates:
        if candidate == word:
            continue
        distance = levenshtein_distance(word, candidate)
        if best_distance is None or distance < best_distance:
            best, best_distance = candidate, distance
    return best, best_distance
