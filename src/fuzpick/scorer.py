"""Fuzzy scoring and ranking (pure functions, no I/O).

A query matches a candidate when its characters appear in the candidate in
order. Among all such alignments the best one decides the score: every
matched character is worth 1, characters that start a word are worth 3 more,
and each matched character sitting right after the previous one earns 2.
"""

from bisect import bisect_right
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .models import MatchResult

BASE_WEIGHT = 1
BOUNDARY_BONUS = 3
CONTIGUITY_BONUS = 2


def is_boundary(text: str, index: int) -> bool:
    """True if text[index] starts a word (string start, after punctuation, or uppercase)."""
    if index == 0:
        return True
    if not text[index - 1].isalnum():
        return True
    return text[index].isupper()


def char_weights(text: str) -> List[int]:
    """Per-character weight: base weight plus a single boundary bonus."""
    return [
        BASE_WEIGHT + (BOUNDARY_BONUS if is_boundary(text, i) else 0)
        for i in range(len(text))
    ]


def max_score(weights: Sequence[int]) -> int:
    """Best conceivable absolute score for a text with these weights."""
    return sum(weights) + max(len(weights) - 1, 0)


def index_positions(text: str) -> Dict[str, List[int]]:
    """Group the indices of text by character, each list ascending."""
    positions: Dict[str, List[int]] = {}
    for i, ch in enumerate(text):
        positions.setdefault(ch, []).append(i)
    return positions


def iter_alignments(text: str, abbreviation: str) -> Iterator[Tuple[int, ...]]:
    """Yield every strictly increasing index tuple spelling abbreviation in text."""
    positions = index_positions(text)

    def walk(qi: int, prev: int) -> Iterator[Tuple[int, ...]]:
        if qi == len(abbreviation):
            yield ()
            return
        candidates = positions.get(abbreviation[qi], [])
        for idx in candidates[bisect_right(candidates, prev):]:
            for rest in walk(qi + 1, idx):
                yield (idx,) + rest

    return walk(0, -1)


def alignment_score(weights: Sequence[int], alignment: Sequence[int]) -> int:
    """Absolute score of one alignment."""
    total = sum(weights[i] for i in alignment)
    for prev, cur in zip(alignment, alignment[1:]):
        if cur == prev + 1:
            total += CONTIGUITY_BONUS
    return total


def best_alignment_score(text: str, abbreviation: str) -> Optional[int]:
    """Maximum absolute score over all alignments, or None if there are none.

    Equivalent to max(alignment_score(...) for every alignment), computed
    one query character at a time: `best[i]` is the best score of the query
    prefix so far with its last character matched at text[i]. Each step
    needs only the best earlier end (a running maximum) and the end right
    before i (for the contiguity bonus), so the cost is linear per query
    character and there is no recursion.
    """
    if not abbreviation:
        return 0
    weights = char_weights(text)
    positions = index_positions(text)

    best: Dict[int, int] = {i: weights[i] for i in positions.get(abbreviation[0], [])}
    for ch in abbreviation[1:]:
        ends = list(best)  # ascending: built from ascending positions
        current: Dict[int, int] = {}
        running: Optional[int] = None
        k = 0
        for idx in positions.get(ch, []):
            while k < len(ends) and ends[k] < idx:
                value = best[ends[k]]
                if running is None or value > running:
                    running = value
                k += 1
            if running is None:
                continue
            prior = running
            if idx - 1 in best:
                prior = max(prior, best[idx - 1] + CONTIGUITY_BONUS)
            current[idx] = weights[idx] + prior
        if not current:
            return None
        best = current
    return max(best.values()) if best else None


def score(text: str, abbreviation: str) -> float:
    """Match quality of abbreviation against text, in [0, 1].

    Matching is case-sensitive; only the boundary bonus looks at case.
    """
    if text == abbreviation or not abbreviation:
        return 1.0
    if len(abbreviation) > len(text):
        return 0.0
    best = best_alignment_score(text, abbreviation)
    if best is None:
        return 0.0
    return min(1.0, best / max_score(char_weights(text)))


def rank(candidates: Sequence[str], query: str) -> List[MatchResult]:
    """Score every candidate and return the matches, best first.

    Candidates scoring zero are dropped. Equal scores keep input order.
    """
    results = []
    for text in candidates:
        s = score(text, query)
        if s > 0:
            results.append(MatchResult(text=text, score=s))
    results.sort(key=lambda m: m.score, reverse=True)
    return results
