"""
Commit type lookup by key or alias, with edit-distance suggestions.
"""

from collections import Counter
from typing import Iterable, List, Optional

from ..config.schema import CommitType


def find_commit_type(commit_types: Iterable[CommitType], name: str) -> Optional[CommitType]:
    """Resolve ``name`` to a commit type, matching keys before aliases."""
    commit_types = list(commit_types)
    for commit_type in commit_types:
        if commit_type.type == name:
            return commit_type
    for commit_type in commit_types:
        if name in (commit_type.aliases or []):
            return commit_type
    return None


def levenshtein(a: str, b: str) -> int:
    """Classic edit distance between two strings."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, 1):
        current = [i]
        for j, char_b in enumerate(b, 1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (char_a != char_b),
            ))
        previous = current
    return previous[-1]


def suggest_commit_type(
    name: str,
    commit_types: Iterable[CommitType],
    max_distance: int = 2,
) -> Optional[CommitType]:
    """Closest commit type to a misspelled ``name`` within ``max_distance`` edits."""
    best: Optional[CommitType] = None
    best_distance = max_distance + 1
    needle = name.lower()

    for commit_type in commit_types:
        for candidate in [commit_type.type, *(commit_type.aliases or [])]:
            distance = levenshtein(needle, candidate.lower())
            if distance < best_distance:
                best, best_distance = commit_type, distance

    return best


def find_duplicate_types(commit_types: Iterable[CommitType]) -> List[str]:
    """Commit type keys that appear more than once, in first-seen order."""
    counts = Counter(commit_type.type for commit_type in commit_types)
    return [name for name, count in counts.items() if count > 1]
