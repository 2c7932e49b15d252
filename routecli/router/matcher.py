"""
Typo correction for command names.

When no exact prefix matches, the matcher scores every registered command
by Levenshtein distance and offers the closest ones as suggestions. A
suggestion is never executed on its own; the dispatcher decides what to
do with it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .flags import is_flag
from .registry import CommandRegistry, HandlerDescriptor

lg = logging.getLogger(__name__)


def levenshtein(a: str, b: str) -> int:
    """
    Minimum number of single-character edits turning a into b.

    Uses the two-row formulation of the Wagner-Fischer matrix.
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i]
        for j, cb in enumerate(b, 1):
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + (ca != cb),  # substitution
                )
            )
        previous = current
    return previous[-1]


def threshold(a: str, b: str) -> int:
    """Largest distance still considered close, scaled by the shorter string."""
    return max(1, min(len(a), len(b)) // 4)


@dataclass(frozen=True)
class Suggestion:
    """A command offered as a correction."""

    descriptor: HandlerDescriptor
    distance: int
    matched: str  # the name or alias that scored best

    @property
    def name(self) -> str:
        return self.descriptor.name


def command_words(tokens: Sequence[str]) -> list[str]:
    """Leading non-flag tokens, lowercased."""
    words = []
    for token in tokens:
        if is_flag(token):
            break
        words.append(token.lower())
    return words


class Matcher:
    """Finds registered commands close to a mistyped invocation."""

    def __init__(self, registry: CommandRegistry) -> None:
        self._registry = registry

    def _score(self, words: list[str], spelling: str) -> int | None:
        """Distance between a spelling and the input, or None if too far."""
        width = len(spelling.split(" "))
        query = " ".join(words[:width])
        distance = levenshtein(query, spelling)
        if distance > threshold(query, spelling):
            return None
        return distance

    def suggest(self, tokens: Sequence[str]) -> list[Suggestion]:
        """
        Rank registered commands by closeness to the input.

        Canonical names are scored first, then aliases; a command keeps its
        best distance. Every command at the minimum distance is returned,
        in registration order.

        Args:
            tokens: Invocation tokens, command words first

        Returns:
            Suggestions at the minimum distance, empty if nothing is close
        """
        words = command_words(tokens)
        if not words:
            return []

        best: dict[str, Suggestion] = {}
        for descriptor in self._registry:
            for spelling in descriptor.spellings:
                distance = self._score(words, spelling)
                if distance is None:
                    continue
                current = best.get(descriptor.name)
                if current is None or distance < current.distance:
                    best[descriptor.name] = Suggestion(descriptor, distance, spelling)

        if not best:
            lg.debug("no suggestions for %r", " ".join(words))
            return []

        minimum = min(s.distance for s in best.values())
        result = [s for s in best.values() if s.distance == minimum]
        lg.debug(
            "suggestions for %r at distance %d: %s",
            " ".join(words),
            minimum,
            [s.name for s in result],
        )
        return result

    def resolve(self, tokens: Sequence[str]) -> Suggestion | None:
        """The single closest command, or None when zero or several tie."""
        suggestions = self.suggest(tokens)
        return suggestions[0] if len(suggestions) == 1 else None
