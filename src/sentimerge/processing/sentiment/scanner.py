"""Modifier-aware token scanner.

Walks a token stream once, left to right. A negation marker or intensifier
arms a modifier that is applied to the next sentiment-bearing token and then
cleared. Unknown and zero-valence tokens leave armed modifiers untouched, so a
modifier may reach past any number of neutral words.
"""

from collections.abc import Iterable, Mapping

from sentimerge.core.constants import INTENSIFIER_THRESHOLD, NEGATION_SCALAR
from sentimerge.processing.sentiment.models import ScanResult, ScanState


def scan(
    tokens: Iterable[str],
    lexicon: Mapping[str, float],
    negations: frozenset[str] | set[str],
) -> ScanResult:
    """Accumulate signed lexicon contributions over a token stream.

    Args:
        tokens: Lower-cased tokens.
        lexicon: Token to valence mapping. Entries with |valence| < 1.0 act
            as intensifiers.
        negations: Tokens that invert the next sentiment-bearing token.

    Returns:
        ScanResult with the raw score, hit count and positive/negative hits.
    """
    state = ScanState()

    for token in tokens:
        # Negation takes priority over any lexicon entry for the same token
        if token in negations:
            state.negated = True
            continue

        valence = lexicon.get(token)
        if valence is None:
            continue

        if abs(valence) < INTENSIFIER_THRESHOLD:
            state.intensifier_factor += abs(valence)
            continue

        word_score = valence * state.intensifier_factor
        if state.negated:
            word_score *= NEGATION_SCALAR

        state.score += word_score
        state.count += 1
        if word_score > 0:
            state.positive.append((token, valence))
        else:
            state.negative.append((token, valence))

        state.reset_modifiers()

    return ScanResult(
        raw_score=state.score,
        count=state.count,
        positive=tuple(state.positive),
        negative=tuple(state.negative),
    )
