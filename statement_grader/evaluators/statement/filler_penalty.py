"""
Filler Penalty - Detect low-value, cliched and vague language

Two passes:
1. Sentence pass: every sentence is tested against eight pattern families;
   each matching pattern adds its family increment.
2. Whole-text pass: first-person overuse, repetitive sentence openings,
   and long statements without concrete-example markers.

The total is capped and is subtracted from the weighted criterion score.
"""

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Tuple

from ...config import PENALTY_CAP
from .statement_features import split_sentences
from .statement_taxonomies import (
    FILLER_PATTERNS, WHOLE_TEXT_LABELS,
    FIRST_PERSON_RATIO_LIMIT, FIRST_PERSON_PENALTY,
    STARTER_LENGTH, STARTER_DIVERSITY_LIMIT, STARTER_DIVERSITY_PENALTY,
    LONG_STATEMENT_LENGTH, MIN_CONCRETE_MARKERS, NO_CONCRETE_EXAMPLES_PENALTY,
    CONCRETE_MARKER_PATTERN,
)


@dataclass(frozen=True)
class FillerHit:
    """One penalty increment"""

    family: str
    label: str
    increment: float
    sentence: str = ""  # empty for whole-text checks


@dataclass(frozen=True)
class FillerReport:
    """Capped penalty and the hits that produced it"""

    penalty: float
    raw_penalty: float
    hits: List[FillerHit] = field(default_factory=list)

    @property
    def labels(self) -> List[str]:
        return [hit.label for hit in self.hits]

    def to_dict(self) -> dict:
        return {
            'penalty': self.penalty,
            'raw_penalty': self.raw_penalty,
            'hits': [
                {'family': hit.family, 'label': hit.label, 'increment': hit.increment, 'sentence': hit.sentence}
                for hit in self.hits
            ],
        }


@lru_cache(maxsize=1)
def _compiled_families() -> Tuple[Tuple[str, str, float, Tuple['re.Pattern', ...]], ...]:
    return tuple(
        (family, data['label'], data['weight'], tuple(re.compile(p) for p in data['patterns']))
        for family, data in FILLER_PATTERNS.items()
    )


def _sentence_hits(sentences: List[str]) -> List[FillerHit]:
    hits = []
    for sentence in sentences:
        lowered = sentence.lower()
        for family, label, weight, patterns in _compiled_families():
            for pattern in patterns:
                if pattern.search(lowered):
                    hits.append(FillerHit(family, label, weight, sentence))
    return hits


def _whole_text_hits(text: str, sentences: List[str]) -> List[FillerHit]:
    hits = []
    if not sentences:
        return hits

    # First-person overuse
    first_person = len(re.findall(r'\bi\s', text, re.IGNORECASE))
    if first_person / len(sentences) > FIRST_PERSON_RATIO_LIMIT:
        hits.append(FillerHit('first_person', WHOLE_TEXT_LABELS['first_person'], FIRST_PERSON_PENALTY))

    # Sentence-opening diversity
    starters = {sentence[:STARTER_LENGTH].lower() for sentence in sentences}
    if len(starters) / len(sentences) < STARTER_DIVERSITY_LIMIT:
        hits.append(FillerHit(
            'repetitive_openings', WHOLE_TEXT_LABELS['repetitive_openings'], STARTER_DIVERSITY_PENALTY
        ))

    # Long text without concrete examples
    concrete = len(re.findall(CONCRETE_MARKER_PATTERN, text, re.IGNORECASE))
    if len(text) > LONG_STATEMENT_LENGTH and concrete < MIN_CONCRETE_MARKERS:
        hits.append(FillerHit(
            'no_concrete_examples', WHOLE_TEXT_LABELS['no_concrete_examples'], NO_CONCRETE_EXAMPLES_PENALTY
        ))

    return hits


def detect_filler_language(text: str) -> FillerReport:
    """
    Scan a statement for filler language

    Args:
        text: Statement text

    Returns:
        FillerReport with the capped penalty (0-3) and every hit
    """
    if not text or not text.strip():
        return FillerReport(penalty=0.0, raw_penalty=0.0)

    sentences = split_sentences(text)
    hits = _sentence_hits(sentences) + _whole_text_hits(text, sentences)

    raw = sum(hit.increment for hit in hits)
    return FillerReport(
        penalty=round(min(raw, PENALTY_CAP), 2),
        raw_penalty=round(raw, 2),
        hits=hits,
    )


def compute_filler_penalty(text: str) -> float:
    """Capped filler penalty in [0, 3]"""
    return detect_filler_language(text).penalty
