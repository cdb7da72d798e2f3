"""
Statement Features - Extract content signals from statement text

This module handles all text analysis shared by scoring and feedback:
- Book title candidates, academic vocabulary, research and course mentions
- Progression phrases vs activity-listing patterns
- Connectors, passion, cliche, filler and vague-statement markers
- Subject domain, technical depth and basic text statistics

Phrases match case-insensitively at the start of a word, so "link" also
finds "linked" while "read" does not fire inside "already".
"""

import re
from dataclasses import asdict, dataclass, field
from functools import lru_cache
from typing import Callable, Dict, List, Optional, Tuple

from .statement_taxonomies import (
    BOOK_CONTEXT_WORDS, ACADEMIC_TERMS, RESEARCH_MENTIONS, COURSE_REFERENCES,
    PROGRESSION_PHRASES, LISTING_PATTERNS, CONNECTION_WORDS, PASSION_INDICATORS,
    PERSONAL_REFLECTION, FILLER_INDICATORS, CLICHES, VAGUE_STATEMENTS,
    TECHNICAL_DEPTH_TERMS, PROPER_NOUN_STOPWORDS, SUBJECT_KEYWORDS,
    FEATURE_LIST_CAP, SPECIFIC_EXAMPLE_CAP, MIN_SENTENCE_LENGTH,
)

QUOTED_TITLE_PATTERN = r"[\"“‘']([A-Z][^\"”’'\n]{2,80}?)[\"”’']"
NAME_PAIR_PATTERN = r"\b[A-Z][a-z]+ [A-Z][a-z]+\b"
PROPER_NOUN_PATTERN = r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*"
NUMBER_PATTERN = r"\d+(?:\.\d+)?%?"


@dataclass(frozen=True)
class FeatureSet:
    """Content signals extracted from one statement"""

    books: List[str] = field(default_factory=list)
    academic_terms: List[str] = field(default_factory=list)
    research_mentions: List[str] = field(default_factory=list)
    course_references: List[str] = field(default_factory=list)
    progression_phrases: List[str] = field(default_factory=list)
    listing_patterns: int = 0  # total occurrences, not distinct phrases
    connection_words: List[str] = field(default_factory=list)
    passion_indicators: List[str] = field(default_factory=list)
    specific_examples: List[str] = field(default_factory=list)
    personal_reflection: List[str] = field(default_factory=list)
    filler_phrases: List[str] = field(default_factory=list)
    cliches: List[str] = field(default_factory=list)
    vague_statements: List[str] = field(default_factory=list)
    subject: Optional[str] = None
    technical_depth: int = 0

    # Text statistics
    character_count: int = 0
    word_count: int = 0
    sentence_count: int = 0
    paragraph_count: int = 0

    def to_dict(self) -> Dict:
        return asdict(self)


# ==================== PHRASE MATCHING ====================

@lru_cache(maxsize=2048)
def phrase_pattern(phrase: str) -> 're.Pattern':
    """Word-start pattern for a phrase; short final words must end at a boundary"""
    last_word = phrase.split()[-1] if phrase.split() else phrase
    suffix = r'\b' if len(last_word) <= 2 else ''
    return re.compile(r'\b' + re.escape(phrase) + suffix, re.IGNORECASE)


def contains_phrase(text: str, phrase: str) -> bool:
    return phrase_pattern(phrase).search(text) is not None


def find_phrases(text: str, phrases: List[str]) -> List[str]:
    """Distinct phrases present in text, in table order"""
    return [phrase for phrase in phrases if contains_phrase(text, phrase)]


def count_phrases(text: str, phrases: List[str]) -> int:
    """Number of distinct phrases present"""
    return len(find_phrases(text, phrases))


def count_occurrences(text: str, phrases: List[str]) -> int:
    """Total occurrences of all phrases"""
    return sum(len(phrase_pattern(phrase).findall(text)) for phrase in phrases)


def split_sentences(text: str) -> List[str]:
    """Terminator-delimited fragments longer than the minimum sentence length"""
    return [s.strip() for s in re.split(r'[.!?]+', text) if len(s.strip()) > MIN_SENTENCE_LENGTH]


def split_paragraphs(text: str) -> List[str]:
    return [p for p in re.split(r'\n\s*\n', text) if p.strip()]


# ==================== EXTRACTORS ====================

def _capped(items: List[str], cap: int = FEATURE_LIST_CAP) -> List[str]:
    return items[:cap]


def _extract_books(text: str) -> List[str]:
    """Quoted titles first, then capitalised name pairs near reading vocabulary"""

    books = []
    for match in re.finditer(QUOTED_TITLE_PATTERN, text):
        title = match.group(1).strip()
        if title and title not in books:
            books.append(title)

    paired = []
    for sentence in split_sentences(text):
        if not find_phrases(sentence, BOOK_CONTEXT_WORDS):
            continue
        for pair in re.findall(NAME_PAIR_PATTERN, sentence):
            if pair.split()[0] in PROPER_NOUN_STOPWORDS:
                continue
            if pair not in books and pair not in paired and not any(pair in book for book in books):
                paired.append(pair)

    return _capped(books + paired[:3])


def _extract_specific_examples(text: str) -> List[str]:
    """Quantified results plus proper nouns that do not just open a sentence"""

    examples = []
    numbers = re.findall(NUMBER_PATTERN, text)
    if numbers:
        examples.append(f"quantified results ({len(numbers)})")

    for match in re.finditer(PROPER_NOUN_PATTERN, text):
        name = match.group(0)
        if name in PROPER_NOUN_STOPWORDS or name in examples:
            continue
        prefix = text[:match.start()].rstrip()
        opens_sentence = not prefix or prefix[-1] in '.!?"\''
        if opens_sentence and ' ' not in name:
            continue
        examples.append(name)

    return _capped(examples, SPECIFIC_EXAMPLE_CAP)


def _extract_subject(text: str) -> Optional[str]:
    for subject, keywords in SUBJECT_KEYWORDS.items():
        if find_phrases(text, keywords):
            return subject
    return None


def _phrase_list(phrases: List[str]) -> Callable[[str], List[str]]:
    return lambda text: _capped(find_phrases(text, phrases))


# Ordered collection of named extractors
FEATURE_EXTRACTORS: List[Tuple[str, Callable[[str], object]]] = [
    ('books', _extract_books),
    ('academic_terms', _phrase_list(ACADEMIC_TERMS)),
    ('research_mentions', _phrase_list(RESEARCH_MENTIONS)),
    ('course_references', _phrase_list(COURSE_REFERENCES)),
    ('progression_phrases', _phrase_list(PROGRESSION_PHRASES)),
    ('listing_patterns', lambda text: count_occurrences(text, LISTING_PATTERNS)),
    ('connection_words', _phrase_list(CONNECTION_WORDS)),
    ('passion_indicators', _phrase_list(PASSION_INDICATORS)),
    ('specific_examples', _extract_specific_examples),
    ('personal_reflection', _phrase_list(PERSONAL_REFLECTION)),
    ('filler_phrases', _phrase_list(FILLER_INDICATORS)),
    ('cliches', _phrase_list(CLICHES)),
    ('vague_statements', _phrase_list(VAGUE_STATEMENTS)),
    ('subject', _extract_subject),
    ('technical_depth', lambda text: count_phrases(text, TECHNICAL_DEPTH_TERMS)),
    ('character_count', len),
    ('word_count', lambda text: len(text.split())),
    ('sentence_count', lambda text: len(split_sentences(text))),
    ('paragraph_count', lambda text: len(split_paragraphs(text))),
]


def extract_features(text: str) -> FeatureSet:
    """Extract all content features from statement text"""

    if not text or not text.strip():
        return FeatureSet()

    return FeatureSet(**{name: extractor(text) for name, extractor in FEATURE_EXTRACTORS})
