"""
Evidence Scoring - Five sub-scores and a bonus for one evidence item

Sub-scores (cap):
- academic_depth (4): type-specific checklist + note / full-response bonuses
- university_relevance (3): course match, institution tier, course keywords
- personal_engagement (2): commitment and growth checks, reflective add-ons
- uniqueness (1): not an overused example, self-reported originality
- evidence_quality (2): specificity and verifiability checks

Every scorer returns (score, fired_labels). Scores are clamped to their caps
after accumulation.
"""

from typing import Dict, List, Optional, Tuple

from .evidence_items import EvidenceItem, EvidenceType, UniversityTarget
from .evidence_taxonomies import (
    SUB_SCORE_CAPS, COMPOSITE_MAX, ACADEMIC_DEPTH_RULES, BOOK_NOTE_DEPTH_BONUS,
    FULL_RESPONSE_LENGTH_TIERS, FULL_RESPONSE_VOCABULARY, FULL_RESPONSE_VOCABULARY_TIERS,
    FULL_RESPONSE_THOUGHT_LENGTH, FULL_RESPONSE_THOUGHT_BONUS,
    NO_CONTEXT_RELEVANCE, COURSE_MATCH_BONUS, INSTITUTION_TIERS, INSTITUTION_TIER_ORDER,
    DEFAULT_INSTITUTION_TIER, COURSE_KEYWORDS, COURSE_KEYWORD_HIT, COURSE_KEYWORD_WEIGHT,
    PERSONAL_ENGAGEMENT_RULES, INSIGHT_ENGAGEMENT_RULES, GENERIC_ENGAGEMENT_PENALTY,
    BOOK_NOTE_ENGAGEMENT_BONUS, REALISATION_WORDS, FULL_RESPONSE_ENGAGEMENT, CURIOSITY_WORDS,
    OVERUSED_EXAMPLES, UNCOMMON_EXAMPLE_BONUS, UNIQUENESS_RULES,
    EVIDENCE_QUALITY_RULES, BONUS_RULES,
)

Rule = Dict
Breakdown = Dict[str, float]


# ==================== RULE INTERPRETER ====================

def condition_holds(item: EvidenceItem, condition: tuple, breakdown: Optional[Breakdown] = None) -> bool:
    """Evaluate one rule condition against an evidence item"""

    kind = condition[0]
    if kind == 'flag':
        return item.flag(condition[1])
    if kind == 'any':
        return any(item.flag(name) for name in condition[1:])
    if kind == 'above':
        return item.rating(condition[1]) > condition[2]
    if kind == 'equals':
        return item.value(condition[1]) == condition[2]
    if kind == 'subtype':
        return item.subtype == condition[1]
    if kind == 'min_items':
        return len(item.items(condition[1])) > condition[2]
    if kind == 'breakdown_above':
        return breakdown is not None and breakdown.get(condition[1], 0.0) > condition[2]
    return False


def apply_rules(
    item: EvidenceItem,
    rules: List[Rule],
    breakdown: Optional[Breakdown] = None
) -> Tuple[float, List[str]]:
    """
    Sum the weights of every rule whose conditions all hold

    Returns: (total, fired_labels)
    """
    total = 0.0
    fired = []
    for rule in rules:
        if all(condition_holds(item, condition, breakdown) for condition in rule['requires']):
            total += rule['weight']
            fired.append(rule['label'])
    return total, fired


def _clamp(score: float, cap: float) -> float:
    return min(max(score, 0.0), cap)


def _keyword_hits(text: str, keywords: List[str]) -> int:
    text_lower = text.lower()
    return sum(1 for keyword in keywords if keyword in text_lower)


# ==================== ACADEMIC DEPTH ====================

def score_academic_depth(item: EvidenceItem) -> Tuple[float, List[str]]:
    """Type checklist plus note and full-response bonuses, capped at 4"""

    score, fired = apply_rules(item, ACADEMIC_DEPTH_RULES.get(item.type_name, []))

    if item.kind is EvidenceType.BOOK and item.notes:
        score += BOOK_NOTE_DEPTH_BONUS['has_notes']
        if len(item.notes) >= 2:
            score += BOOK_NOTE_DEPTH_BONUS['multiple_notes']
        if any(len(note) > BOOK_NOTE_DEPTH_BONUS['detailed_note_length'] for note in item.notes):
            score += BOOK_NOTE_DEPTH_BONUS['detailed_note']
        fired.append('Reading notes attached')

    if item.kind is EvidenceType.INSIGHT and item.subtype == 'full_response':
        bonus = _full_response_depth(item)
        if bonus:
            score += bonus
            fired.append('Developed written response')

    return _clamp(score, SUB_SCORE_CAPS['academic_depth']), fired


def _response_text(item: EvidenceItem) -> str:
    """Saved response body: 'evidence', then 'content', then the description"""
    return item.text('evidence') or item.text('content') or item.description


def _full_response_depth(item: EvidenceItem) -> float:
    content = _response_text(item)
    bonus = 0.0

    for length, points in FULL_RESPONSE_LENGTH_TIERS:
        if len(content) > length:
            bonus += points

    vocabulary = _keyword_hits(content, FULL_RESPONSE_VOCABULARY)
    for minimum, points in FULL_RESPONSE_VOCABULARY_TIERS:
        if vocabulary >= minimum:
            bonus += points

    if len(item.text('original_thought')) > FULL_RESPONSE_THOUGHT_LENGTH:
        bonus += FULL_RESPONSE_THOUGHT_BONUS

    return bonus


# ==================== UNIVERSITY RELEVANCE ====================

def resolve_institution_tier(name: str) -> str:
    """First tier whose name list matches the institution, else the default tier"""
    name_lower = name.lower()
    for tier in INSTITUTION_TIER_ORDER:
        if any(candidate in name_lower for candidate in INSTITUTION_TIERS[tier]['names']):
            return tier
    return DEFAULT_INSTITUTION_TIER


def resolve_course_keywords(course: str) -> List[str]:
    """Keyword list of the first course entry contained in the course name"""
    course_lower = course.lower()
    for course_name, keywords in COURSE_KEYWORDS.items():
        if course_name in course_lower:
            return keywords
    return []


def score_university_relevance(
    item: EvidenceItem,
    context: Optional[UniversityTarget]
) -> Tuple[float, List[str]]:
    """Course match, institution tier and course keywords, capped at 3"""

    if context is None:
        return NO_CONTEXT_RELEVANCE, ['No target university']

    score = 0.0
    fired = []
    course = context.course.strip().lower()

    # Course match
    if course and course in item.subject_area.lower():
        relevant_to = [entry.lower() for entry in item.relevant_to]
        if item.flag('course_connection') and course in relevant_to:
            score += COURSE_MATCH_BONUS['connected']
            fired.append('Explicitly connected to course')
        else:
            score += COURSE_MATCH_BONUS['subject_only']
            fired.append('Same subject area as course')

    # Institution tier
    tier = resolve_institution_tier(context.name)
    tier_score, tier_fired = apply_rules(item, INSTITUTION_TIERS[tier]['rules'])
    score += tier_score
    fired.extend(tier_fired)

    # Course keywords
    keywords = resolve_course_keywords(course)
    searchable = ' '.join([item.description, item.text('learning'), item.text('reflection')])
    if keywords and _keyword_hits(searchable, keywords):
        score += COURSE_KEYWORD_HIT * COURSE_KEYWORD_WEIGHT
        fired.append('Course vocabulary')

    return _clamp(score, SUB_SCORE_CAPS['university_relevance']), fired


# ==================== PERSONAL ENGAGEMENT ====================

def score_personal_engagement(item: EvidenceItem) -> Tuple[float, List[str]]:
    """Commitment and growth checks plus type add-ons, clamped to [0, 2]"""

    score, fired = apply_rules(item, PERSONAL_ENGAGEMENT_RULES)

    if item.kind is EvidenceType.INSIGHT:
        insight_score, insight_fired = apply_rules(item, INSIGHT_ENGAGEMENT_RULES)
        score += insight_score
        fired.extend(insight_fired)
        if item.subtype == 'full_response':
            score += _full_response_engagement(item)

    if item.kind is EvidenceType.BOOK and item.notes:
        score += BOOK_NOTE_ENGAGEMENT_BONUS['has_notes']
        if len(item.notes) >= 2:
            score += BOOK_NOTE_ENGAGEMENT_BONUS['multiple_notes']
        if any(len(note) > BOOK_NOTE_ENGAGEMENT_BONUS['detailed_note_length'] for note in item.notes):
            score += BOOK_NOTE_ENGAGEMENT_BONUS['detailed_note']
        if any(_keyword_hits(note, REALISATION_WORDS) for note in item.notes):
            score += BOOK_NOTE_ENGAGEMENT_BONUS['realisation']
        fired.append('Reflective reading notes')

    penalty, penalty_fired = apply_rules(item, [GENERIC_ENGAGEMENT_PENALTY])
    score += penalty
    fired.extend(penalty_fired)

    return _clamp(score, SUB_SCORE_CAPS['personal_engagement']), fired


def _full_response_engagement(item: EvidenceItem) -> float:
    thought = item.text('original_thought')
    content = _response_text(item).lower()
    bonus = 0.0

    if len(thought) > FULL_RESPONSE_ENGAGEMENT['thought_length']:
        bonus += FULL_RESPONSE_ENGAGEMENT['thought_bonus']
    if _keyword_hits(thought, CURIOSITY_WORDS) >= FULL_RESPONSE_ENGAGEMENT['curiosity_min']:
        bonus += FULL_RESPONSE_ENGAGEMENT['curiosity_bonus']
    if 'explore' in content and 'example' in content:
        bonus += FULL_RESPONSE_ENGAGEMENT['explored_example_bonus']

    return bonus


# ==================== UNIQUENESS ====================

def is_overused_example(item: EvidenceItem) -> bool:
    title = item.title.strip().lower()
    if not title:
        return False
    return any(example in title for example in OVERUSED_EXAMPLES.get(item.type_name, []))


def score_uniqueness(item: EvidenceItem) -> Tuple[float, List[str]]:
    """Uncommon example plus originality flags, capped at 1"""

    score, fired = apply_rules(item, UNIQUENESS_RULES)
    if not is_overused_example(item):
        score += UNCOMMON_EXAMPLE_BONUS
        fired.insert(0, 'Not an overused example')
    return _clamp(score, SUB_SCORE_CAPS['uniqueness']), fired


# ==================== EVIDENCE QUALITY ====================

def score_evidence_quality(item: EvidenceItem) -> Tuple[float, List[str]]:
    """Specificity and verifiability checklist, clamped to [0, 2]"""

    score, fired = apply_rules(item, EVIDENCE_QUALITY_RULES)
    return _clamp(score, SUB_SCORE_CAPS['evidence_quality']), fired


# ==================== BONUS ====================

def score_bonus(item: EvidenceItem, breakdown: Breakdown) -> Tuple[float, List[str]]:
    """Signed adjustment for exceptional or predictable combinations"""
    return apply_rules(item, BONUS_RULES, breakdown)


def calculate_breakdown(
    item: EvidenceItem,
    context: Optional[UniversityTarget] = None
) -> Tuple[Breakdown, float, Dict[str, List[str]]]:
    """
    Score all five parts and the bonus

    Returns: (breakdown, bonus, fired_labels_by_part)
    """
    academic, academic_fired = score_academic_depth(item)
    relevance, relevance_fired = score_university_relevance(item, context)
    engagement, engagement_fired = score_personal_engagement(item)
    uniqueness, uniqueness_fired = score_uniqueness(item)
    quality, quality_fired = score_evidence_quality(item)

    breakdown = {
        'academic_depth': academic,
        'university_relevance': relevance,
        'personal_engagement': engagement,
        'uniqueness': uniqueness,
        'evidence_quality': quality,
    }
    bonus, bonus_fired = score_bonus(item, breakdown)

    fired = {
        'academic_depth': academic_fired,
        'university_relevance': relevance_fired,
        'personal_engagement': engagement_fired,
        'uniqueness': uniqueness_fired,
        'evidence_quality': quality_fired,
        'bonus': bonus_fired,
    }
    return breakdown, bonus, fired


def calculate_composite(breakdown: Breakdown, bonus: float) -> float:
    """Sum of parts plus bonus, rounded to one decimal and clamped to [0, 10]"""
    total = sum(breakdown.values()) + bonus
    return min(max(round(total * 10) / 10, 0.0), COMPOSITE_MAX)
