"""
Statement Scoring - Eight weighted rubric criteria

Criteria (internal sub-checks):
- academic_criteria: knowledge, relevance, depth, self-assessment
- intellectual_qualities: analytical thinking, curiosity, preparedness
- intellectual_development: progression vs listing
- subject_engagement: academic vs popular sources, intellectual maturity
- communication_structure: coherence, specificity
- personal_development: reflection, future vision
- factual_accuracy: misconceptions and overconfident claims
- university_specific: mentions of the target institution, course and modules

Each scorer returns (criterion_score, sub_scores). Sub-checks are scored on
their own 0-10 scale, combined with fixed internal weights, and the criterion
is clamped to 0-10. The overall score subtracts the filler penalty.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ...config import OVERALL_FLOOR, merge_criterion_weights
from ..evidence.evidence_items import EvidenceItem, EvidenceType, UniversityTarget
from .filler_penalty import FillerReport, detect_filler_language
from .statement_features import count_occurrences, count_phrases, find_phrases
from .statement_taxonomies import (
    CRITERION_WEIGHTS,
    UNIVERSITY_LEVEL_TERMS, BEYOND_CURRICULUM_PHRASES, ACADEMIC_SOURCES, INDEPENDENT_RESEARCH,
    COURSE_ENGAGEMENT, COMPETITION_MARKERS, CONNECTION_CONCEPTS, LEARNER_PHRASES, OVERSTATEMENTS,
    SYNTHESIS_PHRASES, ORIGINAL_THINKING, CROSS_DISCIPLINARY, REASONING_WORDS, CRITICAL_WORDS,
    INTRINSIC_CURIOSITY, EXPLORATION_WORDS, CURIOSITY_CLICHES, READINESS_TERMS,
    WRITING_WORDS, INVESTIGATION_WORDS, PRESENTATION_WORDS,
    DEVELOPMENT_PROGRESSION, DEVELOPMENT_WORDS, SEQUENTIAL_WORDS, CAUSAL_CONNECTORS,
    LISTING_PATTERNS, LISTING_FREE_ALLOWANCE, LISTING_PENALTY_PER_ITEM,
    ACADEMIC_ENGAGEMENT, POPULAR_SOURCES, TECHNICAL_VOCABULARY,
    RESPECT_PHRASES, HUMILITY_PHRASES, DISMISSIVE_PHRASES,
    TRANSITION_WORDS, STRUCTURE_PROGRESSION, EXAMPLE_MARKERS, VAGUE_WORDS,
    LEARNING_REFLECTION, GROWTH_WORDS, SUPERFICIAL_REFLECTION,
    GOAL_PHRASES, FUTURE_WORDS, UNREALISTIC_CLAIMS,
    MISCONCEPTION_PATTERNS, OVERCONFIDENT_CLAIMS,
    FACTUAL_BASE, MISCONCEPTION_PENALTY, OVERCONFIDENCE_PENALTY,
    FIT_COURSE_KEYWORDS, ELITE_TUTORIAL_NAMES,
)

SubScores = Dict[str, float]


def _clamp(score: float, low: float = 0.0, high: float = 10.0) -> float:
    return min(max(score, low), high)


def _tier(count: int, tiers: Sequence[Tuple[int, float]]) -> float:
    """Points for the first (minimum, points) tier the count reaches"""
    for minimum, points in tiers:
        if count >= minimum:
            return points
    return 0.0


def _rounded(sub_scores: SubScores) -> SubScores:
    return {name: round(value, 1) for name, value in sub_scores.items()}


# ==================== ACADEMIC CRITERIA ====================

def score_academic_criteria(text: str) -> Tuple[float, SubScores]:
    """
    Academic criteria: knowledge×0.4 + relevance×0.6 + depth×0.4 + self-assessment×0.2

    Returns: (score, sub_scores)
    """

    # Knowledge appropriateness
    knowledge = 2.0
    knowledge += _tier(count_phrases(text, UNIVERSITY_LEVEL_TERMS), [(3, 6.0), (2, 4.0), (1, 2.0)])
    if find_phrases(text, BEYOND_CURRICULUM_PHRASES):
        knowledge += 2.0

    # Relevance and sophistication of sources
    sources = count_phrases(text, ACADEMIC_SOURCES)
    research = count_phrases(text, INDEPENDENT_RESEARCH)
    courses = count_phrases(text, COURSE_ENGAGEMENT)

    if sources >= 3 and research >= 1 and courses >= 1:
        relevance = 8.0
    elif (sources >= 2 and research >= 1) or (sources >= 3 and courses >= 1):
        relevance = 7.0
    elif sources >= 2 or research >= 1 or courses >= 1:
        relevance = 6.0
    elif sources >= 1:
        relevance = 4.0
    else:
        relevance = 2.0
    if find_phrases(text, COMPETITION_MARKERS):
        relevance += 1.0

    # Understanding depth
    depth = 2.0 + 1.5 * count_phrases(text, CONNECTION_CONCEPTS)
    if len(text.split()) > 500:
        depth += 2.0
    if re.search(r'\b(?:which|that)\b', text, re.IGNORECASE):
        depth += 1.0

    # Self-assessment accuracy
    self_assessment = 5.0
    if find_phrases(text, LEARNER_PHRASES):
        self_assessment += 3.0
    if find_phrases(text, OVERSTATEMENTS):
        self_assessment -= 4.0

    sub_scores = {
        'knowledge_appropriateness': _clamp(knowledge),
        'relevance_sophistication': _clamp(relevance),
        'understanding_depth': _clamp(depth),
        'self_assessment_accuracy': _clamp(self_assessment),
    }
    score = (
        sub_scores['knowledge_appropriateness'] * 0.4 +
        sub_scores['relevance_sophistication'] * 0.6 +
        sub_scores['understanding_depth'] * 0.4 +
        sub_scores['self_assessment_accuracy'] * 0.2
    )
    return _clamp(score), _rounded(sub_scores)


# ==================== INTELLECTUAL QUALITIES ====================

def score_intellectual_qualities(text: str) -> Tuple[float, SubScores]:
    """
    Intellectual qualities: analytical×0.4 + curiosity×0.32 + preparedness×0.28

    Returns: (score, sub_scores)
    """

    # Analytical thinking
    synthesis = count_phrases(text, SYNTHESIS_PHRASES)
    original = count_phrases(text, ORIGINAL_THINKING)
    cross = count_phrases(text, CROSS_DISCIPLINARY)
    reasoning = count_phrases(text, REASONING_WORDS)
    critical = count_phrases(text, CRITICAL_WORDS)

    if synthesis >= 2 and original >= 2 and cross >= 1:
        analytical = 8.0
    elif (synthesis >= 2 and original >= 1) or (synthesis >= 1 and cross >= 1):
        analytical = 7.0
    elif synthesis >= 1 or original >= 1:
        analytical = 6.0
    elif reasoning >= 3 and critical >= 2:
        analytical = 4.0
    elif reasoning >= 1:
        analytical = 3.0
    else:
        analytical = 1.0

    # Intellectual curiosity
    curiosity = 2.0 + 1.2 * count_phrases(text, INTRINSIC_CURIOSITY)
    curiosity += _tier(count_phrases(text, EXPLORATION_WORDS), [(3, 3.0), (2, 2.0), (1, 1.0)])
    if find_phrases(text, CURIOSITY_CLICHES):
        curiosity -= 2.0

    # Academic preparedness
    preparedness = 3.0 + 0.8 * count_phrases(text, READINESS_TERMS)
    if find_phrases(text, WRITING_WORDS):
        preparedness += 1.0
    if find_phrases(text, INVESTIGATION_WORDS):
        preparedness += 1.5
    if find_phrases(text, PRESENTATION_WORDS):
        preparedness += 1.0

    sub_scores = {
        'analytical_thinking': _clamp(analytical),
        'intellectual_curiosity': _clamp(curiosity),
        'academic_preparedness': _clamp(preparedness),
    }
    score = (
        sub_scores['analytical_thinking'] * 0.4 +
        sub_scores['intellectual_curiosity'] * 0.32 +
        sub_scores['academic_preparedness'] * 0.28
    )
    return _clamp(score), _rounded(sub_scores)


# ==================== INTELLECTUAL DEVELOPMENT ====================

def score_intellectual_development(text: str) -> Tuple[float, SubScores]:
    """
    Intellectual development: does the statement show ideas building on
    each other, or just list activities?

    Heavy listing with no progression is ranked below any sequential
    structure, and every listing occurrence beyond the allowance costs 0.3.

    Returns: (score, sub_scores)
    """

    progression = count_phrases(text, DEVELOPMENT_PROGRESSION)
    development = count_phrases(text, DEVELOPMENT_WORDS)
    sequential = count_phrases(text, SEQUENTIAL_WORDS)
    causal = count_phrases(text, CAUSAL_CONNECTORS)
    listing = count_occurrences(text, LISTING_PATTERNS)

    if progression >= 3 and development >= 1 and causal >= 1:
        score = 8.0
    elif progression >= 2 and development >= 1:
        score = 7.0
    elif progression >= 1 and causal >= 1:
        score = 6.0
    elif listing > 8 and progression == 0:
        score = 1.0
    elif listing > 5 and progression == 0:
        score = 2.0
    elif sequential >= 3 and causal >= 1:
        score = 5.0
    elif sequential >= 2:
        score = 4.0
    else:
        score = 2.0

    listing_penalty = max(0, listing - LISTING_FREE_ALLOWANCE) * LISTING_PENALTY_PER_ITEM
    score = max(1.0, score - listing_penalty)

    sub_scores = {
        'progression_phrases': float(progression),
        'development_words': float(development),
        'sequential_words': float(sequential),
        'causal_connectors': float(causal),
        'activity_listing': float(listing),
        'listing_penalty': listing_penalty,
    }
    return _clamp(score), _rounded(sub_scores)


# ==================== SUBJECT ENGAGEMENT ====================

def score_subject_engagement(text: str) -> Tuple[float, SubScores]:
    """
    Subject engagement: academic-vs-popular×0.32 + maturity×0.28

    Returns: (score, sub_scores)
    """

    academic = count_phrases(text, ACADEMIC_ENGAGEMENT)
    popular = count_phrases(text, POPULAR_SOURCES)

    academic_vs_popular = 3.0
    academic_vs_popular += _tier(academic, [(3, 4.0), (2, 3.0), (1, 2.0)])
    academic_vs_popular += 0.5 * count_phrases(text, TECHNICAL_VOCABULARY)
    if popular > academic and academic == 0:
        academic_vs_popular -= 2.0

    maturity = 4.0 + 0.8 * count_phrases(text, RESPECT_PHRASES)
    if find_phrases(text, HUMILITY_PHRASES):
        maturity += 2.0
    if find_phrases(text, DISMISSIVE_PHRASES):
        maturity -= 4.0

    sub_scores = {
        'academic_vs_popular': _clamp(academic_vs_popular),
        'intellectual_maturity': _clamp(maturity),
    }
    score = sub_scores['academic_vs_popular'] * 0.32 + sub_scores['intellectual_maturity'] * 0.28
    return _clamp(score), _rounded(sub_scores)


# ==================== COMMUNICATION & STRUCTURE ====================

def score_communication_structure(text: str) -> Tuple[float, SubScores]:
    """
    Communication: coherence×0.2 + specificity×0.2

    Returns: (score, sub_scores)
    """

    coherence = 3.0
    coherence += _tier(count_phrases(text, TRANSITION_WORDS), [(3, 3.0), (2, 2.0), (1, 1.0)])
    coherence += _tier(count_phrases(text, STRUCTURE_PROGRESSION), [(2, 2.0), (1, 1.0)])
    sentence_breaks = len(re.findall(r'\.\s+[A-Z]', text)) + 1
    if 3 <= sentence_breaks <= 5:
        coherence += 1.0

    specificity = 2.0
    specificity += _tier(count_phrases(text, EXAMPLE_MARKERS), [(3, 4.0), (2, 3.0), (1, 2.0)])
    details = (
        len(re.findall(r'\d+', text)) +
        len(re.findall(r'[A-Z][a-z]+ [A-Z][a-z]+', text)) +
        len(re.findall(r"'[^']*'", text))
    )
    specificity += _tier(details, [(5, 2.0), (3, 1.5), (1, 1.0)])
    specificity -= 0.3 * count_phrases(text, VAGUE_WORDS)

    sub_scores = {
        'coherence': _clamp(coherence),
        'specificity': _clamp(specificity),
    }
    score = sub_scores['coherence'] * 0.2 + sub_scores['specificity'] * 0.2
    return _clamp(score), _rounded(sub_scores)


# ==================== PERSONAL DEVELOPMENT ====================

def score_personal_development(text: str) -> Tuple[float, SubScores]:
    """
    Personal development: reflection×0.12 + vision×0.08

    Returns: (score, sub_scores)
    """

    reflection = 3.0
    reflection += _tier(count_phrases(text, LEARNING_REFLECTION), [(3, 4.0), (2, 3.0), (1, 2.0)])
    reflection += 0.4 * count_phrases(text, GROWTH_WORDS)
    if find_phrases(text, SUPERFICIAL_REFLECTION):
        reflection -= 3.0

    vision = 4.0
    vision += _tier(count_phrases(text, GOAL_PHRASES), [(2, 3.0), (1, 2.0)])
    vision += 0.3 * count_phrases(text, FUTURE_WORDS)
    if find_phrases(text, UNREALISTIC_CLAIMS):
        vision -= 4.0

    sub_scores = {
        'reflection_quality': _clamp(reflection),
        'future_vision': _clamp(vision),
    }
    score = sub_scores['reflection_quality'] * 0.12 + sub_scores['future_vision'] * 0.08
    return _clamp(score), _rounded(sub_scores)


# ==================== FACTUAL ACCURACY ====================

def score_factual_accuracy(text: str) -> Tuple[float, SubScores]:
    """
    Factual accuracy: deductions for common misconceptions and overclaiming

    Returns: (score, sub_scores)
    """

    text_lower = text.lower()
    misconceptions = sum(1 for pattern in MISCONCEPTION_PATTERNS if re.search(pattern, text_lower))
    overconfident = count_phrases(text, OVERCONFIDENT_CLAIMS)

    score = FACTUAL_BASE - misconceptions * MISCONCEPTION_PENALTY - overconfident * OVERCONFIDENCE_PENALTY

    sub_scores = {
        'misconceptions': float(misconceptions),
        'overconfident_claims': float(overconfident),
    }
    return _clamp(score), sub_scores


# ==================== UNIVERSITY SPECIFIC ====================

def score_university_specific(text: str, context: Optional[UniversityTarget]) -> Tuple[float, SubScores]:
    """
    University specific: mentions of the target name, course, modules and
    specialisations. A neutral 5 without a target.

    Returns: (score, sub_scores)
    """

    if context is None:
        return 5.0, {}

    text_lower = text.lower()
    mentions = {
        'names_university': bool(context.name) and context.name.lower() in text_lower,
        'names_course': bool(context.course) and context.course.lower() in text_lower,
        'names_module': any(module.lower() in text_lower for module in context.modules if module),
        'names_specialization': any(spec.lower() in text_lower for spec in context.specializations if spec),
    }

    score = 5.0
    if mentions['names_university']:
        score += 2.0
    if mentions['names_course']:
        score += 1.5
    if mentions['names_module']:
        score += 1.5
    if mentions['names_specialization']:
        score += 1.0

    return _clamp(score), {name: float(hit) for name, hit in mentions.items()}


def calculate_university_fit(
    text: str,
    evidence: Sequence[EvidenceItem],
    context: Optional[UniversityTarget]
) -> float:
    """
    Supplementary fit score (0-10): course vocabulary in the statement, plus a
    bonus for deep insights when applying to a tutorial-system university
    """

    if context is None:
        return 7.0

    course = context.course.lower()
    keywords: List[str] = []
    for course_name, course_keywords in FIT_COURSE_KEYWORDS.items():
        if course_name in course:
            keywords = course_keywords
            break

    score = 5.0 + min(0.5 * count_phrases(text, keywords), 3.0)

    name = context.name.lower()
    if any(elite in name for elite in ELITE_TUTORIAL_NAMES):
        deep_insights = [
            item for item in evidence
            if item.kind is EvidenceType.INSIGHT and item.rating('intellectual_depth') > 8
        ]
        if deep_insights:
            score += 2.0

    return _clamp(score)


# ==================== OVERALL ====================

@dataclass(frozen=True)
class CriterionEvaluation:
    """Criterion scores, their sub-checks and the combined overall score"""

    scores: Dict[str, float]
    sub_scores: Dict[str, SubScores]
    weights: Dict[str, float]
    weighted_score: float
    filler: FillerReport
    overall_score: float
    university_fit: float = 7.0
    contributions: Dict[str, float] = field(default_factory=dict)


def calculate_overall_score(
    scores: Dict[str, float],
    filler_penalty: float,
    weights: Optional[Dict[str, float]] = None
) -> Tuple[float, float, Dict[str, float]]:
    """
    Weighted sum of criteria minus the filler penalty, floored at 0.5

    Returns: (overall_score, weighted_score, contributions)
    """
    weights = weights or CRITERION_WEIGHTS
    contributions = {name: scores.get(name, 0.0) * weight for name, weight in weights.items()}
    weighted = sum(contributions.values())
    overall = max(OVERALL_FLOOR, weighted - filler_penalty)
    return round(overall, 1), round(weighted, 2), {name: round(value, 2) for name, value in contributions.items()}


def score_all_criteria(text: str, context: Optional[UniversityTarget] = None) -> Tuple[Dict[str, float], Dict[str, SubScores]]:
    """
    Run all eight criterion scorers

    Returns: (scores, sub_scores), both keyed by criterion name
    """
    results = {
        'academic_criteria': score_academic_criteria(text),
        'intellectual_qualities': score_intellectual_qualities(text),
        'intellectual_development': score_intellectual_development(text),
        'subject_engagement': score_subject_engagement(text),
        'communication_structure': score_communication_structure(text),
        'personal_development': score_personal_development(text),
        'factual_accuracy': score_factual_accuracy(text),
        'university_specific': score_university_specific(text, context),
    }
    scores = {name: round(score, 1) for name, (score, _) in results.items()}
    sub_scores = {name: subs for name, (_, subs) in results.items()}
    return scores, sub_scores


def evaluate_criteria(
    text: str,
    evidence: Sequence[EvidenceItem] = (),
    context: Optional[UniversityTarget] = None,
    weights: Optional[Dict[str, float]] = None
) -> CriterionEvaluation:
    """
    Score a statement against all eight criteria and combine them

    Args:
        text: Statement text
        evidence: Evidence items selected for the statement
        context: Optional target university and course
        weights: Criterion weight table, merged onto CRITERION_WEIGHTS and validated

    Returns:
        CriterionEvaluation with scores, sub-checks, penalty and overall score
    """
    weights = merge_criterion_weights(weights) if weights else dict(CRITERION_WEIGHTS)
    scores, sub_scores = score_all_criteria(text, context)
    filler = detect_filler_language(text)
    overall, weighted, contributions = calculate_overall_score(scores, filler.penalty, weights)

    return CriterionEvaluation(
        scores=scores,
        sub_scores=sub_scores,
        weights=dict(weights),
        weighted_score=weighted,
        filler=filler,
        overall_score=overall,
        university_fit=round(calculate_university_fit(text, evidence, context), 1),
        contributions=contributions,
    )
