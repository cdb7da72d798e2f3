"""
Evidence Evaluator Package v1.0

Rubric scoring for the evidence an applicant may cite in a statement:
books, reflective insights, projects and activities.

Usage:
    from statement_grader.evaluators.evidence import score_evidence

    result = score_evidence(
        {'type': 'book', 'title': 'The Wealth of Nations', 'universityLevel': True},
        {'name': 'LSE', 'course': 'Economics'},
    )
    print(result.composite)  # 0-10
    print(result.tier)       # "Strong - Competitive standard", ...

Breakdown caps:
    academic_depth 4, university_relevance 3, personal_engagement 2,
    uniqueness 1, evidence_quality 2 (plus a small signed bonus)
"""

from .evaluator import (
    EvidenceEvaluator,
    EvidenceScore,
    score_evidence,
    rank_evidence,
    format_evidence_ranking
)
from .evidence_items import (
    EvidenceItem,
    EvidenceType,
    UniversityTarget,
    evidence_from_dict,
    target_from_dict,
    coerce_evidence,
    coerce_target
)
from .evidence_scoring import (
    score_academic_depth,
    score_university_relevance,
    score_personal_engagement,
    score_uniqueness,
    score_evidence_quality,
    score_bonus,
    resolve_institution_tier
)
from .evidence_feedback import recommendation_tier, generate_suggestions

__version__ = '1.0.0'

__all__ = [
    'EvidenceEvaluator',
    'EvidenceScore',
    'score_evidence',
    'rank_evidence',
    'format_evidence_ranking',
    'EvidenceItem',
    'EvidenceType',
    'UniversityTarget',
    'evidence_from_dict',
    'target_from_dict',
    'coerce_evidence',
    'coerce_target',
    'score_academic_depth',
    'score_university_relevance',
    'score_personal_engagement',
    'score_uniqueness',
    'score_evidence_quality',
    'score_bonus',
    'resolve_institution_tier',
    'recommendation_tier',
    'generate_suggestions',
]
