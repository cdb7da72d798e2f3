"""
Statement Grader

Deterministic scoring for university application statements and the
evidence they cite.

Usage:
    from statement_grader import evaluate_statement, score_evidence

    report = evaluate_statement(text, evidence=[...], context={'name': 'LSE', 'course': 'Economics'})
    print(report.overall_score, report.grade)
"""

from .errors import StatementTooShortError, INVALID_EVIDENCE_TYPE
from .config import load_criterion_weights
from .evaluators import EVALUATORS, get_evaluator, list_evaluators
from .evaluators.evidence import (
    EvidenceEvaluator,
    EvidenceItem,
    EvidenceScore,
    EvidenceType,
    UniversityTarget,
    score_evidence,
    rank_evidence
)
from .evaluators.statement import (
    StatementEvaluator,
    FeatureSet,
    FeedbackReport,
    evaluate_statement,
    extract_features,
    compute_filler_penalty,
    evaluate_criteria
)

__version__ = '1.0.0'

__all__ = [
    'StatementTooShortError',
    'INVALID_EVIDENCE_TYPE',
    'load_criterion_weights',
    'EVALUATORS',
    'get_evaluator',
    'list_evaluators',
    'EvidenceEvaluator',
    'EvidenceItem',
    'EvidenceScore',
    'EvidenceType',
    'UniversityTarget',
    'score_evidence',
    'rank_evidence',
    'StatementEvaluator',
    'FeatureSet',
    'FeedbackReport',
    'evaluate_statement',
    'extract_features',
    'compute_filler_penalty',
    'evaluate_criteria',
]
