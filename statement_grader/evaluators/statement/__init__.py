"""
Statement Evaluator Package v1.0

Rubric evaluation for university application statements.

Assesses eight weighted criteria:
- Academic criteria (40%)
- Intellectual qualities (25%)
- Intellectual development (15%)
- Subject engagement (10%)
- Communication & structure (5%)
- Personal development (3%)
- Factual accuracy (2%)
- University specific (reported, unweighted)

Usage:
    from statement_grader.evaluators.statement import StatementEvaluator

    evaluator = StatementEvaluator({'name': 'LSE', 'course': 'Economics'})
    result = evaluator.evaluate({'statement': text, 'evidence': [...]})

    print(result.overall_score)     # 0.5-10
    print(result.grade)             # "B (Acceptable University Readiness)"
    print(result.priorities[0].issue)

Overall score = weighted criterion sum - filler penalty (0-3), floored at 0.5
"""

from .evaluator import (
    StatementEvaluator,
    evaluate_statement,
    format_draft_comparison
)
from .statement_features import FeatureSet, extract_features
from .filler_penalty import FillerHit, FillerReport, detect_filler_language, compute_filler_penalty
from .statement_scoring import (
    CriterionEvaluation,
    evaluate_criteria,
    score_all_criteria,
    calculate_overall_score,
    calculate_university_fit
)
from .statement_feedback import (
    FeedbackReport,
    CriterionNarrative,
    Priority,
    compose_feedback,
    grade_label
)
from .statement_taxonomies import CRITERION_WEIGHTS, CRITERION_LABELS

__version__ = '1.0.0'

__all__ = [
    'StatementEvaluator',
    'evaluate_statement',
    'format_draft_comparison',
    'FeatureSet',
    'extract_features',
    'FillerHit',
    'FillerReport',
    'detect_filler_language',
    'compute_filler_penalty',
    'CriterionEvaluation',
    'evaluate_criteria',
    'score_all_criteria',
    'calculate_overall_score',
    'calculate_university_fit',
    'FeedbackReport',
    'CriterionNarrative',
    'Priority',
    'compose_feedback',
    'grade_label',
    'CRITERION_WEIGHTS',
    'CRITERION_LABELS',
]
