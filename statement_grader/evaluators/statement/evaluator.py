"""
Statement Evaluator - Main evaluation class for application statements

This is the primary interface for statement assessment. It coordinates:
- Minimum length validation
- Content feature extraction
- Eight-criterion scoring and the filler penalty
- Feedback composition (narratives, priorities, grade, advice)

Parallel to EvidenceEvaluator, which scores the individual items a
statement draws on.
"""

import logging
from typing import Dict, Iterable, Mapping, Optional, Union

from ...config import MIN_STATEMENT_LENGTH, load_criterion_weights
from ...errors import StatementTooShortError
from ..evidence.evaluator import EvidenceInput, TargetInput
from ..evidence.evidence_items import coerce_evidence, coerce_target
from .statement_features import extract_features
from .statement_feedback import FeedbackReport, compose_feedback
from .statement_scoring import evaluate_criteria
from .statement_taxonomies import CRITERION_LABELS, CRITERION_WEIGHTS

logger = logging.getLogger(__name__)

StatementInput = Union[str, Mapping]


def evaluate_statement(
    text: str,
    evidence: Iterable[EvidenceInput] = (),
    context: TargetInput = None,
    weights: Optional[Dict[str, float]] = None
) -> FeedbackReport:
    """
    Evaluate one statement draft

    Args:
        text: Statement text
        evidence: Evidence items (EvidenceItem or raw dicts) cited by the statement
        context: Target university and course (UniversityTarget, dict or None)
        weights: Optional criterion weight table

    Returns:
        FeedbackReport with scores, narratives, priorities and grade

    Raises:
        StatementTooShortError: if the stripped text is under 100 characters
    """
    text = text or ""
    length = len(text.strip())
    if length < MIN_STATEMENT_LENGTH:
        raise StatementTooShortError(length, MIN_STATEMENT_LENGTH)

    items = [coerce_evidence(item) for item in evidence or ()]
    target = coerce_target(context)

    features = extract_features(text)
    logger.debug(
        "Features: %d books, %d terms, listing %d, progression %d",
        len(features.books), len(features.academic_terms),
        features.listing_patterns, len(features.progression_phrases),
    )

    evaluation = evaluate_criteria(text, items, target, weights)
    logger.debug(
        "Weighted %.2f, filler penalty %.2f, overall %.1f",
        evaluation.weighted_score, evaluation.filler.penalty, evaluation.overall_score,
    )

    return compose_feedback(evaluation, features, items, target)


class StatementEvaluator:
    """
    Evaluator class for application statements

    Usage:
        evaluator = StatementEvaluator()
        evaluator.set_target({'name': 'University of Oxford', 'course': 'Economics'})
        result = evaluator.evaluate(statement_text)
        print(result.overall_score)  # 0.5-10
        print(result.grade)          # "B+ (Good University Readiness)"
    """

    def __init__(self, target: TargetInput = None, weights: Optional[Dict[str, float]] = None):
        self.target = coerce_target(target)
        self.weights = weights

    def set_target(self, target: TargetInput) -> None:
        """
        Set the target university used for course fit and advice

        Args:
            target: UniversityTarget or dict with 'name' and 'course'
        """
        self.target = coerce_target(target)

    def load_weights(self, path: str) -> None:
        """
        Load a criterion weight table from JSON

        Args:
            path: Path to the weight file
        """
        self.weights = load_criterion_weights(path)

    def evaluate(
        self,
        statement: StatementInput,
        evidence: Iterable[EvidenceInput] = (),
        context: TargetInput = None
    ) -> FeedbackReport:
        """
        Main evaluation pipeline

        Args:
            statement: Statement text, or dict with 'statement', 'evidence' and 'target' keys
            evidence: Evidence items (ignored when the dict carries its own)
            context: Target override (defaults to the evaluator's target)

        Returns:
            FeedbackReport
        """

        # Handle both string and dict inputs
        if isinstance(statement, Mapping):
            evidence = statement.get('evidence') or evidence
            if context is None and statement.get('target'):
                context = statement['target']
            statement = statement.get('statement', '')

        target = coerce_target(context) if context is not None else self.target
        return evaluate_statement(statement, evidence, target, self.weights)

    def evaluate_batch(self, drafts: Dict[str, StatementInput]) -> Dict[str, FeedbackReport]:
        """
        Evaluate several drafts

        Args:
            drafts: Dict of {draft_label: statement text or dict}

        Returns:
            Dict of {draft_label: FeedbackReport}
        """

        results = {}
        for label, draft in drafts.items():
            logger.debug("Evaluating draft: %s", label)
            results[label] = self.evaluate(draft)
        return results

    def generate_report(self, result: FeedbackReport, applicant: str = "Applicant") -> str:
        """
        Generate a formatted markdown report for a single evaluation

        Args:
            result: FeedbackReport from evaluate()
            applicant: Name to use in report

        Returns:
            Formatted markdown report string
        """

        criteria_rows = '\n'.join(
            f"| {CRITERION_LABELS[name]} | {score:.1f}/10 | {self._weight_label(name)} |"
            for name, score in result.criterion_scores.items()
        )

        sections = []
        for narrative in result.narratives:
            sections.append(
                f"## {narrative.label} ({narrative.score:.1f}/10)\n\n"
                f"**{narrative.title}**\n\n"
                f"{narrative.narrative}\n\n"
                f"**Next Step:** {narrative.next_step}"
            )
        criterion_sections = '\n\n---\n\n'.join(sections)

        priorities = '\n'.join(
            f"{i}. **[{p.severity}] {p.issue}** ({p.detail}). {p.action}"
            for i, p in enumerate(result.priorities, 1)
        ) or "No priority issues found."

        strengths = '\n'.join(f"- {item}" for item in result.strengths)
        concerns = '\n'.join(f"- {item}" for item in result.concerns)
        improvements = '\n'.join(f"- {item}" for item in result.improvements)
        advice = '\n'.join(f"- {item}" for item in result.university_advice) or "- No target university set."

        report = f"""
# Personal Statement Report: {applicant}

**Overall Score:** {result.overall_score:.1f}/10
**Grade:** {result.grade}
**Filler Penalty:** -{result.filler_penalty:.1f}

{result.overall_narrative}

---

## Criterion Scores

| Criterion | Score | Weight |
|-----------|-------|--------|
{criteria_rows}

---

## Priorities

{priorities}

---

{criterion_sections}

---

## Strengths

{strengths}

## Concerns

{concerns}

## Improvements

{improvements}

---

## University Advice

{advice}

---

*{result.grade_justification}*
"""

        return report

    def _weight_label(self, criterion: str) -> str:
        weights = self.weights or CRITERION_WEIGHTS
        return f"{weights.get(criterion, 0.0) * 100:.0f}%"


def format_draft_comparison(results: Dict[str, FeedbackReport]) -> str:
    """
    Generate comparative summary across draft versions

    Args:
        results: Dict of {draft_label: FeedbackReport}

    Returns:
        Formatted markdown summary
    """

    summary = "# Statement Drafts: Comparative Summary\n\n"
    summary += "| Draft | Overall | Grade | Filler | Key Strength | Top Priority |\n"
    summary += "|-------|---------|-------|--------|--------------|--------------|\n"

    for label, result in results.items():
        strength = result.strengths[0]
        priority = result.priorities[0].issue if result.priorities else "Polish"
        grade = result.grade.split(' ')[0]
        summary += f"| {label} | {result.overall_score:.1f}/10 | {grade} | -{result.filler_penalty:.1f} | {strength} | {priority} |\n"

    # Change between first and last draft
    if len(results) >= 2:
        ordered = list(results.values())
        change = ordered[-1].overall_score - ordered[0].overall_score
        summary += f"\n**Change from first to latest draft:** {change:+.1f}\n"

    return summary
