"""
Evidence Evaluator - Score books, insights, projects and activities

Primary interface for evidence scoring. It coordinates:
- Coercion of raw evidence dicts into EvidenceItem records
- The five sub-scores and bonus
- Composite, recommendation tier and suggestions

Unknown evidence types never raise; they come back zeroed with an
explanatory tier and error='invalid_evidence_type'.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Union

from ...errors import INVALID_EVIDENCE_TYPE
from .evidence_items import EvidenceItem, UniversityTarget, coerce_evidence, coerce_target
from .evidence_scoring import calculate_breakdown, calculate_composite
from .evidence_feedback import recommendation_tier, generate_suggestions
from .evidence_taxonomies import SUB_SCORE_CAPS

logger = logging.getLogger(__name__)

EvidenceInput = Union[EvidenceItem, Mapping]
TargetInput = Union[UniversityTarget, Mapping, None]


@dataclass(frozen=True)
class EvidenceScore:
    """Scored evidence item"""

    composite: float
    breakdown: Dict[str, float]
    bonus: float
    tier: str
    suggestions: List[str] = field(default_factory=list)
    reasons: Dict[str, List[str]] = field(default_factory=dict)  # fired rule labels per part
    title: str = ""
    evidence_type: str = ""
    error: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            'title': self.title,
            'evidence_type': self.evidence_type,
            'composite': self.composite,
            'breakdown': dict(self.breakdown),
            'bonus': self.bonus,
            'tier': self.tier,
            'suggestions': list(self.suggestions),
            'reasons': {part: list(labels) for part, labels in self.reasons.items()},
            'error': self.error,
        }


def _invalid_score(item: EvidenceItem) -> EvidenceScore:
    return EvidenceScore(
        composite=0.0,
        breakdown={part: 0.0 for part in SUB_SCORE_CAPS},
        bonus=0.0,
        tier=f"Invalid evidence type: '{item.type_name}'",
        title=item.title,
        evidence_type=item.type_name,
        error=INVALID_EVIDENCE_TYPE,
    )


def score_evidence(evidence: EvidenceInput, context: TargetInput = None) -> EvidenceScore:
    """
    Score one evidence item against an optional university target

    Args:
        evidence: EvidenceItem or raw dict (camelCase or snake_case keys)
        context: UniversityTarget, dict with name/course, or None

    Returns:
        EvidenceScore with composite (0-10), breakdown, tier and suggestions
    """
    item = coerce_evidence(evidence)
    target = coerce_target(context)

    if not item.is_known_type:
        logger.debug("Invalid evidence type %r for %r", item.type_name, item.title)
        return _invalid_score(item)

    breakdown, bonus, reasons = calculate_breakdown(item, target)
    composite = calculate_composite(breakdown, bonus)

    logger.debug("Scored %s %r: %.1f", item.type_name, item.title, composite)

    return EvidenceScore(
        composite=composite,
        breakdown=breakdown,
        bonus=round(bonus, 2),
        tier=recommendation_tier(composite),
        suggestions=generate_suggestions(breakdown),
        reasons=reasons,
        title=item.title,
        evidence_type=item.type_name,
    )


def rank_evidence(items: Iterable[EvidenceInput], context: TargetInput = None) -> List[EvidenceScore]:
    """Score every item and order by composite, highest first (stable for ties)"""
    scores = [score_evidence(item, context) for item in items]
    return sorted(scores, key=lambda score: score.composite, reverse=True)


class EvidenceEvaluator:
    """
    Evaluator class for candidate evidence

    Usage:
        evaluator = EvidenceEvaluator()
        evaluator.set_target({'name': 'University of Oxford', 'course': 'Economics'})
        result = evaluator.evaluate({'type': 'book', 'title': 'Capital', 'universityLevel': True})
        print(result.composite, result.tier)
    """

    def __init__(self, target: TargetInput = None):
        self.target = coerce_target(target)

    def set_target(self, target: TargetInput) -> None:
        """
        Set the target university used for relevance scoring

        Args:
            target: UniversityTarget or dict with 'name' and 'course'
        """
        self.target = coerce_target(target)

    def evaluate(self, evidence: EvidenceInput, context: TargetInput = None) -> EvidenceScore:
        target = coerce_target(context) if context is not None else self.target
        return score_evidence(evidence, target)

    def evaluate_batch(self, evidence: Dict[str, EvidenceInput]) -> Dict[str, EvidenceScore]:
        """
        Evaluate several named evidence items

        Args:
            evidence: Dict of {label: evidence}

        Returns:
            Dict of {label: EvidenceScore}
        """
        results = {}
        for label, item in evidence.items():
            logger.debug("Evaluating evidence: %s", label)
            results[label] = self.evaluate(item)
        return results

    def generate_report(self, result: EvidenceScore, title: Optional[str] = None) -> str:
        """
        Generate a formatted markdown report for one evidence score

        Args:
            result: EvidenceScore from evaluate()
            title: Heading to use (defaults to the evidence title)

        Returns:
            Formatted markdown report string
        """
        heading = title or result.title or "Evidence"
        b = result.breakdown

        if result.error:
            return f"# Evidence Report: {heading}\n\n**{result.tier}**\n\nUse one of: book, insight, project, activity.\n"

        suggestions = '\n'.join(f"- {hint}" for hint in result.suggestions) or "- No major gaps found."

        report = f"""
# Evidence Report: {heading}

**Type:** {result.evidence_type}
**Composite Score:** {result.composite:.1f}/10
**Recommendation:** {result.tier}

---

| Part | Score |
|------|-------|
| Academic depth | {b['academic_depth']:.1f}/4 |
| University relevance | {b['university_relevance']:.1f}/3 |
| Personal engagement | {b['personal_engagement']:.1f}/2 |
| Uniqueness | {b['uniqueness']:.1f}/1 |
| Evidence quality | {b['evidence_quality']:.1f}/2 |
| Bonus | {result.bonus:+.1f} |

---

## Suggestions

{suggestions}
"""
        return report


def format_evidence_ranking(scores: List[EvidenceScore]) -> str:
    """
    Generate a ranking table across candidate evidence

    Args:
        scores: EvidenceScore list, typically from rank_evidence()

    Returns:
        Formatted markdown summary
    """
    summary = "# Evidence Ranking\n\n"
    summary += "| Rank | Evidence | Type | Composite | Recommendation | Key Gap |\n"
    summary += "|------|----------|------|-----------|----------------|---------|\n"

    for rank, score in enumerate(scores, 1):
        gap = score.suggestions[0] if score.suggestions else "None"
        if score.error:
            gap = "Unknown evidence type"
        summary += f"| {rank} | {score.title or 'Untitled'} | {score.evidence_type} | {score.composite:.1f} | {score.tier} | {gap} |\n"

    return summary
