"""
Evidence Feedback - Recommendation tier and improvement suggestions
"""

from typing import Dict, List

from .evidence_taxonomies import RECOMMENDATION_TIERS, LOWEST_TIER, SUGGESTION_THRESHOLDS


def recommendation_tier(composite: float) -> str:
    """Map a composite score onto the 7 recommendation bands"""
    for minimum, label in RECOMMENDATION_TIERS:
        if composite >= minimum:
            return label
    return LOWEST_TIER


def generate_suggestions(breakdown: Dict[str, float]) -> List[str]:
    """One hint per sub-score below its threshold, in a fixed order"""
    return [
        hint for part, threshold, hint in SUGGESTION_THRESHOLDS
        if breakdown.get(part, 0.0) < threshold
    ]
