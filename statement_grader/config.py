"""
Engine configuration

Contains:
- Engine-wide constants (length limits, penalty cap, score floor)
- Criterion weight table loading from JSON
"""

import json
import logging
import os
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)

MIN_STATEMENT_LENGTH = 100
CHARACTER_LIMIT = 4000
PENALTY_CAP = 3.0
OVERALL_FLOOR = 0.5

WEIGHTS_ENV_VAR = 'STATEMENT_GRADER_WEIGHTS'


def merge_criterion_weights(overrides: Mapping[str, float], source: str = "weights") -> Dict[str, float]:
    """
    Merge a partial weight table onto the defaults and validate it

    Criteria left out keep their default weight, and the merged table must
    still sum to 1.0.

    Args:
        overrides: Mapping of criterion name to weight
        source: Where the table came from, used in error messages

    Returns:
        Complete weight table covering all eight criteria
    """
    from .evaluators.statement.statement_taxonomies import CRITERION_WEIGHTS

    if not isinstance(overrides, Mapping):
        raise ValueError(f"Weight table must be a JSON object: {source}")

    unknown = [name for name in overrides if name not in CRITERION_WEIGHTS]
    if unknown:
        available = ', '.join(CRITERION_WEIGHTS.keys())
        raise ValueError(f"Unknown criteria in {source}: {', '.join(unknown)}. Available: {available}")

    weights = dict(CRITERION_WEIGHTS)
    for name, value in overrides.items():
        weight = float(value)
        if weight < 0:
            raise ValueError(f"Weight for '{name}' must not be negative: {weight}")
        weights[name] = weight

    total = sum(weights.values())
    if abs(total - 1.0) > 1e-6:
        raise ValueError(f"Criterion weights must sum to 1.0, got {total:.3f}")

    return weights


def load_criterion_weights(path: str) -> Dict[str, float]:
    """
    Load a criterion weight table from a JSON file

    Args:
        path: Path to a JSON object such as {"academic_criteria": 0.35, ...}

    Returns:
        Complete weight table covering all eight criteria
    """
    with open(path, 'r') as f:
        overrides = json.load(f)

    weights = merge_criterion_weights(overrides, source=path)
    logger.debug("Loaded criterion weights from %s", path)
    return weights


def weights_from_env() -> Optional[Dict[str, float]]:
    """Load the weight table named by STATEMENT_GRADER_WEIGHTS, if set"""
    path = os.environ.get(WEIGHTS_ENV_VAR)
    if not path:
        return None
    return load_criterion_weights(path)
