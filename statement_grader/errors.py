"""
Engine error types

Only one input is ever rejected: a statement too short to analyse.
Unknown evidence types are reported on the score result instead of raised.
"""

INVALID_EVIDENCE_TYPE = 'invalid_evidence_type'


class StatementTooShortError(ValueError):
    """Raised when a statement is below the minimum analysable length"""

    def __init__(self, length: int, minimum: int):
        self.length = length
        self.minimum = minimum
        super().__init__(
            f"Statement too short to analyse: {length} characters "
            f"(minimum {minimum}). Add more detail before grading."
        )
