"""
Tests for the filler-language penalty

Covers sentence pattern families, whole-text heuristics, the 0-3 cap
and referential transparency.
"""

import pytest
from statement_grader.evaluators.statement import compute_filler_penalty, detect_filler_language


class TestSentencePatterns:
    """Test per-sentence pattern families"""

    def test_clean_text_has_no_penalty(self):
        text = "Reading Keynes changed how my model treats demand. For example, a spreadsheet of UK output showed the gap."
        assert compute_filler_penalty(text) == 0.0

    def test_filler_phrase(self):
        report = detect_filler_language("In conclusion, economics explains incentives well.")
        assert report.labels == ['Filler phrase']
        assert report.penalty == pytest.approx(0.2)

    def test_generic_passion(self):
        report = detect_filler_language("I want to make a difference in the world through economics.")
        assert 'Generic passion statement' in report.labels

    def test_every_matching_pattern_counts(self):
        # Two filler phrases in one sentence
        report = detect_filler_language("In conclusion, it is clear that markets work.")
        assert report.penalty == pytest.approx(0.4)

    def test_hit_records_sentence(self):
        report = detect_filler_language("Over the years my interest in trade has grown steadily.")
        assert report.hits[0].family == 'vague_references'
        assert report.hits[0].sentence.startswith("Over the years")


class TestWholeTextHeuristics:
    """Test first-person, opening diversity and concrete-example checks"""

    def test_long_statement_without_examples(self, no_examples_statement):
        report = detect_filler_language(no_examples_statement)
        assert 'Long statement without concrete examples' in report.labels
        assert report.penalty >= 0.6

    def test_examples_avoid_the_increment(self, no_examples_statement):
        text = no_examples_statement + " For example, rent controls. Specifically, price caps."
        assert 'Long statement without concrete examples' not in detect_filler_language(text).labels

    def test_repetitive_openings(self, no_examples_statement):
        assert 'Repetitive sentence openings' in detect_filler_language(no_examples_statement).labels

    def test_first_person_overuse(self, listing_statement):
        assert 'Too many first-person sentences' in detect_filler_language(listing_statement).labels


class TestPenaltyBounds:
    """Test the cap and purity"""

    def test_capped_at_three(self, cliche_statement):
        report = detect_filler_language(cliche_statement * 3)
        assert report.raw_penalty > 3.0
        assert report.penalty == 3.0

    def test_blank_text(self):
        assert compute_filler_penalty("") == 0.0
        assert compute_filler_penalty("   \n ") == 0.0

    def test_idempotent(self, cliche_statement):
        assert detect_filler_language(cliche_statement) == detect_filler_language(cliche_statement)

    def test_to_dict(self, cliche_statement):
        data = detect_filler_language(cliche_statement).to_dict()
        assert data['penalty'] <= 3.0
        assert all('label' in hit for hit in data['hits'])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
