"""
Tests for the eight statement criteria and the overall score
"""

import pytest
from statement_grader.evaluators.evidence import UniversityTarget, evidence_from_dict
from statement_grader.evaluators.statement import (
    calculate_overall_score,
    calculate_university_fit,
    evaluate_criteria,
    evaluate_statement,
    extract_features,
    score_all_criteria,
)
from statement_grader.evaluators.statement.statement_scoring import (
    score_academic_criteria,
    score_factual_accuracy,
    score_intellectual_development,
    score_university_specific,
)
from statement_grader.evaluators.statement.statement_taxonomies import CRITERION_WEIGHTS, LISTING_PATTERNS


class TestIntellectualDevelopment:
    """Progression vs activity listing"""

    def test_listing_scores_low(self, listing_statement):
        score, subs = score_intellectual_development(listing_statement)
        assert score <= 2.0
        assert subs['activity_listing'] == 6
        assert subs['listing_penalty'] == pytest.approx(0.9)

    def test_longer_listing_phrases_score_low(self):
        text = (
            "I took part in a maths olympiad. I was involved in the school newspaper. "
            "I engaged with a local charity. I took part in a chess league. "
            "I was involved in a model parliament. I engaged with a reading group."
        )
        score, subs = score_intellectual_development(text)
        assert subs['activity_listing'] == 6
        assert score <= 2.0

        report = evaluate_statement(text)
        assert report.criterion_scores['intellectual_development'] <= 2.0
        assert report.priorities[0].severity == 'CRITICAL'

    def test_listing_count_matches_features(self, listing_statement, cliche_statement, strong_statement):
        for text in (listing_statement, cliche_statement, strong_statement):
            _, subs = score_intellectual_development(text)
            assert subs['activity_listing'] == extract_features(text).listing_patterns

    def test_every_listing_phrase_counts(self):
        for phrase in LISTING_PATTERNS:
            _, subs = score_intellectual_development(f"{phrase.capitalize()} something.")
            assert subs['activity_listing'] == 1, phrase

    def test_progression_scores_high(self):
        text = (
            "Reading about trade this led me to study tariffs. Building on this, my interest deepened. "
            "Following this, I modelled import prices, which led to a new question."
        )
        score, _ = score_intellectual_development(text)
        assert score >= 7.0

    def test_floor_of_one(self):
        text = " ".join(["I have done this. I also did that. I did more."] * 5)
        score, _ = score_intellectual_development(text)
        assert score == 1.0


class TestAcademicCriteria:
    """Knowledge, sources, depth and self-assessment"""

    def test_overstatement_lowers_self_assessment(self):
        modest = "I learned about calculus from a university lecture on integral methods."
        boastful = "I mastered calculus from a university lecture on integral methods."
        _, modest_subs = score_academic_criteria(modest)
        _, boastful_subs = score_academic_criteria(boastful)
        assert modest_subs['self_assessment_accuracy'] > boastful_subs['self_assessment_accuracy']

    def test_strong_beats_listing(self, strong_statement, listing_statement):
        strong, _ = score_academic_criteria(strong_statement)
        weak, _ = score_academic_criteria(listing_statement)
        assert strong > weak


class TestFactualAccuracy:
    """Misconception and overconfidence deductions"""

    def test_clean_text_base_score(self, strong_statement):
        score, _ = score_factual_accuracy(strong_statement)
        assert score == 8.0

    def test_misconception_deducted(self):
        score, subs = score_factual_accuracy("I was surprised to learn that atoms are the smallest particles.")
        assert score == 5.0
        assert subs['misconceptions'] == 1

    def test_overconfident_claim(self):
        score, _ = score_factual_accuracy("I have proven that markets clear instantly.")
        assert score == 7.5


class TestUniversitySpecific:
    """Target name, course and module mentions"""

    def test_neutral_without_target(self, strong_statement):
        assert score_university_specific(strong_statement, None) == (5.0, {})

    def test_mentions_add_points(self):
        target = UniversityTarget(name='LSE', course='Economics', modules=['Econometrics'])
        score, subs = score_university_specific("At LSE the Economics course and its Econometrics module appeal.", target)
        assert subs['names_university'] and subs['names_course'] and subs['names_module']
        assert score == 10.0


class TestUniversityFit:
    """Supplementary fit score"""

    def test_no_target(self, strong_statement):
        assert calculate_university_fit(strong_statement, [], None) == 7.0

    def test_deep_insight_bonus_for_tutorial_universities(self):
        text = "Market policy matters."
        insight = evidence_from_dict({'type': 'reflective', 'intellectualDepth': 9})
        oxford = UniversityTarget(name='University of Oxford', course='Economics')
        leeds = UniversityTarget(name='University of Leeds', course='Economics')
        assert calculate_university_fit(text, [insight], oxford) == calculate_university_fit(text, [insight], leeds) + 2.0


class TestOverallScore:
    """Weighted combination and penalty"""

    def test_penalty_subtracted(self):
        scores = {name: 6.0 for name in CRITERION_WEIGHTS}
        overall, weighted, _ = calculate_overall_score(scores, 1.0)
        assert weighted == pytest.approx(6.0)
        assert overall == pytest.approx(5.0)

    def test_floor(self):
        scores = {name: 1.0 for name in CRITERION_WEIGHTS}
        overall, _, _ = calculate_overall_score(scores, 3.0)
        assert overall == 0.5

    def test_custom_weights(self):
        scores = {name: 0.0 for name in CRITERION_WEIGHTS}
        scores['factual_accuracy'] = 8.0
        weights = {name: 0.0 for name in CRITERION_WEIGHTS}
        weights['factual_accuracy'] = 1.0
        overall, _, contributions = calculate_overall_score(scores, 0.0, weights)
        assert overall == 8.0
        assert contributions['factual_accuracy'] == 8.0

    def test_university_specific_unweighted(self, strong_statement):
        evaluation = evaluate_criteria(strong_statement, context=UniversityTarget(name='LSE', course='Economics'))
        assert evaluation.contributions['university_specific'] == 0.0

    def test_all_criteria_bounded(self, strong_statement, listing_statement, cliche_statement):
        for text in (strong_statement, listing_statement, cliche_statement):
            scores, _ = score_all_criteria(text)
            assert set(scores) == set(CRITERION_WEIGHTS)
            assert all(0.0 <= score <= 10.0 for score in scores.values())

    def test_evaluation_bounds(self, cliche_statement):
        evaluation = evaluate_criteria(cliche_statement)
        assert 0.0 <= evaluation.filler.penalty <= 3.0
        assert evaluation.overall_score >= 0.5

    def test_deterministic(self, strong_statement):
        assert evaluate_criteria(strong_statement) == evaluate_criteria(strong_statement)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
