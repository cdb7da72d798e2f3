"""
Tests for the Evidence Evaluator

Covers:
- Coercion of raw evidence dicts (camelCase keys, aliases, insight subtypes)
- The five sub-scores and their caps
- Composite, recommendation tier and suggestions
- Invalid evidence types
- Ranking and reports
"""

import pytest
from statement_grader.errors import INVALID_EVIDENCE_TYPE
from statement_grader.evaluators.evidence import (
    EvidenceEvaluator,
    EvidenceItem,
    EvidenceType,
    UniversityTarget,
    evidence_from_dict,
    target_from_dict,
    score_evidence,
    rank_evidence,
    format_evidence_ranking,
    score_personal_engagement,
    score_uniqueness,
    resolve_institution_tier,
    recommendation_tier,
)
from statement_grader.evaluators.evidence.evidence_taxonomies import (
    ACADEMIC_DEPTH_RULES,
    EVIDENCE_QUALITY_RULES,
    INSTITUTION_TIERS,
    LOWEST_TIER,
    PERSONAL_ENGAGEMENT_RULES,
    SUB_SCORE_CAPS,
    UNIQUENESS_RULES,
)


def _positive_flags(rules):
    """Flag names named by the rules that add to a score"""
    names = []
    for rule in rules:
        if rule['weight'] <= 0:
            continue
        for condition in rule['requires']:
            if condition[0] in ('flag', 'any'):
                names.extend(name for name in condition[1:] if name not in names)
    return names


# (sub-score, evidence type, target institution, rule table)
RULE_TABLES = [
    *[('academic_depth', kind, None, rules) for kind, rules in ACADEMIC_DEPTH_RULES.items()],
    ('university_relevance', 'project', 'University of Oxford', INSTITUTION_TIERS['elite_tutorial']['rules']),
    ('university_relevance', 'project', 'LSE', INSTITUTION_TIERS['research_intensive']['rules']),
    ('university_relevance', 'project', 'University of Kent', INSTITUTION_TIERS['general']['rules']),
    ('personal_engagement', 'activity', None, PERSONAL_ENGAGEMENT_RULES),
    ('uniqueness', 'book', None, UNIQUENESS_RULES),
    ('evidence_quality', 'project', None, EVIDENCE_QUALITY_RULES),
]

FLAG_CASES = [
    pytest.param(part, kind, target, rules, flag, id=f'{part}-{kind}-{flag}')
    for part, kind, target, rules in RULE_TABLES
    for flag in _positive_flags(rules)
]


class TestEvidenceCoercion:
    """Test raw dict -> EvidenceItem conversion"""

    def test_camel_case_flags_become_snake_case(self):
        item = evidence_from_dict({'type': 'book', 'universityLevel': True})
        assert item.kind is EvidenceType.BOOK
        assert item.flag('university_level')

    def test_missing_flags_read_as_absent(self):
        item = evidence_from_dict({'type': 'project'})
        assert item.flag('research_based') is False
        assert item.rating('synthesis_quality') == 0.0
        assert item.text('content') == ""

    def test_alias_resolves_to_project(self):
        item = evidence_from_dict({'type': 'project-engagement', 'engagement': 'Built a pricing model'})
        assert item.kind is EvidenceType.PROJECT
        assert item.description == 'Built a pricing model'

    def test_insight_subtype_as_type(self):
        item = evidence_from_dict({'type': 'conceptual', 'academicLevel': 9})
        assert item.kind is EvidenceType.INSIGHT
        assert item.subtype == 'conceptual'

    def test_insight_rating_defaults(self):
        item = evidence_from_dict({'kind': 'insight', 'type': 'reflective'})
        assert item.rating('evidence_strength') == 6
        assert item.rating('academic_level') == 5

    def test_unknown_type_is_kept_raw(self):
        item = evidence_from_dict({'type': 'podcast'})
        assert not item.is_known_type
        assert item.type_name == 'podcast'

    def test_string_false_flag(self):
        item = evidence_from_dict({'type': 'book', 'academic': 'false'})
        assert item.flag('academic') is False

    def test_target_from_dict(self):
        target = target_from_dict({'university': 'University of Oxford', 'course': 'PPE'})
        assert target == UniversityTarget(name='University of Oxford', course='PPE')

    def test_empty_target_is_none(self):
        assert target_from_dict({}) is None
        assert target_from_dict({'name': '', 'course': ''}) is None


class TestEvidenceScoring:
    """Test sub-scores and composite"""

    def test_scenario_book_without_context(self):
        result = score_evidence({
            'type': 'book',
            'universityLevel': True,
            'beyondCurriculum': True,
            'technicalDepth': True,
        })
        assert result.breakdown['academic_depth'] == pytest.approx(2.0)
        assert result.breakdown['university_relevance'] == pytest.approx(0.5)
        assert result.breakdown['personal_engagement'] == 0.0
        assert result.breakdown['evidence_quality'] == 0.0
        assert result.composite == pytest.approx(3.0)
        assert result.tier == LOWEST_TIER

    def test_course_connection_with_context(self, lse_economics):
        result = score_evidence({
            'type': 'book',
            'subjectArea': 'Economics',
            'courseConnection': True,
            'relevantTo': ['Economics'],
        }, lse_economics)
        assert result.breakdown['university_relevance'] == pytest.approx(1.5)

    def test_subject_match_without_connection(self, lse_economics):
        result = score_evidence({'type': 'book', 'subjectArea': 'Economics'}, lse_economics)
        assert result.breakdown['university_relevance'] == pytest.approx(0.8)

    def test_course_keywords_add_relevance(self, lse_economics):
        plain = score_evidence({'type': 'activity'}, lse_economics)
        keyword = score_evidence({'type': 'activity', 'description': 'Ran a school market stall'}, lse_economics)
        assert keyword.breakdown['university_relevance'] > plain.breakdown['university_relevance']

    def test_elite_tutorial_rules(self):
        context = {'name': 'University of Cambridge', 'course': 'History'}
        result = score_evidence({
            'type': 'project',
            'independentThinking': True,
            'originalIdeas': True,
            'intellectualRigor': True,
        }, context)
        assert result.breakdown['university_relevance'] == pytest.approx(0.8)

    def test_generic_passion_lowers_engagement(self):
        base = {'type': 'book', 'title': 'Capital', 'emotionalConnection': True, 'articulatedImpact': True}
        flagged = dict(base, genericPassion=True)
        assert score_evidence(flagged).breakdown['personal_engagement'] < score_evidence(base).breakdown['personal_engagement']

    def test_engagement_never_negative(self):
        score, _ = score_personal_engagement(evidence_from_dict({'type': 'activity', 'superficialConnection': True}))
        assert score == 0.0

    def test_overused_example_loses_uniqueness(self):
        overused, _ = score_uniqueness(evidence_from_dict({'type': 'book', 'title': 'Freakonomics'}))
        uncommon, _ = score_uniqueness(evidence_from_dict({'type': 'book', 'title': 'The Worldly Philosophers'}))
        assert overused == 0.0
        assert uncommon == pytest.approx(0.5)

    def test_overused_list_is_per_type(self):
        score, _ = score_uniqueness(evidence_from_dict({'type': 'activity', 'title': 'Freakonomics reading club'}))
        assert score == pytest.approx(0.5)

    def test_book_notes_add_depth_and_engagement(self):
        bare = score_evidence({'type': 'book', 'title': 'Capital'})
        noted = score_evidence({'type': 'book', 'title': 'Capital', 'notes': ['Piketty argues r > g.']})
        assert noted.breakdown['academic_depth'] == pytest.approx(bare.breakdown['academic_depth'] + 0.5)
        assert noted.breakdown['personal_engagement'] == pytest.approx(0.3)

    def test_conceptual_insight_depth(self):
        result = score_evidence({'type': 'conceptual', 'academicLevel': 9})
        assert result.breakdown['academic_depth'] == pytest.approx(1.2)

    def test_full_response_reads_evidence_text(self):
        """Saved responses keep their body under 'evidence' ahead of 'content'"""
        body = "This theory and concept, with its principle and framework, led me to explore an example. " * 6
        bare = score_evidence({'type': 'full_response'})
        saved = score_evidence({'type': 'full_response', 'evidence': body, 'content': 'Short.'})

        assert bare.breakdown['academic_depth'] == pytest.approx(0.6)
        assert saved.breakdown['academic_depth'] == pytest.approx(2.0)
        assert bare.breakdown['personal_engagement'] == pytest.approx(0.4)
        assert saved.breakdown['personal_engagement'] == pytest.approx(0.7)

    def test_predictable_choice_bonus_is_negative(self):
        result = score_evidence({'type': 'activity', 'standardApproach': True})
        assert result.bonus == pytest.approx(-0.2)


class TestEvidenceBounds:
    """Test caps, determinism and monotonicity"""

    MAXED_PROJECT = {
        'type': 'project',
        'title': 'Regional wage study',
        'researchBased': True, 'independent': True, 'significantScope': True,
        'methodologyRigorous': True, 'validatedApproach': True,
        'resultsSignificant': True, 'measurableImpact': True,
        'published': True, 'originalContribution': True,
        'subjectArea': 'Economics', 'courseConnection': True, 'relevantTo': ['Economics'],
        'researchSkills': True, 'analyticalThinking': True, 'empiricalEvidence': True,
        'practicalApplication': True, 'realWorldImpact': True,
        'personalPassion': True, 'sustainedCommitment': True, 'personalSacrifice': True,
        'emotionalConnection': True, 'articulatedImpact': True,
        'personalGrowth': True, 'transformativeExperience': True, 'behaviorChange': True,
        'originalPerspective': True, 'uniqueApproach': True,
        'specificExamples': True, 'concreteDetails': True, 'contextualizedExamples': True,
        'measurableOutcomes': True, 'quantifiableResults': True, 'statisticalSignificance': True,
        'verifiable': True, 'documented': True, 'thirdPartyValidation': True,
        'primarySources': True, 'academicRigor': True,
        'exceptionalQuality': True, 'authenticPassion': True, 'innovativeApproach': True,
        'description': 'A market policy study',
    }

    def test_sub_scores_within_caps(self, lse_economics):
        result = score_evidence(self.MAXED_PROJECT, lse_economics)
        for part, cap in SUB_SCORE_CAPS.items():
            assert 0.0 <= result.breakdown[part] <= cap

    def test_composite_within_bounds(self, lse_economics):
        result = score_evidence(self.MAXED_PROJECT, lse_economics)
        assert 0.0 <= result.composite <= 10.0
        assert result.tier.startswith("Exceptional")

    def test_deterministic(self, lse_economics):
        first = score_evidence(self.MAXED_PROJECT, lse_economics)
        second = score_evidence(self.MAXED_PROJECT, lse_economics)
        assert first == second

    def test_corroborating_flag_never_decreases(self):
        base = {'type': 'book', 'universityLevel': True}
        richer = dict(base, beyondCurriculum=True, technicalDepth=True)
        assert score_evidence(richer).breakdown['academic_depth'] >= score_evidence(base).breakdown['academic_depth']

    @pytest.mark.parametrize('part, kind, target, rules, flag', FLAG_CASES)
    def test_rule_flag_never_lowers_score(self, part, kind, target, rules, flag):
        """Setting any flag a positive rule names never lowers its sub-score or the composite"""
        context = UniversityTarget(name=target, course='Economics') if target else None
        others = {name: True for name in _positive_flags(rules) if name != flag}

        for baseline in ({}, others):
            before = score_evidence(dict(baseline, type=kind, title='Case study'), context)
            after = score_evidence(dict(baseline, type=kind, title='Case study', **{flag: True}), context)
            assert after.breakdown[part] >= before.breakdown[part]
            assert after.composite >= before.composite

    def test_completing_a_rule_raises_its_sub_score(self):
        base = {'type': 'project', 'specificExamples': True, 'concreteDetails': True}
        complete = dict(base, contextualizedExamples=True)
        assert score_evidence(complete).breakdown['evidence_quality'] == pytest.approx(0.8)
        assert score_evidence(base).breakdown['evidence_quality'] == 0.0

    def test_composite_rounded_to_one_decimal(self):
        result = score_evidence({'type': 'activity', 'nationalLevel': True})
        assert result.composite == round(result.composite, 1)


class TestInvalidEvidence:
    """Unknown evidence types are reported, not raised"""

    def test_invalid_type_zeroed(self):
        result = score_evidence({'type': 'podcast', 'title': 'Freakonomics Radio'})
        assert result.error == INVALID_EVIDENCE_TYPE
        assert result.composite == 0.0
        assert all(value == 0.0 for value in result.breakdown.values())
        assert 'podcast' in result.tier

    def test_non_mapping_input(self):
        result = score_evidence(EvidenceItem(kind='video'))
        assert result.error == INVALID_EVIDENCE_TYPE


class TestTiersAndSuggestions:
    """Test recommendation bands and hints"""

    def test_tier_boundaries(self):
        assert recommendation_tier(8.5).startswith("Exceptional")
        assert recommendation_tier(7.5).startswith("Strong")
        assert recommendation_tier(5.5).startswith("Adequate")
        assert recommendation_tier(3.4) == LOWEST_TIER

    def test_suggestions_in_fixed_order(self):
        result = score_evidence({'type': 'activity'})
        assert result.suggestions == [
            "Add more technical detail or academic context",
            "Emphasize connection to your target course",
            "Include personal reflection on impact/learning",
            "Provide specific examples and measurable outcomes",
        ]

    def test_institution_tiers(self):
        assert resolve_institution_tier('University of Oxford') == 'elite_tutorial'
        assert resolve_institution_tier('Imperial College London') == 'research_intensive'
        assert resolve_institution_tier('University of Kent') == 'general'


class TestEvidenceEvaluator:
    """Test the evaluator class, ranking and reports"""

    def test_rank_evidence_descending(self):
        ranked = rank_evidence([
            {'type': 'activity', 'title': 'Chess club'},
            {'type': 'book', 'title': 'Capital', 'universityLevel': True, 'beyondCurriculum': True, 'technicalDepth': True},
            {'type': 'podcast', 'title': 'Radio'},
        ])
        composites = [score.composite for score in ranked]
        assert composites == sorted(composites, reverse=True)
        assert ranked[0].title == 'Capital'
        assert ranked[-1].error == INVALID_EVIDENCE_TYPE

    def test_evaluator_uses_target(self, lse_economics):
        evaluator = EvidenceEvaluator(lse_economics)
        result = evaluator.evaluate({'type': 'book', 'subjectArea': 'Economics'})
        assert result.breakdown['university_relevance'] == pytest.approx(0.8)

    def test_evaluate_batch(self):
        evaluator = EvidenceEvaluator()
        results = evaluator.evaluate_batch({
            'reading': {'type': 'book', 'title': 'Capital'},
            'club': {'type': 'activity', 'title': 'Chess club'},
        })
        assert set(results) == {'reading', 'club'}

    def test_generate_report(self):
        evaluator = EvidenceEvaluator()
        result = evaluator.evaluate({'type': 'book', 'title': 'Capital', 'universityLevel': True})
        report = evaluator.generate_report(result)
        assert "# Evidence Report: Capital" in report
        assert "Academic depth" in report

    def test_ranking_table(self):
        table = format_evidence_ranking(rank_evidence([{'type': 'book', 'title': 'Capital'}]))
        assert "| 1 | Capital | book |" in table

    def test_to_dict_is_serialisable(self):
        data = score_evidence({'type': 'book', 'title': 'Capital'}).to_dict()
        assert data['evidence_type'] == 'book'
        assert set(data['breakdown']) == set(SUB_SCORE_CAPS)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
