"""
Tests for the Statement Evaluator, the evaluator registry, weight
configuration and logging setup
"""

import json
import logging

import pytest
from statement_grader import (
    StatementTooShortError,
    evaluate_statement,
    get_evaluator,
    list_evaluators,
)
from statement_grader.config import WEIGHTS_ENV_VAR, load_criterion_weights, weights_from_env
from statement_grader.evaluators.evidence import EvidenceEvaluator
from statement_grader.evaluators.statement import (
    CRITERION_WEIGHTS,
    StatementEvaluator,
    evaluate_criteria,
    format_draft_comparison,
)
from statement_grader.logging_config import ROOT_LOGGER, setup_logging


class TestTooShort:
    """Statements under 100 characters are rejected"""

    def test_short_statement_raises(self):
        with pytest.raises(StatementTooShortError) as excinfo:
            evaluate_statement("I like economics.")
        assert excinfo.value.length == len("I like economics.")
        assert excinfo.value.minimum == 100

    def test_whitespace_is_not_content(self):
        with pytest.raises(StatementTooShortError):
            evaluate_statement("   " + "a" * 99 + "   ")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            evaluate_statement("")

    def test_minimum_length_accepted(self):
        report = evaluate_statement("Economics " * 11)
        assert report.overall_score >= 0.5


class TestStatementEvaluator:
    """Test the evaluator class"""

    def test_dict_input(self, strong_statement, lse_economics):
        evaluator = StatementEvaluator()
        result = evaluator.evaluate({
            'statement': strong_statement,
            'evidence': [{'type': 'book', 'title': 'Capital'}],
            'target': lse_economics,
        })
        assert len(result.evidence_scores) == 1
        assert result.university_advice

    def test_evidence_none_means_no_evidence(self, strong_statement):
        report = evaluate_statement(strong_statement, evidence=None)
        assert report.evidence_scores == []
        assert report == evaluate_statement(strong_statement)

    def test_target_from_constructor(self, strong_statement, lse_economics):
        result = StatementEvaluator(lse_economics).evaluate(strong_statement)
        assert result.narrative_for('university_specific').title != "No target university"

    def test_set_target(self, strong_statement):
        evaluator = StatementEvaluator()
        evaluator.set_target({'name': 'University of Oxford', 'course': 'Economics'})
        assert evaluator.evaluate(strong_statement).university_advice[0].startswith("Show intellectual curiosity")

    def test_evaluate_batch(self, strong_statement, listing_statement):
        results = StatementEvaluator().evaluate_batch({'v1': listing_statement, 'v2': strong_statement})
        assert list(results) == ['v1', 'v2']
        assert results['v2'].overall_score > results['v1'].overall_score

    def test_generate_report(self, strong_statement):
        evaluator = StatementEvaluator()
        report = evaluator.generate_report(evaluator.evaluate(strong_statement), "Alex")
        assert "# Personal Statement Report: Alex" in report
        assert "| Academic Criteria |" in report
        assert "40%" in report

    def test_draft_comparison(self, strong_statement, listing_statement):
        results = StatementEvaluator().evaluate_batch({'v1': listing_statement, 'v2': strong_statement})
        summary = format_draft_comparison(results)
        assert "| v1 |" in summary and "| v2 |" in summary
        assert "Change from first to latest draft" in summary

    def test_custom_weights_change_score(self, strong_statement, tmp_path):
        path = tmp_path / "weights.json"
        path.write_text(json.dumps({'academic_criteria': 0.2, 'university_specific': 0.2}))
        evaluator = StatementEvaluator()
        default = evaluator.evaluate(strong_statement)
        evaluator.load_weights(str(path))
        custom = evaluator.evaluate(strong_statement)
        assert custom.weighted_score != default.weighted_score


class TestRegistry:
    """Test the evaluator registry"""

    def test_list_evaluators(self):
        assert list_evaluators() == ['statement', 'evidence']

    def test_get_evaluator(self):
        assert get_evaluator('statement') is StatementEvaluator
        assert get_evaluator('evidence') is EvidenceEvaluator

    def test_unknown_evaluator(self):
        with pytest.raises(ValueError, match="Available: statement, evidence"):
            get_evaluator('thesis')


class TestWeightConfig:
    """Test loading criterion weights from JSON"""

    def test_partial_override_merges(self, tmp_path):
        path = tmp_path / "weights.json"
        path.write_text(json.dumps({'academic_criteria': 0.35, 'university_specific': 0.05}))
        weights = load_criterion_weights(str(path))
        assert weights['academic_criteria'] == 0.35
        assert weights['intellectual_qualities'] == 0.25
        assert sum(weights.values()) == pytest.approx(1.0)

    def test_bad_sum(self, tmp_path):
        path = tmp_path / "weights.json"
        path.write_text(json.dumps({'academic_criteria': 0.9}))
        with pytest.raises(ValueError, match="sum to 1.0"):
            load_criterion_weights(str(path))

    def test_unknown_criterion(self, tmp_path):
        path = tmp_path / "weights.json"
        path.write_text(json.dumps({'charisma': 0.1}))
        with pytest.raises(ValueError, match="Unknown criteria"):
            load_criterion_weights(str(path))

    def test_negative_weight(self, tmp_path):
        path = tmp_path / "weights.json"
        path.write_text(json.dumps({'academic_criteria': -0.1, 'intellectual_qualities': 0.75}))
        with pytest.raises(ValueError, match="must not be negative"):
            load_criterion_weights(str(path))

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "weights.json"
        path.write_text(json.dumps([0.4, 0.6]))
        with pytest.raises(ValueError):
            load_criterion_weights(str(path))

    def test_direct_zero_weights_rejected(self, strong_statement):
        with pytest.raises(ValueError, match="sum to 1.0"):
            evaluate_statement(strong_statement, weights={name: 0.0 for name in CRITERION_WEIGHTS})

    def test_direct_unknown_criterion_rejected(self, strong_statement):
        with pytest.raises(ValueError, match="Unknown criteria"):
            evaluate_statement(strong_statement, weights={'charisma': 1.0})

    def test_direct_partial_table_merges(self, strong_statement):
        evaluation = evaluate_criteria(strong_statement, weights={'academic_criteria': 0.35, 'university_specific': 0.05})
        assert evaluation.weights['university_specific'] == 0.05
        assert evaluation.weights['intellectual_qualities'] == 0.25
        assert sum(evaluation.weights.values()) == pytest.approx(1.0)

    def test_env_var(self, tmp_path, monkeypatch):
        path = tmp_path / "weights.json"
        path.write_text(json.dumps({}))
        monkeypatch.setenv(WEIGHTS_ENV_VAR, str(path))
        assert weights_from_env()['academic_criteria'] == 0.40

    def test_env_var_unset(self, monkeypatch):
        monkeypatch.delenv(WEIGHTS_ENV_VAR, raising=False)
        assert weights_from_env() is None


class TestLoggingSetup:
    """Test the package logging configuration"""

    def test_console_handler(self):
        logger = setup_logging("DEBUG")
        assert logger.name == ROOT_LOGGER
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_file_handler_and_reconfigure(self, tmp_path):
        log_file = tmp_path / "logs" / "grader.log"
        setup_logging("INFO", log_file=str(log_file))
        logger = setup_logging("INFO", log_file=str(log_file))
        assert len(logger.handlers) == 2
        logging.getLogger(f"{ROOT_LOGGER}.tests").info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text()
        setup_logging("WARNING")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
