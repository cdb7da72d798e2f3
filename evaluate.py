#!/usr/bin/env python3
"""
Evaluate CLI - Score a statement draft or a set of evidence

Evaluates a JSON draft file against the statement rubric (or scores the
evidence it lists) and generates a report.

Usage:
    python evaluate.py --input drafts/Alex_v2.json --evaluator statement
    python evaluate.py --input drafts/Alex_v2.json --evaluator statement --weights weights.json
    python evaluate.py --input drafts/Alex_evidence.json --evaluator evidence

Input JSON:
    {
        "applicant": "Alex",
        "version": "v2",
        "statement": "..." or "path/to/statement.txt",
        "evidence": [{"type": "book", "title": "...", ...}],
        "target": {"name": "LSE", "course": "Economics"}
    }

Output:
    outputs/evaluations/{applicant}_{version}_{evaluator}_evaluation.json
    outputs/reports/{applicant}_{version}_{evaluator}_report.md
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from statement_grader.config import WEIGHTS_ENV_VAR, load_criterion_weights, weights_from_env
from statement_grader.errors import StatementTooShortError
from statement_grader.evaluators import get_evaluator, list_evaluators
from statement_grader.evaluators.evidence import format_evidence_ranking
from statement_grader.logging_config import setup_logging


def load_statement_text(value: str, base_dir: Path) -> str:
    """Statement field is either the text itself or a path to a .txt file"""
    if value.strip().endswith('.txt') and '\n' not in value:
        path = Path(value.strip())
        if not path.is_absolute():
            path = base_dir / path
        if not path.exists():
            print(f"ERROR: Statement file not found: {path}")
            sys.exit(1)
        return path.read_text(encoding='utf-8')
    return value


def evaluate_statement_draft(data: dict, weights) -> tuple:
    """Run the statement evaluator; returns (eval_data, report)"""

    EvaluatorClass = get_evaluator('statement')
    evaluator = EvaluatorClass(target=data.get('target'), weights=weights)

    try:
        result = evaluator.evaluate({
            'statement': data['statement'],
            'evidence': data.get('evidence', []),
        })
    except StatementTooShortError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    # Print scores
    print(f"\n✓ Evaluation complete")
    for name, score in result.criterion_scores.items():
        print(f"  {name}: {score:.1f}/10")
    print(f"  Filler penalty: -{result.filler_penalty:.1f}")
    print(f"  Overall: {result.overall_score:.1f}/10")
    print(f"  Grade: {result.grade}")
    for priority in result.priorities:
        print(f"  ⚠ [{priority.severity}] {priority.issue}")

    eval_data = {
        'applicant': data.get('applicant', 'Unknown'),
        'version': data.get('version', 'draft'),
        'evaluator': 'statement',
        'target': data.get('target'),
        'scores': {
            'criteria': result.criterion_scores,
            'weighted': result.weighted_score,
            'filler_penalty': result.filler_penalty,
            'overall': result.overall_score,
            'university_fit': result.university_fit,
        },
        'grade': result.grade,
        'feedback': result.to_dict(),
    }
    report = evaluator.generate_report(result, data.get('applicant', 'Applicant'))
    return eval_data, report


def evidence_label(item) -> str:
    if isinstance(item, dict):
        return item.get('title') or item.get('type') or 'Untitled'
    return 'Untitled'


def evaluate_evidence_set(data: dict) -> tuple:
    """Run the evidence evaluator over every listed item; returns (eval_data, report)"""

    EvaluatorClass = get_evaluator('evidence')
    evaluator = EvaluatorClass(target=data.get('target'))

    evidence = data.get('evidence', [])
    if isinstance(evidence, list):
        # Position prefix keeps items with the same title apart
        evidence = {f"{i}. {evidence_label(item)}": item for i, item in enumerate(evidence, 1)}

    results = evaluator.evaluate_batch(evidence)
    ranked = sorted(results.values(), key=lambda score: score.composite, reverse=True)

    print(f"\n✓ Scored {len(results)} evidence item(s)")
    for label, score in results.items():
        mark = '⚠' if score.error else '✓'
        print(f"  {mark} {label}: {score.composite:.1f}/10 ({score.tier})")

    eval_data = {
        'applicant': data.get('applicant', 'Unknown'),
        'version': data.get('version', 'draft'),
        'evaluator': 'evidence',
        'target': data.get('target'),
        'evidence': {label: score.to_dict() for label, score in results.items()},
    }
    report = format_evidence_ranking(ranked)
    for score in ranked:
        report += "\n---\n" + evaluator.generate_report(score)
    return eval_data, report


def main():
    parser = argparse.ArgumentParser(
        description='Evaluate a statement draft or its evidence against the rubric',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Available evaluators: {', '.join(list_evaluators())}

Examples:
    # Basic statement evaluation
    python evaluate.py --input drafts/Alex_v2.json --evaluator statement

    # Custom criterion weights (or set {WEIGHTS_ENV_VAR})
    python evaluate.py --input drafts/Alex_v2.json --evaluator statement --weights weights.json

    # Score and rank the evidence listed in the draft file
    python evaluate.py --input drafts/Alex_v2.json --evaluator evidence

    # Custom output directory with debug logging
    python evaluate.py --input drafts/Alex_v2.json --evaluator statement --output ./my_outputs --verbose
        """
    )

    parser.add_argument(
        '--input',
        required=True,
        help='Path to draft JSON file'
    )
    parser.add_argument(
        '--evaluator',
        default='statement',
        choices=list_evaluators(),
        help=f'Evaluator to use: {", ".join(list_evaluators())} (default: statement)'
    )
    parser.add_argument(
        '--output',
        default='./outputs',
        help='Output directory base (default: ./outputs)'
    )
    parser.add_argument(
        '--weights',
        help=f'Path to criterion weight JSON (optional, can also use {WEIGHTS_ENV_VAR} env var)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--log-file',
        help='Also write logs to this file (rotating)'
    )

    args = parser.parse_args()

    setup_logging('DEBUG' if args.verbose else 'WARNING', log_file=args.log_file)

    # Validate input path
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"ERROR: Input not found: {input_path}")
        sys.exit(1)

    # Load weights
    try:
        if args.weights:
            if not Path(args.weights).exists():
                print(f"ERROR: Weights file not found: {args.weights}")
                sys.exit(1)
            weights = load_criterion_weights(args.weights)
        else:
            weights = weights_from_env()
    except (ValueError, OSError) as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    # Load draft
    print(f"\n{'='*60}")
    print(f"LOADING DRAFT")
    print(f"{'='*60}")

    with open(input_path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    applicant = data.get('applicant', 'Unknown')
    version = str(data.get('version', 'draft'))
    target = data.get('target') or {}

    print(f"Applicant: {applicant}")
    print(f"Version: {version}")
    if target:
        print(f"Target: {target.get('name', '?')} - {target.get('course', '?')}")
    print(f"Evidence items: {len(data.get('evidence', []))}")

    if args.evaluator == 'statement':
        data['statement'] = load_statement_text(data.get('statement', ''), input_path.parent)
        print(f"Characters: {len(data['statement'])}")
        print(f"Words: {len(data['statement'].split())}")

    # Run evaluation
    print(f"\n{'='*60}")
    print(f"EVALUATING with {args.evaluator.upper()}")
    if weights:
        print("  Using custom criterion weights")
    print(f"{'='*60}")

    if args.evaluator == 'statement':
        eval_data, report = evaluate_statement_draft(data, weights)
    else:
        eval_data, report = evaluate_evidence_set(data)

    # Save evaluation
    output_base = Path(args.output)
    eval_dir = output_base / "evaluations"
    report_dir = output_base / "reports"
    eval_dir.mkdir(parents=True, exist_ok=True)
    report_dir.mkdir(parents=True, exist_ok=True)

    safe_name = applicant.replace(' ', '_')
    safe_version = version.replace(' ', '_')

    eval_path = eval_dir / f"{safe_name}_{safe_version}_{args.evaluator}_evaluation.json"
    with open(eval_path, 'w', encoding='utf-8') as f:
        json.dump(eval_data, f, indent=2, ensure_ascii=False)

    report_path = report_dir / f"{safe_name}_{safe_version}_{args.evaluator}_report.md"
    with open(report_path, 'w', encoding='utf-8') as f:
        f.write(report)

    logging.getLogger('statement_grader').debug("Wrote %s and %s", eval_path, report_path)

    # Summary
    print(f"\n{'='*60}")
    print("EVALUATION COMPLETE")
    print(f"{'='*60}")
    print(f"Evaluation: {eval_path}")
    print(f"Report: {report_path}")


if __name__ == "__main__":
    main()
