"""
Statement Feedback Generation

Turns criterion scores and extracted features into structured guidance:
- One narrative block per criterion (tiered templates with feature details)
- Severity-ranked priority list
- Strengths, concerns and improvements
- Grade label, overall narrative and grade justification
- University-specific advice

Nothing here re-reads the statement text; every message comes from scores,
feature counts or evidence scores.
"""

from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional, Sequence

from ...config import CHARACTER_LIMIT
from ..evidence.evaluator import EvidenceScore, score_evidence
from ..evidence.evidence_items import EvidenceItem, UniversityTarget
from .statement_features import FeatureSet
from .statement_scoring import CriterionEvaluation
from .statement_taxonomies import (
    CRITERION_LABELS, GRADE_BANDS, LOWEST_GRADE, SEVERITY_ORDER, MAX_PRIORITIES,
    NARRATIVE_THRESHOLDS, ACADEMIC_EXCEPTIONAL, LISTING_CRITICAL_MINIMUM, CLICHE_PRIORITY_MINIMUM,
    FILLER_IMPROVEMENT_BANDS, STRONG_EVIDENCE_COMPOSITE, WEAK_EVIDENCE_COMPOSITE,
    UNIVERSITY_ADVICE, GENERIC_UNIVERSITY_ADVICE,
)


@dataclass(frozen=True)
class CriterionNarrative:
    """Narrative feedback for one criterion"""

    criterion: str
    label: str
    score: float
    status: str  # "strong", "developing", "needs_work"
    title: str
    narrative: str
    next_step: str


@dataclass(frozen=True)
class Priority:
    """One ranked issue"""

    severity: str  # CRITICAL, HIGH, MEDIUM
    issue: str
    detail: str
    action: str


@dataclass(frozen=True)
class FeedbackReport:
    """Complete statement feedback"""

    overall_score: float
    weighted_score: float
    filler_penalty: float
    grade: str
    criterion_scores: Dict[str, float]
    sub_scores: Dict[str, Dict[str, float]]
    narratives: List[CriterionNarrative]
    priorities: List[Priority]
    strengths: List[str]
    concerns: List[str]
    improvements: List[str]
    overall_narrative: str
    grade_justification: str
    university_advice: List[str] = field(default_factory=list)
    university_fit: float = 7.0
    evidence_scores: List[EvidenceScore] = field(default_factory=list)
    features: FeatureSet = field(default_factory=FeatureSet)
    filler_hits: List[str] = field(default_factory=list)

    def narrative_for(self, criterion: str) -> Optional[CriterionNarrative]:
        for narrative in self.narratives:
            if narrative.criterion == criterion:
                return narrative
        return None

    def to_dict(self) -> Dict:
        data = asdict(self)
        data['evidence_scores'] = [score.to_dict() for score in self.evidence_scores]
        return data


# ==================== GRADE ====================

def grade_label(overall_score: float) -> str:
    """Map the overall score onto the 8 grade bands"""
    for minimum, label in GRADE_BANDS:
        if overall_score >= minimum:
            return label
    return LOWEST_GRADE


def _status(criterion: str, score: float) -> str:
    strong, developing = NARRATIVE_THRESHOLDS[criterion]
    if score >= strong:
        return 'strong'
    elif score >= developing:
        return 'developing'
    return 'needs_work'


def _listed(items: Sequence[str], limit: int = 3) -> str:
    quoted = [f"'{item}'" for item in items[:limit]]
    if len(quoted) <= 1:
        return ''.join(quoted)
    return ', '.join(quoted[:-1]) + f" and {quoted[-1]}"


# ==================== CRITERION NARRATIVES ====================

def _academic_narrative(score: float, features: FeatureSet) -> Dict[str, str]:
    books = _listed(features.books, 2)
    terms = _listed(features.academic_terms)

    if score >= ACADEMIC_EXCEPTIONAL:
        title = "Exceptional academic depth"
        narrative = "You engage with university-level material"
        narrative += f", drawing on {books}" if books else ""
        narrative += f". Vocabulary such as {terms} shows reading beyond the syllabus." if terms else "."
        next_step = "Keep this depth, and make sure every reference is followed by your own analysis."
    elif score >= 7.0:
        title = "Solid academic foundation"
        narrative = "Your statement shows genuine academic engagement"
        narrative += f" through {books}" if books else ""
        narrative += ". Push one idea further to show how you think, not just what you have read."
        next_step = "Pick your strongest reference and explain a specific argument or method from it."
    elif score >= 5.0:
        title = "Academic content needs depth"
        narrative = f"You mention {len(features.academic_terms)} academic term(s)"
        narrative += f" ({terms})" if terms else ""
        narrative += " but the statement rarely shows what you learned from your reading."
        next_step = "Name a specific book, paper or course and explain one idea from it in your own words."
    else:
        title = "Limited academic evidence"
        narrative = "There is little evidence of engagement with the subject beyond school."
        narrative += " No books or academic sources are referenced." if not features.books else ""
        next_step = "Add at least two concrete academic references (a book, lecture, MOOC or paper) and what you took from each."
    return {'title': title, 'narrative': narrative, 'next_step': next_step}


def _intellectual_narrative(score: float, features: FeatureSet) -> Dict[str, str]:
    passion = _listed(features.passion_indicators, 2)

    if score >= NARRATIVE_THRESHOLDS['intellectual_qualities'][0]:
        title = "Strong analytical thinking"
        narrative = "You question, compare and draw conclusions rather than simply describing."
        next_step = "Show one place where you disagreed with a source or changed your mind."
    elif score >= NARRATIVE_THRESHOLDS['intellectual_qualities'][1]:
        title = "Curiosity shows, analysis is thin"
        narrative = "Your interest comes across"
        narrative += f" (you describe being {passion})" if passion else ""
        narrative += ", but few sentences show you analysing ideas or weighing evidence."
        next_step = "After each experience, add a sentence on what it made you question."
    else:
        title = "Descriptive rather than analytical"
        narrative = "The statement mostly describes what you did, with little reasoning about why it matters."
        next_step = "Use 'because', 'however' and 'this suggests' to show your reasoning step by step."
    return {'title': title, 'narrative': narrative, 'next_step': next_step}


def _development_narrative(score: float, features: FeatureSet) -> Dict[str, str]:
    listing = features.listing_patterns
    progression = len(features.progression_phrases)

    if score >= NARRATIVE_THRESHOLDS['intellectual_development'][0]:
        title = "Clear intellectual journey"
        narrative = f"Your experiences build on each other ({progression} progression phrase(s) link them)."
        next_step = "Make sure the journey ends with where you want to go next at university."
    elif score >= NARRATIVE_THRESHOLDS['intellectual_development'][1]:
        title = "Development partly shown"
        narrative = "Some experiences are linked, but others sit side by side without explanation."
        next_step = "Connect each paragraph to the last: what did one experience lead you to do next?"
    else:
        title = "Critical issue: Activity listing detected"
        narrative = (
            f"Your statement uses {listing} listing phrase(s) such as 'I have' and 'I also', "
            f"but only {progression} phrase(s) showing how one experience led to another."
        )
        next_step = "Replace the list with a chain: what you did, what it made you ask, and what you explored next."
    return {'title': title, 'narrative': narrative, 'next_step': next_step}


def _engagement_narrative(score: float, features: FeatureSet) -> Dict[str, str]:
    research = _listed(features.research_mentions, 2)

    if score >= NARRATIVE_THRESHOLDS['subject_engagement'][0]:
        title = "Mature subject engagement"
        narrative = "You engage with academic sources and show respect for expert work."
        next_step = "Keep a humble tone: show what you still want to learn."
    elif score >= NARRATIVE_THRESHOLDS['subject_engagement'][1]:
        title = "Engagement could be more scholarly"
        narrative = "You show interest in the subject"
        narrative += f" and mention {research}" if research else ""
        narrative += ", but rely on general rather than academic sources."
        next_step = "Swap a documentary or article for a textbook, journal paper or lecture."
    else:
        title = "Surface-level engagement"
        narrative = "The statement gives little sign of engagement with academic work in the subject."
        next_step = "Read one accessible academic text and reflect on a specific idea from it."
    return {'title': title, 'narrative': narrative, 'next_step': next_step}


def _communication_narrative(score: float, features: FeatureSet) -> Dict[str, str]:
    connectors = _listed(features.connection_words)

    if score >= NARRATIVE_THRESHOLDS['communication_structure'][0]:
        title = "Clear and well structured"
        narrative = "Your writing flows logically"
        narrative += f", using connectors such as {connectors}" if connectors else ""
        narrative += ", and supports points with specific detail."
        next_step = "Read it aloud once more to catch any paragraph that drifts."
    elif score >= NARRATIVE_THRESHOLDS['communication_structure'][1]:
        title = "Structure needs tightening"
        narrative = f"You use {len(features.connection_words)} linking word(s); some paragraphs feel disconnected."
        next_step = "Open each paragraph with a sentence that links it to the one before."
    else:
        title = "Flow and specificity need work"
        narrative = "Paragraphs read as separate points, and few claims are backed by concrete detail."
        next_step = "Add transitions and at least one specific example (a name, number or result) per paragraph."
    return {'title': title, 'narrative': narrative, 'next_step': next_step}


def _personal_narrative(score: float, features: FeatureSet) -> Dict[str, str]:
    reflection = _listed(features.personal_reflection, 2)

    if score >= NARRATIVE_THRESHOLDS['personal_development'][0]:
        title = "Thoughtful reflection"
        narrative = "You reflect on what your experiences taught you"
        narrative += f" ({reflection})" if reflection else ""
        narrative += " and where you want to take it."
        next_step = "Keep reflections specific to the subject, not general life lessons."
    elif score >= NARRATIVE_THRESHOLDS['personal_development'][1]:
        title = "Reflection is present but brief"
        narrative = "You touch on what you learned, but do not show how your thinking changed."
        next_step = "Describe a belief you held before an experience and how it shifted afterwards."
    else:
        title = "Little personal reflection"
        narrative = "The statement reports experiences without saying what they meant to you."
        next_step = "For your two key experiences, add what you realised and what you plan to do with it."
    return {'title': title, 'narrative': narrative, 'next_step': next_step}


def _factual_narrative(score: float, features: FeatureSet) -> Dict[str, str]:
    if score >= NARRATIVE_THRESHOLDS['factual_accuracy'][0]:
        title = "No factual concerns"
        narrative = "No common misconceptions or overconfident claims were found."
        next_step = "Double-check any statistics or dates you quote."
    elif score >= NARRATIVE_THRESHOLDS['factual_accuracy'][1]:
        title = "Some overconfident claims"
        narrative = "A few claims are stated with more certainty than a school student can support."
        next_step = "Soften claims like 'I have proven' to 'my results suggest'."
    else:
        title = "Questionable factual content"
        narrative = "The statement contains claims that admissions tutors would recognise as errors."
        next_step = "Check every scientific or historical claim against a reliable source."
    return {'title': title, 'narrative': narrative, 'next_step': next_step}


def _university_narrative(score: float, features: FeatureSet, context: Optional[UniversityTarget]) -> Dict[str, str]:
    if context is None:
        return {
            'title': "No target university",
            'narrative': "No target university was given, so course fit was not assessed.",
            'next_step': "Add your target university and course for tailored feedback.",
        }

    if score >= NARRATIVE_THRESHOLDS['university_specific'][0]:
        title = "Well tailored to your course"
        narrative = f"Your statement speaks directly to {context.course or 'the course'} at {context.name or 'your target'}."
        next_step = "Keep it course-focused so it still reads well at your other choices."
    elif score >= NARRATIVE_THRESHOLDS['university_specific'][1]:
        title = "Partly tailored"
        narrative = "You reference the course, but not the topics it actually covers."
        next_step = "Mention a module or specialisation that connects to your reading."
    else:
        title = "Not yet tailored"
        narrative = f"Nothing in the statement connects to {context.course or 'your course'} specifically."
        next_step = "Research the course content and link one of your interests to it."
    return {'title': title, 'narrative': narrative, 'next_step': next_step}


def generate_narratives(
    scores: Dict[str, float],
    features: FeatureSet,
    context: Optional[UniversityTarget] = None
) -> List[CriterionNarrative]:
    """One narrative block per criterion, in criterion order"""

    builders = {
        'academic_criteria': _academic_narrative,
        'intellectual_qualities': _intellectual_narrative,
        'intellectual_development': _development_narrative,
        'subject_engagement': _engagement_narrative,
        'communication_structure': _communication_narrative,
        'personal_development': _personal_narrative,
        'factual_accuracy': _factual_narrative,
    }

    narratives = []
    for criterion, label in CRITERION_LABELS.items():
        score = scores.get(criterion, 0.0)
        if criterion == 'university_specific':
            parts = _university_narrative(score, features, context)
        else:
            parts = builders[criterion](score, features)
        narratives.append(CriterionNarrative(
            criterion=criterion,
            label=label,
            score=score,
            status=_status(criterion, score),
            title=parts['title'],
            narrative=parts['narrative'],
            next_step=parts['next_step'],
        ))
    return narratives


# ==================== PRIORITIES ====================

def generate_priorities(features: FeatureSet) -> List[Priority]:
    """Severity-ranked issues from feature counts, at most four"""

    priorities = []
    listing = features.listing_patterns
    progression = len(features.progression_phrases)

    if listing >= LISTING_CRITICAL_MINIMUM and listing > progression * 2:
        priorities.append(Priority(
            severity='CRITICAL',
            issue="Activity listing instead of development",
            detail=f"{listing} listing phrase(s) against {progression} progression phrase(s)",
            action="Show how each experience led to the next instead of listing them",
        ))

    if not features.personal_reflection:
        priorities.append(Priority(
            severity='HIGH',
            issue="No personal development shown",
            detail="No sentences describe what you learned or realised",
            action="Add reflection on how your experiences changed your thinking",
        ))

    if len(features.cliches) >= CLICHE_PRIORITY_MINIMUM:
        priorities.append(Priority(
            severity='HIGH',
            issue="Overuse of clichéd language",
            detail=f"Cliches found: {_listed(features.cliches)}",
            action="Replace each cliche with a specific example of your own",
        ))

    if len(features.books) < 2 and len(features.academic_terms) < 2:
        priorities.append(Priority(
            severity='MEDIUM',
            issue="Limited academic evidence",
            detail=f"{len(features.books)} book(s) and {len(features.academic_terms)} academic term(s) found",
            action="Reference specific reading and the ideas you took from it",
        ))

    if len(features.connection_words) < 2:
        priorities.append(Priority(
            severity='MEDIUM',
            issue="Poor paragraph flow",
            detail=f"Only {len(features.connection_words)} linking word(s) used",
            action="Use transitions such as 'however', 'therefore' and 'consequently' between ideas",
        ))

    if features.character_count > CHARACTER_LIMIT:
        priorities.append(Priority(
            severity='MEDIUM',
            issue="Exceeds character limit",
            detail=f"{features.character_count} characters (limit {CHARACTER_LIMIT})",
            action=f"Cut {features.character_count - CHARACTER_LIMIT} characters, starting with filler",
        ))

    priorities.sort(key=lambda priority: SEVERITY_ORDER[priority.severity])
    return priorities[:MAX_PRIORITIES]


# ==================== STRENGTHS / CONCERNS / IMPROVEMENTS ====================

def generate_strengths(
    scores: Dict[str, float],
    features: FeatureSet,
    filler_penalty: float,
    evidence_scores: Sequence[EvidenceScore] = ()
) -> List[str]:
    strengths = []

    if scores.get('academic_criteria', 0.0) >= NARRATIVE_THRESHOLDS['academic_criteria'][0]:
        strengths.append("Strong academic foundation with university-level engagement")
    if scores.get('intellectual_qualities', 0.0) >= NARRATIVE_THRESHOLDS['intellectual_qualities'][0]:
        strengths.append("Clear analytical thinking and genuine curiosity")
    if scores.get('intellectual_development', 0.0) >= NARRATIVE_THRESHOLDS['intellectual_development'][0]:
        strengths.append("Ideas build on each other rather than being listed")
    if len(features.books) >= 2:
        strengths.append(f"Specific reading referenced: {_listed(features.books, 2)}")
    if features.technical_depth >= 3:
        strengths.append("Good use of technical vocabulary")
    if len(features.progression_phrases) >= 2:
        strengths.append("Shows intellectual progression between experiences")
    if len(features.specific_examples) >= 2:
        strengths.append("Uses concrete, specific examples")
    if len(features.personal_reflection) >= 2:
        strengths.append("Reflects on what experiences taught you")
    if filler_penalty < 0.5 and features.sentence_count > 0:
        strengths.append("Concise writing with minimal filler")

    strong_evidence = [score for score in evidence_scores if score.composite >= STRONG_EVIDENCE_COMPOSITE]
    if strong_evidence:
        strengths.append(f"{len(strong_evidence)} strong piece(s) of supporting evidence selected")

    return strengths or ["Shows interest in the subject"]


def generate_concerns(
    scores: Dict[str, float],
    features: FeatureSet,
    evidence_scores: Sequence[EvidenceScore] = ()
) -> List[str]:
    concerns = []

    if len(features.cliches) >= 2:
        concerns.append(f"Relies on cliched phrases ({_listed(features.cliches, 2)})")
    if len(features.vague_statements) >= 2:
        concerns.append("Vague references instead of specific experiences")
    if len(features.filler_phrases) >= 2:
        concerns.append("Filler phrases dilute the argument")
    if features.listing_patterns > LISTING_CRITICAL_MINIMUM:
        concerns.append("Lists activities without linking them")
    if features.character_count > CHARACTER_LIMIT:
        concerns.append(f"Over the {CHARACTER_LIMIT} character limit by {features.character_count - CHARACTER_LIMIT}")
    if scores.get('academic_criteria', 10.0) < NARRATIVE_THRESHOLDS['academic_criteria'][1]:
        concerns.append("Academic engagement is too thin for a competitive application")
    if scores.get('intellectual_development', 10.0) < 4.0:
        concerns.append("Little evidence of intellectual development")
    if scores.get('factual_accuracy', 10.0) < NARRATIVE_THRESHOLDS['factual_accuracy'][1]:
        concerns.append("Contains questionable factual claims")

    weak_evidence = [
        score.title or score.evidence_type for score in evidence_scores
        if score.error is None and score.composite < WEAK_EVIDENCE_COMPOSITE
    ]
    if weak_evidence:
        concerns.append(f"Weak supporting evidence: {_listed(weak_evidence)}")
    invalid = [score for score in evidence_scores if score.error]
    if invalid:
        concerns.append(f"{len(invalid)} evidence item(s) have an unknown type and were not scored")

    return concerns or ["No major concerns identified"]


def generate_improvements(scores: Dict[str, float], filler_penalty: float) -> List[str]:
    improvements = []

    for minimum, advice in FILLER_IMPROVEMENT_BANDS:
        if filler_penalty >= minimum:
            improvements.append(advice)
            break

    if scores.get('academic_criteria', 0.0) < NARRATIVE_THRESHOLDS['academic_criteria'][0]:
        improvements.append("Add specific academic references and explain what you took from each")
    if scores.get('intellectual_qualities', 0.0) < NARRATIVE_THRESHOLDS['intellectual_qualities'][0]:
        improvements.append("Show analysis: compare ideas, question assumptions, reach your own conclusions")
    if scores.get('intellectual_development', 0.0) < NARRATIVE_THRESHOLDS['intellectual_development'][1]:
        improvements.append("Link experiences causally: explain what led you from one to the next")
    if scores.get('subject_engagement', 0.0) < NARRATIVE_THRESHOLDS['subject_engagement'][1]:
        improvements.append("Engage with academic sources rather than popular media")
    if scores.get('communication_structure', 0.0) < NARRATIVE_THRESHOLDS['communication_structure'][1]:
        improvements.append("Use transitions and concrete examples to improve flow")
    if scores.get('personal_development', 0.0) < NARRATIVE_THRESHOLDS['personal_development'][1]:
        improvements.append("Reflect on how your thinking changed and where you want to take it")

    return improvements or ["Polish wording and check the statement reads naturally aloud"]


# ==================== UNIVERSITY ADVICE ====================

def generate_university_advice(context: Optional[UniversityTarget]) -> List[str]:
    """First matching institution or course template, else generic advice"""

    if context is None:
        return []

    fields = {'university': context.name.lower(), 'course': context.course.lower()}
    for template in UNIVERSITY_ADVICE:
        value = fields[template['match']]
        if any(keyword in value for keyword in template['keywords']):
            return list(template['advice'])
    return list(GENERIC_UNIVERSITY_ADVICE)


# ==================== OVERALL ====================

def _overall_narrative(overall: float, features: FeatureSet) -> str:
    subject = features.subject or "your chosen subject"
    if overall >= 8.0:
        return f"This is a highly competitive statement that shows genuine academic commitment to {subject}."
    elif overall >= 6.5:
        return f"A solid statement with clear interest in {subject}. Targeted revisions could make it stand out."
    elif overall >= 5.0:
        return f"The statement shows potential, but needs more depth and specific evidence of engagement with {subject}."
    return f"The statement needs substantial revision to show real engagement with {subject}."


def _grade_justification(evaluation: CriterionEvaluation, grade: str) -> str:
    weighted = {name: score for name, score in evaluation.scores.items() if evaluation.weights.get(name, 0) > 0}
    relative = {name: score / NARRATIVE_THRESHOLDS[name][0] for name, score in weighted.items()}
    strongest = max(relative, key=relative.get)
    weakest = min(relative, key=relative.get)

    justification = (
        f"Grade {grade.split(' ')[0]}: weighted criterion score {evaluation.weighted_score:.1f}"
        f" minus {evaluation.filler.penalty:.1f} for filler language gives {evaluation.overall_score:.1f}."
    )
    justification += (
        f" Strongest area: {CRITERION_LABELS[strongest]} ({evaluation.scores[strongest]:.1f})."
        f" Weakest area: {CRITERION_LABELS[weakest]} ({evaluation.scores[weakest]:.1f})."
    )
    return justification


def compose_feedback(
    evaluation: CriterionEvaluation,
    features: FeatureSet,
    evidence: Sequence[EvidenceItem] = (),
    context: Optional[UniversityTarget] = None
) -> FeedbackReport:
    """
    Compose the full feedback report

    Args:
        evaluation: Output of evaluate_criteria()
        features: Output of extract_features() for the same text
        evidence: Evidence items selected for the statement
        context: Optional target university and course

    Returns:
        FeedbackReport
    """
    evidence_scores = [score_evidence(item, context) for item in evidence]
    grade = grade_label(evaluation.overall_score)
    penalty = evaluation.filler.penalty

    return FeedbackReport(
        overall_score=evaluation.overall_score,
        weighted_score=evaluation.weighted_score,
        filler_penalty=penalty,
        grade=grade,
        criterion_scores=dict(evaluation.scores),
        sub_scores={name: dict(subs) for name, subs in evaluation.sub_scores.items()},
        narratives=generate_narratives(evaluation.scores, features, context),
        priorities=generate_priorities(features),
        strengths=generate_strengths(evaluation.scores, features, penalty, evidence_scores),
        concerns=generate_concerns(evaluation.scores, features, evidence_scores),
        improvements=generate_improvements(evaluation.scores, penalty),
        overall_narrative=_overall_narrative(evaluation.overall_score, features),
        grade_justification=_grade_justification(evaluation, grade),
        university_advice=generate_university_advice(context),
        university_fit=evaluation.university_fit,
        evidence_scores=evidence_scores,
        features=features,
        filler_hits=evaluation.filler.labels,
    )
