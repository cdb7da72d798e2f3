"""
Evidence Items - Tagged evidence records and university targets

Evidence arrives from upstream collection features as loose dicts. This module
turns them into read-only EvidenceItem records:
- The type tag is one of book / insight / project / activity
- Signal flags, ratings and free text share one attribute bag
- Missing attributes read as absent (False / 0 / ''), never raise
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from .evidence_taxonomies import EVIDENCE_TYPE_ALIASES, INSIGHT_RATING_DEFAULTS, INSIGHT_SUBTYPES

_FALSY_STRINGS = {'', '0', 'false', 'no', 'none', 'off'}


class EvidenceType(str, Enum):
    BOOK = 'book'
    INSIGHT = 'insight'
    PROJECT = 'project'
    ACTIVITY = 'activity'

    @classmethod
    def parse(cls, value: Any) -> Optional['EvidenceType']:
        """Resolve a raw tag (or alias) to an EvidenceType, None if unknown"""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        tag = value.strip().lower()
        tag = EVIDENCE_TYPE_ALIASES.get(tag, tag)
        for member in cls:
            if member.value == tag:
                return member
        return None


@dataclass(frozen=True)
class EvidenceItem:
    """One piece of supporting evidence"""

    kind: Union[EvidenceType, str]  # raw string only when the tag is unknown
    title: str = ""
    description: str = ""
    source: str = ""
    subject_area: str = ""
    subtype: str = ""  # insight kind: conceptual, connection, application, reflective, full_response
    relevant_to: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)  # attached reading notes (books)
    attributes: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        parsed = EvidenceType.parse(self.kind)
        if parsed is not None:
            object.__setattr__(self, 'kind', parsed)

    @property
    def is_known_type(self) -> bool:
        return isinstance(self.kind, EvidenceType)

    @property
    def type_name(self) -> str:
        return self.kind.value if isinstance(self.kind, EvidenceType) else str(self.kind)

    def flag(self, name: str) -> bool:
        """True when the attribute is present and truthy"""
        value = self.attributes.get(name)
        if isinstance(value, str):
            return value.strip().lower() not in _FALSY_STRINGS
        return bool(value)

    def rating(self, name: str) -> float:
        """Numeric attribute, 0.0 when absent or not a number"""
        value = self.attributes.get(name)
        if isinstance(value, bool):
            return 1.0 if value else 0.0
        try:
            return float(value)
        except (TypeError, ValueError):
            return 0.0

    def text(self, name: str) -> str:
        value = self.attributes.get(name)
        return value if isinstance(value, str) else ""

    def items(self, name: str) -> List[Any]:
        value = self.attributes.get(name)
        return list(value) if isinstance(value, (list, tuple)) else []

    def value(self, name: str) -> Any:
        return self.attributes.get(name)


@dataclass(frozen=True)
class UniversityTarget:
    """Target institution and course used to weight relevance"""

    name: str = ""
    course: str = ""
    modules: List[str] = field(default_factory=list)
    specializations: List[str] = field(default_factory=list)


# ==================== COERCION ====================

def to_snake_case(key: str) -> str:
    """universityLevel -> university_level"""
    key = re.sub(r'(?<=[a-z0-9])(?=[A-Z])', '_', key)
    return key.replace('-', '_').replace(' ', '_').lower()


def _as_text_list(value: Any) -> List[str]:
    if isinstance(value, str):
        return [value] if value.strip() else []
    if not isinstance(value, (list, tuple)):
        return []
    texts = []
    for entry in value:
        if isinstance(entry, str):
            texts.append(entry)
        elif isinstance(entry, Mapping):
            content = entry.get('content') or entry.get('text') or ''
            if isinstance(content, str):
                texts.append(content)
    return texts


def evidence_from_dict(data: Mapping, kind: Optional[str] = None) -> EvidenceItem:
    """
    Build an EvidenceItem from a plain dict

    Args:
        data: Evidence record; keys may be camelCase or snake_case
        kind: Evidence type when the caller already knows it (e.g. it came
              from the 'books' list). Otherwise read from 'kind' or 'type'.

    Returns:
        EvidenceItem (kind holds the raw tag if it is not a known type)
    """
    fields = {to_snake_case(str(key)): value for key, value in data.items()}

    raw_type = fields.pop('type', None)
    raw_kind = kind or fields.pop('kind', None) or fields.pop('evidence_type', None)
    subtype = fields.pop('subtype', None) or fields.pop('insight_type', None)

    if raw_kind is None:
        # A bare 'type' is the evidence tag unless it names an insight kind
        if str(raw_type or '').lower() in INSIGHT_SUBTYPES:
            raw_kind = 'insight'
            subtype = subtype or raw_type
        else:
            raw_kind = raw_type
    elif raw_type is not None and not subtype:
        subtype = raw_type

    parsed = EvidenceType.parse(raw_kind)
    evidence_kind = parsed if parsed is not None else str(raw_kind or '')

    title = fields.pop('title', None) or fields.pop('name', None) or ''
    description = fields.pop('description', None) or ''
    source = fields.pop('source', None) or fields.pop('author', None) or ''
    subject_area = fields.pop('subject_area', None) or fields.pop('subject', None) or ''
    relevant_to = _as_text_list(fields.pop('relevant_to', []))
    notes = _as_text_list(fields.pop('notes', [])) + _as_text_list(fields.pop('insights', []))

    if parsed is EvidenceType.INSIGHT:
        for name, default in INSIGHT_RATING_DEFAULTS.items():
            fields.setdefault(name, default)

    if parsed is EvidenceType.PROJECT and str(raw_type or '').lower().startswith('project'):
        # Project engagement records describe themselves in 'engagement'
        description = description or fields.get('engagement', '') or ''

    return EvidenceItem(
        kind=evidence_kind,
        title=str(title),
        description=str(description),
        source=str(source),
        subject_area=str(subject_area),
        subtype=str(subtype or '').lower(),
        relevant_to=relevant_to,
        notes=notes,
        attributes=fields,
    )


def coerce_evidence(evidence: Union[EvidenceItem, Mapping]) -> EvidenceItem:
    if isinstance(evidence, EvidenceItem):
        return evidence
    if isinstance(evidence, Mapping):
        return evidence_from_dict(evidence)
    return EvidenceItem(kind=type(evidence).__name__)


def target_from_dict(data: Optional[Mapping]) -> Optional[UniversityTarget]:
    """Build a UniversityTarget, None when no usable target is given"""
    if not data:
        return None
    name = data.get('name') or data.get('university') or ''
    course = data.get('course') or ''
    if not name and not course:
        return None
    return UniversityTarget(
        name=str(name),
        course=str(course),
        modules=_as_text_list(data.get('modules', [])),
        specializations=_as_text_list(data.get('specializations', [])),
    )


def coerce_target(context: Union[UniversityTarget, Mapping, None]) -> Optional[UniversityTarget]:
    if context is None or isinstance(context, UniversityTarget):
        return context
    if isinstance(context, Mapping):
        return target_from_dict(context)
    return None
