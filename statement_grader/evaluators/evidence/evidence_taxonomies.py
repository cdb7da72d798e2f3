"""
Evidence Taxonomies - Rule tables for scoring supporting evidence

Contains:
- Academic depth checklists (per evidence type)
- Institution tiers and their checklists
- Course keyword tables
- Personal engagement, uniqueness and evidence quality checklists
- Cross-cutting bonus rules
- Recommendation tiers and suggestion thresholds

Each rule fires only when ALL of its conditions hold. Conditions are tuples:
    ('flag', name)                     attribute is truthy
    ('any', name, name, ...)           at least one attribute is truthy
    ('above', name, threshold)         numeric attribute > threshold
    ('equals', name, value)            attribute equals value
    ('subtype', value)                 insight subtype equals value
    ('min_items', name, n)             list attribute has more than n items
    ('breakdown_above', part, value)   an already computed sub-score > value
"""

EVIDENCE_TYPES = ('book', 'insight', 'project', 'activity')

# Aliases used by upstream evidence collection
EVIDENCE_TYPE_ALIASES = {
    'books': 'book',
    'insights': 'insight',
    'projects': 'project',
    'project-engagement': 'project',
    'project_engagement': 'project',
    'activities': 'activity',
}

# ==================== SUB-SCORE CAPS ====================

SUB_SCORE_CAPS = {
    'academic_depth': 4.0,
    'university_relevance': 3.0,
    'personal_engagement': 2.0,
    'uniqueness': 1.0,
    'evidence_quality': 2.0,
}

COMPOSITE_MAX = 10.0

# ==================== ACADEMIC DEPTH ====================

ACADEMIC_DEPTH_RULES = {
    'book': [
        {'requires': [('any', 'university_level', 'academic')], 'weight': 1.0,
         'label': 'University-level reading'},
        {'requires': [('flag', 'beyond_curriculum'), ('flag', 'technical_depth')], 'weight': 1.0,
         'label': 'Technical reading beyond the curriculum'},
        {'requires': [('flag', 'complex_concepts'), ('flag', 'critical_analysis')], 'weight': 0.8,
         'label': 'Critical engagement with complex ideas'},
        {'requires': [('equals', 'author_credentials', 'academic'),
                      ('equals', 'published_by', 'university_press')], 'weight': 0.5,
         'label': 'Academic author and university press'},
        {'requires': [('any', 'original_research', 'seminal_work')], 'weight': 0.7,
         'label': 'Original research or seminal work'},
    ],
    'insight': [
        {'requires': [('subtype', 'conceptual'), ('above', 'academic_level', 8)], 'weight': 1.2,
         'label': 'Advanced conceptual insight'},
        {'requires': [('subtype', 'connection'), ('above', 'synthesis_level', 7)], 'weight': 1.0,
         'label': 'Strong synthesis across sources'},
        {'requires': [('subtype', 'application'), ('above', 'innovation_potential', 7)], 'weight': 0.8,
         'label': 'Innovative application'},
        {'requires': [('above', 'intellectual_depth', 8), ('flag', 'original_thinking')], 'weight': 0.8,
         'label': 'Original, deep thinking'},
        {'requires': [('above', 'evidence_strength', 8)], 'weight': 0.4,
         'label': 'Strongly evidenced'},
        {'requires': [('flag', 'interdisciplinary'), ('above', 'synthesis_quality', 7)], 'weight': 0.8,
         'label': 'Interdisciplinary synthesis'},
        {'requires': [('subtype', 'full_response')], 'weight': 0.6,
         'label': 'Full written response'},
    ],
    'project': [
        {'requires': [('flag', 'research_based'), ('flag', 'independent'), ('flag', 'significant_scope')],
         'weight': 1.5, 'label': 'Independent research of real scope'},
        {'requires': [('flag', 'methodology_rigorous'), ('flag', 'validated_approach')], 'weight': 1.0,
         'label': 'Rigorous, validated methodology'},
        {'requires': [('flag', 'results_significant'), ('flag', 'measurable_impact')], 'weight': 1.0,
         'label': 'Significant, measurable results'},
        {'requires': [('any', 'peer_reviewed', 'published', 'presented_at_conference')], 'weight': 0.8,
         'label': 'Published or presented'},
        {'requires': [('flag', 'original_contribution')], 'weight': 0.7,
         'label': 'Original contribution'},
    ],
    'activity': [
        {'requires': [('flag', 'leadership_role'), ('flag', 'demonstrated_impact')], 'weight': 1.0,
         'label': 'Leadership with demonstrated impact'},
        {'requires': [('flag', 'impact_measurable'), ('flag', 'sustainable_change')], 'weight': 0.8,
         'label': 'Measurable, lasting change'},
        {'requires': [('min_items', 'skills_developed', 4), ('flag', 'skills_applied')], 'weight': 0.6,
         'label': 'Broad skills put into practice'},
        {'requires': [('flag', 'recognition'), ('flag', 'competitive_selection')], 'weight': 0.6,
         'label': 'Competitive recognition'},
        {'requires': [('any', 'national_level', 'international_level')], 'weight': 0.5,
         'label': 'National or international level'},
    ],
}

# Attached reading notes on books: (threshold, bonus)
BOOK_NOTE_DEPTH_BONUS = {
    'has_notes': 0.5,
    'multiple_notes': 0.3,
    'detailed_note_length': 200,
    'detailed_note': 0.4,
}

# Full written insight responses
FULL_RESPONSE_LENGTH_TIERS = [(300, 0.4), (500, 0.3)]
FULL_RESPONSE_VOCABULARY = [
    'theory', 'concept', 'principle', 'framework',
    'analysis', 'hypothesis', 'methodology', 'critique',
]
FULL_RESPONSE_VOCABULARY_TIERS = [(2, 0.4), (4, 0.3)]
FULL_RESPONSE_THOUGHT_LENGTH = 30
FULL_RESPONSE_THOUGHT_BONUS = 0.3

# ==================== UNIVERSITY RELEVANCE ====================

NO_CONTEXT_RELEVANCE = 0.5

COURSE_MATCH_BONUS = {
    'connected': 1.5,
    'subject_only': 0.8,
}

INSTITUTION_TIERS = {
    'elite_tutorial': {
        'names': ['oxford', 'cambridge'],
        'rules': [
            {'requires': [('flag', 'independent_thinking'), ('flag', 'original_ideas'),
                          ('flag', 'intellectual_rigor')], 'weight': 0.8,
             'label': 'Independent, rigorous thinking'},
            {'requires': [('flag', 'academic_reading'), ('flag', 'beyond_syllabus'),
                          ('flag', 'critical_engagement')], 'weight': 0.4,
             'label': 'Critical reading beyond the syllabus'},
            {'requires': [('any', 'tutorial_system_relevance', 'dialectical_thinking')], 'weight': 0.3,
             'label': 'Suits tutorial-style discussion'},
        ],
        'label': 'Elite tutorial',
    },
    'research_intensive': {
        'names': [
            'imperial', 'ucl', 'lse', 'edinburgh', 'manchester', 'warwick',
            'bristol', 'nottingham', 'birmingham', 'leeds', 'sheffield',
        ],
        'rules': [
            {'requires': [('flag', 'research_skills'), ('flag', 'analytical_thinking'),
                          ('flag', 'empirical_evidence')], 'weight': 0.6,
             'label': 'Research and analytical skills'},
            {'requires': [('flag', 'practical_application'), ('flag', 'real_world_impact')], 'weight': 0.4,
             'label': 'Practical, real-world application'},
        ],
        'label': 'Research intensive',
    },
    'general': {
        'names': [],
        'rules': [
            {'requires': [('any', 'practical_skills', 'applied_knowledge')], 'weight': 0.3,
             'label': 'Practical skills'},
        ],
        'label': 'General',
    },
}

# First match wins; 'general' is the mandatory fallback
INSTITUTION_TIER_ORDER = ['elite_tutorial', 'research_intensive']
DEFAULT_INSTITUTION_TIER = 'general'

COURSE_KEYWORDS = {
    'economics': ['market', 'policy', 'data analysis', 'economic theory', 'behavioral'],
    'medicine': ['research', 'care', 'ethics', 'scientific method', 'patient'],
    'engineering': ['problem solving', 'design', 'technical', 'innovation', 'systems'],
    'computer science': ['programming', 'algorithm', 'computational', 'software', 'data'],
}

COURSE_KEYWORD_HIT = 0.5
COURSE_KEYWORD_WEIGHT = 0.6

# ==================== PERSONAL ENGAGEMENT ====================

PERSONAL_ENGAGEMENT_RULES = [
    {'requires': [('flag', 'personal_passion'), ('flag', 'sustained_commitment'),
                  ('flag', 'personal_sacrifice')], 'weight': 0.8,
     'label': 'Sustained, costly commitment'},
    {'requires': [('flag', 'emotional_connection'), ('flag', 'articulated_impact')], 'weight': 0.4,
     'label': 'Articulated personal impact'},
    {'requires': [('flag', 'personal_growth'), ('flag', 'transformative_experience'),
                  ('flag', 'behavior_change')], 'weight': 0.6,
     'label': 'Transformative growth'},
    {'requires': [('flag', 'continued_pursuit'), ('flag', 'deep_dive'),
                  ('flag', 'progressive_complexity')], 'weight': 0.4,
     'label': 'Continued, deepening pursuit'},
]

INSIGHT_ENGAGEMENT_RULES = [
    {'requires': [('subtype', 'reflective'), ('above', 'personal_growth', 7),
                  ('above', 'self_awareness', 7)], 'weight': 0.4,
     'label': 'Self-aware reflection'},
    {'requires': [('above', 'personal_engagement', 8), ('above', 'emotional_intelligence', 7)], 'weight': 0.4,
     'label': 'High personal engagement'},
    {'requires': [('subtype', 'full_response')], 'weight': 0.4,
     'label': 'Full written response'},
]

GENERIC_ENGAGEMENT_PENALTY = {
    'requires': [('any', 'generic_passion', 'superficial_connection')],
    'weight': -0.3,
    'label': 'Generic or superficial interest',
}

BOOK_NOTE_ENGAGEMENT_BONUS = {
    'has_notes': 0.3,
    'multiple_notes': 0.2,
    'detailed_note_length': 150,
    'detailed_note': 0.3,
    'realisation': 0.2,
}

REALISATION_WORDS = ['realize', 'understand', 'perspective', 'changed', 'thought', 'reflection']

FULL_RESPONSE_ENGAGEMENT = {
    'thought_length': 50,
    'thought_bonus': 0.3,
    'curiosity_min': 2,
    'curiosity_bonus': 0.2,
    'explored_example_bonus': 0.3,
}

CURIOSITY_WORDS = ['understand', 'explore', 'learn', 'discover', 'insight', 'realize', 'question']

# ==================== UNIQUENESS ====================

OVERUSED_EXAMPLES = {
    'book': ['thinking fast and slow', 'freakonomics', 'a brief history of time', 'brief history of time'],
    'activity': ['duke of edinburgh', 'young enterprise', 'charity walk'],
    'project': ['extended project qualification'],
    'insight': [],
}

UNCOMMON_EXAMPLE_BONUS = 0.5

UNIQUENESS_RULES = [
    {'requires': [('any', 'original_perspective', 'unique_approach')], 'weight': 0.5,
     'label': 'Original perspective'},
]

# ==================== EVIDENCE QUALITY ====================

EVIDENCE_QUALITY_RULES = [
    {'requires': [('flag', 'specific_examples'), ('flag', 'concrete_details'),
                  ('flag', 'contextualized_examples')], 'weight': 0.8,
     'label': 'Specific, contextualised examples'},
    {'requires': [('flag', 'measurable_outcomes'), ('flag', 'quantifiable_results'),
                  ('flag', 'statistical_significance')], 'weight': 0.6,
     'label': 'Quantified outcomes'},
    {'requires': [('flag', 'verifiable'), ('flag', 'documented'),
                  ('flag', 'third_party_validation')], 'weight': 0.4,
     'label': 'Independently verifiable'},
    {'requires': [('any', 'primary_sources', 'original_data')], 'weight': 0.3,
     'label': 'Primary sources or original data'},
    {'requires': [('any', 'professional_standard', 'academic_rigor')], 'weight': 0.3,
     'label': 'Professional or academic standard'},
    {'requires': [('any', 'anecdotal_only', 'unsubstantiated', 'vague')], 'weight': -0.4,
     'label': 'Anecdotal or vague'},
]

# ==================== BONUS ====================

BONUS_RULES = [
    {'requires': [('breakdown_above', 'academic_depth', 3.5), ('breakdown_above', 'university_relevance', 2.5),
                  ('flag', 'exceptional_quality')], 'weight': 0.3,
     'label': 'Exceptional academic fit'},
    {'requires': [('breakdown_above', 'personal_engagement', 1.8), ('breakdown_above', 'evidence_quality', 1.8),
                  ('flag', 'authentic_passion')], 'weight': 0.2,
     'label': 'Authentic, well-evidenced passion'},
    {'requires': [('flag', 'interdisciplinary'), ('flag', 'cross_curricular'),
                  ('above', 'synthesis_quality', 7)], 'weight': 0.2,
     'label': 'Genuine interdisciplinary synthesis'},
    {'requires': [('flag', 'innovative_approach'), ('flag', 'original_perspective')], 'weight': 0.2,
     'label': 'Innovative approach'},
    {'requires': [('any', 'international_perspective', 'cultural_synthesis')], 'weight': 0.1,
     'label': 'International perspective'},
    {'requires': [('any', 'predictable_combination', 'standard_approach')], 'weight': -0.2,
     'label': 'Predictable choice'},
]

# ==================== TIERS & SUGGESTIONS ====================

RECOMMENDATION_TIERS = [
    (8.5, "Exceptional - Rare quality evidence"),
    (7.5, "Strong - Competitive standard"),
    (6.5, "Good - Above average but common"),
    (5.5, "Adequate - Meets minimum requirements"),
    (4.5, "Weak - Below university expectations"),
    (3.5, "Poor - Significant improvement needed"),
]

LOWEST_TIER = "Inadequate - Avoid in personal statement"

# Ordered: academic -> relevance -> engagement -> quality
SUGGESTION_THRESHOLDS = [
    ('academic_depth', 2.0, "Add more technical detail or academic context"),
    ('university_relevance', 2.0, "Emphasize connection to your target course"),
    ('personal_engagement', 1.0, "Include personal reflection on impact/learning"),
    ('evidence_quality', 1.0, "Provide specific examples and measurable outcomes"),
]

INSIGHT_SUBTYPES = ('conceptual', 'connection', 'application', 'reflective', 'full_response')

# Defaults applied to insight ratings when upstream leaves them out
INSIGHT_RATING_DEFAULTS = {
    'evidence_strength': 6,
    'academic_level': 5,
}
