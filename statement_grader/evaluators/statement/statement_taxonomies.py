"""
Statement Taxonomies - Static phrase tables for personal statement assessment

Contains:
- Feature extractor phrase lists (academic vocabulary, progression, listing...)
- Subject domain keywords
- Filler-language pattern families (regex + increment)
- Criterion keyword families for the eight rubric criteria
- Criterion weights and grade bands
- University advice templates
"""

# ==================== FEATURE EXTRACTION ====================

BOOK_CONTEXT_WORDS = ['reading', 'book', 'novel', 'text', 'literature', 'publication']

ACADEMIC_TERMS = [
    'methodology', 'theoretical', 'empirical', 'optimization', 'algorithm',
    'differential', 'integral', 'matrix', 'quantum', 'molecular',
    'pathophysiology', 'econometric', 'stochastic', 'synthesis', 'paradigm',
    'correlation', 'causation', 'hypothesis', 'variable', 'regression',
    'analysis', 'statistical', 'significant', 'framework', 'model',
    'theory', 'concept', 'principle', 'phenomenon',
]

RESEARCH_MENTIONS = [
    'independent research', 'research project', 'investigation', 'study',
    'analysis', 'extended project qualification', 'epq', 'dissertation', 'thesis',
]

COURSE_REFERENCES = [
    'a-level', 'a level', 'gcse', 'course', 'curriculum', 'syllabus',
    'module', 'coursework', 'assignment', 'exam', 'qualification',
]

PROGRESSION_PHRASES = [
    'this led me to', 'building on this', 'consequently', 'as a result',
    'which prompted me to', 'following this', 'subsequently', 'this sparked',
    'inspired by this', 'this experience taught me', 'building upon',
    'this motivated me to', 'which encouraged me to', 'from this i learned',
]

LISTING_PATTERNS = [
    'i have', 'i also', 'i did', 'i participated', 'i attended', 'i completed',
    'i achieved', 'i was involved in', 'i took part in', 'i engaged with',
    'i obtained', 'additionally, i', 'furthermore, i', 'moreover, i',
]

CONNECTION_WORDS = [
    'however', 'therefore', 'furthermore', 'moreover', 'consequently',
    'subsequently', 'nevertheless', 'thus', 'hence', 'accordingly',
]

PASSION_INDICATORS = [
    'fascinated', 'intrigued', 'captivated', 'inspired', 'motivated',
    'driven', 'compelled', 'drawn to', 'passionate about', 'enthusiastic',
]

PERSONAL_REFLECTION = [
    'i learned', 'i discovered', 'i realized', 'i realised', 'i understood',
    'i developed', 'i grew', 'i came to understand', 'i found myself',
    'this taught me', 'i became aware', 'i reflected on', 'i recognized', 'i recognised',
]

FILLER_INDICATORS = [
    'i am passionate about', 'i have always been interested', 'from a young age',
    'it is clear that', 'needless to say', 'in my opinion', 'i believe that',
    'it goes without saying', 'obviously', 'undoubtedly', 'without a doubt',
]

CLICHES = [
    'always been interested', 'from a young age', 'passion for', 'fascinated by',
    'unique perspective', 'think outside the box', 'comfort zone', 'make a difference',
    'pursue my dreams', 'follow my passion', 'achieve my goals', 'bright future',
]

VAGUE_STATEMENTS = [
    'something happened', 'an event occurred', 'through various experiences',
    'over the years', 'throughout my education', 'during my time',
    'as i have grown', 'in many ways', 'to some extent',
]

TECHNICAL_DEPTH_TERMS = [
    'methodology', 'analysis', 'research', 'study', 'investigation', 'experiment',
    'data', 'results', 'hypothesis', 'theory', 'algorithm', 'optimization',
    'statistical', 'mathematical',
]

# Words that start sentences or name institutions rather than specifics
PROPER_NOUN_STOPWORDS = [
    'I', 'The', 'This', 'That', 'My', 'University', 'College', 'However', 'Therefore',
]

# Ordered: first subject with any keyword hit wins
SUBJECT_KEYWORDS = {
    'economics': ['economic', 'market', 'trade', 'inflation', 'gdp', 'econometric', 'finance'],
    'medicine': ['medical', 'patient', 'clinical', 'pathophysiology', 'anatomy', 'health'],
    'engineering': ['engineering', 'design', 'technical', 'optimization', 'systems', 'mechanical'],
    'computer science': ['algorithm', 'programming', 'computational', 'software', 'code', 'computer'],
    'physics': ['physics', 'quantum', 'relativity', 'particle', 'mechanics', 'energy'],
    'mathematics': ['mathematical', 'theorem', 'proof', 'algebra', 'calculus', 'statistics'],
    'chemistry': ['chemical', 'molecule', 'reaction', 'compound', 'organic', 'laboratory'],
    'biology': ['biological', 'organism', 'cell', 'evolution', 'ecology', 'genetics'],
    'psychology': ['psychological', 'behavior', 'behaviour', 'cognitive', 'mental', 'therapy'],
    'history': ['historical', 'period', 'century', 'revolution', 'war', 'empire'],
    'english': ['literature', 'poetry', 'novel', 'author', 'narrative', 'literary'],
    'law': ['legal', 'justice', 'court', 'legislation', 'constitutional', 'rights'],
}

FEATURE_LIST_CAP = 5
SPECIFIC_EXAMPLE_CAP = 3
MIN_SENTENCE_LENGTH = 10

# ==================== FILLER LANGUAGE ====================

FILLER_PATTERNS = {
    'vague_interest': {
        'patterns': [
            r"i became interested in .+ when (?:an incident|something|an event) happened",
            r"i have always been interested in .+ since (?:a young age|childhood|school)",
            r"my interest in .+ began when i (?:watched|read|heard) (?:something|about)",
            r"i was inspired by .+ to pursue",
            r"this made me reali[sz]e that i wanted to study",
            r"i knew that .+ was the subject for me",
        ],
        'weight': 0.4,
        'label': 'Vague interest origin'
    },
    'generic_passion': {
        'patterns': [
            r"i am passionate about .+ because it is (?:interesting|fascinating|important)",
            r"i love .+ because it (?:interests|fascinates|excites) me",
            r"i find .+ (?:very|extremely|really) (?:interesting|exciting|compelling)",
            r"this subject is (?:important|relevant|significant) in today'?s world",
            r"i want to make a difference in the world",
        ],
        'weight': 0.3,
        'label': 'Generic passion statement'
    },
    'filler_phrases': {
        'patterns': [
            r"\bin conclusion\b", r"\bto conclude\b", r"\bin summary\b", r"\boverall\b",
            r"\bit is clear that\b", r"\bthere is no doubt that\b", r"\bit is obvious that\b",
            r"\bneedless to say\b", r"\bas you can see\b", r"\bas mentioned above\b",
            r"\bin my opinion\b", r"\bi believe that\b", r"\bi think that\b", r"\bit seems to me that\b",
        ],
        'weight': 0.2,
        'label': 'Filler phrase'
    },
    'meaningless_qualifiers': {
        'patterns': [
            r"\b(?:very|extremely|really|quite|rather|somewhat) (?:good|bad|important|interesting|exciting)\b",
        ],
        'weight': 0.15,
        'label': 'Meaningless qualifier'
    },
    'cliched_phrases': {
        'patterns': [
            r"\bunique perspective\b", r"\bdiverse background\b", r"\bwell-rounded individual\b",
            r"\boutside the box\b", r"\bthink outside the box\b",
            r"\bcomfort zone\b", r"\bstep out of my comfort zone\b",
            r"\bbroaden my horizons\b", r"\bexpand my knowledge\b", r"\bdeepen my understanding\b",
            r"\bpursue my dreams\b", r"\bfollow my passion\b", r"\bachieve my goals\b",
            r"\bbright future\b", r"\bpromising career\b",
        ],
        'weight': 0.25,
        'label': 'Cliched phrase'
    },
    'vague_references': {
        'patterns': [
            r"when i was in year \d+ an incident occurred",
            r"something happened that changed my perspective",
            r"an event in my life made me realize",
            r"after a particular experience",
            r"through various experiences",
            r"during my time at school",
            r"throughout my education",
            r"over the years",
            r"as i have grown",
            r"as i have matured",
        ],
        'weight': 0.3,
        'label': 'Vague reference'
    },
    'empty_statements': {
        'patterns': [
            r"this subject is important because it affects everyone",
            r"this field is growing rapidly",
            r"there are many opportunities in this area",
            r"this subject is relevant to modern society",
            r"i want to contribute to society",
            r"i want to help people",
            r"i want to make a positive impact",
            r"this subject has many applications",
            r"this field is constantly evolving",
        ],
        'weight': 0.35,
        'label': 'Empty statement'
    },
    'redundant_explanations': {
        'patterns': [
            r"\bwhat i mean by this is\b", r"\bin other words\b", r"\bthat is to say\b",
            r"\blet me explain\b", r"\bto put it simply\b", r"\bto clarify\b", r"\bwhat this means is\b",
        ],
        'weight': 0.2,
        'label': 'Redundant explanation'
    },
}

# Whole-statement heuristics
FIRST_PERSON_RATIO_LIMIT = 0.6
FIRST_PERSON_PENALTY = 0.5
STARTER_LENGTH = 20
STARTER_DIVERSITY_LIMIT = 0.7
STARTER_DIVERSITY_PENALTY = 0.4
LONG_STATEMENT_LENGTH = 1000
MIN_CONCRETE_MARKERS = 2
NO_CONCRETE_EXAMPLES_PENALTY = 0.6
CONCRETE_MARKER_PATTERN = r"\b(?:specifically|for example|in particular|such as|including|namely)\b"

WHOLE_TEXT_LABELS = {
    'first_person': 'Too many first-person sentences',
    'repetitive_openings': 'Repetitive sentence openings',
    'no_concrete_examples': 'Long statement without concrete examples',
}

# ==================== CRITERION: ACADEMIC ====================

UNIVERSITY_LEVEL_TERMS = [
    'matrix', 'matrices', 'eigenvalue', 'topology', 'quantum', 'thermodynamics',
    'differential', 'integral', 'calculus', 'algorithm', 'complexity theory',
    'molecular', 'biochemistry', 'organic chemistry', 'inorganic', 'polymer',
    'mechanics', 'electromagnetism', 'relativity', 'particle physics',
    'non-commutativity', 'qubit', 'superposition', 'entanglement',
]

BEYOND_CURRICULUM_PHRASES = [
    'university course', 'lecture', 'research paper', 'academic journal',
    'graduate level', 'advanced', 'postgraduate', 'doctoral',
]

ACADEMIC_SOURCES = [
    'research', 'study', 'paper', 'journal', 'academic', 'scholarly', 'university',
    'professor', 'lecture', 'course', 'edx', 'coursera', 'mooc', 'textbook',
    'dissertation', 'thesis',
]

INDEPENDENT_RESEARCH = [
    'independent research', 'research project', 'investigated', 'examined', 'assessed',
    'analyzed', 'analysed', 'evaluated', 'my research', 'i researched', 'i studied',
    'explored independently',
]

COURSE_ENGAGEMENT = [
    'course', 'lecture', 'seminar', 'workshop', 'edx course', 'coursera',
    'online course', 'mooc', 'attended', 'participated',
]

COMPETITION_MARKERS = [
    'competition', 'olympiad', 'challenge', 'contest', 'award', 'prize',
    'medal', 'certificate', 'recognition',
]

CONNECTION_CONCEPTS = [
    'link', 'connection', 'relationship', 'bridge', 'intersection',
    'interdisciplinary', 'synthesis', 'integration', 'convergence',
]

LEARNER_PHRASES = [
    'learned', 'learnt', 'discovered', 'realized', 'realised', 'understood', 'explored',
    'beginning to understand', 'started to appreciate', 'hope to learn',
]

OVERSTATEMENTS = ['mastered', 'expert', 'revolutionary', 'groundbreaking', 'world-changing']

# ==================== CRITERION: INTELLECTUAL QUALITIES ====================

SYNTHESIS_PHRASES = [
    'building on', 'influenced by', 'this led me to', 'combined with', 'drawing from',
    'integrating', 'synthesis', 'connecting', 'relationship between', 'link between', 'bridging',
]

ORIGINAL_THINKING = [
    'i argued', 'i concluded', 'my analysis', 'i believe', 'i proposed', 'my perspective',
    'i developed', 'i created', 'my approach', 'original research', 'independent analysis',
]

CROSS_DISCIPLINARY = [
    'connection between', 'relationship between', 'links', 'bridges',
    'interdisciplinary', 'across disciplines', 'intersection of',
]

REASONING_WORDS = [
    'because', 'therefore', 'consequently', 'thus', 'hence', 'since',
    'as a result', 'leading to', 'which resulted in',
]

CRITICAL_WORDS = [
    'however', 'although', 'while', 'despite', 'nevertheless',
    'on the other hand', 'conversely', 'in contrast',
]

INTRINSIC_CURIOSITY = [
    'fascinated', 'intrigued', 'curious', 'wondered', 'questioned', 'captivated',
    'compelled', 'driven to understand', 'eager to explore',
]

EXPLORATION_WORDS = [
    'read', 'researched', 'investigated', 'explored', 'delved', 'discovered',
    'learned', 'studied independently',
]

CURIOSITY_CLICHES = ['always been interested', 'from a young age', 'as long as i can remember']

READINESS_TERMS = [
    'research', 'critical thinking', 'independent study', 'academic rigor', 'academic rigour',
    'scholarly', 'theoretical', 'methodology', 'analysis',
]

WRITING_WORDS = ['essay', 'wrote']
INVESTIGATION_WORDS = ['research', 'investigation']
PRESENTATION_WORDS = ['presentation', 'presented']

# ==================== CRITERION: INTELLECTUAL DEVELOPMENT ====================

DEVELOPMENT_PROGRESSION = [
    'this led me to', 'building on this', 'which prompted me to', 'consequently i',
    'as a result i', 'this sparked my interest in', 'following this', 'subsequently',
    'which deepened my understanding', 'this experience taught me', 'i then explored',
    'expanding on', 'further investigation revealed', 'this inspired me to',
]

DEVELOPMENT_WORDS = [
    'evolved', 'developed', 'grew', 'expanded', 'deepened', 'matured',
    'refined', 'enhanced', 'strengthened', 'transformed', 'progressed',
]

SEQUENTIAL_WORDS = [
    'first', 'then', 'later', 'finally', 'initially', 'subsequently',
    'after', 'before', 'during', 'eventually', 'ultimately',
]

CAUSAL_CONNECTORS = [
    'because of', 'due to', 'as a result of', 'thanks to', 'stemming from',
    'which led to', 'resulting in', 'consequently', 'therefore',
]

LISTING_FREE_ALLOWANCE = 3
LISTING_PENALTY_PER_ITEM = 0.3

# ==================== CRITERION: SUBJECT ENGAGEMENT ====================

ACADEMIC_ENGAGEMENT = [
    'journal', 'paper', 'research', 'study', 'textbook', 'academic', 'scholarly',
    'peer-reviewed', 'university press', 'dissertation',
]

POPULAR_SOURCES = ['documentary', 'youtube', 'blog', 'article', 'news']

TECHNICAL_VOCABULARY = [
    'equation', 'theorem', 'principle', 'law', 'mechanism', 'process',
    'methodology', 'framework', 'model', 'theory',
]

RESPECT_PHRASES = [
    'learned from', 'guided by', 'inspired by', 'according to',
    'research shows', 'evidence suggests', 'experts believe',
]

HUMILITY_PHRASES = [
    'hope to learn', 'beginning to understand', 'starting to appreciate',
    'would like to explore', 'seek to understand',
]

DISMISSIVE_PHRASES = ['experts are wrong', 'traditional view is flawed', 'outdated thinking']

# ==================== CRITERION: COMMUNICATION ====================

TRANSITION_WORDS = [
    'however', 'furthermore', 'moreover', 'consequently', 'therefore',
    'nevertheless', 'additionally', 'similarly', 'in contrast', 'as a result',
]

STRUCTURE_PROGRESSION = [
    'initially', 'first', 'then', 'subsequently', 'finally',
    'began', 'started', 'developed', 'evolved', 'culminated',
]

EXAMPLE_MARKERS = [
    'for example', 'such as', 'specifically', 'particularly', 'instance',
    'case', 'namely', 'including', 'demonstrated by',
]

VAGUE_WORDS = [
    'something', 'things', 'stuff', 'many', 'various', 'several',
    'always', 'never', 'everyone', 'everything',
]

# ==================== CRITERION: PERSONAL DEVELOPMENT ====================

LEARNING_REFLECTION = [
    'learned that', 'learnt that', 'realized that', 'realised that', 'discovered that',
    'understood that', 'came to understand', 'began to see', 'recognized that', 'recognised that',
]

GROWTH_WORDS = [
    'developed', 'improved', 'enhanced', 'gained', 'strengthened',
    'refined', 'deepened', 'expanded', 'evolved',
]

SUPERFICIAL_REFLECTION = [
    'made me a better person', 'taught me a lot', 'changed my life',
    'opened my eyes', 'life-changing experience',
]

GOAL_PHRASES = [
    'hope to', 'aim to', 'plan to', 'intend to', 'would like to',
    'aspire to', 'seek to', 'want to contribute', 'looking forward to',
]

FUTURE_WORDS = [
    'research', 'explore', 'investigate', 'study', 'pursue',
    'continue', 'develop', 'contribute', 'advance',
]

UNREALISTIC_CLAIMS = [
    'change the world', 'revolutionary breakthrough', 'solve all problems',
    'cure cancer', 'end poverty', 'save humanity',
]

# ==================== CRITERION: FACTUAL ACCURACY ====================

MISCONCEPTION_PATTERNS = [
    r"light travels faster than sound through vacuum",
    r"gravity works differently in space",
    r"atoms are the smallest particles",
    r"water is not a compound",
    r"oxygen is heavier than carbon",
    r"zero is positive",
    r"infinity is a number",
    r"humans have more chromosomes than plants",
    r"dna is not found in all cells",
]

OVERCONFIDENT_CLAIMS = [
    'i have solved', 'i have proven', 'i have discovered', 'i am certain that', 'there is no doubt',
]

FACTUAL_BASE = 8.0
MISCONCEPTION_PENALTY = 3.0
OVERCONFIDENCE_PENALTY = 0.5

# ==================== UNIVERSITY FIT ====================

FIT_COURSE_KEYWORDS = {
    'economics': ['economic', 'market', 'policy', 'analytical'],
    'medicine': ['medical', 'scientific', 'research', 'patient'],
    'engineering': ['technical', 'problem-solving', 'innovation', 'design'],
    'computer science': ['computational', 'algorithmic', 'programming', 'data'],
}

ELITE_TUTORIAL_NAMES = ['oxford', 'cambridge']

# ==================== WEIGHTS & GRADES ====================

CRITERION_WEIGHTS = {
    'academic_criteria': 0.40,
    'intellectual_qualities': 0.25,
    'intellectual_development': 0.15,
    'subject_engagement': 0.10,
    'communication_structure': 0.05,
    'personal_development': 0.03,
    'factual_accuracy': 0.02,
    'university_specific': 0.00,  # computed and reported, not weighted
}

CRITERION_LABELS = {
    'academic_criteria': 'Academic Criteria',
    'intellectual_qualities': 'Intellectual Qualities',
    'intellectual_development': 'Intellectual Development',
    'subject_engagement': 'Subject Engagement',
    'communication_structure': 'Communication & Structure',
    'personal_development': 'Personal Development',
    'factual_accuracy': 'Factual Accuracy',
    'university_specific': 'University Specific',
}

GRADE_BANDS = [
    (9.0, "A+ (Outstanding University Readiness)"),
    (8.5, "A (Excellent University Readiness)"),
    (7.5, "A- (Strong University Readiness)"),
    (6.5, "B+ (Good University Readiness)"),
    (5.5, "B (Acceptable University Readiness)"),
    (4.5, "B- (Below Average - Needs Improvement)"),
    (3.5, "C (Significant Issues - Major Revision Needed)"),
]

LOWEST_GRADE = "D (Critical Problems - Complete Rewrite Required)"

SEVERITY_ORDER = {'CRITICAL': 0, 'HIGH': 1, 'MEDIUM': 2}
MAX_PRIORITIES = 4

# ==================== UNIVERSITY ADVICE ====================

# First match wins; the generic template is the fallback
UNIVERSITY_ADVICE = [
    {
        'match': 'university',
        'keywords': ['oxford', 'cambridge'],
        'advice': [
            "Show intellectual curiosity that goes beyond the syllabus",
            "Demonstrate the ability to think critically and question assumptions",
            "Include evidence of independent reading and research",
            "Show you can engage with complex ideas in a tutorial setting",
        ],
    },
    {
        'match': 'university',
        'keywords': ['lse', 'london school of economics'],
        'advice': [
            "Connect your interests to real-world social and economic issues",
            "Show awareness of current policy debates",
            "Demonstrate quantitative and analytical skills",
        ],
    },
    {
        'match': 'university',
        'keywords': ['imperial'],
        'advice': [
            "Emphasise technical problem-solving experience",
            "Show practical application of scientific principles",
            "Include quantifiable results from projects or investigations",
        ],
    },
    {
        'match': 'course',
        'keywords': ['medicine', 'medical'],
        'advice': [
            "Reflect on what you learned from clinical or care experience",
            "Show understanding of the realities and ethics of medicine",
            "Demonstrate empathy alongside scientific aptitude",
        ],
    },
]

GENERIC_UNIVERSITY_ADVICE = [
    "Research the course content and mention specific modules that interest you",
    "Show how your experience prepares you for university-level study",
    "Link your interests to what the course actually teaches",
]

# ==================== NARRATIVE TIERS ====================

# (strong, developing) thresholds per criterion, matched to each criterion's
# attainable range: communication tops out at 4 and personal development at 2
NARRATIVE_THRESHOLDS = {
    'academic_criteria': (7.0, 5.0),
    'intellectual_qualities': (7.0, 5.5),
    'intellectual_development': (7.0, 5.0),
    'subject_engagement': (4.5, 3.5),
    'communication_structure': (3.0, 2.2),
    'personal_development': (1.5, 1.0),
    'factual_accuracy': (8.0, 6.0),
    'university_specific': (8.0, 6.5),
}

# Academic criteria have an extra top tier
ACADEMIC_EXCEPTIONAL = 8.5

LISTING_CRITICAL_MINIMUM = 3
CLICHE_PRIORITY_MINIMUM = 3

# Filler penalty bands for improvement advice: (minimum, advice)
FILLER_IMPROVEMENT_BANDS = [
    (1.5, "Remove filler and cliched language: it is costing you significant marks"),
    (1.0, "Replace generic statements with specific examples and details"),
    (0.8, "Tighten your wording: several sentences add little information"),
    (0.5, "Trim the few remaining filler phrases"),
]

STRONG_EVIDENCE_COMPOSITE = 7.5
WEAK_EVIDENCE_COMPOSITE = 4.5
