"""
Constants used across the extraction utilities.

This module contains the built-in tech lexicon, placeholder values and the
fixed heuristics used by the field pickers and the location classifier.
"""

# Built-in lexicon used when no stored lexicon is available
DEFAULT_TECH_STACKS = (
    # Frontend
    'React', 'Next.js', 'Angular', 'Vue.js', 'Svelte', 'Redux',
    'HTML', 'CSS', 'Tailwind CSS',
    # Languages
    'JavaScript', 'TypeScript', 'Python', 'Java', 'Kotlin', 'Go', 'Rust',
    'Ruby', 'PHP', 'Scala', 'Swift', 'C#',
    # Backend frameworks
    'Node.js', 'Express', 'NestJS', 'Spring Boot', 'Django', 'Flask',
    'FastAPI', 'Rails', '.NET', 'GraphQL',
    # Data stores
    'PostgreSQL', 'MySQL', 'MongoDB', 'Redis', 'Elasticsearch', 'Kafka',
    # Cloud and infrastructure
    'AWS', 'GCP', 'Azure', 'Docker', 'Kubernetes', 'Terraform',
)

# Placeholders
UNTITLED_ROLE = 'Untitled role'
NOT_PROVIDED = 'Not provided'

# Remote classification
REMOTE_PATTERN = r'\bremote\b'
NON_REMOTE_PATTERN = r'\b(?:no|not|non)[-\s]?remote\b'

# Location hint collection
HINT_NODE_TAGS = ('p', 'span', 'li', 'div')
HINT_MIN_LENGTH = 4
HINT_MAX_LENGTH = 100
ON_SITE_PATTERN = r'on[-\s]?site|in[-\s]?office|hybrid'
# "San Jose, CA" and "CA, San Jose"; matched case-sensitively
CITY_STATE_PATTERN = r'\b[A-Z][a-zA-Z.\s]+,\s*[A-Z]{2}\b'
STATE_CITY_PATTERN = r'\b[A-Z]{2},\s*[A-Z][a-zA-Z.\s]+\b'

# Metadata selectors
META_KEYWORDS = 'meta[name="keywords"]'
META_ARTICLE_TAG = 'meta[property="article:tag"]'
META_DESCRIPTION = 'meta[name="description"]'
META_OG_DESCRIPTION = 'meta[property="og:description"]'
META_OG_TITLE = 'meta[property="og:title"]'
META_OG_SITE_NAME = 'meta[property="og:site_name"]'
COMPANY_NAME_SELECTOR = '[data-company-name]'
