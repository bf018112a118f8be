"""
Application-wide constants for atsfit.

This module contains the closed vocabularies and lexicon tables shared by
the parsers, the classifier and the scorer. Tables are immutable and read
concurrently, so nothing here may be mutated at runtime.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "atsfit"
APP_DISPLAY_NAME: Final[str] = "atsfit - résumé parsing and ATS scoring"


# =============================================================================
# Text Markers
# =============================================================================

# Characters that open a bullet line
BULLET_CHARS: Final[str] = "•·●▪◦‣○■□➢➤►-–—*"

# Regex fragment matching a leading bullet marker and its padding
BULLET_PREFIX: Final[str] = r"^\s*(?:[•·●▪◦‣○■□➢➤►*]|[-–—](?=\s|\w)|\d{1,2}[.)](?=\s))\s*"

# Delimiters separating items in a skills line
SKILL_DELIMITERS: Final[str] = r"[,|;•·●▪◦]"


# =============================================================================
# Keyword Lexicons
# =============================================================================

# Technical terms matched case-insensitively (regex fragments)
TECH_TERMS: Final[tuple[str, ...]] = (
    # Languages
    r"JavaScript", r"TypeScript", r"Python", r"Java", r"C\+\+", r"C#", r"Golang",
    r"Rust", r"Ruby", r"PHP", r"Swift", r"Kotlin", r"Scala", r"MATLAB",
    # Frontend
    r"React(?:\.js)?", r"Angular", r"Vue(?:\.js)?", r"Svelte", r"Next\.?js", r"Nuxt",
    r"HTML5?", r"CSS3?", r"SASS", r"SCSS", r"Tailwind", r"Bootstrap",
    # Backend
    r"Node\.?js", r"Express", r"Django", r"Flask", r"FastAPI", r"Spring(?: Boot)?",
    r"Rails", r"Laravel", r"\.NET", r"GraphQL", r"gRPC", r"WebSockets?", r"microservices",
    # Cloud and infrastructure
    r"AWS", r"GCP", r"Azure", r"Google Cloud", r"Amazon Web Services",
    r"Docker", r"Kubernetes", r"K8s", r"Terraform", r"Pulumi", r"Ansible",
    r"CloudFormation", r"CI/CD", r"GitHub Actions", r"Jenkins", r"CircleCI", r"GitLab CI",
    r"Linux", r"Unix", r"Bash", r"PowerShell",
    # Data
    r"PostgreSQL", r"MySQL", r"MongoDB", r"Redis", r"Elasticsearch", r"DynamoDB",
    r"Cassandra", r"SQLite", r"NoSQL", r"SQL", r"ETL", r"Kafka", r"RabbitMQ", r"SQS",
    r"Spark", r"Airflow", r"Snowflake", r"Redshift", r"dbt",
    r"TensorFlow", r"PyTorch", r"Scikit-learn", r"pandas", r"NLP", r"LLMs?",
    r"Machine Learning", r"Deep Learning", r"Data Pipelines?",
    # Practices
    r"Git", r"Agile", r"Scrum", r"Kanban", r"Jira", r"Confluence", r"TDD",
    r"unit testing", r"integration testing", r"system design", r"distributed systems",
    r"scalability", r"observability", r"OAuth", r"JWT", r"SAML", r"SSO",
    r"Figma", r"Sketch",
)

# Technical terms that are only meaningful with their exact capitalisation
TECH_TERMS_EXACT: Final[tuple[str, ...]] = (
    r"Go", r"R", r"AI", r"ML", r"REST", r"API", r"APIs", r"QA",
)

# Non-engineering professional vocabulary (case-insensitive)
DOMAIN_TERMS: Final[tuple[str, ...]] = (
    # Sales
    r"Salesforce", r"HubSpot", r"CRM", r"B2B", r"SaaS", r"quota", r"pipeline management",
    r"account management", r"prospecting", r"cold calling", r"negotiation",
    r"account-based selling", r"lead generation",
    # Marketing
    r"SEO", r"SEM", r"PPC", r"Google Analytics", r"Google Ads", r"Marketo",
    r"content strategy", r"email marketing", r"demand generation", r"digital marketing",
    r"social media", r"A/B testing", r"CTR", r"conversion rate",
    # Finance
    r"Excel", r"financial modeling", r"GAAP", r"IFRS", r"variance analysis", r"forecasting",
    r"budgeting", r"P&L", r"Tableau", r"Power BI", r"SOX", r"FP&A", r"reconciliation",
    # Operations and business
    r"Six Sigma", r"Lean", r"ERP", r"SAP", r"supply chain", r"logistics",
    r"vendor management", r"process improvement", r"project management", r"PMP",
    r"stakeholder management", r"change management", r"KPIs?", r"OKRs?",
    # Cross-functional
    r"leadership", r"mentoring", r"cross-functional", r"compliance", r"GDPR",
    r"HIPAA", r"SOC ?2",
)

# Canonical spelling for keyword variants
KEYWORD_ALIASES: Final[dict[str, str]] = {
    "nodejs": "Node.js",
    "node.js": "Node.js",
    "nextjs": "Next.js",
    "next.js": "Next.js",
    "react.js": "React",
    "vue.js": "Vue",
    "golang": "Go",
    "k8s": "Kubernetes",
    "gcp": "GCP",
    "google cloud": "GCP",
    "aws": "AWS",
    "amazon web services": "AWS",
}

# Equivalent spellings accepted when matching candidate text
SKILL_SYNONYMS: Final[dict[str, tuple[str, ...]]] = {
    "golang": ("go",),
    "go": ("golang",),
    "k8s": ("kubernetes",),
    "kubernetes": ("k8s",),
    "gcp": ("google cloud",),
    "google cloud": ("gcp",),
    "aws": ("amazon web services",),
    "amazon web services": ("aws",),
    "node.js": ("nodejs", "node"),
    "next.js": ("nextjs",),
    "react": ("react.js", "reactjs"),
    "ci/cd": ("cicd", "continuous integration", "continuous deployment", "github actions", "jenkins"),
    "system design": ("system architecture", "architecture"),
    "microservices": ("micro-services", "micro services"),
    "machine learning": ("ml",),
    "ai": ("artificial intelligence",),
    "postgresql": ("postgres",),
}


# =============================================================================
# Bullet Rhetoric
# =============================================================================

# Leading verbs that open a strong accomplishment bullet (lowercased)
STRONG_ACTION_VERBS: Final[frozenset[str]] = frozenset({
    "led", "designed", "built", "shipped", "architected", "spearheaded",
    "established", "pioneered", "launched", "created", "drove", "owned",
    "directed", "orchestrated", "transformed", "founded", "initiated",
    "developed", "implemented", "delivered", "reduced", "increased",
    "improved", "optimized", "optimised", "streamlined", "automated", "managed",
    "negotiated", "closed", "secured", "generated", "exceeded",
    "expanded", "scaled", "migrated", "consolidated", "restructured",
    "analyzed", "analysed", "evaluated", "assessed", "audited", "forecasted",
    "trained", "mentored", "coached", "recruited", "onboarded",
    "published", "presented", "authored", "coordinated", "facilitated",
    "grew", "won", "cut", "ran", "wrote", "oversaw", "rebuilt", "sold",
})

# Vague openers that hide ownership
WEAK_OPENER_PATTERN: Final[str] = (
    r"^(?:responsible for|helped(?: with)?|assisted(?: with| in)?|worked on|"
    r"participated in|involved in|was part of|tasked with|handled|dealt with|"
    r"utili[sz]ed|used|made|did)\b"
)

# Closed set of nouns that signal the scope of the work
SCOPE_NOUNS: Final[tuple[str, ...]] = (
    "project", "system", "platform", "application", "service", "product",
    "campaign", "process", "program", "initiative", "pipeline", "team",
    "department", "organization", "client", "customer", "portfolio",
    "market", "territory", "account", "budget", "fund", "strategy",
    "framework", "infrastructure", "curriculum", "protocol",
)


# =============================================================================
# Seniority
# =============================================================================

# Inclusive years-of-experience band per stated job seniority
SENIORITY_YEAR_RANGES: Final[dict[str, tuple[int, int]]] = {
    "Junior": (0, 2),
    "Mid": (2, 5),
    "Senior": (5, 10),
    "Manager": (5, 15),
    "Principal": (8, 20),
    "Director": (10, 25),
}

ROLE_SENIORITY_RANK: Final[dict[str, int]] = {
    "junior": 0,
    "mid": 1,
    "senior": 2,
    "lead": 3,
    "executive": 4,
}


# =============================================================================
# Enums
# =============================================================================


class JobFamily(str, Enum):
    """Occupational family recognised by the classifier."""

    ENGINEERING = "engineering"
    SALES = "sales"
    MARKETING = "marketing"
    FINANCE = "finance"
    OPERATIONS = "operations"
    BUSINESS = "business"
    PRODUCT = "product"
    HEALTHCARE = "healthcare"
    EDUCATION = "education"
    GENERAL = "general"


class StrategyKey(str, Enum):
    """Rewrite strategy identifiers (coarser than JobFamily)."""

    ENGINEERING = "engineering"
    BUSINESS = "business"
    SALES = "sales"
    MARKETING = "marketing"
    FINANCE = "finance"


class MetricType(str, Enum):
    """Kind of quantified result found in a bullet."""

    PERCENTAGE = "percentage"
    CURRENCY = "currency"
    COUNT = "count"
    NONE = "none"


class SeniorityLevel(str, Enum):
    """Seniority stated by a job posting."""

    JUNIOR = "Junior"
    MID = "Mid"
    SENIOR = "Senior"
    MANAGER = "Manager"
    PRINCIPAL = "Principal"
    DIRECTOR = "Director"


class RoleSeniority(str, Enum):
    """Seniority tier of a reference role profile."""

    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"
    EXECUTIVE = "executive"


MATCH_LABEL_THRESHOLDS: Final[dict[str, int]] = {
    "strong": 70,
    "good": 45,
    "fair": 25,
}


class MatchLabel(str, Enum):
    """Display band for a quick match score."""

    STRONG = "Strong"
    GOOD = "Good"
    FAIR = "Fair"
    LOW = "Low"

    @classmethod
    def from_score(cls, score: float) -> "MatchLabel":
        """Convert a numeric score to a band."""
        if score >= MATCH_LABEL_THRESHOLDS["strong"]:
            return cls.STRONG
        elif score >= MATCH_LABEL_THRESHOLDS["good"]:
            return cls.GOOD
        elif score >= MATCH_LABEL_THRESHOLDS["fair"]:
            return cls.FAIR
        return cls.LOW


# Minimum radar score for each label
RADAR_LABEL_THRESHOLDS: Final[dict[str, int]] = {
    "strong": 75,
    "good": 60,
}


class RadarLabel(str, Enum):
    """Display label for a radar score."""

    STRONG = "Strong Match"
    GOOD = "Good Match"
    MODERATE = "Moderate Match"

    @classmethod
    def from_score(cls, score: float) -> "RadarLabel":
        """Convert a numeric score to a label."""
        if score >= RADAR_LABEL_THRESHOLDS["strong"]:
            return cls.STRONG
        elif score >= RADAR_LABEL_THRESHOLDS["good"]:
            return cls.GOOD
        return cls.MODERATE
