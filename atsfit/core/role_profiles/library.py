"""
Static role profile library.

Reference job descriptions used by the résumé-only quick scan. Weights are
the share of source postings that mention the item. The library is built
once at import and never modified.
"""

from typing import Optional

from atsfit.data.models import RoleProfile, WeightedItem
from atsfit.utils.constants import RoleSeniority


def _items(*pairs: tuple[str, float]) -> tuple[WeightedItem, ...]:
    return tuple(WeightedItem(value=value, weight=weight) for value, weight in pairs)


def _profile(
    profile_id: str,
    title: str,
    category: str,
    seniority: RoleSeniority,
    aliases: tuple[str, ...],
    required: tuple[tuple[str, float], ...],
    preferred: tuple[tuple[str, float], ...],
    keywords: tuple[tuple[str, float], ...],
    responsibilities: tuple[str, ...],
    salary_median: Optional[int] = None,
) -> RoleProfile:
    return RoleProfile(
        id=profile_id,
        normalized_title=title,
        aliases=aliases,
        category=category,
        seniority=seniority,
        required_skills=_items(*required),
        preferred_skills=_items(*preferred),
        common_keywords=_items(*keywords),
        typical_responsibilities=responsibilities,
        salary_median=salary_median,
    )


# =============================================================================
# Engineering
# =============================================================================

_SWE_REQUIRED = (
    ("Python", 0.55), ("JavaScript", 0.5), ("SQL", 0.45), ("Git", 0.6),
    ("REST", 0.4), ("Java", 0.35), ("TypeScript", 0.35), ("Go", 0.2),
)
_SWE_PREFERRED = (("AWS", 0.4), ("Docker", 0.35), ("Kubernetes", 0.25), ("CI/CD", 0.3), ("PostgreSQL", 0.25))
_SWE_KEYWORDS = (
    ("system design", 0.3), ("microservices", 0.25), ("unit testing", 0.35),
    ("Agile", 0.4), ("code review", 0.3), ("scalability", 0.2), ("API", 0.45),
)
_SWE_RESPONSIBILITIES = (
    "Design, build and maintain backend services and APIs",
    "Write well-tested, maintainable code and review teammates' changes",
    "Collaborate with product and design to ship features",
    "Monitor and improve the reliability and performance of production systems",
)

_ENGINEERING = (
    _profile(
        "junior-software-engineer", "Software Engineer", "engineering", RoleSeniority.JUNIOR,
        ("junior software engineer", "junior developer", "graduate software engineer", "associate software engineer"),
        _SWE_REQUIRED[:5], _SWE_PREFERRED[:3], _SWE_KEYWORDS[2:5], _SWE_RESPONSIBILITIES[:3], 85_000,
    ),
    _profile(
        "software-engineer", "Software Engineer", "engineering", RoleSeniority.MID,
        ("software developer", "backend engineer", "developer", "swe", "programmer"),
        _SWE_REQUIRED, _SWE_PREFERRED, _SWE_KEYWORDS, _SWE_RESPONSIBILITIES, 120_000,
    ),
    _profile(
        "senior-software-engineer", "Senior Software Engineer", "engineering", RoleSeniority.SENIOR,
        ("senior developer", "senior backend engineer", "sr software engineer", "staff engineer"),
        _SWE_REQUIRED, _SWE_PREFERRED + (("Terraform", 0.2),),
        _SWE_KEYWORDS + (("distributed systems", 0.35), ("mentoring", 0.4)),
        _SWE_RESPONSIBILITIES + ("Lead technical design for cross-team projects", "Mentor junior engineers"),
        155_000,
    ),
    _profile(
        "engineering-lead", "Engineering Manager", "engineering", RoleSeniority.LEAD,
        ("engineering lead", "tech lead", "head of engineering", "software engineering manager"),
        (("leadership", 0.7), ("system design", 0.5), ("Agile", 0.5), ("hiring", 0.4), ("Python", 0.2)),
        (("AWS", 0.3), ("Kubernetes", 0.15), ("OKRs", 0.2)),
        (("mentoring", 0.6), ("cross-functional", 0.45), ("roadmap", 0.4), ("stakeholder management", 0.3)),
        (
            "Lead and grow a team of software engineers",
            "Own delivery of the team's roadmap",
            "Partner with product on planning and prioritisation",
            "Run hiring, performance reviews and career development",
        ),
        185_000,
    ),
    _profile(
        "frontend-developer", "Frontend Developer", "engineering", RoleSeniority.MID,
        ("frontend engineer", "front end developer", "ui engineer", "react developer"),
        (("JavaScript", 0.8), ("TypeScript", 0.6), ("React", 0.7), ("HTML", 0.6), ("CSS", 0.6)),
        (("Next.js", 0.3), ("Tailwind", 0.25), ("GraphQL", 0.2), ("Figma", 0.2)),
        (("accessibility", 0.3), ("responsive design", 0.35), ("unit testing", 0.3), ("performance", 0.25)),
        (
            "Build responsive, accessible user interfaces",
            "Collaborate with designers to implement product features",
            "Improve front-end performance and test coverage",
        ),
        115_000,
    ),
    _profile(
        "devops-engineer", "DevOps Engineer", "engineering", RoleSeniority.MID,
        ("site reliability engineer", "sre", "platform engineer", "cloud engineer", "infrastructure engineer"),
        (("AWS", 0.7), ("Docker", 0.65), ("Kubernetes", 0.6), ("Terraform", 0.55), ("CI/CD", 0.6), ("Linux", 0.5)),
        (("Python", 0.35), ("Bash", 0.4), ("Ansible", 0.2), ("GCP", 0.2), ("Azure", 0.25)),
        (("observability", 0.35), ("infrastructure as code", 0.4), ("uptime", 0.25), ("incident response", 0.3)),
        (
            "Build and operate cloud infrastructure as code",
            "Maintain CI/CD pipelines and deployment tooling",
            "Improve reliability, monitoring and incident response",
        ),
        130_000,
    ),
)


# =============================================================================
# Data
# =============================================================================

_DATA = (
    _profile(
        "data-analyst", "Data Analyst", "data", RoleSeniority.MID,
        ("business intelligence analyst", "bi analyst", "reporting analyst", "analytics analyst"),
        (("SQL", 0.85), ("Excel", 0.7), ("Tableau", 0.45), ("Power BI", 0.4)),
        (("Python", 0.35), ("R", 0.2), ("statistics", 0.3)),
        (("dashboards", 0.5), ("data analysis", 0.6), ("reporting", 0.5), ("KPIs", 0.35)),
        (
            "Build dashboards and recurring reports for business teams",
            "Analyse data to answer product and operational questions",
            "Define and track KPIs with stakeholders",
        ),
        85_000,
    ),
    _profile(
        "data-scientist", "Data Scientist", "data", RoleSeniority.MID,
        ("machine learning scientist", "applied scientist", "ml scientist"),
        (("Python", 0.9), ("SQL", 0.7), ("statistics", 0.65), ("Machine Learning", 0.7)),
        (("PyTorch", 0.3), ("TensorFlow", 0.3), ("Spark", 0.25), ("pandas", 0.4)),
        (("A/B testing", 0.35), ("modeling", 0.5), ("experimentation", 0.3), ("NLP", 0.2)),
        (
            "Build and evaluate predictive models",
            "Design experiments and analyse their results",
            "Communicate findings to product and business stakeholders",
        ),
        135_000,
    ),
    _profile(
        "data-engineer", "Data Engineer", "data", RoleSeniority.MID,
        ("etl developer", "analytics engineer", "big data engineer"),
        (("SQL", 0.85), ("Python", 0.8), ("ETL", 0.6), ("Spark", 0.45), ("Airflow", 0.4)),
        (("Kafka", 0.3), ("Snowflake", 0.3), ("dbt", 0.25), ("AWS", 0.4)),
        (("data pipelines", 0.6), ("data warehouse", 0.45), ("data quality", 0.3)),
        (
            "Build and maintain batch and streaming data pipelines",
            "Model data in the warehouse for analytics use",
            "Monitor data quality and pipeline reliability",
        ),
        130_000,
    ),
)


# =============================================================================
# Product and design
# =============================================================================

_PRODUCT = (
    _profile(
        "product-manager", "Product Manager", "product", RoleSeniority.MID,
        ("product owner", "technical product manager", "pm"),
        (("roadmap", 0.7), ("stakeholder management", 0.5), ("Agile", 0.5), ("user research", 0.4)),
        (("SQL", 0.25), ("Jira", 0.35), ("A/B testing", 0.3)),
        (("prioritization", 0.45), ("user stories", 0.4), ("go-to-market", 0.3), ("OKRs", 0.3)),
        (
            "Own the product roadmap and prioritise the backlog",
            "Gather requirements from customers and stakeholders",
            "Work with engineering and design to ship features",
            "Define success metrics and measure outcomes",
        ),
        140_000,
    ),
    _profile(
        "ux-designer", "UX Designer", "design", RoleSeniority.MID,
        ("product designer", "ui designer", "ux/ui designer", "interaction designer"),
        (("Figma", 0.8), ("user research", 0.55), ("wireframing", 0.5), ("prototyping", 0.55)),
        (("Sketch", 0.2), ("HTML", 0.15), ("design systems", 0.35)),
        (("usability testing", 0.4), ("accessibility", 0.3), ("user journeys", 0.3)),
        (
            "Design user flows, wireframes and high-fidelity prototypes",
            "Run user research and usability tests",
            "Maintain and extend the design system",
        ),
        110_000,
    ),
)


# =============================================================================
# Go-to-market
# =============================================================================

_GO_TO_MARKET = (
    _profile(
        "marketing-manager", "Marketing Manager", "marketing", RoleSeniority.MID,
        ("growth marketing manager", "digital marketing manager", "marketing lead"),
        (("digital marketing", 0.6), ("SEO", 0.5), ("content strategy", 0.45), ("Google Analytics", 0.45)),
        (("HubSpot", 0.35), ("Google Ads", 0.3), ("email marketing", 0.35), ("Marketo", 0.15)),
        (("campaign", 0.6), ("lead generation", 0.4), ("conversion rate", 0.3), ("brand", 0.35)),
        (
            "Plan and run multi-channel marketing campaigns",
            "Own lead generation targets and funnel metrics",
            "Manage content calendar and brand messaging",
        ),
        105_000,
    ),
    _profile(
        "account-executive", "Account Executive", "sales", RoleSeniority.MID,
        ("sales executive", "account manager", "enterprise account executive", "business development manager"),
        (("Salesforce", 0.6), ("B2B", 0.55), ("negotiation", 0.5), ("pipeline management", 0.45)),
        (("HubSpot", 0.25), ("SaaS", 0.45), ("prospecting", 0.4)),
        (("quota", 0.6), ("closing", 0.4), ("account management", 0.4), ("CRM", 0.5)),
        (
            "Manage the full sales cycle from prospecting to close",
            "Meet or exceed quarterly quota",
            "Build relationships with key decision makers",
        ),
        95_000,
    ),
    _profile(
        "sales-manager", "Sales Manager", "sales", RoleSeniority.LEAD,
        ("head of sales", "sales director", "regional sales manager"),
        (("leadership", 0.6), ("Salesforce", 0.5), ("forecasting", 0.5), ("B2B", 0.45)),
        (("SaaS", 0.35), ("coaching", 0.4)),
        (("quota", 0.6), ("pipeline management", 0.5), ("territory", 0.3), ("hiring", 0.3)),
        (
            "Lead and coach a team of account executives",
            "Own revenue forecasting and pipeline reviews",
            "Define territories and sales process",
        ),
        140_000,
    ),
)


# =============================================================================
# Finance and business
# =============================================================================

_FINANCE_BUSINESS = (
    _profile(
        "financial-analyst", "Financial Analyst", "finance", RoleSeniority.MID,
        ("fp&a analyst", "finance analyst", "investment analyst"),
        (("Excel", 0.9), ("financial modeling", 0.65), ("forecasting", 0.55), ("variance analysis", 0.45)),
        (("SQL", 0.25), ("Power BI", 0.25), ("GAAP", 0.3), ("Tableau", 0.2)),
        (("budgeting", 0.5), ("P&L", 0.4), ("FP&A", 0.35), ("valuation", 0.25)),
        (
            "Build and maintain financial models and forecasts",
            "Prepare monthly variance analysis and management reporting",
            "Support annual budgeting and planning",
        ),
        90_000,
    ),
    _profile(
        "accountant", "Accountant", "finance", RoleSeniority.MID,
        ("staff accountant", "senior accountant", "general ledger accountant"),
        (("GAAP", 0.7), ("reconciliation", 0.65), ("Excel", 0.75), ("month-end close", 0.55)),
        (("SOX", 0.25), ("NetSuite", 0.2), ("SAP", 0.2), ("CPA", 0.35)),
        (("accounts payable", 0.35), ("accounts receivable", 0.35), ("audit", 0.4), ("journal entries", 0.45)),
        (
            "Own month-end close and account reconciliations",
            "Prepare journal entries and financial statements",
            "Support internal and external audits",
        ),
        75_000,
    ),
    _profile(
        "project-manager", "Project Manager", "business", RoleSeniority.MID,
        ("program manager", "delivery manager", "pmo analyst"),
        (("project management", 0.75), ("stakeholder management", 0.55), ("Agile", 0.45), ("Jira", 0.35)),
        (("PMP", 0.35), ("Scrum", 0.3), ("Excel", 0.3)),
        (("risk management", 0.4), ("budget", 0.4), ("timelines", 0.4), ("change management", 0.25)),
        (
            "Plan and deliver projects on time and within budget",
            "Coordinate cross-functional teams and stakeholders",
            "Track risks, dependencies and status reporting",
        ),
        95_000,
    ),
    _profile(
        "operations-manager", "Operations Manager", "business", RoleSeniority.LEAD,
        ("operations lead", "head of operations", "supply chain manager", "logistics manager"),
        (("process improvement", 0.6), ("supply chain", 0.45), ("vendor management", 0.45), ("leadership", 0.55)),
        (("Lean", 0.3), ("Six Sigma", 0.3), ("ERP", 0.3), ("SAP", 0.2)),
        (("KPIs", 0.45), ("logistics", 0.4), ("budget", 0.35), ("efficiency", 0.35)),
        (
            "Run day-to-day operations and own operational KPIs",
            "Lead process improvement initiatives",
            "Manage vendors, budgets and operations staff",
        ),
        105_000,
    ),
    _profile(
        "business-analyst", "Business Analyst", "business", RoleSeniority.MID,
        ("management consultant", "strategy analyst", "business systems analyst"),
        (("requirements gathering", 0.6), ("stakeholder management", 0.5), ("Excel", 0.55), ("SQL", 0.35)),
        (("Jira", 0.3), ("Power BI", 0.25), ("process mapping", 0.3)),
        (("business analysis", 0.55), ("process improvement", 0.4), ("market research", 0.25)),
        (
            "Gather and document business requirements",
            "Analyse processes and recommend improvements",
            "Present findings to stakeholders and leadership",
        ),
        85_000,
    ),
)


# =============================================================================
# Healthcare and education
# =============================================================================

_CARE_EDUCATION = (
    _profile(
        "registered-nurse", "Registered Nurse", "healthcare", RoleSeniority.MID,
        ("rn", "staff nurse", "clinical nurse", "charge nurse"),
        (("patient care", 0.85), ("BLS", 0.6), ("EHR", 0.5), ("medication administration", 0.55)),
        (("ACLS", 0.3), ("HIPAA", 0.3), ("Epic", 0.25)),
        (("clinical", 0.6), ("care plan", 0.4), ("patient education", 0.35)),
        (
            "Assess patients and deliver direct clinical care",
            "Administer medications and document care in the EHR",
            "Coordinate care plans with physicians and the care team",
        ),
        85_000,
    ),
    _profile(
        "teacher", "Teacher", "education", RoleSeniority.MID,
        ("instructor", "classroom teacher", "secondary school teacher", "educator"),
        (("curriculum development", 0.6), ("classroom management", 0.65), ("lesson planning", 0.6)),
        (("LMS", 0.25), ("differentiated instruction", 0.35), ("assessment", 0.4)),
        (("student", 0.7), ("learning outcomes", 0.35), ("parent communication", 0.3)),
        (
            "Plan and deliver lessons aligned with the curriculum",
            "Assess student progress and adapt instruction",
            "Communicate with parents and colleagues",
        ),
        60_000,
    ),
)


ROLE_PROFILES: tuple[RoleProfile, ...] = _ENGINEERING + _DATA + _PRODUCT + _GO_TO_MARKET + _FINANCE_BUSINESS + _CARE_EDUCATION

_BY_ID: dict[str, RoleProfile] = {profile.id: profile for profile in ROLE_PROFILES}


def get_role_profiles(category: Optional[str] = None) -> tuple[RoleProfile, ...]:
    """All role profiles, optionally limited to one category."""
    if category is None:
        return ROLE_PROFILES
    wanted = category.strip().lower()
    return tuple(profile for profile in ROLE_PROFILES if profile.category == wanted)


def get_role_profile(profile_id: str) -> Optional[RoleProfile]:
    """Look up a role profile by id."""
    return _BY_ID.get(profile_id)


def role_categories() -> list[str]:
    """Distinct categories in library order."""
    return list(dict.fromkeys(profile.category for profile in ROLE_PROFILES))
