"""Metadata extraction: keyword and domain tags derived from work item text."""

import re

from workgraph.models.work_item import SimilarityMetadata

STOP_WORDS = frozenset(
    {
        "about", "above", "after", "again", "also", "been", "before", "being",
        "both", "could", "does", "doing", "done", "each", "from", "have",
        "having", "here", "into", "just", "like", "make", "more", "most",
        "much", "must", "need", "needs", "only", "other", "over", "same",
        "should", "some", "such", "than", "that", "their", "them", "then",
        "there", "these", "they", "this", "those", "through", "under", "until",
        "very", "want", "were", "what", "when", "where", "which", "while",
        "will", "with", "within", "without", "would", "your", "implement",
        "create", "update", "using",
    }
)  # fmt: skip

# (label, vocabulary) tables; order is priority, first match wins
FEATURE_DOMAIN_RULES: tuple[tuple[str, frozenset[str]], ...] = (
    ("user-management", frozenset({
        "auth", "authentication", "authorization", "login", "logout", "user", "users",
        "oauth", "oauth2", "password", "signup", "account", "accounts", "session",
        "sessions", "permission", "permissions", "role", "roles",
    })),
    ("payments", frozenset({
        "payment", "payments", "billing", "invoice", "invoices", "checkout",
        "subscription", "subscriptions", "stripe", "refund", "refunds",
    })),
    ("notifications", frozenset({
        "notification", "notifications", "email", "emails", "alert", "alerts",
        "push", "sms", "webhook", "webhooks",
    })),
    ("search", frozenset({"search", "indexing", "lookup", "autocomplete", "ranking"})),
    ("reporting", frozenset({
        "report", "reports", "dashboard", "dashboards", "analytics", "metrics",
        "chart", "charts",
    })),
    ("data-management", frozenset({
        "import", "export", "migration", "migrations", "backup", "backups", "sync", "etl",
    })),
)  # fmt: skip

TECHNICAL_DOMAIN_RULES: tuple[tuple[str, frozenset[str]], ...] = (
    ("frontend", frozenset({
        "frontend", "component", "components", "react", "vue", "angular", "css",
        "html", "ui", "layout", "button", "page", "pages",
    })),
    ("backend", frozenset({
        "backend", "api", "server", "endpoint", "endpoints", "service", "services",
        "handler", "handlers", "middleware", "route", "routes", "rest", "graphql",
    })),
    ("database", frozenset({
        "database", "db", "schema", "sql", "postgres", "postgresql", "mysql",
        "sqlite", "mongodb", "redis", "query", "queries", "orm",
    })),
    ("infrastructure", frozenset({
        "deploy", "deployment", "docker", "kubernetes", "k8s", "terraform", "ci",
        "infra", "aws", "cloud", "pipeline", "pipelines",
    })),
    ("testing", frozenset({
        "test", "tests", "testing", "pytest", "coverage", "e2e", "unittest", "fixture",
        "fixtures",
    })),
    ("security", frozenset({
        "security", "encryption", "vulnerability", "csrf", "xss", "token", "tokens",
        "secret", "secrets", "jwt",
    })),
)  # fmt: skip

STRATEGIC_THEME_RULES: tuple[tuple[str, frozenset[str]], ...] = (
    ("security", frozenset({
        "security", "vulnerability", "encryption", "compliance", "audit", "secure",
    })),
    ("performance", frozenset({
        "performance", "optimize", "optimization", "latency", "cache", "caching",
        "speed", "slow", "fast",
    })),
    ("reliability", frozenset({
        "bug", "bugs", "fix", "crash", "crashes", "error", "errors", "stability",
        "flaky", "retry", "outage",
    })),
    ("scalability", frozenset({
        "scale", "scaling", "scalable", "throughput", "sharding", "distributed",
    })),
    ("user-experience", frozenset({
        "ux", "usability", "onboarding", "accessibility", "design", "polish",
    })),
    ("developer-experience", frozenset({
        "refactor", "refactoring", "cleanup", "tooling", "docs", "documentation", "lint",
    })),
    ("feature-development", frozenset({
        "feature", "features", "implement", "build", "add", "new", "support",
    })),
)  # fmt: skip

# Every matching rule contributes a location
CODE_LOCATION_RULES: tuple[tuple[str, frozenset[str]], ...] = (
    ("api", frozenset({"api", "endpoint", "endpoints", "route", "routes", "handler", "handlers"})),
    ("models", frozenset({"model", "models", "schema", "schemas", "entity", "entities"})),
    ("components", frozenset({"component", "components", "view", "views", "page", "pages", "ui"})),
    ("services", frozenset({"service", "services"})),
    ("database", frozenset({"database", "migration", "migrations", "sql", "db"})),
    ("auth", frozenset({"auth", "authentication", "login", "oauth", "oauth2"})),
    ("config", frozenset({"config", "configuration", "settings", "env"})),
    ("tests", frozenset({"test", "tests", "testing", "spec", "specs"})),
    ("scripts", frozenset({"script", "scripts", "cli", "hook", "hooks"})),
    ("docs", frozenset({"docs", "documentation", "readme"})),
)  # fmt: skip

_PUNCTUATION = re.compile(r"[^\w\s]")
_PATH_TOKEN = re.compile(
    r"(?:[\w.-]+/)+[\w.-]+|\b[\w-]+\.(?:py|ts|tsx|js|jsx|go|rs|java|rb|sh|sql|md|ya?ml|json|css|html)\b"
)


def tokenize(text: str) -> list[str]:
    """Lowercase, replace punctuation with whitespace and split."""
    return _PUNCTUATION.sub(" ", text.lower()).split()


def match_first(tokens: set[str], rules, default: str) -> str:
    """Label of the first rule whose vocabulary intersects the tokens."""
    for label, vocabulary in rules:
        if tokens & vocabulary:
            return label
    return default


class MetadataExtractor:
    """
    Derives SimilarityMetadata from raw text with fixed vocabularies.

    Pure and deterministic: the same text always yields the same metadata.
    """

    def __init__(
        self,
        max_keywords: int = 10,
        min_keyword_length: int = 4,
        default_domain: str = "general",
    ):
        """
        Initialize metadata extractor.

        Args:
            max_keywords: Cap on extracted keywords
            min_keyword_length: Shorter tokens are never keywords
            default_domain: Label used when no vocabulary rule matches
        """
        self.max_keywords = max_keywords
        self.min_keyword_length = min_keyword_length
        self.default_domain = default_domain

    def extract(self, text: str) -> SimilarityMetadata:
        tokens = tokenize(text)
        token_set = set(tokens)

        return SimilarityMetadata(
            keywords=self.extract_keywords(tokens),
            feature_domain=match_first(token_set, FEATURE_DOMAIN_RULES, self.default_domain),
            technical_domain=match_first(token_set, TECHNICAL_DOMAIN_RULES, self.default_domain),
            code_locations=self.extract_code_locations(text, token_set),
            strategic_theme=match_first(token_set, STRATEGIC_THEME_RULES, self.default_domain),
        )

    def extract_keywords(self, tokens: list[str]) -> list[str]:
        keywords: list[str] = []
        for token in tokens:
            if len(token) < self.min_keyword_length or token in STOP_WORDS:
                continue
            if token in keywords:
                continue
            keywords.append(token)
            if len(keywords) >= self.max_keywords:
                break
        return keywords

    def extract_code_locations(self, text: str, token_set: set[str]) -> list[str]:
        """Explicit path-like tokens first, then vocabulary-derived areas."""
        locations = [match.lower().strip("./") for match in _PATH_TOKEN.findall(text)]
        locations.extend(label for label, vocabulary in CODE_LOCATION_RULES if token_set & vocabulary)
        return list(dict.fromkeys(loc for loc in locations if loc))
