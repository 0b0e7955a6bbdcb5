"""Tests for metadata extraction from work item text."""

import pytest

from workgraph.core.relationships import MetadataExtractor, tokenize


@pytest.fixture
def extractor():
    return MetadataExtractor()


class TestTokenize:
    """Test text tokenization."""

    def test_lowercases_and_strips_punctuation(self):
        """Test punctuation becomes whitespace and text is lowercased."""
        assert tokenize("OAuth2-based Login, please!") == ["oauth2", "based", "login", "please"]

    def test_empty_text(self):
        """Test empty text yields no tokens."""
        assert tokenize("") == []


class TestKeywords:
    """Test keyword extraction."""

    def test_drops_stop_words_and_short_tokens(self, extractor):
        """Test stop words and tokens shorter than 4 characters are dropped."""
        metadata = extractor.extract("Fix the login bug with retry logic")

        assert metadata.keywords == ["login", "retry", "logic"]

    def test_keywords_are_unique(self, extractor):
        """Test repeated words are kept once, in first-seen order."""
        metadata = extractor.extract("Cache invalidation: cache keys, cache TTL, invalidation")

        assert metadata.keywords == ["cache", "invalidation", "keys"]

    def test_keywords_capped_at_ten(self, extractor):
        """Test at most 10 keywords are extracted."""
        text = " ".join(f"keyword{i:02d}" for i in range(15))
        metadata = extractor.extract(text)

        assert len(metadata.keywords) == 10
        assert metadata.keywords[0] == "keyword00"
        assert metadata.keywords[-1] == "keyword09"

    def test_custom_limits(self):
        """Test configured keyword cap and minimum length."""
        extractor = MetadataExtractor(max_keywords=2, min_keyword_length=6)
        metadata = extractor.extract("Refactor search ranking pipeline")

        assert metadata.keywords == ["refactor", "search"]


class TestDomainInference:
    """Test domain and theme inference."""

    def test_oauth_item(self, extractor):
        """Test domains for an authentication task."""
        metadata = extractor.extract("Implement OAuth2 authentication with refresh tokens")

        assert metadata.feature_domain == "user-management"
        assert metadata.technical_domain == "security"
        assert metadata.strategic_theme == "feature-development"
        assert metadata.code_locations == ["auth"]
        assert metadata.keywords == ["oauth2", "authentication", "refresh", "tokens"]

    def test_first_matching_rule_wins(self, extractor):
        """Test the earlier rule wins when several vocabularies match."""
        metadata = extractor.extract("Show billing history after login")

        assert metadata.feature_domain == "user-management"

    def test_default_domain(self, extractor):
        """Test unmatched text falls back to the default domain."""
        metadata = extractor.extract("Water the office plants")

        assert metadata.feature_domain == "general"
        assert metadata.technical_domain == "general"
        assert metadata.strategic_theme == "general"
        assert metadata.code_locations == []

    def test_custom_default_domain(self):
        """Test the default domain label is configurable."""
        metadata = MetadataExtractor(default_domain="misc").extract("Water the plants")

        assert metadata.feature_domain == "misc"

    def test_frontend_item(self, extractor):
        """Test a UI task maps to the frontend domain and components location."""
        metadata = extractor.extract("Polish the React settings page")

        assert metadata.technical_domain == "frontend"
        assert metadata.strategic_theme == "user-experience"
        assert "components" in metadata.code_locations
        assert "config" in metadata.code_locations


class TestCodeLocations:
    """Test code location inference."""

    def test_explicit_paths_come_first(self, extractor):
        """Test path-like tokens are kept before vocabulary areas."""
        metadata = extractor.extract("Update src/api/users.py handler")

        assert metadata.code_locations == ["src/api/users.py", "api"]

    def test_every_matching_area_is_added(self, extractor):
        """Test all matching location rules contribute."""
        metadata = extractor.extract("Add login endpoint tests")

        assert metadata.code_locations == ["api", "auth", "tests"]


class TestDeterminism:
    """Test extraction is pure."""

    def test_same_text_same_metadata(self, extractor):
        """Test repeated extraction yields equal metadata."""
        text = "Migrate the Postgres schema and add endpoint tests"

        assert extractor.extract(text) == extractor.extract(text)
