"""Multi-dimension similarity scoring between work items."""

from workgraph.config import SimilarityWeights
from workgraph.core.relationships.metadata import tokenize
from workgraph.models.references import SimilarityScore
from workgraph.models.work_item import WorkItem

DOMAIN_MATCH_SCORE = 0.8
STRATEGIC_MATCH_SCORE = 0.6


def overlap_ratio(first: list[str], second: list[str]) -> tuple[list[str], float]:
    """
    Shared values and |shared| / max(|first|, |second|, 1).

    Inputs are treated as sets, so the ratio is symmetric.
    """
    second_set = set(second)
    common = [value for value in dict.fromkeys(first) if value in second_set]
    denominator = max(len(set(first)), len(second_set), 1)
    return common, len(common) / denominator


class SimilarityScorer:
    """
    Weighted similarity over keywords, domains, code locations, strategic
    theme and raw content.

    ``score(a, b)`` is symmetric and every component lies in [0, 1].
    """

    def __init__(self, weights: SimilarityWeights | None = None, max_content_words: int = 50):
        """
        Initialize similarity scorer.

        Args:
            weights: Dimension weights (defaults 0.30/0.25/0.20/0.15/0.10)
            max_content_words: Words compared per item for content overlap
        """
        self.weights = weights or SimilarityWeights()
        self.max_content_words = max_content_words

    def score(self, item1: WorkItem, item2: WorkItem) -> SimilarityScore:
        metadata1 = item1.similarity
        metadata2 = item2.similarity

        common_keywords, keyword_score = overlap_ratio(metadata1.keywords, metadata2.keywords)

        domain_overlap = []
        if metadata1.feature_domain and metadata1.feature_domain == metadata2.feature_domain:
            domain_overlap.append(metadata1.feature_domain)
        if metadata1.technical_domain and metadata1.technical_domain == metadata2.technical_domain:
            domain_overlap.append(metadata1.technical_domain)
        domain_score = DOMAIN_MATCH_SCORE if domain_overlap else 0.0

        location_overlap, location_score = overlap_ratio(
            metadata1.code_locations, metadata2.code_locations
        )

        strategic_alignment = ""
        if metadata1.strategic_theme and metadata1.strategic_theme == metadata2.strategic_theme:
            strategic_alignment = metadata1.strategic_theme
        strategic_score = STRATEGIC_MATCH_SCORE if strategic_alignment else 0.0

        content_score = self.content_similarity(item1.content, item2.content)

        total_score = (
            keyword_score * self.weights.keyword
            + domain_score * self.weights.domain
            + location_score * self.weights.location
            + strategic_score * self.weights.strategic
            + content_score * self.weights.content
        )

        return SimilarityScore(
            total_score=min(max(total_score, 0.0), 1.0),
            keyword_score=keyword_score,
            domain_score=domain_score,
            location_score=location_score,
            strategic_score=strategic_score,
            content_score=content_score,
            common_keywords=common_keywords,
            domain_overlap=domain_overlap,
            code_location_overlap=location_overlap,
            strategic_alignment=strategic_alignment,
        )

    def content_similarity(self, content1: str, content2: str) -> float:
        """Word-overlap ratio of the leading words of each text."""
        _, ratio = overlap_ratio(self.extract_words(content1), self.extract_words(content2))
        return ratio

    def extract_words(self, content: str) -> list[str]:
        """Distinct words among the first ``max_content_words`` lowercase words longer than 3 characters."""
        words = [word for word in tokenize(content) if len(word) > 3]
        return list(dict.fromkeys(words[: self.max_content_words]))
