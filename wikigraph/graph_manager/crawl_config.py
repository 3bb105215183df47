from dataclasses import dataclass
from typing import List, Optional, Tuple
from .graph_mode import GraphMode


DEFAULT_SEED_URL = "https://en.wikipedia.org/wiki/Machine_learning"

# Namespaces and fragments that never lead to an article
DEFAULT_EXCLUDED_PATTERNS = (
    "File:", "Special:", "Talk:", "Help:", "Category:",
    "Wikipedia:", "Template:", "Portal:", "List_of_", "#",
)


@dataclass
class ExtractionOptions:
    """Prompts and page-load options sent with every scrape request"""
    title_prompt: str = "Article title"
    introduction_prompt: str = "Article introduction"
    key_concepts_prompt: str = "Key concepts"
    content_selector: str = "#content"
    load_timeout_ms: int = 12000
    navigation_mode: str = "domcontentloaded"

    # Reduced request used when the seed page fails
    text_prompt: str = "Article text"
    retry_timeout_ms: int = 15000

    @property
    def prompts(self) -> List[str]:
        return [self.title_prompt, self.introduction_prompt, self.key_concepts_prompt]

    @property
    def retry_prompts(self) -> List[str]:
        return [self.title_prompt, self.text_prompt]


@dataclass
class CrawlConfig:
    """Configuration for a depth-bounded crawl"""
    seed_url: str = DEFAULT_SEED_URL
    max_depth: int = 2
    max_links_per_page: int = 3
    url_marker: str = "en.wikipedia.org/wiki/"
    excluded_patterns: Tuple[str, ...] = DEFAULT_EXCLUDED_PATTERNS
    extraction: Optional[ExtractionOptions] = None
    page_delay: float = 3.0
    preview_length: int = 300
    graph_mode: GraphMode = GraphMode.DEPTH_ADJACENCY

    def __post_init__(self):
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.max_links_per_page < 0:
            raise ValueError(f"max_links_per_page must be >= 0, got {self.max_links_per_page}")
        if self.extraction is None:
            self.extraction = ExtractionOptions()

    def is_eligible(self, url: str) -> bool:
        """Check the URL points into the crawlable article space"""
        return self.url_marker in url
