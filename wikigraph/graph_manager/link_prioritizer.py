from typing import Iterable, List
from .crawl_config import CrawlConfig
from .link_info import FrontierEntry, LinkCandidate


class LinkPrioritizer:
    """Filters, deduplicates and ranks the outbound links of a page"""

    def __init__(self, config: CrawlConfig):
        self.config = config

    def is_followable(self, url: str, current_url: str) -> bool:
        """Check whether a link target may be queued from the current page"""
        if not url or not self.config.is_eligible(url):
            return False
        if any(pattern in url for pattern in self.config.excluded_patterns):
            return False
        # Skip the current page to avoid loops
        return url != current_url

    def rank(self, links: List[LinkCandidate], title: str) -> List[LinkCandidate]:
        """Move links whose anchor text mentions the title to the front

        Both groups keep their original relative order.
        """
        title_lower = title.lower()
        relevant = [link for link in links if title_lower in link.anchor_text.lower()]
        others = [link for link in links if title_lower not in link.anchor_text.lower()]
        return relevant + others

    def select_links(self, links: Iterable[LinkCandidate], current_url: str, title: str,
                     depth: int, limit: int) -> List[FrontierEntry]:
        """Pick at most ``limit`` links to crawl at ``depth + 1``"""
        unique_links = []
        seen_urls = set()

        for link in links:
            if not self.is_followable(link.url, current_url):
                continue
            if link.url in seen_urls:
                continue
            seen_urls.add(link.url)
            unique_links.append(link)

        ranked = self.rank(unique_links, title)

        return [
            FrontierEntry(
                url=link.url,
                depth=depth + 1,
                source_title=title,
                source_url=current_url
            )
            for link in ranked[:limit]
        ]
