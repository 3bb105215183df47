"""
Base Feature Interface - Abstract base class for all crawler features
"""

from abc import ABC, abstractmethod


class CrawlerFeature(ABC):
    """Base interface for all crawler features"""

    @abstractmethod
    async def initialize(self, crawler) -> None:
        """Initialize the feature when crawler starts"""
        pass

    @abstractmethod
    async def before_crawl(self, crawler) -> None:
        """Called before crawling starts"""
        pass

    @abstractmethod
    async def process_page(self, record, crawler) -> None:
        """Called once for every collected page"""
        pass

    @abstractmethod
    async def finalize(self, crawler) -> None:
        """Called after the frontier has drained"""
        pass
