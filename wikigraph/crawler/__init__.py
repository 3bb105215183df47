"""
Crawler - frontier scheduling over the extraction service, with builder pattern
"""

from .base import BaseCrawler
from .builder import CrawlerBuilder
from .result import PageRecord

__all__ = ['BaseCrawler', 'CrawlerBuilder', 'PageRecord']
