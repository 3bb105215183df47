"""
Crawler Features - Composable features for the crawler
"""

from .base import CrawlerFeature
from .export_feature import ExportFeature

__all__ = [
    'CrawlerFeature',
    'ExportFeature'
]
