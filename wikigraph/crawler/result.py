"""
Page Record - Data structure for a successfully crawled page
"""

from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Optional, Dict, Any

UNKNOWN_TITLE = "Unknown Title"
NO_INTRODUCTION = "No introduction available"
NO_TEXT = "No text available"


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class PageRecord:
    """One crawled page"""
    url: str
    title: str = UNKNOWN_TITLE
    introduction: str = NO_INTRODUCTION
    key_concepts: str = ""
    subject: str = ""
    depth: int = 0
    crawl_timestamp: str = ""
    is_retry: bool = False
    source_url: Optional[str] = None
    source_title: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
