from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LinkCandidate:
    """An outbound link found on a page, before filtering"""
    url: str
    anchor_text: str = ""


@dataclass(frozen=True)
class FrontierEntry:
    """A page waiting in the crawl queue"""
    url: str
    depth: int = 0
    source_title: Optional[str] = None
    source_url: Optional[str] = None
