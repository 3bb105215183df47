"""
Request and response shapes for the AI scrape endpoint
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from ..graph_manager.link_info import LinkCandidate


@dataclass(frozen=True)
class WaitCondition:
    """Tell the scraper what to wait for before extracting"""
    mode: str = "selector"
    value: str = "#content"


@dataclass(frozen=True)
class LoadOptions:
    """Page navigation options"""
    timeout_ms: int = 12000
    navigation_mode: Optional[str] = None


@dataclass(frozen=True)
class ExtractionRequest:
    url: str
    prompts: List[str]
    wait_for: Optional[WaitCondition] = None
    load_options: Optional[LoadOptions] = None

    def to_payload(self) -> Dict[str, Any]:
        """Body for the scrape call"""
        payload: Dict[str, Any] = {
            'url': self.url,
            'element_prompts': list(self.prompts)
        }

        if self.wait_for:
            payload['wait_for'] = {'mode': self.wait_for.mode, 'value': self.wait_for.value}

        if self.load_options:
            goto_options: Dict[str, Any] = {'timeout': self.load_options.timeout_ms}
            if self.load_options.navigation_mode:
                goto_options['wait_until'] = self.load_options.navigation_mode
            payload['goto_options'] = goto_options

        return payload


class MalformedResponseError(ValueError):
    """The scrape response does not have the documented shape"""


def _text_of(result: Any) -> Optional[str]:
    if not isinstance(result, dict):
        raise MalformedResponseError(f"result entry is {type(result).__name__}, expected an object")
    text = result.get('text')
    if text is None or isinstance(text, str):
        return text
    if isinstance(text, (int, float)):
        return str(text)
    raise MalformedResponseError(f"result text is {type(text).__name__}")


def _as_list(value: Any, name: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedResponseError(f"'{name}' is {type(value).__name__}, expected a list")
    return value


@dataclass(frozen=True)
class ExtractionResponse:
    """Extracted values keyed by prompt, plus the links found on the page"""
    fields: Dict[str, Optional[str]] = field(default_factory=dict)
    links: List[LinkCandidate] = field(default_factory=list)

    def value(self, name: str, default: str = "") -> str:
        """Value for a prompt, or ``default`` when nothing was extracted"""
        value = self.fields.get(name)
        return value if value else default

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ExtractionResponse":
        """Map a raw scrape response

        Each prompt keeps the text of its first result. Links without an
        href are dropped. Raises MalformedResponseError when a section has
        the wrong type.
        """
        if not isinstance(payload, dict):
            raise MalformedResponseError(f"response is {type(payload).__name__}, expected an object")

        fields: Dict[str, Optional[str]] = {}
        for item in _as_list(payload.get('data'), 'data'):
            if not isinstance(item, dict):
                raise MalformedResponseError(f"data entry is {type(item).__name__}, expected an object")
            key = item.get('key')
            if not key or not isinstance(key, str) or key in fields and fields[key]:
                continue
            results = _as_list(item.get('results'), 'results')
            fields[key] = _text_of(results[0]) if results else None

        links = []
        for link in _as_list(payload.get('link'), 'link'):
            if not isinstance(link, dict):
                raise MalformedResponseError(f"link entry is {type(link).__name__}, expected an object")
            href = link.get('href')
            if not href or not isinstance(href, str):
                continue
            anchor = link.get('text')
            links.append(LinkCandidate(url=href, anchor_text=anchor if isinstance(anchor, str) else ""))

        return cls(fields=fields, links=links)
