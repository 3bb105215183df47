"""
Shared fakes for crawler tests: an in-memory extraction service and a recording sleep
"""

import pytest
from wikigraph.extraction import (
    ExtractionError,
    ExtractionResponse,
    ExtractionService,
    FailureKind,
    MalformedResponseError,
)

WIKI = "https://en.wikipedia.org/wiki/"


def article_payload(title=None, introduction=None, key_concepts=None, links=(), text=None):
    """Build a raw scrape response like the one the API returns"""
    data = []
    for key, value in (("Article title", title),
                       ("Article introduction", introduction),
                       ("Key concepts", key_concepts),
                       ("Article text", text)):
        results = [{'text': value, 'html': f"<p>{value}</p>"}] if value is not None else []
        data.append({'key': key, 'selectors': [], 'results': results})

    return {
        'success': True,
        'data': data,
        'link': [{'href': href, 'text': anchor} for href, anchor in links]
    }


class FakeExtractionService(ExtractionService):
    """Serves canned payloads keyed by URL

    A value may be a payload dict, an Exception to raise, or a list of
    either, consumed one per call. Unknown URLs fail with ExtractionError.
    """

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.requests = []
        self.opened = False
        self.closed = False

    async def open(self):
        self.opened = True

    async def close(self):
        self.closed = True

    @property
    def requested_urls(self):
        return [request.url for request in self.requests]

    async def scrape(self, request):
        self.requests.append(request)
        outcome = self.pages.get(request.url)
        if isinstance(outcome, list):
            outcome = outcome.pop(0) if outcome else None
        if outcome is None:
            raise ExtractionError("Scrape reported failure", url=request.url, kind=FailureKind.NO_CONTENT)
        if isinstance(outcome, Exception):
            raise outcome
        try:
            return ExtractionResponse.from_payload(outcome)
        except MalformedResponseError as e:
            raise ExtractionError(f"Malformed scrape response: {e}", url=request.url,
                                  kind=FailureKind.MALFORMED)


class RecordingSleep:
    """Stand-in for asyncio.sleep that only remembers the delays"""

    def __init__(self):
        self.calls = []

    async def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def fake_sleep():
    return RecordingSleep()
