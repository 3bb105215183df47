"""
Extraction Client - Async client for the JigsawStack AI scrape API
"""

import os
import time
import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import aiohttp
from .models import ExtractionRequest, ExtractionResponse, MalformedResponseError

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.jigsawstack.com/v1/ai/scrape"


class FailureKind(Enum):
    """What went wrong while talking to the scrape API"""
    TIMEOUT = "timeout"
    CONNECTION = "connection"
    HTTP_STATUS = "http_status"
    NO_CONTENT = "no_content"
    MALFORMED = "malformed"
    UNKNOWN = "unknown"


class ExtractionError(Exception):
    """Raised when a page could not be scraped or returned no content"""

    def __init__(self, message: str, status: Optional[int] = None, url: Optional[str] = None,
                 kind: FailureKind = FailureKind.UNKNOWN):
        super().__init__(message)
        self.status = status
        self.url = url
        self.kind = kind


@dataclass
class ExtractionClientConfig:
    """Credentials and transport settings for the scrape API"""
    api_key: str = ""
    endpoint: str = DEFAULT_ENDPOINT
    request_timeout: float = 60.0
    user_agent: str = "WikiGraphCrawler/1.0"

    @classmethod
    def from_env(cls, **overrides) -> "ExtractionClientConfig":
        """Read the API key from JIGSAWSTACK_API_KEY"""
        api_key = os.environ.get("JIGSAWSTACK_API_KEY", "")
        return cls(api_key=api_key, **overrides)


class ExtractionService(ABC):
    """Anything that can turn a URL into extracted fields and links"""

    async def open(self) -> None:
        pass

    async def close(self) -> None:
        pass

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    @abstractmethod
    async def scrape(self, request: ExtractionRequest) -> ExtractionResponse:
        """Scrape one page, raising ExtractionError on failure"""
        pass


class JigsawStackClient(ExtractionService):
    """Calls the hosted AI scrape endpoint over aiohttp"""

    def __init__(self, config: ExtractionClientConfig):
        self.config = config
        self.session: Optional[aiohttp.ClientSession] = None

    async def open(self):
        if self.session is None or self.session.closed:
            headers = {
                'x-api-key': self.config.api_key,
                'Content-Type': 'application/json',
                'User-Agent': self.config.user_agent
            }
            timeout = aiohttp.ClientTimeout(total=self.config.request_timeout)
            self.session = aiohttp.ClientSession(headers=headers, timeout=timeout)

    async def close(self):
        if self.session is not None and not self.session.closed:
            await self.session.close()
        self.session = None

    async def scrape(self, request: ExtractionRequest) -> ExtractionResponse:
        if self.session is None:
            raise RuntimeError("JigsawStackClient used outside of 'async with'")

        start_time = time.time()
        try:
            async with self.session.post(self.config.endpoint, json=request.to_payload()) as response:
                if response.status != 200:
                    body = await response.text()
                    raise ExtractionError(
                        f"HTTP {response.status}: {body[:200]}",
                        status=response.status,
                        url=request.url,
                        kind=FailureKind.HTTP_STATUS
                    )

                try:
                    payload = await response.json(content_type=None)
                except ValueError as e:
                    raise ExtractionError(f"Invalid JSON response: {e}", status=response.status,
                                          url=request.url, kind=FailureKind.MALFORMED)

        except asyncio.TimeoutError:
            raise ExtractionError(f"Timed out after {self.config.request_timeout}s",
                                  url=request.url, kind=FailureKind.TIMEOUT)
        except aiohttp.ClientConnectionError as e:
            raise ExtractionError(f"{type(e).__name__}: {e}", url=request.url, kind=FailureKind.CONNECTION)
        except aiohttp.ClientError as e:
            raise ExtractionError(f"{type(e).__name__}: {e}", url=request.url)

        if isinstance(payload, dict) and payload.get('success') is False:
            raise ExtractionError(payload.get('message') or "Scrape reported failure",
                                  url=request.url, kind=FailureKind.NO_CONTENT)

        try:
            mapped = ExtractionResponse.from_payload(payload)
        except MalformedResponseError as e:
            raise ExtractionError(f"Malformed scrape response: {e}", url=request.url,
                                  kind=FailureKind.MALFORMED)

        logger.debug(f"Scraped {request.url} in {time.time() - start_time:.2f}s")
        return mapped
