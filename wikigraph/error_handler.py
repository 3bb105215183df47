import time
import asyncio
import logging
from enum import Enum
from dataclasses import dataclass
from typing import Dict, List, Optional, Any
from collections import defaultdict
import aiohttp
from .extraction.client import ExtractionError, FailureKind

logger = logging.getLogger(__name__)


class ErrorType(Enum):
    """Classification of extraction failures"""
    NETWORK_TIMEOUT = "network_timeout"
    CONNECTION_ERROR = "connection_error"
    HTTP_CLIENT_ERROR = "http_client_error"  # 4xx
    HTTP_SERVER_ERROR = "http_server_error"  # 5xx
    RATE_LIMITED = "rate_limited"  # 429
    NO_CONTENT = "no_content"
    UNKNOWN_ERROR = "unknown_error"


KIND_TO_ERROR_TYPE = {
    FailureKind.TIMEOUT: ErrorType.NETWORK_TIMEOUT,
    FailureKind.CONNECTION: ErrorType.CONNECTION_ERROR,
    FailureKind.NO_CONTENT: ErrorType.NO_CONTENT,
    FailureKind.MALFORMED: ErrorType.NO_CONTENT,
}


@dataclass
class RetryConfig:
    """Configuration for retry behavior"""
    max_attempts: int = 2
    retry_delay: float = 5.0
    seed_only: bool = True


@dataclass
class ErrorInfo:
    """Information about an error occurrence"""
    url: str
    error_type: ErrorType
    status_code: Optional[int]
    message: str
    timestamp: float
    attempt: int
    depth: int = 0


class ErrorHandler:
    """Records extraction failures and decides whether a page gets another attempt"""

    def __init__(self, retry_config: RetryConfig = None):
        self.retry_config = retry_config or RetryConfig()
        self.error_history: List[ErrorInfo] = []
        self.failed_urls: Dict[str, List[ErrorInfo]] = defaultdict(list)
        self.recovered_urls: List[str] = []

    def reset(self):
        """Forget the errors of a previous run"""
        self.error_history.clear()
        self.failed_urls.clear()
        self.recovered_urls.clear()

    def classify_error(self, error: Exception) -> ErrorType:
        """Classify an error into appropriate error type"""
        status_code = getattr(error, 'status', None)
        kind = getattr(error, 'kind', None)

        if status_code and status_code >= 400:
            if status_code == 429:
                return ErrorType.RATE_LIMITED
            elif 400 <= status_code < 500:
                return ErrorType.HTTP_CLIENT_ERROR
            elif 500 <= status_code < 600:
                return ErrorType.HTTP_SERVER_ERROR
        elif kind in KIND_TO_ERROR_TYPE:
            return KIND_TO_ERROR_TYPE[kind]
        elif isinstance(error, asyncio.TimeoutError):
            return ErrorType.NETWORK_TIMEOUT
        elif isinstance(error, aiohttp.ClientConnectionError):
            return ErrorType.CONNECTION_ERROR

        return ErrorType.UNKNOWN_ERROR

    def record_failure(self, url: str, error: ExtractionError, attempt: int, depth: int) -> ErrorInfo:
        """Log and store a failed extraction attempt"""
        error_type = self.classify_error(error)
        error_info = ErrorInfo(
            url=url,
            error_type=error_type,
            status_code=getattr(error, 'status', None),
            message=str(error),
            timestamp=time.time(),
            attempt=attempt,
            depth=depth
        )

        self.error_history.append(error_info)
        self.failed_urls[url].append(error_info)

        log_level = logging.WARNING if self.should_retry(depth, attempt) else logging.ERROR
        logger.log(
            log_level,
            f"Attempt {attempt}/{self.retry_config.max_attempts} failed for {url}: "
            f"{error_type.value} - {error}"
        )
        return error_info

    def record_recovery(self, url: str):
        """A retry succeeded, so the URL no longer counts as failed"""
        self.failed_urls.pop(url, None)
        self.recovered_urls.append(url)

    def should_retry(self, depth: int, attempt: int) -> bool:
        """Only the seed page gets a second, simplified attempt"""
        if attempt >= self.retry_config.max_attempts:
            return False
        if self.retry_config.seed_only and depth != 0:
            return False
        return True

    def get_error_summary(self) -> Dict[str, Any]:
        """Get summary of all errors encountered"""
        if not self.error_history:
            return {"total_errors": 0}

        error_counts = defaultdict(int)
        for error in self.error_history:
            error_counts[error.error_type.value] += 1

        return {
            "total_errors": len(self.error_history),
            "failed_urls": len(self.failed_urls),
            "recovered_urls": len(self.recovered_urls),
            "error_types": dict(error_counts)
        }

    def get_failed_urls(self) -> List[str]:
        """Get list of URLs that ultimately failed after all retries"""
        return list(self.failed_urls.keys())
