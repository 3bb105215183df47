"""
Client and data shapes for the content-extraction service
"""

from .models import (
    WaitCondition,
    LoadOptions,
    ExtractionRequest,
    ExtractionResponse,
    MalformedResponseError
)
from .client import (
    FailureKind,
    ExtractionError,
    ExtractionClientConfig,
    ExtractionService,
    JigsawStackClient
)

__all__ = [
    'WaitCondition',
    'LoadOptions',
    'ExtractionRequest',
    'ExtractionResponse',
    'MalformedResponseError',
    'FailureKind',
    'ExtractionError',
    'ExtractionClientConfig',
    'ExtractionService',
    'JigsawStackClient'
]
