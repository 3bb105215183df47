"""
Storage and persistence modules
"""

from .result_storage import ResultStorage

__all__ = [
    'ResultStorage'
]
