"""
Utility modules for masked-multivalue.
"""

from .request import build_request_data_map, resolve_masked_keys

__all__ = [
    "build_request_data_map",
    "resolve_masked_keys",
]
