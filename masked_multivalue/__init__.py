"""
masked-multivalue: an ordered multi-value map that masks sensitive values.

The map itself has no Django dependency; the request helpers, middleware and
app config integrate it with Django projects.
"""

from .datastructures import (
    PROTECTED_PLACEHOLDER,
    SELF_REFERENCE_LABEL,
    MaskingMultiValueMap,
)
from .defaults import LIBRARY_VERSION

__version__ = LIBRARY_VERSION

__all__ = [
    "MaskingMultiValueMap",
    "PROTECTED_PLACEHOLDER",
    "SELF_REFERENCE_LABEL",
    "__version__",
]
