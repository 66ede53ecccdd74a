# Utility functions
from .resources import (
    ResourceKind,
    QuantityParseError,
    normalize,
    parse_cpu,
    parse_memory,
    format_quantity,
)

__all__ = [
    'ResourceKind', 'QuantityParseError',
    'normalize', 'parse_cpu', 'parse_memory', 'format_quantity',
]
