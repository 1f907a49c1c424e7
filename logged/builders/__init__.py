"""
Record builders module

Provides the builders that normalize logging call arguments into records.
"""

from logged.builders.base_builder import BaseBuilder
from logged.builders.simple_builder import SimpleBuilder, PayloadKind, classify, stringify

__all__ = [
    "BaseBuilder",
    "SimpleBuilder",
    "PayloadKind",
    "classify",
    "stringify",
]
