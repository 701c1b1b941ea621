"""
牌组不变量检查模块.

提供牌组完整性检查器及其结果类型.
"""

from .types import InvariantViolation, InvariantCheckResult, InvariantError
from .deck_integrity_checker import DeckIntegrityChecker, FULL_DECK_SIZE

__all__ = [
    'InvariantViolation',
    'InvariantCheckResult',
    'InvariantError',
    'DeckIntegrityChecker',
    'FULL_DECK_SIZE',
]
