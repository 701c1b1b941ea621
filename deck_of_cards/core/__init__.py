"""
Core Module - 纯领域逻辑层

核心模块只能依赖其他核心模块，不能依赖应用层。

Modules:
    deck: 点数、花色、卡牌和牌组
    invariant: 牌组完整性检查
    exceptions: 牌组异常定义
"""

from .exceptions import DeckError, EmptyDeckError, DeckConfigError
from .deck import Rank, Suit, Card, Deck, get_all_ranks, get_all_suits
from .invariant import DeckIntegrityChecker, InvariantError

__all__ = [
    'DeckError', 'EmptyDeckError', 'DeckConfigError',
    'Rank', 'Suit', 'Card', 'Deck', 'get_all_ranks', 'get_all_suits',
    'DeckIntegrityChecker', 'InvariantError',
]
