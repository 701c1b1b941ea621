"""
扑克牌组管理模块.

提供Rank、Suit、Card和Deck，实现标准52张牌的构建、洗牌与发牌.
"""

from .types import Rank, Suit, get_all_ranks, get_all_suits
from .card import Card
from .deck import Deck

__all__ = ['Rank', 'Suit', 'get_all_ranks', 'get_all_suits', 'Card', 'Deck']
