"""
扑克牌数据结构.

定义不可变的Card类，由一个点数和一个花色组成.
"""

from dataclasses import dataclass
from typing import Dict

from .types import Rank, Suit


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，相等性和哈希由点数与花色共同决定.

    Attributes:
        rank: 点数
        suit: 花色

    Examples:
        >>> card = Card(Rank.ACE, Suit.SPADES)
        >>> card.label
        'The ace of spades'
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            TypeError: 当点数或花色类型无效时
        """
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")

    @property
    def label(self) -> str:
        """返回形如"The ace of spades"的显示名称"""
        return f"The {self.rank.label} of {self.suit.label}"

    @classmethod
    def from_label(cls, text: str) -> 'Card':
        """
        从显示名称解析扑克牌对象.

        Args:
            text: Card.label产生的字符串，如"The king of clubs"

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            TypeError: 当输入不是字符串时
            ValueError: 当字符串格式、点数或花色无效时
        """
        if not isinstance(text, str):
            raise TypeError(f"输入必须是字符串，实际: {type(text)}")

        parts = text.strip().split()
        if len(parts) != 4 or parts[0] != "The" or parts[2] != "of":
            raise ValueError(f"卡牌名称格式错误: {text!r}")

        rank_map: Dict[str, Rank] = {rank.label: rank for rank in Rank}
        suit_map: Dict[str, Suit] = {suit.label: suit for suit in Suit}

        rank_str, suit_str = parts[1].lower(), parts[3].lower()
        if rank_str not in rank_map:
            raise ValueError(f"无效的点数: {parts[1]}")
        if suit_str not in suit_map:
            raise ValueError(f"无效的花色: {parts[3]}")

        return cls(rank_map[rank_str], suit_map[suit_str])

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"
