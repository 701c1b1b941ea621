"""
扑克牌基础类型定义.

定义扑克牌的花色、点数枚举以及按固定顺序枚举全部取值的辅助函数.
"""

from enum import Enum, IntEnum
from typing import List


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    数值即点数，A为1，K为13.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def label(self) -> str:
        """
        返回点数的显示名称.

        Returns:
            str: 人头牌和A返回英文单词，其余返回十进制数字，如"ace"、"7"
        """
        names = {
            Rank.ACE: "ace",
            Rank.JACK: "jack",
            Rank.QUEEN: "queen",
            Rank.KING: "king",
        }
        return names.get(self, str(self.value))


class Suit(Enum):
    """
    扑克牌花色枚举.

    声明顺序即发牌组构建顺序：黑桃、红桃、方块、梅花.
    """

    SPADES = "spades"      # 黑桃
    HEARTS = "hearts"      # 红桃
    DIAMONDS = "diamonds"  # 方块
    CLUBS = "clubs"        # 梅花

    @property
    def label(self) -> str:
        """返回花色的小写英文名称"""
        return self.value


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 从A到K升序排列的13种点数
    """
    return list(Rank)


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 按黑桃、红桃、方块、梅花顺序排列的4种花色
    """
    return list(Suit)
