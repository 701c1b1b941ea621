"""
扑克牌组管理.

定义Deck类，提供标准52张牌的构建、洗牌和发牌操作.
牌组只会减少或原地重排，不存在把牌放回的操作；需要整副牌时重新构造Deck.
"""

import logging
import random
from typing import Iterator, List, Optional, Tuple

from ..exceptions import EmptyDeckError
from .card import Card
from .types import get_all_ranks, get_all_suits


class Deck:
    """
    表示一副扑克牌.

    列表末尾为牌顶，发牌总是从末尾取出.
    洗牌使用可注入的随机数生成器，以支持确定性测试.
    非线程安全，多线程共享同一Deck时需由调用方自行加锁.

    Attributes:
        _cards: 当前牌组中的牌列表
        _rng: 随机数生成器
        _validate: 是否在每次洗牌后执行完整性检查

    Examples:
        >>> deck = Deck()
        >>> deck.deal_one().label
        'The king of clubs'
        >>> len(deck)
        51
    """

    def __init__(self, rng: Optional[random.Random] = None, validate: bool = False) -> None:
        """
        初始化牌组.

        按点数从A到K、每个点数内按黑桃、红桃、方块、梅花的顺序构建52张牌.

        Args:
            rng: 随机数生成器，用于洗牌操作。如果为None，使用默认随机数生成器
            validate: 是否在每次洗牌后检查牌组完整性
        """
        self._logger = logging.getLogger(__name__)
        self._rng = rng or random.Random()
        self._validate = validate
        self._cards: List[Card] = [
            Card(rank, suit)
            for rank in get_all_ranks()
            for suit in get_all_suits()
        ]
        self._logger.debug(f"[牌组] 新建牌组，共{len(self._cards)}张牌")

    def deal_one(self) -> Card:
        """
        发一张牌.

        Returns:
            Card: 牌组末尾（牌顶）的牌

        Raises:
            EmptyDeckError: 当牌组为空时
        """
        if not self._cards:
            raise EmptyDeckError(requested=1, remaining=0)
        card = self._cards.pop()
        self._logger.debug(f"[发牌] {card.label}，剩余{len(self._cards)}张")
        return card

    def deal_cards(self, count: int) -> List[Card]:
        """
        发多张牌.

        Args:
            count: 要发的牌数

        Returns:
            List[Card]: 按发出顺序排列的牌

        Raises:
            ValueError: 当count为负数时
            EmptyDeckError: 当牌组中的牌不足时，此时牌组不变
        """
        if count < 0:
            raise ValueError(f"发牌数不能为负数: {count}")
        if count > len(self._cards):
            raise EmptyDeckError(requested=count, remaining=len(self._cards))
        return [self.deal_one() for _ in range(count)]

    def deal_all(self) -> List[Card]:
        """
        发出牌组中剩余的所有牌.

        Returns:
            List[Card]: 按发出顺序排列的牌，空牌组返回空列表
        """
        dealt: List[Card] = []
        while self._cards:
            card = self.deal_one()
            self._logger.info(f"Dealing {card.label}")
            dealt.append(card)
        return dealt

    def shuffle(self) -> None:
        """
        洗牌.

        Fisher-Yates原地交换：从末尾向前，每个位置与[0, i]内随机位置交换.
        只重排当前剩余的牌，牌数不变.

        Raises:
            InvariantError: 开启完整性检查且洗牌结果异常时
        """
        count = len(self._cards)
        for i in range(count - 1, 0, -1):
            j = self._rng.randrange(i + 1)
            self._cards[i], self._cards[j] = self._cards[j], self._cards[i]
        self._logger.debug(f"[洗牌] 已重排{count}张牌")

        if self._validate:
            # 延迟导入，invariant模块依赖本包的Card
            from ..invariant.deck_integrity_checker import DeckIntegrityChecker
            DeckIntegrityChecker().verify(self._cards, expected_count=count)

    def peek_top(self) -> Optional[Card]:
        """
        查看顶部的牌但不发出.

        Returns:
            Optional[Card]: 下一次deal_one将发出的牌，如果牌组为空则返回None
        """
        if not self._cards:
            return None
        return self._cards[-1]

    @property
    def cards(self) -> Tuple[Card, ...]:
        """当前牌序的快照，从牌底到牌顶"""
        return tuple(self._cards)

    @property
    def cards_remaining(self) -> int:
        """获取剩余牌数"""
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        """检查牌组是否为空"""
        return len(self._cards) == 0

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(tuple(self._cards))

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards remaining)"

    def __repr__(self) -> str:
        return f"Deck(cards_remaining={len(self._cards)})"
