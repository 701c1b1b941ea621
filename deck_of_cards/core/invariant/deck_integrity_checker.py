"""
牌组完整性检查器

检查一组牌是否仍然是标准52张牌的一个子集：无重复、无非法对象、数量符合预期。
"""

import logging
import time
from collections import Counter
from typing import Any, Dict, List, Optional, Sequence

from ..deck.card import Card
from ..deck.types import get_all_ranks, get_all_suits
from .types import InvariantViolation, InvariantCheckResult, InvariantError

__all__ = ['DeckIntegrityChecker', 'FULL_DECK_SIZE']

FULL_DECK_SIZE = len(get_all_ranks()) * len(get_all_suits())


class DeckIntegrityChecker:
    """牌组完整性检查器"""

    def __init__(self):
        self._violations: List[InvariantViolation] = []
        self._logger = logging.getLogger(__name__)

    def check(self, cards: Sequence[Any], expected_count: Optional[int] = None) -> InvariantCheckResult:
        """执行完整性检查

        Args:
            cards: 待检查的牌序列
            expected_count: 期望的牌数，为None时不检查数量

        Returns:
            InvariantCheckResult: 检查结果
        """
        start_time = time.perf_counter()
        self._violations.clear()

        self._check_size(cards, expected_count)
        self._check_card_types(cards)
        self._check_duplicates(cards)

        check_duration = time.perf_counter() - start_time
        if self._violations:
            for violation in self._violations:
                self._logger.warning(f"[完整性] {violation.description}")
            return InvariantCheckResult.create_failure(self._violations, check_duration)
        return InvariantCheckResult.create_success(check_duration)

    def verify(self, cards: Sequence[Any], expected_count: Optional[int] = None) -> InvariantCheckResult:
        """执行检查，失败时抛出异常

        Raises:
            InvariantError: 当存在任何违反记录时
        """
        result = self.check(cards, expected_count)
        if not result.is_valid:
            raise InvariantError(
                f"牌组完整性检查失败，共{len(result.violations)}项违反",
                result.violations
            )
        return result

    def _check_size(self, cards: Sequence[Any], expected_count: Optional[int]) -> None:
        if len(cards) > FULL_DECK_SIZE:
            self._create_violation(
                f"牌数({len(cards)})超过整副牌({FULL_DECK_SIZE})",
                context={'count': len(cards)}
            )
        if expected_count is not None and len(cards) != expected_count:
            self._create_violation(
                f"牌数({len(cards)})与期望值({expected_count})不一致",
                context={'count': len(cards), 'expected_count': expected_count}
            )

    def _check_card_types(self, cards: Sequence[Any]) -> None:
        invalid = [item for item in cards if not isinstance(item, Card)]
        if invalid:
            self._create_violation(
                f"发现{len(invalid)}个非Card对象",
                context={'invalid_items': [repr(item) for item in invalid]}
            )

    def _check_duplicates(self, cards: Sequence[Any]) -> None:
        counts = Counter(card for card in cards if isinstance(card, Card))
        duplicates = [card for card, count in counts.items() if count > 1]
        if duplicates:
            self._create_violation(
                f"发现重复的牌: {', '.join(card.label for card in duplicates)}",
                context={'duplicates': [repr(card) for card in duplicates]}
            )

    def _create_violation(self, description: str, severity: str = 'CRITICAL',
                          context: Optional[Dict[str, Any]] = None) -> InvariantViolation:
        violation = InvariantViolation(
            description=description,
            severity=severity,
            context=context or {}
        )
        self._violations.append(violation)
        return violation
