"""
牌组完整性检查器的单元测试.
"""

import pytest

from deck_of_cards import Card, Deck, Rank, Suit
from deck_of_cards.core.invariant import (
    DeckIntegrityChecker,
    FULL_DECK_SIZE,
    InvariantCheckResult,
    InvariantError,
    InvariantViolation,
)


class TestDeckIntegrityChecker:
    """DeckIntegrityChecker的单元测试."""

    def test_full_deck_is_valid(self, deck):
        """测试完整牌组通过检查."""
        result = DeckIntegrityChecker().check(deck.cards, expected_count=FULL_DECK_SIZE)

        assert result.is_valid
        assert result.violations == []
        assert result.check_duration >= 0

    def test_partial_deck_is_valid(self, deck):
        """测试部分牌组通过检查."""
        deck.deal_cards(10)

        result = DeckIntegrityChecker().check(deck.cards)

        assert result.is_valid

    def test_empty_sequence_is_valid(self):
        """测试空序列通过检查."""
        assert DeckIntegrityChecker().check([], expected_count=0).is_valid

    def test_duplicate_cards(self):
        """测试发现重复的牌."""
        card = Card(Rank.ACE, Suit.SPADES)

        result = DeckIntegrityChecker().check([card, Card(Rank.TWO, Suit.CLUBS), card])

        assert not result.is_valid
        assert len(result.violations) == 1
        assert "The ace of spades" in result.violations[0].description
        assert result.violations[0].severity == 'CRITICAL'

    def test_non_card_items(self):
        """测试发现非Card对象."""
        result = DeckIntegrityChecker().check([Card(Rank.ACE, Suit.SPADES), "AS"])

        assert not result.is_valid
        assert result.violations[0].context['invalid_items'] == ["'AS'"]

    def test_unexpected_count(self, deck):
        """测试牌数与期望值不一致."""
        result = DeckIntegrityChecker().check(deck.cards, expected_count=51)

        assert not result.is_valid
        assert result.violations[0].context == {'count': 52, 'expected_count': 51}

    def test_oversized_deck(self):
        """测试牌数超过整副牌."""
        cards = list(Deck().cards) + list(Deck().cards)

        result = DeckIntegrityChecker().check(cards)

        assert not result.is_valid
        assert len(result.violations) == 2

    def test_checker_is_reusable(self):
        """测试同一检查器多次检查互不影响."""
        checker = DeckIntegrityChecker()
        card = Card(Rank.ACE, Suit.SPADES)

        assert not checker.check([card, card]).is_valid
        assert checker.check([card]).is_valid

    def test_verify_raises(self):
        """测试verify在检查失败时抛出异常."""
        card = Card(Rank.ACE, Suit.SPADES)

        with pytest.raises(InvariantError) as exc_info:
            DeckIntegrityChecker().verify([card, card])

        assert len(exc_info.value.violations) == 1
        assert len(exc_info.value.get_critical_violations()) == 1

    def test_verify_returns_result(self, deck):
        """测试verify在检查通过时返回结果."""
        assert DeckIntegrityChecker().verify(deck.cards).is_valid


class TestInvariantTypes:
    """不变量类型的单元测试."""

    def test_violation_validation(self):
        """测试违反记录的验证."""
        with pytest.raises(ValueError):
            InvariantViolation(description="")
        with pytest.raises(ValueError):
            InvariantViolation(description="x", severity="FATAL")

    def test_failure_requires_violations(self):
        """测试失败结果必须包含违反记录."""
        with pytest.raises(ValueError):
            InvariantCheckResult(is_valid=False, violations=[], check_duration=0.0)

    def test_negative_duration(self):
        """测试检查耗时不能为负数."""
        with pytest.raises(ValueError):
            InvariantCheckResult.create_success(check_duration=-1.0)
