"""
Test Configuration - pytest配置文件

提供测试的基础设施，包括：
- 新牌组与随机数生成器fixture
- 可编排结果的随机数生成器
- 日志状态隔离
"""

import logging
import random
from typing import Callable

import pytest

from deck_of_cards import Deck


class ScriptedRandom:
    """randrange结果由回调决定的随机数源，用于断言精确的洗牌结果"""

    def __init__(self, pick: Callable[[int], int]):
        self._pick = pick
        self.calls = []

    def randrange(self, start, stop=None, step=1):
        upper = start if stop is None else stop
        self.calls.append(upper)
        return self._pick(upper)


@pytest.fixture
def deck():
    """未洗牌的新牌组fixture"""
    return Deck()


@pytest.fixture
def seeded_rng():
    """固定种子的随机数生成器fixture"""
    return random.Random(42)


@pytest.fixture
def scripted_rng():
    """可编排随机数生成器的工厂fixture"""
    return ScriptedRandom


@pytest.fixture
def restore_package_logger():
    """测试结束后恢复deck_of_cards包logger的处理器和级别"""
    logger = logging.getLogger("deck_of_cards")
    original_handlers = list(logger.handlers)
    original_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if handler not in original_handlers:
            handler.close()
    for handler in original_handlers:
        logger.addHandler(handler)
    logger.setLevel(original_level)


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
