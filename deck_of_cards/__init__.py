#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
扑克牌组模块
提供标准52张牌的数据模型以及洗牌、发牌操作

模块结构：
- core: 核心领域组件（点数、花色、卡牌、牌组、完整性检查、异常）
- application: 配置与日志
"""

import logging

from .core import (
    Rank, Suit, Card, Deck, get_all_ranks, get_all_suits,
    DeckError, EmptyDeckError, DeckConfigError,
    DeckIntegrityChecker, InvariantError,
)
from .application import LoggingConfig, DeckConfig, configure_logging, create_deck

__version__ = "1.0.0"

# 未调用configure_logging时不输出任何日志
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # 基础类型
    'Rank', 'Suit', 'Card', 'Deck', 'get_all_ranks', 'get_all_suits',

    # 异常类型
    'DeckError', 'EmptyDeckError', 'DeckConfigError', 'InvariantError',

    # 完整性检查
    'DeckIntegrityChecker',

    # 配置相关
    'LoggingConfig', 'DeckConfig', 'configure_logging', 'create_deck',
]
