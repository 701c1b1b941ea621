"""
Application Layer - 应用层

提供配置管理以及按配置创建牌组的入口。
"""

from .config_service import (
    LoggingConfig,
    DeckConfig,
    configure_logging,
    create_deck,
)

__all__ = ['LoggingConfig', 'DeckConfig', 'configure_logging', 'create_deck']
