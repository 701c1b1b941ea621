"""
ConfigService - 配置管理

负责牌组相关的配置：
- 随机种子（可重现的洗牌结果）
- 洗牌后的完整性检查开关
- 日志输出配置
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from ..core.deck import Deck
from ..core.exceptions import DeckConfigError

PACKAGE_LOGGER_NAME = "deck_of_cards"

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'INFO'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    enable_console_logging: bool = True
    log_file_path: Optional[str] = None  # 为None时不写文件

    def __post_init__(self):
        """验证并规范化日志级别"""
        if not isinstance(self.log_level, str) or self.log_level.upper() not in VALID_LOG_LEVELS:
            raise DeckConfigError(f"无效的日志级别: {self.log_level}")
        self.log_level = self.log_level.upper()

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.log_level)


@dataclass
class DeckConfig:
    """
    牌组配置类
    """
    random_seed: Optional[int] = None      # 随机种子，用于可重现的洗牌
    enable_integrity_check: bool = False   # 每次洗牌后检查牌组完整性
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        """验证配置的有效性"""
        # bool是int的子类，需单独排除
        if self.random_seed is not None and (
                isinstance(self.random_seed, bool) or not isinstance(self.random_seed, int)):
            raise DeckConfigError(f"随机种子必须是整数或None: {self.random_seed!r}")
        if not isinstance(self.logging, LoggingConfig):
            raise DeckConfigError(f"logging必须是LoggingConfig类型，实际: {type(self.logging)}")


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    配置deck_of_cards包的日志输出.

    重复调用时会先移除上一次安装的处理器，避免日志重复输出.

    Args:
        config: 日志配置，为None时使用默认配置

    Returns:
        logging.Logger: 包级别的logger
    """
    config = config or LoggingConfig()
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.log_format)
    if config.enable_console_logging:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
    if config.log_file_path:
        file_handler = logging.FileHandler(config.log_file_path, mode='a', encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.setLevel(config.numeric_level)
    logger.debug(f"[配置] 日志级别: {config.log_level}")
    return logger


def create_deck(config: Optional[DeckConfig] = None) -> Deck:
    """
    按配置创建牌组.

    Args:
        config: 牌组配置，为None时使用默认配置

    Returns:
        Deck: 新的52张牌的牌组
    """
    config = config or DeckConfig()
    rng = random.Random(config.random_seed)
    logging.getLogger(__name__).debug(
        f"[配置] 创建牌组: seed={config.random_seed}, integrity_check={config.enable_integrity_check}"
    )
    return Deck(rng=rng, validate=config.enable_integrity_check)
