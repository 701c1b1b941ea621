"""
牌组业务异常定义
所有异常均直接抛给调用方，库内部不做捕获
"""


class DeckError(Exception):
    """牌组基础异常类"""
    pass


class EmptyDeckError(DeckError):
    """牌组中剩余的牌不足以完成发牌"""

    def __init__(self, requested: int = 1, remaining: int = 0):
        self.requested = requested
        self.remaining = remaining
        if remaining == 0:
            message = "牌组已空，无法发牌"
        else:
            message = f"牌组中只有{remaining}张牌，无法发{requested}张"
        super().__init__(message)


class DeckConfigError(DeckError):
    """牌组配置错误异常"""
    pass
