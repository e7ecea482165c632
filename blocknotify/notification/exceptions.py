"""通知模块异常定义"""


class BlockError(Exception):
    """区块结构错误基类"""


class MissingContentError(BlockError):
    """Section 既没有文本也没有字段"""


class CapacityExceededError(BlockError):
    """Section 字段数量超过上限"""


class TextTooLongError(BlockError, ValueError):
    """文本超过 Block Kit 长度限制"""


class InvalidInputError(ValueError):
    """推送内容为空"""
