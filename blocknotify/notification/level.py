"""告警级别

ERROR 级别的消息总是推送；INFO 在级别 >= INFO 时推送；DEBUG 仅在 DEBUG 级别推送。
"""

from enum import IntEnum


class AlertLevel(IntEnum):
    """告警级别常量"""

    ERROR = 0
    INFO = 1
    DEBUG = 2


def validate_level(value: int) -> AlertLevel:
    """校验告警级别

    Raises:
        ValueError: 级别超出范围
    """
    low, high = min(AlertLevel), max(AlertLevel)
    if value < low or value > high:
        raise ValueError(f"Invalid alert level {value}, expected {int(low)}-{int(high)}")
    return AlertLevel(value)
