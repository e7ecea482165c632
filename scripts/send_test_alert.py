#!/usr/bin/env python3
"""推送测试消息到 Slack

依次推送所有预定义模板，用于检查 Webhook 配置和消息布局。
运行前请确保 .env 中已配置 SLACK_WEBHOOK_URL

使用方法：
    python scripts/send_test_alert.py
"""

import os
import sys
from datetime import datetime

# 添加项目根目录到 path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

# 加载环境变量
load_dotenv()

from loguru import logger

from blocknotify.config import settings
from blocknotify.notification import AlertLevel, SlackAlerter, templates

# 配置日志
logger.remove()
logger.add(
    sys.stdout,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    level=settings.log_level,
)


def main() -> bool:
    """推送所有模板并打印结果"""
    if not settings.slack_webhook_url:
        print("❌ 错误：请先在 .env 中配置 SLACK_WEBHOOK_URL")
        return False

    alerter = SlackAlerter(level=AlertLevel.DEBUG)
    now = datetime.now().strftime("%Y/%m/%d %H:%M:%S")

    messages = {
        "notification": templates.notification(
            title="blocknotify",
            text="Test notification from `scripts/send_test_alert.py`",
        ),
        "job_start": templates.job_start(
            title="Test Job",
            desc="This job does this and that",
            overview={"Job Type": "Refresh", "Action": "Update", "Start Time": now},
        ),
        "job_finish": templates.job_finish(
            title="Test Job",
            desc="This job does this and that",
            result=":white_check_mark: Success",
            stats={"Rows": 1234, "Duration": "42s"},
        ),
        "job_executed": templates.job_executed(
            title="Test Job",
            result=":thumbsup:",
            stats={"Rows": 1234},
        ),
        "job_error": templates.job_error(
            title="Test Job",
            error="test_job.py:78 Silly error",
            extra={"Retries": 3},
        ),
    }

    ok = True
    for name, message in messages.items():
        sent = alerter.debug(message)
        print(f"{'✅' if sent else '❌'} {name}: {len(message['blocks'])} blocks")
        ok = ok and sent
    return ok


if __name__ == "__main__":
    sys.exit(0 if main() else 1)
