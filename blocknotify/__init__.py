"""blocknotify

Slack Block Kit 消息构建与 Webhook 推送。
"""

__version__ = "0.1.0"
