"""Notification channels layered at runtime around a base notifier."""

from .channels import (
    CHANNEL_DECORATORS,
    DEFAULT_CHANNEL_ORDER,
    SECURITY_ALERT_MESSAGE,
    BaseNotifier,
    ChannelNotifier,
    EmailNotifier,
    FacebookNotifier,
    LineCollector,
    Notifier,
    NotifierDecorator,
    SlackNotifier,
    SMSNotifier,
    WhatsAppNotifier,
    build_notifier_chain,
    describe_chain,
    send_security_alert,
    wrap,
    write_line_to_console,
)

__all__ = [
    "BaseNotifier",
    "CHANNEL_DECORATORS",
    "ChannelNotifier",
    "DEFAULT_CHANNEL_ORDER",
    "EmailNotifier",
    "FacebookNotifier",
    "LineCollector",
    "Notifier",
    "NotifierDecorator",
    "SECURITY_ALERT_MESSAGE",
    "SMSNotifier",
    "SlackNotifier",
    "WhatsAppNotifier",
    "build_notifier_chain",
    "describe_chain",
    "send_security_alert",
    "wrap",
    "write_line_to_console",
]
