"""Compatibility facade for notifier classes and functions.

Module layout by abstraction layer:
- adapters: output writers
- domain: notifier contract, channel decorators, channel lookup
- application: chain composition
"""

from .adapters.writers import LineCollector, write_line_to_console
from .application.compose import (
    SECURITY_ALERT_MESSAGE,
    build_notifier_chain,
    describe_chain,
    send_security_alert,
)
from .domain.base import BaseNotifier, Notifier
from .domain.decorators import (
    ChannelNotifier,
    EmailNotifier,
    FacebookNotifier,
    NotifierDecorator,
    SlackNotifier,
    SMSNotifier,
    WhatsAppNotifier,
)
from .domain.registry import CHANNEL_DECORATORS, DEFAULT_CHANNEL_ORDER, wrap

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
