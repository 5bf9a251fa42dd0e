"""Domain layer: the notifier contract and its channel decorators."""

from .base import BaseNotifier, Notifier
from .decorators import (
    ChannelNotifier,
    EmailNotifier,
    FacebookNotifier,
    NotifierDecorator,
    SlackNotifier,
    SMSNotifier,
    WhatsAppNotifier,
)
from .registry import CHANNEL_DECORATORS, DEFAULT_CHANNEL_ORDER, wrap

__all__ = [
    "BaseNotifier",
    "CHANNEL_DECORATORS",
    "ChannelNotifier",
    "DEFAULT_CHANNEL_ORDER",
    "EmailNotifier",
    "FacebookNotifier",
    "Notifier",
    "NotifierDecorator",
    "SMSNotifier",
    "SlackNotifier",
    "WhatsAppNotifier",
    "wrap",
]
