from __future__ import annotations

import unittest
from unittest import mock

from layered_notifications.channels import (
    DEFAULT_CHANNEL_ORDER,
    SECURITY_ALERT_MESSAGE,
    BaseNotifier,
    EmailNotifier,
    LineCollector,
    WhatsAppNotifier,
    build_notifier_chain,
    describe_chain,
    send_security_alert,
    wrap,
)

EXPECTED_ALERT_LINES = [
    "Notificación estándar: ¡Alerta de seguridad!",
    "Enviando notificación por CORREO: ¡Alerta de seguridad!",
    "Enviando notificación por SMS: ¡Alerta de seguridad!",
    "Enviando notificación por FACEBOOK: ¡Alerta de seguridad!",
    "Enviando notificación por SLACK: ¡Alerta de seguridad!",
    "Enviando notificación por WHATSAPP: ¡Alerta de seguridad!",
]


class WrapTests(unittest.TestCase):
    def test_wrap_normalizes_channel_key(self) -> None:
        notifier = wrap(BaseNotifier(), "  Email ")

        self.assertIsInstance(notifier, EmailNotifier)

    def test_wrap_reuses_writer_of_wrapped_chain(self) -> None:
        collector = LineCollector()
        chain = build_notifier_chain(["email"], write=collector)

        with mock.patch("builtins.print") as print_mock:
            wrap(chain, "sms").send("m")

        self.assertFalse(print_mock.called)
        self.assertEqual(
            collector.lines,
            [
                "Notificación estándar: m",
                "Enviando notificación por CORREO: m",
                "Enviando notificación por SMS: m",
            ],
        )

    def test_wrap_explicit_writer_overrides_inherited_one(self) -> None:
        inner_lines = LineCollector()
        outer_lines = LineCollector()
        chain = build_notifier_chain(["email"], write=inner_lines)

        wrap(chain, "slack", write=outer_lines).send("m")

        self.assertEqual(len(inner_lines.lines), 2)
        self.assertEqual(outer_lines.lines, ["Enviando notificación por SLACK: m"])

    def test_wrap_rejects_unknown_channel(self) -> None:
        with self.assertRaises(ValueError) as exc:
            wrap(BaseNotifier(), "fax")

        self.assertIn("fax", str(exc.exception))
        self.assertIn("whatsapp", str(exc.exception))


class BuildChainTests(unittest.TestCase):
    def test_default_chain_writes_lines_innermost_first(self) -> None:
        collector = LineCollector()
        notifier = build_notifier_chain(write=collector)

        notifier.send(SECURITY_ALERT_MESSAGE)

        self.assertIsInstance(notifier, WhatsAppNotifier)
        self.assertEqual(collector.lines, EXPECTED_ALERT_LINES)

    def test_chain_writes_one_line_per_layer(self) -> None:
        for count in range(len(DEFAULT_CHANNEL_ORDER) + 1):
            channels = DEFAULT_CHANNEL_ORDER[:count]
            with self.subTest(channels=channels):
                collector = LineCollector()
                build_notifier_chain(channels, write=collector).send("m")

                self.assertEqual(len(collector.lines), count + 1)
                self.assertTrue(collector.lines[0].startswith("Notificación estándar"))

    def test_empty_channels_returns_base_notifier(self) -> None:
        notifier = build_notifier_chain([])

        self.assertIsInstance(notifier, BaseNotifier)
        self.assertEqual(describe_chain(notifier), ["BASE"])

    def test_omitting_channel_omits_only_its_line(self) -> None:
        collector = LineCollector()
        channels = [key for key in DEFAULT_CHANNEL_ORDER if key != "facebook"]

        build_notifier_chain(channels, write=collector).send(SECURITY_ALERT_MESSAGE)

        expected = [line for line in EXPECTED_ALERT_LINES if "FACEBOOK" not in line]
        self.assertEqual(collector.lines, expected)

    def test_reordering_channels_reorders_only_channel_lines(self) -> None:
        collector = LineCollector()

        build_notifier_chain(["slack", "email", "sms"], write=collector).send("m")

        self.assertEqual(
            collector.lines,
            [
                "Notificación estándar: m",
                "Enviando notificación por SLACK: m",
                "Enviando notificación por CORREO: m",
                "Enviando notificación por SMS: m",
            ],
        )

    def test_repeated_send_produces_identical_output(self) -> None:
        collector = LineCollector()
        notifier = build_notifier_chain(write=collector)

        notifier.send(SECURITY_ALERT_MESSAGE)
        first = list(collector.lines)
        collector.clear()
        notifier.send(SECURITY_ALERT_MESSAGE)

        self.assertEqual(collector.lines, first)

    def test_default_writer_prints_to_console(self) -> None:
        with mock.patch("builtins.print") as print_mock:
            build_notifier_chain(["sms"]).send("m")

        printed = [call.args[0] for call in print_mock.call_args_list]
        self.assertEqual(
            printed,
            ["Notificación estándar: m", "Enviando notificación por SMS: m"],
        )


class DescribeChainTests(unittest.TestCase):
    def test_describe_chain_lists_layers_innermost_first(self) -> None:
        notifier = build_notifier_chain()

        self.assertEqual(
            describe_chain(notifier),
            ["BASE", "CORREO", "SMS", "FACEBOOK", "SLACK", "WHATSAPP"],
        )

    def test_describe_chain_does_not_send(self) -> None:
        collector = LineCollector()

        describe_chain(build_notifier_chain(write=collector))

        self.assertEqual(collector.lines, [])


class SecurityAlertTests(unittest.TestCase):
    def test_send_security_alert_returns_summary(self) -> None:
        collector = LineCollector()

        result = send_security_alert(write=collector)

        self.assertEqual(collector.lines, EXPECTED_ALERT_LINES)
        self.assertEqual(result["message"], "¡Alerta de seguridad!")
        self.assertEqual(result["lines_written"], 6)
        self.assertEqual(result["layers"][0], "BASE")
        self.assertEqual(result["layers"][-1], "WHATSAPP")

    def test_send_security_alert_prints_by_default(self) -> None:
        with mock.patch("builtins.print") as print_mock:
            result = send_security_alert()

        printed = [call.args[0] for call in print_mock.call_args_list]
        self.assertEqual(printed, EXPECTED_ALERT_LINES)
        self.assertEqual(result["lines_written"], len(EXPECTED_ALERT_LINES))


if __name__ == "__main__":
    unittest.main()
