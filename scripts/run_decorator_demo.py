#!/usr/bin/env python3
"""Send one security alert through every notification channel.

The chain is built Base -> Email -> SMS -> Facebook -> Slack -> WhatsApp,
so WhatsApp is the outermost layer and writes last.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from layered_notifications.channels import (  # noqa: E402
    send_security_alert,
    write_line_to_console,
)

DECORATOR_ADVANTAGES = (
    "1. Flexibilidad: Puedes combinar decoradores en cualquier orden",
    "2. Extensibilidad: Agregar nuevos canales sin modificar código existente",
    "3. Reutilización: Cada decorador es independiente y reutilizable",
    "4. Principio de Responsabilidad Única: Cada decorador tiene una sola responsabilidad",
    "5. Principio Abierto/Cerrado: Abierto para extensión, cerrado para modificación",
)


def main() -> int:
    parse_args()

    print("=== DEMOSTRACIÓN DEL PATRÓN DECORATOR ===")
    print("")
    print("Enviando notificación a través de todos los canales:")
    print("Orden de ejecución: Base → Email → SMS → Facebook → Slack → WhatsApp")
    print("")

    result = send_security_alert(write=write_line_to_console)

    print("")
    print("=== FIN DE LA DEMOSTRACIÓN ===")
    print("")
    print("VENTAJAS DEL PATRÓN DECORATOR:")
    for line in DECORATOR_ADVANTAGES:
        print(line)
    print("")
    print("[SUMMARY]")
    print(f"message={result['message']}")
    print(f"layers={' -> '.join(result['layers'])}")
    print(f"lines_written={result['lines_written']}")
    return 0


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Send one security alert through every layered notification channel."
    )
    return parser.parse_args()


if __name__ == "__main__":
    sys.exit(main())
