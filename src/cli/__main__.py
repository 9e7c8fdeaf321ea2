"""`python -m cli` (desde `src/` o con el paquete instalado)."""

from __future__ import annotations

import sys

from cli.main import run

# Lesson names are usually Cyrillic; Windows consoles default to cp1252.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

run()
