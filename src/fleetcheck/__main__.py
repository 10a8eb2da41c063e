from __future__ import annotations

from fleetcheck.ui.cli import run

run()
