"""CLI parser construction for gemini-client.

Wires argument shapes only; handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse

from ..config.defaults import CLI_PROGRAM_NAME


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI parser.

    No I/O or network calls occur here. Without ``--execute`` the CLI only
    prints the credential-free request plan.
    """
    p = argparse.ArgumentParser(
        prog=CLI_PROGRAM_NAME,
        description="Send a prompt to the Gemini generateContent API (safe by default: dry-run)",
    )
    p.add_argument("--prompt", "-p", default=None, help="prompt text (single user turn)")
    p.add_argument("--model", default=None, help="model id (default from config)")
    p.add_argument("--base-url", dest="base_url", default=None, help="API base URL (default from config)")
    p.add_argument("--execute", action="store_true", help="perform the call instead of printing the plan")
    p.add_argument("--json", action="store_true", help="print the full response as JSON")
    p.add_argument("--log-level", dest="log_level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    return p


__all__ = ["build_parser"]
