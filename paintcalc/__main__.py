"""
Module entrypoint for the paintcalc CLI.

This file exists so that `python -m paintcalc ...` works consistently in all
environments, including when the console-script wrapper is not installed.
"""

from __future__ import annotations

from paintcalc.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
