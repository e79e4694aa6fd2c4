"""Run script.

Why it exists:
- Allows `python -m porkbun_ddns CONFIG_FILE` without the console script,
  e.g. from cron with a specific interpreter.
"""

from __future__ import annotations

from porkbun_ddns.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
