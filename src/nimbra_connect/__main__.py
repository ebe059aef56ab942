"""Entry point for ``python -m nimbra_connect``."""

from __future__ import annotations


def main() -> int:
    """Run the nimbra-connect CLI."""
    from nimbra_connect.cli import main as cli_main

    return cli_main()


if __name__ == "__main__":
    raise SystemExit(main())
