from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pawnshop_sdk import ApiSession, ConfigError, load_config

from pawnshop_app.app.bootstrap import BackOfficeBootstrap
from pawnshop_app.console import BackOfficeConsole
from pawnshop_app.invoices import InvoicePrinter, load_shop_profile
from pawnshop_app.invoices.shop import default_invoice_dir


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pawnshop back-office console")
    parser.add_argument("--env-file", default=None, help="Optional .env file to load before reading settings")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    parser.add_argument("--invoice-dir", default=None, help="Directory for printable invoice files")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    try:
        config = load_config(args.env_file)
    except ConfigError as exc:
        print(f"Configuration error: {exc}")
        return 2

    invoice_dir = Path(args.invoice_dir).expanduser() if args.invoice_dir else default_invoice_dir()
    bootstrap = BackOfficeBootstrap(config=config, session=ApiSession(config))
    console = BackOfficeConsole(
        bootstrap,
        printer=InvoicePrinter(output_dir=invoice_dir),
        shop=load_shop_profile(),
    )
    try:
        return console.run()
    except (KeyboardInterrupt, EOFError):
        print()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
