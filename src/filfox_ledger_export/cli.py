import argparse
import logging
import sys

from . import __version__
from .config import load_settings
from .errors import FilfoxExportError
from .filfox import FilfoxClient
from .ledger import default_output_name, export_ledger_csv, reconcile_transfers, write_ledger_csv
from .logging_setup import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filfox-ledger-export",
        description="Export Filecoin wallet transfers from Filfox as a Ledger Live CSV.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("wallet", help="Filecoin wallet address (f1..., f3..., 0x...)")

    dest = parser.add_mutually_exclusive_group()
    dest.add_argument(
        "-o",
        "--output",
        default=None,
        help="CSV file to write. Default: first 9 characters of the wallet + .csv",
    )
    dest.add_argument("--stdout", action="store_true", help="Write the CSV to standard output")

    parser.add_argument("--endpoint", default=None, help="Override FILFOX_API_ENDPOINT")
    parser.add_argument("--list", action="store_true", help="Print reconciled transfers before exporting")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL (DEBUG shows API calls)")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings()
    setup_logging(args.log_level or settings.log_level)

    logger = logging.getLogger(__name__)

    wallet = args.wallet.strip()
    if not wallet:
        parser.error("wallet must not be empty")

    try:
        logger.info("Retrieving transfers for wallet %s", wallet)
        client = FilfoxClient(
            base_url=args.endpoint or settings.api_endpoint,
            page_size=settings.page_size,
            timeout=settings.http_timeout,
        )
        try:
            records = client.transfers(wallet)
        finally:
            client.close()

        logger.info("Received %d transfer records, reconciling...", len(records))
        transfers = reconcile_transfers(records)
        logger.info("Reconciled into %d transfers", len(transfers))

        if args.list:
            for t in transfers:
                print(t, file=sys.stderr if args.stdout else sys.stdout)

        if args.stdout:
            write_ledger_csv(sys.stdout, transfers, account_name=settings.ledger_account_name)
        else:
            output = args.output or default_output_name(wallet)
            export_ledger_csv(output, transfers, account_name=settings.ledger_account_name)
            logger.info("Transfers written to %s", output)

    except FilfoxExportError as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
