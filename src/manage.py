"""Storefront cart database management CLI.

Creates and drops the shopping domain's tables when it is configured with a
SQL provider (see the ``[production]`` overlay in ``shopping/domain.toml``).

Usage:
    PROTEAN_ENV=production python src/manage.py setup-db
    PROTEAN_ENV=production python src/manage.py drop-db
"""

import argparse
import sys


def setup_database(domain):
    from shopping.utils.db import setup_db

    print(f"Creating {domain.name} database schema...")
    setup_db(domain)
    print(f"  {domain.name} schema ready.")


def drop_database(domain):
    from shopping.utils.db import drop_db

    print(f"Dropping {domain.name} database schema...")
    drop_db(domain)
    print(f"  {domain.name} schema dropped.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Storefront cart database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    from shopping.domain import shopping

    print(f"Initializing {shopping.name} domain...")
    shopping.init()

    if args.command == "setup-db":
        setup_database(shopping)
    elif args.command == "drop-db":
        drop_database(shopping)
    else:
        parser.print_help()
        sys.exit(1)

    print("Done.")


if __name__ == "__main__":
    main()
