"""SneakerHub database management CLI.

Creates and drops the database schema for each domain and loads sample data.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Create sample users and orders
"""

import argparse
import sys

DOMAIN_NAMES = ["identity", "ordering"]


def _domains(names=None):
    from identity.domain import identity
    from ordering.domain import ordering

    all_domains = {"identity": identity, "ordering": ordering}
    targets = {name: all_domains[name] for name in names} if names else all_domains
    for name, domain in targets.items():
        print(f"Initializing {name} domain...")
        domain.init()
    return targets


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    from shared.db import setup_db

    for name, domain in _domains(domains).items():
        print(f"Creating {name} database schema...")
        setup_db(domain)
        print(f"  {name} schema ready.")

    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    from shared.db import drop_db

    for name, domain in _domains(domains).items():
        print(f"Dropping {name} database schema...")
        drop_db(domain)
        print(f"  {name} schema dropped.")

    print("Done.")


def seed_databases():
    """Load the sample accounts and orders."""
    from shared.seed import SAMPLE_PASSWORD, SAMPLE_USERS, seed

    domains = _domains()
    seed(domains["identity"], domains["ordering"])

    print(f"Sample accounts (password: {SAMPLE_PASSWORD}):")
    for email in SAMPLE_USERS:
        print(f"  {email}")
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="SneakerHub database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser("setup-db", help="Create all database tables")
    setup_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to set up (default: all)",
    )

    drop_parser = subparsers.add_parser("drop-db", help="Drop all database tables")
    drop_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to drop (default: all)",
    )

    subparsers.add_parser("seed", help="Create sample users and orders")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    elif args.command == "seed":
        seed_databases()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
