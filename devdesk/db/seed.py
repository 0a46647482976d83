#!/usr/bin/env python3
"""
Load demo tickets, knowledge-base articles and assets.

Usage:
  python -m devdesk.db.seed                       # wipe the three tables, then insert
  python -m devdesk.db.seed --append              # insert without wiping
  python -m devdesk.db.seed --database-url sqlite:///./demo.db

Exit codes:
  0 = seeded
  1 = storage error
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, Sequence

from sqlalchemy import create_engine, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ..crud._common import utc_timestamp
from ..models.article import Article
from ..models.asset import Asset
from ..models.ticket import Ticket
from .session import init_db

SEED_TICKETS = (
    {
        "title": "Cannot connect to office Wi-Fi",
        "description": "Laptop drops connection every few minutes on the office network. Works fine on hotspot.",
        "category": "Network",
        "status": "Open",
    },
    {
        "title": "Outlook login loop",
        "description": "Outlook keeps requesting password repeatedly. Credential Manager cleared but issue persists.",
        "category": "Software",
        "status": "In Progress",
    },
    {
        "title": "New starter account setup",
        "description": "Create Windows + email account for a new employee starting Monday. Needs VPN access + Teams.",
        "category": "Access",
        "status": "Open",
    },
    {
        "title": "VPN error 809 when working remotely",
        "description": "User cannot connect to VPN from home. Error code 809. Suspect router or IPsec ports blocked.",
        "category": "Network",
        "status": "In Progress",
    },
    {
        "title": "Laptop overheating and fan noise",
        "description": "Device runs hot during normal use; fan at full speed. Check dust/build-up and BIOS updates.",
        "category": "Hardware",
        "status": "Closed",
    },
    {
        "title": "Printer not showing in list",
        "description": "User can't see the shared printer. Needs re-add of print server and correct permissions.",
        "category": "Access",
        "status": "Closed",
    },
)

SEED_ARTICLES = (
    {
        "title": "Fix Wi-Fi disconnecting on Windows 11",
        "content": "Disable power saving on the wireless adapter, update the driver from the manufacturer, then restart.",
        "tags": "wifi, windows, network",
    },
    {
        "title": "Reset Outlook credential cache",
        "content": "Remove stored credentials in Credential Manager, sign out of Office apps, restart, then sign in again.",
        "tags": "outlook, login, office365",
    },
    {
        "title": "VPN error 809 resolution",
        "content": (
            "Confirm IPsec services are running and UDP ports 500/4500 are open. "
            "Try a different network to isolate router/firewall issues."
        ),
        "tags": "vpn, ipsec, remote",
    },
    {
        "title": "Basic laptop performance checklist",
        "content": (
            "Check disk space, disable heavy startup apps, run updates, and verify antivirus scans. "
            "Consider SSD health check for older devices."
        ),
        "tags": "performance, laptop, troubleshooting",
    },
)

SEED_ASSETS = (
    {
        "name": "Dell Latitude 5420",
        "asset_tag": "IT-LAP-0142",
        "serial_number": "DL5420-88421",
        "assigned_to": "Sarah Ahmed",
        "notes": "Finance team laptop. Warranty until 2027.",
    },
    {
        "name": "MacBook Pro 14",
        "asset_tag": "IT-MAC-0021",
        "serial_number": "MBP14-99231",
        "assigned_to": "Dev Team Pool",
        "notes": "Shared dev machine for testing Safari + iOS builds.",
    },
    {
        "name": "HP ProDesk 600",
        "asset_tag": "IT-DT-0055",
        "serial_number": "HP600-22194",
        "assigned_to": "Reception",
        "notes": "Front desk workstation. Dual monitor setup.",
    },
    {
        "name": "iPhone 13",
        "asset_tag": "IT-MOB-0031",
        "serial_number": "IP13-77129",
        "assigned_to": "Sales Manager",
        "notes": "Company mobile device. Enrolled in MDM.",
    },
)


def seed(db: Session, reset: bool = True) -> dict[str, int]:
    """Insert the demo rows in one transaction and return how many of each were added."""
    if reset:
        for model in (Ticket, Article, Asset):
            db.execute(delete(model))

    # Rows go straight to the models: seeded tickets carry non-default statuses.
    created_at = utc_timestamp()
    db.add_all(Ticket(**row, created_at=created_at) for row in SEED_TICKETS)
    db.add_all(Article(**row, created_at=created_at) for row in SEED_ARTICLES)
    db.add_all(Asset(**row, created_at=created_at) for row in SEED_ASSETS)
    db.commit()
    return {
        "tickets": len(SEED_TICKETS),
        "kb_articles": len(SEED_ARTICLES),
        "assets": len(SEED_ASSETS),
    }


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Load DevDesk demo data.")
    p.add_argument("--database-url", default=None,
                   help="SQLAlchemy URL to seed (default: DATABASE_URL from settings).")
    p.add_argument("--append", action="store_true",
                   help="Keep existing rows instead of clearing the tables first.")
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    if args.database_url:
        connect_args = {"check_same_thread": False} if args.database_url.startswith("sqlite") else {}
        bind = create_engine(args.database_url, connect_args=connect_args)
    else:
        from .session import engine as bind

    SessionFactory = sessionmaker(bind=bind, autocommit=False, autoflush=False)
    try:
        init_db(bind)
        with SessionFactory() as db:
            counts = seed(db, reset=not args.append)
    except SQLAlchemyError as e:
        print(f"ERROR: seed failed: {e}", file=sys.stderr)
        return 1
    print(json.dumps({"status": "seeded", "url": bind.url.render_as_string(hide_password=True), "counts": counts}, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
