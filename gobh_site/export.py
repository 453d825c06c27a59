"""
Export utilities for stored leads and status checks.
"""
import argparse
import os
from typing import Optional

import pandas as pd

from .config import config
from .database import DocumentStore, strip_internal
from .models import CONTACT_COLLECTION, STATUS_COLLECTION
from .utils import init_logger

CONTACT_COLUMNS = ["id", "name", "email", "phone", "address", "agreeToTerms", "submittedAt", "status"]
STATUS_COLUMNS = ["id", "client_name", "timestamp"]


def contact_submissions_frame(store: DocumentStore, since: Optional[str] = None) -> pd.DataFrame:
    """Leads newest first, optionally only those submitted at or after ``since``."""
    rows = [strip_internal(doc) for doc in store.find(CONTACT_COLLECTION, sort="submittedAt", descending=True)]
    if since:
        rows = [row for row in rows if str(row.get("submittedAt", "")) >= since]
    if not rows:
        return pd.DataFrame(columns=CONTACT_COLUMNS)
    return pd.DataFrame(rows)


def status_checks_frame(store: DocumentStore) -> pd.DataFrame:
    rows = [strip_internal(doc) for doc in store.find(STATUS_COLLECTION)]
    if not rows:
        return pd.DataFrame(columns=STATUS_COLUMNS)
    return pd.DataFrame(rows)


def save_frame(df: pd.DataFrame, out_path: str, logger=None):
    """Save a frame to CSV or Excel file."""
    if out_path.lower().endswith(".xlsx"):
        df.to_excel(out_path, index=False)
    else:
        df.to_csv(out_path, index=False)

    if logger:
        logger.info(f">>> Saved {len(df)} rows to {out_path}")


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Export GOBH Investments leads or status checks to CSV/XLSX")
    ap.add_argument("--db", type=str, default=config.DB_PATH, help="Path to SQLite document store")
    ap.add_argument("--out", type=str, default="gobh_leads.csv", help="CSV/XLSX file to write")
    ap.add_argument("--since", type=str, default="",
                    help="Only export leads submitted at or after this ISO timestamp")
    ap.add_argument("--status", action="store_true", help="Export status checks instead of leads")
    lvl_choices = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    ap.add_argument("--log-level", choices=lvl_choices, default=os.getenv("LOG_CONSOLE", "INFO"),
                    help="Console log level (default from env LOG_CONSOLE or INFO).")
    ap.add_argument("--log-file-path", default=config.LOG_FILE,
                    help="Log file path (default from env LOG_FILE).")
    ap.add_argument("--no-file-log", action="store_true",
                    help="Disable logging to file (console only).")
    return ap.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logger = init_logger(
        name="gobh_site.export",
        console_level=args.log_level,
        log_file=None if args.no_file_log else (args.log_file_path or None)
    )

    if not os.path.exists(args.db):
        logger.error(f"Database file not found: {args.db}")
        return 1

    with DocumentStore(args.db) as store:
        if args.status:
            df = status_checks_frame(store)
        else:
            df = contact_submissions_frame(store, since=args.since or None)
        save_frame(df, args.out, logger=logger)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
