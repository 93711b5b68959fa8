#!/usr/bin/env python3
"""
Seed companies and invoices, either from a JSON file or from the built-in
sample set used in local development.

The JSON file may be a list of companies or an object with a "companies" key:

    [{"name": "Apple", "description": "Maker of OSX.",
      "invoices": [{"amt": 100, "paid": false}, {"amt": 200, "paid": true}]}]

Usage:
    python scripts/seed_data.py
    python scripts/seed_data.py --file companies.json --reset
"""
import argparse
import json
import logging
import os
import sys

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from biztime.config import settings
from biztime.db import SessionLocal, init_db
from biztime.errors import Conflict
from biztime.logging_config import configure_logging
from biztime.services.company_service import CompanyService
from biztime.services.invoice_service import InvoiceService

log = logging.getLogger("biztime.seed")

SAMPLE_COMPANIES = [
    {
        "name": "Apple",
        "description": "Maker of OSX.",
        "invoices": [
            {"amt": 100, "paid": False},
            {"amt": 200, "paid": False},
            {"amt": 300, "paid": True},
        ],
    },
    {
        "name": "IBM",
        "description": "Big blue.",
        "invoices": [{"amt": 400, "paid": False}],
    },
]


def load_companies(path: str) -> list:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("companies", [])
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of companies")
    return data


def seed(companies: list) -> dict:
    """
    Create every company and its invoices. Companies that already exist are
    skipped along with their invoices, so the script can be re-run.
    """
    db = SessionLocal()
    counts = {"companies": 0, "invoices": 0, "skipped": 0}
    try:
        companies_svc = CompanyService(db)
        invoices_svc = InvoiceService(db)
        for entry in companies:
            try:
                company = companies_svc.create(entry.get("name"), entry.get("description"))
            except Conflict as e:
                log.info("skipping: %s", e)
                counts["skipped"] += 1
                continue
            counts["companies"] += 1
            for inv in entry.get("invoices", []):
                created = invoices_svc.create(company["code"], inv["amt"])
                if inv.get("paid"):
                    invoices_svc.update(created["id"], inv["amt"], True)
                counts["invoices"] += 1
    finally:
        db.close()
    return counts


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed BizTime companies and invoices.")
    parser.add_argument("--file", "-f", default=None, help="JSON file of companies (defaults to the built-in sample set)")
    parser.add_argument("--reset", action="store_true", help="drop and recreate tables first")
    args = parser.parse_args()

    configure_logging(settings.LOG_LEVEL)
    if args.file and not os.path.exists(args.file):
        print("File not found:", args.file)
        sys.exit(1)

    init_db(reset=args.reset)
    source = load_companies(args.file) if args.file else SAMPLE_COMPANIES
    print("Seeded:", seed(source))
