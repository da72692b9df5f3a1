#!/usr/bin/env python3
"""
Transaction Analytics CLI — demonstration entry point for the store queries.

USAGE:
  python -m txn_analytics.cli summary                             # All queries on the bundled dataset
  python -m txn_analytics.cli summary --file ./transactions.json
  python -m txn_analytics.cli summary --sender "Arthur Shelby" --client "Aunt Polly"

  python -m txn_analytics.cli export                              # All results as JSON to stdout
  python -m txn_analytics.cli export --output results.json
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from txn_analytics.analytics.common import format_amount, sanitize_for_json
from txn_analytics.config import DATA_FILE, DEMO_CLIENT
from txn_analytics.data.store import TransactionStore


def collect_results(store: TransactionStore, sender: str, client: str) -> dict:
    """Run every query once, keyed by a stable result name."""
    return {
        "total_amount": store.total_amount(),
        "total_amount_sent_by": {"sender": sender, "amount": store.total_amount_sent_by(sender)},
        "max_amount": store.max_amount(),
        "unique_client_count": store.unique_client_count(),
        "has_open_compliance_issue": {"client": client, "value": store.has_open_compliance_issue(client)},
        "transactions_by_beneficiary": store.transactions_by_beneficiary(),
        "unsolved_issue_ids": store.unsolved_issue_ids(),
        "solved_issue_messages": store.solved_issue_messages(),
        "top3_by_amount": store.top3_by_amount(),
        "top_sender": store.top_sender(),
    }


def cmd_summary(args):
    """Print each query result on its own line."""
    print("\n" + "=" * 70)
    print("  TRANSACTION ANALYTICS — SUMMARY")
    print("=" * 70)

    store = TransactionStore.load(args.file)
    r = collect_results(store, args.sender, args.client)

    by_beneficiary = {
        name: [t.mtn for t in txns] for name, txns in r["transactions_by_beneficiary"].items()
    }
    top3 = [f"{t.mtn}: {format_amount(t.amount)}" for t in r["top3_by_amount"]]

    print()
    print(f"  Total amount:                   {format_amount(r['total_amount'])}")
    print(f"  Total amount sent by {args.sender}: {format_amount(r['total_amount_sent_by']['amount'])}")
    print(f"  Max amount:                     {format_amount(r['max_amount'])}")
    print(f"  Unique clients:                 {r['unique_client_count']}")
    print(f"  {args.client} has open compliance issues: {r['has_open_compliance_issue']['value']}")
    print(f"  Transactions by beneficiary (mtn): {by_beneficiary}")
    print(f"  Unsolved issue ids:             {sorted(r['unsolved_issue_ids'])}")
    print(f"  Solved issue messages:          {r['solved_issue_messages']}")
    print(f"  Top 3 by amount:                {top3}")
    print(f"  Top sender:                     {r['top_sender'] or 'No sender found'}")
    print("=" * 70 + "\n")


def cmd_export(args):
    """Write all query results as JSON."""
    to_stdout = args.output == "-"
    store = TransactionStore.load(args.file, verbose=not to_stdout)
    clean = sanitize_for_json(collect_results(store, args.sender, args.client))
    text = json.dumps(clean, indent=2)

    if to_stdout:
        sys.stdout.write(text + "\n")
        return
    out = Path(args.output)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text + "\n")
    print(f"  Results saved to: {out}")


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--file", type=Path, default=DATA_FILE, help=f"Transactions JSON (default: {DATA_FILE.name})")
    parser.add_argument("--sender", default=DEMO_CLIENT, help=f"Sender for the per-sender total (default: {DEMO_CLIENT})")
    parser.add_argument("--client", default=DEMO_CLIENT, help=f"Client for the compliance check (default: {DEMO_CLIENT})")


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Transaction Analytics — aggregate queries over a transaction dataset",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # summary subcommand
    summary_parser = subparsers.add_parser("summary", help="Print every query result")
    _add_common_args(summary_parser)
    summary_parser.set_defaults(func=cmd_summary)

    # export subcommand
    export_parser = subparsers.add_parser("export", help="Export every query result as JSON")
    _add_common_args(export_parser)
    export_parser.add_argument("--output", default="-", help="Output file (default: stdout)")
    export_parser.set_defaults(func=cmd_export)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return

    args.func(args)


if __name__ == "__main__":
    main()
