import os
import sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import requests
import concurrent.futures
import argparse
import json

BASE = os.environ.get("BIZTIME_BASE", "http://127.0.0.1:8000")

def pay_task(i, invoice_id, amt, paid):
    payload = {"amt": amt, "paid": paid}
    try:
        r = requests.put(f"{BASE}/invoices/{invoice_id}", json=payload, timeout=10)
        return (i, r.status_code, r.text)
    except Exception as e:
        return (i, "ERR", str(e))

def run_pay_concurrent(workers, invoice_id, amt, toggle):
    """
    Fire `workers` updates at one invoice at once. With --toggle every other
    request marks it unpaid, otherwise all of them mark it paid and every
    successful response must report the same paid_date.
    """
    print(f"Running pay test: workers={workers}, invoice={invoice_id}, toggle={toggle}")
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as ex:
        futures = [
            ex.submit(pay_task, i, invoice_id, amt, (i % 2 == 0) if toggle else True)
            for i in range(workers)
        ]
        results = [f.result() for f in futures]
    for r in results:
        print(r)
    ok = [json.loads(r[2])["invoice"] for r in results if r[1] == 200]
    bad = [inv["id"] for inv in ok if inv["paid"] != (inv["paid_date"] is not None)]
    print("Distinct paid_date values:", {inv["paid_date"] for inv in ok})
    if bad:
        print("Inconsistent responses for invoices:", bad)

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Concurrent invoice payment updates.")
    parser.add_argument("--invoice", type=int, default=1)
    parser.add_argument("--amt", type=float, default=100)
    parser.add_argument("--workers", type=int, default=8)
    parser.add_argument("--toggle", action="store_true")
    args = parser.parse_args()

    run_pay_concurrent(args.workers, args.invoice, args.amt, args.toggle)
