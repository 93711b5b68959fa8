import sqlite3
import sys

DB = sys.argv[1] if len(sys.argv) > 1 else "biztime.db"
CODE = sys.argv[2] if len(sys.argv) > 2 else None

conn = sqlite3.connect(DB)
cur = conn.cursor()

print("=== Companies ===")
if CODE:
    cur.execute("SELECT code, name, description FROM companies WHERE code=?", (CODE,))
else:
    cur.execute("SELECT code, name, description FROM companies ORDER BY code")
for r in cur.fetchall():
    print({"code": r[0], "name": r[1], "description": r[2]})

print("\n=== Invoices ===")
if CODE:
    cur.execute(
        "SELECT id, comp_code, amt, paid, add_date, paid_date FROM invoices WHERE comp_code=? ORDER BY id",
        (CODE,),
    )
else:
    cur.execute("SELECT id, comp_code, amt, paid, add_date, paid_date FROM invoices ORDER BY id")
rows = cur.fetchall()
for r in rows:
    print(r)

# paid must be set exactly when paid_date is
broken = [r[0] for r in rows if bool(r[3]) != (r[5] is not None)]
if broken:
    print("\nInvoices with inconsistent paid/paid_date:", broken)

conn.close()
