from datetime import date

import pytest

from biztime.errors import InvalidInput, NotFound, StoreError
from biztime.services.company_service import CompanyService
from biztime.services.invoice_service import InvoiceService
from conftest import PAID_ON


def test_list_returns_id_and_comp_code(db):
    assert InvoiceService(db).list() == [
        {"id": 1, "comp_code": "apple"},
        {"id": 2, "comp_code": "apple"},
        {"id": 3, "comp_code": "ibm"},
    ]


def test_get_nests_company(db):
    inv = InvoiceService(db).get(2)
    assert inv["id"] == 2
    assert inv["amt"] == 200
    assert inv["paid"] is True
    assert inv["paid_date"] == PAID_ON.isoformat()
    assert inv["company"] == {
        "code": "apple",
        "name": "Apple",
        "description": "Maker of OSX.",
    }
    assert "comp_code" not in inv


def test_get_missing_invoice(db):
    with pytest.raises(NotFound):
        InvoiceService(db).get(999)


def test_create_defaults_to_unpaid(db):
    inv = InvoiceService(db).create("ibm", 100)
    assert inv["id"] == 4
    assert inv["comp_code"] == "ibm"
    assert inv["amt"] == 100
    assert inv["paid"] is False
    assert inv["paid_date"] is None
    assert inv["add_date"] == date.today().isoformat()


@pytest.mark.parametrize("amt", [0, -5, "100", None, True, float("nan"), float("inf")])
def test_create_rejects_bad_amount(db, amt):
    with pytest.raises(InvalidInput):
        InvoiceService(db).create("ibm", amt)


def test_create_requires_comp_code(db):
    with pytest.raises(InvalidInput):
        InvoiceService(db).create("", 100)


def test_create_for_unknown_company_is_not_found(db):
    with pytest.raises(NotFound):
        InvoiceService(db).create("blargh", 100)


def test_mark_paid_then_repay_keeps_date(db):
    svc = InvoiceService(db)
    paid = svc.update(1, 100, True)
    assert paid["paid"] is True
    assert paid["paid_date"] == date.today().isoformat()

    again = svc.update(1, 200, True)
    assert again["amt"] == 200
    assert again["paid_date"] == paid["paid_date"]


def test_repaying_already_paid_invoice_keeps_old_date(db):
    inv = InvoiceService(db).update(2, 250, True)
    assert inv["paid_date"] == PAID_ON.isoformat()
    assert inv["amt"] == 250


def test_unpaying_clears_date(db):
    inv = InvoiceService(db).update(2, 200, False)
    assert inv["paid"] is False
    assert inv["paid_date"] is None


def test_paid_matches_paid_date_after_every_update(db):
    svc = InvoiceService(db)
    for paid in (True, True, False, False, True):
        svc.update(3, 300, paid)
        inv = svc.get(3)
        assert inv["paid"] == (inv["paid_date"] is not None)


def test_update_missing_invoice(db):
    with pytest.raises(NotFound):
        InvoiceService(db).update(999, 100, True)


@pytest.mark.parametrize("amt,paid", [(0, True), (100, "yes"), (100, None)])
def test_update_rejects_bad_input(db, amt, paid):
    with pytest.raises(InvalidInput):
        InvoiceService(db).update(1, amt, paid)


def test_update_times_out_while_invoice_is_locked(db):
    from filelock import FileLock

    from biztime.services.invoice_service import _lock_path

    with FileLock(_lock_path(1)):
        # a second handle on the same path can't acquire while this one holds it
        with pytest.raises(StoreError):
            InvoiceService(db).update(1, 100, True)


def test_delete_invoice(db):
    svc = InvoiceService(db)
    assert svc.delete(1) == {"status": "deleted"}
    with pytest.raises(NotFound):
        svc.get(1)
    assert CompanyService(db).get("apple")["invoices"] == [2]


def test_delete_missing_invoice(db):
    with pytest.raises(NotFound):
        InvoiceService(db).delete(999)


@pytest.mark.parametrize("amt", [0.001, 100.005, 10**10, 1e12])
def test_rejects_amounts_the_column_cannot_hold(db, amt):
    svc = InvoiceService(db)
    with pytest.raises(InvalidInput):
        svc.create("ibm", amt)
    with pytest.raises(InvalidInput):
        svc.update(1, amt, False)
    # nothing was written
    assert svc.get(1)["amt"] == 100
    assert len(svc.list()) == 3


def test_cent_amounts_are_stored_as_given(db):
    svc = InvoiceService(db)
    created = svc.create("ibm", 12.34)
    assert created["amt"] == 12.34
    assert svc.get(created["id"])["amt"] == 12.34
    assert svc.update(created["id"], 9999999999.99, False)["amt"] == 9999999999.99
    assert svc.get(created["id"])["amt"] == 9999999999.99


@pytest.mark.parametrize("invoice_id", [0, -1, 2**63, 10**20])
def test_out_of_range_ids_are_not_found(db, invoice_id):
    svc = InvoiceService(db)
    with pytest.raises(NotFound):
        svc.get(invoice_id)
    with pytest.raises(NotFound):
        svc.update(invoice_id, 100, True)
    with pytest.raises(NotFound):
        svc.delete(invoice_id)


def test_delete_removes_lock_file(db):
    import os

    from biztime.services.invoice_service import _lock_path

    svc = InvoiceService(db)
    svc.update(1, 100, True)
    assert os.path.exists(_lock_path(1))
    svc.delete(1)
    assert not os.path.exists(_lock_path(1))
