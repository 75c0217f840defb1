"""Tests for BorrowLedger."""

import threading

import pytest

from doccatalog import DocumentStatus, NotBorrowedError, build_user

pytestmark = pytest.mark.unit


class TestBorrowAndReturn:
    def test_scenario_borrow_then_return(self, ledger, janek, java_guide):
        ledger.borrow(janek, java_guide)
        assert ledger.borrowed(janek) == [java_guide]

        ledger.return_item(janek, java_guide)
        assert ledger.borrowed(janek) == []

        with pytest.raises(NotBorrowedError):
            ledger.return_item(janek, java_guide)

    def test_return_never_borrowed(self, ledger, janek, java_guide):
        with pytest.raises(NotBorrowedError, match="Janek"):
            ledger.return_item(janek, java_guide)

    def test_borrow_order_is_kept(self, ledger, janek, java_guide, clean_code):
        ledger.borrow(janek, clean_code)
        ledger.borrow(janek, java_guide)

        assert ledger.borrowed(janek) == [clean_code, java_guide]

    def test_double_borrow_is_recorded_twice(self, ledger, janek, java_guide):
        ledger.borrow(janek, java_guide)
        ledger.borrow(janek, java_guide)

        assert ledger.borrowed(janek) == [java_guide, java_guide]

        ledger.return_item(janek, java_guide)
        assert ledger.borrowed(janek) == [java_guide]

    def test_return_removes_first_occurrence_only(self, ledger, janek, java_guide, clean_code):
        for doc in (java_guide, clean_code, java_guide):
            ledger.borrow(janek, doc)

        ledger.return_item(janek, java_guide)

        assert ledger.borrowed(janek) == [clean_code, java_guide]

    def test_users_are_independent(self, ledger, janek, java_guide):
        ewa = build_user("Ewa", kind="staff")
        ledger.borrow(janek, java_guide)

        assert ledger.borrowed(ewa) == []
        with pytest.raises(NotBorrowedError):
            ledger.return_item(ewa, java_guide)

    def test_same_name_users_are_distinct(self, ledger, java_guide):
        first = build_user("Janek")
        second = build_user("Janek")
        ledger.borrow(first, java_guide)

        assert first.id != second.id
        assert ledger.borrowed(second) == []
        with pytest.raises(NotBorrowedError):
            ledger.return_item(second, java_guide)
        assert ledger.borrowed(first) == [java_guide]

    def test_borrowed_is_a_copy(self, ledger, janek, java_guide):
        ledger.borrow(janek, java_guide)

        ledger.borrowed(janek).clear()

        assert ledger.borrowed(janek) == [java_guide]

    def test_clear(self, ledger, janek, java_guide, clean_code):
        ledger.borrow(janek, java_guide)
        ledger.borrow(janek, clean_code)

        ledger.clear(janek)

        assert ledger.borrowed(janek) == []


class TestCatalogOwnership:
    def test_return_does_not_touch_catalog(self, catalog, ledger, janek, java_guide):
        catalog.add(java_guide)
        ledger.borrow(janek, java_guide)

        ledger.return_item(janek, java_guide)

        assert java_guide in catalog
        assert len(catalog) == 1


class TestStatus:
    def test_available_until_borrowed(self, ledger, janek, java_guide):
        assert ledger.status(java_guide) is DocumentStatus.AVAILABLE
        assert ledger.is_available(java_guide)

        ledger.borrow(janek, java_guide)

        assert ledger.status(java_guide) is DocumentStatus.BORROWED
        assert not ledger.is_available(java_guide)

        ledger.return_item(janek, java_guide)
        assert ledger.is_available(java_guide)

    def test_borrow_ignores_availability(self, ledger, janek, java_guide):
        ewa = build_user("Ewa")
        ledger.borrow(janek, java_guide)

        ledger.borrow(ewa, java_guide)

        assert ledger.borrowed(ewa) == [java_guide]


def test_concurrent_borrows_all_recorded(ledger, janek, java_guide):
    threads = [
        threading.Thread(target=lambda: [ledger.borrow(janek, java_guide) for _ in range(100)])
        for _ in range(4)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(ledger.borrowed(janek)) == 400
