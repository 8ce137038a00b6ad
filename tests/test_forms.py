"""Tests for ledger/forms.py"""

from decimal import Decimal

from ledger.forms import EntryForm
from ledger.models import Category


class TestEntryForm:
    def test_successful_submit_resets_fields(self, store):
        form = EntryForm(store, Category.INCOME, description=" Salary ", amount="1000")

        entry = form.submit()

        assert entry is not None
        assert entry.description == "Salary"
        assert entry.amount == Decimal("1000")
        assert (form.description, form.amount) == ("", "")

    def test_rejected_submit_keeps_fields(self, store):
        form = EntryForm(store, Category.EXPENSE, description="Rent", amount="-500")

        assert form.submit() is None
        assert (form.description, form.amount) == ("Rent", "-500")
        assert store.expense_entries == ()

    def test_enter_key_submits(self, store):
        form = EntryForm(store, Category.EXPENSE, description="Rent", amount="500")

        entry = form.handle_key("Return")

        assert entry is not None
        assert store.expense_entries == (entry,)

    def test_other_keys_do_nothing(self, store):
        form = EntryForm(store, Category.EXPENSE, description="Rent", amount="500")

        assert form.handle_key("a") is None
        assert form.handle_key("Tab") is None
        assert store.expense_entries == ()
        assert form.description == "Rent"
