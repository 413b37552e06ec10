from decimal import Decimal
from datetime import datetime

import pytest
from pydantic import ValidationError

from expense_tracker.models import Category, Transaction


NOON = datetime(2026, 1, 1, 12, 0)


class TestTransaction:
    def test_valid_transaction(self):
        t = Transaction(amount=Decimal("12.50"), category=Category.FOOD, timestamp=NOON)
        assert t.amount == Decimal("12.50")
        assert t.category == Category.FOOD

    def test_category_string_is_normalised(self):
        t = Transaction(amount=Decimal("5"), category="  Travel ", timestamp=NOON)
        assert t.category == Category.TRAVEL

    def test_timestamp_defaults_to_now(self):
        before = datetime.now()
        t = Transaction(amount=Decimal("1"), category=Category.OTHER)
        assert before <= t.timestamp <= datetime.now()

    @pytest.mark.parametrize("amount", ["0", "-5", "1.005"])
    def test_invalid_amount_rejected(self, amount):
        with pytest.raises(ValidationError):
            Transaction(amount=Decimal(amount), category=Category.FOOD, timestamp=NOON)

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            Transaction(amount=Decimal("5"), category="groceries", timestamp=NOON)

    def test_equal_values_are_equal_and_hash_alike(self):
        a = Transaction(amount=Decimal("5.00"), category=Category.BILLS, timestamp=NOON)
        b = Transaction(amount=Decimal("5.00"), category=Category.BILLS, timestamp=NOON)
        assert a == b
        assert hash(a) == hash(b)

    def test_different_timestamps_are_distinct(self):
        a = Transaction(amount=Decimal("5.00"), category=Category.BILLS, timestamp=NOON)
        b = Transaction(amount=Decimal("5.00"), category=Category.BILLS,
                        timestamp=datetime(2026, 1, 2, 12, 0))
        assert a != b

    def test_frozen(self):
        t = Transaction(amount=Decimal("5"), category=Category.FOOD, timestamp=NOON)
        with pytest.raises(ValidationError):
            t.category = Category.BILLS  # type: ignore[misc]
