"""
Deterministic sample-data generator.

Produces (with the default settings):
  - 25 transactions spread over Jan 2026
  - amounts between 1.00 and 500.00, ranged per category
  - categories drawn from every Category value
"""

import logging
import random
from collections import Counter
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from expense_tracker.config import config, configure_logging
from expense_tracker.models import Category, Transaction
from expense_tracker.store import TransactionModel

logger = logging.getLogger(__name__)

START = datetime(2026, 1, 1)
END   = datetime(2026, 1, 31, 23, 59, 59)

# amount ranges per category (realistic ticket sizes)
AMOUNT_RANGES = {
    Category.FOOD:          (1,   80),
    Category.TRAVEL:        (20,  500),
    Category.BILLS:         (30,  300),
    Category.ENTERTAINMENT: (5,   150),
    Category.OTHER:         (1,   200),
}


def _rand_dt(rng: random.Random, lo: datetime = START, hi: datetime = END) -> datetime:
    delta = hi - lo
    secs = rng.randint(0, int(delta.total_seconds()))
    return lo + timedelta(seconds=secs)


def make_transactions(count: int, rng: random.Random) -> list[Transaction]:
    categories = list(Category)
    txns = []
    for _ in range(count):
        category = rng.choice(categories)
        lo, hi   = AMOUNT_RANGES[category]
        amount   = Decimal(str(round(rng.uniform(lo, hi), 2))).quantize(Decimal("0.01"))
        txns.append(Transaction(amount=amount, category=category, timestamp=_rand_dt(rng)))
    # insertion order follows time, like a statement
    txns.sort(key=lambda t: t.timestamp)
    return txns


def seed(model: TransactionModel, count: Optional[int] = None, rng_seed: Optional[int] = None) -> None:
    settings = config()
    count = settings.seed_transaction_count if count is None else count
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    rng = random.Random(settings.seed if rng_seed is None else rng_seed)

    # add one at a time so listeners see every insertion
    for txn in make_transactions(count, rng):
        model.add_transaction(txn)
    logger.info("Seeded %d transactions", count)


if __name__ == "__main__":
    configure_logging()
    model = TransactionModel()
    seed(model)
    per_category = Counter(t.category.value for t in model.get_transactions())
    for category, n in sorted(per_category.items()):
        logger.info("%-13s %d", category, n)
