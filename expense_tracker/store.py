import logging
import operator
from typing import Iterable, Optional, Protocol, runtime_checkable

from expense_tracker.models import Transaction

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when a model operation is called with an unusable argument."""


def _as_position(index) -> Optional[int]:
    """Return ``index`` as an int, or None for bools and non-integer values."""
    if isinstance(index, bool):
        return None
    try:
        return operator.index(index)
    except TypeError:
        return None


@runtime_checkable
class ModelListener(Protocol):
    """Anything with an ``update(model)`` method can observe a TransactionModel."""

    def update(self, model: "TransactionModel") -> None:
        ...


class TransactionModel:
    """
    In-memory store of transactions plus the indices an external filter
    matched against them. Every successful mutation notifies the registered
    listeners, in registration order, before returning.
    """

    def __init__(self) -> None:
        self._transactions: list[Transaction] = []
        self._matched_filter_indices: list[int] = []
        self._listeners: list[ModelListener] = []

    # ── writes ────────────────────────────────────────────────────────────────

    def add_transaction(self, txn: Optional[Transaction]) -> None:
        if txn is None:
            logger.debug("Rejected add_transaction(None)")
            raise InvalidArgumentError("Transaction cannot be None")
        self._transactions.append(txn)
        self._matched_filter_indices.clear()
        logger.debug("Added transaction; %d in log", len(self._transactions))
        self._state_changed()

    def remove_transaction(self, txn: Optional[Transaction]) -> None:
        # Indices are cleared and listeners notified even when nothing matched.
        try:
            self._transactions.remove(txn)
            logger.debug("Removed transaction; %d in log", len(self._transactions))
        except ValueError:
            logger.debug("remove_transaction: no matching transaction")
        self._matched_filter_indices.clear()
        self._state_changed()

    def set_matched_filter_indices(self, indices: Optional[Iterable[int]]) -> None:
        if indices is None:
            logger.debug("Rejected set_matched_filter_indices(None)")
            raise InvalidArgumentError("Matched filter indices cannot be None")

        try:
            candidates = list(indices)
        except TypeError as exc:
            logger.debug("Rejected non-iterable matched filter indices %r", indices)
            raise InvalidArgumentError(f"Matched filter indices must be iterable: {indices!r}") from exc

        size = len(self._transactions)
        new_indices = []
        for index in candidates:
            position = _as_position(index)
            if position is None or not 0 <= position < size:
                logger.debug("Rejected matched filter index %r (log size %d)", index, size)
                raise InvalidArgumentError(f"Invalid index: {index!r}")
            new_indices.append(position)

        self._matched_filter_indices = new_indices
        logger.debug("Matched filter indices set to %s", new_indices)
        self._state_changed()

    # ── reads ─────────────────────────────────────────────────────────────────

    def get_transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    def get_matched_filter_indices(self) -> tuple[int, ...]:
        return tuple(self._matched_filter_indices)

    # ── listeners ─────────────────────────────────────────────────────────────

    def register(self, listener: Optional[ModelListener]) -> bool:
        """Return True if ``listener`` was added, False if None or already present."""
        if listener is None or self.contains_listener(listener):
            logger.debug("Listener registration rejected: %r", listener)
            return False
        self._listeners.append(listener)
        logger.debug("Registered listener %r (%d total)", listener, len(self._listeners))
        return True

    def number_of_listeners(self) -> int:
        return len(self._listeners)

    def contains_listener(self, listener: Optional[ModelListener]) -> bool:
        return any(registered is listener for registered in self._listeners)

    def _state_changed(self) -> None:
        # Iterate a snapshot: listeners registered from inside update() are
        # first called on the next change, and reentrant mutations dispatch
        # their own round before this one resumes.
        listeners = tuple(self._listeners)
        logger.debug("Notifying %d listener(s)", len(listeners))
        for listener in listeners:
            listener.update(self)

    # ── dunder helpers ────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._transactions)

    def __repr__(self) -> str:
        return (
            f"TransactionModel(transactions={len(self._transactions)}, "
            f"matched_filter_indices={len(self._matched_filter_indices)}, "
            f"listeners={len(self._listeners)})"
        )
