"""In-memory store backing the chat, payments, IoT and fitness demos.

The store is owned by the application: created on startup, reachable only
through its methods, and cleared on shutdown. Nothing is persisted.
"""

import logging
import math
import threading
from datetime import UTC, datetime

from portfolio_api.domain.constants import INVOICE_ID_BASE
from portfolio_api.domain.entities.records import ChatMessage, IotDevice, Payment, Workout
from portfolio_api.domain.exceptions import DataValidationError

logger = logging.getLogger(__name__)


def _seed_payments() -> list[Payment]:
    return [
        Payment(
            id="INV-2041",
            customer="Prime Crypto Store",
            amount_eth="0.42",
            fiat="$1,305.00",
            network="Sepolia",
            status="Settled",
            status_type="success",
            time="12 min ago",
            tx_hash="0x7d…a9f3",
            method="ETH",
            memo="Initial sample payment",
        ),
        Payment(
            id="INV-2038",
            customer="DeFi Analytics Pro",
            amount_eth="0.13",
            fiat="$395.20",
            network="Polygon",
            status="Pending",
            status_type="pending",
            time="3 min ago",
            tx_hash="0xa1…b74c",
            method="USDC",
            memo="Subscription upgrade",
        ),
    ]


def _seed_devices() -> list[IotDevice]:
    return [
        IotDevice(id="device-1", status="online", firmware="1.0.0"),
        IotDevice(id="device-2", status="offline", firmware="1.2.3"),
    ]


def _seed_workouts() -> list[Workout]:
    return [
        Workout(id=1, type="Strength", duration_minutes=45),
        Workout(id=2, type="Cardio", duration_minutes=30),
    ]


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


def _format_amount(amount: float) -> str:
    """Render an amount without losing digits ("1234567", "1.23456789")."""
    amount = float(amount)
    if amount.is_integer() and abs(amount) < 1e21:
        return str(int(amount))
    return repr(amount)


class MockStore:
    """Thread-safe in-memory collections for the demo endpoints."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._messages: list[ChatMessage] = []
        self._payments: list[Payment] = []
        self._devices: list[IotDevice] = []
        self._workouts: list[Workout] = []
        self.reset()

    def reset(self) -> None:
        """Drop all mutations and restore the seeded fixtures."""
        with self._lock:
            self._messages = []
            self._payments = _seed_payments()
            self._devices = _seed_devices()
            self._workouts = _seed_workouts()

    def clear(self) -> None:
        """Empty every collection (used at shutdown)."""
        with self._lock:
            self._messages.clear()
            self._payments.clear()
            self._devices.clear()
            self._workouts.clear()

    # ------------------------------------------------------------------
    # Chat
    # ------------------------------------------------------------------

    def list_messages(self) -> list[ChatMessage]:
        with self._lock:
            return list(self._messages)

    def add_message(self, user: str, message: str) -> ChatMessage:
        """Append a chat message with the next sequential id.

        Raises:
            DataValidationError: if user or message is empty
        """
        if not user or not message:
            raise DataValidationError("user and message are required", field="user/message")

        with self._lock:
            entry = ChatMessage(
                id=len(self._messages) + 1,
                user=user,
                message=message,
                timestamp=_now_iso(),
            )
            self._messages.append(entry)
        logger.debug(f"Chat message {entry.id} from {user}")
        return entry

    # ------------------------------------------------------------------
    # Payments
    # ------------------------------------------------------------------

    def list_payments(self) -> list[Payment]:
        with self._lock:
            return list(self._payments)

    def log_payment(
        self,
        amount_eth: float,
        customer: str = "Demo Customer",
        fiat: str | None = None,
        network: str = "Unknown",
        method: str = "ETH",
        memo: str = "",
        tx_hash: str | None = None,
    ) -> Payment:
        """Record a new payment at the top of the list.

        Raises:
            DataValidationError: if amount_eth is not > 0
        """
        if not math.isfinite(amount_eth) or amount_eth <= 0:
            raise DataValidationError("amountEth must be > 0", field="amountEth", value=amount_eth)

        with self._lock:
            payment = Payment(
                id=f"INV-{INVOICE_ID_BASE + len(self._payments) + 1}",
                customer=customer,
                amount_eth=_format_amount(amount_eth),
                fiat=fiat or "",
                network=network,
                status="Logged",
                status_type="pending",
                time=_now_iso(),
                tx_hash=tx_hash or "0xlogged-via-api",
                method=method,
                memo=memo,
            )
            self._payments.insert(0, payment)
        logger.info(f"Logged payment {payment.id} for {payment.amount_eth} {method}")
        return payment

    # ------------------------------------------------------------------
    # Read-only fixtures
    # ------------------------------------------------------------------

    def list_devices(self) -> list[IotDevice]:
        with self._lock:
            return list(self._devices)

    def list_workouts(self) -> list[Workout]:
        with self._lock:
            return list(self._workouts)
