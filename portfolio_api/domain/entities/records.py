"""Mock-store records for chat, payments, IoT devices and workouts."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class ChatMessage:
    """A message posted to the demo chat."""

    id: int
    user: str
    message: str
    timestamp: str  # ISO format

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)


@dataclass
class Payment:
    """A logged crypto payment."""

    id: str
    customer: str
    amount_eth: str
    fiat: str
    network: str
    status: str
    status_type: str
    time: str
    tx_hash: str
    method: str
    memo: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary using the camelCase wire names."""
        return {
            "id": self.id,
            "customer": self.customer,
            "amountEth": self.amount_eth,
            "fiat": self.fiat,
            "network": self.network,
            "status": self.status,
            "statusType": self.status_type,
            "time": self.time,
            "txHash": self.tx_hash,
            "method": self.method,
            "memo": self.memo,
        }


@dataclass
class IotDevice:
    """A mock IoT device."""

    id: str
    status: str
    firmware: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Workout:
    """A mock fitness workout."""

    id: int
    type: str
    duration_minutes: int

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.type, "durationMinutes": self.duration_minutes}
