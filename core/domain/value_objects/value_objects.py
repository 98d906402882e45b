"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID, uuid4

from ..enums import UserRole


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary value with currency.

    CRITICAL: Always use Decimal, never float!
    """
    amount: Decimal
    currency: str = "BRL"

    def __post_init__(self):
        # Convert to Decimal if needed
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

        # Validate currency code (3 letters)
        if not isinstance(self.currency, str) or len(self.currency) != 3:
            raise ValueError(
                f"Currency must be 3-letter ISO code, got: {self.currency}"
            )

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def __add__(self, other: 'Money') -> 'Money':
        """Add two Money objects (must have same currency)."""
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot add different currencies: {self.currency} vs {other.currency}"
            )
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __mul__(self, quantity: int) -> 'Money':
        """Multiply by an integer quantity."""
        return Money(amount=self.amount * quantity, currency=self.currency)

    @classmethod
    def zero(cls, currency: str = "BRL") -> 'Money':
        return cls(amount=Decimal("0"), currency=currency)


@dataclass(frozen=True)
class ExecutionID:
    """Unique identifier for unit-of-work tracing."""

    value: UUID

    @classmethod
    def generate(cls) -> "ExecutionID":
        """Generate a new ExecutionID."""
        return cls(value=uuid4())

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)


@dataclass(frozen=True)
class Actor:
    """Identity of whoever issues a request (user id and role)."""

    user_id: str
    role: UserRole

    def __post_init__(self):
        if not self.user_id:
            raise ValueError("Actor user_id must not be empty")
        if not isinstance(self.role, UserRole):
            object.__setattr__(self, 'role', UserRole(self.role))

    @property
    def is_owner(self) -> bool:
        return self.role is UserRole.OWNER

    @property
    def is_client(self) -> bool:
        return self.role is UserRole.CLIENT
