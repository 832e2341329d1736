"""Error Hierarchy — typed, categorized exceptions for all Team Economy failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are returned verbatim to callers; infrastructure errors are 500-level
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with SoccerManagerError base: FastAPI global handler catches all
    - Intermediate classes (ResourceNotFoundError, ForbiddenError, ...) let callers match
      on the kind of failure without enumerating every concrete error
    - CacheError exists so adapters can report failures, but services always swallow it
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    FORBIDDEN = "forbidden"
    INVALID_STATE = "invalid_state"
    CONFLICT = "conflict"
    DATABASE = "database"
    CACHE = "cache"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    team_id: str | None = None
    player_id: str | None = None
    transfer_id: str | None = None
    debug_info: dict[str, Any] | None = None


class SoccerManagerError(Exception):
    """Base exception for all Soccer Manager errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Not Found (404) ────────────────────────────────────────────

class ResourceNotFoundError(SoccerManagerError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            f"{resource_type.upper()}_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class TeamNotFoundError(ResourceNotFoundError):
    def __init__(self, key: object, context: ErrorContext | None = None):
        super().__init__("Team", str(key), context)


class PlayerNotFoundError(ResourceNotFoundError):
    def __init__(self, key: object, context: ErrorContext | None = None):
        super().__init__("Player", str(key), context)


class TransferNotFoundError(ResourceNotFoundError):
    def __init__(self, key: object, context: ErrorContext | None = None):
        super().__init__("Transfer", str(key), context)


class UserNotFoundError(ResourceNotFoundError):
    def __init__(self, key: object, context: ErrorContext | None = None):
        super().__init__("User", str(key), context)


# ─── Conflict (409) ─────────────────────────────────────────────

class ConflictError(SoccerManagerError):
    """State conflict with an existing resource."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


class PlayerAlreadyListedError(ConflictError):
    """Player already has an active transfer."""
    def __init__(self, player_id: object, context: ErrorContext | None = None):
        super().__init__(
            f"Player '{player_id}' is already listed for transfer",
            "PLAYER_ALREADY_LISTED", context,
        )
        self.player_id = player_id


class TeamAlreadyExistsError(ConflictError):
    """User already owns a team."""
    def __init__(self, user_id: object, context: ErrorContext | None = None):
        super().__init__(
            f"User '{user_id}' already has a team",
            "TEAM_ALREADY_EXISTS", context,
        )


# ─── Forbidden (403) ────────────────────────────────────────────

class ForbiddenError(SoccerManagerError):
    """Acting user may not touch this resource."""
    def __init__(self, message: str, code: str = "FORBIDDEN", context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.FORBIDDEN,
            ErrorSeverity.WARNING, context, 403,
        )


class PlayerNotOwnedError(ForbiddenError):
    """Player does not belong to the acting user's team."""
    def __init__(self, player_id: object, context: ErrorContext | None = None):
        super().__init__(
            f"Player '{player_id}' does not belong to your team",
            "PLAYER_NOT_OWNED", context,
        )


class TransferNotOwnedError(ForbiddenError):
    """Transfer was listed by another team."""
    def __init__(self, transfer_id: object, context: ErrorContext | None = None):
        super().__init__(
            f"Transfer '{transfer_id}' was not listed by your team",
            "TRANSFER_NOT_OWNED", context,
        )


# ─── Invalid State / Business Rules (400) ───────────────────────

class TransferNotActiveError(SoccerManagerError):
    """Transfer is completed or cancelled (or was completed concurrently)."""
    def __init__(self, transfer_id: object, context: ErrorContext | None = None):
        super().__init__(
            f"Transfer '{transfer_id}' is not active",
            "TRANSFER_NOT_ACTIVE", ErrorCategory.INVALID_STATE,
            ErrorSeverity.WARNING, context, 400,
        )
        self.transfer_id = transfer_id


class BusinessRuleViolationError(SoccerManagerError):
    """A transfer-market rule rejected the operation."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class CannotBuyOwnPlayerError(BusinessRuleViolationError):
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Cannot buy a player listed by your own team",
            "CANNOT_BUY_OWN_PLAYER", context,
        )


class InsufficientFundsError(BusinessRuleViolationError):
    def __init__(self, budget: int, asking_price: int, context: ErrorContext | None = None):
        super().__init__(
            f"Insufficient funds: budget {budget} is below asking price {asking_price}",
            "INSUFFICIENT_FUNDS", context,
        )
        self.budget = budget
        self.asking_price = asking_price


class InvalidAskingPriceError(SoccerManagerError):
    """Asking price must be a positive whole amount."""
    def __init__(self, asking_price: int, context: ErrorContext | None = None):
        super().__init__(
            f"Asking price must be at least 1, got {asking_price}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = "asking_price"


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(SoccerManagerError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class CacheError(SoccerManagerError):
    """Redis-backed store operation failed. Team cache failures never reach API clients."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Cache {operation} failed: {message}",
            "CACHE_ERROR", ErrorCategory.CACHE,
            ErrorSeverity.WARNING, context, 500,
        )
        self.operation = operation
