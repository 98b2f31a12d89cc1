import enum


class Role(str, enum.Enum):
    CLIENT = "CLIENT"
    PRO = "PRO"
    ADMIN = "ADMIN"


class EntityType(str, enum.Enum):
    ORDER = "ORDER"
    BOOKING = "BOOKING"
    PAYMENT = "PAYMENT"
    PAYOUT = "PAYOUT"


class OrderStatus(str, enum.Enum):
    DRAFT = "DRAFT"
    PENDING_PRO_CONFIRMATION = "PENDING_PRO_CONFIRMATION"
    ACCEPTED = "ACCEPTED"
    CONFIRMED = "CONFIRMED"
    IN_PROGRESS = "IN_PROGRESS"
    AWAITING_CLIENT_APPROVAL = "AWAITING_CLIENT_APPROVAL"
    DISPUTED = "DISPUTED"
    COMPLETED = "COMPLETED"
    PAID = "PAID"
    # Orders spell it with one "L"; bookings and payments use two.
    CANCELED = "CANCELED"


class BookingStatus(str, enum.Enum):
    PENDING_PAYMENT = "PENDING_PAYMENT"
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    ON_MY_WAY = "ON_MY_WAY"
    ARRIVED = "ARRIVED"
    COMPLETED = "COMPLETED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"


class PaymentStatus(str, enum.Enum):
    CREATED = "CREATED"
    REQUIRES_ACTION = "REQUIRES_ACTION"
    AUTHORIZED = "AUTHORIZED"
    CAPTURED = "CAPTURED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"
    REFUNDED = "REFUNDED"


class PayoutStatus(str, enum.Enum):
    CREATED = "CREATED"
    SENT = "SENT"
    SETTLED = "SETTLED"
    FAILED = "FAILED"


class BadgeVariant(str, enum.Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"


class GuardOutcome(str, enum.Enum):
    ALLOW = "ALLOW"
    REDIRECT = "REDIRECT"
    LOADING = "LOADING"
    BLOCKED = "BLOCKED"


class ErrorCategory(str, enum.Enum):
    INVALID_REQUEST = "INVALID_REQUEST"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL = "INTERNAL"
