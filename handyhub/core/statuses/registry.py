"""Display labels and badge variants for order, booking, payment and payout statuses.

Each entity type owns an independent table. Lookups are total: a status the
tables do not know (e.g. one introduced by a newer backend) is shown as its raw
code with the neutral ``info`` variant instead of failing.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from handyhub.common.enums import (
    BadgeVariant,
    BookingStatus,
    EntityType,
    OrderStatus,
    PaymentStatus,
    PayoutStatus,
)
from handyhub.core.statuses.schemas import BreakdownEntry, StatusBreakdown, StatusDescriptor

DEFAULT_VARIANT = BadgeVariant.INFO

ORDER_STATUS_LABELS = {
    OrderStatus.DRAFT: "Borrador",
    OrderStatus.PENDING_PRO_CONFIRMATION: "Pendiente de confirmación",
    OrderStatus.ACCEPTED: "Aceptado",
    OrderStatus.CONFIRMED: "Confirmado",
    OrderStatus.IN_PROGRESS: "En progreso",
    OrderStatus.AWAITING_CLIENT_APPROVAL: "Esperando aprobación",
    OrderStatus.DISPUTED: "En disputa",
    OrderStatus.COMPLETED: "Completado",
    OrderStatus.PAID: "Pagado",
    OrderStatus.CANCELED: "Cancelado",
}

ORDER_STATUS_VARIANTS = {
    OrderStatus.DRAFT: BadgeVariant.INFO,
    OrderStatus.PENDING_PRO_CONFIRMATION: BadgeVariant.WARNING,
    OrderStatus.ACCEPTED: BadgeVariant.INFO,
    OrderStatus.CONFIRMED: BadgeVariant.INFO,
    OrderStatus.IN_PROGRESS: BadgeVariant.INFO,
    OrderStatus.AWAITING_CLIENT_APPROVAL: BadgeVariant.WARNING,
    OrderStatus.DISPUTED: BadgeVariant.DANGER,
    OrderStatus.COMPLETED: BadgeVariant.SUCCESS,
    OrderStatus.PAID: BadgeVariant.SUCCESS,
    OrderStatus.CANCELED: BadgeVariant.DANGER,
}

BOOKING_STATUS_LABELS = {
    BookingStatus.PENDING_PAYMENT: "Pago pendiente",
    BookingStatus.PENDING: "Pendiente",
    BookingStatus.ACCEPTED: "Aceptada",
    BookingStatus.ON_MY_WAY: "En camino",
    BookingStatus.ARRIVED: "Llegó",
    BookingStatus.COMPLETED: "Completada",
    BookingStatus.REJECTED: "Rechazada",
    BookingStatus.CANCELLED: "Cancelada",
}

BOOKING_STATUS_VARIANTS = {
    BookingStatus.PENDING_PAYMENT: BadgeVariant.WARNING,
    BookingStatus.PENDING: BadgeVariant.INFO,
    BookingStatus.ACCEPTED: BadgeVariant.INFO,
    BookingStatus.ON_MY_WAY: BadgeVariant.INFO,
    BookingStatus.ARRIVED: BadgeVariant.INFO,
    BookingStatus.COMPLETED: BadgeVariant.SUCCESS,
    BookingStatus.REJECTED: BadgeVariant.DANGER,
    BookingStatus.CANCELLED: BadgeVariant.DANGER,
}

PAYMENT_STATUS_LABELS = {
    PaymentStatus.CREATED: "Creado",
    PaymentStatus.REQUIRES_ACTION: "Requiere acción",
    PaymentStatus.AUTHORIZED: "Autorizado",
    PaymentStatus.CAPTURED: "Capturado",
    PaymentStatus.FAILED: "Fallido",
    PaymentStatus.CANCELLED: "Cancelado",
    PaymentStatus.REFUNDED: "Reembolsado",
}

PAYMENT_STATUS_VARIANTS = {
    PaymentStatus.CREATED: BadgeVariant.INFO,
    PaymentStatus.REQUIRES_ACTION: BadgeVariant.WARNING,
    PaymentStatus.AUTHORIZED: BadgeVariant.INFO,
    PaymentStatus.CAPTURED: BadgeVariant.SUCCESS,
    PaymentStatus.FAILED: BadgeVariant.DANGER,
    PaymentStatus.CANCELLED: BadgeVariant.DANGER,
    PaymentStatus.REFUNDED: BadgeVariant.WARNING,
}

PAYOUT_STATUS_LABELS = {
    PayoutStatus.CREATED: "Creado",
    PayoutStatus.SENT: "Enviado",
    PayoutStatus.SETTLED: "Liquidado",
    PayoutStatus.FAILED: "Fallido",
}

PAYOUT_STATUS_VARIANTS = {
    PayoutStatus.CREATED: BadgeVariant.WARNING,
    PayoutStatus.SENT: BadgeVariant.INFO,
    PayoutStatus.SETTLED: BadgeVariant.SUCCESS,
    PayoutStatus.FAILED: BadgeVariant.DANGER,
}


@dataclass(frozen=True)
class StatusTable:
    statuses: type[enum.Enum]
    labels: Mapping[str, str]
    variants: Mapping[str, BadgeVariant]
    # Order used by admin filters and dashboard summaries.
    display_order: tuple[str, ...]


STATUS_TABLES: Mapping[EntityType, StatusTable] = MappingProxyType({
    EntityType.ORDER: StatusTable(
        statuses=OrderStatus,
        labels=MappingProxyType(ORDER_STATUS_LABELS),
        variants=MappingProxyType(ORDER_STATUS_VARIANTS),
        display_order=tuple(OrderStatus),
    ),
    EntityType.BOOKING: StatusTable(
        statuses=BookingStatus,
        labels=MappingProxyType(BOOKING_STATUS_LABELS),
        variants=MappingProxyType(BOOKING_STATUS_VARIANTS),
        display_order=tuple(BookingStatus),
    ),
    EntityType.PAYMENT: StatusTable(
        statuses=PaymentStatus,
        labels=MappingProxyType(PAYMENT_STATUS_LABELS),
        variants=MappingProxyType(PAYMENT_STATUS_VARIANTS),
        display_order=(
            PaymentStatus.CAPTURED,
            PaymentStatus.AUTHORIZED,
            PaymentStatus.CREATED,
            PaymentStatus.REQUIRES_ACTION,
            PaymentStatus.FAILED,
            PaymentStatus.CANCELLED,
            PaymentStatus.REFUNDED,
        ),
    ),
    EntityType.PAYOUT: StatusTable(
        statuses=PayoutStatus,
        labels=MappingProxyType(PAYOUT_STATUS_LABELS),
        variants=MappingProxyType(PAYOUT_STATUS_VARIANTS),
        display_order=(
            PayoutStatus.SETTLED,
            PayoutStatus.SENT,
            PayoutStatus.CREATED,
            PayoutStatus.FAILED,
        ),
    ),
})


def _raw(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, enum.Enum):
        return str(value.value)
    return str(value)


def _table_for(entity_type: EntityType | str | None) -> StatusTable | None:
    if isinstance(entity_type, EntityType):
        return STATUS_TABLES[entity_type]
    try:
        return STATUS_TABLES[EntityType(_raw(entity_type).upper())]
    except ValueError:
        return None


def label_for(entity_type: EntityType | str, status: enum.Enum | str) -> str:
    raw = _raw(status)
    table = _table_for(entity_type)
    if table is None:
        return raw
    return table.labels.get(raw, raw)


def variant_for(entity_type: EntityType | str, status: enum.Enum | str) -> BadgeVariant:
    table = _table_for(entity_type)
    if table is None:
        return DEFAULT_VARIANT
    return table.variants.get(_raw(status), DEFAULT_VARIANT)


def is_known_status(entity_type: EntityType | str, status: enum.Enum | str) -> bool:
    table = _table_for(entity_type)
    return table is not None and _raw(status) in table.labels


def describe(entity_type: EntityType | str, status: enum.Enum | str) -> StatusDescriptor:
    return StatusDescriptor(
        entity_type=_raw(entity_type).upper(),
        status=_raw(status),
        label=label_for(entity_type, status),
        variant=variant_for(entity_type, status),
        known=is_known_status(entity_type, status),
    )


def list_statuses(entity_type: EntityType | str) -> list[StatusDescriptor]:
    table = _table_for(entity_type)
    if table is None:
        return []
    return [describe(entity_type, s) for s in table.display_order]


def status_breakdown(
    entity_type: EntityType | str, counts: Mapping[str, int]
) -> StatusBreakdown:
    """Summarise status counts the way the admin dashboard cards show them.

    Known statuses are always listed (zero-filled) in display order; statuses
    the table does not know are appended after them in the order given.
    """
    table = _table_for(entity_type)
    normalized: dict[str, int] = {}
    for key, value in counts.items():
        status = _raw(key)
        # Dashboards key their counts in lowercase ("pending_pro_confirmation").
        if table is not None and status.upper() in table.labels:
            status = status.upper()
        normalized[status] = normalized.get(status, 0) + max(int(value or 0), 0)
    total = sum(normalized.values())

    ordered = [_raw(s) for s in table.display_order] if table else []
    ordered += [s for s in normalized if s not in ordered]

    entries = [
        BreakdownEntry(
            status=s,
            label=label_for(entity_type, s),
            variant=variant_for(entity_type, s),
            count=normalized.get(s, 0),
            percentage=round(normalized.get(s, 0) * 100 / total, 1) if total else 0.0,
        )
        for s in ordered
    ]
    return StatusBreakdown(entity_type=_raw(entity_type).upper(), total=total, entries=entries)
