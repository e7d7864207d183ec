"""Record store predicates and record kinds."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class RecordKind(StrEnum):
    """Record collections; values are table names."""

    ASSETS = "asset"
    ASSET_EVENTS = "asset_event"
    ASSET_ISSUES = "asset_issue"


COLUMNS: dict[RecordKind, tuple[str, ...]] = {
    RecordKind.ASSETS: (
        "id",
        "name",
        "category",
        "department",
        "purchase_price",
        "purchase_date",
        "available_status",
        "current_condition",
        "last_used_at",
        "created_at",
    ),
    RecordKind.ASSET_EVENTS: ("id", "asset_id", "event_type", "from_value", "to_value", "at"),
    RecordKind.ASSET_ISSUES: ("id", "asset_id", "issue_type", "reported_at", "resolved_at"),
}


class Op(StrEnum):
    """Predicate operators."""

    EQUAL = "equal"
    GREATER_THAN_EQUAL = "greaterThanEqual"
    LESS_THAN_EQUAL = "lessThanEqual"
    SEARCH = "search"
    ORDER_ASC = "orderAsc"
    ORDER_DESC = "orderDesc"
    LIMIT = "limit"
    OFFSET = "offset"


@dataclass(frozen=True)
class Predicate:
    """Single filter/ordering/paging instruction."""

    op: Op
    field: str | None = None
    value: Any = None


class Query:
    """Predicate builders."""

    @staticmethod
    def equal(field: str, value: Any) -> Predicate:
        """Equality; a list value matches any of its items."""
        return Predicate(Op.EQUAL, field, value)

    @staticmethod
    def greater_than_equal(field: str, value: Any) -> Predicate:
        return Predicate(Op.GREATER_THAN_EQUAL, field, value)

    @staticmethod
    def less_than_equal(field: str, value: Any) -> Predicate:
        return Predicate(Op.LESS_THAN_EQUAL, field, value)

    @staticmethod
    def search(field: str, text: str) -> Predicate:
        return Predicate(Op.SEARCH, field, text)

    @staticmethod
    def order_asc(field: str) -> Predicate:
        return Predicate(Op.ORDER_ASC, field)

    @staticmethod
    def order_desc(field: str) -> Predicate:
        return Predicate(Op.ORDER_DESC, field)

    @staticmethod
    def limit(n: int) -> Predicate:
        return Predicate(Op.LIMIT, value=n)

    @staticmethod
    def offset(n: int) -> Predicate:
        return Predicate(Op.OFFSET, value=n)


@dataclass
class SqlPlan:
    """Compiled predicates."""

    where: str
    params: list
    order_by: str
    limit: int | None
    offset: int | None


def compile_predicates(kind: RecordKind, predicates: list[Predicate]) -> SqlPlan:
    """Translate predicates to SQL fragments. Field names are checked against the kind's columns."""
    columns = COLUMNS[kind]
    clauses: list[str] = []
    params: list = []
    ordering: list[str] = []
    limit = offset = None

    for p in predicates:
        if p.op in (Op.LIMIT, Op.OFFSET):
            if not isinstance(p.value, int) or p.value < 0:
                raise ValueError(f"{p.op} expects a non-negative integer, got {p.value!r}")
            if p.op == Op.LIMIT:
                limit = p.value
            else:
                offset = p.value
            continue

        if p.field not in columns:
            raise ValueError(f"Unknown field '{p.field}' for {kind}")

        match p.op:
            case Op.EQUAL:
                if isinstance(p.value, (list, tuple, set)):
                    values = list(p.value)
                    if values:
                        clauses.append(f"{p.field} IN ({', '.join('?' for _ in values)})")
                        params.extend(values)
                    else:
                        clauses.append("FALSE")
                elif p.value is None:
                    clauses.append(f"{p.field} IS NULL")
                else:
                    clauses.append(f"{p.field} = ?")
                    params.append(p.value)
            case Op.GREATER_THAN_EQUAL:
                clauses.append(f"{p.field} >= ?")
                params.append(p.value)
            case Op.LESS_THAN_EQUAL:
                clauses.append(f"{p.field} <= ?")
                params.append(p.value)
            case Op.SEARCH:
                clauses.append(f"CAST({p.field} AS VARCHAR) ILIKE ?")
                params.append(f"%{p.value}%")
            case Op.ORDER_ASC:
                ordering.append(f"{p.field} ASC")
            case Op.ORDER_DESC:
                ordering.append(f"{p.field} DESC")

    return SqlPlan(
        where=" AND ".join(clauses) if clauses else "TRUE",
        params=params,
        order_by=", ".join(ordering),
        limit=limit,
        offset=offset,
    )
