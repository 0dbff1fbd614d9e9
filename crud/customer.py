# crud/customer.py
from __future__ import annotations

import logging
from typing import List, Tuple

from sqlalchemy import Select, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import StorageError
from models.customer import Customer
from service.customer_query import CustomerQuery, FALLBACK_SORT_FIELD, total_pages

log = logging.getLogger("customer")

STORAGE_FAILURE_MESSAGE = "customer storage is unavailable"


def _filtered(stmt: Select, query: CustomerQuery) -> Select:
    """customer_id 또는 company_name 부분 일치 (%, _ 는 문자 그대로)."""
    if query.search:
        stmt = stmt.where(
            or_(
                Customer.customer_id.contains(query.search, autoescape=True),
                Customer.company_name.contains(query.search, autoescape=True),
            )
        )
    return stmt


def build_statement(query: CustomerQuery) -> Select:
    stmt = _filtered(select(Customer), query)

    if query.sort:
        column = getattr(Customer, query.sort.field)
        stmt = stmt.order_by(column.desc() if query.sort.descending else column.asc())
        # 동순위 행이 페이지 사이에서 흔들리지 않도록 PK 보조 정렬
        if query.sort.field != FALLBACK_SORT_FIELD:
            stmt = stmt.order_by(Customer.customer_id.asc())

    if query.page:
        stmt = stmt.offset(query.page.offset).limit(query.page.limit)
    return stmt


def count_customers(db: Session, query: CustomerQuery) -> int:
    stmt = _filtered(select(func.count()).select_from(Customer), query)
    try:
        return int(db.execute(stmt).scalar_one())
    except SQLAlchemyError as exc:
        log.exception("customer count failed (search=%r)", query.search)
        raise StorageError(STORAGE_FAILURE_MESSAGE) from exc


def list_customers(db: Session, query: CustomerQuery) -> List[Customer]:
    try:
        return list(db.execute(build_statement(query)).scalars().all())
    except SQLAlchemyError as exc:
        log.exception("customer query failed (%s)", query)
        raise StorageError(STORAGE_FAILURE_MESSAGE) from exc


def list_customers_page(db: Session, query: CustomerQuery) -> Tuple[int, List[Customer]]:
    """(totalPages, 해당 페이지 행) 반환. query.page 가 반드시 있어야 함."""
    if query.page is None:
        raise ValueError("list_customers_page requires a paginated query")
    count = count_customers(db, query)
    rows = list_customers(db, query)
    return total_pages(count, query.page.limit), rows
