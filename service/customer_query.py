# service/customer_query.py
"""
고객 목록 조회 조건(검색어/정렬/페이지)을 하나의 값 객체로 정리한다.

엔드포인트는 쿼리스트링을 그대로 넘기고, 여기서 정렬 규칙과 페이지 기본값을
적용한 ``CustomerQuery`` 를 만든다. SQL 로의 변환은 ``crud.customer`` 에서
한 번만 수행한다.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional

import core.config as config
from core.exceptions import InvalidQueryParameter

# sortBy 값 → Customer 컬럼 속성명
SORT_FIELDS: Dict[str, str] = {
    "id": "customer_id",
    "name": "company_name",
    "contact": "contact_name",
    "address": "address",
    "city": "city",
    "country": "country",
    "phone": "phone",
}
FALLBACK_SORT_FIELD = "customer_id"
DESCENDING = "des"
# OFFSET/LIMIT 은 DB 에서 signed 64-bit 로 바인딩됨
MAX_ROW_BOUND = 2**63 - 1


@dataclass(frozen=True)
class SortSpec:
    field: str
    descending: bool = False


@dataclass(frozen=True)
class PageSpec:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class CustomerQuery:
    search: Optional[str] = None
    sort: Optional[SortSpec] = None
    page: Optional[PageSpec] = None


def resolve_sort(sort_by: Optional[str], sort_order: Optional[str]) -> Optional[SortSpec]:
    """sortBy/sortOrder 가 둘 다 있어야 정렬한다. 모르는 sortBy 는 customer_id 오름차순."""
    if not sort_by or not sort_order:
        return None
    field = SORT_FIELDS.get(sort_by)
    if field is None:
        return SortSpec(FALLBACK_SORT_FIELD, descending=False)
    return SortSpec(field, descending=sort_order == DESCENDING)


def resolve_page(page: Optional[int], limit: Optional[int]) -> PageSpec:
    page = config.DEFAULT_PAGE if page is None else page
    limit = config.DEFAULT_PAGE_SIZE if limit is None else limit
    if page < 1:
        raise InvalidQueryParameter(f"page must be a positive integer, got {page}")
    if limit < 1:
        raise InvalidQueryParameter(f"limit must be a positive integer, got {limit}")
    if limit > MAX_ROW_BOUND or (page - 1) * limit > MAX_ROW_BOUND:
        raise InvalidQueryParameter(f"page {page} with limit {limit} is out of range")
    return PageSpec(page=page, limit=limit)


def build_customer_query(
    search: Optional[str] = None,
    sort_by: Optional[str] = None,
    sort_order: Optional[str] = None,
    *,
    page: Optional[int] = None,
    limit: Optional[int] = None,
    paginate: bool = False,
) -> CustomerQuery:
    return CustomerQuery(
        search=search or None,
        sort=resolve_sort(sort_by, sort_order),
        page=resolve_page(page, limit) if paginate else None,
    )


def total_pages(count: int, limit: int) -> int:
    return math.ceil(count / limit)
