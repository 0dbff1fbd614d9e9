# app/endpoints/customer.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.session import get_db
from crud import customer as crud
from schemas.customer import CustomerResponse, CustomerPageResponse
from service.customer_query import build_customer_query

router = APIRouter(prefix="/api/customers", tags=["Customers"])

_SEARCH_DESC = "Search term for filtering customers (Id or Name)"
_SORT_BY_DESC = "Field to sort by (e.g., 'id', 'name', 'contact', 'address', 'city', 'country', 'phone')"
_SORT_ORDER_DESC = "Sort order ('asc' or 'des')"


@router.get("", response_model=list[CustomerResponse], summary="Get all customers")
def list_customers(
    search: Optional[str] = Query(None, description=_SEARCH_DESC),
    sort_by: Optional[str] = Query(None, alias="sortBy", description=_SORT_BY_DESC),
    sort_order: Optional[str] = Query(None, alias="sortOrder", description=_SORT_ORDER_DESC),
    db: Session = Depends(get_db),
):
    query = build_customer_query(search, sort_by, sort_order)
    return crud.list_customers(db, query)


@router.get("/page", response_model=CustomerPageResponse, summary="Get customers to page")
def list_customers_page(
    search: Optional[str] = Query(None, description=_SEARCH_DESC),
    sort_by: Optional[str] = Query(None, alias="sortBy", description=_SORT_BY_DESC),
    sort_order: Optional[str] = Query(None, alias="sortOrder", description=_SORT_ORDER_DESC),
    page: Optional[int] = Query(None, description="Page number"),
    limit: Optional[int] = Query(None, description="Number of items per page"),
    db: Session = Depends(get_db),
):
    query = build_customer_query(search, sort_by, sort_order, page=page, limit=limit, paginate=True)
    pages, rows = crud.list_customers_page(db, query)
    return CustomerPageResponse(
        total_pages=pages,
        current_page=query.page.page,
        page_size=query.page.limit,
        list_customers=[CustomerResponse.model_validate(r) for r in rows],
    )
