# schemas/customer.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class CustomerResponse(CamelModel):
    customer_id: str
    company_name: str
    contact_name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None


class CustomerPageResponse(CamelModel):
    total_pages: int
    current_page: int
    page_size: int
    list_customers: List[CustomerResponse]
