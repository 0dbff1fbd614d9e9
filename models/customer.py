# models/customer.py
from sqlalchemy import Column, String
from database.base import Base


class Customer(Base):
    __tablename__ = "customers"

    customer_id = Column(String(5), primary_key=True)
    company_name = Column(String(40), nullable=False)
    contact_name = Column(String(30), nullable=True)
    address = Column(String(60), nullable=True)
    city = Column(String(15), nullable=True)
    country = Column(String(15), nullable=True)
    phone = Column(String(24), nullable=True)

    def __repr__(self) -> str:
        return f"<Customer {self.customer_id} {self.company_name!r}>"


__all__ = ["Customer"]
