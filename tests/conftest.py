"""Pytest configuration and fixtures."""

import os

# 앱 import 전에 기본 엔진을 sqlite 로 돌려둔다 (postgres 드라이버 불필요)
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.base import Base
from database.session import get_db
from main import app
from models.customer import Customer

SAMPLE_CUSTOMERS = [
    ("ALFKI", "Alfreds Futterkiste", "Maria Anders", "Obere Str. 57", "Berlin", "Germany", "030-0074321"),
    ("ANATR", "Ana Trujillo Emparedados y helados", "Ana Trujillo", "Avda. de la Constitucion 2222", "Mexico D.F.", "Mexico", "(5) 555-4729"),
    ("ANTON", "Antonio Moreno Taqueria", "Antonio Moreno", "Mataderos 2312", "Mexico D.F.", "Mexico", "(5) 555-3932"),
    ("AROUT", "Around the Horn", "Thomas Hardy", "120 Hanover Sq.", "London", "UK", "(171) 555-7788"),
    ("BERGS", "Berglunds snabbkop", "Christina Berglund", "Berguvsvagen 8", "Lulea", "Sweden", "0921-12 34 65"),
    ("BLAUS", "Blauer See Delikatessen", "Hanna Moos", "Forsterstr. 57", "Mannheim", "Germany", "0621-08460"),
    ("BONAP", "Bon app'", "Laurence Lebihan", "12 rue des Bouchers", "Marseille", "France", "91.24.45.40"),
    ("CHOPS", "Chop-suey Chinese", "Yang Wang", "Hauptstr. 29", "Bern", "Switzerland", "0452-076545"),
    ("FRANK", "Frankenversand", "Peter Franken", "Berliner Platz 43", "Munchen", "Germany", "089-0877310"),
    ("WARTH", "Wartian Herkku", "Pirkko Koskitalo", "Torikatu 38", "Oulu", "Finland", "981-443655"),
]


def make_engine(create_tables: bool = True):
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    if create_tables:
        Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def engine():
    engine = make_engine()
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine):
    """Create a temporary in-memory database session for testing."""
    SessionLocal = sessionmaker(bind=engine, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def add_customers(session):
    def _add(rows):
        for row in rows:
            if isinstance(row, tuple):
                keys = ("customer_id", "company_name", "contact_name", "address", "city", "country", "phone")
                row = dict(zip(keys, row))
            session.add(Customer(**row))
        session.commit()
    return _add


@pytest.fixture
def sample_customers(add_customers):
    add_customers(SAMPLE_CUSTOMERS)
    return SAMPLE_CUSTOMERS


def _client_for(engine):
    SessionTesting = sessionmaker(bind=engine, autocommit=False, autoflush=False)

    def override_get_db():
        db = SessionTesting()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def client(engine):
    with _client_for(engine) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client():
    """테이블이 없는 DB 에 붙은 클라이언트: 모든 조회가 OperationalError."""
    engine = make_engine(create_tables=False)
    with _client_for(engine) as c:
        yield c
    app.dependency_overrides.clear()
    engine.dispose()
