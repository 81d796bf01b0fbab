import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.db.base import Base
from app.db.models.item import Item  # noqa: F401


class Headers:
    """Stand-in for a request: a dict of URL-decoded header values."""

    def __init__(self, **values):
        self.values = values

    def get_url_decoded_header(self, name):
        return self.values.get(name)


@pytest.fixture
def headers():
    return Headers


@pytest.fixture(scope="function")
def db_session():
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    Base.metadata.create_all(engine)

    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False, future=True)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
