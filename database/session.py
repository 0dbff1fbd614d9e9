from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
import core.config as config
import database.base as base


def _engine_kwargs(url: str) -> dict:
    # sqlite 는 요청 스레드풀에서 같은 커넥션을 공유할 수 있어야 함
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


engine = create_engine(base.DATABASE_URL, echo=config.DB_ECHO, **_engine_kwargs(base.DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
