"""
db/session.py – Database: Engine + Session helper.

Một instance Database được tạo trong deps.py và truyền vào các service.
Dùng scoped session (contextmanager) để auto-commit/rollback/close sau mỗi operation.
"""
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .models import Base


class Database:
    """Giữ Engine và sessionmaker cho một DATABASE_URL."""

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = url
        is_sqlite = url.startswith("sqlite")
        self._engine: Engine = create_engine(
            url,
            connect_args={"check_same_thread": False, "timeout": 15} if is_sqlite else {},
            echo=echo,
        )
        if is_sqlite and ":memory:" not in url:
            # WAL cho phép đọc song song trong lúc có transaction ghi
            @event.listens_for(self._engine, "connect")
            def set_wal(conn, _):
                conn.execute("PRAGMA journal_mode=WAL")
                conn.execute("PRAGMA synchronous=NORMAL")

        self._factory = sessionmaker(bind=self._engine, expire_on_commit=False)

    @property
    def engine(self) -> Engine:
        return self._engine

    def create_all(self) -> None:
        Base.metadata.create_all(self._engine)

    def dispose(self) -> None:
        self._engine.dispose()

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Context manager trả về Session, tự commit/rollback/close."""
        session: Session = self._factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
