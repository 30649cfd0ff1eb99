from typing import TYPE_CHECKING, Callable, TypeVar
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from app.errors import InternalError, StoreError
from app.logger import app_logger
from config import DATABASE_URL

if TYPE_CHECKING:
    from app.crud import VIPTransaction

T = TypeVar("T")

# Create an engine to connect to the database
engine = create_engine(DATABASE_URL)  # type: ignore

# Session maker to manage database sessions
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


class Database:
    """Runs one unit of work per call inside a single transaction."""

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self.session_factory = session_factory

    def exec(self, f: Callable[["VIPTransaction"], T]) -> T:
        # Imported here, crud depends on the models declared against Base.
        from app.crud import SQLTransaction

        db = self.session_factory()
        try:
            result = f(SQLTransaction(db))
            db.commit()
            return result
        except (SQLAlchemyError, StoreError) as e:
            db.rollback()
            app_logger.error(f"transaction aborted: {e}")
            raise InternalError(str(e)) from e
        finally:
            db.close()
