import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, MetaData, Uuid, create_engine, event
from sqlalchemy.orm import Session, declarative_base, sessionmaker, with_loader_criteria
from sqlalchemy.pool import StaticPool

from content_service.config import get_settings

DATABASE_URL = get_settings().DATABASE_URL

if not DATABASE_URL:
    raise RuntimeError(
        "DATABASE_URL is not set. Provide a valid Postgres URL (postgres:// or postgresql://) or a sqlite URL."
    )

# Normalize driver to psycopg (SQLAlchemy 2.x + psycopg3) regardless of incoming scheme
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql+psycopg://", 1)
elif DATABASE_URL.startswith("postgresql://") and "+" not in DATABASE_URL.split("://", 1)[0]:
    DATABASE_URL = DATABASE_URL.replace("postgresql://", "postgresql+psycopg://", 1)

_engine_kwargs = {"pool_pre_ping": True, "future": True}
if DATABASE_URL.startswith("sqlite"):
    _engine_kwargs["connect_args"] = {"check_same_thread": False}
    # In-memory databases live inside a single connection
    if ":memory:" in DATABASE_URL or DATABASE_URL in ("sqlite://", "sqlite+pysqlite://"):
        _engine_kwargs["poolclass"] = StaticPool

engine = create_engine(DATABASE_URL, **_engine_kwargs)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)
# Explicit snake_case constraint names so migrations and metadata agree
NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}
Base = declarative_base(metadata=MetaData(naming_convention=NAMING_CONVENTION))


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EntityMixin:
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)


class SoftDeleteMixin:
    """Rows are hidden from every ORM read once ``is_deleted`` is set.

    Owned child collections named in ``__soft_delete_cascade__`` are
    soft-deleted along with the parent.
    """

    __soft_delete_cascade__ = ()

    is_deleted = Column(Boolean, default=False, nullable=False, index=True)
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    def soft_delete(self, when: datetime = None) -> None:
        when = when or utcnow()
        self.is_deleted = True
        self.deleted_at = when
        self.updated_at = when
        for attr in self.__soft_delete_cascade__:
            for child in list(getattr(self, attr) or []):
                child.soft_delete(when)


class BaseEntity(EntityMixin, SoftDeleteMixin):
    pass


class OrderedMixin:
    display_order = Column(Integer, default=0, nullable=False)


@event.listens_for(Session, "do_orm_execute")
def _hide_soft_deleted(execute_state):
    # Opt out only through .execution_options(include_deleted=True)
    if (
        execute_state.is_select
        and not execute_state.is_column_load
        and not execute_state.execution_options.get("include_deleted", False)
    ):
        execute_state.statement = execute_state.statement.options(
            with_loader_criteria(
                SoftDeleteMixin,
                lambda cls: cls.is_deleted.is_(False),
                include_aliases=True,
            )
        )
