from sqlalchemy import Column, DateTime, Integer, func
from sqlalchemy.orm import declarative_base, declared_attr

Base = declarative_base()


# --- Mixin ---
class TimestampMixin:
    """Adds created_date and updated_date columns."""

    created_date = Column(DateTime, default=func.now(), nullable=False)
    updated_date = Column(
        DateTime, default=func.now(), onupdate=func.now(), nullable=False
    )


# --- Base class for every model ---
class BaseMixin(TimestampMixin):
    """Integer primary key plus timestamps."""

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # User -> users
    @declared_attr
    def __tablename__(cls):
        return cls.__name__.lower() + "s"

    def __repr__(self):
        return f"<{self.__class__.__name__}(id={self.id})>"
