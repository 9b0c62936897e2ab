"""
User accounts
"""

from sqlalchemy import CheckConstraint, Column, String
from sqlalchemy.orm import relationship

from learning_service.model.base import Base, BaseMixin
from learning_service.model.enums import UserRole, sql_in


class User(Base, BaseMixin):
    """
    Registered user. The role is set once at registration.
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(f"role IN ({sql_in(UserRole)})", name="ck_users_role"),
    )

    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False)

    courses = relationship("Course", back_populates="instructor")

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
