"""User model."""

import uuid

from sqlalchemy import Boolean, Column, DateTime, String

from app.database import Base, utcnow


def new_id() -> str:
    """Generate an opaque record identifier."""
    return uuid.uuid4().hex


class User(Base):
    """Application user.

    Equality is by identifier only: two users are equal when both have been
    saved and carry the same ``id``.
    """

    __tablename__ = "jhi_user"

    id = Column(String(32), primary_key=True, default=new_id)
    login = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(254), unique=True, nullable=False, index=True)
    password_hash = Column(String(60), nullable=False)
    first_name = Column(String(50), nullable=True)
    last_name = Column(String(50), nullable=True)
    image_url = Column(String(256), nullable=True)
    activated = Column(Boolean, nullable=False, default=False)
    lang_key = Column(String(10), nullable=False, default="en")
    activation_key = Column(String(20), nullable=True, index=True)
    reset_key = Column(String(20), nullable=True, index=True)
    reset_date = Column(DateTime, nullable=True)
    created_by = Column(String(50), nullable=False, default="system")
    created_date = Column(DateTime, nullable=False, default=utcnow, index=True)
    last_modified_by = Column(String(50), nullable=True)
    last_modified_date = Column(DateTime, nullable=True, default=utcnow, onupdate=utcnow)

    @property
    def has_pending_reset(self) -> bool:
        return self.reset_key is not None and self.reset_date is not None

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, User):
            return NotImplemented
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"<User id={self.id} login={self.login} activated={self.activated}>"
