"""Line version rating model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.user import User, new_id


class LineVersionRating(Base):
    """Score and comment left on a line version, attributed to a user."""

    __tablename__ = "line_version_rating"

    id = Column(String(32), primary_key=True, default=new_id)
    rating = Column(Integer, nullable=True)
    comment = Column(Text, nullable=True)
    owner_id = Column(String(32), ForeignKey("jhi_user.id", ondelete="SET NULL"), nullable=True, index=True)

    owner = relationship(User, lazy="joined")

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, LineVersionRating):
            return NotImplemented
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"<LineVersionRating id={self.id} rating={self.rating} comment={self.comment!r}>"
