from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text, func
from sqlalchemy.orm import relationship

from hackernews.database import Base


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    body = Column(Text, nullable=False)
    link_id = Column(Integer, ForeignKey("links.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    link = relationship("Link", back_populates="comments", lazy="raise")

    def __repr__(self):
        return f"<Comment(id={self.id}, link_id={self.link_id})>"
