from sqlalchemy import Column, DateTime, Integer, Text, func
from sqlalchemy.orm import relationship

from hackernews.database import Base


class Link(Base):
    __tablename__ = "links"

    id = Column(Integer, primary_key=True, autoincrement=True)
    description = Column(Text, nullable=False)
    url = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Loaded on demand by the Link.comments resolver, never joined eagerly
    comments = relationship("Comment", back_populates="link", lazy="raise")

    def __repr__(self):
        return f"<Link(id={self.id}, url='{self.url}')>"
