from sqlalchemy import Column, BigInteger, Text

from common.models import Base


class Tab(Base):
    __tablename__ = "tabs"
    id = Column(Text, primary_key=True)
    title = Column(Text, nullable=False)
    content = Column(Text, default="")
    # not a foreign key, a tab may point at a parent that was never saved
    parent_id = Column(Text, nullable=True, index=True)
    created_at = Column(BigInteger, nullable=False)

    def as_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "parent_id": self.parent_id,
            "created_at": self.created_at,
        }

    def __repr__(self):
        return (
            f"<Tab(id='{self.id}', title='{self.title}', "
            f"parent_id={self.parent_id!r}, created_at={self.created_at})>"
        )
