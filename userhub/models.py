"""
Database models.
"""
from sqlalchemy import Column, Integer, String

from userhub.database import Base


class User(Base):
    """
    A user row. ``username`` carries a width hint only; nothing enforces it
    and duplicates are allowed.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, nullable=False)
    username = Column(String(255), nullable=False)

    def to_dict(self) -> dict:
        return {"id": self.id, "username": self.username}

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r}>"
