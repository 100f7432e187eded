from sqlalchemy import Column, String, Integer, DateTime, CheckConstraint
from database import Base


class User(Base):
    """
    A registered user.

    The email column is unique; the service checks it before writing and the
    constraint catches anything that races past that check.
    created_at is written once, updated_at on every mutation.
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    age = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __table_args__ = (
        CheckConstraint("name != ''"),
    )

    def __repr__(self):
        return f"<User id={self.id} email={self.email!r}>"
