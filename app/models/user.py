from sqlalchemy import Column, Integer, String, DateTime
from app.database import Base
from app.utils.time_utils import get_local_time

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(String(20), default="admin")
    name = Column(String(100), nullable=False)
    email = Column(String(100), nullable=True)

    created_at = Column(DateTime, default=get_local_time)
    updated_at = Column(DateTime, default=get_local_time, onupdate=get_local_time)
