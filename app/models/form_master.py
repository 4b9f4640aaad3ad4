from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from app.database import Base
from app.utils.time_utils import get_local_time

class FormMaster(Base):
    __tablename__ = "form_masters"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    password_hash = Column(String, nullable=False)
    phone = Column(String(20), nullable=True)

    created_at = Column(DateTime, default=get_local_time)
    updated_at = Column(DateTime, default=get_local_time, onupdate=get_local_time)

    # Relationship
    class_arms = relationship("ClassArm", back_populates="form_master", passive_deletes=True)
