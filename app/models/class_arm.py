from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from app.database import Base
from app.utils.time_utils import get_local_time

class ClassArm(Base):
    __tablename__ = "class_arms"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(10), unique=True, index=True, nullable=False) # JSS1A, SS3E
    form_master_id = Column(Integer, ForeignKey("form_masters.id", ondelete="SET NULL"), nullable=True)
    password_hash = Column(String, nullable=False)
    student_names = Column(JSON, default=list) # Roster, one name per slot

    created_at = Column(DateTime, default=get_local_time)
    updated_at = Column(DateTime, default=get_local_time, onupdate=get_local_time)

    # Relationship
    form_master = relationship("FormMaster", back_populates="class_arms")
