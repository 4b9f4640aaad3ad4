from sqlalchemy import Column, Integer, String, DateTime
from app.database import Base
from app.utils.time_utils import get_local_time

class AssessmentConfig(Base):
    """Maximum obtainable points per score component for one class arm."""
    __tablename__ = "assessment_config"

    id = Column(Integer, primary_key=True, index=True)
    class_name = Column(String(10), unique=True, nullable=False)
    ca1_max = Column(Integer, default=10)
    ca2_max = Column(Integer, default=10)
    ca3_max = Column(Integer, default=10)
    exam_max = Column(Integer, default=70)

    created_at = Column(DateTime, default=get_local_time)
    updated_at = Column(DateTime, default=get_local_time, onupdate=get_local_time)
