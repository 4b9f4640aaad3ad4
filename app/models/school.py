from sqlalchemy import Column, Integer, String, Text, DateTime
from app.database import Base
from app.utils.time_utils import get_local_time

class SchoolInfo(Base):
    __tablename__ = "school_info"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    address = Column(Text, nullable=True)
    email = Column(String(100), nullable=True)
    phone = Column(String(20), nullable=True)
    session = Column(String(20), nullable=True) # e.g. 2024/2025
    principal_name = Column(String(100), nullable=True)
    principal_comment = Column(Text, nullable=True)
    logo = Column(Text, nullable=True) # Data URL
    principal_signature = Column(Text, nullable=True) # Data URL

    created_at = Column(DateTime, default=get_local_time)
    updated_at = Column(DateTime, default=get_local_time, onupdate=get_local_time)

class TeacherSignature(Base):
    __tablename__ = "teacher_signatures"

    id = Column(Integer, primary_key=True, index=True)
    subject_name = Column(String(100), unique=True, nullable=False)
    signature_data = Column(Text, nullable=False)

    created_at = Column(DateTime, default=get_local_time)
    updated_at = Column(DateTime, default=get_local_time, onupdate=get_local_time)
