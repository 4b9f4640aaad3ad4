from sqlalchemy import (
    Column, Integer, String, Text, DateTime, ForeignKey, Numeric,
    UniqueConstraint, CheckConstraint, Index,
)
from sqlalchemy.orm import relationship
from app.database import Base
from app.utils.time_utils import get_local_time

class Student(Base):
    __tablename__ = "students"
    __table_args__ = (
        UniqueConstraint("adm_no", "term", "class_name", name="uq_students_adm_no_term_class"),
        Index("idx_students_class_term", "class_name", "term"),
    )

    id = Column(Integer, primary_key=True, index=True)
    student_name = Column(String(100), nullable=False)
    adm_no = Column(String(50), nullable=False, index=True)
    dob = Column(String(20), nullable=True)
    age = Column(Integer, nullable=True)
    sex = Column(String(10), nullable=False)
    term = Column(String(1), nullable=False)
    class_name = Column(String(10), nullable=False)

    # Aggregates are computed by the client and stored as submitted
    total_obtained = Column(Numeric(10, 2, asdecimal=False), default=0)
    total_obtainable = Column(Numeric(10, 2, asdecimal=False), default=0)
    average_score = Column(Numeric(5, 2, asdecimal=False), default=0)

    # Written only by position computation
    position = Column(Integer, nullable=True)
    position_of = Column(Integer, nullable=True)

    passport = Column(Text, nullable=True)
    form_master = Column(String(100), nullable=True)
    form_master_comment = Column(Text, nullable=True)
    form_master_signature = Column(Text, nullable=True)

    created_at = Column(DateTime, default=get_local_time)
    updated_at = Column(DateTime, default=get_local_time, onupdate=get_local_time)

    # Relationship
    subjects = relationship("SubjectScore", back_populates="student", cascade="all, delete-orphan", passive_deletes=True)
    affective_ratings = relationship("AffectiveRating", cascade="all, delete-orphan", passive_deletes=True)
    psychomotor_ratings = relationship("PsychomotorRating", cascade="all, delete-orphan", passive_deletes=True)

class SubjectScore(Base):
    __tablename__ = "subjects"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    subject_name = Column(String(100), nullable=False)
    ca1 = Column(Numeric(5, 2, asdecimal=False), default=0)
    ca2 = Column(Numeric(5, 2, asdecimal=False), default=0)
    ca3 = Column(Numeric(5, 2, asdecimal=False), default=0)
    exam = Column(Numeric(5, 2, asdecimal=False), default=0)
    total = Column(Numeric(5, 2, asdecimal=False), default=0)
    grade = Column(String(1), nullable=True) # A-F
    remark = Column(String(50), nullable=True)

    created_at = Column(DateTime, default=get_local_time)
    updated_at = Column(DateTime, default=get_local_time, onupdate=get_local_time)

    student = relationship("Student", back_populates="subjects")

class _RatingColumns:
    id = Column(Integer, primary_key=True, index=True)
    domain = Column(String(100), nullable=False)
    rating = Column(Integer)

    created_at = Column(DateTime, default=get_local_time)
    updated_at = Column(DateTime, default=get_local_time, onupdate=get_local_time)

class AffectiveRating(_RatingColumns, Base):
    __tablename__ = "affective_ratings"
    __table_args__ = (
        UniqueConstraint("student_id", "domain", name="uq_affective_student_domain"),
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_affective_rating_range"),
    )

    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False)

class PsychomotorRating(_RatingColumns, Base):
    __tablename__ = "psychomotor_ratings"
    __table_args__ = (
        UniqueConstraint("student_id", "domain", name="uq_psychomotor_student_domain"),
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_psychomotor_rating_range"),
    )

    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False)
