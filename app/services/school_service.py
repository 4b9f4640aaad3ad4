import logging
from typing import Dict

from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import from_db_error
from app.models.assessment import AssessmentConfig
from app.models.school import SchoolInfo, TeacherSignature
from app.schemas.school_schema import AssessmentMaxima, SchoolInfoUpdate
from app.utils.db_utils import row_to_dict, upsert_statement

logger = logging.getLogger(__name__)

# --- School info (single row) ---

async def get_school_info(db: AsyncSession) -> dict:
    try:
        result = await db.execute(select(SchoolInfo).order_by(SchoolInfo.id).limit(1))
    except SQLAlchemyError as e:
        raise from_db_error(e, "Failed to fetch school info") from e
    info = result.scalar_one_or_none()
    return row_to_dict(info) if info else {}

async def save_school_info(db: AsyncSession, data: SchoolInfoUpdate) -> None:
    values = data.model_dump()
    try:
        result = await db.execute(select(SchoolInfo).order_by(SchoolInfo.id).limit(1))
        info = result.scalar_one_or_none()
        if info:
            for field, value in values.items():
                setattr(info, field, value)
        else:
            db.add(SchoolInfo(**values))
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        raise from_db_error(e, "Failed to save school info") from e

# --- Assessment config ---

async def get_assessment_config(db: AsyncSession) -> Dict[str, dict]:
    try:
        result = await db.execute(select(AssessmentConfig).order_by(AssessmentConfig.id))
    except SQLAlchemyError as e:
        raise from_db_error(e, "Failed to fetch assessment config") from e

    return {
        c.class_name: {"ca1": c.ca1_max, "ca2": c.ca2_max, "ca3": c.ca3_max, "exam": c.exam_max}
        for c in result.scalars()
    }

async def save_assessment_config(db: AsyncSession, config: Dict[str, AssessmentMaxima]) -> None:
    """Insert-or-update per class name; maxima are informational and not checked against scores."""
    try:
        for class_name, maxima in config.items():
            await db.execute(upsert_statement(
                db, AssessmentConfig,
                {
                    "class_name": class_name,
                    "ca1_max": maxima.ca1,
                    "ca2_max": maxima.ca2,
                    "ca3_max": maxima.ca3,
                    "exam_max": maxima.exam,
                },
                key="class_name",
            ))
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        raise from_db_error(e, "Failed to save assessment config") from e

# --- Teacher signatures ---

async def get_signatures(db: AsyncSession) -> Dict[str, str]:
    try:
        result = await db.execute(select(TeacherSignature).order_by(TeacherSignature.id))
    except SQLAlchemyError as e:
        raise from_db_error(e, "Failed to fetch signatures") from e
    return {s.subject_name: s.signature_data for s in result.scalars()}

async def save_signature(db: AsyncSession, subject: str, signature_data: str) -> None:
    try:
        await db.execute(upsert_statement(
            db, TeacherSignature,
            {"subject_name": subject, "signature_data": signature_data},
            key="subject_name",
        ))
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        raise from_db_error(e, "Failed to upload signature") from e

async def delete_signature(db: AsyncSession, subject: str) -> None:
    try:
        await db.execute(delete(TeacherSignature).where(TeacherSignature.subject_name == subject))
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        raise from_db_error(e, "Failed to delete signature") from e
