import logging
from typing import List, Optional

from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import from_db_error
from app.models.class_arm import ClassArm
from app.models.form_master import FormMaster
from app.schemas.staff_schema import FormMasterCreate
from app.security import get_password_hash

logger = logging.getLogger(__name__)

# --- Form masters ---

async def list_form_masters(db: AsyncSession) -> List[FormMaster]:
    try:
        result = await db.execute(select(FormMaster).order_by(FormMaster.id))
        return result.scalars().all()
    except SQLAlchemyError as e:
        raise from_db_error(e, "Failed to fetch form masters") from e

async def create_form_master(db: AsyncSession, data: FormMasterCreate) -> FormMaster:
    form_master = FormMaster(
        name=data.name,
        email=data.email,
        phone=data.phone,
        password_hash=get_password_hash(data.password),
    )
    try:
        db.add(form_master)
        await db.commit()
        await db.refresh(form_master)
    except SQLAlchemyError as e:
        await db.rollback()
        raise from_db_error(e, "Failed to create form master") from e
    return form_master

async def delete_form_master(db: AsyncSession, form_master_id: int) -> None:
    """Detaches the form master from its class arms, then deletes it. Unknown ids are a no-op."""
    try:
        await db.execute(
            update(ClassArm).where(ClassArm.form_master_id == form_master_id).values(form_master_id=None)
        )
        await db.execute(delete(FormMaster).where(FormMaster.id == form_master_id))
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        raise from_db_error(e, "Failed to delete form master") from e
    logger.info(f"Deleted form master {form_master_id}")

# --- Class arms ---

async def list_class_arms(db: AsyncSession) -> List[dict]:
    stmt = (
        select(ClassArm, FormMaster.name, FormMaster.email)
        .outerjoin(FormMaster, ClassArm.form_master_id == FormMaster.id)
        .order_by(ClassArm.id)
    )
    try:
        result = await db.execute(stmt)
    except SQLAlchemyError as e:
        raise from_db_error(e, "Failed to fetch class arms") from e

    return [
        {
            "id": arm.id,
            "name": arm.name,
            "form_master_id": arm.form_master_id,
            "student_names": arm.student_names or [],
            "form_master_name": fm_name,
            "form_master_email": fm_email,
        }
        for arm, fm_name, fm_email in result.all()
    ]

async def assign_form_master(db: AsyncSession, arm_id: int, form_master_id: Optional[int]) -> None:
    try:
        await db.execute(update(ClassArm).where(ClassArm.id == arm_id).values(form_master_id=form_master_id or None))
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        raise from_db_error(e, "Failed to assign form master") from e

async def set_roster(db: AsyncSession, arm_id: int, student_names: List[str]) -> None:
    try:
        await db.execute(update(ClassArm).where(ClassArm.id == arm_id).values(student_names=list(student_names)))
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        raise from_db_error(e, "Failed to update student names") from e
