from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.staff_schema import AssignFormMaster, ClassArmResponse, MessageResponse, RosterUpdate
from app.security import get_current_user
from app.services import staff_service

router = APIRouter(dependencies=[Depends(get_current_user)])

@router.get("", response_model=List[ClassArmResponse])
async def get_class_arms(db: AsyncSession = Depends(get_db)):
    return await staff_service.list_class_arms(db)

@router.put("/{arm_id}/assign", response_model=MessageResponse)
async def assign_form_master(arm_id: int, req: AssignFormMaster, db: AsyncSession = Depends(get_db)):
    await staff_service.assign_form_master(db, arm_id, req.form_master_id)
    return {"message": "Form master assigned successfully"}

@router.put("/{arm_id}/students", response_model=MessageResponse)
async def update_student_names(arm_id: int, req: RosterUpdate, db: AsyncSession = Depends(get_db)):
    await staff_service.set_roster(db, arm_id, req.student_names)
    return {"message": "Student names updated successfully"}
