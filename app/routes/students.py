from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.student_schema import PositionsComputed, StudentCreate, StudentResponse, StudentSaved
from app.security import get_current_user
from app.services.student_service import StudentService

router = APIRouter(dependencies=[Depends(get_current_user)])

@router.get("", response_model=List[StudentResponse])
async def get_students(
    class_name: Optional[str] = Query(None, alias="className"),
    term: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    return await StudentService.list_students(db, class_name=class_name, term=term)

@router.post("", response_model=StudentSaved)
async def save_student(payload: StudentCreate, db: AsyncSession = Depends(get_db)):
    student_id = await StudentService.save_student(db, payload)
    return StudentSaved(id=student_id)

@router.post("/compute-positions", response_model=PositionsComputed)
async def compute_positions(db: AsyncSession = Depends(get_db)):
    updated = await StudentService.compute_positions(db)
    return PositionsComputed(updated=updated)
