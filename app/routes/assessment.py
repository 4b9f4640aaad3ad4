from typing import Dict

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.school_schema import AssessmentConfigUpdate, AssessmentMaxima
from app.schemas.staff_schema import MessageResponse
from app.security import admin_only, get_current_user
from app.services import school_service

router = APIRouter()

@router.get("/config", response_model=Dict[str, AssessmentMaxima], dependencies=[Depends(get_current_user)])
async def get_assessment_config(db: AsyncSession = Depends(get_db)):
    return await school_service.get_assessment_config(db)

@router.put("/config", response_model=MessageResponse, dependencies=[Depends(admin_only)])
async def save_assessment_config(req: AssessmentConfigUpdate, db: AsyncSession = Depends(get_db)):
    await school_service.save_assessment_config(db, req.config)
    return {"message": "Assessment configuration saved successfully"}
