from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.school_schema import SchoolInfoUpdate
from app.schemas.staff_schema import MessageResponse
from app.security import admin_only, get_current_user
from app.services import school_service

router = APIRouter()

@router.get("/info", dependencies=[Depends(get_current_user)])
async def get_school_info(db: AsyncSession = Depends(get_db)):
    return await school_service.get_school_info(db)

@router.put("/info", response_model=MessageResponse, dependencies=[Depends(admin_only)])
async def save_school_info(data: SchoolInfoUpdate, db: AsyncSession = Depends(get_db)):
    await school_service.save_school_info(db, data)
    return {"message": "School information saved successfully"}
