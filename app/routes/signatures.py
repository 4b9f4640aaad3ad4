from typing import Dict

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.school_schema import SignatureUpload
from app.schemas.staff_schema import MessageResponse
from app.security import admin_only, get_current_user
from app.services import school_service

router = APIRouter()

@router.get("", response_model=Dict[str, str], dependencies=[Depends(get_current_user)])
async def get_signatures(db: AsyncSession = Depends(get_db)):
    return await school_service.get_signatures(db)

@router.post("", response_model=MessageResponse, dependencies=[Depends(admin_only)])
async def upload_signature(req: SignatureUpload, db: AsyncSession = Depends(get_db)):
    await school_service.save_signature(db, req.subject, req.signature_data)
    return {"message": "Teacher signature uploaded successfully"}

# Path parameters arrive URL-decoded, e.g. "Basic%20Science" -> "Basic Science"
@router.delete("/{subject}", response_model=MessageResponse, dependencies=[Depends(admin_only)])
async def delete_signature(subject: str, db: AsyncSession = Depends(get_db)):
    await school_service.delete_signature(db, subject)
    return {"message": "Teacher signature deleted successfully"}
