from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.staff_schema import FormMasterCreate, FormMasterCreated, FormMasterResponse, MessageResponse
from app.security import admin_only
from app.services import staff_service

router = APIRouter(dependencies=[Depends(admin_only)])

@router.get("", response_model=List[FormMasterResponse])
async def get_form_masters(db: AsyncSession = Depends(get_db)):
    return await staff_service.list_form_masters(db)

@router.post("", response_model=FormMasterCreated)
async def create_form_master(data: FormMasterCreate, db: AsyncSession = Depends(get_db)):
    form_master = await staff_service.create_form_master(db, data)
    return FormMasterCreated(id=form_master.id, name=form_master.name, email=form_master.email)

@router.delete("/{form_master_id}", response_model=MessageResponse)
async def delete_form_master(form_master_id: int, db: AsyncSession = Depends(get_db)):
    await staff_service.delete_form_master(db, form_master_id)
    return {"message": "Form master deleted successfully"}
