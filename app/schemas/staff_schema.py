from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class FormMasterCreate(BaseModel):
    name: str
    email: str # Stored exactly as submitted; login matches it verbatim
    password: str
    phone: Optional[str] = None

class FormMasterResponse(BaseModel):
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)

class FormMasterCreated(FormMasterResponse):
    message: str = "Form master created successfully"

class ClassArmResponse(BaseModel):
    id: int
    name: str
    form_master_id: Optional[int]
    student_names: List[str] = []
    form_master_name: Optional[str] = None
    form_master_email: Optional[str] = None

class AssignFormMaster(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    form_master_id: Optional[int] = Field(None, alias="formMasterId") # null clears the assignment

class RosterUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    student_names: List[str] = Field(..., alias="studentNames")

class MessageResponse(BaseModel):
    message: str
