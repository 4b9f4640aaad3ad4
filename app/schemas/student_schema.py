from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Dict, List, Optional

class SubjectEntry(BaseModel):
    name: str = Field(..., example="Mathematics")
    ca1: Optional[float] = 0
    ca2: Optional[float] = 0
    ca3: Optional[float] = 0
    exam: Optional[float] = 0
    total: Optional[float] = 0
    grade: Optional[str] = Field(None, max_length=1, example="A")
    remark: Optional[str] = Field(None, example="Excellent")

class StudentCreate(BaseModel):
    """Bundle submitted by the result sheet: student row, subject scores and both rating maps."""
    model_config = ConfigDict(populate_by_name=True)

    student_name: str = Field(..., alias="studentName")
    adm_no: str = Field(..., alias="admNo")
    dob: Optional[str] = None
    age: Optional[int] = None
    sex: str
    term: str = Field(..., example="1")
    class_name: str = Field(..., alias="className", example="JSS1A")

    subjects: List[SubjectEntry] = Field(default_factory=list)
    affective: Dict[str, int] = Field(default_factory=dict) # domain -> 1..5
    psychomotor: Dict[str, int] = Field(default_factory=dict) # domain -> 1..5

    total_obtained: Optional[float] = Field(0, alias="totalObtained")
    total_obtainable: Optional[float] = Field(0, alias="totalObtainable")
    average_score: Optional[float] = Field(0, alias="averageScore")

    passport: Optional[str] = None
    form_master: Optional[str] = Field(None, alias="formMaster")
    form_master_comment: Optional[str] = Field(None, alias="formMasterComment")
    form_master_signature: Optional[str] = Field(None, alias="formMasterSignature")

class StudentSaved(BaseModel):
    id: int
    message: str = "Student saved successfully"

class SubjectResponse(BaseModel):
    id: int
    student_id: int
    subject_name: str
    ca1: Optional[float]
    ca2: Optional[float]
    ca3: Optional[float]
    exam: Optional[float]
    total: Optional[float]
    grade: Optional[str]
    remark: Optional[str]

    model_config = ConfigDict(from_attributes=True)

class StudentResponse(BaseModel):
    id: int
    student_name: str
    adm_no: str
    dob: Optional[str]
    age: Optional[int]
    sex: str
    term: str
    class_name: str
    total_obtained: Optional[float]
    total_obtainable: Optional[float]
    average_score: Optional[float]
    position: Optional[int]
    position_of: Optional[int]
    passport: Optional[str]
    form_master: Optional[str]
    form_master_comment: Optional[str]
    form_master_signature: Optional[str]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    subjects: List[SubjectResponse] = []
    affective: Dict[str, int] = {}
    psychomotor: Dict[str, int] = {}

class PositionsComputed(BaseModel):
    message: str = "Positions computed successfully"
    updated: int
