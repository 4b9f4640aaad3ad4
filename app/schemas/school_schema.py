from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Optional

class SchoolInfoUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    address: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    session: Optional[str] = Field(None, example="2024/2025")
    principal_name: Optional[str] = Field(None, alias="principalName")
    principal_comment: Optional[str] = Field(None, alias="principalComment")
    logo: Optional[str] = None
    principal_signature: Optional[str] = Field(None, alias="principalSignature")

class AssessmentMaxima(BaseModel):
    ca1: int = 10
    ca2: int = 10
    ca3: int = 10
    exam: int = 70

class AssessmentConfigUpdate(BaseModel):
    config: Dict[str, AssessmentMaxima] # class name -> maxima

class SignatureUpload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    subject: str
    signature_data: str = Field(..., alias="signatureData")
