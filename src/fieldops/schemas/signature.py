from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.fieldops.models.enums import SignerType
from src.fieldops.schemas.common import RequestModel, strip_required


class SignatureCreate(RequestModel):
    signer_type: SignerType
    signer_name: str = Field(min_length=1, max_length=255)
    # Encoded image, typically a data URL from a signature pad
    signature_data: str = Field(min_length=1)

    strip_name = field_validator("signer_name", mode="before")(strip_required)


class SignatureRead(BaseModel):
    id: UUID
    job_id: UUID
    signer_type: SignerType
    signer_id: UUID | None
    signer_name: str
    signature_data: str
    signed_at: datetime

    model_config = {"from_attributes": True}
