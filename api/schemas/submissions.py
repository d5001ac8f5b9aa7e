from typing import List
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class LoanSubmission(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    mobile: str = Field(..., min_length=1)
    dob: str = Field(..., min_length=1)
    employment: str = Field(..., min_length=1)
    income: str = Field(..., min_length=1)


def invalid_fields(exc: ValidationError) -> List[str]:
    """
    Field names named by a LoanSubmission validation error, in declaration order.
    Absent, blank and non-text values all count as missing.
    """
    failed = {error["loc"][0] for error in exc.errors() if error["loc"]}
    return [name for name in LoanSubmission.model_fields if name in failed]


class EmailSender(BaseModel):
    name: str
    email: str


class EmailRecipient(BaseModel):
    email: str


class EmailAttachment(BaseModel):
    name: str
    content: str  # base64


class NotificationPayload(BaseModel):
    """
    Body of a Brevo transactional email request. Dump with `by_alias=True`
    to get the provider's field names.
    """
    model_config = ConfigDict(populate_by_name=True)

    sender: EmailSender
    to: List[EmailRecipient]
    subject: str
    html_content: str = Field(..., alias="htmlContent")
    attachments: List[EmailAttachment] = Field(default_factory=list, alias="attachment")
