"""
Pydantic schemas for job requests and responses.

Wire format is camelCase (companyHandle, minSalary, ...). Request schemas
reject unknown keys.
"""

import re
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from app.schemas.company import CompanyResponse

EQUITY_PATTERN = re.compile(r"^(0|(0?\.[0-9]+))$")


def format_equity(value: Optional[Decimal]) -> Optional[str]:
    """Render equity as a plain decimal string ("0.05"), or None."""
    if value is None:
        return None
    return format(value.normalize(), "f")


class JobRequestBase(BaseModel):
    equity: Optional[Decimal] = Field(None, ge=0, le=1)

    @field_validator("equity", mode="before")
    @classmethod
    def check_equity_format(cls, v):
        """Equity given as a string must look like "0" or "0.25"."""
        if isinstance(v, str) and not EQUITY_PATTERN.match(v):
            raise ValueError('equity must be a decimal string like "0" or "0.25"')
        if isinstance(v, bool):
            raise ValueError("equity must be a number or decimal string")
        return v

    class Config:
        alias_generator = to_camel
        extra = "forbid"


class JobCreateRequest(JobRequestBase):
    """Schema for creating a new job"""
    title: StrictStr = Field(..., min_length=1)
    salary: Optional[StrictInt] = Field(None, ge=0)
    company_handle: StrictStr = Field(..., min_length=1, max_length=25)


class JobUpdateRequest(JobRequestBase):
    """
    Schema for a partial job update.

    companyHandle and id cannot be changed and are rejected as unknown keys.
    """
    title: Optional[StrictStr] = Field(None, min_length=1)
    salary: Optional[StrictInt] = Field(None, ge=0)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v):
        """title may be omitted but not cleared."""
        if v is None:
            raise ValueError("title cannot be null")
        return v


class JobSearchFilter(BaseModel):
    """
    Filters for GET /jobs.

    Query values arrive as strings; the endpoint coerces minSalary to a
    number and hasEquity to a bool before validating against this schema.
    """
    title: Optional[StrictStr] = Field(None, min_length=1)
    min_salary: Optional[int] = Field(None, ge=0)
    has_equity: bool = False

    class Config:
        alias_generator = to_camel
        extra = "forbid"


class JobResponseBase(BaseModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None

    @field_serializer("equity")
    def serialize_equity(self, equity: Optional[Decimal]) -> Optional[str]:
        return format_equity(equity)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True  # Allows conversion from SQLAlchemy models


class JobResponse(JobResponseBase):
    """Schema for a job returned by create and update"""
    company_handle: str


class JobListItem(JobResponse):
    """Schema for a job in search results"""
    company_name: str


class JobDetailResponse(JobResponseBase):
    """Schema for a single job, with its company"""
    company: CompanyResponse


class JobEnvelope(BaseModel):
    job: JobResponse


class JobDetailEnvelope(BaseModel):
    job: JobDetailResponse


class JobListEnvelope(BaseModel):
    jobs: List[JobListItem]


class JobDeletedResponse(BaseModel):
    deleted: int
