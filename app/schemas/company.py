from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CompanyResponse(BaseModel):
    """Company summary embedded in a single job's detail view"""
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
