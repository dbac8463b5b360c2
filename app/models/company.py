"""
Company database model.

Every job belongs to a company, referenced by the company's handle.
"""

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from app.core.database import Base


class Company(Base):
    """A company that posts jobs, identified by a short URL-friendly handle."""
    __tablename__ = "companies"

    handle = Column(String(25), primary_key=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(Text, nullable=False, default="")
    num_employees = Column(Integer, nullable=True)
    logo_url = Column(String, nullable=True)

    # Relationships
    jobs = relationship("Job", back_populates="company", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Company(handle='{self.handle}', name='{self.name}')>"
