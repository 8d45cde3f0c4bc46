# jdfilter/models/job.py
"""Job descriptor model: the fields extracted from one job posting page"""

from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

from jdfilter.models.location import LocationResult


class JobDescriptor(BaseModel):
    """Structured fields extracted from a single job posting document."""

    title: str = Field(..., description="Role title, or the untitled placeholder")
    company: Optional[str] = Field(None, description="Company name; None when unknown")
    location: LocationResult = Field(..., description="Remote / NotRemote classification")
    tech_stacks: List[str] = Field(..., description="Detected tech labels in first-matched order")
    source_url: str = Field(..., description="URL the document was fetched from")

    class Config:
        frozen = True

    @field_validator('company')
    @classmethod
    def blank_company_is_absent(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    @field_validator('tech_stacks')
    @classmethod
    def tech_stacks_not_empty(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("tech_stacks must hold at least one entry")
        if len(set(value)) != len(value):
            raise ValueError("tech_stacks must not contain duplicates")
        return value

    @property
    def job_platform(self) -> str:
        hostname = urlparse(self.source_url).hostname or ""
        return hostname[4:] if hostname.startswith("www.") else hostname

    def to_payload(self) -> Dict[str, Any]:
        """Render the public JSON shape served by the job endpoint."""
        payload = {
            "title": self.title,
            "location": str(self.location),
            "techStacks": list(self.tech_stacks),
            "jobPlatform": self.job_platform,
            "company": self.company,
            "url": self.source_url,
        }
        if self.company is None:
            del payload["company"]
        return payload
