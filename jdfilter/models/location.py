# jdfilter/models/location.py
"""Location classification result for job postings"""

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class LocationResult(BaseModel):
    """Either Remote, or NotRemote with free-text location hints from the page."""

    remote: bool = Field(..., description="True when the posting is classified as remote")
    hints: List[str] = Field(default_factory=list, description="Location snippets, NotRemote only")

    class Config:
        frozen = True

    @model_validator(mode='after')
    def remote_has_no_hints(self):
        if self.remote and self.hints:
            raise ValueError("A remote location cannot carry location hints")
        return self

    @classmethod
    def remote_role(cls) -> "LocationResult":
        return cls(remote=True)

    @classmethod
    def not_remote(cls, hints: Optional[List[str]] = None) -> "LocationResult":
        return cls(remote=False, hints=list(hints or []))

    def __str__(self) -> str:
        if self.remote:
            return "Remote"
        if self.hints:
            return "Not Remote\n" + " / ".join(self.hints)
        return "Not Remote"

    def __repr__(self) -> str:
        if self.remote:
            return "LocationResult(Remote)"
        return f"LocationResult(NotRemote, hints={self.hints!r})"
