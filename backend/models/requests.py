from pydantic import BaseModel, Field


class SearchFilters(BaseModel):
    query: str | None = Field(None, max_length=200, description="Free-text search over title, company, description and skills")
    location: str | None = None
    salary_min: int | None = Field(None, ge=0)
    salary_max: int | None = Field(None, ge=0)
    experience_level: str | None = None
    job_type: str | None = None
    remote_only: bool = False
    skills: list[str] = []
