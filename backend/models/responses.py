from pydantic import BaseModel

from models.schemas.job import Job


class JobSearchResponse(BaseModel):
    jobs: list[Job] = []
    total: int = 0
    page: int = 1
    limit: int = 10
    total_pages: int = 0
