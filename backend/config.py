from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    # Ranking: only jobs scoring strictly above this are returned as matches
    min_match_score: float = 0.5

    # Job catalog
    jobs_file: str = str(_BACKEND_DIR / "data" / "sample_jobs.json")
    jobs_per_page: int = 10

    # Uploaded resume documents
    max_upload_size_mb: int = 5

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
