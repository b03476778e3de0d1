from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    PROJECT_NAME: str = "NEO Risk Archivist"
    API_V1_STR: str = "/api/v1"
    SERVICE_NAME: str = "nasa_data_archivist"

    NASA_API_KEY: Optional[str] = None
    NASA_NEOWS_FEED_URL: str = "https://api.nasa.gov/neo/rest/v1/feed"
    NASA_TIMEOUT_SECONDS: float = 15.0

    USER_AGENT: str = "NeoArchivist/1.0"

    class Config:
        case_sensitive = True
        env_file = ".env"

settings = Settings()
