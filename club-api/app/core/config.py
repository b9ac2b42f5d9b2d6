from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str
    ROOT_PATH: str = ""
    JWT_SECRET: str = "CHANGE_ME"
    JWT_ALG: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Background jobs
    SCHEDULER_ENABLED: bool = True
    UNIFORM_AUDIT_INTERVAL_MINUTES: int = 60

    # Uploads (S3-compatible bucket)
    UPLOAD_MAX_BYTES: int = 10 * 1024 * 1024
    UPLOAD_DEFAULT_FOLDER: str = "track-team"
    S3_BUCKET: str = ""
    S3_ENDPOINT_URL: str | None = None
    S3_REGION: str | None = None
    S3_PUBLIC_BASE_URL: str | None = None

settings = Settings()
