from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Quiz Settings
    QUESTIONS_PER_QUIZ: int = Field(10, description="Default number of questions per attempt")
    SUBTOPIC_QUESTION_LIMIT: int = Field(50, description="Question cap for sub-topic scoped attempts")
    DEFAULT_QUESTION_TIME_LIMIT: int = Field(30, description="Seconds per question when the question sets none")
    SHOW_TIMER: bool = True
    POINTS_PER_CORRECT: int = 2

    # Ticker
    TICK_INTERVAL_SECONDS: float = 1.0

    # AI Performance Analysis (Gemini)
    GEMINI_API_KEY: str = Field("", description="Gemini API key for performance analysis")
    GEMINI_MODEL: str = Field("gemini-3-flash-preview", description="Gemini model to use")
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta/models"
    AI_ANALYSIS_TIMEOUT_SECONDS: float = 60.0

    # Environment
    ENV: str = "production"  # development, staging, production
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

settings = Settings()
