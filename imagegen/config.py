from functools import lru_cache
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the image generation proxy."""

    #----------------------------------------------------------
    # Vertex AI settings
    #----------------------------------------------------------
    project_id: str = Field(
        default="",
        validation_alias=AliasChoices("GOOGLE_CLOUD_PROJECT", "IMAGEGEN_PROJECT_ID"),
        description="Google Cloud project that owns the Vertex AI quota.",
    )

    location: str = Field(
        default="global",
        description="Vertex AI location serving the publisher model.",
    )

    model_id: str = Field(
        default="gemini-3-pro-image-preview",
        description="Publisher model id used for image generation.",
    )

    api_host: str = Field(
        default="https://aiplatform.googleapis.com",
        description="Base URL of the Vertex AI REST API.",
    )

    auth_scopes: list[str] = Field(
        default=["https://www.googleapis.com/auth/cloud-platform"],
        description="OAuth scopes requested for the bearer credential.",
    )

    #----------------------------------------------------------
    # Transport settings
    #----------------------------------------------------------
    request_timeout: float = Field(
        default=120.0,
        gt=0.0,
        description="Seconds to wait for the upstream generateContent call.",
    )

    #----------------------------------------------------------
    # Client settings
    #----------------------------------------------------------
    proxy_base_url: str = Field(
        default="http://localhost:8000",
        description="Where the command line client finds the generation proxy.",
    )

    model_config = SettingsConfigDict(
        env_prefix="IMAGEGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    @property
    def generate_content_url(self) -> str:
        return (
            f"{self.api_host.rstrip('/')}/v1/projects/{self.project_id}"
            f"/locations/{self.location}/publishers/google/models/{self.model_id}:generateContent"
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
