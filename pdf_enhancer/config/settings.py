"""Application settings using Pydantic Settings.

Configuration is loaded from:
1. Environment variables (highest priority)
2. .env file
3. Default values (lowest priority)
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Placeholder some deployments ship instead of a real key
DUMMY_API_KEY = "dummy_key_for_testing"


class ProviderSettings(BaseSettings):
    """Credentials and defaults for the hosted completion providers.

    Keys use the vendors' conventional variable names (OPENAI_API_KEY, ...).
    A provider whose key is empty or equals DUMMY_API_KEY is treated as
    unavailable.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Credentials
    gemini_api_key: str = Field(
        default="",
        description="Google Generative Language API key",
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    )
    openai_api_key: str = Field(
        default="",
        description="OpenAI API key",
        validation_alias=AliasChoices("OPENAI_API_KEY"),
    )
    anthropic_api_key: str = Field(
        default="",
        description="Anthropic API key",
        validation_alias=AliasChoices("ANTHROPIC_API_KEY"),
    )

    # Model variants for single-model providers
    openai_model: str = Field(
        default="gpt-4-turbo-preview",
        description="OpenAI chat model used for the 'openai' model id",
        validation_alias=AliasChoices("OPENAI_MODEL"),
    )
    anthropic_model: str = Field(
        default="claude-3-sonnet-20240229",
        description="Anthropic model used for the 'claude' model id",
        validation_alias=AliasChoices("ANTHROPIC_MODEL"),
    )

    # Endpoints
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com",
        validation_alias=AliasChoices("GEMINI_BASE_URL"),
    )
    openai_base_url: str = Field(
        default="https://api.openai.com",
        validation_alias=AliasChoices("OPENAI_BASE_URL"),
    )
    anthropic_base_url: str = Field(
        default="https://api.anthropic.com",
        validation_alias=AliasChoices("ANTHROPIC_BASE_URL"),
    )
    anthropic_version: str = Field(
        default="2023-06-01",
        description="Value of the anthropic-version header",
        validation_alias=AliasChoices("ANTHROPIC_VERSION"),
    )

    # Generation
    temperature: float = Field(
        default=0.3,
        description="Sampling temperature shared by all providers",
        validation_alias=AliasChoices("LLM_TEMPERATURE"),
    )
    timeout: int = Field(
        default=120,
        description="Request timeout in seconds",
        validation_alias=AliasChoices("LLM_TIMEOUT"),
    )

    def credential(self, group: str) -> str | None:
        """Return the usable API key for a provider group, or None."""
        key = {
            "google": self.gemini_api_key,
            "openai": self.openai_api_key,
            "anthropic": self.anthropic_api_key,
        }.get(group, "")
        key = (key or "").strip()
        if not key or key == DUMMY_API_KEY:
            return None
        return key


class ExtractionSettings(BaseSettings):
    """Content fetching and extraction settings."""

    model_config = SettingsConfigDict(
        env_prefix="EXTRACT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    user_agent: str = Field(
        default="Mozilla/5.0 (compatible; AI-Content-PDF-Enhancer/1.0)",
        description="User-Agent header sent when fetching pages",
    )
    timeout: int = Field(
        default=30,
        description="Fetch timeout in seconds",
    )
    min_content_length: int = Field(
        default=100,
        description="Minimum characters of extracted page text",
    )
    min_text_length: int = Field(
        default=50,
        description="Minimum characters of content accepted for enhancement",
    )


class RenderSettings(BaseSettings):
    """Headless PDF rendering settings."""

    model_config = SettingsConfigDict(
        env_prefix="PDF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    format: str = Field(
        default="A4",
        description="Paper format passed to Chromium",
    )
    margin_top: str = Field(default="1in")
    margin_bottom: str = Field(default="1in")
    margin_left: str = Field(default="0.8in")
    margin_right: str = Field(default="0.8in")
    render_deadline_seconds: float = Field(
        default=45.0,
        description="Advisory deadline; exceeding it is logged, not enforced",
    )
    chromium_args: list[str] = Field(
        default_factory=lambda: ["--no-sandbox", "--disable-setuid-sandbox"],
        description="Extra Chromium launch arguments",
    )


class APISettings(BaseSettings):
    """FastAPI application settings."""

    model_config = SettingsConfigDict(
        env_prefix="API_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    title: str = Field(
        default="AI Content PDF Enhancer API",
        description="API title"
    )
    version: str = Field(
        default="0.1.0",
        description="API version"
    )
    description: str = Field(
        default="Extract articles, enhance them with an LLM and render PDFs",
        description="API description"
    )
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind"
    )
    port: int = Field(
        default=8100,
        description="Port to bind"
    )
    reload: bool = Field(
        default=False,
        description="Auto-reload on code changes"
    )
    log_level: str = Field(
        default="info",
        description="Logging level"
    )


# Global settings instances
provider_settings = ProviderSettings()
extraction_settings = ExtractionSettings()
render_settings = RenderSettings()
api_settings = APISettings()


__all__ = [
    "DUMMY_API_KEY",
    "ProviderSettings",
    "ExtractionSettings",
    "RenderSettings",
    "APISettings",
    "provider_settings",
    "extraction_settings",
    "render_settings",
    "api_settings",
]
