from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    max_files: int = 5
    max_file_size_bytes: int = 100 * 1024 * 1024
    max_payload_chars: int = Field(default=3_800_000, gt=0)

    pdf_engine: str = "pymupdf"

    ocr_language: str = "eng"
    ocr_render_scale: float = Field(default=2.0, ge=1.5)
    ocr_page_timeout_seconds: float = Field(default=120.0, gt=0)
    ocr_max_workers: int | None = Field(default=None, gt=0)
    tesseract_cmd: str = ""

    report_provider: str = "openai"
    report_min_text_chars: int = 50

    report_openai_api_key: str = ""
    report_openai_model_name: str = "gpt-4o-mini"
    report_openai_timeout_seconds: int = 300
    report_openai_temperature: float = 0.2

    report_openai_compatible_base_url: str = ""
    report_openai_compatible_api_key: str = ""
    report_openai_compatible_model_name: str = ""
    report_openai_compatible_timeout_seconds: int = 300

    report_gemini_api_key: str = ""
    report_gemini_model_name: str = "gemini-2.0-flash"
    report_gemini_timeout_seconds: int = 300

    report_openrouter_api_key: str = ""
    report_openrouter_model_name: str = ""
    report_openrouter_timeout_seconds: int = 300

    report_groq_api_key: str = ""
    report_groq_model_name: str = ""
    report_groq_timeout_seconds: int = 300

    report_together_api_key: str = ""
    report_together_model_name: str = ""
    report_together_timeout_seconds: int = 300

    report_deepseek_api_key: str = ""
    report_deepseek_model_name: str = ""
    report_deepseek_timeout_seconds: int = 300

    report_ollama_api_key: str = "ollama"
    report_ollama_model_name: str = ""
    report_ollama_timeout_seconds: int = 300
