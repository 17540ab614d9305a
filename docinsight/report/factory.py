from typing import ClassVar

from docinsight.config.settings import Settings
from docinsight.report.base import BaseReportGenerator
from docinsight.report.example_client_adapter import ExampleClientAdapter
from docinsight.report.generator import ReportGenerator
from docinsight.report.openai_client_adapter import OpenAIClientAdapter


class ReportGeneratorFactory:
    """Creates the configured report generator."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseReportGenerator:
        """Create a configured report generator from application settings."""
        provider = settings.report_provider.lower()
        if provider == "example":
            return ReportGenerator(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
                min_text_chars=settings.report_min_text_chars,
            )
        base_url = cls._resolve_base_url(provider, settings)
        client = OpenAIClientAdapter(
            api_key=cls._provider_setting(settings, provider, "api_key"),
            timeout_seconds=cls._provider_setting(settings, provider, "timeout_seconds") or 300,
            base_url=base_url,
        )
        return ReportGenerator(
            client=client,
            model=cls._provider_setting(settings, provider, "model_name"),
            temperature=cls._resolve_temperature(provider, settings),
            min_text_chars=settings.report_min_text_chars,
        )

    @classmethod
    def supported_providers(cls) -> list[str]:
        return ["example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = (settings.report_openai_compatible_base_url or "").strip()
            if not url:
                raise ValueError(
                    "report_openai_compatible_base_url is required for "
                    "report_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        raise ValueError(
            f"Unknown report provider '{provider}'. Choose from: {cls.supported_providers()}"
        )

    @staticmethod
    def _provider_setting(settings: Settings, provider: str, name: str):  # type: ignore[no-untyped-def]
        return getattr(settings, f"report_{provider}_{name}")

    @classmethod
    def _resolve_temperature(cls, provider: str, settings: Settings) -> float:
        if provider == "openai":
            return settings.report_openai_temperature
        return 0.2
