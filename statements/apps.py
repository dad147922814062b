from django.apps import AppConfig
from django.conf import settings


class StatementsConfig(AppConfig):
    name = "statements"
    verbose_name = "Billing statements"

    def ready(self) -> None:
        from statements.log_config import configure_logging

        configure_logging(
            fmt=getattr(settings, "STATEMENTS_LOG_FORMAT", "console"),
            level=getattr(settings, "STATEMENTS_LOG_LEVEL", "INFO"),
        )
