from .logging_config import configure_logging
from .registry import register_default_strategies, load_strategy_module
from .config import settings


def initialize() -> None:
    """Configure logging and register analysis strategies."""
    configure_logging(
        level=settings.log_level,
        fmt=settings.log_format,
        log_file=settings.log_file,
        json_format=settings.log_json,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    register_default_strategies()
    for mod in filter(None, settings.strategy_modules):
        load_strategy_module(mod)
