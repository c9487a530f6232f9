# Core module exports
from jsonspec.core.config import settings, get_settings, Settings
from jsonspec.core.logging import (
    configure_logging,
    get_logger,
    bind_context,
    clear_context,
    schema_logger,
    validation_logger,
    loader_logger,
)
