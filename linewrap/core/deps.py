"""Common dependencies and services."""

from linewrap.core.services.log import get_log_service

# Singleton logger
logger = get_log_service()
