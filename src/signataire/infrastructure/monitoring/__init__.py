"""
Monitoring infrastructure.
"""

from signataire.infrastructure.monitoring.logger import (
    JSONFormatter,
    action_ctx,
    get_logger,
    setup_logging,
)

__all__ = ["JSONFormatter", "action_ctx", "get_logger", "setup_logging"]
