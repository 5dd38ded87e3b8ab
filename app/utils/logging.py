"""
Logging utilities for the Document Translation proxy.

This module provides logging configuration and helpers.
"""

import logging
import json
from datetime import datetime, timezone
from typing import Dict, Any, Optional

# Create logger
logger = logging.getLogger("document_translation")


def log_event(
    event_type: str,
    resource_id: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None
) -> None:
    """
    Log an application event.

    Args:
        event_type: Type of event
        resource_id: Resource ID
        details: Event details
    """
    event = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "event_type": event_type
    }

    if resource_id:
        event["resource_id"] = resource_id

    if details:
        event["details"] = details

    logger.info(f"EVENT: {json.dumps(event)}")


def configure_logging(debug: bool = False) -> None:
    """
    Configure the root logger.

    Args:
        debug: Log at DEBUG level instead of ERROR
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.ERROR,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
