"""AWS Lambda entry point.

Handler setting: ``app.lambda_function.lambda_handler``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from pydantic import ValidationError

from app.logging_config import ensure_logging
from app.models.bucket import ProxyRequest
from app.services.dependencies import get_request_handler_service
from app.services.request_handler_service import format_error


logger = logging.getLogger(__name__)


def lambda_handler(event: Any, context: Any) -> str:
    ensure_logging(reformat_handlers=False)

    try:
        request = ProxyRequest.model_validate(event if isinstance(event, dict) else {})
    except ValidationError as exc:
        message = format_error(exc)
        logger.error("%s", message)
        return message

    return asyncio.run(get_request_handler_service().handle(request))
