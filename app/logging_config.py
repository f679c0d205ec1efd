from __future__ import annotations

import logging


_FORMAT = "%(levelname)s: %(message)s"


def ensure_logging(*, reformat_handlers: bool = True) -> None:
    """Log at INFO with a short format.

    Reuses root handlers installed by the host and only falls back to
    `basicConfig` when there are none. With `reformat_handlers=False` existing
    handlers keep their formatter (the Lambda runtime's adds the request id).
    """

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=logging.INFO, format=_FORMAT)
        return

    root.setLevel(logging.INFO)
    if reformat_handlers:
        formatter = logging.Formatter(_FORMAT)
        for handler in root.handlers:
            handler.setFormatter(formatter)
