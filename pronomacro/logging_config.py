"""
Logging setup for command-line runs.

The converter modules only call ``logging.getLogger(__name__)``; handlers and
formats are chosen here, once, by the CLI.
"""
import logging
import sys
from datetime import datetime

DEFAULT_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
DEBUG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'

CONTEXT_VALUE_LIMIT = 200


class ProgressLogger:
    """One INFO line per input converted in a multi-input run."""

    def __init__(self, total, logger=None):
        self.total = total
        self.done = 0
        self.logger = logger or logging.getLogger()

    def update(self, label, pronouns):
        self.done += 1
        self.logger.info("[%d/%d] %s: %d pronouns converted",
                         self.done, self.total, label, pronouns)


def setup_logging(log_file=None, level=logging.INFO, debug=False, stream=None):
    """
    Configure the root logger.

    Args:
        log_file: Optional path; log lines are appended to it as well.
        level: Logging level (default: INFO).
        debug: If True, forces DEBUG and adds file/line context to each line.
        stream: Console stream (default: stderr, so converted text on stdout
            stays clean).
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if debug:
        level = logging.DEBUG

    formatter = logging.Formatter(DEBUG_FORMAT if debug else DEFAULT_FORMAT)

    handlers = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    root_logger.setLevel(level)

    logging.debug("=" * 80)
    logging.debug(f"NEW RUN STARTED - {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    logging.debug("=" * 80)


def format_context(context, limit=CONTEXT_VALUE_LIMIT):
    """Render a dict as ``key=value`` pairs, cutting long values."""
    parts = []
    for key, value in context.items():
        text = str(value)
        if len(text) > limit:
            text = text[:limit] + "..."
        parts.append(f"{key}={text}")
    return ", ".join(parts)


def log_with_context(message, context=None, level=logging.DEBUG, logger=None):
    """Log ``message (key=value, ...)`` as a single record."""
    logger = logger or logging.getLogger()
    if not logger.isEnabledFor(level):
        return
    if context:
        logger.log(level, "%s (%s)", message, format_context(context))
    else:
        logger.log(level, "%s", message)
