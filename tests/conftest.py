import logging
import os

import pytest

# Settings are read once at import; pin the defaults the tests assume
for name in ("FORMAT_LOCALE", "SERVER_TZ", "MAX_OUTPUT_LENGTH", "LOG_LEVEL", "LOGS_DIR", "DEBUG"):
    os.environ.pop(name, None)


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
