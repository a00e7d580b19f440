from pathlib import Path
from dotenv import load_dotenv
import os
import pytz
from typing import Optional

load_dotenv(Path(__file__).parent.parent / '.env', override=True)

def env_bool(name: str, default: bool = False) -> bool:
    return str(os.getenv(name, str(default))).strip().lower() in {"1", "true", "yes", "on", "y", "t"}

def env_int(name: str, default: int, minimum: Optional[int] = None) -> int:
    try:
        value = int(os.getenv(name, "").strip())
    except ValueError:
        return default
    if minimum is not None and value < minimum:
        return default
    return value

class Settings:
    # Verbose formatter diagnostics
    DEBUG = env_bool("DEBUG", False)

    # Locale used for dates, magnitude suffixes and notices
    FORMAT_LOCALE = os.getenv('FORMAT_LOCALE') or "zh_CN"

    # Timezone
    SERVER_TZ = pytz.timezone(os.getenv('SERVER_TZ')) if os.getenv('SERVER_TZ') else pytz.UTC

    # Output truncation (grapheme count)
    MAX_OUTPUT_LENGTH = env_int("MAX_OUTPUT_LENGTH", 10_000, minimum=0)

    # Logs
    LOG_LEVEL = (os.getenv('LOG_LEVEL') or ("DEBUG" if DEBUG else "INFO")).upper()
    LOGS_DIR = Path(os.getenv('LOGS_DIR')) if os.getenv('LOGS_DIR') else None
    LOG_FILE = LOGS_DIR / "formatting.log" if LOGS_DIR else None
