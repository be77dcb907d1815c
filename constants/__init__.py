"""
Tutorial Flow - Constants Package

Configuration constants, magic numbers and default values used by the
pipeline, the LLM gateway and the driver.
"""

from .llm import (
    # LLM Provider Names
    LLM_PROVIDER_OPENAI,
    LLM_PROVIDER_GEMINI,
    LLM_PROVIDER_OPENROUTER,
    LLM_PROVIDER_GENERIC,

    # Environment Variable Names
    ENV_OPENAI_API_KEY,
    ENV_GEMINI_API_KEY,
    ENV_GEMINI_PROJECT_ID,
    ENV_OPENROUTER_API_KEY,
    ENV_LLM_API_BASE_URL,
    ENV_LOG_DIR,
    ENV_LLM_CACHE_FILE,

    # Retry Configuration
    DEFAULT_LLM_MAX_RETRIES,
    DEFAULT_LLM_RETRY_WAIT,
)

from .paths import (
    LOGS_DIR_NAME,
    CACHE_FILE_NAME,
    DEFAULT_OUTPUT_DIR,
    INDEX_FILE_NAME,
    LOG_FILE_PREFIX,
    LOG_DATE_FORMAT,
)

from .defaults import (
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_LANGUAGE,
    DEFAULT_MAX_ABSTRACTIONS,
    DEFAULT_INCLUDE_PATTERNS,
    DEFAULT_EXCLUDE_PATTERNS,
    ATTRIBUTION,
)

__all__ = [
    'LLM_PROVIDER_OPENAI',
    'LLM_PROVIDER_GEMINI',
    'LLM_PROVIDER_OPENROUTER',
    'LLM_PROVIDER_GENERIC',
    'ENV_OPENAI_API_KEY',
    'ENV_GEMINI_API_KEY',
    'ENV_GEMINI_PROJECT_ID',
    'ENV_OPENROUTER_API_KEY',
    'ENV_LLM_API_BASE_URL',
    'ENV_LOG_DIR',
    'ENV_LLM_CACHE_FILE',
    'DEFAULT_LLM_MAX_RETRIES',
    'DEFAULT_LLM_RETRY_WAIT',
    'LOGS_DIR_NAME',
    'CACHE_FILE_NAME',
    'DEFAULT_OUTPUT_DIR',
    'INDEX_FILE_NAME',
    'LOG_FILE_PREFIX',
    'LOG_DATE_FORMAT',
    'DEFAULT_MAX_FILE_SIZE',
    'DEFAULT_LANGUAGE',
    'DEFAULT_MAX_ABSTRACTIONS',
    'DEFAULT_INCLUDE_PATTERNS',
    'DEFAULT_EXCLUDE_PATTERNS',
    'ATTRIBUTION',
]
