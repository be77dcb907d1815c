"""
================================================================================
PATH AND FILE CONSTANTS
================================================================================
Directory names, file names and log naming used across the pipeline.
================================================================================
"""

# =============================================================================
# DIRECTORY NAMES
# =============================================================================
LOGS_DIR_NAME = "logs"
CACHE_FILE_NAME = "llm_cache.json"
DEFAULT_OUTPUT_DIR = "output"
INDEX_FILE_NAME = "index.md"

# =============================================================================
# LOG FILE FORMAT
# =============================================================================
LOG_FILE_PREFIX = "llm_calls_"
LOG_DATE_FORMAT = "%Y%m%d"  # One log file per day
