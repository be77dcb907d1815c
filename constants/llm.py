"""
================================================================================
LLM PROVIDER CONSTANTS
================================================================================
Provider names, environment variable names, model defaults and retry budgets
for every step that talks to an LLM.

PROVIDER PRIORITY (checked in this order):
==========================================
1. OPENAI_API_KEY     → Uses OpenAI API
2. GEMINI_API_KEY     → Uses Google Gemini API
3. GEMINI_PROJECT_ID  → Uses Vertex AI (requires ADC setup)
4. OPENROUTER_API_KEY → Uses OpenRouter (access to many models)
5. LLM_API_BASE_URL   → Uses any OpenAI-compatible API (Ollama, etc.)
================================================================================
"""

# =============================================================================
# LLM PROVIDER NAMES
# =============================================================================
LLM_PROVIDER_OPENAI = "OPENAI"
LLM_PROVIDER_GEMINI = "GEMINI"
LLM_PROVIDER_OPENROUTER = "OPENROUTER"
LLM_PROVIDER_GENERIC = "GENERIC"

# =============================================================================
# ENVIRONMENT VARIABLE NAMES
# =============================================================================
# OpenAI
ENV_OPENAI_API_KEY = "OPENAI_API_KEY"
ENV_OPENAI_MODEL = "OPENAI_MODEL"

# Gemini / Vertex AI
ENV_GEMINI_API_KEY = "GEMINI_API_KEY"
ENV_GEMINI_PROJECT_ID = "GEMINI_PROJECT_ID"
ENV_GEMINI_LOCATION = "GEMINI_LOCATION"
ENV_GEMINI_MODEL = "GEMINI_MODEL"

# OpenRouter
ENV_OPENROUTER_API_KEY = "OPENROUTER_API_KEY"
ENV_OPENROUTER_MODEL = "OPENROUTER_MODEL"
ENV_OPENROUTER_REFERER = "OPENROUTER_REFERER"
ENV_OPENROUTER_TITLE = "OPENROUTER_TITLE"

# Generic OpenAI-compatible API
ENV_LLM_API_BASE_URL = "LLM_API_BASE_URL"
ENV_LLM_API_KEY = "LLM_API_KEY"
ENV_LLM_MODEL = "LLM_MODEL"

# Logging and cache locations
ENV_LOG_DIR = "LOG_DIR"
ENV_LLM_CACHE_FILE = "LLM_CACHE_FILE"

# =============================================================================
# DEFAULT MODEL VALUES
# =============================================================================
DEFAULT_OPENAI_MODEL = "gpt-4o"
DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
DEFAULT_GEMINI_LOCATION = "us-central1"
DEFAULT_OPENROUTER_MODEL = "openai/gpt-4o"
DEFAULT_GENERIC_MODEL = "llama3.2"
DEFAULT_GENERIC_BASE_URL = "http://localhost:11434"

# =============================================================================
# API URLs
# =============================================================================
OPENROUTER_API_URL = "https://openrouter.ai/api/v1/chat/completions"

# =============================================================================
# LLM CONFIGURATION
# =============================================================================
DEFAULT_TEMPERATURE = 0.7  # Balanced creativity vs consistency
DEFAULT_REQUEST_TIMEOUT = 300  # Seconds per HTTP request

# =============================================================================
# RETRY CONFIGURATION
# =============================================================================
# Steps that call the LLM get a retry budget; local steps run once.
DEFAULT_LLM_MAX_RETRIES = 3  # Total attempts, not extra retries
DEFAULT_LLM_RETRY_WAIT = 10  # Seconds between attempts

# =============================================================================
# APP METADATA (for OpenRouter tracking)
# =============================================================================
DEFAULT_OPENROUTER_REFERER = "https://github.com"
DEFAULT_OPENROUTER_TITLE = "Tutorial Flow"
