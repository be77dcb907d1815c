"""
================================================================================
TUTORIAL FLOW - LLM GATEWAY
================================================================================
Text in, text out: the only place the pipeline talks to a language model.

PROVIDER PRIORITY (checked in this order):
==========================================
1. OPENAI_API_KEY     → Uses OpenAI API
2. GEMINI_API_KEY     → Uses Google Gemini API
3. GEMINI_PROJECT_ID  → Uses Vertex AI (requires ADC setup)
4. OPENROUTER_API_KEY → Uses OpenRouter (access to many models)
5. LLM_API_BASE_URL   → Uses any OpenAI-compatible API (Ollama, etc.)

CACHING:
========
Responses are cached in llm_cache.json (override with LLM_CACHE_FILE), keyed
by the exact prompt. The whole file is read before a lookup and rewritten
after a new entry, so concurrent runs follow last-writer-wins.

LOGGING:
========
Every call, cache hit or not, is appended to logs/llm_calls_YYYYMMDD.log
(override the directory with LOG_DIR). Failing to log never fails a call.

The gateway never retries. Provider errors go back to the calling step,
which owns the retry policy.
================================================================================
"""

import json
import logging
import os
import sys
import threading
import time
from datetime import datetime

import requests
from dotenv import load_dotenv

from constants.llm import (
    LLM_PROVIDER_OPENAI,
    LLM_PROVIDER_GEMINI,
    LLM_PROVIDER_OPENROUTER,
    LLM_PROVIDER_GENERIC,
    ENV_OPENAI_API_KEY,
    ENV_OPENAI_MODEL,
    ENV_GEMINI_API_KEY,
    ENV_GEMINI_PROJECT_ID,
    ENV_GEMINI_LOCATION,
    ENV_GEMINI_MODEL,
    ENV_OPENROUTER_API_KEY,
    ENV_OPENROUTER_MODEL,
    ENV_OPENROUTER_REFERER,
    ENV_OPENROUTER_TITLE,
    ENV_LLM_API_BASE_URL,
    ENV_LLM_API_KEY,
    ENV_LLM_MODEL,
    ENV_LOG_DIR,
    ENV_LLM_CACHE_FILE,
    DEFAULT_OPENAI_MODEL,
    DEFAULT_GEMINI_MODEL,
    DEFAULT_GEMINI_LOCATION,
    DEFAULT_OPENROUTER_MODEL,
    DEFAULT_GENERIC_MODEL,
    DEFAULT_GENERIC_BASE_URL,
    OPENROUTER_API_URL,
    DEFAULT_TEMPERATURE,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_OPENROUTER_REFERER,
    DEFAULT_OPENROUTER_TITLE,
)
from constants.paths import (
    LOGS_DIR_NAME,
    CACHE_FILE_NAME,
    LOG_FILE_PREFIX,
    LOG_DATE_FORMAT,
)
from pipeline.errors import LLMProviderError

load_dotenv()

# Diagnostics about the gateway itself (cache/log trouble) go here
logger = logging.getLogger(__name__)

# Transcripts of prompts and responses go to a dedicated file logger
call_logger = logging.getLogger("llm_logger")
call_logger.setLevel(logging.INFO)
call_logger.propagate = False  # Keep transcripts out of the console

# Logs and cache live next to the project, not the current working directory
_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Guards the read-modify-write of the cache file within one process
_cache_lock = threading.Lock()


# =============================================================================
# CALL LOG
# =============================================================================
def get_log_file() -> str:
    """Path of today's call log."""
    log_directory = os.getenv(ENV_LOG_DIR, os.path.join(_PACKAGE_DIR, LOGS_DIR_NAME))
    return os.path.join(
        log_directory, f"{LOG_FILE_PREFIX}{datetime.now().strftime(LOG_DATE_FORMAT)}.log"
    )


def _get_call_logger() -> logging.Logger:
    """
    Point the transcript logger at today's file.

    The handler is swapped when the date (or LOG_DIR) changes, so a long run
    that crosses midnight starts a new file.
    """
    log_file = os.path.abspath(get_log_file())
    for handler in list(call_logger.handlers):
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == log_file:
            return call_logger
        call_logger.removeHandler(handler)
        handler.close()

    os.makedirs(os.path.dirname(log_file), exist_ok=True)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    )
    call_logger.addHandler(file_handler)
    return call_logger


def _log_call(message: str) -> None:
    try:
        _get_call_logger().info(message)
    except Exception as e:
        logger.warning("Failed to write LLM call log: %s", e)


# =============================================================================
# CACHE
# =============================================================================
def get_cache_file() -> str:
    return os.getenv(ENV_LLM_CACHE_FILE, os.path.join(_PACKAGE_DIR, CACHE_FILE_NAME))


def load_cache() -> dict:
    """
    Load the prompt -> response cache from disk.

    Returns:
        dict: The cache dictionary, or empty dict if missing or unreadable
    """
    cache_file = get_cache_file()
    if os.path.exists(cache_file):
        try:
            with open(cache_file, "r", encoding="utf-8") as f:
                return json.load(f)
        except Exception as e:
            logger.warning("Failed to load cache: %s", e)
    return {}


def save_cache(cache: dict) -> None:
    """Rewrite the whole cache file."""
    try:
        with open(get_cache_file(), "w", encoding="utf-8") as f:
            json.dump(cache, f, indent=2)
    except Exception as e:
        logger.warning("Failed to save cache: %s", e)


# =============================================================================
# PROVIDER DETECTION
# =============================================================================
def get_llm_provider() -> str:
    """
    Determine which LLM provider to use based on environment variables.

    The FIRST provider with a valid key wins.

    Returns:
        str: "OPENAI", "GEMINI", "OPENROUTER", or "GENERIC"

    Raises:
        ValueError: If no provider is configured
    """
    if os.getenv(ENV_OPENAI_API_KEY):
        return LLM_PROVIDER_OPENAI
    elif os.getenv(ENV_GEMINI_API_KEY) or os.getenv(ENV_GEMINI_PROJECT_ID):
        return LLM_PROVIDER_GEMINI
    elif os.getenv(ENV_OPENROUTER_API_KEY):
        return LLM_PROVIDER_OPENROUTER
    elif os.getenv(ENV_LLM_API_BASE_URL):
        return LLM_PROVIDER_GENERIC
    else:
        raise ValueError(
            f"No LLM provider configured. Set one of: "
            f"{ENV_OPENAI_API_KEY}, {ENV_GEMINI_API_KEY}, {ENV_GEMINI_PROJECT_ID}, "
            f"{ENV_OPENROUTER_API_KEY}, or {ENV_LLM_API_BASE_URL}"
        )


# =============================================================================
# MAIN LLM CALLING FUNCTION
# =============================================================================
def call_llm(prompt: str, use_cache: bool = True) -> str:
    """
    Send one prompt to the configured provider and return its text.

    Args:
        prompt: The prompt to send; also the exact cache key
        use_cache: Look up and store the response in the cache.
                   Steps pass False on retries to force a fresh answer.

    Returns:
        str: The LLM response text

    Raises:
        ValueError: If no provider is configured
        LLMProviderError: If an HTTP provider request fails
    """
    start_time = time.time()
    _log_call(f"PROMPT: {prompt}")

    if use_cache:
        cache = load_cache()
        if prompt in cache:
            response_text = cache[prompt]
            _log_call(f"CACHE HIT: {response_text}")
            print("  💾 Cache HIT")
            return response_text

    response_text = _call_provider(prompt)

    elapsed = time.time() - start_time
    time_str = f"{elapsed/60:.1f}m" if elapsed >= 60 else f"{elapsed:.1f}s"

    _log_call(f"RESPONSE: {response_text}")
    print(f"  ✓ {len(response_text):,} chars ({time_str})")

    if use_cache:
        # Re-read so entries written meanwhile by other steps are kept
        with _cache_lock:
            cache = load_cache()
            cache[prompt] = response_text
            save_cache(cache)

    return response_text


def _call_provider(prompt: str) -> str:
    provider = get_llm_provider()
    print(f"  ☁️  {provider}...", end=" ", flush=True)

    # This order must match the priority in get_llm_provider()
    if provider == LLM_PROVIDER_OPENAI:
        return _call_llm_openai(prompt)
    elif provider == LLM_PROVIDER_GEMINI:
        return _call_llm_gemini(prompt)
    elif provider == LLM_PROVIDER_OPENROUTER:
        return _call_llm_openrouter(prompt)
    return _call_llm_generic(prompt)


# =============================================================================
# PROVIDER-SPECIFIC IMPLEMENTATIONS
# =============================================================================

def _call_llm_openai(prompt: str) -> str:
    """
    Call OpenAI using the official SDK.

    Environment variables:
    - OPENAI_API_KEY: Required
    - OPENAI_MODEL: Optional (default: gpt-4o)
    """
    from openai import OpenAI

    client = OpenAI(api_key=os.getenv(ENV_OPENAI_API_KEY))
    response = client.chat.completions.create(
        model=os.getenv(ENV_OPENAI_MODEL, DEFAULT_OPENAI_MODEL),
        messages=[{"role": "user", "content": prompt}],
        temperature=DEFAULT_TEMPERATURE,
    )
    return response.choices[0].message.content


def _call_llm_gemini(prompt: str) -> str:
    """
    Call Google Gemini, by API key or through Vertex AI.

    The API key is checked FIRST so Vertex AI credentials are only needed
    when no key is set.
    """
    from google import genai

    if os.getenv(ENV_GEMINI_API_KEY):
        client = genai.Client(api_key=os.getenv(ENV_GEMINI_API_KEY))
    else:
        client = genai.Client(
            vertexai=True,
            project=os.getenv(ENV_GEMINI_PROJECT_ID),
            location=os.getenv(ENV_GEMINI_LOCATION, DEFAULT_GEMINI_LOCATION),
        )

    response = client.models.generate_content(
        model=os.getenv(ENV_GEMINI_MODEL, DEFAULT_GEMINI_MODEL),
        contents=[prompt],
    )
    return response.text


def _post_chat_completion(url: str, headers: dict, model: str, prompt: str) -> str:
    payload = {
        "model": model,
        "messages": [{"role": "user", "content": prompt}],
        "temperature": DEFAULT_TEMPERATURE,
    }
    try:
        response = requests.post(url, headers=headers, json=payload, timeout=DEFAULT_REQUEST_TIMEOUT)
        response.raise_for_status()
        return response.json()["choices"][0]["message"]["content"]
    except requests.exceptions.RequestException as e:
        raise LLMProviderError(f"Error calling LLM API at {url}: {e}") from e


def _call_llm_openrouter(prompt: str) -> str:
    """
    Call OpenRouter, a gateway to many hosted models.

    Environment variables:
    - OPENROUTER_API_KEY: Required
    - OPENROUTER_MODEL: Optional (default: openai/gpt-4o)
    - OPENROUTER_REFERER / OPENROUTER_TITLE: Optional tracking headers
    """
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {os.getenv(ENV_OPENROUTER_API_KEY)}",
        "HTTP-Referer": os.getenv(ENV_OPENROUTER_REFERER, DEFAULT_OPENROUTER_REFERER),
        "X-Title": os.getenv(ENV_OPENROUTER_TITLE, DEFAULT_OPENROUTER_TITLE),
    }
    model = os.getenv(ENV_OPENROUTER_MODEL, DEFAULT_OPENROUTER_MODEL)
    return _post_chat_completion(OPENROUTER_API_URL, headers, model, prompt)


def _call_llm_generic(prompt: str) -> str:
    """
    Call any OpenAI-compatible server (Ollama, LM Studio, vLLM, ...).

    Environment variables:
    - LLM_API_BASE_URL: The base URL (default: http://localhost:11434)
    - LLM_API_KEY: Optional, not needed for local models
    - LLM_MODEL: Optional (default: llama3.2)
    """
    base_url = os.getenv(ENV_LLM_API_BASE_URL, DEFAULT_GENERIC_BASE_URL)
    url = f"{base_url.rstrip('/')}/v1/chat/completions"

    headers = {"Content-Type": "application/json"}
    api_key = os.getenv(ENV_LLM_API_KEY, "")
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"

    model = os.getenv(ENV_LLM_MODEL, DEFAULT_GENERIC_MODEL)
    return _post_chat_completion(url, headers, model, prompt)


if __name__ == "__main__":
    # Quick check that the configured provider answers:
    #     python -m utils.call_llm
    try:
        print(f"Using LLM provider: {get_llm_provider()}")
        print(f"Response: {call_llm('Say hello in one sentence.', use_cache=False)}")
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)
