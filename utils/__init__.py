"""
Tutorial Flow - Utils Package
"""

from .call_llm import call_llm, get_llm_provider
from .crawl_local_files import crawl_local_files
from .llm_output import extract_yaml_block, load_yaml_response, parse_index
from .retry import RetryPolicy, RetryExhausted, retry_call

__all__ = [
    'call_llm',
    'get_llm_provider',
    'crawl_local_files',
    'extract_yaml_block',
    'load_yaml_response',
    'parse_index',
    'RetryPolicy',
    'RetryExhausted',
    'retry_call',
]
