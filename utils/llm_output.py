"""
Parsing of structured (YAML) answers from the LLM.

Every response is untrusted text. These helpers either return the requested
shape or raise MalformedResponseError, which steps treat as transient and
retry with a fresh (uncached) call.
"""

import yaml

from pipeline.errors import MalformedResponseError


def extract_yaml_block(response: str) -> str:
    """
    Pull the YAML payload out of an LLM response.

    Prefers a ```yaml fenced block, then any fenced block, then the raw text.
    """
    yaml_str = ""
    if "```yaml" in response:
        yaml_str = response.split("```yaml", 1)[1].split("```", 1)[0].strip()

    if not yaml_str and "```" in response:
        parts = response.split("```")
        if len(parts) >= 3:
            yaml_str = parts[1].strip()
            first_line, _, rest = yaml_str.partition("\n")
            if first_line.strip() in ("yaml", "yml"):
                yaml_str = rest.strip()

    if not yaml_str:
        yaml_str = response.strip()

    if not yaml_str:
        raise MalformedResponseError("LLM response is empty")
    return yaml_str


def load_yaml_response(response: str, expected_type: type):
    """
    Parse the YAML in a response and check its top-level type.

    Args:
        response: Raw LLM text
        expected_type: list or dict

    Raises:
        MalformedResponseError: unparsable YAML or wrong top-level type
    """
    yaml_str = extract_yaml_block(response)
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as e:
        raise MalformedResponseError(f"LLM output is not valid YAML: {e}") from e

    if not isinstance(data, expected_type):
        raise MalformedResponseError(
            f"LLM output is not a {expected_type.__name__}: {type(data).__name__}"
        )
    return data


def parse_index(entry) -> int:
    """
    Read an index written as ``3``, ``"3"`` or ``"3 # Name"``.

    Raises:
        MalformedResponseError: if no integer can be read
    """
    if isinstance(entry, bool):
        raise MalformedResponseError(f"Could not parse index from entry: {entry}")
    if isinstance(entry, int):
        return entry
    try:
        return int(str(entry).split("#")[0].strip())
    except (ValueError, TypeError):
        raise MalformedResponseError(f"Could not parse index from entry: {entry}")
