"""
Type Safety Utilities
Type guards for request payloads coming from the browser
"""

from typing import Any, Dict, List, Optional
import json
import logging

logger = logging.getLogger(__name__)


def safe_json_loads(json_string: Any) -> Optional[Dict[str, Any]]:
    """
    Safely parse a JSON object

    Args:
        json_string: JSON text (str or bytes)

    Returns:
        Parsed dictionary or None if parsing fails or the document is not an object
    """
    if isinstance(json_string, bytes):
        try:
            json_string = json_string.decode('utf-8')
        except UnicodeDecodeError as e:
            logger.warning(f"Request body is not UTF-8: {e}")
            return None

    if not json_string or not isinstance(json_string, str):
        return None

    try:
        result = json.loads(json_string)
        if isinstance(result, dict):
            return result
        logger.warning(f"JSON parsing returned non-dict type: {type(result)}")
        return None
    except (json.JSONDecodeError, TypeError, ValueError) as e:
        logger.warning(f"JSON parsing failed: {e}")
        return None


def safe_get_string(data: Dict[str, Any], key: str, default: str = "") -> str:
    """
    Safely get a string value from a dictionary with type validation

    Args:
        data: Dictionary to search in
        key: Key to look for
        default: Default value if key not found or value is invalid

    Returns:
        String value or default
    """
    if not isinstance(data, dict):
        return default

    value = data.get(key, default)
    if value is None:
        return default
    if not isinstance(value, str):
        return str(value)
    return value


def safe_get_list(data: Dict[str, Any], key: str, default: Optional[List[Any]] = None) -> List[Any]:
    """
    Safely get a list value from a dictionary with type validation

    Returns:
        List value or default (empty list if default is None)
    """
    if default is None:
        default = []

    if not isinstance(data, dict):
        return default

    value = data.get(key, default)
    if isinstance(value, list):
        return value
    elif isinstance(value, tuple):
        return list(value)
    return default


def safe_get_dict(data: Dict[str, Any], key: str, default: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Safely get a dictionary value from a dictionary with type validation

    Returns:
        Dictionary value or default (empty dict if default is None)
    """
    if default is None:
        default = {}

    if not isinstance(data, dict):
        return default

    value = data.get(key, default)
    if isinstance(value, dict):
        return value
    return default
