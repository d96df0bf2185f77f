"""
Utility functions for LLM response parsing and value coercion.
"""
import json
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional


def extract_json_from_llm_response(content: str) -> Optional[Dict[str, Any]]:
    """
    Extract JSON from LLM response, handling common formatting issues.

    Tries multiple strategies:
    1. Direct JSON parsing
    2. Markdown code block extraction (```json or ```)
    3. Find JSON object boundaries { ... }
    4. Handle trailing commas

    Returns None if no valid JSON object is found. Callers treat that as
    "no new information".

    Args:
        content: Raw LLM response text

    Returns:
        Parsed dictionary or None if extraction fails
    """
    if not content:
        return None

    content = content.strip()

    # Strategy 1: Try direct parsing
    try:
        result = json.loads(content)
        if isinstance(result, dict):
            return result
    except json.JSONDecodeError:
        pass

    # Strategy 2: Extract from markdown code blocks
    patterns = [
        r'```json\s*([\s\S]*?)\s*```',  # ```json ... ```
        r'```\s*([\s\S]*?)\s*```',       # ``` ... ```
    ]
    for pattern in patterns:
        match = re.search(pattern, content, re.DOTALL | re.IGNORECASE)
        if match:
            try:
                result = json.loads(match.group(1).strip())
                if isinstance(result, dict):
                    return result
            except json.JSONDecodeError:
                pass

    # Strategy 3: Find JSON object by braces
    start = content.find('{')
    if start != -1:
        brace_count = 0
        end = -1
        in_string = False
        escape_next = False

        for i in range(start, len(content)):
            char = content[i]

            if escape_next:
                escape_next = False
                continue

            if char == '\\':
                escape_next = True
                continue

            if char == '"':
                in_string = not in_string
                continue

            if not in_string:
                if char == '{':
                    brace_count += 1
                elif char == '}':
                    brace_count -= 1
                    if brace_count == 0:
                        end = i + 1
                        break

        if end > start:
            json_str = content[start:end]
            try:
                result = json.loads(json_str)
                if isinstance(result, dict):
                    return result
            except json.JSONDecodeError:
                # Strategy 4: Try fixing common issues
                fixed = _fix_common_json_issues(json_str)
                try:
                    result = json.loads(fixed)
                    if isinstance(result, dict):
                        return result
                except json.JSONDecodeError:
                    pass

    return None


def _fix_common_json_issues(json_str: str) -> str:
    """Remove trailing commas before } or ]."""
    return re.sub(r',\s*([}\]])', r'\1', json_str)


# "-500", "-$500", "$-500"
SIGN_BEFORE_AMOUNT = re.compile(r'(^|\s)[-\u2212+][^\w\s]?$|[^\w\s][-\u2212]$')
MAGNITUDE_SUFFIX = re.compile(
    r'\s*(k|m|mn|b|bn|thousand|million|billion|lakhs?|crores?)\b', re.IGNORECASE
)
DECIMAL_COMMA_TAIL = re.compile(r',\d')
# "1,000", "1,234,567", "1,00,000"
GROUPED_NUMBER = re.compile(r'\d{1,3}(?:,\d{2,3})*,\d{3}(?:\.\d+)?')


def parse_monetary_value(value: Any) -> Optional[float]:
    """
    Parse a monetary value from various formats to a float.

    Handles:
    - Numbers: 1000, 1000.50
    - Strings: "$1,000", "1,000.50", "approximately $1000", "INR 25,000"
    - None/empty/unknown: returns None

    Booleans, negative amounts, magnitude suffixes ("1.5k", "2 million")
    and decimal commas ("1.234,56") are not read and return None, so the
    amount is asked for again rather than stored wrong.

    Args:
        value: The value to parse

    Returns:
        Float amount, or None when the value cannot be read as a number
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float, Decimal)):
        return float(value) if value >= 0 else None

    if not isinstance(value, str):
        return None

    cleaned = value.strip()
    if not cleaned:
        return None

    if cleaned.lower() in ('n/a', 'na', 'none', 'null', 'unknown', '-'):
        return None

    # First number in the string, commas as thousands separators
    match = re.search(r'(\d[\d,]*(?:\.\d+)?)', cleaned)
    if not match:
        return None

    numeric_str = match.group(1).rstrip(',')
    prefix = cleaned[:match.start()]
    suffix = cleaned[match.start() + len(numeric_str):]

    if SIGN_BEFORE_AMOUNT.search(prefix):
        return None
    if MAGNITUDE_SUFFIX.match(suffix) or DECIMAL_COMMA_TAIL.match(suffix):
        return None
    if ',' in numeric_str and not GROUPED_NUMBER.fullmatch(numeric_str):
        return None

    numeric_str = numeric_str.replace(',', '')
    try:
        return float(Decimal(numeric_str))
    except InvalidOperation:
        return None
