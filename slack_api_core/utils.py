"""
Utilities - pure functions for text handling and request argument mappings.
"""

import json
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union
from urllib.parse import urlencode

from .errors import InvalidContentError

_WHITESPACE = re.compile(r"\s+")
_WORD_TOKEN = re.compile(r"\w+")


def parse_json(text: Optional[str]) -> Union[Dict, List]:
    """
    Parse JSON text that must hold an object or an array.

    Args:
        text: JSON text; empty, None or "0" yields {}

    Returns:
        The decoded dict or list

    Raises:
        InvalidContentError: text is not valid JSON or decodes to a scalar
    """
    if not text or text == "0":
        return {}

    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise InvalidContentError("Invalid JSON content") from e

    if not isinstance(data, (dict, list)):
        raise InvalidContentError("Invalid JSON content")
    return data


def remove_substring(to_remove: str, subject: str) -> str:
    """Remove every occurrence of to_remove, then collapse and trim whitespace."""
    return _WHITESPACE.sub(" ", subject.replace(to_remove, "")).strip()


def contains_word(word: str, subject: str) -> bool:
    """True if word appears in subject as a whole word (case-sensitive)."""
    return re.search(rf"\b{re.escape(word)}\b", subject) is not None


def snake_to_title_case(text: str) -> str:
    """Convert snake case to title case, e.g. admin_user becomes AdminUser."""
    words = text.replace("_", " ").split(" ")
    return "".join(word[:1].upper() + word[1:] for word in words)


def is_word1_followed_by_word2(
    subject: str,
    word1: str,
    word2: str,
    exceptions: Optional[Iterable[str]] = None,
    max_gap: int = 2,
) -> bool:
    """
    Check whether word1 is followed by word2 with at most max_gap words between.

    Words in between must be plain word tokens. A word in between that ends
    with one of the exceptions breaks the match, so "turn it off on" does not
    pair "turn" with "on" when "off" is an exception.

    Args:
        subject: Text to search
        word1: Leading word, matched at the end of a token, e.g. "(turn"
        word2: Trailing word, matched at the start of a token up to a word boundary
        exceptions: Words that may not appear between word1 and word2
        max_gap: Max number of words allowed between the two

    Returns:
        True if a matching pair is found
    """
    tokens = subject.split()
    blocked = tuple(e for e in (exceptions or ()) if e)
    word1_pattern = re.compile(rf"(?:^|\W){re.escape(word1)}$")
    word2_pattern = re.compile(rf"{re.escape(word2)}\b")

    for start, token in enumerate(tokens):
        if not word1_pattern.search(token):
            continue

        for gap in range(max_gap + 1):
            end = start + 1 + gap
            if end >= len(tokens):
                break
            if gap and not _is_gap_word(tokens[end - 1], blocked):
                # A longer window would still contain this word
                break
            if word2_pattern.match(tokens[end]):
                return True

    return False


def _is_gap_word(token: str, blocked: tuple) -> bool:
    return _WORD_TOKEN.fullmatch(token) is not None and not token.endswith(blocked)


def has_value(key: str, mapping: Mapping[str, Any]) -> bool:
    """True if key is present and not None. Falsy values like "" or 0 count."""
    return mapping.get(key) is not None


def filter_mapping(mapping: Mapping[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    """Return the subset of mapping whose keys are in keys."""
    allowed = set(keys)
    return {key: value for key, value in mapping.items() if key in allowed}


def encode_form_body(arguments: Mapping[str, Any]) -> str:
    """
    Encode arguments as an application/x-www-form-urlencoded body.

    None values are dropped, booleans become "1"/"0", dicts and lists
    (e.g. chat.postMessage attachments) are sent as JSON strings.
    """
    pairs = []
    for key, value in arguments.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "1" if value else "0"
        elif isinstance(value, (dict, list, tuple)):
            value = json.dumps(value)
        pairs.append((key, value))
    return urlencode(pairs)
