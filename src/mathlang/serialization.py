"""Token serialization — JSON round-trip for token streams.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Golden-file fixtures for parser tests
- Debugging and inspection

Only ``type`` and ``value`` are written; source coordinates do not take
part in token equality and are not preserved. All output is deterministic
(sorted keys).

Example:
    from mathlang import tokenize
    from mathlang.serialization import to_json, from_json

    tokens = tokenize('print "hi";')
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from mathlang.tokens import Token, TokenType


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Args:
        token: Any mathlang token.

    Returns:
        Dict with ``_type``, ``type`` (enum member name) and ``value``.

    """
    return {"_type": "Token", "type": token.type.name, "value": token.value}


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict.

    Args:
        data: Dict as produced by to_dict.

    Returns:
        Token with no source coordinates.

    Raises:
        ValueError: If ``data`` is not a dict, ``_type`` is missing or unknown,
            ``type`` is not a TokenType name, or ``value`` is missing or of the
            wrong type for the token type.

    """
    if not isinstance(data, dict):
        msg = f"Expected a serialized token dict, got {type(data).__name__}"
        raise ValueError(msg)

    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized token"
        raise ValueError(msg)
    if type_name != "Token":
        msg = f"Unknown type: {type_name!r}"
        raise ValueError(msg)

    kind = data.get("type")
    try:
        token_type = TokenType[kind]
    except (KeyError, TypeError):
        msg = f"Unknown token type: {kind!r}"
        raise ValueError(msg) from None

    if "value" not in data:
        msg = "Missing 'value' field in serialized token"
        raise ValueError(msg)
    value = data["value"]

    if token_type is TokenType.NUMBER:
        # bool is an int subclass but never a number payload
        if isinstance(value, bool) or not isinstance(value, int | float):
            msg = f"NUMBER value must be int or float, got {type(value).__name__}"
            raise ValueError(msg)
        return Token.number(value)

    if not isinstance(value, str):
        msg = f"{token_type.name} value must be str, got {type(value).__name__}"
        raise ValueError(msg)
    if token_type is TokenType.NAME:
        return Token.name(value)
    if token_type is TokenType.STRING:
        return Token.string(value)
    return Token.symbol(value)


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token stream to a JSON array.

    Args:
        tokens: Tokens to serialize (a list or a live ``Lexer.tokenize()``).
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps([to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Token]:
    """Deserialize a token stream from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        List of tokens.

    Raises:
        ValueError: If the JSON is not an array of serialized tokens.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array, got {type(raw).__name__}"
        raise ValueError(msg)
    return [from_dict(item) for item in raw]
