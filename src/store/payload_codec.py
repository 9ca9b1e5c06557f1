"""Primary and fallback payload codecs.

YAML is the primary, operator-editable format. JSON is the fallback
used only when the YAML encoder cannot represent a payload. JSON output
stays readable by the YAML decoder, so files keep their ``.yml`` name.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

import yaml
from yaml.representer import RepresenterError

from core.errors import DataDecodeError

_SCALAR_KEY_TYPES = (str, int, float, bool, type(None))


class _PrimaryDumper(yaml.SafeDumper):
    """Safe dumper limited to what ``yaml.safe_load`` reads back as written."""


def _reject_tuple(dumper: yaml.SafeDumper, data: tuple[Any, ...]) -> yaml.Node:
    raise RepresenterError("cannot represent a tuple without turning it into a list", data)


def _represent_scalar_key_dict(dumper: yaml.SafeDumper, data: dict[Any, Any]) -> yaml.Node:
    for key in data:
        if not isinstance(key, _SCALAR_KEY_TYPES):
            raise RepresenterError("cannot represent a mapping with a non-scalar key", key)
    return dumper.represent_dict(data)


_PrimaryDumper.add_representer(tuple, _reject_tuple)
_PrimaryDumper.add_representer(dict, _represent_scalar_key_dict)


def encode_yaml(payload: Mapping[str, Any]) -> str:
    """Encode a payload as block-style YAML in insertion order.

    Tuples and mappings with non-scalar keys are rejected, since the safe
    loader would read them back as lists or fail on unhashable keys.

    Raises:
        yaml.YAMLError: If a value has no faithful safe YAML representation.
    """
    return yaml.dump(
        dict(payload),
        Dumper=_PrimaryDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def encode_json(payload: Mapping[str, Any], indent: int) -> str:
    """Encode a payload as pretty-printed JSON.

    Tuples and sets become arrays. Mappings whose keys are not all scalars
    become a flat ``[key1, value1, key2, value2, ...]`` array.

    Args:
        payload: Payload mapping to encode.
        indent: Indentation width.

    Returns:
        JSON text terminated by a newline.

    Raises:
        TypeError: If a value is not JSON serializable.
    """
    compatible_payload = _to_json_compatible(payload)
    return json.dumps(compatible_payload, indent=indent, ensure_ascii=False) + "\n"


def decode_yaml(text: str, source: str) -> dict[str, Any]:
    """Decode YAML (or JSON) text into a payload mapping.

    Args:
        text: Raw file text.
        source: Human-readable origin used in error messages.

    Returns:
        Decoded payload; empty when the text holds only comments.

    Raises:
        DataDecodeError: If text is not valid YAML or not a mapping.
    """
    try:
        payload = yaml.safe_load(text)
    except yaml.YAMLError as error:
        raise DataDecodeError(
            f"Failed to parse plugin data at {source}: {error}. "
            "Fix the YAML syntax or empty the file to restore defaults."
        ) from error
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise DataDecodeError(
            f"Invalid plugin data at {source}: expected a mapping at top level, "
            f"got {type(payload).__name__}. Empty the file to restore defaults."
        )
    return dict(payload)


def mapping_from_payload(raw_value: object) -> dict[Any, Any]:
    """Decode a mapping value written either as a mapping or a flat array.

    Flat arrays come from fallback JSON output of structured-key mappings.
    List keys are turned into tuples so they stay hashable.

    Raises:
        DataDecodeError: If the value is neither form.
    """
    if isinstance(raw_value, Mapping):
        return dict(raw_value)
    if isinstance(raw_value, list) and len(raw_value) % 2 == 0:
        keys = raw_value[0::2]
        values = raw_value[1::2]
        return {_hashable(key): value for key, value in zip(keys, values)}
    raise DataDecodeError(
        "Invalid mapping value: expected a mapping or a flat key/value array, "
        f"got {type(raw_value).__name__}."
    )


def _to_json_compatible(value: Any) -> Any:
    if isinstance(value, Mapping):
        if all(isinstance(key, _SCALAR_KEY_TYPES) for key in value):
            return {key: _to_json_compatible(item) for key, item in value.items()}
        flattened: list[Any] = []
        for key, item in value.items():
            flattened.append(_to_json_compatible(key))
            flattened.append(_to_json_compatible(item))
        return flattened
    if isinstance(value, (list, tuple)):
        return [_to_json_compatible(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return [_to_json_compatible(item) for item in sorted(value, key=repr)]
    return value


def _hashable(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_hashable(item) for item in value)
    if isinstance(value, Mapping):
        return tuple((_hashable(key), _hashable(item)) for key, item in value.items())
    return value
