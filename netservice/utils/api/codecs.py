# netservice/utils/api/codecs.py
# Created: 2025-02-03 19:20:47
# Author: Genterr

from typing import Any, Dict, Optional, Type, TypeVar, Union, Literal, get_args, get_origin, get_type_hints
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from enum import Enum
import base64
import dataclasses
import json
import types

from ...core.utils import to_camel_case

T = TypeVar('T')

class CodecError(Exception):
    """Raised when a value cannot be encoded or decoded"""
    pass

class KeyStrategy(Enum):
    """How dataclass field names map to JSON object keys"""
    USE_DEFAULT_KEYS = "use_default_keys"      # field names as written
    CONVERT_CAMEL_CASE = "convert_camel_case"  # snake_case fields <-> camelCase keys

class DateStrategy(Enum):
    """How datetime values are represented in JSON"""
    ISO8601 = "iso8601"
    SECONDS_SINCE_EPOCH = "seconds_since_epoch"
    MILLISECONDS_SINCE_EPOCH = "milliseconds_since_epoch"
    FORMATTED = "formatted"

def _check_date_format(strategy: DateStrategy, date_format: Optional[str]) -> None:
    if strategy is DateStrategy.FORMATTED and not date_format:
        raise ValueError("date_format is required for DateStrategy.FORMATTED")

def _wire_key(name: str, strategy: KeyStrategy) -> str:
    if strategy is KeyStrategy.CONVERT_CAMEL_CASE:
        return to_camel_case(name)
    return name

class JSONEncoder:
    """
    Serializes Python values into JSON request bodies.

    Dataclasses are encoded field by field (recursively), so models do not
    need their own ``to_dict``. Mappings, sequences, primitives, enums,
    ``datetime`` and ``bytes`` (base64) are understood; anything else is a
    CodecError.
    """

    def __init__(
        self,
        key_encoding_strategy: KeyStrategy = KeyStrategy.USE_DEFAULT_KEYS,
        date_encoding_strategy: DateStrategy = DateStrategy.ISO8601,
        date_format: Optional[str] = None,
        sort_keys: bool = False,
        indent: Optional[int] = None
    ):
        _check_date_format(date_encoding_strategy, date_format)
        self.key_encoding_strategy = key_encoding_strategy
        self.date_encoding_strategy = date_encoding_strategy
        self.date_format = date_format
        self.sort_keys = sort_keys
        self.indent = indent

    def encode(self, value: Any) -> bytes:
        """
        Encode a value to UTF-8 JSON bytes

        Args:
            value: Dataclass instance, mapping, sequence or primitive

        Returns:
            Encoded JSON document

        Raises:
            CodecError: If the value cannot be represented as JSON
        """
        try:
            document = json.dumps(
                self._to_json(value),
                sort_keys=self.sort_keys,
                indent=self.indent,
                allow_nan=False
            )
        except (TypeError, ValueError, RecursionError) as e:
            raise CodecError(f"Failed to encode {type(value).__name__}: {str(e)}") from e
        return document.encode("utf-8")

    def _to_json(self, value: Any) -> Any:
        if value is None or isinstance(value, (bool, int, float, str)):
            return value
        if isinstance(value, Enum):
            return self._to_json(value.value)
        if isinstance(value, datetime):
            return self._encode_date(value)
        if isinstance(value, (bytes, bytearray)):
            return base64.b64encode(bytes(value)).decode("ascii")
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return {
                _wire_key(f.name, self.key_encoding_strategy): self._to_json(getattr(value, f.name))
                for f in dataclasses.fields(value)
            }
        if isinstance(value, Mapping):
            encoded = {}
            for key, item in value.items():
                if not isinstance(key, str):
                    raise TypeError(f"Keys must be str, not {type(key).__name__}")
                encoded[key] = self._to_json(item)
            return encoded
        if isinstance(value, (list, tuple, set, frozenset)):
            return [self._to_json(item) for item in value]
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")

    def _encode_date(self, value: datetime) -> Union[str, float, int]:
        if self.date_encoding_strategy is DateStrategy.SECONDS_SINCE_EPOCH:
            return value.timestamp()
        if self.date_encoding_strategy is DateStrategy.MILLISECONDS_SINCE_EPOCH:
            return round(value.timestamp() * 1000)
        if self.date_encoding_strategy is DateStrategy.FORMATTED:
            return value.strftime(self.date_format)
        return value.isoformat()

class JSONDecoder:
    """
    Parses JSON response bodies into typed Python values.

    The target type drives conversion: dataclasses are built from JSON
    objects (nested dataclasses, ``Optional``, ``List``, ``Dict``, enums and
    ``datetime`` fields included), builtins are type checked, and ``None`` or
    ``Any`` returns the raw parsed JSON.
    """

    def __init__(
        self,
        key_decoding_strategy: KeyStrategy = KeyStrategy.USE_DEFAULT_KEYS,
        date_decoding_strategy: DateStrategy = DateStrategy.ISO8601,
        date_format: Optional[str] = None
    ):
        _check_date_format(date_decoding_strategy, date_format)
        self.key_decoding_strategy = key_decoding_strategy
        self.date_decoding_strategy = date_decoding_strategy
        self.date_format = date_format

    def decode(self, data: Union[bytes, str], type_: Optional[Type[T]] = None) -> T:
        """
        Decode JSON bytes into an instance of type_

        Args:
            data: Raw JSON document
            type_: Expected result type

        Returns:
            Decoded value

        Raises:
            CodecError: If the bytes are not JSON or do not fit type_
        """
        try:
            return self._convert(json.loads(data), type_)
        except (ValueError, TypeError, KeyError, AttributeError, RecursionError) as e:
            name = getattr(type_, "__name__", repr(type_))
            raise CodecError(f"Failed to decode {name}: {str(e)}") from e

    def _convert(self, value: Any, tp: Any) -> Any:
        if tp is None or tp is Any or tp is object:
            return value

        origin = get_origin(tp)
        args = get_args(tp)

        if origin is Union or origin is types.UnionType:
            return self._convert_union(value, args)
        if origin is Literal:
            if value not in args:
                raise ValueError(f"{value!r} is not one of {args!r}")
            return value
        if origin in (list, set, frozenset, tuple, Sequence):
            return self._convert_sequence(value, origin, args)
        if origin in (dict, Mapping):
            if not isinstance(value, dict):
                raise TypeError(f"Expected object, got {type(value).__name__}")
            value_type = args[1] if args else None
            return {key: self._convert(item, value_type) for key, item in value.items()}

        if tp is datetime:
            return self._decode_date(value)
        if isinstance(tp, type) and issubclass(tp, Enum):
            return tp(value)
        if dataclasses.is_dataclass(tp):
            return self._convert_dataclass(value, tp)
        if tp is bool:
            if not isinstance(value, bool):
                raise TypeError(f"Expected bool, got {type(value).__name__}")
            return value
        if tp is int:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Expected int, got {type(value).__name__}")
            return value
        if tp is float:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"Expected float, got {type(value).__name__}")
            return float(value)
        if tp is bytes:
            if not isinstance(value, str):
                raise TypeError(f"Expected base64 string, got {type(value).__name__}")
            return base64.b64decode(value, validate=True)
        if isinstance(tp, type) and isinstance(value, tp):
            return value
        raise TypeError(f"Cannot decode {type(value).__name__} into {tp!r}")

    def _convert_union(self, value: Any, args: tuple) -> Any:
        if value is None and type(None) in args:
            return None
        errors = []
        for arg in args:
            if arg is type(None):
                continue
            try:
                return self._convert(value, arg)
            except (ValueError, TypeError, KeyError) as e:
                errors.append(str(e))
        raise TypeError(f"No union member matched: {'; '.join(errors)}")

    def _convert_sequence(self, value: Any, origin: Any, args: tuple) -> Any:
        if not isinstance(value, list):
            raise TypeError(f"Expected array, got {type(value).__name__}")
        if origin is tuple:
            if len(args) == 2 and args[1] is Ellipsis:
                return tuple(self._convert(item, args[0]) for item in value)
            if args:
                if len(args) != len(value):
                    raise ValueError(f"Expected {len(args)} items, got {len(value)}")
                return tuple(self._convert(item, arg) for item, arg in zip(value, args))
            return tuple(value)
        item_type = args[0] if args else None
        items = [self._convert(item, item_type) for item in value]
        if origin in (set, frozenset):
            return origin(items)
        return items

    def _convert_dataclass(self, value: Any, tp: Any) -> Any:
        if not isinstance(value, dict):
            raise TypeError(f"Expected object for {tp.__name__}, got {type(value).__name__}")
        hints = get_type_hints(tp)
        kwargs: Dict[str, Any] = {}
        for f in dataclasses.fields(tp):
            if not f.init:
                continue
            key = _wire_key(f.name, self.key_decoding_strategy)
            if key in value:
                kwargs[f.name] = self._convert(value[key], hints.get(f.name))
            elif f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
                raise KeyError(f"Missing required key {key!r} for {tp.__name__}")
        return tp(**kwargs)

    def _decode_date(self, value: Any) -> datetime:
        strategy = self.date_decoding_strategy
        if strategy in (DateStrategy.SECONDS_SINCE_EPOCH, DateStrategy.MILLISECONDS_SINCE_EPOCH):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"Expected numeric timestamp, got {type(value).__name__}")
            if strategy is DateStrategy.MILLISECONDS_SINCE_EPOCH:
                value = value / 1000
            return datetime.fromtimestamp(value, tz=timezone.utc)
        if not isinstance(value, str):
            raise TypeError(f"Expected date string, got {type(value).__name__}")
        if strategy is DateStrategy.FORMATTED:
            return datetime.strptime(value, self.date_format)
        return datetime.fromisoformat(value)

