"""Structured text codecs for configuration records."""

import json
from pathlib import Path
from typing import Any, Protocol, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from configstore.config.exceptions import DecodeError

ModelT = TypeVar("ModelT", bound=BaseModel)

YAML_SUFFIXES = {".yaml", ".yml"}


class Codec(Protocol):
    """Protocol for encoding records to text and decoding them back."""

    def encode(self, config: BaseModel) -> str:
        """Encode a record as pretty-printed text."""
        ...

    def decode(self, text: str, config_class: type[ModelT]) -> ModelT:
        """Decode text into a record of ``config_class``."""
        ...


def _to_mapping(config: BaseModel) -> dict[str, Any]:
    return config.model_dump(mode="json", by_alias=True)


def _from_mapping(data: Any, config_class: type[ModelT]) -> ModelT:
    """Validate a parsed document against the record shape."""
    if data is None:
        raise DecodeError("file is empty or decodes to null")
    if not isinstance(data, dict):
        raise DecodeError(f"expected a mapping at the top level, got {type(data).__name__}")

    try:
        return config_class.model_validate(data, context={"decoding": True})
    except ValidationError as e:
        raise DecodeError(str(e)) from e


class JsonCodec:
    """JSON with two-space indentation."""

    indent = 2

    def encode(self, config: BaseModel) -> str:
        return json.dumps(_to_mapping(config), indent=self.indent, ensure_ascii=False) + "\n"

    def decode(self, text: str, config_class: type[ModelT]) -> ModelT:
        if not text.strip():
            raise DecodeError("file is empty")
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodeError(f"malformed JSON: {e}") from e
        return _from_mapping(data, config_class)


class YamlCodec:
    """Block-style YAML, keys kept in field order."""

    def encode(self, config: BaseModel) -> str:
        return yaml.dump(
            _to_mapping(config), default_flow_style=False, sort_keys=False, allow_unicode=True
        )

    def decode(self, text: str, config_class: type[ModelT]) -> ModelT:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DecodeError(f"malformed YAML: {e}") from e
        return _from_mapping(data, config_class)


def codec_for_path(path: Path) -> Codec:
    """Pick a codec from the file suffix: YAML for .yaml/.yml, JSON otherwise."""
    if path.suffix.lower() in YAML_SUFFIXES:
        return YamlCodec()
    return JsonCodec()
