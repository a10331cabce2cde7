"""JSON Schema（draft-07）シェイプ定義

バックエンドが生成するスキーマノードのインメモリ表現。
各シェイプは to_dict() で draft-07 のキーワード構造に変換される。
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Union

DRAFT_07_SCHEMA = "http://json-schema.org/draft-07/schema#"
DEFINITIONS_POINTER = "#/definitions/"


def _with_const(schema_type: str, const: Any) -> dict[str, Any]:
    """type と（設定されていれば）const を持つ辞書を返す"""
    result: dict[str, Any] = {"type": schema_type}
    if const is not None:
        result["const"] = const
    return result


@dataclass(frozen=True)
class JsonSchemaObject:
    """objectシェイプ

    Attributes:
        properties: プロパティ名→シェイプ（宣言順）
        required: 必須プロパティ名（宣言順）
    """

    properties: Mapping[str, JsonSchemaType] = field(default_factory=dict)
    required: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # 構築後は読み取り専用（入力のdict/listとも共有しない）
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))
        object.__setattr__(self, "required", tuple(self.required))

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {name: prop.to_dict() for name, prop in self.properties.items()},
            "required": list(self.required),
        }


@dataclass(frozen=True)
class JsonSchemaArray:
    """arrayシェイプ"""

    items: JsonSchemaType

    def to_dict(self) -> dict[str, Any]:
        return {"type": "array", "items": self.items.to_dict()}


@dataclass(frozen=True)
class JsonSchemaOneOf:
    """oneOfシェイプ"""

    one_of: tuple[JsonSchemaType, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "one_of", tuple(self.one_of))

    def to_dict(self) -> dict[str, Any]:
        return {"oneOf": [member.to_dict() for member in self.one_of]}


@dataclass(frozen=True)
class JsonSchemaNull:
    def to_dict(self) -> dict[str, Any]:
        return {"type": "null"}


@dataclass(frozen=True)
class JsonSchemaBoolean:
    const: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        return _with_const("boolean", self.const)


@dataclass(frozen=True)
class JsonSchemaString:
    const: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _with_const("string", self.const)


@dataclass(frozen=True)
class JsonSchemaNumber:
    const: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return _with_const("number", self.const)


@dataclass(frozen=True)
class JsonSchemaInteger:
    const: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return _with_const("integer", self.const)


@dataclass(frozen=True)
class JsonSchemaTypeReference:
    """名前付き定義への参照（"#/definitions/<name>"）"""

    ref: str

    def to_dict(self) -> dict[str, Any]:
        return {"$ref": self.ref}


JsonSchemaType = Union[
    JsonSchemaObject,
    JsonSchemaArray,
    JsonSchemaOneOf,
    JsonSchemaNull,
    JsonSchemaBoolean,
    JsonSchemaString,
    JsonSchemaNumber,
    JsonSchemaInteger,
    JsonSchemaTypeReference,
]


@dataclass(frozen=True)
class JsonSchemaDocument:
    """JSON Schemaドキュメント

    Attributes:
        definitions: 型名→シェイプ（Contractの宣言順）
        schema: $schema に出力するスキーマバージョン
    """

    definitions: Mapping[str, JsonSchemaType] = field(default_factory=dict)
    schema: str = DRAFT_07_SCHEMA

    def __post_init__(self) -> None:
        object.__setattr__(self, "definitions", MappingProxyType(dict(self.definitions)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "$schema": self.schema,
            "definitions": {name: shape.to_dict() for name, shape in self.definitions.items()},
        }
