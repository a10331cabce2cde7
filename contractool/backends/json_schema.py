"""JSON Schema生成バックエンド

Type IR / Contract から JSON Schema（draft-07）ドキュメントを生成する純関数群。
I/Oは行わず、テキスト化（JSON/YAML）まで含めてメモリ上で完結する。
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

import yaml

from contractool.core.base.errors import UnhandledTypeKindError, UnsupportedFormatError
from contractool.core.base.ir import (
    ArrayType,
    Contract,
    ObjectType,
    ReferenceType,
    Type,
    TypeKind,
    UnionType,
)
from contractool.core.base.schema import (
    DEFINITIONS_POINTER,
    JsonSchemaArray,
    JsonSchemaBoolean,
    JsonSchemaDocument,
    JsonSchemaInteger,
    JsonSchemaNull,
    JsonSchemaNumber,
    JsonSchemaObject,
    JsonSchemaOneOf,
    JsonSchemaString,
    JsonSchemaType,
    JsonSchemaTypeReference,
)

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("json", "yaml")


def generate_json_schema(contract: Contract, format: str) -> str:
    """ContractからJSON Schemaテキストを生成

    Args:
        contract: 入力Contract
        format: 出力形式（"json" または "yaml"）

    Returns:
        JSON Schemaテキスト

    Raises:
        UnsupportedFormatError: 未対応の出力形式
        UnhandledTypeKindError: 未対応の型種別を含む
    """
    _ensure_supported_format(format)
    return render_json_schema(json_schema(contract), format)


def render_json_schema(document: JsonSchemaDocument, format: str) -> str:
    """JSON Schemaドキュメントをテキスト化

    Args:
        document: JSON Schemaドキュメント
        format: 出力形式（"json" または "yaml"）

    Returns:
        テキスト（キー順はドキュメントの構築順）
    """
    _ensure_supported_format(format)
    data = document.to_dict()
    if format == "json":
        return json.dumps(data, indent=2, ensure_ascii=False)
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)


def _ensure_supported_format(format: Any) -> None:
    if format not in SUPPORTED_FORMATS:
        raise UnsupportedFormatError(format)


def json_schema(contract: Contract) -> JsonSchemaDocument:
    """ContractをJSON Schemaドキュメントに変換

    同名の型定義が複数ある場合は後勝ち（警告ログを出す）。
    """
    definitions: dict[str, JsonSchemaType] = {}
    for definition in contract.types:
        if definition.name in definitions:
            logger.warning(f"Duplicate type definition '{definition.name}': the last definition wins")
        definitions[definition.name] = json_type_schema(definition.type)
    return JsonSchemaDocument(definitions=definitions)


def json_type_schema(type_: Type) -> JsonSchemaType:
    """型ノードをJSON Schemaシェイプに変換（複合型は再帰）

    Raises:
        UnhandledTypeKindError: 未対応の型種別
    """
    kind = getattr(type_, "kind", None)
    try:
        builder = _TYPE_SCHEMA_BUILDERS.get(kind)
    except TypeError:
        # ハッシュ不可能なkind
        builder = None
    if builder is None:
        raise UnhandledTypeKindError(kind)
    logger.debug(f"Compiling type node: {kind}")
    return builder(type_)


def _object_schema(type_: ObjectType) -> JsonSchemaObject:
    properties: dict[str, JsonSchemaType] = {}
    required: list[str] = []
    for prop in type_.properties:
        if not prop.optional:
            required.append(prop.name)
        properties[prop.name] = json_type_schema(prop.type)
    return JsonSchemaObject(properties=properties, required=required)


def _array_schema(type_: ArrayType) -> JsonSchemaArray:
    return JsonSchemaArray(items=json_type_schema(type_.element_type))


def _union_schema(type_: UnionType) -> JsonSchemaOneOf:
    return JsonSchemaOneOf(one_of=[json_type_schema(member) for member in type_.types])


def _reference_schema(type_: ReferenceType) -> JsonSchemaTypeReference:
    return JsonSchemaTypeReference(ref=f"{DEFINITIONS_POINTER}{type_.name}")


_TYPE_SCHEMA_BUILDERS: dict[TypeKind, Callable[[Any], JsonSchemaType]] = {
    TypeKind.NULL: lambda type_: JsonSchemaNull(),
    TypeKind.BOOLEAN: lambda type_: JsonSchemaBoolean(),
    TypeKind.BOOLEAN_LITERAL: lambda type_: JsonSchemaBoolean(const=type_.value),
    TypeKind.DATE: lambda type_: JsonSchemaString(),
    TypeKind.DATE_TIME: lambda type_: JsonSchemaString(),
    TypeKind.STRING: lambda type_: JsonSchemaString(),
    TypeKind.STRING_LITERAL: lambda type_: JsonSchemaString(const=type_.value),
    TypeKind.FLOAT: lambda type_: JsonSchemaNumber(),
    TypeKind.DOUBLE: lambda type_: JsonSchemaNumber(),
    TypeKind.FLOAT_LITERAL: lambda type_: JsonSchemaNumber(const=type_.value),
    TypeKind.INT32: lambda type_: JsonSchemaInteger(),
    TypeKind.INT64: lambda type_: JsonSchemaInteger(),
    TypeKind.INT_LITERAL: lambda type_: JsonSchemaInteger(const=type_.value),
    TypeKind.OBJECT: _object_schema,
    TypeKind.ARRAY: _array_schema,
    TypeKind.UNION: _union_schema,
    TypeKind.REFERENCE: _reference_schema,
}


def _check_exhaustive(builders: dict[TypeKind, Callable[[Any], JsonSchemaType]]) -> None:
    """全てのTypeKindに変換関数が登録されているか検査（モジュール構築時）"""
    missing = [kind.value for kind in TypeKind if kind not in builders]
    if missing:
        raise UnhandledTypeKindError(", ".join(missing))


_check_exhaustive(_TYPE_SCHEMA_BUILDERS)
