"""Validator: Contract IR検証

コンパイラ本体は入力を再検証しないため、生成前にここで意味論チェックを行う。
主な検証項目:
1. 型定義名の重複
2. 参照先が定義されていない参照（dangling reference）
3. オブジェクト内のプロパティ名の重複
4. 空のユニオン
5. 有限でないfloatリテラル（NaN, Infinity はJSONで表現できない）
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterator

import jsonschema

from contractool.core.base.ir import (
    ArrayType,
    Contract,
    FloatLiteralType,
    ObjectType,
    ReferenceType,
    Type,
    UnionType,
)
from contractool.core.base.schema import JsonSchemaDocument


def validate_contract(contract: Contract) -> list[str]:
    """Contract全体の意味論チェック

    Args:
        contract: 検証対象のContract

    Returns:
        エラーメッセージのリスト（空の場合はエラーなし）
    """
    errors: list[str] = []

    # 型定義名の重複
    errors.extend(_validate_duplicate_names(contract))

    # 各型定義の構造
    defined_names = {definition.name for definition in contract.types}
    for definition in contract.types:
        errors.extend(_validate_type(definition.type, definition.name, defined_names))

    return errors


def check_json_schema(document: JsonSchemaDocument) -> list[str]:
    """生成したドキュメントをdraft-07メタスキーマで検査

    Returns:
        エラーメッセージのリスト（空の場合はエラーなし）
    """
    try:
        jsonschema.Draft7Validator.check_schema(document.to_dict())
    except jsonschema.SchemaError as e:
        return [f"Generated schema is not valid draft-07: {e.message}"]
    return []


def _validate_duplicate_names(contract: Contract) -> list[str]:
    """同名の型定義をチェック"""
    counts = Counter(definition.name for definition in contract.types)
    return [
        f"Type '{name}': defined {count} times (duplicate type name)"
        for name, count in counts.items()
        if count > 1
    ]


def _validate_type(type_: Type, location: str, defined_names: set[str]) -> list[str]:
    """型ノードを再帰的にチェック"""
    errors: list[str] = []
    for node, path in _walk(type_, location):
        if isinstance(node, ReferenceType) and node.name not in defined_names:
            errors.append(f"Type '{path}': reference to undefined type '{node.name}'")
        elif isinstance(node, ObjectType):
            counts = Counter(prop.name for prop in node.properties)
            for name, count in counts.items():
                if count > 1:
                    errors.append(f"Type '{path}': duplicate property '{name}'")
        elif isinstance(node, UnionType) and not node.types:
            errors.append(f"Type '{path}': union has no member types")
        elif isinstance(node, FloatLiteralType) and not math.isfinite(node.value):
            errors.append(f"Type '{path}': float literal must be finite, got {node.value!r}")
    return errors


def _walk(type_: Type, path: str) -> Iterator[tuple[Type, str]]:
    """型ノードとその位置を深さ優先で列挙"""
    yield type_, path
    if isinstance(type_, ObjectType):
        for prop in type_.properties:
            yield from _walk(prop.type, f"{path}.{prop.name}")
    elif isinstance(type_, ArrayType):
        yield from _walk(type_.element_type, f"{path}[]")
    elif isinstance(type_, UnionType):
        for i, member in enumerate(type_.types):
            yield from _walk(member, f"{path}|{i}")
