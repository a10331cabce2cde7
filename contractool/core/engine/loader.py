"""Loader: YAML/JSON→Contract IR変換

シリアライズされたType IR（Contractファイル）を読み込み、IRに変換する。
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

import yaml

from contractool.core.base.ir import (
    SCALAR_KINDS,
    ArrayType,
    BooleanLiteralType,
    Contract,
    FloatLiteralType,
    IntLiteralType,
    ObjectType,
    Property,
    ReferenceType,
    ScalarType,
    StringLiteralType,
    Type,
    TypeDefinition,
    TypeKind,
    UnionType,
)


class ContractLoadError(ValueError):
    """Contractファイルの形式エラー"""

    pass


def load_contract(contract_path: str | Path) -> Contract:
    """YAML/JSON形式のContractを読み込み、IRに変換

    Args:
        contract_path: Contractファイルのパス

    Returns:
        Contract: 型定義IR

    Raises:
        FileNotFoundError: ファイルが存在しない
        ContractLoadError: 未対応のファイル形式、または不正なIR
    """
    contract_path = Path(contract_path)
    if not contract_path.exists():
        raise FileNotFoundError(f"Contract file not found: {contract_path}")

    with open(contract_path, encoding="utf-8") as f:
        if contract_path.suffix in {".yaml", ".yml"}:
            data = yaml.safe_load(f)
        elif contract_path.suffix == ".json":
            data = json.load(f)
        else:
            raise ContractLoadError(f"未対応のファイル形式: {contract_path.suffix}")

    return contract_from_dict(data)


def contract_from_dict(data: Any) -> Contract:
    """辞書からContractを構築

    Args:
        data: {"name": ..., "types": [{"name": ..., "type": {...}}, ...]}

    Returns:
        Contract
    """
    if not isinstance(data, dict):
        raise ContractLoadError(f"Contract must be a mapping, got {type(data).__name__}")

    types_data = data.get("types", [])
    if not isinstance(types_data, list):
        raise ContractLoadError("types: must be a list")

    definitions = []
    for i, definition_data in enumerate(types_data):
        path = f"types[{i}]"
        _require_mapping(definition_data, path)
        name = _require_key(definition_data, "name", path)
        type_data = _require_key(definition_data, "type", path)
        definitions.append(TypeDefinition(name=str(name), type=type_from_dict(type_data, f"{path}.type")))

    return Contract(types=definitions, name=data.get("name", "") or "")


def type_from_dict(data: Any, path: str = "type") -> Type:
    """型ノード辞書をIRに変換

    Args:
        data: {"kind": ..., ...} 形式の型ノード
        path: エラーメッセージ用の位置（例: "types[0].type.properties[1].type"）

    Returns:
        型ノード
    """
    _require_mapping(data, path)
    kind = _parse_kind(_require_key(data, "kind", path, allow_none=True), path)

    if kind in SCALAR_KINDS:
        return ScalarType(kind)
    if kind == TypeKind.BOOLEAN_LITERAL:
        return BooleanLiteralType(value=_literal_value(data, path, bool))
    if kind == TypeKind.STRING_LITERAL:
        return StringLiteralType(value=_literal_value(data, path, str))
    if kind == TypeKind.INT_LITERAL:
        return IntLiteralType(value=_literal_value(data, path, int))
    if kind == TypeKind.FLOAT_LITERAL:
        value = float(_literal_value(data, path, (int, float)))
        if not math.isfinite(value):
            raise ContractLoadError(f"{path}.value: float literal must be finite, got {value!r}")
        return FloatLiteralType(value=value)
    if kind == TypeKind.OBJECT:
        return ObjectType(properties=_load_properties(data.get("properties", []), path))
    if kind == TypeKind.ARRAY:
        element_data = _require_key(data, "element_type", path)
        return ArrayType(element_type=type_from_dict(element_data, f"{path}.element_type"))
    if kind == TypeKind.UNION:
        members_data = _require_key(data, "types", path)
        if not isinstance(members_data, list) or not members_data:
            raise ContractLoadError(f"{path}.types: union must have at least one member")
        return UnionType(
            types=[type_from_dict(member, f"{path}.types[{i}]") for i, member in enumerate(members_data)]
        )
    if kind == TypeKind.REFERENCE:
        return ReferenceType(name=str(_require_key(data, "name", path)))

    raise ContractLoadError(f"{path}.kind: unsupported kind '{kind.value}'")


def _parse_kind(raw_kind: Any, path: str) -> TypeKind:
    """kind文字列をTypeKindに変換"""
    # YAMLの `kind: null` はNoneとして読まれる
    if raw_kind is None:
        return TypeKind.NULL
    try:
        return TypeKind(raw_kind)
    except ValueError:
        raise ContractLoadError(f"{path}.kind: unknown kind '{raw_kind}'") from None


def _load_properties(properties_data: Any, path: str) -> list[Property]:
    """プロパティ定義を読み込み"""
    if not isinstance(properties_data, list):
        raise ContractLoadError(f"{path}.properties: must be a list")

    properties = []
    for i, prop_data in enumerate(properties_data):
        prop_path = f"{path}.properties[{i}]"
        _require_mapping(prop_data, prop_path)
        prop = Property(
            name=str(_require_key(prop_data, "name", prop_path)),
            type=type_from_dict(_require_key(prop_data, "type", prop_path), f"{prop_path}.type"),
            optional=_optional_flag(prop_data, prop_path),
        )
        properties.append(prop)
    return properties


def _literal_value(data: dict[str, Any], path: str, expected: type | tuple[type, ...]) -> Any:
    """リテラル値を取り出し、宣言された型と一致するか確認"""
    value = _require_key(data, "value", path)
    # boolはintのサブクラスなので数値リテラルでは除外する
    if not isinstance(value, expected) or (expected is not bool and isinstance(value, bool)):
        raise ContractLoadError(f"{path}.value: {value!r} does not match kind '{data.get('kind')}'")
    return value


def _require_mapping(data: Any, path: str) -> None:
    if not isinstance(data, dict):
        raise ContractLoadError(f"{path}: must be a mapping, got {type(data).__name__}")


def _require_key(data: dict[str, Any], key: str, path: str, allow_none: bool = False) -> Any:
    if key not in data:
        raise ContractLoadError(f"{path}: missing '{key}'")
    value = data[key]
    if value is None and not allow_none:
        raise ContractLoadError(f"{path}.{key}: must not be null")
    return value


def _optional_flag(prop_data: dict[str, Any], path: str) -> bool:
    """optionalフラグを取り出す（bool以外はエラー）"""
    optional = prop_data.get("optional", False)
    if not isinstance(optional, bool):
        raise ContractLoadError(f"{path}.optional: must be a boolean, got {optional!r}")
    return optional
