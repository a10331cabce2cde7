"""Validatorのテスト"""

from contractool.backends.json_schema import json_schema
from contractool.core.base import (
    ArrayType,
    Contract,
    FloatLiteralType,
    JsonSchemaDocument,
    JsonSchemaObject,
    ObjectType,
    Property,
    ReferenceType,
    ScalarType,
    TypeDefinition,
    TypeKind,
    UnionType,
)
from contractool.core.engine.loader import load_contract
from contractool.core.engine.validate import check_json_schema, validate_contract


def test_valid_contract_has_no_errors(fixtures_dir):
    """正常なContractはエラーなし"""
    contract = load_contract(fixtures_dir / "shop_contract.yaml")

    assert validate_contract(contract) == []


def test_duplicate_type_names_detected():
    """同名の型定義を検出"""
    contract = Contract(
        types=[
            TypeDefinition(name="A", type=ScalarType(TypeKind.STRING)),
            TypeDefinition(name="A", type=ScalarType(TypeKind.INT32)),
        ]
    )

    errors = validate_contract(contract)

    assert errors == ["Type 'A': defined 2 times (duplicate type name)"]


def test_dangling_reference_detected_in_nested_types():
    """入れ子の参照先未定義を検出"""
    contract = Contract(
        types=[
            TypeDefinition(
                name="Order",
                type=ObjectType(
                    properties=[
                        Property(
                            name="items",
                            type=ArrayType(
                                element_type=UnionType(types=[ReferenceType(name="Item"), ScalarType(TypeKind.NULL)])
                            ),
                        )
                    ]
                ),
            )
        ]
    )

    errors = validate_contract(contract)

    assert len(errors) == 1
    assert "reference to undefined type 'Item'" in errors[0]
    assert "Order.items[]|0" in errors[0]


def test_duplicate_property_and_empty_union_detected():
    """プロパティ名の重複と空のユニオンを検出"""
    contract = Contract(
        types=[
            TypeDefinition(
                name="Broken",
                type=ObjectType(
                    properties=[
                        Property(name="a", type=UnionType(types=[])),
                        Property(name="a", type=ScalarType(TypeKind.STRING)),
                    ]
                ),
            )
        ]
    )

    errors = validate_contract(contract)

    assert "Type 'Broken': duplicate property 'a'" in errors
    assert "Type 'Broken.a': union has no member types" in errors


def test_invalid_fixture_reports_all_errors(fixtures_dir):
    """不正なフィクスチャで全てのエラーが報告される"""
    contract = load_contract(fixtures_dir / "invalid_contract_dangling_ref.yaml")

    errors = validate_contract(contract)

    assert len(errors) == 2
    assert any("duplicate type name" in error for error in errors)
    assert any("undefined type 'Customer'" in error for error in errors)


def test_check_json_schema_accepts_generated_document(fixtures_dir):
    """生成したドキュメントはdraft-07メタスキーマに適合"""
    document = json_schema(load_contract(fixtures_dir / "shop_contract.yaml"))

    assert check_json_schema(document) == []


def test_check_json_schema_rejects_invalid_document():
    """draft-07に反するドキュメントを検出（requiredの重複）"""
    document = JsonSchemaDocument(definitions={"A": JsonSchemaObject(properties={}, required=["a", "a"])})

    errors = check_json_schema(document)

    assert len(errors) == 1
    assert "not valid draft-07" in errors[0]


def test_non_finite_float_literal_detected():
    """プログラムで構築したNaN/Infinityのfloatリテラルを検出"""
    contract = Contract(
        types=[
            TypeDefinition(name="Ratio", type=FloatLiteralType(value=float("nan"))),
            TypeDefinition(
                name="Limit",
                type=ObjectType(properties=[Property(name="max", type=FloatLiteralType(value=float("inf")))]),
            ),
            TypeDefinition(name="Half", type=FloatLiteralType(value=0.5)),
        ]
    )

    errors = validate_contract(contract)

    assert errors == [
        "Type 'Ratio': float literal must be finite, got nan",
        "Type 'Limit.max': float literal must be finite, got inf",
    ]
