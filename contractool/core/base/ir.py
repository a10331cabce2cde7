"""型中間表現（Type IR）データ構造定義

Contract→IR→各バックエンドの一貫性を保つための中間表現。
IRは外部のパーサ/アナライザが生成し、バックエンドは読み取り専用で扱う。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class TypeKind(str, Enum):
    """型ノードの種別タグ（閉じた集合）"""

    NULL = "null"
    BOOLEAN = "boolean"
    BOOLEAN_LITERAL = "boolean-literal"
    DATE = "date"
    DATE_TIME = "date-time"
    STRING = "string"
    STRING_LITERAL = "string-literal"
    FLOAT = "float"
    DOUBLE = "double"
    FLOAT_LITERAL = "float-literal"
    INT32 = "int32"
    INT64 = "int64"
    INT_LITERAL = "int-literal"
    OBJECT = "object"
    ARRAY = "array"
    UNION = "union"
    REFERENCE = "reference"


SCALAR_KINDS = frozenset(
    {
        TypeKind.NULL,
        TypeKind.BOOLEAN,
        TypeKind.DATE,
        TypeKind.DATE_TIME,
        TypeKind.STRING,
        TypeKind.FLOAT,
        TypeKind.DOUBLE,
        TypeKind.INT32,
        TypeKind.INT64,
    }
)


@dataclass(frozen=True)
class ScalarType:
    """ペイロードを持たないスカラー型（null, boolean, string, int32 など）"""

    kind: TypeKind

    def __post_init__(self) -> None:
        if self.kind not in SCALAR_KINDS:
            raise ValueError(f"Not a scalar type kind: {self.kind}")


@dataclass(frozen=True)
class BooleanLiteralType:
    """booleanリテラル型"""

    value: bool
    kind: TypeKind = field(default=TypeKind.BOOLEAN_LITERAL, init=False)


@dataclass(frozen=True)
class StringLiteralType:
    """stringリテラル型"""

    value: str
    kind: TypeKind = field(default=TypeKind.STRING_LITERAL, init=False)


@dataclass(frozen=True)
class IntLiteralType:
    """整数リテラル型"""

    value: int
    kind: TypeKind = field(default=TypeKind.INT_LITERAL, init=False)


@dataclass(frozen=True)
class FloatLiteralType:
    """浮動小数点リテラル型"""

    value: float
    kind: TypeKind = field(default=TypeKind.FLOAT_LITERAL, init=False)


@dataclass(frozen=True)
class Property:
    """オブジェクト型のプロパティ定義

    Attributes:
        name: プロパティ名（オブジェクト内で一意）
        type: プロパティの型
        optional: 省略可能か
    """

    name: str
    type: Type
    optional: bool = False


@dataclass(frozen=True)
class ObjectType:
    """オブジェクト型（プロパティは宣言順）"""

    properties: list[Property] = field(default_factory=list)
    kind: TypeKind = field(default=TypeKind.OBJECT, init=False)


@dataclass(frozen=True)
class ArrayType:
    """配列型"""

    element_type: Type
    kind: TypeKind = field(default=TypeKind.ARRAY, init=False)


@dataclass(frozen=True)
class UnionType:
    """ユニオン型（メンバーは宣言順、平坦化・重複除去なし）"""

    types: list[Type]
    kind: TypeKind = field(default=TypeKind.UNION, init=False)


@dataclass(frozen=True)
class ReferenceType:
    """同一Contract内の名前付き型への参照（名前解決はしない）"""

    name: str
    kind: TypeKind = field(default=TypeKind.REFERENCE, init=False)


Type = Union[
    ScalarType,
    BooleanLiteralType,
    StringLiteralType,
    IntLiteralType,
    FloatLiteralType,
    ObjectType,
    ArrayType,
    UnionType,
    ReferenceType,
]


@dataclass(frozen=True)
class TypeDefinition:
    """名前付き型定義"""

    name: str
    type: Type


@dataclass(frozen=True)
class Contract:
    """Contract（コンパイル単位）

    Attributes:
        types: 名前付き型定義リスト（順序は出力のdefinitionsキー順になる）
        name: Contract名
    """

    types: list[TypeDefinition] = field(default_factory=list)
    name: str = ""
