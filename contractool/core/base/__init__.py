"""contractool.core.base: Type IR・JSON Schemaシェイプ・エラー定義

純粋なデータ定義（最下層）
"""

from .errors import JsonSchemaGenerationError, UnhandledTypeKindError, UnsupportedFormatError
from .ir import (
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
from .schema import (
    DEFINITIONS_POINTER,
    DRAFT_07_SCHEMA,
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

__all__ = [
    # Type IR
    "SCALAR_KINDS",
    "ArrayType",
    "BooleanLiteralType",
    "Contract",
    "FloatLiteralType",
    "IntLiteralType",
    "ObjectType",
    "Property",
    "ReferenceType",
    "ScalarType",
    "StringLiteralType",
    "Type",
    "TypeDefinition",
    "TypeKind",
    "UnionType",
    # JSON Schema shapes
    "DEFINITIONS_POINTER",
    "DRAFT_07_SCHEMA",
    "JsonSchemaArray",
    "JsonSchemaBoolean",
    "JsonSchemaDocument",
    "JsonSchemaInteger",
    "JsonSchemaNull",
    "JsonSchemaNumber",
    "JsonSchemaObject",
    "JsonSchemaOneOf",
    "JsonSchemaString",
    "JsonSchemaType",
    "JsonSchemaTypeReference",
    # Errors
    "JsonSchemaGenerationError",
    "UnhandledTypeKindError",
    "UnsupportedFormatError",
]
