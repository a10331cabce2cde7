"""JSON Schema生成のエラー定義"""

from __future__ import annotations

from typing import Any


class JsonSchemaGenerationError(Exception):
    """JSON Schema生成エラーの基底クラス"""

    pass


class UnhandledTypeKindError(JsonSchemaGenerationError):
    """コンパイラが扱えない型種別

    IRが拡張されたのにバックエンドが追従していないことを示す。
    """

    def __init__(self, kind: Any) -> None:
        self.kind = kind
        super().__init__(f"Unhandled type kind: {kind!r}")


class UnsupportedFormatError(JsonSchemaGenerationError):
    """未対応の出力形式"""

    def __init__(self, format: Any) -> None:
        self.format = format
        super().__init__(f"Unsupported output format: {format!r} (expected 'json' or 'yaml')")
