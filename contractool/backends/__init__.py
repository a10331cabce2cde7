"""バックエンド層 - IR→成果物生成

IRからスキーマ生成を行う純関数群。
各バックエンドはIRのみに依存し、相互に独立している。
"""

from . import json_schema

__all__ = ["json_schema"]
