"""Config YAMLのモデル定義とロード機能

JSON Schema生成の設定ファイル構造を定義する。
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel


class GenerateConfig(BaseModel):
    """生成設定

    Attributes:
        format: 出力形式（"json" または "yaml"、検証はシリアライザが行う）
        output: 出力ファイルパス（未指定なら標準出力）
        check_schema: 生成結果をdraft-07メタスキーマで検査するか
    """

    format: str = "json"
    output: str | None = None
    check_schema: bool = True


def load_config(config_path: str | Path) -> GenerateConfig:
    """Config YAMLをロードして検証

    Args:
        config_path: Config YAMLのパス

    Returns:
        GenerateConfig: 検証済みConfig

    Raises:
        FileNotFoundError: ファイルが存在しない
        yaml.YAMLError: YAML形式エラー
        pydantic.ValidationError: Pydantic検証エラー
    """
    config_path_obj = Path(config_path)

    if not config_path_obj.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path_obj, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GenerateConfig.model_validate(data)
