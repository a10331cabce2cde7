"""
contractool CLI - Contract Type IR → JSON Schema Command Line Interface

Usage:
    python -m contractool validate <contract_file>
    python -m contractool gen <contract_file> [--format json|yaml] [--output PATH] [--config PATH]
    python -m contractool version
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import fire

from contractool import __version__
from contractool.backends.json_schema import json_schema, render_json_schema
from contractool.core.base.ir import Contract
from contractool.core.engine.config_model import GenerateConfig, load_config
from contractool.core.engine.loader import load_contract
from contractool.core.engine.validate import check_json_schema, validate_contract


def _status(message: str) -> None:
    """進捗メッセージ（標準出力は生成物のために空けておく）"""
    print(message, file=sys.stderr)


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


class ContractoolCLI:
    """contractool - Contract Type IR → JSON Schema (draft-07) compiler"""

    def validate(self, contract_file: str, debug: bool = False) -> None:
        """Validate contract file for correctness.

        Args:
            contract_file: Path to contract YAML/JSON file
            debug: Enable debug output
        """
        _configure_logging(debug)
        contract_path = self._require_file(contract_file)

        try:
            contract = self._load_and_validate(contract_path)
            _status(f"✅ Validation passed ({len(contract.types)} type definitions)")
        except Exception as e:
            self._fail(e, debug)

    def gen(
        self,
        contract_file: str,
        format: str | None = None,
        output: str | None = None,
        config: str | None = None,
        debug: bool = False,
    ) -> None:
        """Generate JSON Schema from contract file.

        Args:
            contract_file: Path to contract YAML/JSON file
            format: Output format, "json" or "yaml" (default: config or "json")
            output: Output file path (default: config or stdout)
            config: Path to config YAML file
            debug: Enable debug output
        """
        _configure_logging(debug)
        contract_path = self._require_file(contract_file)

        try:
            settings = load_config(config) if config else GenerateConfig()
            output_format = format or settings.format
            output_path = output or settings.output

            contract = self._load_and_validate(contract_path)

            _status(f"🔨 Generating JSON Schema ({output_format})...")
            document = json_schema(contract)

            if settings.check_schema:
                schema_errors = check_json_schema(document)
                if schema_errors:
                    for error in schema_errors:
                        _status(f"  ❌ {error}")
                    sys.exit(1)

            text = render_json_schema(document, output_format)
            if not text.endswith("\n"):
                text += "\n"

            if output_path:
                out = Path(output_path)
                out.parent.mkdir(parents=True, exist_ok=True)
                out.write_text(text, encoding="utf-8")
                _status(f"  ✅ Generated: {out}")
            else:
                sys.stdout.write(text)

        except Exception as e:
            self._fail(e, debug)

    def version(self) -> None:
        """Show version."""
        print(f"contractool {__version__}")

    def _require_file(self, contract_file: str) -> Path:
        """Contractファイルの存在確認"""
        contract_path = Path(contract_file)
        if not contract_path.exists():
            _status(f"❌ Error: Contract file not found: {contract_path}")
            sys.exit(1)
        return contract_path

    def _load_and_validate(self, contract_path: Path) -> Contract:
        """Contractを読み込み、意味論チェック（エラー時は終了）"""
        _status(f"📖 Loading contract: {contract_path}")
        contract = load_contract(contract_path)

        _status("🔍 Validating contract...")
        errors = validate_contract(contract)
        if errors:
            _status(f"\n❌ Validation failed with {len(errors)} error(s):")
            for i, error in enumerate(errors, 1):
                _status(f"  {i}. {error}")
            sys.exit(1)
        return contract

    def _fail(self, error: Exception, debug: bool) -> None:
        _status(f"❌ Error: {error}")
        if debug:
            import traceback

            traceback.print_exc()
        sys.exit(1)


def main() -> None:
    """Main CLI entry point."""
    fire.Fire(ContractoolCLI)


if __name__ == "__main__":
    main()
