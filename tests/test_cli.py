"""CLIのテスト

ContractoolCLIのコマンドを直接呼び出して終了コードと出力を検証する。
"""

import json

import pytest
import yaml

from contractool.cli import ContractoolCLI


class TestCLIValidateCommand:
    """contractool validate コマンドのテスト"""

    def test_validate_success(self, fixtures_dir, capsys):
        """正常なContractでvalidateが成功"""
        ContractoolCLI().validate(str(fixtures_dir / "shop_contract.yaml"))

        assert "✅ Validation passed (3 type definitions)" in capsys.readouterr().err

    def test_validate_reports_errors(self, fixtures_dir, capsys):
        """不正なContractでvalidateがエラー"""
        with pytest.raises(SystemExit) as exc_info:
            ContractoolCLI().validate(str(fixtures_dir / "invalid_contract_dangling_ref.yaml"))

        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Validation failed with 2 error(s)" in err
        assert "undefined type 'Customer'" in err

    def test_validate_nonexistent_file(self, capsys):
        """存在しないContractでvalidateがエラー"""
        with pytest.raises(SystemExit) as exc_info:
            ContractoolCLI().validate("nonexistent.yaml")

        assert exc_info.value.code == 1
        assert "Contract file not found" in capsys.readouterr().err


class TestCLIGenCommand:
    """contractool gen コマンドのテスト"""

    def test_gen_json_to_stdout(self, fixtures_dir, capsys):
        """標準出力にJSON Schemaを出力"""
        ContractoolCLI().gen(str(fixtures_dir / "point_contract.yaml"))

        out = capsys.readouterr().out
        assert json.loads(out)["definitions"]["Point"]["required"] == ["x", "y"]

    def test_gen_yaml_to_file(self, fixtures_dir, tmp_path):
        """YAML形式でファイルに出力（親ディレクトリも作成）"""
        output = tmp_path / "schemas" / "shop.yaml"

        ContractoolCLI().gen(str(fixtures_dir / "shop_contract.yaml"), format="yaml", output=str(output))

        document = yaml.safe_load(output.read_text(encoding="utf-8"))
        assert list(document["definitions"]) == ["Money", "Item", "Order"]
        assert document["definitions"]["Order"]["properties"]["version"] == {"type": "integer", "const": 2}

    def test_gen_uses_config(self, fixtures_dir, tmp_path):
        """Configの出力形式が使われ、引数で出力先を上書きできる"""
        output = tmp_path / "point.yaml"

        ContractoolCLI().gen(
            str(fixtures_dir / "point_contract.yaml"),
            output=str(output),
            config=str(fixtures_dir / "yaml_config.yaml"),
        )

        assert output.read_text(encoding="utf-8").startswith("$schema:")

    def test_gen_unsupported_format(self, fixtures_dir, capsys):
        """未対応の出力形式はエラー終了"""
        with pytest.raises(SystemExit) as exc_info:
            ContractoolCLI().gen(str(fixtures_dir / "point_contract.yaml"), format="xml")

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "Unsupported output format: 'xml'" in captured.err
        assert captured.out == ""

    def test_gen_rejects_non_finite_float_literal(self, fixtures_dir, tmp_path, capsys):
        """NaNを含むContractは生成せずエラー終了"""
        output = tmp_path / "ratio.json"

        with pytest.raises(SystemExit) as exc_info:
            ContractoolCLI().gen(str(fixtures_dir / "invalid_contract_nan.yaml"), output=str(output))

        assert exc_info.value.code == 1
        assert "float literal must be finite" in capsys.readouterr().err
        assert not output.exists()

    def test_gen_refuses_invalid_contract(self, fixtures_dir, tmp_path):
        """検証エラーがあるContractは生成しない"""
        output = tmp_path / "broken.json"

        with pytest.raises(SystemExit) as exc_info:
            ContractoolCLI().gen(str(fixtures_dir / "invalid_contract_dangling_ref.yaml"), output=str(output))

        assert exc_info.value.code == 1
        assert not output.exists()


def test_version(capsys):
    """バージョン表示"""
    ContractoolCLI().version()

    assert capsys.readouterr().out.startswith("contractool ")
