import json
from unittest.mock import patch

import pytest

from configuration import FigmaSettings
from figma_gradient import cli
from figma_gradient.figma_extractor import FigmaGradientExtractor

EXPECTED_CSS = "linear-gradient(90.00deg, black 0.00%, #FF0000 25.00%, white 100.00%)"


@pytest.fixture
def node_file(tmp_path, linear_node):
    path = tmp_path / "node.json"
    path.write_text(json.dumps(linear_node), encoding="utf-8")
    return path


@pytest.fixture
def empty_settings():
    with patch("figma_gradient.cli.config.figma_settings", FigmaSettings(FIGMA_FILE_ID="", FIGMA_TOKEN="")):
        yield


class TestCli:

    def test_convert_from_file(self, node_file, capsys):
        assert cli.main(["--input", str(node_file)]) == 0
        assert capsys.readouterr().out.strip() == EXPECTED_CSS

    def test_convert_from_nodes_response(self, tmp_path, linear_node, capsys):
        """Файл с ответом эндпоинта /nodes тоже принимается."""
        path = tmp_path / "nodes.json"
        path.write_text(json.dumps({"nodes": {"1:2": {"document": linear_node}}}), encoding="utf-8")

        assert cli.main(["--input", str(path), "--node-id", "1:2"]) == 0
        assert capsys.readouterr().out.strip() == EXPECTED_CSS

    def test_output_file(self, node_file, tmp_path):
        output = tmp_path / "out" / "result.json"

        assert cli.main(["--input", str(node_file), "--node-id", "1:2", "--output", str(output)]) == 0
        assert json.loads(output.read_text(encoding="utf-8")) == {"node": "1:2", "css": EXPECTED_CSS}

    def test_no_source(self, capsys):
        assert cli.main([]) == 1
        assert "--input" in capsys.readouterr().out

    def test_node_id_without_credentials(self, empty_settings, capsys):
        assert cli.main(["--node-id", "1:2"]) == 1
        assert "FIGMA_TOKEN" in capsys.readouterr().out

    def test_node_id_fetches_from_figma(self, empty_settings, linear_node, capsys):
        with patch.object(FigmaGradientExtractor, "fetch_node", return_value=linear_node) as mock_fetch:
            code = cli.main(["--node-id", "1:2", "--file-id", "file", "--token", "token"])

        assert code == 0
        mock_fetch.assert_called_once_with("1:2")
        assert capsys.readouterr().out.strip() == EXPECTED_CSS

    def test_degenerate_shape_fails(self, tmp_path, linear_node):
        linear_node["absoluteBoundingBox"]["width"] = 0
        path = tmp_path / "flat.json"
        path.write_text(json.dumps(linear_node), encoding="utf-8")

        assert cli.main(["--input", str(path)]) == 1

    def test_not_a_gradient_fails(self, tmp_path):
        path = tmp_path / "solid.json"
        path.write_text(json.dumps({"id": "1:3", "fills": [{"type": "SOLID"}]}), encoding="utf-8")

        assert cli.main(["--input", str(path)]) == 1

    def test_credentials_from_settings(self):
        settings = FigmaSettings(FIGMA_FILE_ID="env-file", FIGMA_TOKEN="env-token")
        args = cli.create_argument_parser().parse_args(["--node-id", "1:2", "--token", "arg-token"])

        with patch("figma_gradient.cli.config.figma_settings", settings):
            assert cli.get_credentials(args) == ("env-file", "arg-token")

    def test_apply_rotation(self, tmp_path, linear_node, capsys):
        """Поворот узла не меняет CSS: угол и проценты считаются в его собственной коробке."""
        linear_node["rotation"] = 30
        path = tmp_path / "rotated.json"
        path.write_text(json.dumps(linear_node), encoding="utf-8")

        with patch.object(FigmaGradientExtractor, "convert", autospec=True, side_effect=FigmaGradientExtractor.convert) as mock_convert:
            assert cli.main(["--input", str(path), "--apply-rotation"]) == 0

        assert mock_convert.call_args.args[2] is False
        assert capsys.readouterr().out.strip() == EXPECTED_CSS

    def test_missing_input_file(self, tmp_path, capsys):
        assert cli.main(["--input", str(tmp_path / "missing.json")]) == 1
        assert capsys.readouterr().out == ""

    def test_unwritable_output(self, node_file, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        assert cli.main(["--input", str(node_file), "--output", str(blocker / "result.json")]) == 1
