"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from soap_schema_extractor.cli import main


def test_missing_option_value_returns_clean_click_error(capsys) -> None:
    exit_code = main(["convert", "--config"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "--config" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["convert", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_convert_without_documents_reports_cli_error(capsys) -> None:
    exit_code = main(["convert"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Provide document paths" in captured.err


def test_malformed_document_reports_cli_error(tmp_path: Path, capsys) -> None:
    document = tmp_path / "broken.xsd"
    document.write_text("<xs:schema", encoding="utf-8")

    exit_code = main(["convert", str(document)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Malformed document 'broken.xsd'" in captured.err
    assert "Traceback" not in captured.err


def test_invalid_configuration_reports_cli_error(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("documents: []\n", encoding="utf-8")

    exit_code = main(["convert", "--config", str(config_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "documents must list at least one document path." in captured.err


def test_deep_recursion_reports_cli_error_without_traceback(tmp_path: Path, capsys) -> None:
    document = tmp_path / "tree.xsd"
    document.write_text(
        '<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema" xmlns:t="urn:tree" '
        'targetNamespace="urn:tree">'
        '<xs:complexType name="Node"><xs:sequence>'
        '<xs:element name="child" type="t:Node"/></xs:sequence></xs:complexType>'
        '<xs:element name="Tree" type="t:Node"/></xs:schema>',
        encoding="utf-8",
    )

    exit_code = main(["convert", str(document), "--max-depth", "50000"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Recursion limit of 50000 exceeded" in captured.err
    assert "Traceback" not in captured.err
