"""Unit tests for the mgmp-convert command-line interface."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from lxml import etree

from mgmp_converter import main as cli
from mgmp_converter.exceptions import DocumentAssemblyError, MgmpConverterError

GMD = "http://www.isotc211.org/2005/gmd"
GCO = "http://www.isotc211.org/2005/gco"

# -------------------- Fakes / helpers --------------------


def write_record(tmp_path: Path, data: dict | None = None) -> Path:
    path = tmp_path / "record.json"
    path.write_text(
        json.dumps(
            data
            or {
                "id": "22407eee80044d92afedcac07fff661b",
                "title": "theTitle",
                "metacard.modified": "1972-02-12T21:30:00.000Z",
            }
        ),
        encoding="utf-8",
    )
    return path


def run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(argv)
    return exc_info.value.code


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    logging.basicConfig(force=True)
    logging.getLogger().setLevel(logging.WARNING)


# --------------------------- Tests ---------------------------


class TestParseArguments:
    def test_defaults(self) -> None:
        args = cli.parse_arguments(["record.json"])
        assert args.record_file == Path("record.json")
        assert args.output_file is None
        assert args.config_file is None
        assert not args.debug and not args.verbose

    def test_all_options(self) -> None:
        args = cli.parse_arguments(
            ["r.yaml", "-o", "out.xml", "-c", "cfg.yaml", "--debug", "-v"]
        )
        assert args.output_file == Path("out.xml")
        assert args.config_file == Path("cfg.yaml")
        assert args.debug and args.verbose

    def test_record_file_is_required(self) -> None:
        with pytest.raises(SystemExit):
            cli.parse_arguments([])


class TestConfigureLogging:
    @pytest.mark.parametrize(
        "debug, verbose, level",
        [
            (True, False, logging.DEBUG),
            (False, True, logging.INFO),
            (False, False, logging.WARNING),
        ],
    )
    def test_levels(self, debug: bool, verbose: bool, level: int) -> None:
        cli.configure_logging(debug, verbose)
        assert logging.getLogger().level == level


class TestRunConversion:
    def test_writes_output_file(self, tmp_path: Path) -> None:
        output = tmp_path / "out" / "record.xml"

        code = run([str(write_record(tmp_path)), "-o", str(output)])

        assert code == cli.EXIT_OK
        document = etree.fromstring(output.read_bytes())
        assert document.findtext(f"{{{GMD}}}fileIdentifier/{{{GCO}}}CharacterString") == (
            "22407eee-8004-4d92-afed-cac07fff661b"
        )
        assert document.findtext(f"{{{GMD}}}dateStamp/{{{GCO}}}DateTime") == (
            "1972-02-12T21:30:00.000Z"
        )

    def test_writes_to_stdout(
        self, tmp_path: Path, capsysbinary: pytest.CaptureFixture[bytes]
    ) -> None:
        code = run([str(write_record(tmp_path))])

        assert code == cli.EXIT_OK
        out = capsysbinary.readouterr().out
        assert out.startswith(b"<?xml")
        assert b"theTitle" in out

    def test_settings_file_is_applied(self, tmp_path: Path) -> None:
        config = tmp_path / "settings.yaml"
        config.write_text("source_system_name: DIB\n", encoding="utf-8")
        output = tmp_path / "record.xml"

        code = run(
            [str(write_record(tmp_path)), "-c", str(config), "-o", str(output)]
        )

        assert code == cli.EXIT_OK
        assert b"DIB" in output.read_bytes()

    def test_control_characters_do_not_abort_conversion(self, tmp_path: Path) -> None:
        record = write_record(tmp_path, {"id": "abc", "title": "Scene\x0b42"})
        output = tmp_path / "record.xml"

        code = run([str(record), "-o", str(output)])

        assert code == cli.EXIT_OK
        assert b"Scene42" in output.read_bytes()

    def test_record_load_error(self, tmp_path: Path) -> None:
        assert run([str(tmp_path / "missing.json")]) == cli.EXIT_RECORD_LOAD_ERROR

    def test_configuration_error(self, tmp_path: Path) -> None:
        config = tmp_path / "settings.yaml"
        config.write_text("unknown_key: 1\n", encoding="utf-8")
        code = run([str(write_record(tmp_path)), "-c", str(config)])
        assert code == cli.EXIT_CONFIGURATION_ERROR

    def test_document_assembly_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def fail(self, record, pretty_print=True):
            raise DocumentAssemblyError("bad path", path="/x")

        monkeypatch.setattr(cli.MgmpConverter, "to_bytes", fail)
        code = run([str(write_record(tmp_path))])
        assert code == cli.EXIT_DOCUMENT_ASSEMBLY_ERROR

    def test_other_converter_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def fail(self, record, pretty_print=True):
            raise MgmpConverterError("boom")

        monkeypatch.setattr(cli.MgmpConverter, "to_bytes", fail)
        assert run([str(write_record(tmp_path))]) == cli.EXIT_CONVERTER_ERROR

    def test_file_system_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        output = blocker / "record.xml"

        code = run([str(write_record(tmp_path)), "-o", str(output)])

        assert code == cli.EXIT_FILE_SYSTEM_ERROR

    def test_unexpected_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def fail(self, record, pretty_print=True):
            raise RuntimeError("surprise")

        monkeypatch.setattr(cli.MgmpConverter, "to_bytes", fail)
        assert run([str(write_record(tmp_path))]) == cli.EXIT_UNEXPECTED_ERROR
