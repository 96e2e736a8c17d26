from __future__ import annotations

"""
End-to-end tests for the CLI controller.

Exercises URL ingestion from arguments, files and stdin, both output
formats, configuration layering and error exit codes.
"""

import io
import json
import logging

import pytest

from pathtree.interface.cli.app import ingest_urls, main
from pathtree.core.tree import PathTree

pytestmark = pytest.mark.usefixtures("reset_logging")


def test_positional_urls_render_text(capsys):
    code = main(["http://a.com/x/y", "http://a.com/x/z", "https://b.org/"])

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out == [
        "├── a.com",
        "│   └── x",
        "│       ├── y",
        "│       └── z",
        "└── b.org",
    ]


def test_json_output(capsys):
    code = main(["--json", "--indent", "0", "http://a.com/x", "http://a.com//x/"])

    assert code == 0
    assert json.loads(capsys.readouterr().out) == [
        {"Name": "a.com", "Children": [{"Name": "x", "Children": []}]},
    ]


def test_reads_stdin_when_no_inputs(capsys):
    stdin = io.StringIO("# observed\nhttp://h.com/a\n\nhttp://h.com/b\n")

    code = main([], stdin=stdin)

    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["└── h.com", "    ├── a", "    └── b"]


def test_reads_files_and_dash(tmp_path, capsys):
    urls = tmp_path / "urls.txt"
    urls.write_text("http://f.com/one\nhttp://f.com/two\n", encoding="utf-8")

    code = main(["-f", str(urls), "-f", "-", "--json"], stdin=io.StringIO("http://s.com/\n"))

    data = json.loads(capsys.readouterr().out)
    assert code == 0
    assert [n["Name"] for n in data] == ["f.com", "s.com"]
    assert [c["Name"] for c in data[0]["Children"]] == ["one", "two"]


def test_missing_input_file_exits_2(tmp_path, capsys):
    code = main(["-f", str(tmp_path / "nope.txt")])

    assert code == 2
    assert "Cannot read input" in capsys.readouterr().err


def test_bad_config_exits_2(tmp_path, capsys):
    cfg = tmp_path / "cfg.json"
    cfg.write_text("{broken", encoding="utf-8")

    assert main(["-c", str(cfg), "http://a.com/"]) == 2
    assert "ERROR" in capsys.readouterr().err


def test_config_file_and_cli_layering(tmp_path, capsys):
    """CLI overrides win over the file, which wins over defaults."""
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"output_format": "json", "json_indent": 8}), encoding="utf-8")

    code = main(["-c", str(cfg), "--indent", "0", "--dump-config"])

    dumped = json.loads(capsys.readouterr().out)
    assert code == 0
    assert dumped["output_format"] == "json"
    assert dumped["json_indent"] == 0
    assert dumped["synchronized"] is False


def test_unsplittable_urls_are_skipped(capsys):
    code = main(["http://[::1/x", "http://ok.com/p", "--synchronized"])

    captured = capsys.readouterr()
    assert code == 0
    assert captured.out.splitlines() == ["└── ok.com", "    └── p"]


def test_ingest_urls_counts():
    tree = PathTree()

    recorded, skipped = ingest_urls(tree, ["http://a.com/x", "", "http://a.com/x"])

    assert (recorded, skipped) == (2, 1)
    assert len(tree.structure()) == 1


def test_entrypoint_routes_to_cli(monkeypatch, capsys):
    """The console script entry point runs the CLI with sys.argv."""
    import sys

    from pathtree import main as entry

    monkeypatch.setattr(sys, "argv", ["pathtree", "http://e.com/p"])
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)

    assert entry.main() == 0
    assert capsys.readouterr().out.splitlines() == ["└── e.com", "    └── p"]


def test_global_exception_handler_exits(capsys):
    from pathtree.main import global_exception_handler

    with pytest.raises(SystemExit) as exc_info:
        global_exception_handler(RuntimeError, RuntimeError("boom"), None)

    assert exc_info.value.code == 1
    assert "boom" in capsys.readouterr().err


DEEP_URL = "http://a.com/" + "/".join(str(i) for i in range(2000))


def test_deep_url_renders_text(capsys):
    """A single URL deeper than the recursion limit is rendered in full."""
    code = main([DEEP_URL])

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert len(out) == 2001
    assert out[0] == "└── a.com"
    assert out[-1].endswith("└── 1999")


def test_deep_url_renders_json(capsys):
    code = main(["--json", "--indent", "0", DEEP_URL])

    out = capsys.readouterr().out.strip()
    assert code == 0
    assert out.startswith('[{"Name": "a.com", "Children": [{"Name": "0", "Children": [')
    assert out.count('"Name"') == 2001
    assert out.endswith('{"Name": "1999", "Children": []}' + "]}" * 2000 + "]")


def test_debug_logs_config_source(tmp_path, caplog):
    """The resolved configuration source is logged once logging is configured."""
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"json_indent": 4}), encoding="utf-8")

    with caplog.at_level(logging.DEBUG, logger="pathtree.interface.cli.app"):
        code = main(["--debug", "-c", str(cfg), "--dump-config"])

    assert code == 0
    assert f"Configuration resolved from {cfg}" in caplog.text
