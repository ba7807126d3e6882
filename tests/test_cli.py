import json

import pytest

import kale_graph.__main__ as cli


def test_main_writes_tikz_document(tmp_path, capsys):
    source_path = tmp_path / "graph.kale"
    source_path.write_text("-d\na,b,c\na-b-c-a", encoding="utf-8")
    tikz_path = tmp_path / "out" / "graph.tex"

    cli.main([str(source_path), "--tikz-output-path", str(tikz_path), "--print-model"])

    out = capsys.readouterr().out
    assert "graph: 3 vertex(es), 3 edge(s)" in out
    assert "(a,b), (b,c), (c,a)" in out
    document = tikz_path.read_text(encoding="utf-8")
    assert document.startswith("\\documentclass[border=2pt]{standalone}")
    assert document.count("-- cycle;") == 3


def test_main_renders_markdown_blocks(tmp_path, capsys):
    note = tmp_path / "note.md"
    note.write_text("intro\n```kale\na,b\n```\n\n```kale\n-a\nx-y\n```\n", encoding="utf-8")
    tikz_path = tmp_path / "note.tex"

    cli.main([str(note), "--markdown", "--tikz-output-path", str(tikz_path)])

    out = capsys.readouterr().out
    assert "block at line 2: 2 vertex(es), 0 edge(s)" in out
    assert "block at line 6" in out
    assert tikz_path.read_text(encoding="utf-8").count("\\begin{tikzpicture}") == 2


def test_main_reports_parse_errors(tmp_path, capsys):
    source_path = tmp_path / "bad.kale"
    source_path.write_text("a,b\n(a,c)", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        cli.main([str(source_path)])

    assert exc.value.code == 1
    err = capsys.readouterr().err
    assert "An error occurred while parsing kale code:" in err
    assert "undefined vertex 'c'" in err


def test_main_reports_render_errors(tmp_path, capsys):
    source_path = tmp_path / "hidden.kale"
    source_path.write_text("a,_h\n(a,_h)", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        cli.main([str(source_path)])

    assert exc.value.code == 1
    assert "An error occurred while rendering graph:" in capsys.readouterr().err


def test_main_applies_settings_file(tmp_path, monkeypatch):
    source_path = tmp_path / "graph.kale"
    source_path.write_text("a,b\na-b", encoding="utf-8")
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(json.dumps({"edgeThickness": 6}), encoding="utf-8")

    seen = []

    def _render(model, settings, surface):
        seen.append((settings.edge_thickness, surface.width, surface.height))
        return []

    monkeypatch.setattr(cli, "render", _render)

    cli.main([str(source_path), "--settings", str(settings_path), "--width", "400", "--height", "200"])

    assert seen == [(6.0, 400.0, 200.0)]


def test_main_rejects_bad_settings(tmp_path):
    source_path = tmp_path / "graph.kale"
    source_path.write_text("a", encoding="utf-8")
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(json.dumps({"bendiness": -2}), encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        cli.main([str(source_path), "--settings", str(settings_path)])

    assert exc.value.code == 2
