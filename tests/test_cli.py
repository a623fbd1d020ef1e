import json

import pytest

import arclens.__main__ as cli


def _write_scene(tmp_path, lenses):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps({"lenses": lenses}), encoding="utf-8")
    return path


def test_main_prints_clusters(tmp_path, capsys):
    path = _write_scene(
        tmp_path,
        [
            {"name": "A", "x": 0, "y": 0},
            {"name": "B", "x": 50, "y": 0},
            {"name": "C", "x": 1000, "y": 1000},
        ],
    )

    cli.main([str(path), "--arc-gap", "0.1", "--log-level", "WARNING"])

    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == [
        "cluster 0: C span=3.141593 anchor=-1.570796",
        "cluster 1: B span=2.827433 anchor=0.000000; A span=2.827433 anchor=-3.141593",
    ]


def test_main_inactive_gives_half_circles(tmp_path, capsys):
    path = _write_scene(tmp_path, [{"name": "A", "x": 0, "y": 0}, {"name": "B", "x": 1, "y": 0}])

    cli.main([str(path), "--inactive", "--log-level", "WARNING"])

    out = capsys.readouterr().out
    assert out.count("span=3.141593") == 2


def test_main_rejects_malformed_scene(tmp_path):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps({"lenses": [{"name": "A"}]}), encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        cli.main([str(path)])

    assert exc.value.code == 2


def test_main_rejects_invalid_options(tmp_path):
    path = _write_scene(tmp_path, [{"x": 0, "y": 0}])

    with pytest.raises(SystemExit) as exc:
        cli.main([str(path), "--arc-gap", "1.5"])

    assert exc.value.code == 2
