import pytest

import polyframe.__main__ as cli
from polyframe import Polygon


def _run(capsys, argv):
    cli.main(argv)
    return capsys.readouterr().out.splitlines()


def test_reorient_prints_one_vertex_per_line(capsys):
    lines = _run(capsys, ["reorient", "0,0", "1,0", "1,1", "0,1"])

    assert lines == ["0 0", "1 0", "1 1", "0 1"]


def test_align_shifts_the_starting_vertex(capsys):
    lines = _run(capsys, ["flip-rotate", "0,0", "2,0", "3,1", "--align", "1"])

    assert lines == ["2 0", "3 1", "5 1"]


def test_negative_coordinates_after_separator(capsys):
    lines = _run(capsys, ["flip-reflect", "--", "0,0", "2,0", "1,-1"])

    assert lines == ["0 0", "2 0", "1 1"]


def test_key_prints_canonical_coordinates(capsys):
    lines = _run(capsys, ["key", "1,1", "2,1", "2,2", "1,2"])

    assert lines == ["0 0 1 0 1 1 0 1"]


def test_geometry_errors_exit_with_status_one(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["reorient", "0,0", "1,0"])

    assert exc.value.code == 1
    assert capsys.readouterr().out == ""


def test_malformed_point_is_a_usage_error():
    with pytest.raises(SystemExit) as exc:
        cli.main(["reorient", "0,0,0"])

    assert exc.value.code == 2


def test_main_dispatches_through_the_public_operations(monkeypatch, capsys):
    seen = []

    def _fake_reorient(polygon):
        seen.append(polygon)
        return Polygon([])

    monkeypatch.setitem(cli._OPERATIONS, "reorient", _fake_reorient)

    assert _run(capsys, ["reorient", "0,0", "1,0", "1,1"]) == []
    assert len(seen) == 1
    assert seen[0].orientation == 0
    assert len(seen[0]) == 3
