import csv
import json
from pathlib import Path

from matchly.cli import main
from matchly.export import BOX_HEADERS


def test_cli_demo_roster_writes_outputs(tmp_path: Path, capsys):
    matches_path = tmp_path / "matches.csv"
    boxes_path = tmp_path / "boxes.csv"
    summary_path = tmp_path / "summary.json"

    exit_code = main([
        "--demo", "20",
        "--seed", "4",
        "--league-id", "club",
        "--output", str(matches_path),
        "--boxes-output", str(boxes_path),
        "--summary", str(summary_path),
    ])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Created 3 boxes with 8, 8, 4 players respectively" in out
    assert "Generated 62 matches" in out

    with matches_path.open(newline="", encoding="utf-8") as handle:
        rows = list(csv.DictReader(handle))
    assert len(rows) == 62
    assert rows[0]["box_id"] == "box-club-1"
    assert rows[-1]["level"] == "3"

    with boxes_path.open(newline="", encoding="utf-8") as handle:
        reader = csv.reader(handle)
        assert tuple(next(reader)) == BOX_HEADERS
        assert len(list(reader)) == 20

    summary = json.loads(summary_path.read_text(encoding="utf-8"))
    assert summary["box_sizes"] == [8, 8, 4]
    assert summary["total_matches"] == 62
    assert summary["mode"] == "automatic"


def test_cli_roster_csv_with_mapping_and_profile(tmp_path: Path):
    roster = tmp_path / "roster.csv"
    roster.write_text("Id,First,Last\n1,Ann,Lee\n2,Bo,Park\n3,Cy,Kim\n4,Di,Ng\n5,Ed,Roe\n", encoding="utf-8")
    profile = tmp_path / "profile.json"
    matches_path = tmp_path / "matches.csv"

    exit_code = main([
        str(roster),
        "--roster-column", "player_id=Id",
        "--roster-column", "display_name=First|Last",
        "--save-profile", str(profile),
        "--boxes", "2",
        "--no-shuffle",
        "--output", str(matches_path),
    ])

    assert exit_code == 0
    assert json.loads(profile.read_text(encoding="utf-8"))["roster_mapping"]["player_id"] == "Id"
    with matches_path.open(newline="", encoding="utf-8") as handle:
        rows = list(csv.DictReader(handle))
    # Boxes of 2 and 3 players: 1 + 3 matches.
    assert len(rows) == 4
    assert (rows[0]["player1_id"], rows[0]["player2_id"]) == ("1", "2")


def test_cli_reports_planning_errors(tmp_path: Path, capsys):
    exit_code = main(["--demo", "3", "--boxes", "5", "--output", str(tmp_path / "out.csv")])

    assert exit_code == 2
    assert "Cannot start league" in capsys.readouterr().err
    assert not (tmp_path / "out.csv").exists()


def test_cli_rejects_negative_demo_count(tmp_path: Path, capsys):
    exit_code = main(["--demo", "-1", "--output", str(tmp_path / "out.csv")])

    assert exit_code == 2
    assert "Invalid input" in capsys.readouterr().err
    assert not (tmp_path / "out.csv").exists()


def test_cli_rejects_malformed_roster_column(tmp_path: Path, capsys):
    exit_code = main(["--demo", "4", "--roster-column", "player_id", "--output", str(tmp_path / "out.csv")])

    assert exit_code == 2
    assert "expected key=value" in capsys.readouterr().err


def test_cli_requires_roster(capsys):
    assert main([]) == 2
    assert "roster CSV or --demo" in capsys.readouterr().err
