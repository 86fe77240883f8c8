from __future__ import annotations

import csv
from typing import TYPE_CHECKING

import pytest

from circuitdiff.ui import cli

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture(autouse=True)
def _keep_process_locale(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "_use_system_collation", lambda: None)


@pytest.fixture
def snapshot_args(
    write_snapshot: Callable[[str, list[dict[str, object]]], Path],
    active_payload: list[dict[str, object]],
    proposed_payload: list[dict[str, object]],
) -> list[str]:
    return [
        "--proposal",
        "proposal-1",
        "--location",
        "location-1",
        "--active",
        str(write_snapshot("active", active_payload)),
        "--proposed",
        str(write_snapshot("proposed", proposed_payload)),
    ]


def test_review_prints_impact_and_rows(
    snapshot_args: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    cli.main(["review", *snapshot_args, "--sort", "monthlycost-desc"])

    output = capsys.readouterr().out
    assert "Monthly impact:  +$330.00" in output
    assert "One-time impact: $1,500.00" in output
    assert "[added] Verizon - DIA 1 Gbps - $300.00/mo" in output
    assert "[removed] Comcast - Broadband 300 Mbps - $120.00/mo" in output
    assert "    Monthly cost: $500.00 → $650.00" in output


def test_review_reports_no_changes(
    snapshot_args: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    cli.main(["review", *snapshot_args, "--type", "modified", "--search", "verizon"])

    assert "No changes to review" in capsys.readouterr().out


def test_review_read_only_reports_permission(
    snapshot_args: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    cli.main(["review", *snapshot_args, "--read-only"])

    assert "permission to modify circuits" in capsys.readouterr().out


def test_review_exits_when_inputs_unavailable(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    args = [
        "review",
        "--proposal",
        "proposal-1",
        "--location",
        "location-1",
        "--feed-dir",
        str(tmp_path),
    ]

    with pytest.raises(SystemExit) as exc:
        cli.main(args)

    assert exc.value.code == 1
    assert "Error loading circuit data" in capsys.readouterr().out


def test_invalid_sort_is_a_validation_error(snapshot_args: list[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["review", *snapshot_args, "--sort", "price-up"])

    assert exc.value.code == 2


def test_active_without_proposed_is_a_validation_error(snapshot_args: list[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["review", *snapshot_args[:6]])

    assert exc.value.code == 2


def test_review_reads_scope_from_snapshot_files(
    snapshot_args: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    cli.main(["review", *snapshot_args[4:]])

    assert "Monthly impact:  +$330.00" in capsys.readouterr().out


def test_export_names_default_file_after_scope_read_from_snapshots(
    snapshot_args: list[str], tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("CIRCUITDIFF_EXPORT_DIR", str(tmp_path / "exports"))

    cli.main(["export", *snapshot_args[4:]])

    assert (tmp_path / "exports" / "circuit-differences-proposal-1-location-1.csv").is_file()


@pytest.mark.parametrize(
    "args",
    [
        ["review"],
        ["review", "--proposal", "proposal-1"],
    ],
)
def test_scope_flags_are_required_without_snapshot_files(args: list[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(args)

    assert exc.value.code == 2


def test_export_writes_unfiltered_csv(snapshot_args: list[str], tmp_path: Path) -> None:
    output = tmp_path / "report.csv"

    cli.main(["export", *snapshot_args, "--format", "csv", "--output", str(output)])

    with output.open(newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert [row[0] for row in rows[1:]] == ["added", "removed", "modified"]


def test_export_defaults_to_export_directory(
    snapshot_args: list[str], tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("CIRCUITDIFF_EXPORT_DIR", str(tmp_path / "exports"))

    cli.main(["export", *snapshot_args, "--format", "xlsx"])

    assert (tmp_path / "exports" / "circuit-differences-proposal-1-location-1.xlsx").is_file()
