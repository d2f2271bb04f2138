"""Tests for the renovation report and the ``python -m renovation`` entry point."""

from __future__ import annotations

import pytest

from renovation.__main__ import main
from renovation.config import RenovationSettings
from renovation.factory import build_house, build_sample_house
from renovation.models import House
from renovation.report import RenovationReport, create_report, render_report

# ---------- Helpers ----------


@pytest.fixture()
def report() -> RenovationReport:
    return create_report(build_sample_house())


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (
        "RENOVATION_DISCOUNT_RATE",
        "RENOVATION_DEFAULT_HOUSE_NAME",
        "RENOVATION_UPGRADE_FLOORING",
        "RENOVATION_UPGRADE_UNIT_COST",
        "RENOVATION_UPGRADE_HOUSE_NAME",
        "RENOVATION_NUMBER_POLICY",
        "RENOVATION_NUMBER_FALLBACK",
        "RENOVATION_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


# ---------- create_report ----------


class TestCreateReport:
    def test_discounted_costs_of_upgraded_rooms(self, report: RenovationReport) -> None:
        # 32, 240 and 256 square units at 12.97, discounted by 10%
        assert report.costs == pytest.approx([373.536, 2801.52, 2988.288])

    def test_total(self, report: RenovationReport) -> None:
        assert report.total == pytest.approx(6163.344)

    def test_extremes(self, report: RenovationReport) -> None:
        assert report.minimum == pytest.approx(373.536)
        assert report.maximum == pytest.approx(2988.288)

    def test_houses(self, report: RenovationReport) -> None:
        assert report.original.name == "Generic"
        assert report.upgraded.name == "After Stone Bricks"
        assert report.houses_equal is True
        assert report.same_instance is False

    def test_settings_applied(self) -> None:
        settings = RenovationSettings(
            discount_rate=1.0,
            upgrade_flooring_name="Cork",
            upgrade_unit_cost=1.0,
            upgrade_house_name="Cork House",
        )
        report = create_report(build_sample_house(), settings)
        assert report.upgraded.name == "Cork House"
        assert report.costs == pytest.approx([32.0, 240.0, 256.0])

    def test_empty_house_has_no_extremes(self) -> None:
        report = create_report(House())
        assert report.costs == []
        assert report.total == 0.0
        assert report.minimum is None
        assert report.maximum is None

    def test_summary_dict(self, report: RenovationReport) -> None:
        summary = report.to_summary_dict()
        assert summary["num_rooms"] == 3
        assert summary["costs_formatted"] == ["373.54", "2801.52", "2988.29"]
        assert summary["total_formatted"] == "6163.34"
        assert summary["minimum_formatted"] == "373.54"
        assert summary["maximum_formatted"] == "2988.29"
        assert summary["total_area_formatted"] == "528.0"


# ---------- render_report ----------


class TestRenderReport:
    def test_tail_lines(self, report: RenovationReport) -> None:
        lines = render_report(report).splitlines()
        assert lines[-7:] == [
            "373.54",
            "2801.52",
            "2988.29",
            "Total: 6163.34",
            "Min  : 373.54",
            "Max  : 2988.29",
            "",
        ]

    def test_diagnostic_lines(self, report: RenovationReport) -> None:
        text = render_report(report)
        assert "house == duplicate_house -> True\n" in text
        assert "house is duplicate_house -> False\n" in text

    def test_house_blocks(self, report: RenovationReport) -> None:
        text = render_report(report)
        assert text.startswith("House (Generic)\n")
        assert text.count("House (Generic)") == 2
        assert text.count("House (After Stone Bricks)") == 1
        assert "  Flooring  : Birch Wood\n" in text
        assert "  Flooring  : Stone Bricks\n" in text

    def test_ends_with_blank_line(self, report: RenovationReport) -> None:
        assert render_report(report).endswith("\n\n")

    def test_no_extremes_for_empty_house(self) -> None:
        text = render_report(create_report(House()))
        assert "Total: 0.00\n" in text
        assert "Min" not in text
        assert "Max" not in text

    def test_single_room_has_no_extremes(self) -> None:
        report = create_report(build_house("Den; 10 10 1.0 Carpet"))
        lines = render_report(report).splitlines()
        assert lines[-2:] == ["Total: 1167.30", ""]
        assert not any(line.startswith(("Min", "Max")) for line in lines)

    def test_two_rooms_have_extremes(self) -> None:
        house = build_house("Den; 10 10 1.0 Carpet\nHall; 1 1 1.0 Carpet")
        lines = render_report(create_report(house)).splitlines()
        assert lines[-3:] == ["Min  : 11.67", "Max  : 1167.30", ""]


# ---------- Entry point ----------


class TestMain:
    @pytest.mark.usefixtures("clean_env")
    def test_prints_report(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main() == 0
        out = capsys.readouterr().out
        assert out == render_report(create_report(build_sample_house()))
        assert "Total: 6163.34" in out

    @pytest.mark.usefixtures("clean_env")
    def test_environment_overrides(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("RENOVATION_UPGRADE_HOUSE_NAME", "Renovated")
        monkeypatch.setenv("RENOVATION_DISCOUNT_RATE", "1.0")
        monkeypatch.setenv("RENOVATION_UPGRADE_UNIT_COST", "1.0")
        assert main() == 0
        out = capsys.readouterr().out
        assert "House (Renovated)" in out
        assert "Total: 528.00" in out
