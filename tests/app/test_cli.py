from __future__ import annotations

import pytest

from fleetcheck.config import MissingConfigurationError
from fleetcheck.domain.errors import NoNodesRespondedError
from fleetcheck.domain.model import AuditReport, NodeHasNoActiveCartridges
from fleetcheck.ui import cli as cli_module


def _fake_audit(
    report: AuditReport,
    captured: dict[str, object],
) -> object:
    def fake(**kwargs: object) -> AuditReport:
        captured.update(kwargs)
        return report

    return fake


def test_cli_defaults_and_pass(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    captured: dict[str, object] = {}
    monkeypatch.setattr(cli_module, "run_audit", _fake_audit(AuditReport(), captured))

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([])

    assert excinfo.value.code == 0
    assert captured["wait_seconds"] == 5.0
    assert capsys.readouterr().out == "PASS\n"


def test_cli_exit_status_counts_failures(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    report = AuditReport()
    report.add(NodeHasNoActiveCartridges(node_id="node1"))
    report.add(NodeHasNoActiveCartridges(node_id="node2"))
    captured: dict[str, object] = {}
    monkeypatch.setattr(cli_module, "run_audit", _fake_audit(report, captured))

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["--wait", "1.5", "--verbose"])

    assert excinfo.value.code == 2
    assert captured["wait_seconds"] == 1.5
    assert capsys.readouterr().err.startswith("2 ERRORS\n")


def test_cli_rejects_non_positive_wait(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli_module, "run_audit", _fake_audit(AuditReport(), {}))

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["--wait", "0"])

    assert excinfo.value.code == 2


def test_cli_reports_when_no_node_responds(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    def fake(**_kwargs: object) -> AuditReport:
        raise NoNodesRespondedError

    monkeypatch.setattr(cli_module, "run_audit", fake)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([])

    assert excinfo.value.code == 1
    assert capsys.readouterr().err.startswith("1 ERRORS\nNo nodes responded")


def test_cli_configuration_error_exits_two(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake(**_kwargs: object) -> AuditReport:
        raise MissingConfigurationError("Missing configuration for: FLEETCHECK_BROKER_URL")

    monkeypatch.setattr(cli_module, "run_audit", fake)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([])

    assert excinfo.value.code == 2
