from __future__ import annotations

import threading

from fleetcheck.domain.model import (
    AuditReport,
    IPIsLoopback,
    NodeFacts,
    NodeHasNoActiveCartridges,
    ObsoleteCartridgesPresent,
    ProfileMissingRequiredCartridge,
    Severity,
)


def test_report_separates_failures_from_advisories() -> None:
    report = AuditReport()
    report.add(NodeHasNoActiveCartridges(node_id="node1"))
    report.add(ProfileMissingRequiredCartridge.build((("small", ("ruby",)),), restricted=False))
    report.add(ObsoleteCartridgesPresent(node_id=None, cartridges=("zend",)))

    assert report.failure_count == 1
    assert len(report.advisories) == 2
    assert not report.passed


def test_restricted_profile_gap_is_a_failure() -> None:
    finding = ProfileMissingRequiredCartridge.build((("small", ("ruby",)),), restricted=True)

    assert finding.severity is Severity.FAILURE


def test_empty_report_passes() -> None:
    report = AuditReport()

    assert report.passed
    assert report.findings == ()


def test_concurrent_appends_are_not_lost() -> None:
    report = AuditReport()

    def worker(offset: int) -> None:
        for index in range(200):
            report.add(IPIsLoopback(node_id=f"node{offset}-{index}", address="127.0.0.1"))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert report.failure_count == 1600


def test_node_facts_from_mapping_blanks_become_none() -> None:
    facts = NodeFacts.from_mapping(
        "node1",
        {"profile": " small ", "public_hostname": "", "public_ip": None},
    )

    assert facts == NodeFacts(node_id="node1", profile="small")
