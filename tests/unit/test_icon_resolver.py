from types import SimpleNamespace

import pytest

from fossflow_ai.diagram.icon_catalog import AVAILABLE_ICON_IDS, DEFAULT_ICON
from fossflow_ai.diagram.icon_resolver import LEGACY_ICON_MAP, build_icon_id_set, resolve_icon


KNOWN = build_icon_id_set()


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("storage", "storage"),
        ("  QUEUE ", "queue"),
        ("TRUCK-2", "truck-2"),
        ("  Database ", "storage"),
        ("Load Balancer", "loadbalancer"),
        ("web-app", "desktop"),
        ("person", "user"),
        ("function_module", "function-module"),
        ("Mail_Multiple", "mailmultiple"),
        ("mobile device", "mobiledevice"),
        ("unknown_icon_xyz", DEFAULT_ICON),
        ("", DEFAULT_ICON),
        ("   ", DEFAULT_ICON),
        (None, DEFAULT_ICON),
    ],
)
def test_resolve_icon(raw, expected):
    assert resolve_icon(raw, KNOWN) == expected


def test_resolve_icon_is_total_over_noisy_labels():
    labels = [
        "", " ", "-", "_", "__--  ", "Block", "BLOCK", "b-l-o-c-k", "cache_", "-cache",
        "Payment Card", "payment-card", "PAYMENT_CARD", "switch module", "Switch_Module",
        "redis", "REDIS", "cdn", "Logs", "🤖", "123", "a b c", "api gateway", "Analytics",
    ]
    for label in labels:
        assert resolve_icon(label, KNOWN) in KNOWN, label


def test_every_legacy_alias_resolves_to_catalog_icon():
    for alias, target in LEGACY_ICON_MAP.items():
        assert target in AVAILABLE_ICON_IDS
        assert resolve_icon(alias, KNOWN) == target


def test_legacy_alias_ignored_when_target_unknown():
    assert resolve_icon("database", frozenset({"block"})) == DEFAULT_ICON


def test_build_icon_id_set_includes_host_icons():
    host_icons = [{"id": "my-custom"}, SimpleNamespace(id="aws-lambda"), "k8s", {"name": "no id"}, None]
    ids = build_icon_id_set(host_icons)
    assert {"my-custom", "aws-lambda", "k8s"} <= ids
    assert set(AVAILABLE_ICON_IDS) <= ids
    assert resolve_icon("My-Custom", ids) == "my-custom"
    assert resolve_icon("AWS_Lambda", ids) == "aws-lambda"


def test_build_icon_id_set_ignores_non_iterables_of_icons():
    assert build_icon_id_set("not-a-list") == frozenset(AVAILABLE_ICON_IDS)


def test_upper_case_host_ids_are_unreachable():
    ids = build_icon_id_set([{"id": "AWS-Lambda"}])
    assert "AWS-Lambda" in ids
    assert resolve_icon("AWS-Lambda", ids) == "block"
