"""Tests for the dependency injection container wiring."""

from __future__ import annotations

import pytest

from talkback_core import (
    AccessibilityEventData,
    ClassHierarchyTypeResolver,
    CoreContainer,
    CoreParams,
    ErrorCode,
    TalkBackError,
    build_container,
)
from talkback_core.mock import StaticCapabilityEnumerator


def test_components_are_memoized(label_resources) -> None:
    container = CoreContainer(
        enumerator=StaticCapabilityEnumerator(["A"]), string_resources=label_resources
    )
    assert container.capability_cache() is container.capability_cache()  # nosec B101
    assert container.state_labels() is container.state_labels()  # nosec B101
    assert container.event_text_aggregator() is container.event_text_aggregator()  # nosec B101


def test_params_flow_into_capability_cache() -> None:
    enumerator = StaticCapabilityEnumerator(["A"])
    container = CoreContainer(CoreParams(host_sdk_version=4), enumerator=enumerator)
    assert container.capability_cache().has_capability("A") is False  # nosec B101
    assert enumerator.calls == 0  # nosec B101


def test_missing_collaborator_raises_validation() -> None:
    with pytest.raises(TalkBackError) as info:
        CoreContainer().capability_cache()
    assert info.value.code is ErrorCode.VALIDATION  # nosec B101


def test_default_resolver_uses_configured_toggle_base(label_resources) -> None:
    container = CoreContainer(
        CoreParams(toggle_control_class="com.example.Toggle"), string_resources=label_resources
    )
    resolver = container.type_resolver()
    assert isinstance(resolver, ClassHierarchyTypeResolver)  # nosec B101
    resolver.register("com.example.Toggle")
    resolver.register("com.example.Star", "com.example.Toggle")
    event = AccessibilityEventData(
        class_name="com.example.Star", package_name="com.example", text=["Favorite", "not checked"]
    )
    assert container.event_text_aggregator().get_event_text(None, event) == "Favorite"  # nosec B101


def test_clear_rebuilds_empty_cache() -> None:
    enumerator = StaticCapabilityEnumerator(["A"])
    container = CoreContainer(enumerator=enumerator)
    first = container.capability_cache()
    first.has_capability("A")
    container.clear()
    second = container.capability_cache()
    assert second is not first  # nosec B101
    assert second.is_filled is False  # nosec B101


def test_build_container_reads_config(clean_config, monkeypatch, label_resources) -> None:
    monkeypatch.setenv("TALKBACK_HOST_SDK_VERSION", "9")
    container = build_container(
        {"cache_empty_enumeration": False},
        enumerator=StaticCapabilityEnumerator([]),
        string_resources=label_resources,
    )
    assert container.params.host_sdk_version == 9  # nosec B101
    assert container.params.cache_empty_enumeration is False  # nosec B101


@pytest.mark.parametrize(
    "class_name, expected",
    [
        ("android.widget.CheckBox", "Wi-Fi"),
        ("android.widget.Switch", "Wi-Fi"),
        ("android.widget.CompoundButton", "Wi-Fi"),
        ("android.widget.Button", "Wi-Fi checked"),
    ],
)
def test_build_container_drops_state_text_for_framework_toggles(
    clean_config, label_resources, class_name, expected
) -> None:
    container = build_container(
        enumerator=StaticCapabilityEnumerator([]), string_resources=label_resources
    )
    text = container.event_text_aggregator().aggregate_text(
        None, ["Wi-Fi", "checked"], class_name, "com.android.settings"
    )
    assert text == expected  # nosec B101
