"""Tests for the class-hierarchy type resolver."""

from __future__ import annotations

from talkback_core.base.constants import COMPOUND_BUTTON_CLASS
from talkback_core.base.text import FRAMEWORK_TOGGLE_HIERARCHY, ClassHierarchyTypeResolver
from talkback_core.tests.utils import assert_true


def _resolver() -> ClassHierarchyTypeResolver:
    return ClassHierarchyTypeResolver(
        {
            "android.widget.Button": None,
            "android.widget.CompoundButton": "android.widget.Button",
            "android.widget.Switch": "android.widget.CompoundButton",
        }
    )


def test_resolves_ancestry_chain() -> None:
    handle = _resolver().resolve_type(None, "android.widget.Switch", "android")
    assert_true(
        handle == ("android.widget.Switch", "android.widget.CompoundButton", "android.widget.Button"),
        f"unexpected chain {handle}",
    )


def test_unknown_class_is_none() -> None:
    assert_true(_resolver().resolve_type(None, "x.Y", "x") is None, "unregistered class unknown")


def test_toggle_classification() -> None:
    resolver = _resolver()
    switch = resolver.resolve_type(None, "android.widget.Switch", "android")
    button = resolver.resolve_type(None, "android.widget.Button", "android")
    assert_true(resolver.is_toggle_control_type(switch), "Switch is a toggle")
    assert_true(not resolver.is_toggle_control_type(button), "Button is not a toggle")
    assert_true(not resolver.is_toggle_control_type(None), "None is not a toggle")


def test_register_invalidates_cached_miss() -> None:
    resolver = _resolver()
    assert_true(resolver.resolve_type(None, "com.app.Toggle", "com.app") is None, "miss first")
    resolver.register("com.app.Toggle", "android.widget.CompoundButton")
    handle = resolver.resolve_type(None, "com.app.Toggle", "com.app")
    assert_true(resolver.is_toggle_control_type(handle), "registered subclass is a toggle")


def test_custom_toggle_base_and_cycles() -> None:
    resolver = ClassHierarchyTypeResolver({"A": "B", "B": "A"}, toggle_base="B")
    handle = resolver.resolve_type(None, "A", "p")
    assert_true(handle == ("A", "B"), f"cycle terminates: {handle}")
    assert_true(resolver.is_toggle_control_type(handle), "custom toggle base honoured")


def test_toggle_base_is_registered_as_root() -> None:
    resolver = ClassHierarchyTypeResolver()
    handle = resolver.resolve_type(None, COMPOUND_BUTTON_CLASS, "android")
    assert_true(handle == (COMPOUND_BUTTON_CLASS,), f"toggle base is a root: {handle}")
    assert_true(resolver.is_toggle_control_type(handle), "toggle base is itself a toggle")


def test_register_many_adds_every_entry() -> None:
    resolver = ClassHierarchyTypeResolver()
    assert_true(resolver.resolve_type(None, "com.app.Star", "com.app") is None, "miss first")
    resolver.register_many(
        [("com.app.Toggle", COMPOUND_BUTTON_CLASS), ("com.app.Star", "com.app.Toggle")]
    )
    handle = resolver.resolve_type(None, "com.app.Star", "com.app")
    assert_true(
        handle == ("com.app.Star", "com.app.Toggle", COMPOUND_BUTTON_CLASS),
        f"unexpected chain {handle}",
    )


def test_framework_classes_are_toggles() -> None:
    resolver = ClassHierarchyTypeResolver.with_framework_classes()
    for class_name in FRAMEWORK_TOGGLE_HIERARCHY:
        handle = resolver.resolve_type(None, class_name, "android")
        assert_true(resolver.is_toggle_control_type(handle), f"{class_name} is a toggle")
    assert_true(resolver.resolve_type(None, "android.widget.Button", "android") is None, "Button unknown")


def test_cache_is_shared_across_packages() -> None:
    resolver = ClassHierarchyTypeResolver.with_framework_classes()
    first = resolver.resolve_type(None, "android.widget.CheckBox", "com.android.settings")
    second = resolver.resolve_type(None, "android.widget.CheckBox", "com.example.app")
    assert_true(first is second, "same handle regardless of package")
    resolver.resolve_type(None, "x.Missing", "p1")
    resolver.resolve_type(None, "x.Missing", "p2")
    assert_true(len(resolver._cache) == 2, f"one entry per class: {resolver._cache}")
