import logging

from plugspec.component import Component
from plugspec.spec import Registry, merge_components


def test_trigger_values_are_unioned(normalizer):
    normalizer.normalize([{"slug": "org/a", "event": "A"}, {"slug": "org/a", "event": "B"}])

    assert sorted(normalizer.registry.plugins["a"].triggers["event"]) == ["A", "B"]
    assert normalizer.registry.notifications == []


def test_incoming_trigger_values_come_before_prior_scalar():
    existing = Component(name="a", triggers={"event": "A"})
    incoming = Component(name="a", triggers={"event": ["B"]})

    merged = merge_components(existing, incoming, Registry())

    assert merged is existing
    assert merged.triggers["event"] == ["B", "A"]


def test_dependencies_are_extended_without_duplicates(normalizer):
    normalizer.normalize(
        [
            {"slug": "org/a", "dependencies": ["x", "y"]},
            {"slug": "org/a", "dependencies": ["y", "z"]},
        ]
    )

    assert normalizer.registry.plugins["a"].dependencies == ["x", "y", "z"]


def test_dependency_only_declarations_stay_dependencies(normalizer):
    normalizer.normalize(
        [
            {"slug": "org/p", "dependencies": ["org/d"]},
            {"slug": "org/q", "dependencies": ["org/d"]},
        ]
    )

    assert normalizer.registry.plugins["d"].state.is_dep is True


def test_direct_declaration_wins_over_dependency(normalizer):
    normalizer.normalize({"slug": "org/p", "dependencies": ["org/d"]})
    normalizer.normalize("org/d")

    assert normalizer.registry.plugins["d"].state.is_dep is False


def test_direct_declaration_first_then_dependency(normalizer):
    normalizer.normalize(["org/d", {"slug": "org/p", "dependencies": ["org/d"]}])

    assert normalizer.registry.plugins["d"].state.is_dep is False


def test_config_and_priority_are_last_writer_wins(normalizer):
    def first():
        return "first"

    def second():
        return "second"

    normalizer.normalize(
        [
            {"slug": "org/a", "config": first, "priority": 10},
            {"slug": "org/a", "config": second, "priority": 50},
        ]
    )

    component = normalizer.registry.plugins["a"]
    assert component.config is second
    assert component.priority == 50
    assert normalizer.registry.notifications == []


def test_conflicting_field_is_overwritten_with_warning(normalizer):
    normalizer.normalize(
        [{"slug": "org/a", "branch": "main"}, {"slug": "org/a", "branch": "dev"}]
    )

    registry = normalizer.registry
    assert registry.plugins["a"].opts["branch"] == "dev"
    warnings = registry.report(logging.WARNING)
    assert len(warnings) == 1
    assert warnings[0].level == logging.WARNING
    assert "Overwriting key `branch`" in warnings[0].msg
    assert registry.report(logging.ERROR) == []


def test_equal_values_merge_silently(normalizer):
    normalizer.normalize(
        [{"slug": "org/a", "branch": "main"}, {"slug": "org/a", "branch": "main"}]
    )

    assert normalizer.registry.notifications == []


def test_field_set_on_one_side_is_taken(normalizer):
    normalizer.normalize(["org/a", {"slug": "org/a", "version": "1.0", "lazy": True}])

    component = normalizer.registry.plugins["a"]
    assert component.opts["version"] == "1.0"
    assert component.lazy is True
    assert normalizer.registry.notifications == []
