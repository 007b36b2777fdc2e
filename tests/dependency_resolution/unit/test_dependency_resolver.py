"""Dependency resolver tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from client_launcher.dependency_resolution import (
    MissingRequiredFieldError,
    SkipReason,
    join_search_path,
    resolve_dependency_paths,
)
from client_launcher.descriptor_loading import DependencyEntry, Descriptor, parse_descriptor
from client_launcher.platform_targeting import Platform
from client_launcher.rule_evaluation import ConditionRule, OsConstraint, RuleAction

WINDOWS_64 = Platform(name="windows", arch="x86_64")
MAIN_CLASS = "net.minecraft.client.main.Main"


def _descriptor(*dependencies: DependencyEntry, main_class: str | None = MAIN_CLASS) -> Descriptor:
    return Descriptor(version_id="1.20.1", main_class=main_class, dependencies=dependencies)


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()
    return path


def _library_dir(root: Path, *segments: str) -> Path:
    return root.joinpath("libraries", *segments)


def test_primary_artifact_is_first_even_without_dependencies(tmp_path: Path) -> None:
    resolution = resolve_dependency_paths(_descriptor(), WINDOWS_64, tmp_path)

    assert resolution.paths == (tmp_path / "versions" / "1.20.1" / "1.20.1.jar",)
    assert resolution.primary_artifact == resolution.paths[0]
    assert resolution.skipped == ()


def test_dependencies_follow_descriptor_order(tmp_path: Path) -> None:
    second = _touch(_library_dir(tmp_path, "b", "second", "2.0", "second-2.0.jar"))
    first = _touch(_library_dir(tmp_path, "a", "first", "1.0", "first-1.0.jar"))
    descriptor = _descriptor(
        DependencyEntry(coordinate="b:second:2.0"),
        DependencyEntry(coordinate="a:first:1.0"),
    )

    resolution = resolve_dependency_paths(descriptor, WINDOWS_64, tmp_path)

    assert resolution.paths[1:] == (second, first)
    assert resolution.paths[0].name == "1.20.1.jar"


def test_native_variant_is_selected_when_it_exists(tmp_path: Path) -> None:
    base = _library_dir(tmp_path, "org", "lwjgl", "lwjgl", "3.3.1")
    _touch(base / "lwjgl-3.3.1.jar")
    native = _touch(base / "lwjgl-3.3.1-natives-64.jar")
    descriptor = _descriptor(
        DependencyEntry(
            coordinate="org.lwjgl:lwjgl:3.3.1",
            native_classifiers={"windows": "natives-${arch}"},
        )
    )

    resolution = resolve_dependency_paths(descriptor, WINDOWS_64, tmp_path)

    assert resolution.paths[1:] == (native,)


def test_32_bit_platform_uses_32_bit_native_code(tmp_path: Path) -> None:
    base = _library_dir(tmp_path, "org", "lwjgl", "lwjgl", "3.3.1")
    native = _touch(base / "lwjgl-3.3.1-natives-32.jar")
    descriptor = _descriptor(
        DependencyEntry(
            coordinate="org.lwjgl:lwjgl:3.3.1",
            native_classifiers={"windows": "natives-${arch}"},
        )
    )

    resolution = resolve_dependency_paths(descriptor, Platform("windows", "x86"), tmp_path)

    assert resolution.paths[1:] == (native,)


def test_missing_native_variant_falls_back_to_plain_jar(tmp_path: Path) -> None:
    plain = _touch(_library_dir(tmp_path, "org", "lwjgl", "lwjgl", "3.3.1", "lwjgl-3.3.1.jar"))
    descriptor = _descriptor(
        DependencyEntry(
            coordinate="org.lwjgl:lwjgl:3.3.1",
            native_classifiers={"windows": "natives-${arch}"},
        )
    )

    resolution = resolve_dependency_paths(descriptor, WINDOWS_64, tmp_path)

    assert resolution.paths[1:] == (plain,)


def test_native_map_for_other_platform_uses_plain_jar(tmp_path: Path) -> None:
    plain = _touch(_library_dir(tmp_path, "org", "lwjgl", "lwjgl", "3.3.1", "lwjgl-3.3.1.jar"))
    descriptor = _descriptor(
        DependencyEntry(
            coordinate="org.lwjgl:lwjgl:3.3.1",
            native_classifiers={"linux": "natives-linux"},
        )
    )

    resolution = resolve_dependency_paths(descriptor, WINDOWS_64, tmp_path)

    assert resolution.paths[1:] == (plain,)


def test_missing_artifact_is_dropped_and_reported(tmp_path: Path) -> None:
    present = _touch(_library_dir(tmp_path, "a", "present", "1.0", "present-1.0.jar"))
    descriptor = _descriptor(
        DependencyEntry(coordinate="a:absent:1.0"),
        DependencyEntry(coordinate="a:present:1.0"),
    )

    resolution = resolve_dependency_paths(descriptor, WINDOWS_64, tmp_path)

    assert resolution.paths[1:] == (present,)
    assert [(s.coordinate, s.reason) for s in resolution.skipped] == [
        ("a:absent:1.0", SkipReason.ARTIFACT_NOT_FOUND)
    ]


def test_malformed_coordinate_is_skipped_without_aborting(tmp_path: Path) -> None:
    later = _touch(_library_dir(tmp_path, "a", "later", "1.0", "later-1.0.jar"))
    descriptor = _descriptor(
        DependencyEntry(coordinate="a:broken"),
        DependencyEntry(coordinate="a:later:1.0"),
    )

    resolution = resolve_dependency_paths(descriptor, WINDOWS_64, tmp_path)

    assert resolution.paths[1:] == (later,)
    assert resolution.skipped[0].coordinate == "a:broken"
    assert resolution.skipped[0].reason == SkipReason.MALFORMED_COORDINATE
    assert "a:broken" in (resolution.skipped[0].detail or "")


def test_entries_excluded_by_rules_are_not_looked_up(tmp_path: Path) -> None:
    checked: list[Path] = []

    def _exists(path: Path) -> bool:
        checked.append(path)
        return True

    descriptor = _descriptor(
        DependencyEntry(
            coordinate="ca.weblite:java-objc-bridge:1.1",
            rules=(ConditionRule(action=RuleAction.ALLOW, os=OsConstraint(name="osx")),),
        )
    )

    resolution = resolve_dependency_paths(descriptor, WINDOWS_64, tmp_path, exists=_exists)

    assert len(resolution.paths) == 1
    assert checked == []
    assert resolution.skipped[0].reason == SkipReason.EXCLUDED_BY_RULES


def test_injected_existence_check_replaces_filesystem(tmp_path: Path) -> None:
    descriptor = _descriptor(DependencyEntry(coordinate="a:virtual:1.0"))

    resolution = resolve_dependency_paths(descriptor, WINDOWS_64, tmp_path, exists=lambda _: True)

    assert resolution.paths[1] == _library_dir(tmp_path, "a", "virtual", "1.0", "virtual-1.0.jar")


@pytest.mark.parametrize("main_class", [None, "", "   "])
def test_missing_main_class_aborts_resolution(tmp_path: Path, main_class: str | None) -> None:
    with pytest.raises(MissingRequiredFieldError) as exc_info:
        resolve_dependency_paths(_descriptor(main_class=main_class), WINDOWS_64, tmp_path)

    assert exc_info.value.field_name == "mainClass"


def test_missing_version_id_aborts_resolution(tmp_path: Path) -> None:
    descriptor = Descriptor(version_id="", main_class=MAIN_CLASS)

    with pytest.raises(MissingRequiredFieldError, match="'id'"):
        resolve_dependency_paths(descriptor, WINDOWS_64, tmp_path)


def test_join_search_path_uses_separator() -> None:
    joined = join_search_path([Path("a.jar"), Path("b.jar")], separator=";")

    assert joined == "a.jar;b.jar"


def test_malformed_entries_are_skipped_and_later_entries_resolved(tmp_path: Path) -> None:
    ok = _touch(_library_dir(tmp_path, "a", "ok", "1.0", "ok-1.0.jar"))
    descriptor = _descriptor(
        DependencyEntry(coordinate=""),
        DependencyEntry(coordinate="a:bad-rules:1.0", rule_error="rules must be a list."),
        DependencyEntry(coordinate="a:list-natives:1.0", native_classifiers=["windows"]),
        DependencyEntry(coordinate="a:number-natives:1.0", native_classifiers={"windows": 1}),
        DependencyEntry(
            coordinate="a:ok:1.0",
            rules=(ConditionRule(action=None),),
            native_classifiers={"linux": 5},
        ),
    )

    resolution = resolve_dependency_paths(descriptor, WINDOWS_64, tmp_path, exists=Path.exists)

    assert resolution.paths[1:] == (ok,)
    assert [(s.coordinate, s.reason) for s in resolution.skipped] == [
        ("", SkipReason.MALFORMED_COORDINATE),
        ("a:bad-rules:1.0", SkipReason.MALFORMED_RULES),
        ("a:list-natives:1.0", SkipReason.MALFORMED_NATIVES),
        ("a:number-natives:1.0", SkipReason.MALFORMED_NATIVES),
    ]
    assert resolution.skipped[1].detail == "rules must be a list."


def test_descriptor_with_bad_entries_still_resolves_good_ones(tmp_path: Path) -> None:
    maybe = _touch(_library_dir(tmp_path, "a", "b", "1.0", "b-1.0.jar"))
    ok = _touch(_library_dir(tmp_path, "a", "ok", "1.0", "ok-1.0.jar"))
    descriptor = parse_descriptor(
        {
            "id": "1.20.1",
            "mainClass": MAIN_CLASS,
            "libraries": [
                {"url": "x"},
                {"name": "a:b:1.0", "rules": [{"action": "maybe"}]},
                {"name": "a:ok:1.0"},
            ],
        },
        default_version_id="1.20.1",
    )

    resolution = resolve_dependency_paths(descriptor, WINDOWS_64, tmp_path)

    assert resolution.paths[1:] == (maybe, ok)
    assert [(s.coordinate, s.reason) for s in resolution.skipped] == [
        ("", SkipReason.MALFORMED_COORDINATE)
    ]
