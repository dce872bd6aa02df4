"""Tests for podspec selection."""

from __future__ import annotations

from pathlib import Path

from podlint.core.models import ExclusionSet, SpecFile
from podlint.linting.filter import select_podspecs


class TestSelectPodspecs:
    """Tests for select_podspecs."""

    def test_sorted_and_skipped(self) -> None:
        candidates = [
            Path("/p/b/ios/b.podspec"),
            Path("/p/a/ios/a.podspec"),
            Path("/p/skip/ios/skip.podspec"),
        ]
        selected = select_podspecs(candidates, ExclusionSet.from_lists(skip=["skip"]))
        assert [f.basename for f in selected] == ["a.podspec", "b.podspec"]

    def test_only_podspec_extension(self) -> None:
        candidates = [
            Path("/p/a/ios/a.podspec"),
            Path("/p/a/pubspec.yaml"),
            Path("/p/a/ios/a.podspec.json"),
            Path("/p/a/ios/podspec"),
        ]
        selected = select_podspecs(candidates, ExclusionSet())
        assert [f.path for f in selected] == [Path("/p/a/ios/a.podspec")]

    def test_sorts_by_basename_not_path(self) -> None:
        candidates = [
            Path("/p/aaa/ios/zeta.podspec"),
            Path("/p/zzz/macos/alpha.podspec"),
        ]
        selected = select_podspecs(candidates, ExclusionSet())
        assert [f.stem for f in selected] == ["alpha", "zeta"]

    def test_accepts_spec_files(self) -> None:
        spec_file = SpecFile(Path("x.podspec"))
        assert select_podspecs([spec_file], ExclusionSet()) == [spec_file]

    def test_no_analyze_does_not_filter(self) -> None:
        selected = select_podspecs(
            [Path("x.podspec")], ExclusionSet.from_lists(no_analyze=["x"])
        )
        assert [f.stem for f in selected] == ["x"]

    def test_unmatched_skip_entries_ignored(self) -> None:
        selected = select_podspecs(
            [Path("a.podspec")], ExclusionSet.from_lists(skip=["does_not_exist"])
        )
        assert [f.stem for f in selected] == ["a"]

    def test_empty(self) -> None:
        assert select_podspecs([], ExclusionSet()) == []
