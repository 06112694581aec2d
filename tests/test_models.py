"""
Unit tests for configuration objects and result containers.
"""
import os
import pytest
from dupetree.core.models import (
    WindowPolicy, WindowMode, ClassifierConfig, ScanParams, ScanResult, ScanStats,
    ReportMode, UniqueBy, VisitedFile)


class TestWindowPolicy:
    """Window bounds for every mode."""

    @pytest.mark.parametrize("mode,size,expected", [
        (WindowMode.PREFIX, 10_000, (0, 4096)),
        (WindowMode.PREFIX, 100, (0, 100)),
        (WindowMode.SUFFIX, 10_000, (10_000 - 4096, 4096)),
        (WindowMode.SUFFIX, 100, (0, 100)),
        (WindowMode.PROPORTIONAL, 10_000, (0, 1000)),
        (WindowMode.PROPORTIONAL, 5, (0, 1)),
        (WindowMode.WHOLE, 10_000, (0, 10_000)),
    ])
    def test_bounds(self, mode, size, expected):
        assert WindowPolicy(mode=mode).bounds(size) == expected

    @pytest.mark.parametrize("mode", list(WindowMode))
    def test_empty_file_has_empty_window(self, mode):
        assert WindowPolicy(mode=mode).bounds(0) == (0, 0)

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValueError, match="Window size must be positive"):
            WindowPolicy(size_bytes=0)

    @pytest.mark.parametrize("fraction", [0, -0.5, 1.01])
    def test_rejects_bad_fraction(self, fraction):
        with pytest.raises(ValueError, match="fraction"):
            WindowPolicy(mode=WindowMode.PROPORTIONAL, fraction=fraction)

    def test_str(self):
        assert str(WindowPolicy(WindowMode.SUFFIX, 8192)) == "Suffix (8.00KB)"
        assert str(WindowPolicy(WindowMode.PROPORTIONAL, fraction=0.25)) == "Proportional (25%)"
        assert str(WindowPolicy(WindowMode.WHOLE)) == "Whole file"


class TestClassifierConfig:

    def test_defaults(self):
        config = ClassifierConfig()
        assert config.algorithm == "md5"
        assert config.window.mode == WindowMode.PREFIX
        assert config.window.size_bytes == 4096
        assert config.unique_by == UniqueBy.SIZE
        assert config.verbose is False

    def test_algorithm_normalized(self):
        assert ClassifierConfig(algorithm=" SHA256 ").algorithm == "sha256"

    def test_empty_algorithm_rejected(self):
        with pytest.raises(ValueError):
            ClassifierConfig(algorithm="  ")


class TestScanParams:

    def test_empty_root_rejected(self):
        with pytest.raises(ValueError, match="Root directory cannot be empty"):
            ScanParams(root_dir="")

    def test_from_human_readable(self):
        params = ScanParams.from_human_readable(
            "/data", window_size_str="8K", mode=WindowMode.SUFFIX, algorithm="xxh64",
            unique_by=UniqueBy.HASH, report_mode=ReportMode.COMBINED, copy_to="/backup")

        assert params.config.window.size_bytes == 8192
        assert params.config.window.mode == WindowMode.SUFFIX
        assert params.config.algorithm == "xxh64"
        assert params.config.unique_by == UniqueBy.HASH
        assert params.report_mode == ReportMode.COMBINED
        assert params.copy_to == "/backup"

    def test_from_human_readable_bad_size(self):
        with pytest.raises(ValueError):
            ScanParams.from_human_readable("/data", window_size_str="huge")


class TestVisitedFile:

    def test_from_stat_regular_file(self, tmp_path):
        f = tmp_path / "x.bin"
        f.write_bytes(b"12345")
        visited = VisitedFile.from_stat(str(f), os.lstat(f))

        assert visited.path == os.path.abspath(str(f))
        assert visited.size == 5
        assert visited.is_regular
        assert visited.is_readable

    def test_from_stat_directory_is_not_regular(self, tmp_path):
        visited = VisitedFile.from_stat(str(tmp_path), os.lstat(tmp_path))
        assert not visited.is_regular
        assert not visited.is_readable

    def test_is_immutable(self):
        visited = VisitedFile(path="/a", size=1)
        with pytest.raises(AttributeError):
            visited.size = 2


class TestScanResult:

    def test_duplicate_report_returns_copy(self):
        result = ScanResult("/r", ["/r/b"], ["/r/c"], [], [], ScanStats())
        report = result.duplicate_report()
        report.append("/r/x")
        assert result.hash_duplicates == ["/r/c"]

    def test_summary_mentions_counters(self):
        stats = ScanStats(file_count=3, directory_count=1, failed_visits=2,
                          fingerprints_computed=4, bytes_hashed=4096)
        summary = stats.print_summary()
        assert "Number of files processed: 3" in summary
        assert "Unable to visit: 2" in summary
        assert "Fingerprints computed: 4 (4.00KB read)" in summary
