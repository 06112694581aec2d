"""
Unit tests for ConvertUtils size and timestamp conversions.
"""
import pytest
from dupetree.utils.convert_utils import ConvertUtils


class TestHumanToBytes:

    @pytest.mark.parametrize("text,expected", [
        ("4096", 4096),
        ("4K", 4096),
        ("4kb", 4096),
        ("8 KB", 8192),
        ("1.5M", int(1.5 * 1024 ** 2)),
        ("1G", 1024 ** 3),
        ("512B", 512),
        ("0", 0),
    ])
    def test_valid_formats(self, text, expected):
        assert ConvertUtils.human_to_bytes(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "K", "4X", "1.5"])
    def test_invalid_formats(self, text):
        with pytest.raises(ValueError):
            ConvertUtils.human_to_bytes(text)

    @pytest.mark.parametrize("text", ["-1", "-4K"])
    def test_negative_sizes_rejected(self, text):
        with pytest.raises(ValueError, match="Negative size"):
            ConvertUtils.human_to_bytes(text)


class TestBytesToHuman:

    def test_units(self):
        assert ConvertUtils.bytes_to_human(512) == "512.00B"
        assert ConvertUtils.bytes_to_human(4096) == "4.00KB"
        assert ConvertUtils.bytes_to_human(3 * 1024 ** 2) == "3.00MB"

    def test_negative_is_zero(self):
        assert ConvertUtils.bytes_to_human(-5) == "0B"


class TestTimestampToHuman:

    def test_custom_format(self):
        assert ConvertUtils.timestamp_to_human(0, fmt="%Y") in ("1969", "1970")

    def test_invalid_timestamp(self):
        assert ConvertUtils.timestamp_to_human(1e20) == "Invalid timestamp"
