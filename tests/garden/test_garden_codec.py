"""Tests for garden serialization."""

import json

import pytest

from pomogarden.errors import MalformedDataError, MissingDataError
from pomogarden.garden.codec import decode_garden, encode_garden, try_decode_garden
from pomogarden.garden.models import GardenPlot, GrowthPolicy, PlantCount, StagedGarden


class TestEncode:
    """Test encode_garden."""

    def test_staged_format(self):
        garden = StagedGarden(plots=(GardenPlot("a", 0), GardenPlot("b", 2)), max_stage=3)
        assert json.loads(encode_garden(garden)) == [
            {"id": "a", "stage": 0},
            {"id": "b", "stage": 2},
        ]

    def test_count_format(self):
        assert encode_garden(PlantCount(7)) == "7"


class TestRoundTrip:
    """Test encode followed by decode."""

    def test_staged_round_trip(self):
        garden = StagedGarden.fresh(6, 3).grown().grown().grown().grown()
        decoded = decode_garden(encode_garden(garden), GrowthPolicy.STAGED, 3)
        assert decoded == garden

    def test_count_round_trip(self):
        decoded = decode_garden(encode_garden(PlantCount(42)), GrowthPolicy.UNBOUNDED, 3)
        assert decoded == PlantCount(42)


class TestDecodeErrors:
    """Test decode_garden failure modes."""

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_missing(self, raw):
        with pytest.raises(MissingDataError):
            decode_garden(raw, GrowthPolicy.STAGED, 3)

    @pytest.mark.parametrize("raw", [
        "not json",
        "[",
        "{}",
        "[]",
        "7",
        '[{"id": "a"}]',
        '[{"id": "a", "stage": "2"}]',
        '[{"id": "a", "stage": -1}]',
        '[{"id": "a", "stage": true}]',
        '[{"id": 5, "stage": 0}]',
        '[{"id": "a", "stage": 0}, {"id": "a", "stage": 1}]',
    ])
    def test_malformed_staged(self, raw):
        with pytest.raises(MalformedDataError) as exc_info:
            decode_garden(raw, GrowthPolicy.STAGED, 3)
        assert exc_info.value.recoverable is True
        assert exc_info.value.raw_data == raw

    @pytest.mark.parametrize("raw", ["-1", "1.5", '"3"', "true", "[1]", "null"])
    def test_malformed_count(self, raw):
        with pytest.raises(MalformedDataError):
            decode_garden(raw, GrowthPolicy.UNBOUNDED, 3)


class TestTryDecode:
    """Test the tagged decode result."""

    def test_ok(self):
        result = try_decode_garden("3", GrowthPolicy.UNBOUNDED, 3)
        assert result.ok is True
        assert result.garden == PlantCount(3)
        assert result.reason is None

    def test_failure_is_tagged(self):
        result = try_decode_garden("garbage", GrowthPolicy.STAGED, 3)
        assert result.ok is False
        assert result.garden is None
        assert "Invalid JSON" in result.reason


class TestDecodeTolerance:
    """Test that stored gardens survive config and schema drift."""

    def test_stage_above_cap_is_clamped(self):
        raw = json.dumps([
            {"id": "a", "stage": 3},
            {"id": "b", "stage": 3},
            {"id": "c", "stage": 1},
        ])
        garden = decode_garden(raw, GrowthPolicy.STAGED, 2)
        assert [(p.id, p.stage) for p in garden.plots] == [("a", 2), ("b", 2), ("c", 1)]
        assert garden.max_stage == 2
        assert garden.is_fully_grown is False

    def test_unknown_keys_are_ignored(self):
        raw = json.dumps([{"id": "a", "stage": 2, "planted": "x"}])
        garden = decode_garden(raw, GrowthPolicy.STAGED, 3)
        assert garden.plots == (GardenPlot("a", 2),)

    def test_missing_error_carries_storage_key(self):
        with pytest.raises(MissingDataError) as exc_info:
            decode_garden(None, GrowthPolicy.STAGED, 3, storage_key="farmData")
        assert exc_info.value.storage_key == "farmData"
