"""
Garden serialization to and from the durable string store.

Staged gardens are stored as a JSON array of ``{"id", "stage"}`` records;
counter gardens as a bare JSON integer. orjson is used for both directions.
"""

from dataclasses import dataclass
from typing import Any, Optional

import orjson

from ..errors import DataQualityError, MalformedDataError, MissingDataError
from .models import Garden, GardenPlot, GrowthPolicy, PlantCount, StagedGarden

STAGED_FORMAT = 'JSON array of {"id": str, "stage": int}'
COUNTER_FORMAT = "JSON non-negative integer"


@dataclass(frozen=True)
class DecodeResult:
    """Tagged outcome of decoding stored garden data."""
    garden: Optional[Garden]
    ok: bool
    reason: Optional[str] = None


def encode_garden(garden: Garden) -> str:
    """Serialize a garden to its UTF-8 JSON text."""
    if isinstance(garden, StagedGarden):
        payload: Any = [{"id": plot.id, "stage": plot.stage} for plot in garden.plots]
    else:
        payload = garden.count
    return orjson.dumps(payload).decode("utf-8")


def decode_garden(
    raw_data: Optional[str],
    policy: GrowthPolicy,
    max_stage: int,
    storage_key: Optional[str] = None,
) -> Garden:
    """
    Parse stored garden text.

    Args:
        raw_data: Stored string, or None when the key has never been written
        policy: Growth policy selecting the expected shape
        max_stage: Stage cap applied to decoded staged gardens; stored stages
            above it are clamped down
        storage_key: Key the data was read from, reported on MissingDataError

    Returns:
        Decoded garden

    Raises:
        MissingDataError: If nothing is stored
        MalformedDataError: If the stored text is not a valid garden
    """
    if raw_data is None or not raw_data.strip():
        raise MissingDataError("No stored garden data", storage_key=storage_key)

    try:
        payload = orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise MalformedDataError(
            f"Invalid JSON: {e}",
            raw_data=raw_data,
            expected_format=_expected_format(policy),
        ) from e

    if policy is GrowthPolicy.STAGED:
        return _decode_staged(payload, raw_data, max_stage)
    return _decode_count(payload, raw_data)


def try_decode_garden(
    raw_data: Optional[str],
    policy: GrowthPolicy,
    max_stage: int,
    storage_key: Optional[str] = None,
) -> DecodeResult:
    """Decode stored garden text, reporting failure as a tagged result instead of raising."""
    try:
        return DecodeResult(garden=decode_garden(raw_data, policy, max_stage, storage_key), ok=True)
    except DataQualityError as e:
        return DecodeResult(garden=None, ok=False, reason=str(e))


def _expected_format(policy: GrowthPolicy) -> str:
    return STAGED_FORMAT if policy is GrowthPolicy.STAGED else COUNTER_FORMAT


def _decode_staged(payload: Any, raw_data: str, max_stage: int) -> StagedGarden:
    if not isinstance(payload, list) or not payload:
        raise MalformedDataError(
            "Staged garden must be a non-empty list of plots",
            raw_data=raw_data,
            expected_format=STAGED_FORMAT,
        )

    plots = []
    seen_ids = set()
    for i, item in enumerate(payload):
        # unknown keys are ignored so older or newer records still load
        if not isinstance(item, dict) or "id" not in item or "stage" not in item:
            raise MalformedDataError(
                f"Invalid plot at index {i}",
                raw_data=raw_data,
                expected_format=STAGED_FORMAT,
            )
        plot_id, stage = item["id"], item["stage"]
        if not isinstance(plot_id, str) or not plot_id or plot_id in seen_ids:
            raise MalformedDataError(
                f"Invalid or duplicate plot id at index {i}",
                raw_data=raw_data,
                expected_format=STAGED_FORMAT,
            )
        if isinstance(stage, bool) or not isinstance(stage, int) or stage < 0:
            raise MalformedDataError(
                f"Invalid plot stage at index {i}: {stage}",
                raw_data=raw_data,
                expected_format=STAGED_FORMAT,
            )
        seen_ids.add(plot_id)
        # a lowered max_stage caps existing plots instead of discarding the garden
        plots.append(GardenPlot(id=plot_id, stage=min(stage, max_stage)))

    return StagedGarden(plots=tuple(plots), max_stage=max_stage)


def _decode_count(payload: Any, raw_data: str) -> PlantCount:
    if isinstance(payload, bool) or not isinstance(payload, int) or payload < 0:
        raise MalformedDataError(
            "Plant count must be a non-negative integer",
            raw_data=raw_data,
            expected_format=COUNTER_FORMAT,
        )
    return PlantCount(payload)
