"""
Garden persistence and growth.

GardenStore loads the garden once at startup, applies one growth event per
completed work session and writes the result back synchronously. Decode and
persistence failures never reach the caller.
"""

from typing import Optional

from ..errors import PersistenceError
from ..logging.config import get_garden_logger, log_growth_event
from ..persistence.kv_store import KeyValueStore
from .codec import encode_garden, try_decode_garden
from .models import Garden, GrowthPolicy, PlantCount, StagedGarden, default_garden

garden_logger = get_garden_logger(__name__)


class GardenStore:
    """Sole owner and mutator of the persisted garden."""

    def __init__(
        self,
        store: KeyValueStore,
        storage_key: str,
        policy: GrowthPolicy = GrowthPolicy.STAGED,
        garden_size: int = 6,
        max_stage: int = 3,
    ):
        self.store = store
        self.storage_key = storage_key
        self.policy = policy
        self.garden_size = garden_size
        self.max_stage = max_stage
        self.logger = garden_logger.bind(storage_key=storage_key, policy=policy.value)
        self._garden: Garden = default_garden(policy, garden_size, max_stage)

    @property
    def garden(self) -> Garden:
        return self._garden

    @property
    def total_growth(self) -> int:
        return self._garden.total_growth

    def load(self) -> Garden:
        """
        Read and decode the stored garden.

        Missing, empty or malformed data silently yields a fresh default
        garden; the fallback is not written back until the next growth event.
        """
        try:
            raw_data = self.store.get(self.storage_key)
        except PersistenceError as e:
            self.logger.warning("Garden read failed, using default garden", error=str(e))
            raw_data = None

        result = try_decode_garden(raw_data, self.policy, self.max_stage, self.storage_key)
        if result.ok and result.garden is not None:
            self._garden = result.garden
            self.logger.info("Garden loaded", total_growth=self._garden.total_growth)
        else:
            self._garden = default_garden(self.policy, self.garden_size, self.max_stage)
            if raw_data:
                self.logger.warning("Stored garden unreadable, using default garden", reason=result.reason)
            else:
                self.logger.debug("No stored garden, using default garden")

        return self._garden

    def record_growth(self) -> bool:
        """
        Apply one growth event and persist it.

        Returns:
            True if the garden changed, False if every plot was already grown
        """
        before = self._garden
        after = before.grown()
        applied = after != before

        plot_id: Optional[str] = None
        stage: Optional[int] = None
        if isinstance(before, StagedGarden) and applied:
            index = before.next_growable_index()
            plot = after.plots[index]  # type: ignore[union-attr, index]
            plot_id, stage = plot.id, plot.stage

        log_growth_event(
            self.logger,
            policy=self.policy.value,
            applied=applied,
            total_growth=after.total_growth,
            plot_id=plot_id,
            stage=stage,
        )

        if not applied:
            return False

        self._garden = after
        self.persist()
        return True

    def persist(self) -> bool:
        """
        Write the current garden under the storage key.

        Failures are logged and swallowed; the in-memory garden stays as is.

        Returns:
            Whether the write succeeded
        """
        try:
            self.store.set(self.storage_key, encode_garden(self._garden))
        except Exception as e:
            self.logger.exception("Failed to persist garden", error=str(e))
            return False
        return True

    def stage_names(self) -> list[str]:
        """Display stage per plot; empty for a counter garden."""
        if isinstance(self._garden, StagedGarden):
            return self._garden.stage_names()
        return []

    def plant_count(self) -> int:
        """Count for a counter garden; fully grown plots for a staged one."""
        if isinstance(self._garden, PlantCount):
            return self._garden.count
        return sum(1 for plot in self._garden.plots if plot.stage >= self._garden.max_stage)
