"""
Garden data models.

A staged garden is a fixed-size ordered collection of plots, each growing
through soil -> seed -> sprout -> tree. A counter garden is a single plant
count. Both are immutable; growth returns a new value.
"""

import uuid
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

PLANT_STAGES = ("soil", "seed", "sprout", "tree")


class GrowthPolicy(str, Enum):
    """How a growth event is applied to the garden."""
    STAGED = "staged"          # Cap each plot at max_stage, then advance the next plot
    UNBOUNDED = "unbounded"    # Increment a single count without limit


def new_plot_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class GardenPlot:
    """A single plot of a staged garden."""

    id: str
    stage: int = 0

    def __post_init__(self) -> None:
        if self.stage < 0:
            raise ValueError(f"Plot stage cannot be negative: {self.stage}")

    def grown(self) -> 'GardenPlot':
        return replace(self, stage=self.stage + 1)

    def stage_name(self) -> str:
        """Display name of the stage; stages past the last name show as the last."""
        return PLANT_STAGES[min(self.stage, len(PLANT_STAGES) - 1)]


@dataclass(frozen=True)
class StagedGarden:
    """Ordered plots with a shared stage cap."""

    plots: tuple[GardenPlot, ...]
    max_stage: int = len(PLANT_STAGES) - 1

    @classmethod
    def fresh(cls, garden_size: int, max_stage: int) -> 'StagedGarden':
        """A garden of ``garden_size`` bare plots, each with its own id."""
        return cls(
            plots=tuple(GardenPlot(id=new_plot_id()) for _ in range(garden_size)),
            max_stage=max_stage,
        )

    @property
    def is_fully_grown(self) -> bool:
        return all(plot.stage >= self.max_stage for plot in self.plots)

    @property
    def total_growth(self) -> int:
        return sum(plot.stage for plot in self.plots)

    def next_growable_index(self) -> Optional[int]:
        """Index of the first plot still below the stage cap."""
        for index, plot in enumerate(self.plots):
            if plot.stage < self.max_stage:
                return index
        return None

    def grown(self) -> 'StagedGarden':
        """Grow the first plot below the cap by one stage; unchanged when all are capped."""
        index = self.next_growable_index()
        if index is None:
            return self
        plots = list(self.plots)
        plots[index] = plots[index].grown()
        return replace(self, plots=tuple(plots))

    def stage_names(self) -> list[str]:
        return [plot.stage_name() for plot in self.plots]


@dataclass(frozen=True)
class PlantCount:
    """Flat count of completed work sessions."""

    count: int = 0

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"Plant count cannot be negative: {self.count}")

    @property
    def total_growth(self) -> int:
        return self.count

    def grown(self) -> 'PlantCount':
        return PlantCount(self.count + 1)


Garden = Union[StagedGarden, PlantCount]


def default_garden(policy: GrowthPolicy, garden_size: int, max_stage: int) -> Garden:
    """The garden used on first run or when stored data cannot be decoded."""
    if policy is GrowthPolicy.STAGED:
        return StagedGarden.fresh(garden_size, max_stage)
    return PlantCount()
