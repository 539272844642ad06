"""CSV log of the two spheres' states over time."""

from __future__ import annotations

from collections.abc import Sequence
from types import TracebackType

HEADER = (
    "time,"
    "solid_pos,solid_vel,solid_theta,solid_omega,solid_E_potential,solid_E_kinetic,solid_E_total,"
    "solid_pos,solid_velo,solid_theta,solid_omega,solid_E_potential,solid_E_kinetic,solid_E_total\n"
)

FIELDS_PER_SPHERE = 7


class CsvOutput:
    """A CSV file with one row per time step, opened with its header written.

    Each sphere's values are (position, velocity, theta, omega,
    potential energy, kinetic energy, total energy).
    """

    def __init__(self, filename) -> None:
        self._file = open(filename, "w", encoding="utf-8", newline="")
        self._file.write(HEADER)

    def write(self, time: float, first: Sequence[float], second: Sequence[float]) -> None:
        """Append one row for the given time and the two spheres' values."""
        values = [time]
        for sphere_values in (first, second):
            sphere_values = list(sphere_values)
            if len(sphere_values) != FIELDS_PER_SPHERE:
                raise ValueError(
                    f"expected {FIELDS_PER_SPHERE} values per sphere, got {len(sphere_values)}"
                )
            values.extend(sphere_values)
        self._file.write(",".join(f"{value:f}" for value in values) + "\n")

    def close(self) -> None:
        """Flush and close the file."""
        self._file.close()

    def __enter__(self) -> CsvOutput:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()