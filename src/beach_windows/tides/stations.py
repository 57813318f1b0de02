"""Bundled tide tables.

Predictions are (day, hour, minute, height_m, is_high) rows in local time
for one month at a station.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time

from beach_windows.models.location import POINT_ATKINSON_MAX_TIDE_M
from beach_windows.models.tide import TidePrediction

# Point Atkinson (Vancouver), January 2026
_POINT_ATKINSON_2026_01 = [
    (1, 2, 15, 4.8, True),
    (1, 8, 45, 1.2, False),
    (1, 14, 30, 4.5, True),
    (1, 21, 0, 0.8, False),
    (2, 3, 0, 4.7, True),
    (2, 9, 30, 1.3, False),
    (2, 15, 15, 4.4, True),
    (2, 21, 45, 0.9, False),
    (3, 3, 45, 4.6, True),
    (3, 10, 15, 1.4, False),
    (3, 16, 0, 4.3, True),
    (3, 22, 30, 1.0, False),
    (4, 4, 30, 4.5, True),
    (4, 11, 0, 1.5, False),
    (4, 16, 45, 4.2, True),
    (4, 23, 15, 1.1, False),
    (5, 5, 15, 4.4, True),
    (5, 11, 45, 1.6, False),
    (5, 17, 30, 4.1, True),
    (6, 0, 0, 1.2, False),
    (6, 6, 0, 4.3, True),
    (6, 12, 30, 1.7, False),
    (6, 18, 15, 4.0, True),
    (7, 0, 45, 1.3, False),
    (7, 6, 45, 4.2, True),
    (7, 13, 15, 1.8, False),
    (7, 19, 0, 3.9, True),
    (8, 1, 30, 1.4, False),
    (8, 7, 30, 4.1, True),
    (8, 14, 0, 1.9, False),
    (8, 19, 45, 3.8, True),
    (9, 2, 15, 1.5, False),
    (9, 8, 15, 4.0, True),
    (9, 14, 45, 2.0, False),
    (9, 20, 30, 3.7, True),
    (10, 3, 0, 1.6, False),
    (10, 9, 0, 3.9, True),
    (10, 15, 30, 2.1, False),
    (10, 21, 15, 3.6, True),
    (11, 3, 45, 1.7, False),
    (11, 9, 45, 3.8, True),
    (11, 16, 15, 2.0, False),
    (11, 22, 0, 3.7, True),
    (12, 4, 30, 1.6, False),
    (12, 10, 30, 3.9, True),
    (12, 17, 0, 1.9, False),
    (12, 22, 45, 3.8, True),
    (13, 5, 15, 1.5, False),
    (13, 11, 15, 4.0, True),
    (13, 17, 45, 1.8, False),
    (13, 23, 30, 3.9, True),
    (14, 6, 0, 1.4, False),
    (14, 12, 0, 4.1, True),
    (14, 18, 30, 1.7, False),
    (15, 0, 15, 4.0, True),
    (15, 6, 45, 1.3, False),
    (15, 12, 45, 4.2, True),
    (15, 19, 15, 1.6, False),
    (16, 1, 0, 4.1, True),
    (16, 7, 30, 1.2, False),
    (16, 13, 30, 4.3, True),
    (16, 20, 0, 1.5, False),
    (17, 1, 45, 4.2, True),
    (17, 8, 15, 1.1, False),
    (17, 14, 15, 4.4, True),
    (17, 20, 45, 1.4, False),
    (18, 2, 30, 4.3, True),
    (18, 9, 0, 1.0, False),
    (18, 15, 0, 4.5, True),
    (18, 21, 30, 1.3, False),
    (19, 3, 15, 4.4, True),
    (19, 9, 45, 0.9, False),
    (19, 15, 45, 4.6, True),
    (19, 22, 15, 1.2, False),
    (20, 4, 0, 4.5, True),
    (20, 10, 30, 0.8, False),
    (20, 16, 30, 4.7, True),
    (20, 23, 0, 1.1, False),
    (21, 4, 45, 4.6, True),
    (21, 11, 15, 0.9, False),
    (21, 17, 15, 4.6, True),
    (21, 23, 45, 1.0, False),
    (22, 5, 30, 4.5, True),
    (22, 12, 0, 1.0, False),
    (22, 18, 0, 4.5, True),
    (23, 0, 30, 1.1, False),
    (23, 6, 15, 4.4, True),
    (23, 12, 45, 1.1, False),
    (23, 18, 45, 4.4, True),
    (24, 1, 15, 1.2, False),
    (24, 7, 0, 4.3, True),
    (24, 13, 30, 1.2, False),
    (24, 19, 30, 4.3, True),
    (25, 2, 0, 1.3, False),
    (25, 7, 45, 4.2, True),
    (25, 14, 15, 1.3, False),
    (25, 20, 15, 4.2, True),
    (26, 2, 45, 1.4, False),
    (26, 8, 30, 4.1, True),
    (26, 15, 0, 1.4, False),
    (26, 21, 0, 4.1, True),
    (27, 3, 30, 1.5, False),
    (27, 9, 15, 4.0, True),
    (27, 15, 45, 1.5, False),
    (27, 21, 45, 4.0, True),
    (28, 4, 15, 1.6, False),
    (28, 10, 0, 3.9, True),
    (28, 16, 30, 1.6, False),
    (28, 22, 30, 3.9, True),
    (29, 5, 0, 1.7, False),
    (29, 10, 45, 3.8, True),
    (29, 17, 15, 1.7, False),
    (29, 23, 15, 3.8, True),
    (30, 5, 45, 1.8, False),
    (30, 11, 30, 3.9, True),
    (30, 18, 0, 1.6, False),
    (31, 0, 0, 3.9, True),
    (31, 6, 30, 1.7, False),
    (31, 12, 15, 4.0, True),
    (31, 18, 45, 1.5, False),
]


@dataclass(frozen=True)
class StationTable:
    """A month of predictions for one tide station."""

    station: str
    year: int
    month: int
    max_height_m: float
    rows: tuple[tuple[int, int, int, float, bool], ...]

    def predictions(self) -> list[TidePrediction]:
        return [
            TidePrediction(
                date=date(self.year, self.month, day),
                time=time(hour, minute),
                height_m=height,
                is_high=is_high,
            )
            for day, hour, minute, height, is_high in self.rows
        ]


STATIONS: dict[str, StationTable] = {
    "point-atkinson": StationTable(
        station="point-atkinson",
        year=2026,
        month=1,
        max_height_m=POINT_ATKINSON_MAX_TIDE_M,
        rows=tuple(_POINT_ATKINSON_2026_01),
    ),
}
