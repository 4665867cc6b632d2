"""Export helpers for league schedules."""

from .schedule import BOX_HEADERS, MATCH_HEADERS, boxes_to_csv, matches_to_csv

__all__ = ["BOX_HEADERS", "MATCH_HEADERS", "boxes_to_csv", "matches_to_csv"]
