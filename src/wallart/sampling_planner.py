"""Frame index planning for the wall art sampler."""

from __future__ import annotations


def get_sample_interval(int_frame_count: int, int_target_columns: int) -> int:
    """Return the frame stride between two sampled columns."""
    if int_target_columns < 1:
        raise ValueError(f"Target columns must be >= 1. Received: {int_target_columns}")

    int_sample_interval: int = max(0, int_frame_count) // int_target_columns
    return int_sample_interval


def plan_sample_indices(int_frame_count: int, int_target_columns: int) -> tuple[int, ...]:
    """Compute the ordered frame indices to visit, one per output column.

    Inputs:
    - ``int_frame_count``: total frames reported by the video source.
    - ``int_target_columns``: output image width.

    Output:
    - Non-decreasing indices in ``[0, int_frame_count)``, at most
      ``int_target_columns`` of them.

    A movie shorter than the output width gives a zero interval, so every
    planned index is 0.
    """
    int_sample_interval: int = get_sample_interval(int_frame_count, int_target_columns)

    list_int_indices: list[int] = []
    int_current_frame: int = 0
    while int_current_frame < int_frame_count and len(list_int_indices) < int_target_columns:
        list_int_indices.append(int_current_frame)
        int_current_frame += int_sample_interval

    tuple_plan: tuple[int, ...] = tuple(list_int_indices)
    return tuple_plan
