from .engine import merge_bundles, merge_event, merge_schedules, merge_sections

__all__ = ["merge_bundles", "merge_event", "merge_schedules", "merge_sections"]
