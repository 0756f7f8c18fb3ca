from .dataset_service import DatasetService, materializer_from_settings

__all__ = ["DatasetService", "materializer_from_settings"]
