from .view_coordinator import ViewCoordinator

__all__ = ["ViewCoordinator"]
