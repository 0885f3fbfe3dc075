"""Application lifecycle events."""

from dinner_decider.core.events.lifespan import lifespan


__all__ = ["lifespan"]
