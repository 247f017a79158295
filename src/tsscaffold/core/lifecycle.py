"""Lifecycle callbacks for services.

Each layer of a service (the generic base, then any specialization)
registers its steps for an event. Steps run in registration order, so the
base always runs before the layers stacked on top of it.
"""

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

POST_INIT = "post_init"
POST_VERSION_BUMP = "post_version_bump"

EVENTS = (POST_INIT, POST_VERSION_BUMP)

Step = Callable[[], None]


class LifecycleHooks:
    """Ordered lifecycle steps per event."""

    def __init__(self) -> None:
        self._steps: dict[str, list[Step]] = {event: [] for event in EVENTS}

    def register(self, event: str, step: Step) -> None:
        """Append a step to an event.

        Args:
            event: Event name (one of EVENTS).
            step: Zero-argument callable.

        Raises:
            ValueError: If the event is unknown.
        """
        self._check_event(event)
        self._steps[event].append(step)

    def unregister(self, event: str, step: Step) -> None:
        """Remove a previously registered step.

        Raises:
            ValueError: If the event is unknown or the step isn't registered.
        """
        self._check_event(event)
        self._steps[event].remove(step)

    def steps(self, event: str) -> list[Step]:
        """Return a copy of the steps registered for an event."""
        self._check_event(event)
        return list(self._steps[event])

    def run(self, event: str) -> None:
        """Run every step of an event in order.

        Exceptions from a step propagate and abort the remaining steps.
        """
        for step in self.steps(event):
            logger.debug(f"Running {event} step {getattr(step, '__name__', step)}")
            step()

    def _check_event(self, event: str) -> None:
        if event not in self._steps:
            raise ValueError(f"Unknown lifecycle event: {event}")
