"""Step registry for managing step factories."""

from typing import Any, Callable, overload

from datarecipe.core.exceptions import StepError
from datarecipe.steps.base import Step

StepFactory = Callable[[dict[str, Any]], Step]

_step_registry: dict[str, StepFactory] = {}


@overload
def register_step(
    step_type: str,
) -> Callable[[StepFactory], StepFactory]: ...


@overload
def register_step(step_type: str, factory: StepFactory) -> None: ...


def register_step(
    step_type: str,
    factory: StepFactory | None = None,
) -> Callable[[StepFactory], StepFactory] | None:
    """Register a step factory.

    Can be used as a decorator or called directly:

        # As decorator
        @register_step("center")
        def create_center_step(config):
            return CenterStep(config)

        # Direct call
        register_step("center", create_center_step)

    Args:
        step_type: Unique identifier for the step (e.g., 'center').
        factory: Factory function (optional if used as decorator).

    Raises:
        StepError: If a step with the same type is already registered.
    """

    def _register(f: StepFactory) -> StepFactory:
        if step_type in _step_registry:
            raise StepError(
                f"Step '{step_type}' is already registered",
                context={"step_type": step_type},
            )
        _step_registry[step_type] = f
        return f

    if factory is not None:
        _register(factory)
        return None

    return _register


def get_step(step_type: str, config: dict[str, Any]) -> Step:
    """Create an untrained step using the registered factory.

    Args:
        step_type: The step type to instantiate.
        config: Step configuration from the recipe config.

    Returns:
        A new, untrained step.

    Raises:
        StepError: If the step type is not registered.
    """
    factory = _step_registry.get(step_type)
    if factory is None:
        available = ", ".join(sorted(_step_registry.keys())) or "(none)"
        raise StepError(
            f"Unknown step type: '{step_type}'",
            context={"step_type": step_type, "available_types": available},
        )
    return factory(config)


def list_step_types() -> list[str]:
    """Return a sorted list of all registered step types."""
    return sorted(_step_registry.keys())


def clear_registry() -> None:
    """Clear all registered steps.

    Intended for testing only.
    """
    _step_registry.clear()
