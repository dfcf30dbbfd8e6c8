"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, Scope, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from paracosm.util.di import PROVIDERS, Component, get_provider


def build_test_container(
    unmock: set[Component] | None = None,
    mock_scope: Scope = Scope.REQUEST,
) -> AsyncContainer:
    """Build test container with selective unmocking.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.
        mock_scope: Scope for mock stores. REQUEST gives every request
                    empty stores, APP shares them across requests.

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real persistence, assumes postgres running
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        is_mockable = bool(base.__subclasses__())

        if not is_mockable:
            provider_class = get_provider(base, use_mock=False)
        else:
            component_name = getattr(base, "__mock_component__", None)
            use_mock = component_name not in unmock if component_name else False
            provider_class = get_provider(base, use_mock=use_mock)

        if provider_class.__is_mock__:
            provider_instances.append(provider_class(scope=mock_scope))
        else:
            provider_instances.append(provider_class())

    # FastapiProvider lets the same container back a TestClient app
    return make_async_container(*provider_instances, FastapiProvider())


def _validate_unmock(unmock: set[Component]) -> None:
    """Validate unmock configuration.

    Args:
        unmock: Set of components to unmock

    Raises:
        ValueError: If unknown components are requested
    """
    mockable_providers = [p for p in PROVIDERS if p.__subclasses__()]
    all_components = {
        getattr(p, "__mock_component__")
        for p in mockable_providers
        if hasattr(p, "__mock_component__")
    }

    unknown = unmock - all_components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
