"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application services
- Application services don't depend on adapters
- Adapters can depend on domain
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import adapters, application services or ports."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("bike_discovery.domain.models*")
        .should_not_import("bike_discovery.adapters*")
        .should_not_import("bike_discovery.application*")
        .should_not_import("bike_discovery.domain.ports*")
        .may_import("bike_discovery.domain.models*")
        .may_import("bike_discovery.domain.exceptions")
        .check("bike_discovery")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("bike_discovery.domain.ports*")
        .should_not_import("bike_discovery.adapters*")
        .should_not_import("bike_discovery.application*")
        .may_import("bike_discovery.domain*")
        .check("bike_discovery")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("bike_discovery.application*")
        .should_not_import("bike_discovery.adapters*")
        .may_import("bike_discovery.domain*")
        .may_import("bike_discovery.application*")
        .check("bike_discovery")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("bike_discovery.adapters*")
        .should_not_import("bike_discovery.application*")
        .may_import("bike_discovery.domain*")
        .may_import("bike_discovery.adapters*")
        .check("bike_discovery", only_direct_imports=True)
    )


def test_no_circular_dependencies_in_domain() -> None:
    """Domain layer should not have circular dependencies."""
    (
        archrule("domain no cycles", comment="Domain layer should not have circular dependencies")
        .match("bike_discovery.domain*")
        .should_not_import("bike_discovery.adapters*")
        .should_not_import("bike_discovery.application*")
        .may_import("bike_discovery.domain*")
        .check("bike_discovery", only_direct_imports=True)
    )
