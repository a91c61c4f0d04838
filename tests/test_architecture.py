"""Architectural boundary tests using pytest-archon.

These tests verify the ports-and-adapters layering:
- Domain layer has no dependencies on adapters or application services
- Application services don't depend on adapters
- Adapters don't depend on application services
"""

from pytest_archon import archrule


def test_domain_has_no_outward_dependencies() -> None:
    """Domain models, errors and contracts should not import adapters or application."""
    (
        archrule("domain", comment="Domain layer should be independent")
        .match("ev_station_monitor.domain*")
        .should_not_import("ev_station_monitor.adapters*")
        .should_not_import("ev_station_monitor.application*")
        .may_import("ev_station_monitor.domain*")
        .check("ev_station_monitor")
    )


def test_domain_models_dont_import_contracts() -> None:
    """Domain models should not depend on contracts."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("ev_station_monitor.domain.models*")
        .should_not_import("ev_station_monitor.domain.contracts*")
        .may_import("ev_station_monitor.domain.models*")
        .check("ev_station_monitor")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("ev_station_monitor.application*")
        .should_not_import("ev_station_monitor.adapters*")
        .may_import("ev_station_monitor.domain*")
        .may_import("ev_station_monitor.application*")
        .check("ev_station_monitor")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters receive application services by injection, never by import."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("ev_station_monitor.adapters*")
        .should_not_import("ev_station_monitor.application*")
        .may_import("ev_station_monitor.domain*")
        .may_import("ev_station_monitor.adapters*")
        .check("ev_station_monitor", only_direct_imports=True)
    )


def test_cli_doesnt_import_web_adapters() -> None:
    """The one-shot CLI should run without the web server stack."""
    (
        archrule("CLI independence", comment="CLI should not depend on web adapters")
        .match("ev_station_monitor.cli")
        .should_not_import("ev_station_monitor.adapters.web*")
        .may_import("ev_station_monitor.domain*")
        .may_import("ev_station_monitor.application*")
        .may_import("ev_station_monitor.adapters*")
        .check("ev_station_monitor")
    )
