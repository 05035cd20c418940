"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on application or adapters
- Application layer (normalizer, mappers) doesn't depend on adapters
- Driven adapters (upstream client, config) don't depend on the application layer
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import any other modules except standard library and domain itself."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("vvo_bridge.domain.models*")
        .should_not_import("vvo_bridge.adapters*")
        .should_not_import("vvo_bridge.application*")
        .should_not_import("vvo_bridge.domain.ports*")
        .may_import("vvo_bridge.domain.models*")
        .check("vvo_bridge")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("vvo_bridge.domain.ports*")
        .should_not_import("vvo_bridge.adapters*")
        .should_not_import("vvo_bridge.application*")
        .may_import("vvo_bridge.domain*")
        .check("vvo_bridge")
    )


def test_application_doesnt_import_adapters() -> None:
    """Normalizer and mappers should not depend on adapters (infrastructure layer)."""
    (
        archrule("application layer", comment="Application layer should not depend on adapters")
        .match("vvo_bridge.application*")
        .should_not_import("vvo_bridge.adapters*")
        .may_import("vvo_bridge.domain*")
        .may_import("vvo_bridge.application*")
        .check("vvo_bridge")
    )


def test_upstream_client_doesnt_import_application() -> None:
    """The VVO client is a driven adapter and should only know the domain."""
    (
        archrule("vvo client independence", comment="Upstream client should not use mappers")
        .match("vvo_bridge.adapters.vvo_api*")
        .should_not_import("vvo_bridge.application*")
        .should_not_import("vvo_bridge.adapters.web*")
        .may_import("vvo_bridge.domain*")
        .check("vvo_bridge", only_direct_imports=True)
    )


def test_config_doesnt_import_other_layers() -> None:
    """Configuration should be loadable without the rest of the application."""
    (
        archrule("config independence", comment="Config should not depend on other layers")
        .match("vvo_bridge.adapters.config*")
        .should_not_import("vvo_bridge.application*")
        .should_not_import("vvo_bridge.adapters.web*")
        .should_not_import("vvo_bridge.adapters.vvo_api*")
        .check("vvo_bridge", only_direct_imports=True)
    )


def test_no_circular_dependencies_in_domain() -> None:
    """Domain layer should not have circular dependencies."""
    (
        archrule("domain no cycles", comment="Domain layer should not have circular dependencies")
        .match("vvo_bridge.domain*")
        .should_not_import("vvo_bridge.adapters*")
        .should_not_import("vvo_bridge.application*")
        .may_import("vvo_bridge.domain*")
        .check("vvo_bridge", only_direct_imports=True)
    )
