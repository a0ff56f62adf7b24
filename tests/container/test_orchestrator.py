"""Tests for the configuration orchestrator.

Covers ordering (later sources override earlier ones) and the failure policy:
named declarative resources are fatal, custom configurators are isolated.
"""

import logging

import pytest

from ajaxwire.base.errors import ConfigurationError
from ajaxwire.container import ConfigurationOrchestrator, Configurator, DefaultContainer, Setting


class SetValue(Configurator):
    def __init__(self, name, value):
        self.name = name
        self.value = value

    def configure(self, container):
        container.set_binding(self.name, Setting(self.value))

    def __str__(self):
        return f"SetValue({self.name}={self.value})"


class Boom(Configurator):
    def configure(self, container):
        raise RuntimeError("boom")


@pytest.fixture
def orchestrator(test_logger, resource_root):
    return ConfigurationOrchestrator(logger=test_logger, resource_root=resource_root)


class TestConfigureOrdering:
    """Test last-write-wins ordering across configurators."""

    def test_later_configurator_overrides_earlier(self, orchestrator, container):
        orchestrator.configure(container, [SetValue("x", "first"), SetValue("x", "second")])
        assert container.get_bean("x") == "second"

    def test_init_params_override_defaults(self, orchestrator, container):
        orchestrator.setup_defaults(container)
        orchestrator.setup_from_init_params(container, {"debug": "true"})
        assert container.get_bean("debug") == "true"

    def test_configure_does_not_isolate_failures(self, orchestrator, container):
        with pytest.raises(RuntimeError, match="boom"):
            orchestrator.configure(container, [SetValue("a", "1"), Boom(), SetValue("b", "2")])
        assert container.get_bean("a") == "1"
        assert "b" not in container

    def test_each_configurator_is_logged_at_debug(self, orchestrator, container, test_logger, caplog):
        with caplog.at_level(logging.DEBUG, logger=test_logger.name):
            orchestrator.configure(container, [SetValue("x", "1")])
        assert any("** Adding config from SetValue(x=1)" in r.message for r in caplog.records)


class TestConfigureUsingInitParams:
    """Test the init-parameter driven pass."""

    def test_no_directive_names_means_no_config_found(self, orchestrator, container):
        assert orchestrator.configure_using_init_params(container, {"debug": "true"}) is False
        assert len(container) == 0

    def test_resources_apply_in_listed_order(self, orchestrator, container, write_resource):
        write_resource("a.yml", "settings:\n  who: a\n  onlyA: 'yes'\n")
        write_resource("b.yml", "settings:\n  who: b\n")

        found = orchestrator.configure_using_init_params(container, {"config": "a.yml, b.yml"})

        assert found is True
        assert container.get_bean("who") == "b"
        assert container.get_bean("onlyA") == "yes"

    def test_multiple_config_parameters_apply_in_encounter_order(self, orchestrator, container, write_resource):
        write_resource("base.yml", "settings:\n  who: base\n")
        write_resource("admin.yml", "settings:\n  who: admin\n")

        orchestrator.configure_using_init_params(container, {"config": "base.yml", "config-admin": "admin.yml"})
        assert container.get_bean("who") == "admin"

    def test_missing_named_resource_is_fatal(self, orchestrator, container, write_resource):
        write_resource("a.yml", "settings:\n  who: a\n")
        with pytest.raises(ConfigurationError, match="missing.yml"):
            orchestrator.configure_using_init_params(container, {"config": "a.yml, missing.yml"})
        assert container.get_bean("who") == "a"

    def test_blank_config_value_still_counts_as_found(self, orchestrator, container):
        assert orchestrator.configure_using_init_params(container, {"config": " , "}) is True
        assert len(container) == 0

    def test_custom_configurator_is_applied(self, orchestrator, container):
        found = orchestrator.configure_using_init_params(
            container, {"customConfigurator": "plugin_fixtures:RecordingConfigurator"}
        )
        assert found is True
        assert container.get_bean("custom.applied") == "true"

    def test_custom_configurator_overrides_earlier_resource(self, orchestrator, container, write_resource):
        write_resource("a.yml", "settings:\n  debug: 'from-file'\n")
        orchestrator.configure_using_init_params(
            container,
            {"config": "a.yml", "customConfigurator": "plugin_fixtures:RecordingConfigurator"},
        )
        assert container.get_bean("debug") == "from-custom"


class TestCustomConfiguratorIsolation:
    """A broken custom configurator never stops startup."""

    def test_failure_during_configure_is_logged_and_skipped(
        self, orchestrator, container, write_resource, test_logger, caplog
    ):
        write_resource("a.yml", "settings:\n  afterCustom: applied\n")
        params = {"customConfigurator": "plugin_fixtures:FailingConfigurator", "config": "a.yml"}

        with caplog.at_level(logging.WARNING, logger=test_logger.name):
            found = orchestrator.configure_using_init_params(container, params)

        assert found is True
        assert container.get_bean("afterCustom") == "applied"
        # Writes made before the failure are not rolled back
        assert container.get_bean("custom.partial") == "written"

        warnings = [r for r in caplog.records if "Failed to start custom configurator" in r.message]
        assert len(warnings) == 1
        assert warnings[0].exc_info is not None
        assert "plugin_fixtures:FailingConfigurator" in warnings[0].message

    @pytest.mark.parametrize(
        "class_id",
        [
            "no_such_module_xyz:Setup",
            "plugin_fixtures:DoesNotExist",
            "plugin_fixtures:NotAConfigurator",
            "plugin_fixtures:ExplodingConstructorConfigurator",
        ],
    )
    def test_load_failures_are_isolated(self, orchestrator, container, test_logger, caplog, class_id):
        with caplog.at_level(logging.WARNING, logger=test_logger.name):
            found = orchestrator.configure_using_init_params(container, {"customConfigurator": class_id})

        assert found is True
        assert any("Failed to start custom configurator" in r.message for r in caplog.records)


def test_orchestrator_defaults_to_module_logger():
    orchestrator = ConfigurationOrchestrator()
    assert orchestrator.logger.name == "CONTAINER"
    assert orchestrator.resource_root is None


def test_full_pass_precedence(test_logger, write_resource, resource_root):
    """Defaults < init params < declarative resources."""
    write_resource("a.yml", "settings:\n  scriptCompressed: true\n")
    orchestrator = ConfigurationOrchestrator(logger=test_logger, resource_root=resource_root)
    container = DefaultContainer()
    params = {"scriptCompressed": "maybe", "allowImpossibleTests": "true", "config": "a.yml"}

    orchestrator.setup_defaults(container)
    orchestrator.setup_from_init_params(container, params)
    orchestrator.configure_using_init_params(container, params)

    assert container.get_bean("debug") == "false"
    assert container.get_bean("allowImpossibleTests") == "true"
    assert container.get_bean("scriptCompressed") == "true"


def test_debug_setting_through_each_stage(test_logger, write_resource, resource_root):
    """Defaults give "false", init params turn it "true", a config file turns it back."""
    write_resource("ajaxwire.yml", "settings:\n  debug: false\n")
    orchestrator = ConfigurationOrchestrator(logger=test_logger, resource_root=resource_root)
    container = DefaultContainer()
    params = {"debug": "true", "config": "/ajaxwire.yml"}

    orchestrator.setup_defaults(container)
    assert container.get_binding("debug") == Setting("false")

    orchestrator.setup_from_init_params(container, params)
    assert container.get_binding("debug") == Setting("true")

    assert orchestrator.configure_using_init_params(container, params) is True
    assert container.get_binding("debug") == Setting("false")


def test_empty_init_params_leave_defaults_untouched(test_logger):
    orchestrator = ConfigurationOrchestrator(logger=test_logger)
    defaults_only = DefaultContainer()
    orchestrator.setup_defaults(defaults_only)

    container = DefaultContainer()
    orchestrator.setup_defaults(container)
    orchestrator.setup_from_init_params(container, {})

    assert orchestrator.configure_using_init_params(container, {}) is False
    assert dict(container.items()) == dict(defaults_only.items())
