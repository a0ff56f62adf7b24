"""Tests for the hosting abstractions."""

import pytest

from ajaxwire.hosting import HostConfig, HostContext


class TestHostContext:
    def test_attribute_store(self):
        context = HostContext()
        context.set_attribute("a", 1)
        context.set_attribute("b", 2)
        assert context.get_attribute("a") == 1
        assert list(context.attribute_names()) == ["a", "b"]

        context.remove_attribute("a")
        context.remove_attribute("never-set")
        assert context.get_attribute("a") is None
        assert list(context.attribute_names()) == ["b"]

    def test_resource_root_is_a_path(self, tmp_path):
        assert HostContext(resource_root=str(tmp_path)).resource_root == tmp_path
        assert HostContext().resource_root is None


class TestHostConfig:
    def test_init_parameters(self):
        params = {"debug": "true", "config": "/a.yml"}
        host_config = HostConfig("remoting", params)

        assert host_config.get_init_parameter("debug") == "true"
        assert host_config.get_init_parameter("missing") is None
        assert list(host_config.init_parameter_names()) == ["debug", "config"]
        assert isinstance(host_config.context, HostContext)

    def test_snapshot_is_read_only(self):
        params = {"debug": "true"}
        host_config = HostConfig("remoting", params)
        params["debug"] = "false"

        assert host_config.get_init_parameter("debug") == "true"
        with pytest.raises(TypeError):
            host_config.init_params["debug"] = "false"

    def test_shared_context(self):
        context = HostContext("shared")
        assert HostConfig("a", context=context).context is HostConfig("b", context=context).context
