"""
Tests for command composition.
"""

import pytest

from fluxgen.core.services.command import CLASSPATH_FLAG, DEBUG_FLAG, compose_command, format_command
from fluxgen.core.services.paths import resolve_paths


@pytest.fixture
def resolved(make_config):
    def _make(**options):
        return resolve_paths(
            make_config(
                outputDirectory="/out/src",
                buildDirectory="/out/classes",
                resourcesOutputDirectory="/out/meta",
                **options,
            )
        )

    return _make


class TestComposeCommand:
    def test_full_order(self, resolved):
        config = resolved(biasConfig="com.example.BiasConfig")
        assert compose_command(config, "/a.jar:/b.jar") == [
            "/opt/fluxtion/bin/fluxtion",
            "-outDirectory", "/out/src",
            "-buildDirectory", "/out/classes",
            "-outResDirectory", "/out/meta",
            "-outPackage", "com.example.generated",
            "-outClass", "PriceBiasMonitor",
            "-biasConfig", "com.example.BiasConfig",
            "-cp", "/a.jar:/b.jar",
        ]

    def test_debug_token_second_and_empty_bias(self, resolved):
        args = compose_command(resolved(logDebug=True, biasConfig=""), "/a.jar")
        assert args[1] == DEBUG_FLAG
        bias_at = args.index("-biasConfig")
        assert args[bias_at + 1] == ""

    def test_no_debug_token_without_log_debug(self, resolved):
        args = compose_command(resolved(), "/a.jar")
        assert DEBUG_FLAG not in args
        assert args[1] == "-outDirectory"

    def test_unset_bias_config_is_empty_string(self, resolved):
        args = compose_command(resolved(), "/a.jar")
        assert args[args.index("-biasConfig") + 1] == ""

    @pytest.mark.parametrize("log_debug", [True, False])
    @pytest.mark.parametrize("bias", [None, "", "cfg"])
    def test_classpath_pair_always_last(self, resolved, log_debug: bool, bias):
        args = compose_command(resolved(logDebug=log_debug, biasConfig=bias), "/x.jar:/y.jar")
        assert args[-2:] == [CLASSPATH_FLAG, "/x.jar:/y.jar"]
        assert args.count(CLASSPATH_FLAG) == 1

    def test_length(self, resolved):
        assert len(compose_command(resolved(), "/a.jar")) == 15
        assert len(compose_command(resolved(logDebug=True), "/a.jar")) == 16


class TestFormatCommand:
    def test_space_joined(self):
        assert format_command(["fluxtion", "-cp", "/a.jar"]) == "fluxtion -cp /a.jar"
