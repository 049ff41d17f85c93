"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from pathprobe.config import DEFAULT_PORT, Settings
from pathprobe.exceptions import ConfigurationError
from pathprobe.load import DEFAULT_ITERATIONS


class TestFromEnv:
    def test_defaults(self):
        s = Settings.from_env({})
        assert s.port == DEFAULT_PORT == 3000
        assert s.host == "0.0.0.0"
        assert s.log_level == "info"
        assert s.cpu_iterations == DEFAULT_ITERATIONS

    def test_port_from_env(self):
        assert Settings.from_env({"PORT": "8080"}).port == 8080

    def test_blank_port_uses_default(self):
        assert Settings.from_env({"PORT": " "}).port == 3000

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "4321")
        assert Settings.from_env().port == 4321

    def test_log_level_case_insensitive(self):
        assert Settings.from_env({"LOG_LEVEL": "DEBUG"}).log_level == "debug"

    def test_cpu_iterations(self):
        assert Settings.from_env({"CPU_ITERATIONS": "100"}).cpu_iterations == 100


class TestValidation:
    def test_non_integer_port(self):
        with pytest.raises(ConfigurationError, match="PORT"):
            Settings.from_env({"PORT": "abc"})

    @pytest.mark.parametrize("port", [0, 70000])
    def test_port_out_of_range(self, port):
        with pytest.raises(ConfigurationError):
            Settings(port=port)

    def test_bad_log_level(self):
        with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
            Settings(log_level="loud")

    def test_non_positive_iterations(self):
        with pytest.raises(ConfigurationError, match="CPU_ITERATIONS"):
            Settings.from_env({"CPU_ITERATIONS": "0"})


class TestExceptionLayout:
    def test_config_independent_of_fs(self):
        import inspect

        import pathprobe.config
        import pathprobe.exceptions

        assert pathprobe.config.ConfigurationError is pathprobe.exceptions.ConfigurationError
        assert "pathprobe.fs" not in inspect.getsource(pathprobe.config)

    def test_fs_reexports_hierarchy(self):
        from pathprobe import exceptions, fs

        assert fs.ConfigurationError is exceptions.ConfigurationError
        assert fs.ReportError is exceptions.ReportError
        assert issubclass(fs.ReportError, exceptions.PathProbeError)
