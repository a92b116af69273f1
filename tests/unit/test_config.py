"""
Unit tests for MapTaskConfig
"""

from mapworker.config import MapTaskConfig


class TestMapTaskConfig:

    def test_defaults(self):
        config = MapTaskConfig()
        assert config.intermediate_dir == '.'
        assert config.debug is False
        assert config.atomic_writes is True

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv('MAPREDUCE_INTERMEDIATE_DIR', '/tmp/mr')
        monkeypatch.setenv('MAPREDUCE_DEBUG', 'true')
        monkeypatch.setenv('MAPREDUCE_ATOMIC_WRITES', '0')

        config = MapTaskConfig.from_env()

        assert config.intermediate_dir == '/tmp/mr'
        assert config.debug is True
        assert config.atomic_writes is False

    def test_from_env_defaults(self, monkeypatch):
        for name in ('MAPREDUCE_INTERMEDIATE_DIR', 'MAPREDUCE_DEBUG', 'MAPREDUCE_ATOMIC_WRITES'):
            monkeypatch.delenv(name, raising=False)

        assert MapTaskConfig.from_env() == MapTaskConfig()
