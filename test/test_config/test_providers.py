"""
Test suite for configuration providers and system settings.
"""

import pytest
import yaml
from decimal import Decimal

from orderfees.config import (
    FileConfigProvider, RuntimeConfigProvider, FeeModelType, SystemConfig,
    load_fee_model_config, get_fee_config_provider
)
from orderfees.core.exceptions import ConfigurationError, FeeConfigurationError


class TestFileConfigProvider:

    def test_missing_file_is_empty(self, tmp_path):
        provider = FileConfigProvider("fees", str(tmp_path))
        assert provider.get_config() == {}

    def test_reads_yaml(self, tmp_path):
        (tmp_path / "fees.yaml").write_text("model_type: binance\nmaker_rate: '0.0009'\n")
        provider = FileConfigProvider("fees", str(tmp_path))

        assert provider.get_config() == {'model_type': 'binance', 'maker_rate': '0.0009'}

    def test_update_writes_file(self, tmp_path):
        provider = FileConfigProvider("fees", str(tmp_path / "settings"))
        provider.update_config({'model_type': 'percent', 'fee_rate': '0.002'})

        with open(provider.config_file) as f:
            assert yaml.safe_load(f) == {'model_type': 'percent', 'fee_rate': '0.002'}
        assert provider.get_config()['fee_rate'] == '0.002'

    def test_reset_removes_file(self, tmp_path):
        provider = FileConfigProvider("fees", str(tmp_path))
        provider.update_config({'model_type': 'zero'})
        provider.reset_to_defaults()

        assert not provider.config_file.exists()
        assert provider.get_config() == {}

    def test_invalid_yaml(self, tmp_path):
        (tmp_path / "fees.yaml").write_text("model_type: [binance\n")
        provider = FileConfigProvider("fees", str(tmp_path))

        with pytest.raises(ConfigurationError):
            provider.get_config()

    def test_non_mapping_yaml(self, tmp_path):
        (tmp_path / "fees.yaml").write_text("- binance\n")
        with pytest.raises(ConfigurationError):
            FileConfigProvider("fees", str(tmp_path)).get_config()


class TestRuntimeConfigProvider:

    def test_update_and_reset(self):
        provider = RuntimeConfigProvider("fees", {'model_type': 'zero'})
        provider.update_config({'model_type': 'binance'})
        assert provider.get_config() == {'model_type': 'binance'}

        provider.reset_to_defaults()
        assert provider.get_config() == {'model_type': 'zero'}

    def test_returns_copies(self):
        provider = RuntimeConfigProvider("fees", {'model_type': 'zero'})
        provider.get_config()['model_type'] = 'binance'
        assert provider.get_config() == {'model_type': 'zero'}


class TestLoadFeeModelConfig:

    def test_empty_uses_default_preset(self):
        config = load_fee_model_config(RuntimeConfigProvider("fees"))
        assert config.model_type is FeeModelType.BINANCE

    def test_named_preset(self):
        config = load_fee_model_config(RuntimeConfigProvider("fees", {'preset': 'no_fee'}))
        assert config.model_type is FeeModelType.ZERO

    def test_unknown_preset(self):
        with pytest.raises(FeeConfigurationError):
            load_fee_model_config(RuntimeConfigProvider("fees", {'preset': 'free_lunch'}))

    def test_explicit_config_from_file(self, tmp_path):
        (tmp_path / "fees.yaml").write_text(
            "model_type: tiered\n"
            "volume: 2000\n"
            "tiers:\n"
            "  - {min_volume: 0, maker_rate: 0.002, taker_rate: 0.003}\n"
            "  - {min_volume: 1000, maker_rate: 0.001, taker_rate: 0.002}\n"
        )
        config = load_fee_model_config(get_fee_config_provider(str(tmp_path)))

        assert config.model_type is FeeModelType.TIERED
        assert config.volume == Decimal('2000')
        assert len(config.tiers) == 2

    def test_invalid_config(self):
        with pytest.raises(FeeConfigurationError):
            load_fee_model_config(RuntimeConfigProvider("fees", {'model_type': 'percent', 'fee_rate': -1}))


class TestSystemConfig:

    def test_defaults(self):
        config = SystemConfig.from_env({})
        assert config.debug is False
        assert config.log_level == "INFO"
        assert config.config_dir == "settings"

    def test_from_env(self):
        config = SystemConfig.from_env({
            'ORDERFEES_DEBUG': 'true',
            'ORDERFEES_LOG_LEVEL': 'warning',
            'ORDERFEES_JSON_LOGS': '1',
            'ORDERFEES_CONFIG_DIR': '/etc/orderfees'
        })
        assert config.debug is True
        assert config.log_level == "WARNING"
        assert config.json_logs is True
        assert config.config_dir == '/etc/orderfees'

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            SystemConfig(log_level="LOUD")
