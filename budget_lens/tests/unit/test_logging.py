# Path: budget_lens/tests/unit/test_logging.py
"""
Tests for layered logging setup.
"""

import logging

from budget_lens.core.logger import (
    LayerFilter,
    get_input_logger,
    get_output_logger,
    get_process_logger,
    setup_logging,
)


def flush_root():
    for handler in logging.getLogger().handlers:
        handler.flush()


class TestLoggerNames:
    """Test layer logger naming."""

    def test_layer_prefixes(self):
        assert get_input_logger('budget_data').name == 'input.budget_data'
        assert get_process_logger('hierarchy.store').name == 'process.hierarchy.store'
        assert get_output_logger('main').name == 'output.main'


class TestLayerFilter:
    """Test LayerFilter."""

    def make_record(self, name):
        return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)

    def test_matches_prefix(self):
        layer_filter = LayerFilter('process')
        assert layer_filter.filter(self.make_record('process.hierarchy.store'))
        assert layer_filter.filter(self.make_record('process'))

    def test_rejects_other_layers(self):
        layer_filter = LayerFilter('process')
        assert not layer_filter.filter(self.make_record('input.budget_data'))
        assert not layer_filter.filter(self.make_record('processing.other'))


class TestSetupLogging:
    """Test setup_logging."""

    def test_writes_layer_files(self, temp_dir, restore_logging):
        log_dir = temp_dir / 'logs'
        setup_logging(log_dir=log_dir, log_level='DEBUG', console_output=False)

        get_input_logger('test').info("loaded file")
        get_process_logger('test').info("selected node")
        flush_root()

        assert "loaded file" in (log_dir / 'input_activity.log').read_text()
        assert "selected node" not in (log_dir / 'input_activity.log').read_text()
        assert "selected node" in (log_dir / 'process_activity.log').read_text()
        full = (log_dir / 'full_activity.log').read_text()
        assert "loaded file" in full and "selected node" in full

    def test_console_only(self, restore_logging):
        setup_logging(log_dir=None, log_level='WARNING', console_output=True)
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1

    def test_unknown_level_defaults_to_info(self, restore_logging):
        setup_logging(log_level='chatty', console_output=False)
        assert logging.getLogger().level == logging.INFO
