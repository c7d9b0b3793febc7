"""testing command line handling"""
import pytest
import main
from tetris_config import CONFIG


class TestArgs:
    def test_defaults(self):
        args = main.parse_args([])
        assert args.interval == CONFIG["DROP_INTERVAL_MS"]
        assert args.block_size == CONFIG["BLOCK_SIZE"]
        assert args.seed is None

    def test_bad_interval(self):
        with pytest.raises(SystemExit):
            main.parse_args(["--interval", "0"])

    def test_apply_args(self, monkeypatch):
        for k in list(CONFIG):
            monkeypatch.setitem(CONFIG, k, CONFIG[k])
        main.apply_args(main.parse_args(["--seed", "7", "--interval", "250", "--log-level", "DEBUG"]))
        assert CONFIG["SEED"] == 7
        assert CONFIG["DROP_INTERVAL_MS"] == 250
        assert CONFIG["LOG_LEVEL"] == "DEBUG"
