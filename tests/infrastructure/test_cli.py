"""Tests for the click command line."""

from click.testing import CliRunner

from inventory_service.domain.model.item import InventoryItem
from inventory_service.infrastructure.cli import serve_command
from inventory_service.infrastructure.cli.main import cli
from inventory_service.infrastructure.config import Settings
from inventory_service.infrastructure.persistence.json_item_repository import (
    JsonItemRepository,
)


def _seed(cache_dir):
    repo = JsonItemRepository(cache_dir)
    repo.save(InventoryItem(id="1", name="Lamp", description="desk lamp"))
    repo.save(InventoryItem(id="2", name="Chair", photo_ref="photo-1.jpg"))


class TestItemCommands:

    def test_list(self, tmp_path):
        _seed(tmp_path)
        result = CliRunner().invoke(cli, ["item", "list", "--cache", str(tmp_path)])
        assert result.exit_code == 0
        assert "Lamp" in result.output
        assert "Chair" in result.output

    def test_list_empty(self, tmp_path):
        result = CliRunner().invoke(cli, ["item", "list", "--cache", str(tmp_path)])
        assert result.exit_code == 0
        assert "No items found." in result.output

    def test_show(self, tmp_path):
        _seed(tmp_path)
        result = CliRunner().invoke(cli, ["item", "show", "--cache", str(tmp_path), "--id", "1"])
        assert result.exit_code == 0
        assert "desk lamp" in result.output

    def test_show_unknown(self, tmp_path):
        result = CliRunner().invoke(cli, ["item", "show", "--cache", str(tmp_path), "--id", "9"])
        assert result.exit_code != 0
        assert "not found" in result.output

    def test_remove(self, tmp_path):
        _seed(tmp_path)
        result = CliRunner().invoke(cli, ["item", "remove", "--cache", str(tmp_path), "--id", "2"])
        assert result.exit_code == 0
        assert not (tmp_path / "2.json").exists()

    def test_cache_from_environment(self, tmp_path):
        _seed(tmp_path)
        result = CliRunner().invoke(
            cli, ["item", "list"], env={"INVENTORY_CACHE_DIR": str(tmp_path)}
        )
        assert result.exit_code == 0
        assert "Lamp" in result.output


class TestServeCommand:

    def test_requires_options(self):
        result = CliRunner().invoke(cli, ["serve"], env={
            "INVENTORY_PORT": None, "INVENTORY_HOST": None, "INVENTORY_CACHE_DIR": None,
        })
        assert result.exit_code == 2
        assert "Missing option" in result.output

    def test_creates_cache_and_runs_server(self, tmp_path, monkeypatch):
        calls = {}

        def fake_run(app, host, port, log_config):
            calls.update(app=app, host=host, port=port)

        monkeypatch.setattr(serve_command.uvicorn, "run", fake_run)
        monkeypatch.setattr(serve_command, "configure_logging", lambda level: None)
        cache = tmp_path / "new" / "cache"

        result = CliRunner().invoke(
            cli, ["serve", "-p", "8080", "-h", "0.0.0.0", "-c", str(cache)]
        )

        assert result.exit_code == 0, result.output
        assert cache.is_dir()
        assert calls["host"] == "0.0.0.0"
        assert calls["port"] == 8080
        assert calls["app"].state.settings.cache_dir == cache.resolve()


class TestSettings:

    def test_overrides_win_over_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("INVENTORY_PORT", "9000")
        monkeypatch.setenv("INVENTORY_HOST", "example.org")
        settings = Settings.from_env(cache_dir=str(tmp_path), port=8000)
        assert settings.port == 8000
        assert settings.host == "example.org"
        assert settings.cache_dir == tmp_path.resolve()
        assert settings.photos_dir == tmp_path.resolve() / "photos"
