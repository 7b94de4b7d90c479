"""Tests for ConfigService."""

from pathlib import Path

import pytest

from simplekanban.services import ConfigService


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Create a temporary project directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root


class TestConfigServiceLoading:
    """Tests for ConfigService file loading."""

    def test_default_on_missing_file(self, project_root: Path):
        """Missing kanban.yml returns default config."""
        service = ConfigService(project_root)
        config = service.get_config()

        assert config.storage.backend == "json"
        assert config.storage.path == "kanbanTasks.json"
        assert config.seed_defaults is True
        assert not service.has_config_error

    def test_load_markdown_config(self, project_root: Path):
        (project_root / "kanban.yml").write_text(
            """
version: 1
storage:
  backend: markdown
  path: .tasks
seed_defaults: false
"""
        )

        service = ConfigService(project_root)
        config = service.get_config()

        assert config.storage.backend == "markdown"
        assert config.storage.path == ".tasks"
        assert config.seed_defaults is False
        assert not service.has_config_error

    @pytest.mark.parametrize(
        ("backend", "expected"), [("json", "kanbanTasks.json"), ("markdown", ".tasks")]
    )
    def test_storage_path_defaults_per_backend(
        self, project_root: Path, backend: str, expected: str
    ):
        (project_root / "kanban.yml").write_text(f"storage:\n  backend: {backend}\n")

        service = ConfigService(project_root)

        assert service.get_config().storage.path == expected
        assert service.get_storage_path() == project_root / expected
        assert not service.has_config_error

    def test_partial_config_uses_defaults(self, project_root: Path):
        (project_root / "kanban.yml").write_text("seed_defaults: false\n")

        config = ConfigService(project_root).get_config()

        assert config.storage.backend == "json"
        assert config.seed_defaults is False

    def test_empty_file(self, project_root: Path):
        """Empty file uses defaults and records an error."""
        (project_root / "kanban.yml").write_text("")

        service = ConfigService(project_root)
        config = service.get_config()

        assert config.storage.backend == "json"
        assert service.has_config_error
        assert "empty" in service.config_error.lower()

    def test_invalid_yaml_syntax(self, project_root: Path):
        (project_root / "kanban.yml").write_text("invalid: yaml: syntax:")

        service = ConfigService(project_root)
        service.get_config()

        assert service.has_config_error
        assert "Invalid YAML" in service.config_error

    def test_unknown_backend(self, project_root: Path):
        (project_root / "kanban.yml").write_text("storage:\n  backend: sqlite\n")

        service = ConfigService(project_root)
        config = service.get_config()

        assert config.storage.backend == "json"
        assert service.has_config_error

    def test_blank_storage_path(self, project_root: Path):
        (project_root / "kanban.yml").write_text("storage:\n  path: '   '\n")

        service = ConfigService(project_root)
        service.get_config()

        assert service.has_config_error

    def test_non_mapping(self, project_root: Path):
        (project_root / "kanban.yml").write_text("- just\n- a list\n")

        service = ConfigService(project_root)
        service.get_config()

        assert service.has_config_error

    def test_config_is_cached_until_reload(self, project_root: Path):
        service = ConfigService(project_root)
        first = service.get_config()
        (project_root / "kanban.yml").write_text("seed_defaults: false\n")

        assert service.get_config() is first

        service.reload()

        assert service.get_config().seed_defaults is False


class TestStoragePath:
    """Tests for storage path resolution."""

    def test_relative_to_project_root(self, project_root: Path):
        service = ConfigService(project_root)

        assert service.get_storage_path() == project_root / "kanbanTasks.json"

    def test_absolute_path_kept(self, project_root: Path, tmp_path: Path):
        target = tmp_path / "elsewhere" / "board.json"
        (project_root / "kanban.yml").write_text(f"storage:\n  path: {target}\n")

        assert ConfigService(project_root).get_storage_path() == target

    def test_no_overrides_returns_configured_storage(self, project_root: Path):
        service = ConfigService(project_root)

        assert service.get_storage() == service.get_config().storage

    def test_path_override_keeps_backend(self, project_root: Path):
        (project_root / "kanban.yml").write_text("storage:\n  backend: markdown\n")
        service = ConfigService(project_root)

        storage = service.get_storage(path=Path("cards"))

        assert storage.backend == "markdown"
        assert service.get_storage_path(storage) == project_root / "cards"

    def test_backend_override_uses_its_default_path(self, project_root: Path):
        (project_root / "kanban.yml").write_text("storage:\n  path: board.json\n")
        service = ConfigService(project_root)

        storage = service.get_storage(backend="markdown")

        assert storage.path == ".tasks"

    def test_same_backend_override_keeps_configured_path(self, project_root: Path):
        (project_root / "kanban.yml").write_text("storage:\n  path: board.json\n")
        service = ConfigService(project_root)

        assert service.get_storage(backend="json").path == "board.json"

    def test_home_directory_expanded(self, project_root: Path, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("HOME", str(tmp_path))

        resolved = ConfigService(project_root).resolve_path("~/board.json")

        assert resolved == tmp_path / "board.json"
