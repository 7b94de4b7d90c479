"""Generate command for creating default config."""

import logging
from pathlib import Path

import yaml

from ..models.kanban_config import KanbanConfig
from .output import info, success

logger = logging.getLogger(__name__)

CONFIG_FILE = "kanban.yml"

# Header comments for generated file
CONFIG_HEADER = """\
# simplekanban Board Configuration
#
# storage.backend:
#   - json:     whole board in one file (storage.path is the file)
#   - markdown: one front matter file per item (storage.path is a directory)
#
# storage.path: Relative to this file's directory, or absolute. When left
#   out it defaults to kanbanTasks.json (json) or .tasks (markdown)
#
# seed_defaults: Create a few onboarding cards the first time the board
#   is opened and no stored board exists yet
#
# Columns are fixed: To Do, In Progress, Done

"""


def generate_config_yaml() -> str:
    """Generate YAML config from the default KanbanConfig model.

    Uses KanbanConfig.default() as the single source of truth,
    ensuring generated config always matches internal defaults.
    """
    config_dict = KanbanConfig.default().model_dump()
    yaml_content = yaml.safe_dump(config_dict, default_flow_style=False, sort_keys=False)
    return CONFIG_HEADER + yaml_content


def run_generate(project_root: Path) -> int:
    """
    Generate default configuration.

    Args:
        project_root: Path to project root where kanban.yml will be created

    Returns:
        Exit code (0 = success, 1 = nothing to do)
    """
    config_path = project_root / CONFIG_FILE

    if config_path.exists():
        info(f"Config exists: {config_path}")
        print("Nothing to generate.")
        return 1

    project_root.mkdir(parents=True, exist_ok=True)
    config_path.write_text(generate_config_yaml())
    logger.info("Generated %s", config_path)
    success(f"Generated config: {config_path}")
    return 0
