"""dapp-scaffold scaffolder -- composes project trees from template layers.

Quick usage::

    from dapp_scaffold.scaffolder import ProjectGenerator

    generator = ProjectGenerator(resolved_options)
    project_path = await generator.generate()
"""

from dapp_scaffold.scaffolder.conflicts import (
    get_conflicting_files,
    is_folder_empty,
    remove_conflicts,
)
from dapp_scaffold.scaffolder.env_gen import EnvRenderer, update_env_example
from dapp_scaffold.scaffolder.generator import ProjectGenerator
from dapp_scaffold.scaffolder.manifest import update_package_json
from dapp_scaffold.scaffolder.overlay import copy_dir

__all__ = [
    "EnvRenderer",
    "ProjectGenerator",
    "copy_dir",
    "get_conflicting_files",
    "is_folder_empty",
    "remove_conflicts",
    "update_env_example",
    "update_package_json",
]
