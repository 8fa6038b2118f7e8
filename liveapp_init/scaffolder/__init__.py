"""Live App scaffolder -- prompts, template copy and config merge.

Quick usage::

    from liveapp_init.scaffolder import (
        PromptCollector, materialize, merge_configs, template_id,
    )

    package, manifest = PromptCollector().collect(Path.cwd())
    tid = template_id(package.typescript, package.bundler)
    dest = await materialize(templates_dir / tid, Path.cwd() / package.name)
    await merge_configs(dest, package, manifest)
"""

from liveapp_init.scaffolder.materializer import is_excluded, materialize
from liveapp_init.scaffolder.merger import merge_configs, merge_fields, merge_json_file
from liveapp_init.scaffolder.prompts import (
    NumberPrompt,
    PromptCollector,
    RequiredPrompt,
    WidthPrompt,
    default_display_name,
    default_package_name,
    parse_number,
    parse_width,
)
from liveapp_init.scaffolder.selector import available_templates, template_id

__all__ = [
    "NumberPrompt",
    "PromptCollector",
    "RequiredPrompt",
    "WidthPrompt",
    "available_templates",
    "default_display_name",
    "default_package_name",
    "is_excluded",
    "materialize",
    "merge_configs",
    "merge_fields",
    "merge_json_file",
    "parse_number",
    "parse_width",
    "template_id",
]
