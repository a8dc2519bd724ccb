"""Website generator pipeline package.

Renders the intermediate store through placeholder templates into a
clean-URL static tree. Templating lives in ``templating``, repeated-markup
assembly in ``fragments``, per page-kind rendering in ``renderer`` and the
output-tree plumbing in ``runner``.

Usage
-----
>>> from techies_site.pipeline.website_generator import build_site
>>> report = build_site(data_dir, template_dir, output_dir)  # doctest: +SKIP
"""

from .fragments import ActiveNav
from .renderer import (
    RenderedPage,
    load_site_templates,
    render_category_page,
    render_fixed_page,
    render_homepage,
    render_person_page,
    render_site,
    resolve_members,
    write_page,
)
from .runner import build_site, copy_static_files, run_from_config
from .templating import (
    TemplateSet,
    load_template,
    render_template,
)

__all__ = [
    "ActiveNav",
    "RenderedPage",
    "TemplateSet",
    "build_site",
    "copy_static_files",
    "load_site_templates",
    "load_template",
    "render_category_page",
    "render_fixed_page",
    "render_homepage",
    "render_person_page",
    "render_site",
    "render_template",
    "resolve_members",
    "run_from_config",
    "write_page",
]
