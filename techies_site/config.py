"""Global configuration constants for the project.

Defines paths, filenames and legacy-markup constants used across the
extraction, site generation and verification stages.
"""

from __future__ import annotations

from pathlib import Path

# Project directories
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
LEGACY_SITE_DIR: Path = PROJECT_ROOT / "legacy_site"
DATA_DIR: Path = PROJECT_ROOT / "data"
TEMPLATE_DIR: Path = PROJECT_ROOT / "templates"
OUTPUT_DIR: Path = PROJECT_ROOT / "_output"
LOG_DIR: Path = PROJECT_ROOT / "logs"
ENV_FILE: Path = PROJECT_ROOT / ".env"

# Intermediate store filenames
PEOPLE_FILENAME: str = "people.json"
CATEGORIES_FILENAME: str = "categories.json"

# Page documents
INDEX_FILENAME: str = "index.html"
CATEGORY_DIRNAME: str = "category"
CATEGORY_FEED_SLUG: str = "feed"
FEED_TITLE_PREFIX: str = "Techies &raquo; "

# Templates (relative to the template directory)
PARTIAL_TEMPLATES: dict[str, str] = {
    "head": "partials/head.html",
    "nav": "partials/nav.html",
    "footer": "partials/footer.html",
    "scripts": "partials/scripts.html",
}
PERSON_TEMPLATE: str = "person.html"
HOMEPAGE_TEMPLATE: str = "homepage.html"
CATEGORY_TEMPLATE: str = "category.html"
ABOUT_TEMPLATE: str = "about.html"
SUBMIT_TEMPLATE: str = "submit.html"

# Static assets
ASSETS_DIRNAME: str = "assets"
MEDIA_DIRNAME: str = "d1lhy388c2xgxf"
PORTRAITS_SUBDIR: str = "portraits"
THUMBNAILS_SUBDIR: str = "thumbnails"
LOCAL_ASSET_PREFIXES: tuple[str, ...] = (ASSETS_DIRNAME, MEDIA_DIRNAME)
FAVICON_FILENAME: str = "favicon.ico"
ROBOTS_FILENAME: str = "robots.txt"
ROBOTS_TXT: str = "User-agent: *\nAllow: /\n"
VERIFIED_STYLESHEET: str = "assets/css/techies.css"
SUBMIT_EXTRA_STYLESHEET: str = "/assets/css/wpgform.css"

# Verification thresholds
CONTENT_SNIPPET_MIN_LENGTH: int = 100
CONTENT_SNIPPET_LENGTH: int = 80

# Substrings left behind by the legacy platform -> human readable description
LEGACY_REMNANTS: dict[str, str] = {
    "wp-content/": "still references wp-content/",
    "wp-includes/": "still references wp-includes/",
    "wp-json/": "still references wp-json/",
    "xmlrpc.php": "still references xmlrpc.php",
    "wpemojiSettings": "still contains WordPress emoji script",
    "s3-us-west-2": "still references s3-us-west-2",
}

# Logging
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILENAME_EXTRACT: str = "extract.log"
LOG_FILENAME_BUILD_SITE: str = "build_site.log"
LOG_FILENAME_VERIFY_SITE: str = "verify_site.log"
