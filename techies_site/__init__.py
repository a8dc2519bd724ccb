"""Techies site migration package.

This package turns the rendered pages of the legacy CMS-generated Techies
site into a reproducible static build. It is organised as three headless
pipeline stages that communicate only through the intermediate store:

Package Structure
-----------------
- `pipeline/extractor/`:
    Parses the legacy listing, person and category documents into
    ``PersonRecord`` and ``CategoryRecord`` collections.
- `pipeline/store.py`:
    JSON persistence of both collections (``people.json``, ``categories.json``).
- `pipeline/website_generator/`:
    Renders the store through placeholder templates into a clean-URL tree.
- `pipeline/verifier/`:
    Checks that the rendered tree is a complete projection of the store.
- `config.py`: All configuration constants, as UPPER_SNAKE_CASE.
- `exceptions.py`: Project-specific exception classes.

Each stage has a command-line entrypoint (``program1_extract``,
``program2_build_site``, ``program3_verify_site``).

Examples
--------
>>> import techies_site
>>> # See the program modules for entrypoints.
"""
