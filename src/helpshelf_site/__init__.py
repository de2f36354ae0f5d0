"""
helpshelf_site - the catalog website.

Architecture:
  services/    - catalog loading, filter state, sections, card view model
  routers/     - HTML page, JSON API (/v1), health checks
  templates/   - Jinja2 templates for the catalog page
  middleware/  - structured request logging

Run:
    uvicorn helpshelf_site.app:app --port 8000
"""

__version__ = "0.1.0"
