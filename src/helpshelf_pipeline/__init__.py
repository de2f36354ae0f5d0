"""
helpshelf_pipeline - offline build step for the helpshelf catalog.

Architecture:
  sources/     - spreadsheet export reader and its CSV tokenizer
  transforms/  - parse-with-default field helpers and polars row transforms
  loaders/     - validating JSON writer for the resources file
  pipelines/   - build_data: wires source -> transforms -> loader
  utils/       - structlog configuration

Quick start:
    from helpshelf_pipeline.pipelines.build_data import run
    result = run(dry_run=True)

CLI:
    helpshelf-pipeline build-data
    helpshelf-pipeline status
"""

__version__ = "0.1.0"
