"""
helpshelf_pipeline.pipelines - End-to-end pipeline orchestrators.

Each pipeline module exports a run() function that returns a summary
of what it read and wrote.

    from helpshelf_pipeline.pipelines import build_data

    result = build_data.run(dry_run=True)
"""
