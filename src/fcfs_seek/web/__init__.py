"""Browser view of the head-movement report.

An **optional** extra — install with::

    pip install fcfs-seek[web]

The ``create_app`` factory in ``app.py`` serves three read-only
endpoints:

- ``GET /`` — the same text the CLI prints.
- ``GET /api/report`` — the report as JSON, including every seek.
- ``GET /api/log`` — log entries captured while computing.
"""
