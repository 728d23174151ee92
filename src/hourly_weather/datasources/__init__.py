"""Input formats that produce an ``ObservationStore``.

Each subdirectory is one format with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── models.py         # Dataclasses for decoded records
    └── parser.py         # Line decoding and file loading

Loaders own everything the query layer assumes away: reading storage,
splitting fields, decoding codes and reporting malformed input. They hand
the query layer a built, date-checked ``ObservationStore``.
"""
