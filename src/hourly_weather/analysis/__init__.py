"""Range queries over the in-memory observation store.

This is the domain logic layer: pure functions and classes over an
``ObservationStore``. Nothing here reads files or prints.

Modules:
  - locator: first_index_of_date / last_index_of_date boundary searches
  - grouping: group_by_date buckets a slice of the store by calendar date
  - rounding: round_half_up and two-decimal formatting for reported values
  - queries: QueryEngine (average per day, missing per day, approved %)

Adding a query
--------------
1. Add a record model to ``schemas.py`` with a ``line`` property.

2. Add a reduction method to ``QueryEngine`` that calls
   ``resolve_bounds()`` and returns a list of records; raise a
   ``QueryError`` subclass for anything the caller should see as a failure.

3. Expose it through ``_run()`` so failures come back as a failed
   ``QueryResult`` instead of an exception.

4. Wire a subcommand in ``cli.py`` and add tests in
   ``tests/test_queries.py``.
"""
