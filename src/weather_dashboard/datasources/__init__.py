"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    └── {feature}.py      # Fetch + decode functions

Fetch functions return schema models and raise only ``FetchError`` (the
source could not be reached) or ``DecodeError`` (it answered with something
we cannot read). Callers decide on fallbacks.

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``weather/`` for a JSON API, ``news/`` for an RSS feed.

2. Write a fetch function on the shared session::

       from weather_dashboard.services.http import session

       def fetch_something(url: str, timeout: float) -> list[Something]:
           try:
               resp = session.get(url, timeout=timeout)
               resp.raise_for_status()
           except requests.RequestException as exc:
               raise FetchError(f"{url}: {exc}") from exc
           return decode_something(resp.content)

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Wire into the pipeline (see ``flows/fetch.py``):
   - Add a ``@task`` that calls your fetch function
   - Catch ``FetchError``/``DecodeError`` in ``fetch_report()`` and pick a
     fallback from ``reference/``

5. Add tests in ``tests/test_{name}.py``.
"""
