"""External data source adapters.

Each adapter turns a collaborator's payload into the models in
``symptom_weather.schemas``:

    datasources/
    ├── weather/          # Open-Meteo daily history (HTTP)
    │   ├── client.py     # API URL, daily variable mapping
    │   └── history.py    # fetch + parse + store rows
    └── symptoms.py       # diary JSON export

Adding a new datasource
-----------------------
1. Write a fetch/load function returning raw dicts, and a parse function
   returning schema models. HTTP goes through
   ``symptom_weather.services.http.session``.

2. Re-export the public API in the package ``__init__.py`` with ``__all__``.

3. Wire into the pipeline (see ``flows/fetch.py``): add a ``@task``, pick a
   store tier + path, and call ``store.write(path, data, source=..., valid_until=...)``.

4. Add tests in ``tests/test_{name}.py``.
"""
