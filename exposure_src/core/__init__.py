"""Analysis core: aggregation stages, ingestion contracts and the engine facade."""
