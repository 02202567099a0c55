"""Data-view engine: records, search/filter pipeline, pagination and view state."""
