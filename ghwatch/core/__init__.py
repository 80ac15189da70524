"""Poll cycle: config loading, fetching, aggregation and deduplication."""
