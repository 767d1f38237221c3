"""HTTP layer for the books service: config, storage access, routing and error handling."""
