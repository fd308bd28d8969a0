"""HTTP transport for Docs Server."""
