"""HTTP API for Job Vault."""
