"""Platform-facing integrations: remote archive access and local persistence."""
