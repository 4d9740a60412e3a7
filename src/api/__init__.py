"""SEO Tag Inspector HTTP API."""
