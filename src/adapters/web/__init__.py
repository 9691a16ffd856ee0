"""Web adapter — FastAPI routes for the plugin server API."""
