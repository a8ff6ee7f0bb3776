"""FastAPI surface of the dashboard (`create_app`, `corner.api.server:app`)."""
