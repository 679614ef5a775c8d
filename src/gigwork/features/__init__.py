"""Feature routers for the GigWork API."""
