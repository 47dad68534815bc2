"""HTTP routes: coasters, admin portal, health checks."""
