"""JSON routers, one per app screen."""
