"""HTTP application: routes, dependency wiring, response sink and error handlers."""
