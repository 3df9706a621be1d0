"""HTTP routers for the md-reader server."""
