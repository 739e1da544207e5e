"""HTTP to gRPC health-check passthrough service."""
