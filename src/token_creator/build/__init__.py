"""Developer tooling: invoke tasks and API clients."""
