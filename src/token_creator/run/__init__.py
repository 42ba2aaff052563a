"""Runtime code executed by the firebase-token CLI and the firebase-token-server."""
