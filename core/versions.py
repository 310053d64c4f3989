APP_VERSION = "0.1.0"
ANALYZE_VERSION = "0.1.0"


# =============================================================================
# Name             | Meaning                              | Changes when…
# ---------------- | ------------------------------------ | ----------------------------------------------
# APP_VERSION      | overall app/package version          | you ship a release
# ANALYZE_VERSION  | ranking / annotation logic version   | filter, ranking or sentinel rules change
# =============================================================================
# Both are reported by GET /api/status and the FastAPI app metadata.
# =============================================================================
