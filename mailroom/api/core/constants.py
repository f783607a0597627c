# JWT Configuration
JWT_ALGORITHM = "HS256"

# Request tracing
REQUEST_ID_HEADER = "X-Request-ID"

# Paths excluded from request logging
SKIP_LOGGING_PATHS = {
    "/health/liveness",
}
