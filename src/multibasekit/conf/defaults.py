"""Default configuration values for multibasekit."""

DEFAULTS: dict[str, object] = {
    # Unary (base1) output length, in symbols, above which a warning is logged.
    "UNARY_WARN_THRESHOLD": 1 << 16,
    "TRACING_ENABLED": True,
}
