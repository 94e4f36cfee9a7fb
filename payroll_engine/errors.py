"""Engine error types."""


class ConfigurationError(ValueError):
    """
    Raised when payroll configuration cannot be used to compute pay.

    Covers unsupported period types or overtime rules, an overtime multiplier
    below 1.0, a biweekly schedule without an anchor date and unknown
    timezones. Callers must surface it rather than fall back to a default.
    """
