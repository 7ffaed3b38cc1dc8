# single error family so callers can catch everything from this package in one place

class SeqAvgError(RuntimeError):
    pass

class EmptyInputError(SeqAvgError):
    # only raised when the caller opts into the "raise" empty policy
    pass

class InvalidInputError(SeqAvgError):
    pass

class ConfigError(SeqAvgError):
    pass
