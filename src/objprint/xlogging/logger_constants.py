# File: src/objprint/xlogging/logger_constants.py

import logging


TRACE = logging.DEBUG - 1  # (9) LOG.trace() will not output at DEBUG level
SUPPRESS = -1  # Custom level for logs that will never be shown e.g., for internal use only


_logging_constants_initialized = False


def initialize_logger_constants() -> None:
    """Register the custom level names with logging, once."""
    global _logging_constants_initialized
    if _logging_constants_initialized:
        return
    _logging_constants_initialized = True
    for key, value in {
        "TRACE": TRACE,
        "SUPPRESS": SUPPRESS,
    }.items():
        if key not in logging.getLevelNamesMapping():
            logging.addLevelName(value, key)


def level_names_mapping() -> dict[str, int]:
    """Return an uppercase level-name mapping that includes the custom levels."""
    initialize_logger_constants()
    return {
        k.upper(): v
        for k, v in logging.getLevelNamesMapping().items()
        if isinstance(k, str) and k.isupper() and isinstance(v, int)
    }


# End of file: src/objprint/xlogging/logger_constants.py
