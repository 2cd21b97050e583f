"""
package: objprint.base
"""

# <AUTOGEN_INIT>
from objprint.base import (
    config,
    constants,
    fs_helpers,
)


__all__ = [
    "config",
    "constants",
    "fs_helpers",
]
# </AUTOGEN_INIT>
